# greenmo/utils/env.py
import os
from dotenv import load_dotenv

load_dotenv()

AWS_REGION = os.getenv("AWS_REGION", "eu-north-1")
PARAMETER_PREFIX = os.getenv("PARAMETER_PREFIX", "/greenmo")
LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO")
REQUEST_TIMEOUT = float(os.getenv("REQUEST_TIMEOUT", "10"))
DEFAULT_FUEL_LEVEL = int(os.getenv("DEFAULT_FUEL_LEVEL", "40"))  # percent
CARS_BY_DEFAULT = os.getenv("CARS_BY_DEFAULT", "true").lower() == "true"
DEFAULT_LOCATION = os.getenv("DEFAULT_LOCATION", "DTU")
NOTIFY_INTERVAL = int(os.getenv("NOTIFY_INTERVAL", "3600"))  # 1 hour
ENABLE_SCHEDULER = os.getenv("ENABLE_SCHEDULER", "false").lower() == "true"
