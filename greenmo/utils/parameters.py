# greenmo/utils/parameters.py
import logging
from dataclasses import dataclass
import boto3
from botocore.exceptions import ClientError
from greenmo.utils.env import (
    AWS_REGION,
    PARAMETER_PREFIX,
    REQUEST_TIMEOUT,
    DEFAULT_FUEL_LEVEL,
    CARS_BY_DEFAULT,
)

logger = logging.getLogger(__name__)

MAPS_API_TOKEN = "mapsApiToken"
PUSHOVER_API_TOKEN = "pushoverApiToken"
PUSHOVER_API_USER = "pushoverApiUser"


class ParameterStore:
    """Reads secrets from SSM Parameter Store under a common prefix."""

    def __init__(self, client=None, prefix=PARAMETER_PREFIX):
        self.client = client or boto3.client("ssm", region_name=AWS_REGION)
        self.prefix = prefix.rstrip("/")

    def get(self, name: str) -> str:
        path = f"{self.prefix}/{name}"
        try:
            resp = self.client.get_parameter(Name=path, WithDecryption=True)
        except ClientError:
            logger.exception("Failed to read parameter %s", path)
            raise
        return resp.get("Parameter", {}).get("Value", "")


@dataclass(frozen=True)
class Config:
    maps_api_key: str = ""
    pushover_token: str = ""
    pushover_user: str = ""
    default_fuel_level: int = DEFAULT_FUEL_LEVEL
    cars_by_default: bool = CARS_BY_DEFAULT
    request_timeout: float = REQUEST_TIMEOUT


def load_config(store: ParameterStore, include_pushover: bool = False) -> Config:
    """Build the read-only settings for one invocation."""
    if include_pushover:
        return Config(
            maps_api_key=store.get(MAPS_API_TOKEN),
            pushover_token=store.get(PUSHOVER_API_TOKEN),
            pushover_user=store.get(PUSHOVER_API_USER),
        )
    return Config(maps_api_key=store.get(MAPS_API_TOKEN))
