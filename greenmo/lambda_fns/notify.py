# greenmo/lambda_fns/notify.py
import json
import logging
import traceback
from greenmo.lambda_fns.chargeable_cars import err_response, message_response
from greenmo.maps.static_map import execute_maps_request
from greenmo.notifier.pushover import PushoverClient
from greenmo.queries.runner import nothing_found, query_positions
from greenmo.utils.areas import AREAS
from greenmo.utils.env import DEFAULT_LOCATION, LOG_LEVEL
from greenmo.utils.errors import NetworkingError, UnknownError
from greenmo.utils.parameters import ParameterStore, load_config
from greenmo.utils.request_parser import parse_flags

logger = logging.getLogger()
logger.setLevel(LOG_LEVEL)

FOUND_MESSAGE = "Found some cars for charging."


def handle(event, config, notifier):
    """
    Scheduled run for one of the named areas.
    Input: {"location": "DTU", "chargers": true, "desiredFuelLevel": 40} (all optional)
    """
    if event is None:
        event = {}
    if not isinstance(event, dict):
        msg = "The event should be a JSON object."
        logger.error("%s Got %s", msg, type(event).__name__)
        return err_response(400, msg)
    location = event.get("location") or DEFAULT_LOCATION
    area = AREAS.get(location) if isinstance(location, str) else None
    if area is None:
        msg = f'Parameter "location" should be one of: {", ".join(AREAS)}.'
        logger.error(msg)
        return err_response(400, msg)

    try:
        flags = parse_flags(event, config)
        result = query_positions(area, flags, timeout=config.request_timeout)
        missing = nothing_found(flags, result)
        if missing:
            logger.info("%s (%s)", missing, location)
            return message_response(200, missing)

        img = execute_maps_request(
            area.center(),
            result.car_positions,
            result.charger_positions,
            api_key=config.maps_api_key,
            timeout=config.request_timeout,
        )
        notifier.send(FOUND_MESSAGE, image=img)
    except NetworkingError as e:
        logger.error("notify failed for %s: %s", location, e)
        notifier.send_alert(f"{e.provider} request failed")
        return err_response(e.status_code, str(e))
    except Exception:
        logger.error("notify exception: %s", traceback.format_exc())
        return err_response(UnknownError.status_code, str(UnknownError()))

    logger.info("Notification sent for %s", location)
    return message_response(200, "Success")


def lambda_handler(event, context):
    logger.info("notify started event=%s", json.dumps(event, default=str))
    try:
        config = load_config(ParameterStore(), include_pushover=True)
    except Exception:
        logger.error("Loading configuration failed: %s", traceback.format_exc())
        return err_response(UnknownError.status_code, str(UnknownError()))
    notifier = PushoverClient(config.pushover_token, config.pushover_user, timeout=config.request_timeout)
    return handle(event, config, notifier)
