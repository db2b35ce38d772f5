# greenmo/lambda_fns/chargeable_cars.py
import json
import logging
import traceback
from greenmo.maps.static_map import execute_maps_request, transform_image
from greenmo.queries.runner import nothing_found, query_positions
from greenmo.utils.env import LOG_LEVEL
from greenmo.utils.errors import NetworkingError, ParseError, UnknownError
from greenmo.utils.parameters import Config, ParameterStore, load_config
from greenmo.utils.request_parser import parse_flags, parse_positions

logger = logging.getLogger()
logger.setLevel(LOG_LEVEL)


def message_response(status_code, message):
    return {"statusCode": status_code, "body": json.dumps({"message": message})}


def err_response(status_code, message):
    logger.error("The lambda function execution failed.")
    return message_response(status_code, message)


def image_response(img: bytes):
    return {
        "statusCode": 200,
        "headers": {"Content-Type": "image/png"},
        "body": transform_image(img),
        "isBase64Encoded": True,
    }


def handle(event, config: Config):
    """
    Input: API Gateway proxy event with queryStringParameters
        lat1, lon1, lat2, lon2 (required), cars, chargers, desiredFuelLevel (optional)
    Output: API Gateway proxy response, the map as a base64 PNG when something was found
    """
    params = (event or {}).get("queryStringParameters")
    try:
        bbox = parse_positions(params)
        flags = parse_flags(params, config)
        logger.info("Positions parsed: %s, flags: %s", bbox, flags)

        result = query_positions(bbox, flags, timeout=config.request_timeout)
        missing = nothing_found(flags, result)
        if missing:
            logger.info(missing)
            return message_response(200, missing)

        logger.info(
            "Found %d cars and %d chargers, generating map",
            len(result.car_positions), len(result.charger_positions),
        )
        img = execute_maps_request(
            bbox.center(),
            result.car_positions,
            result.charger_positions,
            api_key=config.maps_api_key,
            timeout=config.request_timeout,
        )
    except ParseError as e:
        logger.error("Parsing positions failed: %s", e)
        return err_response(e.status_code, str(e))
    except NetworkingError as e:
        logger.error("Upstream request failed: %s", e)
        return err_response(e.status_code, str(e))
    except Exception:
        logger.error("chargeable_cars exception: %s", traceback.format_exc())
        return err_response(UnknownError.status_code, str(UnknownError()))

    logger.info("The lambda function finished successfully.")
    return image_response(img)


def lambda_handler(event, context):
    logger.info("chargeable_cars started event=%s", json.dumps(event, default=str))
    try:
        config = load_config(ParameterStore())
    except Exception:
        logger.error("Loading configuration failed: %s", traceback.format_exc())
        return err_response(UnknownError.status_code, str(UnknownError()))
    return handle(event, config)
