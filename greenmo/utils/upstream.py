# greenmo/utils/upstream.py
import logging
import requests
from greenmo.utils.env import REQUEST_TIMEOUT
from greenmo.utils.errors import NetworkingError, EXPECTED_STATUS_CODE

logger = logging.getLogger(__name__)


def _check_status(name, response):
    if response.status_code != EXPECTED_STATUS_CODE:
        logger.error("%s answered %s, expected %s", name, response.status_code, EXPECTED_STATUS_CODE)
        raise NetworkingError(name, status=response.status_code)
    return response


def get(name, url, params=None, headers=None, timeout=REQUEST_TIMEOUT):
    """
    GET `url` on behalf of the upstream called `name`.
    Raises NetworkingError when the request fails or the status is not 200.
    """
    logger.info("Execute HTTP request against: %s", url)
    try:
        response = requests.get(url, params=params, headers=headers or {}, timeout=timeout)
    except requests.exceptions.RequestException as e:
        logger.error("%s request failed: %s", name, e)
        raise NetworkingError(name, message=f"Request to {name} failed: {e}") from e
    return _check_status(name, response)


def post(name, url, data=None, files=None, timeout=REQUEST_TIMEOUT):
    logger.info("Execute HTTP request against: %s", url)
    try:
        response = requests.post(url, data=data, files=files, timeout=timeout)
    except requests.exceptions.RequestException as e:
        logger.error("%s request failed: %s", name, e)
        raise NetworkingError(name, message=f"Request to {name} failed: {e}") from e
    return _check_status(name, response)
