# greenmo/utils/errors.py
"""
Error taxonomy shared by the handlers.

Each error knows the HTTP status code it is surfaced as, so the handlers
only need a single except clause per stage.
"""

EXPECTED_STATUS_CODE = 200


class GreenMoError(Exception):
    status_code = 500


class ParseError(GreenMoError):
    """The query string parameters are missing or malformed."""
    status_code = 400

    MISSING_PARAMETERS = "missing_parameters"
    INVALID_FORMAT = "invalid_format"

    def __init__(self, message, kind=INVALID_FORMAT):
        super().__init__(message)
        self.kind = kind


class NetworkingError(GreenMoError):
    """An upstream service answered with an unexpected status or not at all."""
    status_code = 403

    def __init__(self, provider, status=None, expected=EXPECTED_STATUS_CODE, message=None):
        if message is None:
            message = f"Invalid response code - {provider}. Got {status}, expected {expected}"
        super().__init__(message)
        self.provider = provider
        self.status = status
        self.expected = expected


class UnknownError(GreenMoError):
    status_code = 500

    def __init__(self, message="unknown exception"):
        super().__init__(message)


class MalformedEntityError(ValueError):
    """An upstream entry does not have the expected shape; it gets skipped."""
