"""
Application-wide constants.

This module centralizes the magic strings and numbers used throughout the
service so that the HTTP layer, the domain layer and the tests agree on them.
"""
import re


# External date representation, YYYY-MM-DD. Parsing and formatting both go
# through domain.value_objects.birth_date.
# DATE_FORMAT drives strptime; DATE_OUTPUT_TEMPLATE is the same layout for
# output, because strftime("%Y") does not zero-pad years below 1000.
DATE_FORMAT = "%Y-%m-%d"
DATE_OUTPUT_TEMPLATE = "{year:04d}-{month:02d}-{day:02d}"
DATE_PATTERN = re.compile(r"[0-9]{4}-[0-9]{2}-[0-9]{2}")

# Non-leap-year stand-in for a Feb 29 birthday
LEAP_DAY_ANNIVERSARY = (2, 28)


class HTTPStatus:
    """HTTP status codes used throughout the application"""

    # Success
    OK = 200
    CREATED = 201
    NO_CONTENT = 204

    # Client Errors
    BAD_REQUEST = 400
    NOT_FOUND = 404

    # Server Errors
    INTERNAL_SERVER_ERROR = 500
    SERVICE_UNAVAILABLE = 503


class UserLimits:
    """Field constraints for the user entity"""

    NAME_MAX_LENGTH = 255
    # BIGINT upper bound; ids outside 1..ID_MAX are rejected before storage
    ID_MAX = 2 ** 63 - 1


class ErrorMessages:
    """Client-facing error strings"""

    INVALID_JSON = "Invalid JSON"
    INVALID_ID = "Invalid ID format"
    USER_NOT_FOUND = "User not found"
    INTERNAL = "Internal Server Error"


class ServiceInfo:
    """Identity reported by the health endpoint and OpenAPI docs"""

    NAME = "Users API"
    DESCRIPTION = "CRUD service for users with derived age"
    VERSION = "1.0.0"
