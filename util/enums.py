# util/enums.py
from enum import Enum
from typing import NamedTuple
from fastapi import status


class Color(str, Enum):
    RESET = "\033[0m"
    RED = "\033[31m"
    GREEN = "\033[32m"
    BLUE = "\033[34m"

    def __str__(self):
        return self.value


class Environment(str, Enum):
    DEV = "dev"
    PROD = "prod"


class ErrorInfo(NamedTuple):
    message: str
    http_status: int


class ErrorMessage(Enum):
    BAD_REQUEST = ErrorInfo("Bad Request", status.HTTP_400_BAD_REQUEST)
    INTERNAL_ERROR = ErrorInfo(
        "Internal Server Error", status.HTTP_500_INTERNAL_SERVER_ERROR
    )


class ExtractionFailure(str, Enum):
    OPEN_FAILED = "open_failed"
    ENUMERATION_FAILED = "enumeration_failed"
    MISSING_VALUE = "missing_value"
    NAMESPACE_ACCESS_FAILED = "namespace_access_failed"
    SERIALIZATION_FAILED = "serialization_failed"
