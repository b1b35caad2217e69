"""
Error taxonomy for the upload pipeline.

Every error carries the HTTP status it maps to and a machine-readable kind,
so the core components stay free of FastAPI imports while the app renders
them with a single exception handler.
"""
from enum import Enum
from typing import Optional


class ErrorKind(str, Enum):
    MISSING_OR_MALFORMED_HEADER = "missing_or_malformed_header"
    INVALID_OR_EXPIRED_TOKEN = "invalid_or_expired_token"
    MALFORMED_BODY = "malformed_body"
    MISSING_TRIP_NUM = "missing_trip_num"
    INVALID_TRIP_NUM = "invalid_trip_num"
    PAYLOAD_TOO_LARGE = "payload_too_large"
    INVALID_BASE64 = "invalid_base64"
    WRITE_FAILED = "write_failed"
    STORAGE_UNAVAILABLE = "storage_unavailable"
    DESTINATION_NOT_CONFIGURED = "destination_not_configured"
    CONFIGURATION = "configuration"


class TripPhotoError(Exception):
    status_code = 500
    default_kind = ErrorKind.CONFIGURATION

    def __init__(self, message: str, kind: Optional[ErrorKind] = None):
        super().__init__(message)
        self.message = message
        self.kind = kind or self.default_kind


class Unauthorized(TripPhotoError):
    status_code = 401
    default_kind = ErrorKind.INVALID_OR_EXPIRED_TOKEN


class BadRequest(TripPhotoError):
    status_code = 400
    default_kind = ErrorKind.MALFORMED_BODY


class DecodeError(BadRequest):
    default_kind = ErrorKind.INVALID_BASE64


class StorageFailure(TripPhotoError):
    status_code = 500
    default_kind = ErrorKind.WRITE_FAILED


class StorageUnavailable(StorageFailure):
    default_kind = ErrorKind.STORAGE_UNAVAILABLE


class ConfigurationError(TripPhotoError):
    status_code = 500
    default_kind = ErrorKind.CONFIGURATION
