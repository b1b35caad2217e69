"""
Request validation for photo uploads.

Covers the body-size ceiling, JSON parsing, required fields and trip
identifier sanitization. Sanitization runs before any storage backend sees
the trip identifier, whichever backend is active.
"""
import re
from dataclasses import dataclass
from typing import Optional

from pydantic import ValidationError
from starlette.requests import Request

from ..errors import BadRequest, ErrorKind
from ..schemas.uploads import UploadRequest


MAX_UPLOAD_BYTES = 20 * 1024 * 1024

_SEPARATORS = re.compile(r"[\\/]")


@dataclass(frozen=True)
class ValidatedUpload:
    trip_num: str
    odometer_photo: Optional[str]
    cargo_photo: Optional[str]


def sanitize_identifier(raw: str) -> str:
    """Return only the final path component of ``raw``."""
    return _SEPARATORS.split(raw.replace("\x00", ""))[-1]


def validate_upload_request(req: UploadRequest) -> ValidatedUpload:
    if not req.trip_num:
        raise BadRequest("tripNum is required", kind=ErrorKind.MISSING_TRIP_NUM)
    trip_num = sanitize_identifier(req.trip_num)
    if trip_num in ("", ".", ".."):
        raise BadRequest(f"tripNum {req.trip_num!r} is not a usable identifier", kind=ErrorKind.INVALID_TRIP_NUM)
    # Empty strings count as absent photos
    return ValidatedUpload(
        trip_num=trip_num,
        odometer_photo=req.odometer_photo or None,
        cargo_photo=req.cargo_photo or None,
    )


async def read_limited_body(request: Request, limit: int = MAX_UPLOAD_BYTES) -> bytes:
    too_large = BadRequest(f"Request body exceeds {limit} bytes", kind=ErrorKind.PAYLOAD_TOO_LARGE)
    declared = request.headers.get("content-length")
    if declared and declared.isdigit() and int(declared) > limit:
        raise too_large
    chunks = []
    received = 0
    async for chunk in request.stream():
        received += len(chunk)
        if received > limit:
            raise too_large
        chunks.append(chunk)
    return b"".join(chunks)


def parse_upload_request(body: bytes) -> UploadRequest:
    try:
        return UploadRequest.model_validate_json(body)
    except ValidationError as e:
        raise BadRequest(f"Invalid request body: {e.errors()[0]['msg']}", kind=ErrorKind.MALFORMED_BODY)
