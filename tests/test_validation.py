import asyncio

import pytest

from tripphoto.errors import BadRequest, ErrorKind
from tripphoto.schemas.uploads import UploadRequest
from tripphoto.services.validation import (
    parse_upload_request,
    read_limited_body,
    sanitize_identifier,
    validate_upload_request,
)


@pytest.mark.parametrize(
    "raw, expected",
    [
        ("../../etc/passwd", "passwd"),
        ("trip123", "trip123"),
        ("SGI053-00149601", "SGI053-00149601"),
        ("..\\..\\windows\\win.ini", "win.ini"),
        ("/abs/path/T9", "T9"),
        ("bad\x00name", "badname"),
        ("trailing/", ""),
    ],
)
def test_sanitize_identifier(raw, expected):
    assert sanitize_identifier(raw) == expected


def test_validate_requires_trip_num():
    with pytest.raises(BadRequest) as exc:
        validate_upload_request(UploadRequest(tripNum="", odometerPhoto="AAAA"))
    assert exc.value.kind is ErrorKind.MISSING_TRIP_NUM


@pytest.mark.parametrize("trip", ["..", "a/..", "dir/", "."])
def test_validate_rejects_unusable_identifiers(trip):
    with pytest.raises(BadRequest) as exc:
        validate_upload_request(UploadRequest(tripNum=trip))
    assert exc.value.kind is ErrorKind.INVALID_TRIP_NUM


def test_validate_sanitizes_and_normalizes_empty_photos():
    validated = validate_upload_request(
        UploadRequest(tripNum="../T1", odometerPhoto="", cargoPhoto="AAAA")
    )
    assert validated.trip_num == "T1"
    assert validated.odometer_photo is None
    assert validated.cargo_photo == "AAAA"


def test_parse_upload_request_reads_wire_names():
    req = parse_upload_request(b'{"tripNum": "T1", "odometerPhoto": "AAAA"}')
    assert req.trip_num == "T1"
    assert req.odometer_photo == "AAAA"
    assert req.cargo_photo is None


def test_parse_upload_request_missing_trip_defaults_to_empty():
    assert parse_upload_request(b"{}").trip_num == ""


@pytest.mark.parametrize("body", [b"", b"not json", b'{"tripNum": 5}', b"[]"])
def test_parse_upload_request_rejects_malformed_body(body):
    with pytest.raises(BadRequest) as exc:
        parse_upload_request(body)
    assert exc.value.kind is ErrorKind.MALFORMED_BODY


class StreamingRequest:
    """Minimal stand-in for a request whose declared length may be missing or wrong."""

    def __init__(self, chunks, content_length=None):
        self._chunks = chunks
        self.headers = {} if content_length is None else {"content-length": str(content_length)}

    async def stream(self):
        for chunk in self._chunks:
            yield chunk


@pytest.mark.parametrize("content_length", [None, 10])
def test_read_limited_body_counts_streamed_bytes(content_length):
    request = StreamingRequest([b"a" * 600, b"b" * 600], content_length=content_length)
    with pytest.raises(BadRequest) as exc:
        asyncio.run(read_limited_body(request, limit=1000))
    assert exc.value.kind is ErrorKind.PAYLOAD_TOO_LARGE


def test_read_limited_body_joins_chunks_within_limit():
    request = StreamingRequest([b'{"tripNum":', b' "T1"}'])
    assert asyncio.run(read_limited_body(request, limit=1000)) == b'{"tripNum": "T1"}'
