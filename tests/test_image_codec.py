import pytest

from tripphoto.errors import DecodeError, ErrorKind
from tripphoto.services.image_codec import decode_image

from .conftest import ODOMETER_BYTES, b64


def test_decode_plain_base64():
    assert decode_image(b64(ODOMETER_BYTES)) == ODOMETER_BYTES


@pytest.mark.parametrize(
    "prefix",
    ["data:image/jpeg;base64,", "data:image/png;base64,", "garbage,"],
)
def test_decode_strips_everything_up_to_first_comma(prefix):
    assert decode_image(b64(ODOMETER_BYTES, prefix=prefix)) == ODOMETER_BYTES


def test_decode_only_first_comma_is_a_separator():
    # The second comma is part of the payload and makes it invalid
    with pytest.raises(DecodeError):
        decode_image("data:x," + b64(ODOMETER_BYTES) + ",AAAA")


def test_decode_ignores_line_breaks():
    encoded = b64(ODOMETER_BYTES)
    wrapped = encoded[:8] + "\r\n" + encoded[8:]
    assert decode_image(wrapped) == ODOMETER_BYTES


@pytest.mark.parametrize("bad", ["not-base64!!", "abc", "data:image/jpeg;base64,@@@@", "ünïcode"])
def test_decode_rejects_malformed_input(bad):
    with pytest.raises(DecodeError) as exc:
        decode_image(bad)
    assert exc.value.kind is ErrorKind.INVALID_BASE64
    assert exc.value.status_code == 400


def test_decode_empty_payload_after_prefix():
    assert decode_image("data:image/jpeg;base64,") == b""
