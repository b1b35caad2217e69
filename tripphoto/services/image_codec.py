import base64
import binascii

from ..errors import DecodeError


def decode_image(data: str) -> bytes:
    """Decode a base64 photo payload.

    Anything up to the first comma is dropped, so ``data:image/jpeg;base64,``
    prefixes are accepted without being checked.
    """
    _, sep, payload = data.partition(",")
    if not sep:
        payload = data
    payload = payload.replace("\r", "").replace("\n", "")
    try:
        return base64.b64decode(payload, validate=True)
    except (binascii.Error, ValueError) as e:
        raise DecodeError(f"Invalid base64 image data: {e}")
