# util/functions.py
def hex_key(raw: bytes) -> str:
    """
    - Encode a raw store key as lowercase hex.
    - Two hex digits per byte, so distinct keys never collide and byte order is kept.
    """
    return bytes(raw).hex()


def unhex_key(key: str) -> bytes:
    return bytes.fromhex(key)


def decode_text(raw: bytes, errors: str = "replace") -> str:
    # Invalid UTF-8 is coerced per `errors`, never rejected.
    return bytes(raw).decode("utf-8", errors=errors)
