"""Parameter canonicalization for API calls."""

from typing import Any

# Tried in order before falling back to latin-1, which maps every byte.
CANDIDATE_ENCODINGS = ("utf-8", "cp1252")


def filter_null(params: dict[str, Any]) -> dict[str, Any]:
    """Drop parameters whose value is None, keeping order."""
    return {key: value for key, value in params.items() if value is not None}


def _decode(raw: bytes) -> str:
    for encoding in CANDIDATE_ENCODINGS:
        try:
            return raw.decode(encoding)
        except UnicodeDecodeError:
            continue
    return raw.decode("latin-1")


def encode_utf8(value: Any) -> Any:
    """Convert every scalar in a parameter structure to text.

    Dicts, lists and tuples are converted recursively. Byte strings are
    decoded on a best-effort basis (UTF-8, then Windows-1252, then Latin-1)
    since their source encoding is unknown. Booleans use the API's ``1``/``0``
    convention.
    """
    if isinstance(value, dict):
        return {key: encode_utf8(item) for key, item in value.items()}

    if isinstance(value, list | tuple):
        return [encode_utf8(item) for item in value]

    if isinstance(value, bytes | bytearray):
        return _decode(bytes(value))

    if isinstance(value, bool):
        return "1" if value else "0"

    return str(value)
