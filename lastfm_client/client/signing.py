"""Request signing for authenticated Last.fm calls."""

import hashlib
from typing import Any


def sign_params(params: dict[str, Any], shared_secret: str) -> str:
    """Generate the ``api_sig`` value for a parameter set.

    Last.fm verifies an MD5 over the key/value pairs sorted by key, followed
    by the shared secret.
    """
    sorted_params = sorted(params.items())
    param_string = "".join(f"{k}{v}" for k, v in sorted_params)
    param_string += shared_secret
    return hashlib.md5(param_string.encode("utf-8")).hexdigest()  # nosec B324
