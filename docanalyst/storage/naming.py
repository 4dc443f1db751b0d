import re
import secrets
import string
import time

_WHITESPACE_RE = re.compile(r"\s+")
_UNSAFE_RE = re.compile(r"[\\/]")
_ALPHABET = string.ascii_lowercase + string.digits


def generate_stored_name(original_filename: str) -> str:
    """Build a unique artifact name: ``{millis}-{random}-{sanitized original}``."""
    millis = int(time.time() * 1000)
    suffix = "".join(secrets.choice(_ALPHABET) for _ in range(9))
    safe_name = _UNSAFE_RE.sub("_", _WHITESPACE_RE.sub("_", original_filename))
    return f"{millis}-{suffix}-{safe_name}"
