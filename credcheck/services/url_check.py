from urllib.parse import urlparse

# characters a host name may never contain
_FORBIDDEN_HOST_CHARS = set('<>^|%\\"')


def is_url(value) -> bool:
    """True only for absolute http/https URLs. Never raises."""
    if not isinstance(value, str):
        return False
    try:
        parsed = urlparse(value.strip())
        # .port raises on a malformed port, same as a failed parse
        parsed.port
    except ValueError:
        return False
    if parsed.scheme not in ("http", "https"):
        return False
    host = parsed.hostname
    if not host:
        return False
    return not any(ch.isspace() or ch in _FORBIDDEN_HOST_CHARS for ch in host)
