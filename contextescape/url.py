"""URL filtering, escaping and normalization."""

from __future__ import annotations

from .css import FILTER_FAILSAFE

_SAFE_PROTOCOLS = frozenset({"http", "https", "mailto"})
_RESERVED = frozenset(b"!#$&*+,/:;=?@[]")
_UNRESERVED = frozenset(
    b"-._~abcdefghijklmnopqrstuvwxyzABCDEFGHIJKLMNOPQRSTUVWXYZ0123456789"
)
_HEX = frozenset(b"0123456789abcdefABCDEF")


def _stringify(value):
    return value if isinstance(value, str) else str(value)


def url_filter(value):
    """Return the URL unless it has an unsafe protocol, else a defanged fragment."""
    s = _stringify(value)
    colon = s.find(":")
    if colon >= 0 and "/" not in s[:colon]:
        if s[:colon].lower() not in _SAFE_PROTOCOLS:
            return "#" + FILTER_FAILSAFE
    return s


def url_escaper(value):
    """Escape the value so it can be embedded in a URL query."""
    return url_processor(False, value)


def url_normalizer(value):
    """Normalize URL content for embedding in a quoted string or ``url(...)``."""
    return url_processor(True, value)


def url_processor(norm, value):
    """Normalize (``norm`` true) or escape the value as a URL part, byte by byte in UTF-8."""
    s = _stringify(value)
    data = s.encode("utf-8", "surrogatepass")
    parts = []
    written = 0
    for i, c in enumerate(data):
        if c in _UNRESERVED:
            continue
        if c in _RESERVED and norm:
            continue
        if (
            c == ord("%")
            and norm
            and i + 2 < len(data)
            and data[i + 1] in _HEX
            and data[i + 2] in _HEX
        ):
            continue
        parts.append(data[written:i])
        parts.append(b"%%%02x" % c)
        written = i + 1
    if not parts:
        return s
    parts.append(data[written:])
    return b"".join(parts).decode("ascii")