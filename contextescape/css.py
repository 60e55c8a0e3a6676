"""CSS decoding, escaping and value filtering."""

from __future__ import annotations

import re

FILTER_FAILSAFE = "ZgotmplZ"

_MAX_RUNE = 0x10FFFF
_HEX_DIGITS = frozenset("0123456789abcdefABCDEF")
_CSS_SPACE = frozenset("\t\n\f\r ")

_CSS_ESCAPE = re.compile(
    r"\\(?:([0-9a-fA-F]{1,6})(\r\n|[\t\n\f\r ])?|(.)|\Z)", re.DOTALL
)

_CSS_REPLACEMENTS = {
    "\0": "\\0",
    "\t": "\\9",
    "\n": "\\a",
    "\f": "\\c",
    "\r": "\\d",
    '"': "\\22",
    "&": "\\26",
    "'": "\\27",
    "(": "\\28",
    ")": "\\29",
    "+": "\\2b",
    "/": "\\2f",
    ":": "\\3a",
    ";": "\\3b",
    "<": "\\3c",
    ">": "\\3e",
    "\\": "\\\\",
    "{": "\\7b",
    "}": "\\7d",
}

_VALUE_BANNED = frozenset("\0\"'()/;@[\\]`{}")


def _stringify(value):
    return value if isinstance(value, str) else str(value)


def ends_with_css_keyword(b, kw):
    """Whether ``b`` ends with an identifier matching lower-case ``kw``."""
    i = len(b) - len(kw)
    if i < 0:
        return False
    if i and is_css_nmchar(b[i - 1]):
        return False
    return b[i:].lower() == kw


def is_css_nmchar(r):
    """Whether the code point (int or one-character str) may appear in a CSS identifier."""
    if isinstance(r, str):
        r = ord(r)
    return (
        ord("a") <= r <= ord("z")
        or ord("A") <= r <= ord("Z")
        or ord("0") <= r <= ord("9")
        or r in (ord("-"), ord("_"))
        or 0x80 <= r <= 0xD7FF
        or 0xE000 <= r <= 0xFFFD
        or 0x10000 <= r <= 0x10FFFF
    )


def is_hex(c):
    """Whether ``c`` is a single hex digit."""
    return c in _HEX_DIGITS


def hex_decode(s):
    """Decode a short hex digit sequence, raising ValueError on a bad digit."""
    n = 0
    for c in s:
        if not is_hex(c):
            raise ValueError(f"Bad hex digit in {s!r}")
        n = (n << 4) | int(c, 16)
    return n


def skip_css_space(s):
    """Return ``s`` without one leading CSS whitespace (CRLF counts as one)."""
    if not s:
        return s
    if s[0] in "\t\n\f ":
        return s[1:]
    if s[0] == "\r":
        return s[2:] if s[1:2] == "\n" else s[1:]
    return s


def is_css_space(c):
    """Whether ``c`` is a CSS whitespace character."""
    return c in _CSS_SPACE


def _code_point(r):
    if 0xD800 <= r <= 0xDFFF:
        return "\ufffd"
    return chr(r)


def _decode_escape(match):
    digits, space, literal = match.groups()
    if digits is None:
        return literal or ""
    r = hex_decode(digits)
    if r > _MAX_RUNE:
        # The last digit is not part of the escape; the space stays literal.
        return _code_point(r >> 4) + digits[-1] + (space or "")
    return _code_point(r)


def decode_css(s):
    """Decode CSS3 backslash escapes in a run of string characters."""
    if "\\" not in s:
        return s
    return _CSS_ESCAPE.sub(_decode_escape, s)


def css_escaper(value):
    """Escape HTML and CSS special characters with ``\\<hex>`` escapes."""
    s = _stringify(value)
    parts = []
    written = 0
    for i, ch in enumerate(s):
        repl = _CSS_REPLACEMENTS.get(ch)
        if repl is None:
            continue
        parts.append(s[written:i])
        parts.append(repl)
        written = i + 1
        if repl != "\\\\" and (
            written == len(s) or is_hex(s[written]) or is_css_space(s[written])
        ):
            parts.append(" ")
    if not parts:
        return s
    parts.append(s[written:])
    return "".join(parts)


def css_value_filter(value):
    """Pass innocuous CSS values through; replace unsafe ones with the failsafe."""
    decoded = decode_css(_stringify(value))
    ident = []
    for i, c in enumerate(decoded):
        if c in _VALUE_BANNED:
            return FILTER_FAILSAFE
        if c == "-":
            if i and decoded[i - 1] == "-":
                return FILTER_FAILSAFE
        elif ord(c) < 0x80 and is_css_nmchar(c):
            ident.append(c)
    word = "".join(ident).lower()
    if "expression" in word or "mozbinding" in word:
        return FILTER_FAILSAFE
    return decoded