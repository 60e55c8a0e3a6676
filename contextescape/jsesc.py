"""JavaScript value, string and regular-expression escapers."""

from __future__ import annotations

import base64
import dataclasses
import enum
import math
import re
from collections.abc import Mapping
from decimal import Decimal


class JSContext(enum.Enum):
    """Whether a slash in JavaScript starts a regexp or a division operator."""

    REGEXP = 0
    DIV_OP = 1
    UNKNOWN = 2


_JS_SPACE = "\t\n\f\r \u2028\u2029"
_REGEXP_PRECEDER_PUNCT = frozenset(",<>=*%&|^?!~([:;{}")
_TRAILING_IDENT = re.compile(r"[$0-9A-Za-z_]*\Z")

REGEXP_PRECEDER_KEYWORDS = frozenset(
    {
        "break",
        "case",
        "continue",
        "delete",
        "do",
        "else",
        "finally",
        "in",
        "instanceof",
        "return",
        "throw",
        "try",
        "typeof",
        "void",
    }
)


def next_js_ctx(s, preceding):
    """Return whether a slash after the token run ``s`` starts a regexp or a division."""
    s = s.rstrip(_JS_SPACE)
    if not s:
        return preceding
    c = s[-1]
    n = len(s)
    if c in "+-":
        start = n - 1
        while start > 0 and s[start - 1] == c:
            start -= 1
        # "---" is "-- -", so an odd run ends in a unary or binary operator.
        return JSContext.REGEXP if (n - start) % 2 == 1 else JSContext.DIV_OP
    if c == ".":
        if n != 1 and "0" <= s[-2] <= "9":
            return JSContext.DIV_OP
        return JSContext.REGEXP
    if c in _REGEXP_PRECEDER_PUNCT:
        return JSContext.REGEXP
    word = _TRAILING_IDENT.search(s).group()
    if word in REGEXP_PRECEDER_KEYWORDS:
        return JSContext.REGEXP
    return JSContext.DIV_OP


def is_js_ident_part(r):
    """Whether the code point (int or one-character str) is a JS identifier part."""
    if isinstance(r, str):
        r = ord(r)
    return (
        r == ord("$")
        or r == ord("_")
        or ord("0") <= r <= ord("9")
        or ord("A") <= r <= ord("Z")
        or ord("a") <= r <= ord("z")
    )


def _sprint(args):
    parts = []
    prev_is_str = True
    for index, arg in enumerate(args):
        is_str = isinstance(arg, str)
        if index and not is_str and not prev_is_str:
            parts.append(" ")
        parts.append(str(arg))
        prev_is_str = is_str
    return "".join(parts)


def _json_char(ch):
    if ch == "\\":
        return "\\\\"
    if ch == '"':
        return '\\"'
    if ch == "\n":
        return "\\n"
    if ch == "\r":
        return "\\r"
    code = ord(ch)
    if code < 0x20 or ch in "<>&":
        return "\\u%04x" % code
    if 0xD800 <= code <= 0xDFFF:
        return "\ufffd"
    return ch


def _json_string(s):
    return '"' + "".join(map(_json_char, s)) + '"'


def _json_float(f):
    if not math.isfinite(f):
        raise ValueError(f"json: unsupported value: {f!r}")
    magnitude = abs(f)
    if magnitude == 0 or 1e-6 <= magnitude < 1e21:
        text = format(Decimal(repr(f)), "f")
        if "." in text:
            text = text.rstrip("0").rstrip(".")
        return text
    return re.sub(r"e([+-])0*(\d)", r"e\1\2", repr(f))


def _json(value, seen):
    if value is None:
        return "null"
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, int):
        return str(value)
    if isinstance(value, float):
        return _json_float(value)
    if isinstance(value, str):
        return _json_string(value)
    if isinstance(value, (bytes, bytearray)):
        return _json_string(base64.b64encode(bytes(value)).decode("ascii"))

    is_struct = dataclasses.is_dataclass(value) and not isinstance(value, type)
    if not (is_struct or isinstance(value, (Mapping, list, tuple))):
        raise TypeError(f"json: unsupported type: {type(value).__name__}")
    if id(value) in seen:
        raise ValueError("json: unsupported value: encountered a cycle")
    seen.add(id(value))
    try:
        if is_struct:
            members = [
                (field.name, getattr(value, field.name))
                for field in dataclasses.fields(value)
            ]
        elif isinstance(value, Mapping):
            if not all(isinstance(key, str) for key in value):
                raise TypeError(f"json: unsupported type: {type(value).__name__}")
            members = sorted(value.items())
        else:
            return "[" + ",".join(_json(item, seen) for item in value) + "]"
        return (
            "{"
            + ",".join(f"{_json_string(k)}:{_json(v, seen)}" for k, v in members)
            + "}"
        )
    finally:
        seen.discard(id(value))


def js_val_escaper(*args):
    """Render the arguments as a side-effect-free JavaScript expression."""
    value = args[0] if len(args) == 1 else _sprint(args)
    try:
        encoded = _json(value, set())
    except (TypeError, ValueError) as err:
        # The leading space keeps "x/{{y}}" from becoming a line comment.
        message = str(err).replace("*/", "* /")
        return f" /* {message} */null "
    encoded = encoded.replace("\u2028", "\\u2028").replace("\u2029", "\\u2029")
    # Keep identifiers and numbers from running into adjacent keywords.
    if is_js_ident_part(encoded[0]) or is_js_ident_part(encoded[-1]):
        return f" {encoded} "
    return encoded


JS_STR_REPLACEMENT_TABLE = {
    "\0": r"\0",
    "\t": r"\t",
    "\n": r"\n",
    "\v": r"\x0b",
    "\f": r"\f",
    "\r": r"\r",
    '"': r"\x22",
    "&": r"\x26",
    "'": r"\x27",
    "+": r"\x2b",
    "/": r"\/",
    "<": r"\x3c",
    ">": r"\x3e",
    "\\": "\\\\",
}

JS_REGEXP_REPLACEMENT_TABLE = {
    "\0": r"\0",
    "\t": r"\t",
    "\n": r"\n",
    "\v": r"\x0b",
    "\f": r"\f",
    "\r": r"\r",
    '"': r"\x22",
    "$": r"\$",
    "&": r"\x26",
    "'": r"\x27",
    "(": r"\(",
    ")": r"\)",
    "*": r"\*",
    "+": r"\x2b",
    "-": r"\-",
    ".": r"\.",
    "/": r"\/",
    "<": r"\x3c",
    ">": r"\x3e",
    "?": r"\?",
    "[": r"\[",
    "\\": "\\\\",
    "]": r"\]",
    "^": r"\^",
    "{": r"\{",
    "|": r"\|",
    "}": r"\}",
}

_LINE_SEPARATORS = {"\u2028": r"\u2028", "\u2029": r"\u2029"}


def replace(s, table):
    """Replace characters of ``s`` found in ``table``, and U+2028/U+2029 with escapes."""

    def replace_char(ch):
        return table.get(ch) or _LINE_SEPARATORS.get(ch, ch)

    return "".join(map(replace_char, s))


def _stringify(value):
    return value if isinstance(value, str) else str(value)


def js_str_escaper(value):
    """Escape the value for inclusion between quotes in JavaScript source."""
    return replace(_stringify(value), JS_STR_REPLACEMENT_TABLE)


def js_regexp_escaper(value):
    """Escape the value so it is matched literally inside a regexp literal."""
    s = replace(_stringify(value), JS_REGEXP_REPLACEMENT_TABLE)
    # An empty value must not turn /{{.}}/ into a line comment.
    return s or "(?:)"