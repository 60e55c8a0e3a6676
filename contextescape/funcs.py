"""Plain HTML, JavaScript and URL query escapers."""

from __future__ import annotations

import urllib.parse

_HTML_TABLE = str.maketrans(
    {
        '"': "&#34;",
        "'": "&#39;",
        "&": "&amp;",
        "<": "&lt;",
        ">": "&gt;",
    }
)

_JS_ASCII = {
    "\\": "\\\\",
    "'": "\\'",
    '"': '\\"',
    "<": "\\x3C",
    ">": "\\x3E",
}


def _sprint(args):
    """Join operands, adding spaces between adjacent non-string operands."""
    parts = []
    prev_is_str = True
    for index, arg in enumerate(args):
        is_str = isinstance(arg, str)
        if index and not is_str and not prev_is_str:
            parts.append(" ")
        parts.append(str(arg))
        prev_is_str = is_str
    return "".join(parts)


def _text_of(args):
    if len(args) == 1 and isinstance(args[0], str):
        return args[0]
    return _sprint(args)


def html_escape_string(s):
    """Return the HTML-escaped form of plain text ``s``."""
    return s.translate(_HTML_TABLE)


def html_escape(out, data):
    """Write the HTML-escaped form of plain text ``data`` to the writer ``out``."""
    out.write(html_escape_string(data))


def html_escaper(*args):
    """HTML-escape the textual representation of the arguments."""
    return html_escape_string(_text_of(args))


def _js_escape_char(ch):
    repl = _JS_ASCII.get(ch)
    if repl is not None:
        return repl
    code = ord(ch)
    if code < 0x20:
        return "\\u00%02X" % code
    if code < 0x80 or ch.isprintable():
        return ch
    return "\\u%04X" % code


def js_escape_string(s):
    """Return the JavaScript-escaped form of plain text ``s``."""
    return "".join(map(_js_escape_char, s))


def js_escaper(*args):
    """JavaScript-escape the textual representation of the arguments."""
    return js_escape_string(_text_of(args))


def url_query_escaper(*args):
    """Escape the textual representation of the arguments for a URL query."""
    return urllib.parse.quote_plus(_text_of(args), safe="")