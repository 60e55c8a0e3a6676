"""Escapers for HTML text, RCDATA and attribute values."""

from __future__ import annotations

# Characters escaped inside a quoted attribute value or in a text node.
HTML_REPLACEMENT_TABLE = {
    "\0": "\ufffd",
    '"': "&#34;",
    "&": "&amp;",
    "'": "&#39;",
    "+": "&#43;",
    "<": "&lt;",
    ">": "&gt;",
}

# Characters escaped inside an unquoted attribute value.  The set is the
# union of the HTML specials and the characters that browsers treat as
# ending or quoting an unquoted value.
HTML_NOSPACE_REPLACEMENT_TABLE = {
    "\0": "&#xfffd;",
    "\t": "&#9;",
    "\n": "&#10;",
    "\v": "&#11;",
    "\f": "&#12;",
    "\r": "&#13;",
    " ": "&#32;",
    '"': "&#34;",
    "&": "&amp;",
    "'": "&#39;",
    "+": "&#43;",
    "<": "&lt;",
    "=": "&#61;",
    ">": "&gt;",
    # Treated as a quoting character by some browsers.
    "`": "&#96;",
}


def _stringify(value):
    return value if isinstance(value, str) else str(value)


def _is_noncharacter(code):
    return 0xFDD0 <= code <= 0xFDEF or 0xFFF0 <= code <= 0xFFFF


def html_replacer(s, table, bad_runes):
    """Replace characters of ``s`` according to ``table``.

    When ``bad_runes`` is false, the non-character ranges U+FDD0..U+FDEF and
    U+FFF0..U+FFFF are also written as hex character references.
    """

    def replace_char(ch):
        repl = table.get(ch)
        if repl:
            return repl
        if not bad_runes and _is_noncharacter(ord(ch)):
            return f"&#x{ord(ch):x};"
        return ch

    return "".join(map(replace_char, s))


def html_nospace_escaper(value):
    """Escape the value for inclusion in an unquoted attribute value."""
    return html_replacer(_stringify(value), HTML_NOSPACE_REPLACEMENT_TABLE, False)


def attr_escaper(value):
    """Escape the value for inclusion in a quoted attribute value."""
    return html_replacer(_stringify(value), HTML_REPLACEMENT_TABLE, True)


def rcdata_escaper(value):
    """Escape the value for inclusion in an RCDATA element body."""
    return html_replacer(_stringify(value), HTML_REPLACEMENT_TABLE, True)


def html_escaper(value):
    """Escape the value for inclusion in HTML text."""
    return html_replacer(_stringify(value), HTML_REPLACEMENT_TABLE, True)


def comment_escaper(*args):
    """Drop anything interpolated into a comment.

    Comment content has no parsed structure or readable meaning, so the
    text of every argument is discarded and the empty string returned.
    """
    text = "".join(map(_stringify, args))
    return text[len(text):]