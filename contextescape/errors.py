"""Errors raised while contextually escaping templates."""

from __future__ import annotations

import enum


class ErrorCode(enum.IntEnum):
    """The kind of problem met while escaping a template."""

    OK = 0
    AMBIG_CONTEXT = 1
    BAD_HTML = 2
    BRANCH_END = 3
    END_CONTEXT = 4
    NO_SUCH_TEMPLATE = 5
    OUTPUT_CONTEXT = 6
    PARTIAL_CHARSET = 7
    PARTIAL_ESCAPE = 8
    RANGE_LOOP_REENTRY = 9
    SLASH_AMBIG = 10


class EscapeError(Exception):
    """A problem encountered while escaping a template.

    ``name`` is the template name and ``line`` the line number in the
    template source, or 0 when unknown. Both may be filled in later.
    """

    def __init__(self, code, description, name="", line=0):
        super().__init__(description)
        self.code = ErrorCode(code)
        self.description = description
        self.name = name
        self.line = line

    def __str__(self):
        if self.line:
            return f"html/template:{self.name}:{self.line}: {self.description}"
        if self.name:
            return f"html/template:{self.name}: {self.description}"
        return f"html/template: {self.description}"