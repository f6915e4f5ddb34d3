"""Structural matchers that locate insertion points in existing file text.

Matchers search text with regular expressions and, for ``BlockTail``, a small
delimiter scanner.  None of them parse Dart or YAML.  When the shape they look
for is not clearly present they return ``None``: a missed anchor is reported
to the user, a wrong one silently corrupts their file.

Every matcher returns a :class:`Location` -- the insertion offset plus the
indentation of the surrounding lines, which the engine prefixes to each line
of the insertion.
"""

from __future__ import annotations

import re
from abc import ABC, abstractmethod
from typing import NamedTuple, Optional

from ..errors import MalformedAnchor


class Location(NamedTuple):
    offset: int
    indent: str


def compile_pattern(pattern: str, owner: str) -> re.Pattern[str]:
    """Compile *pattern* in multiline mode, raising ``MalformedAnchor`` on error."""
    try:
        return re.compile(pattern, re.MULTILINE)
    except re.error as exc:
        raise MalformedAnchor(owner, f"invalid pattern {pattern!r}: {exc}") from exc


def line_start(text: str, offset: int) -> int:
    return text.rfind("\n", 0, offset) + 1


def line_end(text: str, offset: int) -> int:
    end = text.find("\n", offset)
    return len(text) if end == -1 else end


def indent_at(text: str, offset: int) -> str:
    """Leading whitespace of the line that contains *offset*."""
    start = line_start(text, offset)
    line = text[start:line_end(text, start)]
    return line[: len(line) - len(line.lstrip())]


# ---------------------------------------------------------------------------
# Matchers
# ---------------------------------------------------------------------------


class Matcher(ABC):
    """Base class: ``locate`` returns where to insert, or ``None``."""

    @abstractmethod
    def locate(self, text: str) -> Optional[Location]:
        ...

    def describe(self) -> str:
        return type(self).__name__


class _PatternMatcher(Matcher):
    def __init__(self, pattern: str) -> None:
        self.pattern = pattern
        self.regex = compile_pattern(pattern, f"{type(self).__name__}({pattern!r})")

    def describe(self) -> str:
        return f"{type(self).__name__}({self.pattern!r})"

    def __repr__(self) -> str:
        return self.describe()


class AfterLast(_PatternMatcher):
    """Right after the last match, e.g. the end of the trailing import list."""

    def locate(self, text: str) -> Optional[Location]:
        last = None
        for last in self.regex.finditer(text):
            pass
        if last is None:
            return None
        return Location(last.end(), indent_at(text, last.start()))


class AfterFirst(_PatternMatcher):
    """Right after the first match, e.g. the brace of ``void main() async {``."""

    def locate(self, text: str) -> Optional[Location]:
        match = self.regex.search(text)
        if match is None:
            return None
        return Location(match.end(), indent_at(text, match.start()))


class AfterLine(_PatternMatcher):
    """At the start of the line following the first matching line."""

    def locate(self, text: str) -> Optional[Location]:
        match = self.regex.search(text)
        if match is None:
            return None
        end = line_end(text, match.end())
        if end == len(text):
            return None
        return Location(end + 1, indent_at(text, match.start()))


class BeforeMatch(_PatternMatcher):
    """At the start of the line holding the first match (e.g. a ``default:`` case).

    With *after* given, only matches that follow the first match of *after*
    are considered, which keeps the search inside one construct.
    """

    def __init__(self, pattern: str, after: Optional[str] = None) -> None:
        super().__init__(pattern)
        self.after = after
        self.after_regex = (
            compile_pattern(after, f"BeforeMatch(after={after!r})") if after else None
        )

    def locate(self, text: str) -> Optional[Location]:
        start = 0
        if self.after_regex is not None:
            scope = self.after_regex.search(text)
            if scope is None:
                return None
            start = scope.end()
        match = self.regex.search(text, start)
        if match is None:
            return None
        offset = line_start(text, match.start())
        return Location(offset, indent_at(text, offset))


_CLOSERS = {"{": "}", "[": "]", "(": ")"}


class BlockTail(_PatternMatcher):
    """After the last top-level entry of a named ``{}`` or ``[]`` block.

    *opener* must match up to and including the opening delimiter, e.g.
    ``r"\\broutes:\\s*\\{"``.  The scan is deliberately conservative:

    * string literals and ``//`` comments are skipped while balancing;
    * a ``/* */`` comment, string interpolation or unbalanced delimiters
      give up (``None``);
    * more than one block matching *opener* gives up;
    * a non-empty block whose last entry lacks a trailing comma gives up;
    * an empty block inserts right after the opener.
    """

    def __init__(self, opener: str, delimiters: str = "{}") -> None:
        if delimiters not in ("{}", "[]"):
            raise MalformedAnchor(
                f"BlockTail({opener!r})", f"unsupported delimiters {delimiters!r}"
            )
        super().__init__(opener)
        self.delimiters = delimiters

    def describe(self) -> str:
        return f"BlockTail({self.pattern!r}, {self.delimiters!r})"

    def locate(self, text: str) -> Optional[Location]:
        matches = list(self.regex.finditer(text))
        if len(matches) != 1:
            return None
        match = matches[0]
        if not match.group(0).endswith(self.delimiters[0]):
            return None
        return self._scan(text, match.start(), match.end())

    def _scan(self, text: str, opener_start: int, body_start: int) -> Optional[Location]:
        stack = [self.delimiters[1]]
        last_comma: Optional[int] = None
        content_after_comma = False
        seen_content = False
        i = body_start
        n = len(text)
        while i < n:
            ch = text[i]
            if ch in "'\"":
                end = _skip_string(text, i)
                if end is None:
                    return None
                i = end
                content_after_comma = seen_content = True
                continue
            if text.startswith("//", i):
                i = line_end(text, i)
                continue
            if text.startswith("/*", i):
                return None
            if ch in _CLOSERS:
                stack.append(_CLOSERS[ch])
            elif ch in "}])":
                if ch != stack.pop():
                    return None
                if not stack:
                    break
            elif ch == "," and len(stack) == 1:
                last_comma = i
                content_after_comma = False
                i += 1
                continue
            if not ch.isspace():
                content_after_comma = seen_content = True
            i += 1
        else:
            return None

        if not seen_content:
            return Location(body_start, indent_at(text, opener_start) + "  ")
        if last_comma is None or content_after_comma:
            return None
        return Location(last_comma + 1, indent_at(text, last_comma))


def _skip_string(text: str, start: int) -> Optional[int]:
    """Return the offset just past the string literal opening at *start*.

    ``None`` when the literal is unterminated or interpolates an expression
    (``${...}``), whose braces the scanner cannot balance safely.
    """
    quote = text[start]
    delim = quote * 3 if text.startswith(quote * 3, start) else quote
    raw = start > 0 and text[start - 1] == "r"
    i = start + len(delim)
    n = len(text)
    while i < n:
        if text.startswith(delim, i):
            return i + len(delim)
        ch = text[i]
        if ch == "\\" and not raw:
            i += 2
            continue
        if ch == "\n" and len(delim) == 1:
            return None
        if not raw and text.startswith("${", i):
            return None
        i += 1
    return None
