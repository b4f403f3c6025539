"""Pattern matchers: a multiline regex matcher, an RE2-style matcher and literal search."""

from __future__ import annotations

import re
from dataclasses import dataclass

__all__ = ["Match", "PatternError", "RegexMatcher", "RE2Matcher", "literal_match"]


@dataclass(frozen=True)
class Match:
    """A matched span of a line: ``text == line[start:end]``."""

    start: int
    end: int
    text: str


class PatternError(ValueError):
    """Raised when a search pattern cannot be compiled."""


def _compile(pattern: str, flags: int) -> re.Pattern[str]:
    try:
        return re.compile(pattern, flags)
    except re.error as exc:
        raise PatternError(str(exc)) from exc


class RegexMatcher:
    """Regex matcher with multiline anchors (``^``/``$`` match at line breaks)."""

    def __init__(self, pattern: str, case_insensitive: bool = False) -> None:
        flags = re.MULTILINE
        if case_insensitive:
            flags |= re.IGNORECASE
        self.pattern = pattern
        self.case_insensitive = case_insensitive
        self._regex = _compile(pattern, flags)

    def find_all(self, text: str) -> list[Match]:
        """Return every match, stepping one character past empty matches."""
        found: list[Match] = []
        offset = 0
        while offset < len(text):
            m = self._regex.search(text, offset)
            if m is None:
                break
            start, end = m.span()
            found.append(Match(start, end, text[start:end]))
            offset = end + 1 if start == end else end
        return found

    def matches(self, text: str) -> bool:
        """Return True if the pattern occurs anywhere in ``text``."""
        return self._regex.search(text) is not None

    def find_first(self, text: str) -> Match | None:
        """Return the first match in ``text``, or None."""
        m = self._regex.search(text)
        if m is None:
            return None
        return Match(m.start(), m.end(), m.group(0))


class RE2Matcher:
    """Single-line regex matcher with full-match semantics for :meth:`matches`.

    When the pattern has capturing groups, the reported span is that of the
    first group; otherwise it is the whole match.
    """

    def __init__(self, pattern: str, case_insensitive: bool = False) -> None:
        self.pattern = pattern
        self.case_insensitive = case_insensitive
        self._regex = _compile(pattern, re.IGNORECASE if case_insensitive else 0)

    def _to_match(self, m: re.Match[str]) -> Match | None:
        group = 1 if self._regex.groups else 0
        start, end = m.span(group)
        if start < 0:
            return None
        return Match(start, end, m.group(group))

    def find_all(self, text: str) -> list[Match]:
        """Return successive matches, consuming the text after each one."""
        found: list[Match] = []
        offset = 0
        while True:
            m = self._regex.search(text, offset)
            if m is None:
                break
            match = self._to_match(m)
            if match is not None:
                found.append(match)
            consumed = m.end()
            offset = consumed + 1 if consumed == m.start() else consumed
            if offset >= len(text) or consumed >= len(text):
                break
        return found

    def matches(self, text: str) -> bool:
        """Return True if the whole of ``text`` matches the pattern."""
        return self._regex.fullmatch(text) is not None

    def find_first(self, text: str) -> Match | None:
        """Return the first match in ``text``, or None."""
        m = self._regex.search(text)
        if m is None:
            return None
        return self._to_match(m)


def literal_match(text: str, pattern: str, case_insensitive: bool = False) -> bool:
    """Return True if ``pattern`` occurs in ``text`` as a plain substring."""
    if case_insensitive:
        if not pattern:
            # An empty needle is found at the start, which only counts
            # when there is a start inside the text.
            return bool(text)
        return pattern.lower() in text.lower()
    return pattern in text