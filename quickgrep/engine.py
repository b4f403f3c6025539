"""The search engine: matches lines in scanned files and formats the results."""

from __future__ import annotations

import sys
import threading
from concurrent.futures import ThreadPoolExecutor
from dataclasses import dataclass, field
from typing import TextIO

from quickgrep.matchers import Match, PatternError, RE2Matcher, RegexMatcher, literal_match
from quickgrep.options import Options, RegexEngine, SearchMode
from quickgrep.scanner import FileInfo, FileScanner

__all__ = ["SearchResult", "GrepEngine"]

_COLOR_CODES = {
    "red": "\033[31m",
    "green": "\033[32m",
    "blue": "\033[34m",
    "yellow": "\033[33m",
    "magenta": "\033[35m",
    "cyan": "\033[36m",
}
_RESET = "\033[0m"


@dataclass
class SearchResult:
    """One selected line of one file."""

    file_path: str
    line_number: int
    line_content: str
    matches: list[Match] = field(default_factory=list)
    matched: bool = True


def _is_tty(stream: TextIO) -> bool:
    isatty = getattr(stream, "isatty", None)
    if isatty is None:
        return False
    try:
        return bool(isatty())
    except (OSError, ValueError):
        return False


class GrepEngine:
    """Searches the files named by the options, in parallel."""

    def __init__(self, options: Options) -> None:
        self.options = options
        self.scanner = FileScanner(options)
        self.results: list[SearchResult] = []
        self._lock = threading.Lock()
        self._pcre2: RegexMatcher | None = None
        self._re2: RE2Matcher | None = None

        if options.mode in (SearchMode.REGEX, SearchMode.CASE_INSENSITIVE):
            if options.regex_engine is RegexEngine.RE2:
                try:
                    self._re2 = RE2Matcher(options.pattern, options.ignore_case)
                except PatternError as exc:
                    raise PatternError(f"Invalid RE2 regex pattern: {exc}") from exc
            else:
                try:
                    self._pcre2 = RegexMatcher(options.pattern, options.ignore_case)
                except PatternError as exc:
                    raise PatternError(f"Invalid PCRE2 regex pattern: {exc}") from exc

    @property
    def match_count(self) -> int:
        """Number of selected lines found so far."""
        return len(self.results)

    def search(self, stream: TextIO | None = None) -> int:
        """Run the search, print to ``stream``, and return 0 if anything matched, else 1."""
        out = sys.stdout if stream is None else stream
        self.results = []

        workers = max(1, self.options.threads)
        with ThreadPoolExecutor(max_workers=workers) as pool:
            for found in pool.map(self._process_file, self.scanner.scan(self.options.paths)):
                with self._lock:
                    self.results.extend(found)

        if not self.options.quiet:
            if self.options.count_only:
                print(self.match_count, file=out)
            else:
                self.results.sort(key=lambda r: (r.file_path, r.line_number))
                for result in self.results:
                    print(self.format_output(result, out), file=out)

        return 0 if self.match_count > 0 else 1

    def _process_file(self, info: FileInfo) -> list[SearchResult]:
        try:
            content = self.scanner.read_file(info.path)
        except OSError as exc:
            if not self.options.quiet:
                print(f"Error reading file {info.path}: {exc}", file=sys.stderr)
            return []
        return self.search_in_content(info.path, content)

    def _line_matches(self, line: str) -> tuple[bool, list[Match]]:
        opts = self.options
        if opts.mode is SearchMode.LITERAL:
            if not literal_match(line, opts.pattern, opts.ignore_case):
                return False, []
            pos = line.find(opts.pattern)
            if pos == -1:
                return True, []
            return True, [Match(pos, pos + len(opts.pattern), opts.pattern)]
        matcher = self._re2 if opts.regex_engine is RegexEngine.RE2 and self._re2 else self._pcre2
        if matcher is None:
            return False, []
        found = matcher.find_all(line)
        return bool(found), found

    def _whole_line_matches(self, line: str) -> bool:
        if self.options.regex_engine is RegexEngine.RE2 and self._re2:
            return self._re2.matches(line)
        if self._pcre2:
            return self._pcre2.matches(line)
        return line == self.options.pattern

    def search_in_content(self, file_path: str, content: str) -> list[SearchResult]:
        """Return the selected lines of ``content``, in line order."""
        selected: list[SearchResult] = []
        for line in self.scanner.get_lines(content):
            matched, found = self._line_matches(line.content)
            if matched and self.options.line_match:
                matched = self._whole_line_matches(line.content)
            if self.options.invert_match:
                matched = not matched
            if matched:
                selected.append(
                    SearchResult(file_path, line.line_number, line.content, list(found), True)
                )
        return selected

    def _color_enabled(self, stream: TextIO) -> bool:
        color = self.options.color
        return color == "always" or (color == "auto" and _is_tty(stream))

    def format_output(self, result: SearchResult, stream: TextIO | None = None) -> str:
        """Render one result as ``file:line:content`` according to the options."""
        out = sys.stdout if stream is None else stream
        parts: list[str] = []
        if self.options.show_filename:
            parts.append(self.colorize(result.file_path, "blue", out) + ":")
        if self.options.show_line_number:
            parts.append(self.colorize(str(result.line_number), "green", out) + ":")

        line = result.line_content
        if self._color_enabled(out):
            for match in sorted(result.matches, key=lambda m: m.start, reverse=True):
                highlighted = self.colorize(match.text, "red", out)
                line = line[: match.start] + highlighted + line[match.end :]
        parts.append(line)
        return "".join(parts)

    def colorize(self, text: str, color: str, stream: TextIO | None = None) -> str:
        """Wrap ``text`` in the ANSI code for ``color`` when colours are on."""
        out = sys.stdout if stream is None else stream
        setting = self.options.color
        if setting is None or setting == "never":
            return text
        if setting == "auto" and not _is_tty(out):
            return text
        code = _COLOR_CODES.get(color)
        if code is None:
            return text
        return f"{code}{text}{_RESET}"