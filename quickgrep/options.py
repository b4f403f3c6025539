"""Command-line options and their parsing."""

from __future__ import annotations

import os
from dataclasses import dataclass, field
from enum import Enum

__all__ = [
    "SearchMode",
    "RegexEngine",
    "Options",
    "UsageError",
    "parse_args",
    "validate_options",
    "usage_text",
    "version_text",
]

VERSION = "1.0.0"
_REGEX_CHARS = frozenset(".*+?^$()[]{}|\\")


class SearchMode(Enum):
    LITERAL = "literal"
    REGEX = "regex"
    CASE_INSENSITIVE = "case_insensitive"


class RegexEngine(Enum):
    PCRE2 = "pcre2"
    RE2 = "re2"


@dataclass
class Options:
    """Settings for one search run."""

    pattern: str = ""
    paths: list[str] = field(default_factory=list)
    mode: SearchMode = SearchMode.LITERAL
    regex_engine: RegexEngine = RegexEngine.PCRE2
    recursive: bool = True
    ignore_case: bool = False
    line_number: bool = False
    count_only: bool = False
    invert_match: bool = False
    word_match: bool = False
    line_match: bool = False
    max_depth: int = -1
    threads: int = 0
    exclude_patterns: list[str] = field(default_factory=list)
    include_patterns: list[str] = field(default_factory=list)
    quiet: bool = False
    show_filename: bool = True
    show_line_number: bool = True
    color: str | None = None


class UsageError(ValueError):
    """Raised for invalid command lines; ``show_usage`` asks for the usage text."""

    def __init__(self, message: str = "", *, show_usage: bool = False) -> None:
        super().__init__(message)
        self.message = message
        self.show_usage = show_usage


def _int_value(option: str, value: str) -> int:
    try:
        return int(value)
    except ValueError:
        raise UsageError(f"Invalid value for {option}: {value}") from None


def parse_args(argv: list[str], program_name: str = "quickgrep") -> Options:
    """Parse arguments (without the program name) into validated Options.

    ``--help`` and ``--version`` print to stdout and raise ``SystemExit(0)``.
    """
    if not argv:
        raise UsageError(show_usage=True)

    options = Options()
    args = iter(argv)

    def value_for(option: str, what: str = "a value") -> str:
        try:
            return next(args)
        except StopIteration:
            raise UsageError(f"{option} requires {what}") from None

    for arg in args:
        if arg in ("--help", "-h"):
            print(usage_text(program_name), end="")
            raise SystemExit(0)
        elif arg in ("--version", "-V"):
            print(version_text(), end="")
            raise SystemExit(0)
        elif arg in ("--recursive", "-r"):
            options.recursive = True
        elif arg == "--no-recursive":
            options.recursive = False
        elif arg in ("--ignore-case", "-i"):
            options.ignore_case = True
        elif arg in ("--line-number", "-n"):
            options.line_number = True
            options.show_line_number = True
        elif arg in ("--count", "-c"):
            options.count_only = True
        elif arg in ("--invert-match", "-v"):
            options.invert_match = True
        elif arg in ("--word-regexp", "-w"):
            options.word_match = True
        elif arg in ("--line-regexp", "-x"):
            options.line_match = True
        elif arg == "--max-depth":
            options.max_depth = _int_value(arg, value_for(arg))
        elif arg in ("--threads", "-j"):
            options.threads = _int_value("--threads", value_for("--threads"))
        elif arg == "--exclude":
            options.exclude_patterns.append(value_for(arg, "a pattern"))
        elif arg == "--include":
            options.include_patterns.append(value_for(arg, "a pattern"))
        elif arg in ("--quiet", "-q"):
            options.quiet = True
        elif arg == "--no-filename":
            options.show_filename = False
        elif arg == "--no-line-number":
            options.show_line_number = False
        elif arg == "--color":
            options.color = next(args, "auto")
        elif arg == "--regex-engine":
            engine = value_for(arg)
            try:
                options.regex_engine = RegexEngine(engine)
            except ValueError:
                raise UsageError("Invalid regex engine. Use 'pcre2' or 're2'") from None
        elif arg == "--no-color":
            options.color = "never"
        elif arg.startswith("-"):
            raise UsageError(f"Unknown option: {arg}", show_usage=True)
        elif not options.pattern:
            options.pattern = arg
        else:
            options.paths.append(arg)

    if not options.paths:
        options.paths.append(".")

    if options.threads == 0:
        options.threads = os.cpu_count() or 4

    if options.ignore_case:
        options.mode = SearchMode.CASE_INSENSITIVE
    elif any(ch in _REGEX_CHARS for ch in options.pattern):
        options.mode = SearchMode.REGEX
    else:
        options.mode = SearchMode.LITERAL

    validate_options(options)
    return options


def validate_options(options: Options) -> None:
    """Raise UsageError if the options cannot drive a search."""
    if not options.pattern:
        raise UsageError("No search pattern provided")
    if options.threads < 1:
        raise UsageError("Thread count must be at least 1")
    if options.max_depth < -1:
        raise UsageError("Max depth must be -1 or greater")


def usage_text(program_name: str) -> str:
    """Return the help text for ``program_name``."""
    p = program_name
    return (
        f"Usage: {p} [OPTIONS] PATTERN [PATH...]\n"
        "\n"
        "Search for PATTERN in files at PATH (default: current directory)\n"
        "\n"
        "Options:\n"
        "  -i, --ignore-case       Case insensitive search\n"
        "  -n, --line-number       Show line numbers\n"
        "  -c, --count             Only show count of matches\n"
        "  -v, --invert-match      Invert match\n"
        "  -w, --word-regexp       Match whole words only\n"
        "  -x, --line-regexp       Match whole lines only\n"
        "  -r, --recursive         Search directories recursively (default)\n"
        "  --no-recursive          Don't search directories recursively\n"
        "  --max-depth DEPTH       Maximum directory depth\n"
        "  -j, --threads NUM       Number of threads (default: auto)\n"
        "  --exclude PATTERN       Exclude files matching pattern\n"
        "  --include PATTERN       Only search files matching pattern\n"
        "  -q, --quiet             Suppress normal output\n"
        "  --color WHEN            When to use colors (never, auto, always)\n"
        "  --no-color              Disable colors\n"
        "  --regex-engine ENGINE   Use specific regex engine (pcre2, re2)\n"
        "  -h, --help              Show this help message\n"
        "  -V, --version           Show version information\n"
        "\n"
        "Examples:\n"
        f"  {p} hello                    # Search for 'hello' in current directory\n"
        f"  {p} -i hello src/            # Case insensitive search in src/\n"
        f'  {p} -r "\\b\\w+\\b" .         # Find all words using regex\n'
        f"  {p} -c error *.log           # Count error lines in log files\n"
    )


def version_text() -> str:
    """Return the version banner."""
    return f"quickgrep version {VERSION}\nA fast grep-like search tool\n"