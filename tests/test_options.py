import pytest

from quickgrep.options import (
    Options,
    RegexEngine,
    SearchMode,
    UsageError,
    parse_args,
    usage_text,
    validate_options,
    version_text,
)


def test_defaults():
    opts = parse_args(["foo"])
    assert opts.pattern == "foo"
    assert opts.paths == ["."]
    assert opts.mode is SearchMode.LITERAL
    assert opts.regex_engine is RegexEngine.PCRE2
    assert opts.recursive is True
    assert opts.show_filename is True
    assert opts.color is None
    assert opts.max_depth == -1
    assert opts.threads >= 1


def test_paths_follow_pattern():
    opts = parse_args(["foo", "a", "b"])
    assert opts.pattern == "foo"
    assert opts.paths == ["a", "b"]


def test_regex_mode_detection():
    assert parse_args(["a.b"]).mode is SearchMode.REGEX
    assert parse_args(["a|b"]).mode is SearchMode.REGEX
    assert parse_args(["-i", "a.b"]).mode is SearchMode.CASE_INSENSITIVE


def test_boolean_flags():
    opts = parse_args(
        ["-n", "-c", "-v", "-w", "-x", "-q", "--no-filename", "--no-line-number", "--no-recursive", "pat"]
    )
    assert opts.line_number is True
    assert opts.count_only is True
    assert opts.invert_match is True
    assert opts.word_match is True
    assert opts.line_match is True
    assert opts.quiet is True
    assert opts.show_filename is False
    assert opts.show_line_number is False
    assert opts.recursive is False


def test_valued_options():
    opts = parse_args(
        ["--max-depth", "2", "-j", "3", "--exclude", "*.log", "--include", "a.txt", "--include", "b.txt", "pat"]
    )
    assert opts.max_depth == 2
    assert opts.threads == 3
    assert opts.exclude_patterns == ["*.log"]
    assert opts.include_patterns == ["a.txt", "b.txt"]


def test_color_options():
    assert parse_args(["--color", "always", "pat"]).color == "always"
    assert parse_args(["pat", "--color"]).color == "auto"
    assert parse_args(["--no-color", "pat"]).color == "never"


def test_regex_engine_choice():
    assert parse_args(["--regex-engine", "re2", "pat"]).regex_engine is RegexEngine.RE2
    with pytest.raises(UsageError):
        parse_args(["--regex-engine", "perl", "pat"])


@pytest.mark.parametrize("option", ["--max-depth", "--threads", "-j", "--exclude", "--include", "--regex-engine"])
def test_missing_value(option):
    with pytest.raises(UsageError, match="requires"):
        parse_args(["pat", option])


def test_non_numeric_value():
    with pytest.raises(UsageError):
        parse_args(["--max-depth", "abc", "pat"])


def test_unknown_option_asks_for_usage():
    with pytest.raises(UsageError) as info:
        parse_args(["--bogus", "pat"])
    assert info.value.show_usage is True
    assert "--bogus" in info.value.message


def test_empty_argv_asks_for_usage():
    with pytest.raises(UsageError) as info:
        parse_args([])
    assert info.value.show_usage is True


def test_help_prints_usage_and_exits(capsys):
    with pytest.raises(SystemExit) as info:
        parse_args(["-h"], "prog")
    assert info.value.code == 0
    assert capsys.readouterr().out == usage_text("prog")


def test_version_prints_and_exits(capsys):
    with pytest.raises(SystemExit) as info:
        parse_args(["--version"])
    assert info.value.code == 0
    assert capsys.readouterr().out == version_text()


def test_auto_threads():
    assert parse_args(["--threads", "0", "pat"]).threads >= 1


def test_validation_errors():
    with pytest.raises(UsageError, match="Thread count must be at least 1"):
        parse_args(["--threads", "-1", "pat"])
    with pytest.raises(UsageError, match="Max depth must be -1 or greater"):
        parse_args(["--max-depth", "-2", "pat"])
    with pytest.raises(UsageError, match="No search pattern provided"):
        parse_args(["-n"])


def test_validate_options_directly():
    with pytest.raises(UsageError, match="No search pattern provided"):
        validate_options(Options(threads=1))
    validate_options(Options(pattern="x", threads=1))
    assert Options(pattern="x", threads=1).pattern == "x"


def test_usage_text_header():
    assert usage_text("prog").startswith("Usage: prog [OPTIONS] PATTERN [PATH...]\n")
    assert "--regex-engine ENGINE" in usage_text("prog")


def test_version_text_mentions_version():
    assert "version 1.0.0" in version_text()