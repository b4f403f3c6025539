import pytest

from quickgrep.matchers import Match, PatternError, RE2Matcher, RegexMatcher, literal_match


def test_find_all_returns_each_occurrence():
    text = "foo bar foo"
    found = RegexMatcher("foo").find_all(text)
    assert [m.text for m in found] == ["foo", "foo"]
    assert all(text[m.start:m.end] == m.text for m in found)
    assert found[0].start < found[1].start


def test_find_all_case_insensitive():
    found = RegexMatcher("foo", case_insensitive=True).find_all("a FOO b")
    assert [m.text for m in found] == ["FOO"]


def test_find_all_case_sensitive_misses_other_case():
    assert RegexMatcher("foo").find_all("FOO") == []


def test_find_all_empty_text_has_no_matches():
    assert RegexMatcher("x*").find_all("") == []


def test_find_all_empty_matches_advance():
    found = RegexMatcher("x*").find_all("ab")
    assert len(found) == 2
    assert all(m.start == m.end and m.text == "" for m in found)


def test_multiline_anchor():
    text = "a\nb"
    found = RegexMatcher("^b").find_all(text)
    assert found == [Match(text.index("b"), text.index("b") + 1, "b")]


def test_invalid_pattern_raises():
    with pytest.raises(PatternError):
        RegexMatcher("(")
    with pytest.raises(PatternError):
        RE2Matcher("[")


def test_regex_matches_is_a_search():
    assert RegexMatcher("b").matches("abc") is True
    assert RegexMatcher("z").matches("abc") is False


def test_regex_find_first():
    text = "one two two"
    first = RegexMatcher("two").find_first(text)
    assert first == Match(text.index("two"), text.index("two") + 3, "two")
    assert RegexMatcher("zzz").find_first(text) is None


def test_re2_matches_is_full_match():
    assert RE2Matcher("b").matches("abc") is False
    assert RE2Matcher("abc").matches("abc") is True
    assert RE2Matcher("ABC", case_insensitive=True).matches("abc") is True


def test_re2_find_all_reports_group():
    text = "a12 b345"
    found = RE2Matcher(r"(\d+)").find_all(text)
    assert [m.text for m in found] == ["12", "345"]
    assert all(text[m.start:m.end] == m.text for m in found)


def test_re2_find_all_without_group_reports_whole_match():
    text = "cat hat"
    found = RE2Matcher("[ch]at").find_all(text)
    assert [m.text for m in found] == ["cat", "hat"]


def test_re2_is_not_multiline():
    assert RE2Matcher("^b").find_all("a\nb") == []


def test_re2_find_first():
    text = "x=42"
    first = RE2Matcher(r"=(\d+)").find_first(text)
    assert first is not None and first.text == "42"
    assert text[first.start:first.end] == "42"
    assert RE2Matcher("q").find_first(text) is None


@pytest.mark.parametrize(
    "text, pattern, ci, expected",
    [
        ("Hello World", "world", True, True),
        ("Hello World", "world", False, False),
        ("Hello World", "World", False, True),
        ("abc", "abd", True, False),
        ("", "", False, True),
        ("", "", True, False),
        ("abc", "", True, True),
    ],
)
def test_literal_match(text, pattern, ci, expected):
    assert literal_match(text, pattern, ci) is expected


def test_match_is_value_object():
    assert Match(1, 3, "ab") == Match(1, 3, "ab")
    with pytest.raises(AttributeError):
        Match(1, 3, "ab").start = 0