# quickgrep

A grep-like command-line tool. It searches files for a pattern, walks
directories recursively and reads the files it finds on a pool of worker
threads.

A pattern with none of the characters `.*+?^$()[]{}|\` is matched as literal
text. A pattern that has any of them is used as a regular expression (Python
`re` syntax). With `-i` the pattern is always used as a case-insensitive
regular expression.

## Installation

```
pip install .
```

## Usage

```
quickgrep [OPTIONS] PATTERN [PATH...]
```

Every PATH is searched (default: the current directory). While walking a
directory, entries whose names start with `.` are skipped, and so are binary
files (files with a NUL byte in their first 1024 bytes). Paths that do not
exist are reported on stderr and skipped.

Each selected line is printed as `path:line:content`, sorted by path and then
line number. After the search a line `Search completed in N seconds.` is
printed. The exit status is 0 when at least one line was selected and 1
otherwise, or 1 on a bad command line or an invalid pattern.

### Options

| Option | Meaning |
| --- | --- |
| `-i`, `--ignore-case` | Case-insensitive search |
| `-n`, `--line-number` | Show line numbers (they are shown by default) |
| `--no-line-number` | Hide line numbers |
| `--no-filename` | Hide file names |
| `-c`, `--count` | Print only the number of selected lines |
| `-v`, `--invert-match` | Select lines that do not match |
| `-w`, `--word-regexp` | Accepted, but does not change matching |
| `-x`, `--line-regexp` | Select a line only if the pattern matches the whole line |
| `-r`, `--recursive` | Search directories recursively (default) |
| `--no-recursive` | Skip directories given as paths, with a warning |
| `--max-depth DEPTH` | Maximum directory depth (`-1`, the default, means no limit) |
| `-j`, `--threads NUM` | Number of worker threads (default: CPU count) |
| `--exclude PATTERN` | Skip files whose name matches PATTERN |
| `--include PATTERN` | Only search files whose name matches PATTERN |
| `-q`, `--quiet` | Print no matching lines, counts or read errors |
| `--color WHEN` | `never`, `auto` or `always`; with no value, `auto` |
| `--no-color` | Disable colours |
| `--regex-engine ENGINE` | `pcre2` (default) or `re2` |
| `-h`, `--help` | Show help |
| `-V`, `--version` | Show version |

With colours on (`always`, or `auto` when stdout is a terminal), file names
are blue, line numbers green and matched text red.

The two regex engines differ slightly. `pcre2` lets `^` and `$` match at line
breaks, and with `-x` it selects a line if the pattern occurs anywhere in it.
`re2` requires the whole line to match for `-x`, and when the pattern has
capturing groups it reports the span of the first group as the match.

### Examples

```
quickgrep hello
quickgrep -i hello src/
quickgrep -c error logs/
quickgrep --color always "fo+" notes.txt
```

## Library use

```python
from quickgrep.options import parse_args
from quickgrep.engine import GrepEngine

options = parse_args(["-c", "TODO", "src"], "quickgrep")
engine = GrepEngine(options)
status = engine.search()        # prints to stdout, returns 0 or 1
print(engine.match_count)
```

`GrepEngine.search_in_content(file_path, content)` returns the selected lines
of a string as `SearchResult` objects without touching the file system.
`parse_args` raises `UsageError` for a bad command line, and `GrepEngine`
raises `PatternError` for a pattern that does not compile.

Matchers can also be used on their own:

```python
from quickgrep.matchers import RegexMatcher, literal_match

matcher = RegexMatcher(r"\d+", False)
[m.text for m in matcher.find_all("a1 b22 c333")]   # ['1', '22', '333']
literal_match("Hello World", "world", True)         # True
```

`quickgrep.scanner.FileScanner` finds and filters files (`scan`), reads them
(`read_file`) and splits text into numbered lines (`get_lines`).

## Limitations

- `--include` and `--exclude` do not do glob matching. A pattern without `*`
  or `?` must equal the file name exactly; a pattern with `*` or `?` matches
  only when it appears, as written, inside the file name.
- `-w` does not restrict matches to whole words.
- In literal mode, the highlighted span is found case-sensitively.

## Running the tests

```
pip install ".[test]"
pytest
```