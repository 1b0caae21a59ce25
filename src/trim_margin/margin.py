"""Remove the layout margin from multi-line strings.

Multi-line string literals keep every space used to indent them nicely in
source code. By prefixing each line with a margin marker the intended text
can be recovered::

    text = trim_margin('''
        |This string has a margin
        |indicated by the '|' character.
    ''')

The following is removed:

* a blank first line and a blank last line (one of each at most)
* spaces and tabs before the margin marker
* the margin marker itself

Lines without a margin are kept as-is, leading whitespace included.
"""
import typing

from trim_margin.exceptions import InvalidMarker, MarginNotFound

DEFAULT_MARKER = "|"
BLANKS = " \t"


def split_lines(text: str) -> typing.List[str]:
    """Split `text` on ``\\n`` and ``\\r\\n`` line terminators.

    A terminator at the end of `text` closes the last line instead of
    starting a new, empty one. An empty string is a single empty line.
    """
    *terminated, tail = text.split("\n")
    lines = [line[:-1] if line.endswith("\r") else line for line in terminated]
    if tail or not lines:
        lines.append(tail)
    return lines


def is_blank(line: str) -> bool:
    return not line.strip(BLANKS)


def _edge_bounds(
    lines: typing.Sequence[str], keep_lone: bool = True
) -> typing.Tuple[int, int]:
    start, stop = 0, len(lines)
    if stop == 0 or (keep_lone and stop == 1):
        return start, stop

    if is_blank(lines[start]):
        start += 1
    if stop > start and is_blank(lines[stop - 1]):
        stop -= 1
    return start, stop


def trim_edges(
    lines: typing.Sequence[str], keep_lone: bool = True
) -> typing.List[str]:
    """Drop a blank first and a blank last line.

    Only one line is removed per end, further blank lines are kept. A single
    line is kept unless `keep_lone` is false, which is the case for text
    that had a line terminator.
    """
    start, stop = _edge_bounds(lines, keep_lone)
    return list(lines[start:stop])


def strip_line_margin(line: str, marker: str) -> typing.Optional[str]:
    """Return the part of `line` after its margin, or None without one.

    The marker is checked before the blank test, so a blank marker matches
    the first blank of the line.
    """
    for pos, char in enumerate(line):
        if char == marker:
            return line[pos + 1 :]
        if char not in BLANKS:
            break
    return None


class MarginTrimmer:
    """Trims the margin of multi-line strings with a fixed configuration.

    With `strict` enabled every line left after edge trimming must have a
    margin, otherwise `MarginNotFound` is raised.
    """

    def __init__(self, marker: str = DEFAULT_MARKER, strict: bool = False):
        if not isinstance(marker, str) or len(marker) != 1:
            raise InvalidMarker(marker)
        self._marker = marker
        self._strict = strict

    @property
    def marker(self) -> str:
        return self._marker

    @property
    def strict(self) -> bool:
        return self._strict

    def trim(self, text: str) -> str:
        lines = split_lines(text)
        start, stop = _edge_bounds(lines, keep_lone="\n" not in text)

        result = []
        for lineno, line in enumerate(lines[start:stop], start=start + 1):
            content = strip_line_margin(line, self._marker)
            if content is None:
                if self._strict:
                    raise MarginNotFound(line, lineno, self._marker)
                content = line
            result.append(content)
        return "\n".join(result)

    def __call__(self, text: str) -> str:
        return self.trim(text)

    def __eq__(self, other: object):
        if not isinstance(other, MarginTrimmer):
            return NotImplemented
        return (self._marker, self._strict) == (other._marker, other._strict)

    def __hash__(self):
        return hash((self._marker, self._strict))

    def __repr__(self):
        return "MarginTrimmer(marker=%r, strict=%r)" % (self._marker, self._strict)


def trim_margin_with(text: str, marker: str, strict: bool = False) -> str:
    """Remove blank edge lines and the `marker` margin of each line."""
    return MarginTrimmer(marker, strict=strict).trim(text)


def trim_margin(text: str, strict: bool = False) -> str:
    """Short-hand for ``trim_margin_with(text, "|")``."""
    return trim_margin_with(text, DEFAULT_MARKER, strict=strict)
