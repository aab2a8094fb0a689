"""Parser for line-oriented ``key=value`` text (the ``.properties`` format).

Format rules:
    - Lines end with ``\\n``, ``\\r\\n`` or ``\\r``; leading whitespace is ignored
    - Blank lines and lines starting with ``#`` or ``!`` are skipped
    - The key ends at the first unescaped ``=``, ``:`` or whitespace; whitespace
      around the separator is skipped and a key without a value maps to ``""``
    - A line ending in an odd number of backslashes continues on the next line,
      whose leading whitespace is dropped
    - ``\\t``, ``\\n``, ``\\r``, ``\\f`` and ``\\uXXXX`` are escapes; any other
      escaped character stands for itself
"""

import re
from collections.abc import Iterator

_LINE_BREAK = re.compile(r"\r\n|\r|\n")
_WHITESPACE = " \t\f"
_SEPARATORS = "=:"
_COMMENT_MARKERS = "#!"
_ESCAPES = {"t": "\t", "n": "\n", "r": "\r", "f": "\f"}


def _continues(line: str) -> bool:
    trailing = len(line) - len(line.rstrip("\\"))
    return trailing % 2 == 1


def logical_lines(text: str) -> Iterator[str]:
    """Yield the logical lines of ``text``, joining continued lines.

    Comment and blank lines are skipped; leading whitespace is removed.
    """
    pending: str | None = None
    for physical in _LINE_BREAK.split(text):
        line = physical.lstrip(_WHITESPACE)
        if pending is None:
            if not line or line[0] in _COMMENT_MARKERS:
                continue
            pending = ""
        pending += line
        if line and _continues(line):
            pending = pending[:-1]
            continue
        yield pending
        pending = None
    if pending:
        yield pending


def split_entry(line: str) -> tuple[str, str]:
    """Split a logical line into its raw (still escaped) key and value."""
    index = 0
    escaped = False
    while index < len(line):
        char = line[index]
        if escaped:
            escaped = False
        elif char == "\\":
            escaped = True
        elif char in _SEPARATORS or char in _WHITESPACE:
            break
        index += 1
    key = line[:index]

    rest = line[index:].lstrip(_WHITESPACE)
    if rest[:1] and rest[0] in _SEPARATORS:
        rest = rest[1:].lstrip(_WHITESPACE)
    return key, rest


def unescape(text: str) -> str:
    """Resolve backslash escapes.

    Raises:
        ValueError: If a ``\\u`` escape isn't followed by four hex digits.
    """
    if "\\" not in text:
        return text
    chars: list[str] = []
    index = 0
    while index < len(text):
        char = text[index]
        index += 1
        if char != "\\" or index == len(text):
            if char != "\\":
                chars.append(char)
            continue
        char = text[index]
        index += 1
        if char == "u":
            digits = text[index : index + 4]
            if len(digits) != 4 or not all(it in "0123456789abcdefABCDEF" for it in digits):
                raise ValueError(f"Malformed \\uxxxx encoding: \\u{digits}")
            chars.append(chr(int(digits, 16)))
            index += 4
        else:
            chars.append(_ESCAPES.get(char, char))
    return "".join(chars)


def parse_properties(text: str) -> dict[str, str]:
    """Parse ``key=value`` text into a dict; later duplicate keys win.

    Example:
        >>> parse_properties("x=1\\ny : 2\\n# comment\\nflag")
        {'x': '1', 'y': '2', 'flag': ''}
    """
    entries: dict[str, str] = {}
    for line in logical_lines(text):
        key, value = split_entry(line)
        entries[unescape(key)] = unescape(value)
    return entries
