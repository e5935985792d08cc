"""
Reader/writer for the line oriented ``.properties`` text format.

Supported syntax:
- ``key=value``, ``key: value`` and ``key value``
- comment lines starting with ``#`` or ``!``
- line continuation with a trailing backslash
- escapes ``\\t \\n \\r \\f \\uXXXX`` and escaped separators
"""

from __future__ import annotations
import re
from typing import BinaryIO, Dict, Iterator, List, Mapping, Tuple

from ..constants import DEFAULT_ENCODING
from .errors import PropertiesFormatError

_WHITESPACE = " \t\f"
_SEPARATORS = "=:"
_LINE_SPLIT = re.compile(r"\r\n|\r|\n")
_SIMPLE_ESCAPES = {"t": "\t", "n": "\n", "r": "\r", "f": "\f"}


def _trailing_backslashes(line: str) -> int:
    return len(line) - len(line.rstrip("\\"))


def _logical_lines(text: str) -> Iterator[Tuple[int, str]]:
    """Yield (line number, logical line) with comments and blanks removed."""
    physical = _LINE_SPLIT.split(text)
    i = 0
    while i < len(physical):
        number = i + 1
        line = physical[i].lstrip(_WHITESPACE)
        i += 1
        if not line or line[0] in "#!":
            continue
        parts: List[str] = []
        while _trailing_backslashes(line) % 2 == 1:
            parts.append(line[:-1])
            if i >= len(physical):
                line = ""
                break
            line = physical[i].lstrip(_WHITESPACE)
            i += 1
        parts.append(line)
        yield number, "".join(parts)


def _unescape(raw: str, line: int) -> str:
    out: List[str] = []
    i = 0
    while i < len(raw):
        ch = raw[i]
        i += 1
        if ch != "\\":
            out.append(ch)
            continue
        if i >= len(raw):
            break
        ch = raw[i]
        i += 1
        if ch == "u":
            digits = raw[i:i + 4]
            if len(digits) < 4 or any(c not in "0123456789abcdefABCDEF" for c in digits):
                raise PropertiesFormatError(f"Malformed \\uxxxx encoding: \\u{digits}", line)
            out.append(chr(int(digits, 16)))
            i += 4
        else:
            out.append(_SIMPLE_ESCAPES.get(ch, ch))
    return "".join(out)


def _split_entry(line: str) -> Tuple[str, str]:
    key_end = len(line)
    escaped = False
    for pos, ch in enumerate(line):
        if escaped:
            escaped = False
        elif ch == "\\":
            escaped = True
        elif ch in _SEPARATORS or ch in _WHITESPACE:
            key_end = pos
            break

    rest = line[key_end:]
    stripped = rest.lstrip(_WHITESPACE)
    if stripped and stripped[0] in _SEPARATORS:
        stripped = stripped[1:].lstrip(_WHITESPACE)
    return line[:key_end], stripped


def parse_properties(text: str) -> Dict[str, str]:
    """Parse properties text; a later duplicate key wins."""
    result: Dict[str, str] = {}
    for number, line in _logical_lines(text):
        raw_key, raw_value = _split_entry(line)
        result[_unescape(raw_key, number)] = _unescape(raw_value, number)
    return result


def load_properties_stream(stream: BinaryIO, encoding: str = DEFAULT_ENCODING) -> Dict[str, str]:
    data = stream.read()
    if isinstance(data, bytes):
        data = data.decode(encoding)
    return parse_properties(data)


def _escape(text: str, is_key: bool) -> str:
    out: List[str] = []
    for pos, ch in enumerate(text):
        if ch == "\\":
            out.append("\\\\")
        elif ch in "\t\n\r\f":
            out.append("\\" + {"\t": "t", "\n": "n", "\r": "r", "\f": "f"}[ch])
        elif ch in "=:#!":
            out.append("\\" + ch)
        elif ch == " " and (is_key or pos == 0):
            out.append("\\ ")
        elif ord(ch) < 0x20 or 0x7e < ord(ch) <= 0xffff:
            out.append(f"\\u{ord(ch):04x}")
        else:
            out.append(ch)
    return "".join(out)


def dump_properties(properties: Mapping[str, str]) -> str:
    """Render `properties` as text, keys sorted; `parse_properties` reads it back."""
    lines = [f"{_escape(k, True)}={_escape(v, False)}" for k, v in sorted(properties.items())]
    return "\n".join(lines) + ("\n" if lines else "")
