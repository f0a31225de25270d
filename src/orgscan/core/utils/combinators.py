"""Line and whitespace helpers shared by the element parsers.

Each helper takes the remaining input and returns ``(remainder, value)``, or
``None`` when the input does not match.
"""

from typing import Callable, Optional


def line(text: str) -> tuple[str, str]:
    """Split off one physical line, without its '\\n' or '\\r\\n' terminator."""
    i = text.find('\n')
    if i == -1:
        return '', text
    end = i - 1 if i > 0 and text[i - 1] == '\r' else i
    return text[i + 1:], text[:end]


def blank_lines_count(text: str) -> tuple[str, int]:
    """Consume consecutive whitespace-only lines and count them."""
    count = 0
    while text:
        rest, content = line(text)
        if content.strip():
            break
        count += 1
        text = rest
    return text, count


def one_word(text: str) -> Optional[tuple[str, str]]:
    """Take a non-empty run of non-whitespace characters."""
    i = 0
    while i < len(text) and not text[i].isspace():
        i += 1
    if i == 0:
        return None
    return text[i:], text[:i]


def space0(text: str) -> tuple[str, str]:
    """Take zero or more spaces or tabs."""
    stripped = text.lstrip(' \t')
    return stripped, text[:len(text) - len(stripped)]


def space1(text: str) -> Optional[tuple[str, str]]:
    """Take one or more spaces or tabs."""
    rest, spaces = space0(text)
    if not spaces:
        return None
    return rest, spaces


def line_ending(text: str) -> Optional[tuple[str, str]]:
    """Take a '\\n' or '\\r\\n' terminator."""
    if text.startswith('\n'):
        return text[1:], '\n'
    if text.startswith('\r\n'):
        return text[2:], '\r\n'
    return None


def eol(text: str) -> Optional[tuple[str, str]]:
    """Take trailing spaces followed by a line ending or end of input."""
    rest, spaces = space0(text)
    if not rest:
        return rest, spaces
    ending = line_ending(rest)
    if ending is None:
        return None
    return ending[0], spaces + ending[1]


def take_lines_while(text: str, predicate: Callable[[str], bool]) -> tuple[str, str]:
    """Take whole lines (terminators included) while predicate(line) holds."""
    pos = 0
    while pos < len(text):
        rest, content = line(text[pos:])
        if not predicate(content):
            break
        pos = len(text) - len(rest)
    return text[pos:], text[:pos]
