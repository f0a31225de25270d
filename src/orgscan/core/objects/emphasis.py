"""Emphasis span matching for *bold*, /italic/, _underline_, +strike+, =verbatim= and ~code~"""

from typing import Optional


# Characters allowed right after a closing marker (besides whitespace and end of text).
POST_CHARS = frozenset('-.,:!?;\'")}[')


def parse_emphasis(text: str, marker: str, pos: int = 0) -> Optional[int]:
    """Find the closing marker for the span opened at text[pos].

    The opening marker must be followed by a non-whitespace character; the
    closing one must be preceded by non-whitespace and followed by end of
    text, whitespace or a POST_CHARS character. Returns its index relative
    to pos, or None.
    """
    if len(text) - pos < 3 or text[pos + 1].isspace():
        return None
    i = text.find(marker, pos + 2)
    while i != -1:
        if not text[i - 1].isspace():
            if i + 1 == len(text) or text[i + 1].isspace() or text[i + 1] in POST_CHARS:
                return i - pos
        i = text.find(marker, i + 1)
    return None
