"""Inline object scanner: finds and classifies the next object in a span of text.

Dispatch happens in two stages at every candidate position. First the
structural constructs are recognised from up to three characters of
lookahead; if none matches and the character is a border (whitespace,
quote, comma, parenthesis, brace), the position moves one past it. Then
emphasis markers and inline call/src are tried on a single character at the
(possibly shifted) position. Structural constructs always win over emphasis
at the same position.
"""

import re
from typing import Iterator, Optional

from orgscan.core.objects.cookie import parse_cookie
from orgscan.core.objects.emphasis import parse_emphasis
from orgscan.core.objects.fn_ref import parse_fn_ref
from orgscan.core.objects.inline_call import parse_inline_call
from orgscan.core.objects.inline_src import parse_inline_src
from orgscan.core.objects.link import parse_link
from orgscan.core.objects.macros import parse_macros
from orgscan.core.objects.models import (
    SPAN_KINDS, Bold, Code, Italic, Object, Strike, Text, Underline, Verbatim,
)
from orgscan.core.objects.snippet import parse_snippet
from orgscan.core.objects.target import parse_radio_target, parse_target


# Characters where the next candidate position may start.
MARKERS_RE = re.compile(r'[@ "(\n{<\[]')

BORDER_CHARS = frozenset(' \t",(\n{')

SPAN_TYPES = {'*': Bold, '+': Strike, '/': Italic, '_': Underline}
LEAF_TYPES = {'=': Verbatim, '~': Code}

Match = tuple[Object, int]


def _structural(text: str, pos: int) -> tuple[Optional[Match], int]:
    """Try the structural constructs at pos.

    Returns (match, position for the emphasis stage).
    """
    head = text[pos:pos + 3]
    if head.startswith('@@'):
        return parse_snippet(text, pos), pos
    if head == '{{{':
        return parse_macros(text, pos), pos
    if head == '<<<':
        return parse_radio_target(text, pos), pos
    if head.startswith('<<'):
        return (parse_target(text, pos) if head[2] != '\n' else None), pos
    if head == '[fn':
        return parse_fn_ref(text, pos), pos
    if head.startswith('[['):
        return parse_link(text, pos), pos
    if head[0] == '[':
        return parse_cookie(text, pos), pos
    if head[0] in BORDER_CHARS:
        return None, pos + 1
    return None, pos


def _emphasis(text: str, pos: int) -> Optional[Match]:
    """Try emphasis, verbatim, code, inline call and inline src at pos."""
    marker = text[pos]
    if marker in SPAN_TYPES:
        end = parse_emphasis(text, marker, pos)
        if end is not None:
            return SPAN_TYPES[marker](end=end), 1
    elif marker in LEAF_TYPES:
        end = parse_emphasis(text, marker, pos)
        if end is not None:
            return LEAF_TYPES[marker](value=text[pos + 1:pos + end]), end + 1
    elif marker == 'c':
        return parse_inline_call(text, pos)
    elif marker == 's':
        return parse_inline_src(text, pos)
    return None


def _find(text: str) -> Optional[tuple[int, int, Object, int]]:
    """Locate the first object in text.

    Returns (scan position, object start, object, consumed) or None when the
    whole text is plain. The object start differs from the scan position
    only when a border character was skipped.
    """
    if len(text) <= 2:
        return None

    pos = 0
    while True:
        found, pre = _structural(text, pos)
        start = pos
        if found is None:
            found, start = _emphasis(text, pre), pre
        if found is not None:
            return pos, start, found[0], found[1]

        m = MARKERS_RE.search(text, pos + 1, len(text) - 2)
        if m is None:
            return None
        pos = m.start()


def next_2(text: str) -> tuple[Object, int, Optional[Match]]:
    """Classify the prefix of text.

    Returns (object, consumed, None) when text starts with an object or holds
    no object at all (then the object is a Text covering everything), or
    (Text(prefix), len(prefix), (object, consumed)) when plain text precedes
    the first object. Span objects report consumed=1 and carry the offset of
    their closing marker in `end`.

    A text starting with a single border character directly followed by an
    object yields that object alone; the border character is not reported.
    """
    found = _find(text)
    if found is None:
        return Text(value=text), len(text), None
    pos, start, obj, consumed = found
    if pos == 0:
        return obj, consumed, None
    return Text(value=text[:start]), start, (obj, consumed)


def scan_objects(text: str) -> Iterator[tuple[int, Object, int]]:
    """Tokenize text into (offset, object, length) covering every character.

    Span objects are yielded with the length of the whole span including both
    markers; their inner text is text[offset + 1:offset + obj.end].
    """
    offset = 0
    while offset < len(text):
        found = _find(text[offset:])
        if found is None:
            yield offset, Text(value=text[offset:]), len(text) - offset
            return
        _, start, obj, consumed = found
        if start:
            yield offset, Text(value=text[offset:offset + start]), start
            offset += start
        length = obj.end + 1 if obj.kind in SPAN_KINDS else consumed
        yield offset, obj, length
        offset += length
