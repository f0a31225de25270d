"""Footnote references: [fn:LABEL], [fn:LABEL:DEFINITION] and [fn::DEFINITION]"""

import re
from typing import Optional

from orgscan.core.objects.models import FnRef


LABEL_RE = re.compile(r'[A-Za-z0-9_-]*')


def _balanced_brackets(text: str, pos: int) -> Optional[int]:
    """Index of the ']' closing an already opened '[', honouring nested pairs."""
    depth = 1
    for i in range(pos, len(text)):
        if text[i] == '[':
            depth += 1
        elif text[i] == ']':
            depth -= 1
            if depth == 0:
                return i
    return None


def parse_fn_ref(text: str, pos: int = 0) -> Optional[tuple[FnRef, int]]:
    if not text.startswith('[fn:', pos):
        return None
    label = LABEL_RE.match(text, pos + 4).group(0)
    i = pos + 4 + len(label)

    definition = None
    if text.startswith(':', i):
        end = _balanced_brackets(text, i + 1)
        if end is None:
            return None
        definition = text[i + 1:end]
        i = end

    if not text.startswith(']', i) or not (label or definition):
        return None
    return FnRef(label=label, definition=definition), i + 1 - pos
