"""Inline babel calls: call_NAME[HEADER](ARGUMENTS)[HEADER]"""

import re
from typing import Optional

from orgscan.core.objects.models import InlineCall


INLINE_CALL_RE = re.compile(
    r'call_(?P<name>[^\[()\n]+)'
    r'(?:\[(?P<inside>[^\]\n]*)\])?'
    r'\((?P<args>[^)\n]*)\)'
    r'(?:\[(?P<end>[^\]\n]*)\])?'
)


def parse_inline_call(text: str, pos: int = 0) -> Optional[tuple[InlineCall, int]]:
    m = INLINE_CALL_RE.match(text, pos)
    if not m:
        return None
    call = InlineCall(
        name=m.group('name'),
        arguments=m.group('args'),
        inside_header=m.group('inside'),
        end_header=m.group('end'),
    )
    return call, m.end() - pos
