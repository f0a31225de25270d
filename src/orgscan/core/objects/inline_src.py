"""Inline source blocks: src_LANG[OPTIONS]{BODY}"""

import re
from typing import Optional

from orgscan.core.objects.models import InlineSrc


INLINE_SRC_RE = re.compile(r'src_([^\s\[{]+)(?:\[([^\]\n]*)\])?\{([^}\n]*)\}')


def parse_inline_src(text: str, pos: int = 0) -> Optional[tuple[InlineSrc, int]]:
    m = INLINE_SRC_RE.match(text, pos)
    if not m:
        return None
    return InlineSrc(lang=m.group(1), options=m.group(2), body=m.group(3)), m.end() - pos
