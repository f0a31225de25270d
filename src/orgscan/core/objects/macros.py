"""Macro invocations: {{{NAME}}} and {{{NAME(ARGS)}}}"""

import re
from typing import Optional

from orgscan.core.objects.models import Macros


# Arguments run up to the first ')}}}'.
MACROS_RE = re.compile(r'\{\{\{([A-Za-z][A-Za-z0-9_-]*)(?:\((.*?)\))?\}\}\}', re.DOTALL)


def parse_macros(text: str, pos: int = 0) -> Optional[tuple[Macros, int]]:
    m = MACROS_RE.match(text, pos)
    if not m:
        return None
    return Macros(name=m.group(1), arguments=m.group(2)), m.end() - pos
