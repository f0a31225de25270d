"""Export snippets: @@BACKEND:VALUE@@"""

import re
from typing import Optional

from orgscan.core.objects.models import Snippet


SNIPPET_RE = re.compile(r'@@([A-Za-z0-9-]+):(.*?)@@', re.DOTALL)


def parse_snippet(text: str, pos: int = 0) -> Optional[tuple[Snippet, int]]:
    m = SNIPPET_RE.match(text, pos)
    if not m:
        return None
    return Snippet(name=m.group(1), value=m.group(2)), m.end() - pos
