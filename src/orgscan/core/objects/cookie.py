"""Statistics cookies: [N/M] and [N%]"""

import re
from typing import Optional

from orgscan.core.objects.models import Cookie


COOKIE_RE = re.compile(r'\[(?:\d*/\d*|\d*%)\]')


def parse_cookie(text: str, pos: int = 0) -> Optional[tuple[Cookie, int]]:
    m = COOKIE_RE.match(text, pos)
    if not m:
        return None
    return Cookie(value=m.group(0)), m.end() - pos
