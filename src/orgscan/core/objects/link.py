"""Bracket links: [[PATH]] and [[PATH][DESCRIPTION]]"""

import re
from typing import Optional

from orgscan.core.objects.models import Link


LINK_RE = re.compile(r'\[\[([^<>\]\n]+)\](?:\[([^\[\]]*)\])?\]')


def parse_link(text: str, pos: int = 0) -> Optional[tuple[Link, int]]:
    m = LINK_RE.match(text, pos)
    if not m:
        return None
    return Link(path=m.group(1), desc=m.group(2)), m.end() - pos
