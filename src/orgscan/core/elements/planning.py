"""Planning line parsing (SCHEDULED / DEADLINE / CLOSED)"""

from typing import Optional

from pydantic import BaseModel, ConfigDict

from orgscan.core.elements.timestamp import Timestamp, parse_active, parse_inactive
from orgscan.core.utils.combinators import line


PLANNING_KEYWORDS = {"DEADLINE:": "deadline", "SCHEDULED:": "scheduled", "CLOSED:": "closed"}


class Planning(BaseModel):
    """Scheduling metadata found on the line right after a headline."""
    model_config = ConfigDict(frozen=True)

    deadline:  Optional[Timestamp] = None
    scheduled: Optional[Timestamp] = None
    closed:    Optional[Timestamp] = None


def parse_planning(text: str) -> Optional[tuple[str, Planning]]:
    """Parse a planning line at the start of text.

    Each keyword may appear at most once and must be followed by an active or
    inactive timestamp; the whole line must be consumed.
    """
    rest, content = line(text)
    tail = content.strip()
    found: dict[str, Timestamp] = {}

    while tail:
        keyword, *after = tail.split(maxsplit=1)
        field = PLANNING_KEYWORDS.get(keyword)
        if field is None or field in found or not after:
            return None
        parsed = parse_active(after[0]) or parse_inactive(after[0])
        if parsed is None:
            return None
        tail, found[field] = parsed[0].lstrip(), parsed[1]

    if not found:
        return None
    return rest, Planning(**found)
