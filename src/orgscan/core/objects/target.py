"""Targets <<TARGET>> and radio targets <<<TARGET>>>"""

import re
from typing import Optional

from orgscan.core.objects.models import RadioTarget, Target


RADIO_TARGET_RE = re.compile(r'<<<([^<>\n]+)>>>')
TARGET_RE = re.compile(r'<<([^<>\n]+)>>')


def _valid(contents: str) -> bool:
    """Contents may not start or end with whitespace."""
    return not contents[0].isspace() and not contents[-1].isspace()


def parse_radio_target(text: str, pos: int = 0) -> Optional[tuple[RadioTarget, int]]:
    m = RADIO_TARGET_RE.match(text, pos)
    if not m or not _valid(m.group(1)):
        return None
    return RadioTarget(target=m.group(1)), m.end() - pos


def parse_target(text: str, pos: int = 0) -> Optional[tuple[Target, int]]:
    m = TARGET_RE.match(text, pos)
    if not m or not _valid(m.group(1)):
        return None
    return Target(target=m.group(1)), m.end() - pos
