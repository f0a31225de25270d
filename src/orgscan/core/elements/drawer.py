"""Drawer framing: ':NAME:' ... ':END:' blocks"""

import re
from typing import Optional

from pydantic import BaseModel, ConfigDict

from orgscan.core.utils.combinators import blank_lines_count, eol, line, take_lines_while


DRAWER_NAME_RE = re.compile(r':([A-Za-z_-]+):')


class Drawer(BaseModel):
    model_config = ConfigDict(frozen=True)

    name:       str
    pre_blank:  int = 0
    post_blank: int = 0


def _is_end(content: str) -> bool:
    return content.strip().upper() == ':END:'


def parse_drawer_without_blank(text: str) -> Optional[tuple[str, tuple[Drawer, str]]]:
    """Parse a drawer at the start of text, leaving blank lines after ':END:' unconsumed.

    Returns (remainder, (Drawer, body)) or None when there is no header or no ':END:' line.
    """
    m = DRAWER_NAME_RE.match(text)
    if not m:
        return None
    after_header = eol(text[m.end():])
    if after_header is None:
        return None
    rest, pre_blank = blank_lines_count(after_header[0])
    rest, body = take_lines_while(rest, lambda content: not _is_end(content))
    if not rest:
        return None
    rest, _ = line(rest)
    return rest, (Drawer(name=m.group(1), pre_blank=pre_blank), body)


def parse_drawer(text: str) -> Optional[tuple[str, tuple[Drawer, str]]]:
    """Like parse_drawer_without_blank, also consuming trailing blank lines into post_blank."""
    parsed = parse_drawer_without_blank(text)
    if parsed is None:
        return None
    rest, (drawer, body) = parsed
    rest, post_blank = blank_lines_count(rest)
    return rest, (drawer.model_copy(update={"post_blank": post_blank}), body)
