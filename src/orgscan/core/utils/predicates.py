"""Small lexical predicates used by the headline parser"""

from typing import Optional


TAG_CHARS = frozenset('_@#%:')


def is_tag_line(text: str) -> bool:
    """True if text is a colon-delimited tag group like ':work:a2%:'."""
    return (
        len(text) > 2
        and text.startswith(':')
        and text.endswith(':')
        and all(ch.isalnum() or ch in TAG_CHARS for ch in text)
    )


def split_tags(group: str) -> list[str]:
    """Split a tag group on ':' keeping order and dropping empty entries."""
    return [tag for tag in group.split(':') if tag]


def parse_priority_cookie(text: str) -> Optional[tuple[str, int]]:
    """Match '[#X]' at the start of text, X an uppercase ASCII letter.

    Returns (letter, length of the cookie) or None.
    """
    if len(text) < 4 or not text.startswith('[#') or text[3] != ']':
        return None
    letter = text[2]
    if not ('A' <= letter <= 'Z'):
        return None
    return letter, 4
