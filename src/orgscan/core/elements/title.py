"""Headline parsing: stars, todo keyword, priority, tags, planning and property drawer"""

import logging
from collections import OrderedDict
from typing import Iterable, Iterator, Optional

from pydantic import BaseModel, Field

from orgscan.config import ParseConfig
from orgscan.core.elements.drawer import parse_drawer_without_blank
from orgscan.core.elements.planning import Planning, parse_planning
from orgscan.core.elements.timestamp import Timestamp
from orgscan.core.utils.combinators import blank_lines_count, line, line_ending, one_word, space0, space1
from orgscan.core.utils.predicates import is_tag_line, parse_priority_cookie, split_tags


logger = logging.getLogger(__name__)


class PropertiesMap(BaseModel):
    """Ordered (name, value) pairs from a property drawer; duplicate names are kept."""
    pairs: list[tuple[str, str]] = Field(default_factory=list)

    @classmethod
    def from_pairs(cls, pairs: Iterable[tuple[str, str]]) -> "PropertiesMap":
        return cls(pairs=list(pairs))

    def __iter__(self) -> Iterator[tuple[str, str]]:
        return iter(self.pairs)

    def __len__(self) -> int:
        return len(self.pairs)

    def is_empty(self) -> bool:
        return not self.pairs

    def push(self, name: str, value: str) -> None:
        self.pairs.append((name, value))

    def get(self, name: str) -> Optional[str]:
        """Value of the first property called name."""
        return next((v for k, v in self.pairs if k == name), None)

    def get_all(self, name: str) -> list[str]:
        return [v for k, v in self.pairs if k == name]

    def into_hash_map(self) -> dict[str, str]:
        """Collapse duplicates, last write wins."""
        return {k: v for k, v in self.pairs}

    def into_index_map(self) -> "OrderedDict[str, str]":
        """Collapse duplicates keeping the first occurrence's position and the last value."""
        return OrderedDict(self.pairs)

    def into_owned(self) -> "PropertiesMap":
        return self.model_copy(deep=True)


class Title(BaseModel):
    """A parsed headline"""
    level:      int = Field(default=1, gt=0, description="Number of leading stars")
    keyword:    Optional[str] = None
    priority:   Optional[str] = None
    tags:       list[str] = Field(default_factory=list)
    raw:        str = ""        # title text without stars, keyword, priority and tags
    planning:   Optional[Planning] = None
    properties: PropertiesMap = Field(default_factory=PropertiesMap)
    post_blank: int = 0         # blank lines between the metadata block and next content

    def closed(self) -> Optional[Timestamp]:
        return self.planning.closed if self.planning else None

    def scheduled(self) -> Optional[Timestamp]:
        return self.planning.scheduled if self.planning else None

    def deadline(self) -> Optional[Timestamp]:
        return self.planning.deadline if self.planning else None

    def is_archived(self) -> bool:
        return "ARCHIVE" in self.tags

    def is_commented(self) -> bool:
        return self.raw.startswith("COMMENT") and (len(self.raw) == 7 or self.raw[7].isspace())

    def into_owned(self) -> "Title":
        """Return a detached deep copy that shares nothing with this title."""
        return self.model_copy(deep=True)


def _parse_keyword(text: str, config: ParseConfig) -> tuple[str, Optional[str]]:
    """Consume ' KEYWORD' when the word is a configured todo keyword, else backtrack."""
    spaced = space1(text)
    if spaced is None:
        return text, None
    word = one_word(spaced[0])
    if word is None or not config.is_todo_keyword(word[1]):
        return text, None
    return word


def _parse_priority(text: str) -> tuple[str, Optional[str]]:
    """Consume ' [#X]' plus trailing spaces; the cookie must end at whitespace or a line ending."""
    spaced = space1(text)
    if spaced is None:
        return text, None
    cookie = parse_priority_cookie(spaced[0])
    if cookie is None:
        return text, None
    letter, length = cookie
    after = spaced[0][length:]
    rest, spaces = space0(after)
    if not spaces and line_ending(after) is None:
        return text, None
    return rest, letter


def _split_tags(tail: str) -> tuple[str, list[str]]:
    """Split a trimmed title tail into (raw, tags) at its last space or tab."""
    i = max(tail.rfind(' '), tail.rfind('\t'))
    if i != -1 and is_tag_line(tail[i + 1:]):
        return tail[:i].strip(), split_tags(tail[i + 1:])
    return tail, []


def parse_node_property(text: str) -> Optional[tuple[str, tuple[str, str]]]:
    """Parse one ':NAME: VALUE' line, skipping blank lines before it."""
    text, _ = blank_lines_count(text)
    text = text.lstrip()
    if not text.startswith(':'):
        return None
    end = text.find(':', 1)
    if end == -1:
        return None
    name = text[1:end]
    if name.endswith('+'):
        name = name[:-1]
    rest, value = line(text[end + 1:])
    return rest, (name, value.strip())


def parse_properties_drawer(text: str) -> Optional[tuple[str, PropertiesMap]]:
    """Parse a PROPERTIES drawer at the start of text (leading whitespace allowed)."""
    parsed = parse_drawer_without_blank(text.lstrip())
    if parsed is None:
        return None
    rest, (drawer, body) = parsed
    if drawer.name != "PROPERTIES":
        logger.debug("Drawer %r is not a property drawer", drawer.name)
        return None

    properties = PropertiesMap()
    while (prop := parse_node_property(body)) is not None:
        body, (name, value) = prop
        properties.push(name, value)
    return rest, properties


def parse_title(text: str, config: ParseConfig) -> tuple[str, tuple[Title, str]]:
    """Parse the headline at the start of text together with its planning and properties.

    Returns (remainder, (title, raw)) where raw is the title text handed on to
    the inline object scanner. Raises ValueError if text does not start with '*'.
    """
    stripped = text.lstrip('*')
    level = len(text) - len(stripped)
    if level == 0:
        raise ValueError(f"Headline must start with '*': {text[:20]!r}")

    rest, keyword = _parse_keyword(stripped, config)
    rest, priority = _parse_priority(rest)
    rest, tail = line(rest)
    raw, tags = _split_tags(tail.strip())

    planning = None
    if (parsed := parse_planning(rest)) is not None:
        rest, planning = parsed

    properties = PropertiesMap()
    if (parsed := parse_properties_drawer(rest)) is not None:
        rest, properties = parsed

    rest, post_blank = blank_lines_count(rest)

    title = Title(
        level=level,
        keyword=keyword,
        priority=priority,
        tags=tags,
        raw=raw,
        planning=planning,
        properties=properties,
        post_blank=post_blank,
    )
    logger.debug("Parsed headline level=%d keyword=%s raw=%r", level, keyword, raw)
    return rest, (title, raw)
