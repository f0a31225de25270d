"""File discovery and headline extraction over whole documents"""

import logging
import re
from dataclasses import dataclass, field
from pathlib import Path
from typing import Iterator

from orgscan.config import ParseConfig
from orgscan.core.elements.title import Title, parse_title
from orgscan.core.objects.models import Object
from orgscan.core.objects.scan import scan_objects


logger = logging.getLogger(__name__)

ORG_EXTENSIONS = {'.org'}
HEADLINE_RE = re.compile(r'^\*+(?=[ \t]|\r?$)', re.MULTILINE)


@dataclass
class ParsedDoc:
    """Headlines of one file; not persisted."""
    path:      Path
    text:      str
    headlines: list[Title] = field(default_factory=list)


def discover_files(path: Path) -> list[Path]:
    """Return sorted .org files under path, or [path] if a single file."""
    if path.is_file():
        return [path] if path.suffix in ORG_EXTENSIONS else []
    return sorted(p for p in path.rglob('*') if p.suffix in ORG_EXTENSIONS)


def iter_headlines(text: str, config: ParseConfig) -> Iterator[tuple[int, Title]]:
    """Yield (offset, Title) for every headline line in text."""
    for m in HEADLINE_RE.finditer(text):
        _, (title, _) = parse_title(text[m.start():], config)
        yield m.start(), title


def iter_title_objects(title: Title) -> Iterator[tuple[int, Object, int]]:
    """Inline objects of a headline's raw title text."""
    return scan_objects(title.raw)


def parse_file(path: Path, config: ParseConfig) -> ParsedDoc:
    """Read a file and parse all of its headlines."""
    text = path.read_text(encoding='utf-8')
    headlines = [title for _, title in iter_headlines(text, config)]
    logger.debug("Parsed %d headline(s) from %s", len(headlines), path)
    return ParsedDoc(path=path, text=text, headlines=headlines)


def run_headlines(path: Path, config: ParseConfig) -> list[ParsedDoc]:
    """Parse every .org file under path. Per-file failures are raised as RuntimeError."""
    docs = []
    for p in discover_files(path):
        try:
            docs.append(parse_file(p, config))
        except (OSError, UnicodeDecodeError) as e:
            raise RuntimeError(f"Failed to parse {p}: {e}") from e
    return docs
