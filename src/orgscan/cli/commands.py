"""CLI command implementations"""

import json
from pathlib import Path
from typing import Annotated, Optional

import typer

from orgscan.config import ParseConfig, load_config
from orgscan.core.objects.scan import scan_objects
from orgscan.core.pipeline import iter_headlines, iter_title_objects, run_headlines


def _fail(msg: str, cause: Exception = None) -> None:
    """Print a user-friendly error to stderr and exit 1."""
    typer.echo(f"Error: {msg}", err=True)
    if cause:
        typer.echo(f"  {cause}", err=True)
    raise typer.Exit(1)


def _settings(overrides: dict = None) -> ParseConfig:
    """Load config with standard CLI error handling."""
    try:
        return load_config(overrides=overrides)
    except ValueError as e:
        _fail(str(e))


def _read(path: Path) -> str:
    try:
        return path.read_text(encoding='utf-8')
    except (OSError, UnicodeDecodeError) as e:
        _fail(f"Cannot read {path}", e)


def headlines_cmd(
    path: Annotated[Path, typer.Argument(help="Org file or directory to scan")],
    todo: Annotated[Optional[str], typer.Option("--todo", help="Open todo keywords, comma separated")] = None,
    done: Annotated[Optional[str], typer.Option("--done", help="Closed todo keywords, comma separated")] = None,
    ):
    """Print every headline as one JSON object per line."""
    config = _settings(overrides={"todo_keywords_open": todo, "todo_keywords_closed": done})
    if not path.exists():
        _fail(f"No such file or directory: {path}")
    try:
        docs = run_headlines(path, config)
    except RuntimeError as e:
        _fail(str(e))

    count = 0
    for doc in docs:
        for title in doc.headlines:
            record = {"path": str(doc.path), **title.model_dump(mode="json", exclude_none=True)}
            typer.echo(json.dumps(record, ensure_ascii=False))
            count += 1
    typer.echo(f"Found {count} headline(s) in {len(docs)} file(s)", err=True)


def objects_cmd(
    path: Annotated[Path, typer.Argument(help="Org file to tokenize")],
    titles: Annotated[bool, typer.Option("--titles", help="Only scan headline titles")] = False,
    ):
    """Print the inline objects of a file as one JSON object per line."""
    if not path.is_file():
        _fail(f"No such file: {path}")
    text = _read(path)

    if titles:
        config = _settings()
        for offset, title in iter_headlines(text, config):
            for start, obj, length in iter_title_objects(title):
                record = {"headline": offset, "offset": start, "length": length, **obj.model_dump()}
                typer.echo(json.dumps(record, ensure_ascii=False))
        return

    for start, obj, length in scan_objects(text):
        record = {"offset": start, "length": length, **obj.model_dump()}
        typer.echo(json.dumps(record, ensure_ascii=False))
