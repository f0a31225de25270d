"""Parser configuration: todo keyword lists and config.yaml loader"""

import os
import re
from pathlib import Path
from typing import Any

import yaml
from pydantic import BaseModel, ConfigDict, Field, field_validator


CONFIG_FILE = "config.yaml"

_KEYWORD_SPLIT_RE = re.compile(r'[\s,]+')


class ParseConfig(BaseModel):
    model_config = ConfigDict(frozen=True)

    todo_keywords_open:   list[str] = Field(default=["TODO"], description="Keywords of unfinished headlines")
    todo_keywords_closed: list[str] = Field(default=["DONE"], description="Keywords of finished headlines")

    @field_validator("todo_keywords_open", "todo_keywords_closed", mode="before")
    @classmethod
    def _split_keywords(cls, value: Any) -> Any:
        """Accept 'TODO,NEXT' or 'TODO NEXT' as well as a list."""
        if isinstance(value, str):
            return [kw for kw in _KEYWORD_SPLIT_RE.split(value) if kw]
        return value

    def is_todo_keyword(self, word: str) -> bool:
        """True if word exactly matches an open or closed keyword."""
        return word in self.todo_keywords_open or word in self.todo_keywords_closed


DEFAULT_CONFIG = ParseConfig()


def load_config(overrides: dict[str, Any] = None) -> ParseConfig:
    """Load ParseConfig from config.yaml, then ORGSCAN_<FIELD> env vars, then non-None overrides."""
    data: dict[str, Any] = {}
    if Path(CONFIG_FILE).exists():
        try:
            data = yaml.safe_load(Path(CONFIG_FILE).read_text()) or {}
        except yaml.YAMLError as e:
            raise ValueError(f"Invalid {CONFIG_FILE}: {e}") from e
        if not isinstance(data, dict):
            raise ValueError(f"Invalid {CONFIG_FILE}: expected a mapping, got {type(data).__name__}")

    for name in ParseConfig.model_fields:
        if val := os.getenv(f"ORGSCAN_{name.upper()}"):
            data[name] = val

    if overrides:
        data.update({k: v for k, v in overrides.items() if v is not None})
    return ParseConfig(**data)
