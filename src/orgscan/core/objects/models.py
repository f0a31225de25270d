"""Inline object variants, one model per kind, joined into the closed Object union"""

from typing import Annotated, Literal, Optional, Union

from pydantic import BaseModel, ConfigDict, Field


class _Object(BaseModel):
    model_config = ConfigDict(frozen=True)


class Cookie(_Object):
    """Statistics cookie such as '[1/3]' or '[50%]'."""
    kind:  Literal["cookie"] = "cookie"
    value: str


class FnRef(_Object):
    kind:       Literal["fn_ref"] = "fn_ref"
    label:      str = ""
    definition: Optional[str] = None


class InlineCall(_Object):
    kind:          Literal["inline_call"] = "inline_call"
    name:          str
    arguments:     str
    inside_header: Optional[str] = None
    end_header:    Optional[str] = None


class InlineSrc(_Object):
    kind:    Literal["inline_src"] = "inline_src"
    lang:    str
    options: Optional[str] = None
    body:    str


class Link(_Object):
    kind: Literal["link"] = "link"
    path: str
    desc: Optional[str] = None


class Macros(_Object):
    kind:      Literal["macros"] = "macros"
    name:      str
    arguments: Optional[str] = None


class RadioTarget(_Object):
    kind:   Literal["radio_target"] = "radio_target"
    target: str


class Target(_Object):
    kind:   Literal["target"] = "target"
    target: str


class Snippet(_Object):
    kind:  Literal["snippet"] = "snippet"
    name:  str
    value: str


# Span variants: `end` is the index of the closing marker, counted from the opening one.

class Bold(_Object):
    kind: Literal["bold"] = "bold"
    end:  int


class Italic(_Object):
    kind: Literal["italic"] = "italic"
    end:  int


class Strike(_Object):
    kind: Literal["strike"] = "strike"
    end:  int


class Underline(_Object):
    kind: Literal["underline"] = "underline"
    end:  int


class Verbatim(_Object):
    kind:  Literal["verbatim"] = "verbatim"
    value: str


class Code(_Object):
    kind:  Literal["code"] = "code"
    value: str


class Text(_Object):
    kind:  Literal["text"] = "text"
    value: str


SPAN_KINDS = frozenset({"bold", "italic", "strike", "underline"})

Object = Annotated[
    Union[
        Cookie, FnRef, InlineCall, InlineSrc, Link, Macros, RadioTarget, Snippet, Target,
        Bold, Italic, Strike, Underline,
        Verbatim, Code, Text,
    ],
    Field(discriminator="kind"),
]
