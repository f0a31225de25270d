"""Unit tests for the per-construct inline parsers"""

import pytest

from orgscan.core.objects.cookie import parse_cookie
from orgscan.core.objects.emphasis import parse_emphasis
from orgscan.core.objects.fn_ref import parse_fn_ref
from orgscan.core.objects.inline_call import parse_inline_call
from orgscan.core.objects.inline_src import parse_inline_src
from orgscan.core.objects.link import parse_link
from orgscan.core.objects.macros import parse_macros
from orgscan.core.objects.models import (
    Cookie, FnRef, InlineCall, InlineSrc, Link, Macros, RadioTarget, Snippet, Target,
)
from orgscan.core.objects.snippet import parse_snippet
from orgscan.core.objects.target import parse_radio_target, parse_target


@pytest.mark.parametrize("text,marker,expected", [
    ("*bold*", "*", 5),
    ("*a*", "*", 2),
    ("*bold*, then", "*", 5),
    ("*a*b* c", "*", 4),
    ("*a *b* c", "*", 5),
    ("=a=b", "=", None),
    ("* a*", "*", None),
    ("*a *", "*", None),
    ("**", "*", None),
    ("~x~)", "~", 2),
])
def test_parse_emphasis(text, marker, expected):
    assert parse_emphasis(text, marker) == expected


def test_parse_emphasis_from_offset():
    """The returned index is relative to the opening marker."""
    assert parse_emphasis("ab /it/ cd", "/", 3) == 3


def test_parse_fn_ref_variants():
    assert parse_fn_ref("[fn:note]") == (FnRef(label="note"), 9)
    assert parse_fn_ref("[fn:n-1:see [x]]") == (FnRef(label="n-1", definition="see [x]"), 16)
    assert parse_fn_ref("[fn::anon]") == (FnRef(definition="anon"), 10)


@pytest.mark.parametrize("text", ["[fn:]", "[fn::]", "[fn:a", "[fn:a:b", "[fn:a b]", "[fx:a]"])
def test_parse_fn_ref_no_match(text):
    assert parse_fn_ref(text) is None


def test_parse_link_no_match():
    assert parse_link("[[]]") is None
    assert parse_link("[[a\nb]]") is None
    assert parse_link("[[a][b]") is None
    assert parse_link("[[<a>]]") is None


def test_parse_link_multiline_description():
    assert parse_link("[[a][line\nbreak]]") == (Link(path="a", desc="line\nbreak"), 17)


def test_parse_macros_arguments_stop_at_first_close():
    assert parse_macros("{{{m(a)}}} {{{n(b)}}}") == (Macros(name="m", arguments="a"), 10)
    assert parse_macros("{{{m-1_x}}}") == (Macros(name="m-1_x"), 11)
    assert parse_macros("{{{m(a}}}") is None


def test_parse_snippet():
    assert parse_snippet("@@html:<b>@@") == (Snippet(name="html", value="<b>"), 12)
    assert parse_snippet("@@html:<b>") is None


def test_parse_targets():
    assert parse_target("<<a b>>") == (Target(target="a b"), 7)
    assert parse_target("<<a >>") is None
    assert parse_radio_target("<<<r>>>") == (RadioTarget(target="r"), 7)
    assert parse_radio_target("<<<r>>") is None


@pytest.mark.parametrize("text,value", [
    ("[1/2]", "[1/2]"),
    ("[/]", "[/]"),
    ("[%]", "[%]"),
    ("[100%]", "[100%]"),
])
def test_parse_cookie(text, value):
    assert parse_cookie(text) == (Cookie(value=value), len(value))


def test_parse_cookie_no_match():
    assert parse_cookie("[1/2") is None
    assert parse_cookie("[1-2]") is None


def test_parse_inline_call_headers():
    text = "call_fn[:session s](x=1)[:results raw] tail"
    call, length = parse_inline_call(text)
    assert call == InlineCall(name="fn", arguments="x=1", inside_header=":session s", end_header=":results raw")
    assert text[length:] == " tail"


def test_parse_inline_call_no_match():
    assert parse_inline_call("call_(x)") is None
    assert parse_inline_call("call_f(x\n)") is None


def test_parse_inline_src():
    assert parse_inline_src("src_sh{ls}") == (InlineSrc(lang="sh", body="ls"), 10)
    assert parse_inline_src("src_sh{ls") is None
    assert parse_inline_src("src_{ls}") is None
