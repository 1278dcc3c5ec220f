"""Tests for the stylesheet renderer."""

import io

import pytest

from htsx.css.model import (
    ALL,
    SCREEN,
    And,
    BareFeature,
    Charset,
    ClassName,
    Comment,
    FeatureTest,
    FontFace,
    From,
    Function,
    IdName,
    Import,
    Important,
    Keyframes,
    LocalRef,
    MediaBlock,
    Not,
    PercentStep,
    PlainText,
    QueryList,
    QuotedText,
    RemoteUrl,
    Rule,
    SelectorList,
    Sequence,
    SupportsBlock,
    To,
    TypeName,
    ValueList,
)
from htsx.css.render import (
    render_item,
    render_stylesheet,
    write_item,
    write_query,
    write_selector,
    write_value,
)


def _value(value) -> str:
    buf = io.StringIO()
    write_value(value, buf)
    return buf.getvalue()


def _selector(selector) -> str:
    buf = io.StringIO()
    write_selector(selector, buf)
    return buf.getvalue()


def _query(query, top_level=True) -> str:
    buf = io.StringIO()
    write_query(query, buf, top_level=top_level)
    return buf.getvalue()


# ---------------------------------------------------------------------------
# Values
# ---------------------------------------------------------------------------


class TestValues:
    def test_plain(self):
        assert _value(PlainText("red")) == "red"

    def test_quoted(self):
        assert _value(QuotedText("Open Sans")) == '"Open Sans"'

    def test_quoted_escapes_quotes_and_backslashes(self):
        assert _value(QuotedText('say "hi"')) == r'"say \"hi\""'
        assert _value(QuotedText("a\\b")) == r'"a\\b"'

    def test_list_space_joined(self):
        assert _value(ValueList((PlainText("1px"), PlainText("solid")))) == "1px solid"

    def test_function_comma_joined(self):
        value = Function("rgb", (PlainText("0"), PlainText("1"), PlainText("2")))
        assert _value(value) == "rgb(0, 1, 2)"

    def test_function_without_arguments(self):
        assert _value(Function("now", ())) == "now()"

    def test_important_suffix(self):
        assert _value(Important(ValueList((PlainText("0"), PlainText("auto"))))) == "0 auto !important"


# ---------------------------------------------------------------------------
# Selectors
# ---------------------------------------------------------------------------


class TestSelectors:
    def test_sequence_space_joined(self):
        assert _selector(Sequence((TypeName("div"), ClassName("x")))) == "div .x"

    def test_list_comma_joined(self):
        assert _selector(SelectorList((TypeName("div"), TypeName("p")))) == "div, p"

    def test_id(self):
        assert _selector(IdName("main")) == "#main"

    def test_nested(self):
        selector = SelectorList((Sequence((IdName("a"), TypeName("b"))), ClassName("c")))
        assert _selector(selector) == "#a b, .c"


# ---------------------------------------------------------------------------
# Media queries
# ---------------------------------------------------------------------------


class TestMediaQueries:
    def test_and_at_top_level(self):
        query = And(FeatureTest("width", PlainText("800px")), SCREEN)
        assert _query(query) == "(width: 800px) and screen"

    def test_and_nested_in_list(self):
        query = QueryList((And(FeatureTest("width", PlainText("800px")), SCREEN),))
        assert _query(query) == "((width: 800px) and screen)"

    def test_list_at_top_level(self):
        assert _query(QueryList((SCREEN, BareFeature("print")))) == "screen, print"

    def test_list_nested(self):
        query = And(QueryList((SCREEN, ALL)), BareFeature("color"))
        assert _query(query) == "(screen, all) and color"

    def test_feature_always_parenthesized(self):
        feature = FeatureTest("min-width", PlainText("600px"))
        assert _query(feature) == "(min-width: 600px)"
        assert _query(feature, top_level=False) == "(min-width: 600px)"

    def test_not_at_top_level(self):
        assert _query(Not(BareFeature("print"))) == "(not print)"

    def test_not_nested(self):
        assert _query(Not(BareFeature("print")), top_level=False) == "not print"

    def test_not_parenthesizes_compound_inner(self):
        query = Not(And(SCREEN, BareFeature("color")))
        assert _query(query) == "(not (screen and color))"
        assert _query(query, top_level=False) == "not (screen and color)"

    def test_bare(self):
        assert _query(BareFeature("print"), top_level=False) == "print"


# ---------------------------------------------------------------------------
# Items
# ---------------------------------------------------------------------------


class TestItems:
    def test_rule(self):
        rule = Rule(TypeName("p"), (("color", PlainText("red")), ("margin", PlainText("0"))))
        assert render_item(rule) == "p {\n    color: red;\n    margin: 0;\n}\n"

    def test_rule_indented(self):
        rule = Rule(TypeName("p"), (("color", PlainText("red")),))
        assert render_item(rule, indent=4) == "    p {\n        color: red;\n    }\n"

    def test_empty_rule(self):
        assert render_item(Rule(ClassName("x"), ())) == ".x {\n}\n"

    def test_duplicate_declarations_kept(self):
        rule = Rule(
            TypeName("p"),
            (("a", PlainText("1")), ("b", PlainText("2")), ("a", PlainText("3"))),
        )
        text = render_item(rule)
        assert text.index("a: 1;") < text.index("b: 2;") < text.index("a: 3;")

    def test_charset(self):
        assert render_item(Charset("UTF-8")) == "@charset UTF-8;\n"

    def test_comment(self):
        assert render_item(Comment("hello")) == "/* hello */\n"

    def test_comment_indented(self):
        assert render_item(Comment("hello"), indent=4) == "    /* hello */\n"

    def test_import_without_query_keeps_space(self):
        assert render_item(Import(QuotedText("a.css"))) == '@import "a.css" ;\n'

    def test_import_with_query(self):
        item = Import(Function("url", (PlainText("a.css"),)), And(SCREEN, BareFeature("color")))
        assert render_item(item) == "@import url(a.css) screen and color;\n"

    def test_font_face(self):
        item = FontFace("Body", (RemoteUrl("b.woff2", "woff2"), LocalRef("Body", "truetype")))
        assert render_item(item) == (
            "@font-face {\n"
            '    font-family: "Body";\n'
            '    src: url("b.woff2") format("woff2"), local("Body") format("truetype");\n'
            "}\n"
        )

    def test_font_face_escapes_quotes(self):
        item = FontFace('My "Font"', (LocalRef('x"y', "truetype"),))
        text = render_item(item)
        assert r'font-family: "My \"Font\"";' in text
        assert r'src: local("x\"y") format("truetype");' in text

    def test_media_block(self):
        item = MediaBlock(
            And(FeatureTest("width", PlainText("800px")), SCREEN),
            (Rule(TypeName("p"), (("color", PlainText("red")),)),),
        )
        assert render_item(item) == (
            "@media (width: 800px) and screen {\n"
            "    p {\n"
            "        color: red;\n"
            "    }\n"
            "}\n"
        )

    def test_nested_blocks_indent(self):
        item = SupportsBlock(
            FeatureTest("display", PlainText("grid")),
            (MediaBlock(SCREEN, (Comment("x"),)),),
        )
        assert render_item(item) == (
            "@supports (display: grid) {\n"
            "    @media screen {\n"
            "        /* x */\n"
            "    }\n"
            "}\n"
        )

    def test_keyframes(self):
        item = Keyframes(
            "pulse",
            (
                From((("opacity", PlainText("0")),)),
                PercentStep("50%", (("opacity", PlainText("1")),)),
                To((("opacity", PlainText("0")),)),
            ),
        )
        assert render_item(item) == (
            "@keyframes pulse {\n"
            "    from {\n"
            "        opacity: 0;\n"
            "    }\n"
            "    50% {\n"
            "        opacity: 1;\n"
            "    }\n"
            "    to {\n"
            "        opacity: 0;\n"
            "    }\n"
            "}\n"
        )

    def test_stylesheet_concatenates(self):
        text = render_stylesheet([Comment("a"), Charset("b")])
        assert text == "/* a */\n@charset b;\n"


class TestWriterErrors:
    class _BrokenSink:
        def write(self, text):
            raise OSError("disk full")

    def test_sink_errors_propagate(self):
        with pytest.raises(OSError, match="disk full"):
            write_item(Comment("x"), self._BrokenSink())
