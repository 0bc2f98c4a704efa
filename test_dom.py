"""Tests for the node model and the markup parser."""

import pytest

from box_engine.dom import Comment, Element, NodeType, Text, elem, parse, text
from box_engine.errors import MarkupParseError, MarkupSyntaxError, NestingDepthError
from box_engine.utils.config import max_safe_depth


# ---------------------------------------------------------------------------
# Node model
# ---------------------------------------------------------------------------


class TestElementAccessors:
    def test_id_present(self):
        assert Element("div", {"id": "main"}).id() == "main"

    def test_id_absent(self):
        assert Element("div").id() is None

    def test_classes_absent(self):
        assert Element("div").classes() == set()

    def test_classes_single_spaces(self):
        assert Element("div", {"class": "a b c"}).classes() == {"a", "b", "c"}

    def test_classes_double_space_has_no_empty_token(self):
        assert Element("div", {"class": "a  b"}).classes() == {"a", "b"}

    def test_classes_literal_mode_keeps_tabs_inside_tokens(self):
        assert Element("div", {"class": "a\tb"}).classes() == {"a\tb"}

    def test_classes_whitespace_mode(self):
        assert Element("div", {"class": " a\tb\n c "}).classes("whitespace") == {"a", "b", "c"}

    def test_classes_unknown_mode(self):
        with pytest.raises(ValueError):
            Element("div", {"class": "a"}).classes("commas")


class TestTreeStructure:
    def test_children_get_parent(self):
        child = text("hi")
        parent = elem("p", {}, [child])
        assert child.parent_node is parent
        assert parent.children == [child]

    def test_node_cannot_have_two_parents(self):
        child = text("hi")
        elem("p", {}, [child])
        with pytest.raises(ValueError):
            elem("div", {}, [child])

    def test_node_types(self):
        assert Text("x").node_type == NodeType.TEXT_NODE
        assert Comment("x").node_type == NodeType.COMMENT_NODE
        assert Element("x").node_type == NodeType.ELEMENT_NODE

    def test_text_content_skips_comments(self):
        root = elem("div", {}, [text("a"), Comment("hidden"), elem("span", {}, [text("b")])])
        assert root.text_content == "ab"

    def test_walk_is_preorder(self):
        root = elem("a", {}, [elem("b", {}, [elem("c")]), elem("d")])
        assert [n.tag_name for n in root.walk()] == ["a", "b", "c", "d"]


# ---------------------------------------------------------------------------
# Markup parser
# ---------------------------------------------------------------------------


class TestParseElements:
    def test_single_root_returned_as_is(self):
        root = parse("<div></div>")
        assert isinstance(root, Element)
        assert root.tag_name == "div"
        assert root.children == []

    def test_nested_elements(self):
        root = parse("<div><p>hello</p><p>world</p></div>")
        assert [c.tag_name for c in root.children] == ["p", "p"]
        assert root.children[0].children[0].data == "hello"

    def test_multiple_top_level_nodes_wrapped_in_html(self):
        root = parse("<p></p><p></p>")
        assert root.tag_name == "html"
        assert root.attributes == {}
        assert len(root.children) == 2

    def test_empty_document_wrapped_in_html(self):
        root = parse("")
        assert root.tag_name == "html"
        assert root.children == []

    def test_text_only_document(self):
        root = parse("just text")
        assert isinstance(root, Text)
        assert root.data == "just text"

    def test_whitespace_between_nodes_is_dropped(self):
        root = parse("<div>\n  <p>a</p>\n  <p>b</p>\n</div>")
        assert len(root.children) == 2

    def test_text_keeps_trailing_whitespace(self):
        root = parse("<p>  hi there </p>")
        assert root.children[0].data == "hi there "

    def test_tag_names_are_case_sensitive(self):
        with pytest.raises(MarkupSyntaxError):
            parse("<div></DIV>")


class TestParseAttributes:
    def test_double_and_single_quotes(self):
        root = parse("""<a href="x.html" title='T'></a>""")
        assert root.attributes == {"href": "x.html", "title": "T"}

    def test_other_quote_inside_value(self):
        root = parse("""<a title="it's"></a>""")
        assert root.get_attribute("title") == "it's"

    def test_repeated_attribute_last_wins(self):
        root = parse('<div id="a" id="b"></div>')
        assert root.attributes == {"id": "b"}

    def test_whitespace_before_close(self):
        root = parse('<div   class="x"   ></div>')
        assert root.classes() == {"x"}

    def test_missing_equals(self):
        with pytest.raises(MarkupSyntaxError) as exc_info:
            parse('<div class"x"></div>')
        assert exc_info.value.expected == "="
        assert exc_info.value.offset == 10

    def test_unquoted_value(self):
        with pytest.raises(MarkupSyntaxError) as exc_info:
            parse("<div class=x></div>")
        assert exc_info.value.expected == "quoted attribute value"

    def test_unterminated_value(self):
        with pytest.raises(MarkupSyntaxError) as exc_info:
            parse('<div class="x></div>')
        assert exc_info.value.expected == '"'
        assert exc_info.value.offset == len('<div class="x></div>')

    def test_mismatched_quotes_run_to_eof(self):
        with pytest.raises(MarkupSyntaxError):
            parse("""<div class="x'></div>""")

    def test_eof_inside_tag(self):
        with pytest.raises(MarkupSyntaxError) as exc_info:
            parse('<div class="x"')
        assert exc_info.value.expected == ">"

    def test_attributes_need_separating_whitespace(self):
        with pytest.raises(MarkupSyntaxError) as exc_info:
            parse('<a x="1"y="2"></a>')
        assert exc_info.value.expected == "whitespace"
        assert exc_info.value.offset == len('<a x="1"')


class TestClosingTags:
    def test_mismatched_closing_tag(self):
        with pytest.raises(MarkupSyntaxError) as exc_info:
            parse("<div><p></div></p>")
        assert exc_info.value.expected == "p"
        assert exc_info.value.offset == 10

    def test_missing_closing_tag(self):
        with pytest.raises(MarkupSyntaxError) as exc_info:
            parse("<div><p>text")
        assert exc_info.value.expected == "</p>"
        assert exc_info.value.offset == len("<div><p>text")

    def test_closing_tag_prefix_is_not_enough(self):
        with pytest.raises(MarkupSyntaxError):
            parse("<div></divx>")

    def test_stray_closing_tag_at_top_level(self):
        with pytest.raises(MarkupSyntaxError):
            parse("<p></p></div>")

    def test_error_alias(self):
        assert MarkupParseError is MarkupSyntaxError


class TestComments:
    def test_comment_is_distinct_node(self):
        root = parse("<div><!-- note --><p></p></div>")
        assert isinstance(root.children[0], Comment)
        assert root.children[0].data == " note "
        assert not isinstance(root.children[0], Text)

    def test_unterminated_comment(self):
        with pytest.raises(MarkupSyntaxError) as exc_info:
            parse("<div><!-- oops</div>")
        assert exc_info.value.expected == "-->"


class TestNestingDepth:
    def test_depth_limit(self):
        source = "<b>" * 5 + "</b>" * 5
        with pytest.raises(NestingDepthError):
            parse(source, max_depth=4)

    def test_depth_at_limit_is_fine(self):
        source = "<b>" * 4 + "</b>" * 4
        assert parse(source, max_depth=4).tag_name == "b"

    @pytest.mark.parametrize("max_depth", [0, -1, 5000, "deep"])
    def test_unusable_depth_limit_rejected(self, max_depth):
        with pytest.raises(ValueError):
            parse("<b></b>", max_depth=max_depth)

    def test_deepest_allowed_nesting_parses(self):
        depth = max_safe_depth()
        source = "<b>" * depth + "</b>" * depth
        assert parse(source, max_depth=depth).tag_name == "b"


class TestSerialisation:
    def test_to_markup_round_trip(self):
        source = """<div class="a" title='say "hi"'><p>hi</p><!--c--></div>"""
        root = parse(source)
        assert parse(root.to_markup()).is_equal_node(root)

    def test_value_with_both_quotes_cannot_be_serialised(self):
        element = Element("a", {"title": """it's "x" """})
        with pytest.raises(ValueError):
            element.to_markup()

    def test_text_with_open_angle_cannot_be_serialised(self):
        with pytest.raises(ValueError):
            elem("p", {}, [text("1 < 2")]).to_markup()

    def test_comment_with_terminator_cannot_be_serialised(self):
        with pytest.raises(ValueError):
            Comment("a --> b").to_markup()

    def test_deep_tree_equality(self):
        def chain(depth):
            node = text("x")
            for _ in range(depth):
                node = elem("b", {}, [node])
            return node

        assert chain(3000).is_equal_node(chain(3000))
        assert not chain(3000).is_equal_node(chain(2999))
