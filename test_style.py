"""Tests for selector matching, the cascade and the styled tree."""

from box_engine.css import Keyword, Length, parse_css
from box_engine.dom import Comment, Element, elem, parse, text
from box_engine.style import Display, StyledNode, matching_rules, specified_values, style_tree


def styled(markup, css, **kwargs):
    return style_tree(parse(markup), parse_css(css), **kwargs)


class TestMatching:
    def test_one_match_per_rule(self):
        sheet = parse_css("div, .a, #x { width: 1px; }")
        element = Element("div", {"id": "x", "class": "a"})
        matches = matching_rules(element, sheet)
        assert len(matches) == 1
        assert matches[0][0] == (1, 0, 0)

    def test_non_matching_rules_skipped(self):
        sheet = parse_css("p { width: 1px; } div { width: 2px; }")
        matches = matching_rules(Element("div"), sheet)
        assert [m[1] for m in matches] == [sheet.rules[1]]


class TestCascade:
    def test_id_outranks_classes_outranks_tag(self):
        css = """
        #x { color: #ff0000; }
        .a.b { color: #00ff00; }
        div { color: #0000ff; }
        """
        element = Element("div", {"id": "x", "class": "a b"})
        values = specified_values(element, parse_css(css))
        assert values["color"].to_css() == "#ff0000"

    def test_specificity_wins_regardless_of_order(self):
        css = "div { width: 1px; } .a.b { width: 2px; } #x { width: 3px; }"
        element = Element("div", {"id": "x", "class": "a b"})
        assert specified_values(element, parse_css(css))["width"] == Length(3)

    def test_classes_outrank_tag_regardless_of_order(self):
        css = ".a.b { width: 2px; } div { width: 1px; }"
        element = Element("div", {"class": "a b"})
        assert specified_values(element, parse_css(css))["width"] == Length(2)

    def test_equal_specificity_later_rule_wins(self):
        css = ".a { width: 1px; } .b { width: 2px; }"
        element = Element("div", {"class": "a b"})
        assert specified_values(element, parse_css(css))["width"] == Length(2)

        css = ".b { width: 2px; } .a { width: 1px; }"
        assert specified_values(element, parse_css(css))["width"] == Length(1)

    def test_later_declaration_in_same_rule_wins(self):
        css = "div { width: 1px; width: 5px; }"
        assert specified_values(Element("div"), parse_css(css))["width"] == Length(5)

    def test_declarations_merge_across_rules(self):
        css = "div { width: 1px; } .a { height: 2px; }"
        values = specified_values(Element("div", {"class": "a"}), parse_css(css))
        assert values == {"width": Length(1), "height": Length(2)}

    def test_no_match_gives_empty_map(self):
        assert specified_values(Element("span"), parse_css("div { width: 1px; }")) == {}

    def test_idempotent(self):
        root = parse('<div id="x" class="a b"><p class="a">t</p></div>')
        sheet = parse_css("#x { width: 1px; } .a { display: block; } p { display: inline; }")
        first = style_tree(root, sheet)
        second = style_tree(root, sheet)
        assert [n.specified_values for n in first.walk()] == \
            [n.specified_values for n in second.walk()]


class TestStyleTree:
    def test_mirrors_node_tree(self):
        tree = styled("<div><p>a</p><!--c--><span>b</span></div>", "")
        assert [type(c.node) for c in tree.children] == [Element, Comment, Element]
        assert len(tree.children[0].children) == 1

    def test_references_original_nodes(self):
        root = parse("<div><p></p></div>")
        tree = style_tree(root, parse_css(""))
        assert tree.node is root
        assert tree.children[0].node is root.children[0]

    def test_text_and_comments_have_no_values(self):
        tree = styled("<div>text<!--c--></div>", "* { display: block; }")
        assert tree.specified_values == {"display": Keyword("block")}
        assert tree.children[0].specified_values == {}
        assert tree.children[1].specified_values == {}

    def test_no_inheritance(self):
        tree = styled("<div><p></p></div>", "div { color: #ff0000; }")
        assert "color" in tree.specified_values
        assert tree.children[0].specified_values == {}

    def test_class_split_mode(self):
        markup = '<div class="a\tb"></div>'
        css = ".b { display: block; }"
        assert styled(markup, css).display() == Display.INLINE
        assert styled(markup, css, class_split="whitespace").display() == Display.BLOCK


class TestDisplay:
    def _node(self, values):
        return StyledNode(Element("div"), values)

    def test_block(self):
        assert self._node({"display": Keyword("block")}).display() == Display.BLOCK

    def test_none(self):
        assert self._node({"display": Keyword("none")}).display() == Display.NONE

    def test_default_inline(self):
        assert self._node({}).display() == Display.INLINE

    def test_other_keyword_inline(self):
        assert self._node({"display": Keyword("flex")}).display() == Display.INLINE

    def test_non_keyword_inline(self):
        assert self._node({"display": Length(3)}).display() == Display.INLINE

    def test_comment_never_displayed(self):
        assert StyledNode(Comment("x"), {}).display() == Display.NONE

    def test_lookup_fallback(self):
        node = self._node({"margin": Length(4)})
        assert node.lookup("margin-left", "margin", Length(0)) == Length(4)
        assert node.lookup("padding-left", "padding", Length(0)) == Length(0)
        assert node.value("margin") == Length(4)
        assert node.value("padding") is None


class TestDeepTrees:
    def test_style_tree_handles_deep_nesting(self):
        node = text("x")
        for _ in range(3000):
            node = elem("b", {}, [node])

        tree = style_tree(node, parse_css("b { display: block; }"))
        nodes = list(tree.walk())
        assert len(nodes) == 3001
        assert nodes[0].node is node
        assert nodes[-1].node.is_text
