from __future__ import annotations

import pytest

from article_content.models.nodes import (
    Document,
    Mark,
    MarkType,
    Node,
    NodeType,
    code_block,
    heading,
    mark,
    paragraph,
    text,
)
from article_content.parser import parse_markdown
from article_content.renderers import HtmlRenderer, MarkdownRenderer, RenderOptions
from article_content.renderers.context import RenderContext


@pytest.fixture
def renderer() -> HtmlRenderer:
    return HtmlRenderer()


def test_renders_parsed_scenarios(renderer: HtmlRenderer):
    assert renderer.render(parse_markdown("# Hello")) == "<h1>Hello</h1>"
    assert renderer.render(parse_markdown("**bold** and *italic*")) == (
        "<p><strong>bold</strong> and <em>italic</em></p>"
    )
    assert renderer.render(parse_markdown("> quoted text")) == "<blockquote><p>quoted text</p></blockquote>"
    assert renderer.render(parse_markdown("[link](https://x.com)")) == (
        '<p><a href="https://x.com" target="_blank" rel="noopener noreferrer">link</a></p>'
    )


def test_lists_render_one_element_per_list_node(renderer: HtmlRenderer):
    output = renderer.render(parse_markdown("- a\n- b\n\n- c\n\n1. one"))

    assert output == "\n".join(
        [
            "<ul><li><p>a</p></li><li><p>b</p></li></ul>",
            "<ul><li><p>c</p></li></ul>",
            "<ol><li><p>one</p></li></ol>",
        ]
    )


def test_code_block_has_language_label_and_verbatim_body(renderer: HtmlRenderer):
    output = renderer.render(parse_markdown("```js\nif (a < b && *c*) {}\n```"))

    assert output == (
        '<div class="code-block"><div class="code-language">js</div>'
        '<pre><code class="language-js">if (a &lt; b &amp;&amp; *c*) {}</code></pre></div>'
    )


def test_plaintext_code_block_has_no_label(renderer: HtmlRenderer):
    assert renderer.render(code_block("x = 1")) == "<pre><code>x = 1</code></pre>"


def test_code_language_label_can_be_disabled(renderer: HtmlRenderer):
    output = renderer.render(code_block("x", "py"), options=RenderOptions(show_code_language=False))

    assert output == '<pre><code class="language-py">x</code></pre>'


def test_code_block_without_text_child_renders_empty_body(renderer: HtmlRenderer):
    node = Node(type=NodeType.CODE_BLOCK.value, attrs={"language": "plaintext"})

    assert renderer.render(node) == "<pre><code></code></pre>"


@pytest.mark.parametrize("attrs", [None, {}, {"level": 9}, {"level": 0}, {"level": "3"}, {"level": True}])
def test_invalid_heading_level_falls_back_to_two(renderer: HtmlRenderer, attrs):
    node = Node(type=NodeType.HEADING.value, attrs=attrs, content=(text("Title"),))

    assert renderer.render(node) == "<h2>Title</h2>"


def test_default_heading_level_is_configurable(renderer: HtmlRenderer):
    node = Node(type=NodeType.HEADING.value, content=(text("Title"),))

    assert renderer.render(node, options=RenderOptions(default_heading_level=3)) == "<h3>Title</h3>"


def test_empty_paragraph_is_kept(renderer: HtmlRenderer):
    document = Document(content=(paragraph([]), Node(type=NodeType.PARAGRAPH.value)))

    assert renderer.render(document) == "<p></p>\n<p></p>"


def test_horizontal_rule(renderer: HtmlRenderer):
    assert renderer.render(parse_markdown("---")) == "<hr>"


def test_text_is_escaped(renderer: HtmlRenderer):
    assert renderer.render(paragraph([text("a < b & <script>")])) == "<p>a &lt; b &amp; &lt;script&gt;</p>"


def test_marks_apply_in_stored_order(renderer: HtmlRenderer):
    node = text("x", [mark(MarkType.BOLD), mark(MarkType.ITALIC), mark(MarkType.UNDERLINE)])

    assert renderer.render(node) == "<u><em><strong>x</strong></em></u>"


def test_strike_and_code_marks(renderer: HtmlRenderer):
    assert renderer.render(text("x", [mark(MarkType.STRIKE)])) == "<s>x</s>"
    assert renderer.render(text("x", [mark(MarkType.CODE)])) == "<code>x</code>"


def test_unknown_marks_are_skipped(renderer: HtmlRenderer):
    node = text("x", [Mark(type="highlight", attrs={"color": "yellow"}), mark(MarkType.BOLD)])

    assert renderer.render(node) == "<strong>x</strong>"


def test_link_attributes(renderer: HtmlRenderer):
    node = text("x", [Mark(type="link", attrs={"href": 'https://e.com/?a=1&b="2"', "target": "_self"})])

    assert renderer.render(node, options=RenderOptions(link_rel=None)) == (
        '<a href="https://e.com/?a=1&amp;b=&quot;2&quot;" target="_self">x</a>'
    )


def test_unknown_node_types_degrade_gracefully(renderer: HtmlRenderer):
    document = Document.from_json(
        {
            "type": "doc",
            "content": [
                {"type": "callout", "content": [{"type": "paragraph", "content": [{"type": "text", "text": "kept"}]}]},
                {"type": "embed", "attrs": {"src": "https://video"}},
                heading(3, [text("After")]).model_dump(mode="json", exclude_none=True),
            ],
        }
    )

    assert renderer.render(document) == "<p>kept</p>\n<h3>After</h3>"


def test_empty_document_renders_empty_string(renderer: HtmlRenderer):
    assert renderer.render(Document()) == ""


def test_registered_component_overrides_default(renderer: HtmlRenderer):
    class ShoutingParagraph:
        def render_node(self, node: Node, ctx: RenderContext) -> str:
            return "<p class=\"loud\">" + "".join(ctx.render_children(node)).upper() + "</p>"

    renderer.register(NodeType.PARAGRAPH, ShoutingParagraph())

    assert renderer.render(parse_markdown("hello")) == '<p class="loud">HELLO</p>'


@pytest.mark.parametrize(
    "source",
    [
        "",
        "**",
        "```",
        "> ",
        "- ",
        "1. ",
        "# # #",
        "[x](",
        "~~~~",
        "*_*_`[~",
        "```\n```\n```",
        "\n\n- a\n\t\n  > b\n___\n",
    ],
)
def test_render_of_parse_never_raises(renderer: HtmlRenderer, source: str):
    assert isinstance(renderer.render(parse_markdown(source)), str)


def _nested_quotes(depth: int) -> Document:
    node = paragraph([text("deep")])
    for _ in range(depth):
        node = Node(type=NodeType.BLOCKQUOTE.value, content=(node,))
    return Document(content=(node,))


def test_deeply_nested_document_renders_without_recursion_error(renderer: HtmlRenderer):
    document = _nested_quotes(3000)

    html = renderer.render(document)

    assert html.startswith("<blockquote><blockquote>")
    assert "deep" not in html
    assert isinstance(MarkdownRenderer().render(document), str)


def test_nesting_within_max_depth_is_rendered(renderer: HtmlRenderer):
    document = _nested_quotes(20)

    assert "deep" in renderer.render(document)
    assert "deep" not in renderer.render(document, options=RenderOptions(max_depth=10))
