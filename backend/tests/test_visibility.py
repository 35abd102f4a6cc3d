"""Tests for hidden element detection and removal."""
import pytest

from site_renderer.services.visibility import is_hidden_fragment, strip_hidden_elements


# ---------------------------------------------------------------------------
# Top-level hidden fragments
# ---------------------------------------------------------------------------

class TestIsHiddenFragment:
    def test_hidden_root(self):
        assert is_hidden_fragment('<div data-alloro-hidden="true">X</div><p>Y</p>')

    def test_leading_whitespace_and_single_quotes(self):
        assert is_hidden_fragment("\n  <section data-alloro-hidden='true'>X</section>")

    def test_nested_hidden_does_not_hide_fragment(self):
        assert not is_hidden_fragment('<div><span data-alloro-hidden="true">X</span></div>')

    def test_text_before_root_tag(self):
        assert not is_hidden_fragment('Hello <div data-alloro-hidden="true">X</div>')

    @pytest.mark.parametrize("value", ["false", "", "1"])
    def test_non_true_values(self, value):
        assert not is_hidden_fragment(f'<div data-alloro-hidden="{value}">X</div>')

    def test_empty_fragment(self):
        assert not is_hidden_fragment("")


# ---------------------------------------------------------------------------
# Nested hidden elements
# ---------------------------------------------------------------------------

class TestStripHiddenElements:
    def test_removes_only_hidden_subtree(self):
        header = '<div><span data-alloro-hidden="true">X</span><p>Y</p></div>'
        assert strip_hidden_elements(header) == "<div><p>Y</p></div>"

    def test_same_tag_nesting_removes_whole_subtree(self):
        html = '<div data-alloro-hidden="true"><div>inner</div>tail</div><p>keep</p>'
        assert strip_hidden_elements(html) == "<p>keep</p>"

    def test_component_wrappers(self):
        html = (
            '<div class="alloro-tpl-hero" data-alloro-hidden="true"><h2>Hi</h2></div>'
            '<div class="alloro-tpl-cta"><a href="#">Go</a></div>'
        )
        assert strip_hidden_elements(html) == '<div class="alloro-tpl-cta"><a href="#">Go</a></div>'

    def test_void_element(self):
        assert strip_hidden_elements('<p>A<img src="x.png" data-alloro-hidden="true">B</p>') == "<p>AB</p>"

    def test_self_closing_element(self):
        assert strip_hidden_elements('<p>A<br data-alloro-hidden="true"/>B</p>') == "<p>AB</p>"

    def test_unclosed_hidden_element_loses_only_its_start_tag(self):
        html = '<p>keep</p><div data-alloro-hidden="true"><span>shown'
        assert strip_hidden_elements(html) == "<p>keep</p><span>shown"

    def test_content_of_unclosed_hidden_element_is_still_filtered(self):
        html = '<div data-alloro-hidden="true"><b data-alloro-hidden="true">x</b>y'
        assert strip_hidden_elements(html) == "y"

    def test_optional_end_tag_closed_by_fragment_end(self):
        assert strip_hidden_elements('<p>keep</p><p data-alloro-hidden="true">gone') == "<p>keep</p>"

    def test_paragraph_closed_by_block_start_tag(self):
        html = '<section><p data-alloro-hidden="true">Note<h2>Keep</h2></section>'
        assert strip_hidden_elements(html) == "<section><h2>Keep</h2></section>"

    def test_paragraph_closed_by_block_inside_inline(self):
        html = '<p data-alloro-hidden="true">Note <em>soon<div>Keep</div>'
        assert strip_hidden_elements(html) == "<div>Keep</div>"

    def test_list_item_closed_by_next_item(self):
        html = '<ul><li data-alloro-hidden="true">a<li>b</ul>'
        assert strip_hidden_elements(html) == "<ul><li>b</ul>"

    def test_table_cell_closed_by_next_row(self):
        html = '<table><tr><td data-alloro-hidden="true">a<tr><td>b</table>'
        assert strip_hidden_elements(html) == "<table><tr><tr><td>b</table>"

    def test_unknown_marked_section_leaves_fragment_unchanged(self):
        html = '<![foo[<b data-alloro-hidden="true">x</b>]]><p>keep</p>'
        assert strip_hidden_elements(html) == html
        assert not is_hidden_fragment(html)

    def test_implicitly_closed_by_parent(self):
        assert strip_hidden_elements('<div><p data-alloro-hidden="true">X</div>') == "<div></div>"

    def test_multiple_hidden_siblings(self):
        html = '<ul><li data-alloro-hidden="true">a</li><li>b</li><li data-alloro-hidden="true">c</li></ul>'
        assert strip_hidden_elements(html) == "<ul><li>b</li></ul>"

    def test_surrounding_markup_kept_byte_for_byte(self):
        html = '<DIV Class="x"  >A &amp; B</DIV>\n<span data-alloro-hidden="true">B</span>'
        assert strip_hidden_elements(html) == '<DIV Class="x"  >A &amp; B</DIV>\n'

    def test_without_marker_returns_input(self):
        html = "Hello <b>world</b><p>unclosed"
        assert strip_hidden_elements(html) is html

    def test_none_becomes_empty(self):
        assert strip_hidden_elements(None) == ""
