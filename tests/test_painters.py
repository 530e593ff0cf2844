"""Tests for the HTML and scene painters."""

import pytest

from cardsmith.domain.composition import compose_card
from cardsmith.domain.primitives import ImageBox, Surface, TextBox
from cardsmith.infrastructure.painting.html_painter import (
    PRINT,
    SCREEN,
    HtmlPainter,
    css_length,
    style,
)
from cardsmith.infrastructure.painting.scene_painter import ScenePainter


def _text_box(**overrides) -> TextBox:
    fields = dict(
        id="t", x=10, y=20, width=100.0, height=None, z_index=3, text="Hi",
        font_size=16, font_family="Arial, sans-serif", font_weight="bold",
        color="#000000", text_align="center",
    )
    fields.update(overrides)
    return TextBox(**fields)


class TestCssHelpers:
    def test_numbers_become_px(self):
        assert css_length(12) == "12px"
        assert css_length(12.0) == "12px"
        assert css_length(161.5) == "161.5px"

    def test_strings_pass_through(self):
        assert css_length("2px 8px") == "2px 8px"

    def test_empty_values_are_dropped(self):
        assert css_length(None) is None
        assert style([("color", "red"), ("width", None), ("top", "")]) == "color: red"


class TestHtmlPrimitives:
    def test_text_is_escaped_and_positioned(self):
        html = str(HtmlPainter().paint_text(_text_box(text="<b>A&B</b>")))
        assert "&lt;b&gt;A&amp;B&lt;/b&gt;" in html
        assert "left: 10px" in html and "top: 20px" in html and "width: 100px" in html
        assert "z-index: 3" in html
        assert "height" not in html

    def test_image_hides_itself_on_error(self):
        box = ImageBox(id="i", x=0, y=0, width=50, height=50, z_index=1, src="https://x.test/a.png")
        html = str(HtmlPainter().paint_image(box))
        assert 'src="https://x.test/a.png"' in html
        assert "onerror=\"this.style.display='none';\"" in html

    def test_unknown_primitive(self):
        with pytest.raises(TypeError):
            HtmlPainter().paint_primitive(object())


class TestHtmlDocument:
    def test_screen_geometry(self, generic_template, card_data):
        card = compose_card(generic_template, card_data)
        document = HtmlPainter().render_document(card, mode=SCREEN)
        assert document.viewport_width == 630 + 20 + 630 + 40
        assert document.viewport_height == 880 + 40
        assert (document.page_width, document.page_height) == (630, 880)
        assert document.html.count('class="card card-') == 2
        assert "Ken Griffey Jr." in document.html

    def test_print_geometry(self, bordered_template, card_data):
        card = compose_card(bordered_template, card_data)
        document = HtmlPainter().render_document(card, mode=PRINT)
        assert (document.viewport_width, document.viewport_height) == (490, 490)
        assert (document.page_width, document.page_height) == (350, 490)
        assert "break-after: page" in document.html

    def test_print_pages_follow_each_face(self, bordered_template, card_data):
        document = HtmlPainter().render_document(compose_card(bordered_template, card_data), mode=PRINT)
        assert "@page card-front { size: 350px 490px; margin: 0; }" in document.html
        assert "@page card-back { size: 490px 350px; margin: 0; }" in document.html
        assert ".card-back { page: card-back; }" in document.html

    def test_screen_has_no_print_pages(self, bordered_template, card_data):
        document = HtmlPainter().render_document(compose_card(bordered_template, card_data), mode=SCREEN)
        assert "@page" not in document.html

    def test_bordered_front_markup(self, bordered_template, card_data):
        document = HtmlPainter().render_document(compose_card(bordered_template, card_data))
        html = document.html
        assert 'class="element bordered-front"' in html
        assert "url(&#39;https://img.example.com/griffey.jpg&#39;)" in html
        assert "linear-gradient(10deg, #b4463f 60%, #4a90a6 60%)" in html
        assert ">SEASON STATISTICS<" in html

    def test_unknown_mode(self, generic_template, card_data):
        with pytest.raises(ValueError):
            HtmlPainter().render_document(compose_card(generic_template, card_data), mode="poster")

    def test_same_card_same_document(self, bordered_template, card_data):
        painter = HtmlPainter()
        card = compose_card(bordered_template, card_data)
        assert painter.render_document(card).html == painter.render_document(card).html


class TestScenePainter:
    def test_scene_is_camel_cased(self, bordered_template, card_data):
        scene = ScenePainter().render_scene(compose_card(bordered_template, card_data))
        assert set(scene) == {"front", "back"}
        panel = scene["front"]["primitives"][0]
        assert panel["kind"] == "borderedFront"
        assert panel["borderColor"] == "#3f7f4f"
        assert panel["name"]["fontSize"] == 20

    def test_empty_surface(self):
        surface = Surface(side="front", width=10, height=20, background_color="#FFF")
        assert ScenePainter().paint_surface(surface)["primitives"] == []
