from __future__ import annotations

import pytest

from lettrine.data_handler import LettrineAttributes
from lettrine.processors.layout import ComputedLayout, MarginExclusionRegion
from lettrine.view import LettrineTextView


def _view(fake_metrics, **kwargs) -> LettrineTextView:
    return LettrineTextView(LettrineAttributes(**kwargs), metrics=fake_metrics)


class TestVisibility:
    def test_empty_text_hides_both(self, fake_metrics):
        view = _view(fake_metrics, text="")
        assert view.visibility == (False, False)
        assert view.styled_text is None

    def test_text_without_marker_shows_body_only(self, fake_metrics):
        view = _view(fake_metrics, text="plain paragraph")
        assert view.visibility == (False, True)
        assert view.layout is None
        assert view.styled_text.get_span(MarginExclusionRegion) is None

    def test_text_with_marker_shows_both(self, fake_metrics):
        view = _view(fake_metrics, text="<l>A</l>rest")
        assert view.visibility == (True, True)
        assert view.lettrine_text == "A"
        assert view.styled_text.text == "rest"

    def test_clearing_text_hides_again(self, fake_metrics):
        view = _view(fake_metrics, text="<l>A</l>rest")
        view.set_body_text(None)
        assert view.visibility == (False, False)

    def test_render_hidden_view_raises(self, fake_metrics):
        with pytest.raises(RuntimeError, match="2003"):
            _view(fake_metrics, text="").build_plan()


class TestRecompute:
    def test_layout_values(self, fake_metrics):
        # 正文行高 round(14*1.5)=21；字号 ((42-14))*2=56；首字行高 84 -> 偏移 -28；宽度 28+14=42
        view = _view(fake_metrics, text="<l>A</l>rest")
        assert view.layout == ComputedLayout(lettrine_font_size=56, lettrine_top_offset=-28, indent_width=42)
        assert view.styled_text.get_span(MarginExclusionRegion) == MarginExclusionRegion(line_count=2, margin=42)

    def test_lines_spanned_change(self, fake_metrics):
        view = _view(fake_metrics, text="<l>A</l>rest")
        view.set_lines_spanned(3)
        assert view.layout.lettrine_font_size == 84
        assert view.styled_text.get_span(MarginExclusionRegion).line_count == 3

    def test_body_text_size_change(self, fake_metrics):
        view = _view(fake_metrics, text="<l>A</l>rest")
        view.set_body_text_size(10)
        # 行高 15；字号 (30-10)*2=40
        assert view.config.body_line_height == 15
        assert view.layout.lettrine_font_size == 40

    def test_font_size_proposed_without_lettrine(self, fake_metrics):
        view = _view(fake_metrics, text="plain")
        assert view.lettrine_font_size == 56


class TestColors:
    def test_shared_color_fallback(self, fake_metrics):
        view = _view(fake_metrics, text_color="#112233")
        assert view.lettrine_color == (0x11, 0x22, 0x33)
        assert view.body_color == (0x11, 0x22, 0x33)

    def test_explicit_overrides(self, fake_metrics):
        view = _view(fake_metrics, text_color="#112233", lettrine_text_color="#ff0000")
        assert view.lettrine_color == (255, 0, 0)
        assert view.body_color == (0x11, 0x22, 0x33)

    def test_setters(self, fake_metrics):
        view = _view(fake_metrics)
        view.set_text_color("#00ff00")
        assert (view.lettrine_color, view.body_color) == ((0, 255, 0), (0, 255, 0))
        view.set_body_text_color("#0000ff")
        assert view.body_color == (0, 0, 255)
        assert view.lettrine_color == (0, 255, 0)
        view.set_lettrine_text_color("#000")
        assert view.lettrine_color == (0, 0, 0)

    def test_plan_uses_colors(self, fake_metrics):
        view = _view(fake_metrics, text="<l>A</l>rest", body_text_color="#010203", lettrine_text_color="#040506")
        plan = view.build_plan()
        assert plan.lettrine.color == (4, 5, 6)
        assert plan.lines[0].color == (1, 2, 3)
        assert plan.lines[0].x == 42

    def test_wrapped_source_text_flows_as_one_paragraph(self, fake_metrics):
        view = _view(fake_metrics, text="<l>O</l>nce\nupon\na time", width=1000)
        plan = view.build_plan()
        assert [line.text for line in plan.lines] == ["nce upon a time"]
