from __future__ import annotations

import pytest

from lettrine.components import parse_color, resolve_colors


class TestParseColor:
    def test_long_form(self):
        assert parse_color("#102030") == (16, 32, 48)

    def test_short_form(self):
        assert parse_color("#fff") == (255, 255, 255)

    def test_without_hash(self):
        assert parse_color("8B0000") == (139, 0, 0)

    def test_empty_uses_default_black(self):
        assert parse_color(None) == (0, 0, 0)
        assert parse_color("  ") == (0, 0, 0)

    @pytest.mark.parametrize("value", ["#12", "#gggggg", "red"])
    def test_invalid(self, value):
        with pytest.raises(ValueError):
            parse_color(value)


class TestResolveColors:
    def test_shared_only(self):
        assert resolve_colors("#010101") == ((1, 1, 1), (1, 1, 1))

    def test_body_override(self):
        lettrine, body = resolve_colors("#010101", body_text_color="#020202")
        assert lettrine == (1, 1, 1)
        assert body == (2, 2, 2)

    def test_lettrine_override(self):
        lettrine, body = resolve_colors("#010101", lettrine_text_color="#030303")
        assert lettrine == (3, 3, 3)
        assert body == (1, 1, 1)
