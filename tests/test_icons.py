"""Tests for the icon mapping."""

import pytest

from cv_site.icons import DEFAULT_ICON, material_icon


class TestMaterialIcon:
    """Tests for material_icon."""

    @pytest.mark.parametrize(
        ("name", "expected"),
        [
            ("mail", ":material/mail:"),
            ("phone", ":material/call:"),
            ("briefcase", ":material/business_center:"),
            ("GitHub", ":material/code:"),
        ],
    )
    def test_known_icons(self, name: str, expected: str) -> None:
        assert material_icon(name) == expected

    @pytest.mark.parametrize("name", ["unknown", "", None])
    def test_falls_back_to_link(self, name: str | None) -> None:
        assert material_icon(name) == DEFAULT_ICON
