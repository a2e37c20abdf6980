"""Tests for category colour shades."""

import pytest

from flowledger.config import Settings
from flowledger.models.transaction import TransactionType
from flowledger.services.color_service import base_color_for, category_colors, generate_shades, parse_hex_color


class TestGenerateShades:
    """Shade palette generation."""

    def test_first_shades(self):
        shades = generate_shades("#EF4444", 3)
        assert shades == [
            "rgba(239, 68, 68, 1)",
            "rgba(239, 68, 68, 0.9)",
            "rgba(239, 68, 68, 0.8)",
        ]

    def test_hash_optional(self):
        assert generate_shades("10b981", 1) == ["rgba(16, 185, 129, 1)"]

    @pytest.mark.parametrize("count", [0, 1, 8, 12, 20])
    def test_count_and_alpha_floor(self, count):
        shades = generate_shades("#3B82F6", count)
        assert len(shades) == count

        alphas = [float(s.rsplit(",", 1)[1].rstrip(")")) for s in shades]
        assert all(a >= 0.2 for a in alphas)
        assert alphas == sorted(alphas, reverse=True)

    def test_trailing_shades_identical(self):
        shades = generate_shades("#3B82F6", 12)
        assert shades[8] == shades[9] == shades[11] == "rgba(59, 130, 246, 0.2)"

    def test_invalid_color(self):
        with pytest.raises(ValueError):
            generate_shades("red", 2)


class TestCategoryColors:
    """Category to colour mapping."""

    def test_maps_in_order(self):
        colors = category_colors(["Food", "Dining"], "#EF4444")
        assert colors == {
            "Food": "rgba(239, 68, 68, 1)",
            "Dining": "rgba(239, 68, 68, 0.9)",
        }

    def test_parse(self):
        assert parse_hex_color("#000000") == (0, 0, 0)


class TestBaseColorFor:

    @pytest.mark.parametrize("transaction_type, expected", [
        (TransactionType.income, "#22C55E"),
        (TransactionType.expense, "#EF4444"),
        (TransactionType.investment, "#3B82F6"),
    ])
    def test_defaults(self, transaction_type, expected):
        assert base_color_for(transaction_type, Settings(_env_file=None)) == expected

    def test_configured(self):
        config = Settings(_env_file=None, investment_base_color="#000000")
        assert base_color_for(TransactionType.investment, config) == "#000000"
