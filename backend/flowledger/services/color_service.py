"""Service deriving category colour palettes for chart series."""

import re
from typing import Dict, List, Sequence, Tuple

from flowledger.config import Settings
from flowledger.models.transaction import TransactionType

HEX_COLOR = re.compile(r"^#?([0-9A-Fa-f]{6})$")

MIN_ALPHA = 0.2
ALPHA_STEP = 0.1


def parse_hex_color(hex_color: str) -> Tuple[int, int, int]:
    match = HEX_COLOR.match(hex_color.strip())
    if not match:
        raise ValueError(f"Invalid hex colour: {hex_color!r}")
    value = match.group(1)
    return int(value[0:2], 16), int(value[2:4], 16), int(value[4:6], 16)


def generate_shades(hex_color: str, count: int) -> List[str]:
    """
    Return ``count`` rgba() colours sharing the base RGB triple.

    Shade i has alpha max(0.2, 1 - i * 0.1), so past the ninth shade
    every colour is identical.
    """
    r, g, b = parse_hex_color(hex_color)
    shades = []
    for i in range(max(count, 0)):
        alpha = round(max(MIN_ALPHA, 1 - i * ALPHA_STEP), 2)
        shades.append(f"rgba({r}, {g}, {b}, {alpha:g})")
    return shades


def category_colors(categories: Sequence[str], hex_color: str) -> Dict[str, str]:
    """Map each category to its shade, in list order."""
    return dict(zip(categories, generate_shades(hex_color, len(categories))))


def base_color_for(transaction_type: TransactionType, config: Settings) -> str:
    """Configured base colour for a transaction type's chart series."""
    return {
        TransactionType.income: config.income_base_color,
        TransactionType.expense: config.expense_base_color,
        TransactionType.investment: config.investment_base_color,
    }[transaction_type]
