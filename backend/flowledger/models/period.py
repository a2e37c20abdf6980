"""
Reporting period enumeration.
"""

import enum


class Period(str, enum.Enum):
    """Reporting window granularity."""
    week = "W"
    month = "M"
    six_month = "6M"
    year = "Y"
