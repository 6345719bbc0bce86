"""
Daily submission window for solvelog.
"""

from .today import (
    TodaySubmissions,
    collect_today,
    expand_to_today,
    filter_today,
    is_today,
    today_in
)
