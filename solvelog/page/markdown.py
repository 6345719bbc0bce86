from datetime import datetime, timezone
from html import escape
from typing import Optional, Sequence

from ..config import settings as config
from ..data.models import CodeforcesSubmission, LeetCodeSubmission

LINK_CLASS = "text-blue-600 underline underline-offset-4"


def format_date_string(now: datetime) -> str:
    """Human-readable date used for the page title and file name, e.g. 'Mon Oct 19 2026'."""
    return now.astimezone(config.target_timezone()).strftime("%a %b %d %Y")


def format_iso_timestamp(now: datetime) -> str:
    """UTC timestamp with millisecond precision, e.g. '2026-10-19T06:30:00.000Z'."""
    utc = now.astimezone(timezone.utc)
    return utc.strftime("%Y-%m-%dT%H:%M:%S.") + f"{utc.microsecond // 1000:03d}Z"


def _leetcode_item(sub: LeetCodeSubmission) -> str:
    return (
        f"<li> \n"
        f"    <a href=\"{escape(sub.url)}\" class=\"{LINK_CLASS}\" target=\"_blank\"> {escape(sub.title)} </a> \n"
        f"    </li>"
    )


def _codeforces_item(sub: CodeforcesSubmission) -> str:
    return (
        f"<li>\n"
        f"    <div class=\"flex flex-col md:flex-row md:justify-between\">\n"
        f"    <a href=\"{escape(sub.url)}\" class=\"{LINK_CLASS}\" target=\"_blank\"> {escape(sub.problem.name)} </a>\n"
        f"    <p> {escape(sub.verdict_label)} </p>\n"
        f"    </div>\n"
        f"    </li>"
    )


def render_markdown(
    leetcode: Sequence[LeetCodeSubmission],
    codeforces: Sequence[CodeforcesSubmission],
    now: datetime,
    layout: Optional[str] = None,
) -> str:
    """Formats today's submissions into the daily blog page.

    The output depends only on the two lists and ``now``. Empty lists still
    produce their section with an empty <ul>.
    """
    leetcode_items = "".join(_leetcode_item(sub) for sub in leetcode)
    codeforces_items = "".join(_codeforces_item(sub) for sub in codeforces)

    return (
        f"---\n"
        f"title: {format_date_string(now)}\n"
        f"layout: {layout or config.PAGE_LAYOUT}\n"
        f"date: {format_iso_timestamp(now)}\n"
        f"summary: {len(leetcode) + len(codeforces)} submissions today\n"
        f"---\n"
        f"\n"
        f"## Leetcode\n"
        f"\n"
        f"<ul>\n"
        f"    {leetcode_items}\n"
        f"</ul>\n"
        f"\n"
        f"## Codeforces\n"
        f"\n"
        f"<ul>\n"
        f"    {codeforces_items}\n"
        f"</ul>"
    )
