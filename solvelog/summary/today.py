"""Selects the submissions made "today" in the target timezone.

Judges only hand out the N most recent submissions, so a single page can end
before today does. ``expand_to_today`` keeps widening the page until it
reaches a submission from an earlier day, or until the judge has nothing more
to give. There is no upper bound on the limit: an account whose whole history
falls on one day grows the window until the judge is exhausted.
"""

import logging
from dataclasses import dataclass
from datetime import date, datetime, tzinfo
from typing import Awaitable, Callable, List, Optional, Sequence, TypeVar

from ..config import settings as config
from ..config import constants
from ..data.models import CodeforcesSubmission, LeetCodeSubmission
from ..integrations.codeforces import get_codeforces_submissions
from ..integrations.leetcode import get_leetcode_submissions

logger = logging.getLogger(__name__)

T = TypeVar("T")

Fetcher = Callable[[int], Awaitable[Sequence[T]]]


def today_in(offset: tzinfo, now: Optional[datetime] = None) -> date:
    """Calendar date of ``now`` (default: the current instant) in ``offset``."""
    if now is None:
        return datetime.now(offset).date()
    if now.tzinfo is None:
        raise ValueError("now must be timezone-aware")
    return now.astimezone(offset).date()


def is_today(timestamp: int, today: date, offset: tzinfo) -> bool:
    return datetime.fromtimestamp(timestamp, offset).date() == today


def filter_today(records: Sequence[T], timestamp_of: Callable[[T], int], today: date, offset: tzinfo) -> List[T]:
    return [record for record in records if is_today(timestamp_of(record), today, offset)]


async def expand_to_today(
    fetch: Fetcher,
    timestamp_of: Callable[[T], int],
    *,
    today: date,
    offset: tzinfo,
    initial_limit: int = constants.DEFAULT_LIMIT,
    step: int = constants.LIMIT_STEP,
    logger: logging.Logger = logger,
) -> List[T]:
    """
    Fetches with a growing limit until the fetched window holds all of today.

    Each refetch starts over and replaces the previous page. The loop stops as
    soon as the page is empty, contains a record from another day, or is
    shorter than requested (the judge has no older submissions).
    """
    limit = initial_limit
    fetched = await fetch(limit)
    todays = filter_today(fetched, timestamp_of, today, offset)

    while fetched and len(todays) == len(fetched):
        if len(fetched) < limit:
            logger.info(f"Source exhausted at {len(fetched)} records; all are from today.")
            break
        limit += step
        logger.info(f"All {len(fetched)} fetched records are from today, widening limit to {limit}...")
        fetched = await fetch(limit)
        todays = filter_today(fetched, timestamp_of, today, offset)

    return todays


@dataclass(frozen=True)
class TodaySubmissions:
    leetcode: List[LeetCodeSubmission]
    codeforces: List[CodeforcesSubmission]

    @property
    def total(self) -> int:
        return len(self.leetcode) + len(self.codeforces)


async def collect_today(
    now: Optional[datetime] = None,
    leetcode_fetch: Fetcher = get_leetcode_submissions,
    codeforces_fetch: Fetcher = get_codeforces_submissions,
    logger: logging.Logger = logger,
) -> TodaySubmissions:
    """Runs the expansion for LeetCode, then for Codeforces."""
    offset = config.target_timezone()
    today = today_in(offset, now)
    logger.info(f"Collecting submissions for {today.isoformat()} (UTC offset {config.UTC_OFFSET_MINUTES} min)...")

    leetcode = await expand_to_today(
        leetcode_fetch,
        lambda sub: sub.timestamp,
        today=today,
        offset=offset,
        logger=logger,
    )
    codeforces = await expand_to_today(
        codeforces_fetch,
        lambda sub: sub.creationTimeSeconds,
        today=today,
        offset=offset,
        logger=logger,
    )

    logger.info(f"Found {len(leetcode)} LeetCode and {len(codeforces)} Codeforces submissions today.")
    return TodaySubmissions(leetcode=leetcode, codeforces=codeforces)
