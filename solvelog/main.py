import asyncio
import logging
from datetime import datetime, timezone
from pathlib import Path
from typing import Optional

from .config import settings as config
from .integrations.codeforces import get_codeforces_submissions
from .integrations.leetcode import get_leetcode_submissions
from .page.markdown import format_date_string, render_markdown
from .page.writer import write_markdown
from .summary.today import Fetcher, collect_today

logging.basicConfig(
    format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
    level=logging.INFO
)
logging.getLogger("httpx").setLevel(logging.WARNING)
logger = logging.getLogger(__name__)


async def generate_markdown(
    now: Optional[datetime] = None,
    output_dir: Optional[str] = None,
    leetcode_fetch: Fetcher = get_leetcode_submissions,
    codeforces_fetch: Fetcher = get_codeforces_submissions,
) -> Optional[Path]:
    """
    Collects today's submissions from both judges, renders the daily page
    and writes it. Returns the written path, or None if the write failed.
    """
    if now is None:
        now = datetime.now(timezone.utc)

    today = await collect_today(now=now, leetcode_fetch=leetcode_fetch, codeforces_fetch=codeforces_fetch)
    markdown = render_markdown(today.leetcode, today.codeforces, now)
    return write_markdown(markdown, format_date_string(now), output_dir or config.OUTPUT_DIR)


def main() -> None:
    """Generates today's page once and exits."""
    logger.info("--- Generating daily submissions page ---")
    asyncio.run(generate_markdown())


if __name__ == "__main__":
    main()
