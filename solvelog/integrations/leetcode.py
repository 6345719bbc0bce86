import logging
from typing import List, Optional

import httpx
from pydantic import ValidationError

from ..config import settings as config
from ..config import constants
from ..data.models import LeetCodeResponse, LeetCodeSubmission, validate_records

logger = logging.getLogger(__name__)

RECENT_AC_QUERY = """
    query recentAcSubmissions($username: String!, $limit: Int!) {
        recentAcSubmissionList(username: $username, limit: $limit) {
            id
            title
            titleSlug
            timestamp
        }
    }
"""

def get_leetcode_headers():
    return {
        "User-Agent": "Mozilla/5.0 (Windows NT 10.0; Win64; x64) AppleWebKit/537.36 (KHTML, like Gecko) Chrome/91.0.4472.124 Safari/537.36",
        "Referer": "https://leetcode.com/problems/submissions/",
        "Content-Type": "application/json",
    }


async def _post_query(client: httpx.AsyncClient, graphql_query: dict) -> dict:
    response = await client.post(constants.LEETCODE_API_URL, json=graphql_query, headers=get_leetcode_headers())
    response.raise_for_status()
    return response.json()


async def get_leetcode_submissions(
    limit: int = constants.DEFAULT_LIMIT,
    client: Optional[httpx.AsyncClient] = None,
) -> List[LeetCodeSubmission]:
    """Fetches the most recent accepted LeetCode submissions, newest first.

    Returns an empty list on any remote failure; nothing is raised.
    """
    logger.info(f"Fetching LeetCode submissions (limit={limit})...")
    graphql_query = {
        "query": RECENT_AC_QUERY,
        "variables": {
            "username": config.LEETCODE_USERNAME,
            "limit": limit
        }
    }
    try:
        if client is None:
            async with httpx.AsyncClient(timeout=config.REQUEST_TIMEOUT) as own_client:
                data = await _post_query(own_client, graphql_query)
        else:
            data = await _post_query(client, graphql_query)

        body = LeetCodeResponse.model_validate(data)
        if body.errors:
            logger.error(f"LeetCode API returned an error: {body.errors}")
            return []

        raw = body.data.recentAcSubmissionList if body.data else None
        submissions = validate_records(raw or [], LeetCodeSubmission)
    except httpx.HTTPStatusError as e:
        logger.error(f"LeetCode API returned error status {e.response.status_code}: {e}")
        return []
    except httpx.RequestError as e:
        logger.error(f"An error occurred with LeetCode API: {e}")
        return []
    except ValidationError as e:
        logger.error(f"Unexpected LeetCode response: {e}")
        return []
    except ValueError as e:
        logger.error(f"LeetCode API returned malformed JSON: {e}")
        return []

    logger.info(f"Fetched {len(submissions)} LeetCode submissions.")
    return submissions
