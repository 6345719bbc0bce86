import logging
from typing import List, Optional

import httpx
from pydantic import ValidationError

from ..config import settings as config
from ..config import constants
from ..data.models import CodeforcesResponse, CodeforcesSubmission, validate_records

logger = logging.getLogger(__name__)


async def _get_status(client: httpx.AsyncClient, params: dict) -> dict:
    response = await client.get(constants.CODEFORCES_API_URL + "/user.status", params=params)
    response.raise_for_status()
    return response.json()


async def get_codeforces_submissions(
    limit: int = constants.DEFAULT_LIMIT,
    client: Optional[httpx.AsyncClient] = None,
) -> List[CodeforcesSubmission]:
    """Fetches the most recent Codeforces submissions of any verdict, newest first.

    Returns an empty list on any remote failure; nothing is raised.
    """
    logger.info(f"Fetching Codeforces submissions (count={limit})...")
    params = {
        "handle": config.CF_HANDLE,
        "from": 1,
        "count": limit,
    }
    try:
        if client is None:
            async with httpx.AsyncClient(timeout=config.REQUEST_TIMEOUT) as own_client:
                data = await _get_status(own_client, params)
        else:
            data = await _get_status(client, params)

        body = CodeforcesResponse.model_validate(data)
        if body.status != "OK":
            logger.warning(f"Codeforces API returned status: {body.comment}")
            return []

        submissions = validate_records(body.result or [], CodeforcesSubmission)
    except httpx.HTTPStatusError as e:
        logger.error(f"Codeforces API returned error status {e.response.status_code}: {e}")
        return []
    except httpx.RequestError as e:
        logger.error(f"An error occurred with Codeforces API: {e}")
        return []
    except ValidationError as e:
        logger.error(f"Unexpected Codeforces response: {e}")
        return []
    except ValueError as e:
        logger.error(f"Codeforces API returned malformed JSON: {e}")
        return []

    logger.info(f"Fetched {len(submissions)} Codeforces submissions.")
    return submissions
