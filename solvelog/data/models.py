"""Pydantic models for the judge submission payloads."""

import logging
from typing import Any, Dict, List, Optional, Type, TypeVar

from pydantic import BaseModel, ConfigDict, Field, ValidationError

from ..config import constants

logger = logging.getLogger(__name__)


class Record(BaseModel):
    """Base for judge records: immutable once validated, unknown fields ignored."""
    model_config = ConfigDict(frozen=True, extra="ignore")


class LeetCodeSubmission(Record):
    """One entry of LeetCode's recentAcSubmissionList."""
    id: str
    title: str
    titleSlug: str
    timestamp: int
    "Acceptance time in unix seconds. LeetCode sends it as a string."

    @property
    def url(self) -> str:
        return f"https://leetcode.com/problems/{self.titleSlug}/"


class Problem(Record):
    contestId: Optional[int] = None
    index: str
    name: str
    type: str
    points: Optional[float] = None
    rating: Optional[int] = None
    tags: List[str] = Field(default_factory=list)


class Member(Record):
    handle: str
    name: Optional[str] = None


class Party(Record):
    contestId: Optional[int] = None
    members: List[Member]
    participantType: str
    ghost: bool
    room: Optional[int] = None
    startTimeSeconds: Optional[int] = None


class CodeforcesSubmission(Record):
    """One entry of the Codeforces user.status result list."""
    id: int
    contestId: Optional[int] = None
    creationTimeSeconds: int
    relativeTimeSeconds: Optional[int] = None
    problem: Problem
    author: Party
    programmingLanguage: str
    verdict: Optional[str] = None
    "Absent while the submission is still being tested."

    @property
    def url(self) -> str:
        contest_id = self.contestId if self.contestId is not None else self.problem.contestId
        return f"https://codeforces.com/contest/{contest_id}/problem/{self.problem.index}"

    @property
    def verdict_label(self) -> str:
        return self.verdict or constants.PENDING_VERDICT


class LeetCodeResponse(BaseModel):
    """GraphQL envelope; records stay raw so each can be validated on its own."""

    class Data(BaseModel):
        recentAcSubmissionList: Optional[List[Dict[str, Any]]] = None

    data: Optional[Data] = None
    errors: Optional[Any] = None


class CodeforcesResponse(BaseModel):
    status: str
    comment: Optional[str] = None
    result: Optional[List[Dict[str, Any]]] = None


R = TypeVar("R", bound=Record)


def validate_records(raw: List[Dict[str, Any]], model: Type[R]) -> List[R]:
    """Validates each entry separately, logging and skipping the ones that don't fit ``model``."""
    records = []
    for entry in raw:
        try:
            records.append(model.model_validate(entry))
        except ValidationError as e:
            logger.warning(f"Skipping malformed {model.__name__} {entry.get('id')}: {e}")
    return records
