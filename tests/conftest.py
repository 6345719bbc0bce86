from datetime import datetime, timezone

import pytest

from solvelog.data.models import CodeforcesSubmission, LeetCodeSubmission

# 12:00 on Mon Oct 19 2026 in UTC+05:30
NOW = datetime(2026, 10, 19, 6, 30, tzinfo=timezone.utc)
NOW_TS = int(NOW.timestamp())
YESTERDAY_TS = NOW_TS - 24 * 60 * 60


def make_leetcode(i: int, timestamp: int) -> LeetCodeSubmission:
    return LeetCodeSubmission(
        id=str(1000 + i),
        title=f"Problem {i}",
        titleSlug=f"problem-{i}",
        timestamp=timestamp,
    )


def make_codeforces(i: int, timestamp: int, verdict: str = "OK") -> CodeforcesSubmission:
    return CodeforcesSubmission.model_validate(codeforces_payload(i, timestamp, verdict))


def codeforces_payload(i: int, timestamp: int, verdict: str = "OK") -> dict:
    return {
        "id": 200000 + i,
        "contestId": 1900 + i,
        "creationTimeSeconds": timestamp,
        "relativeTimeSeconds": 2147483647,
        "problem": {
            "contestId": 1900 + i,
            "index": "A",
            "name": f"Task {i}",
            "type": "PROGRAMMING",
            "points": 500.0,
            "rating": 800,
            "tags": ["implementation"],
        },
        "author": {
            "contestId": 1900 + i,
            "members": [{"handle": "pritish_1"}],
            "participantType": "PRACTICE",
            "ghost": False,
            "startTimeSeconds": 1700000000,
        },
        "programmingLanguage": "C++17 (GCC 7-32)",
        "verdict": verdict,
        "testset": "TESTS",
        "passedTestCount": 12,
        "timeConsumedMillis": 46,
        "memoryConsumedBytes": 102400,
    }


class FakeSource:
    """Judge stand-in returning the newest ``limit`` records and recording each limit asked for."""

    def __init__(self, records):
        self.records = list(records)
        self.calls = []

    async def __call__(self, limit):
        self.calls.append(limit)
        return self.records[:limit]


def leetcode_history(today_count: int, older_count: int):
    """Newest-first LeetCode history: ``today_count`` records from today, then older ones."""
    todays = [make_leetcode(i, NOW_TS - i * 60) for i in range(today_count)]
    older = [make_leetcode(today_count + i, YESTERDAY_TS - i * 60) for i in range(older_count)]
    return todays + older


def codeforces_history(today_count: int, older_count: int):
    todays = [make_codeforces(i, NOW_TS - i * 60) for i in range(today_count)]
    older = [make_codeforces(today_count + i, YESTERDAY_TS - i * 60, "WRONG_ANSWER") for i in range(older_count)]
    return todays + older


class RecordingLogger:
    def __init__(self):
        self.messages = []

    def info(self, msg, *args):
        self.messages.append(("info", msg))

    def warning(self, msg, *args):
        self.messages.append(("warning", msg))

    def error(self, msg, *args):
        self.messages.append(("error", msg))


@pytest.fixture
def recording_logger():
    return RecordingLogger()
