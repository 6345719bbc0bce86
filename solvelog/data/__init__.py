"""
Judge submission records for solvelog.
"""

from .models import (
    CodeforcesSubmission,
    LeetCodeSubmission,
    Member,
    Party,
    Problem
)
