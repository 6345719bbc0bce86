"""
External judge integrations for solvelog.
"""

from .codeforces import get_codeforces_submissions
from .leetcode import get_leetcode_submissions
