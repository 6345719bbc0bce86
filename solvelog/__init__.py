"""
solvelog: daily LeetCode and Codeforces submissions as a markdown page.
"""

__version__ = "0.1.0"
