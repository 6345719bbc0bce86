"""
Markdown page output for solvelog.
"""

from .markdown import format_date_string, render_markdown
from .writer import write_markdown
