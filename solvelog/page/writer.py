import logging
import os
from pathlib import Path
from typing import Optional

from ..config import settings as config

logger = logging.getLogger(__name__)


def write_markdown(markdown: str, date_string: str, output_dir: Optional[str] = None) -> Optional[Path]:
    """
    Writes the page to <output_dir>/<date_string>.md, replacing any existing file.
    Returns the path, or None if the write failed.
    """
    file_path = Path(output_dir or config.OUTPUT_DIR) / f"{date_string}.md"
    try:
        os.makedirs(file_path.parent, exist_ok=True)
        file_path.write_text(markdown, encoding="utf-8")
    except OSError as e:
        logger.error(f"Error generating markdown file: {e}")
        return None

    logger.info(f"Markdown file successfully generated at {file_path}")
    return file_path
