import os

import pytz
from dotenv import load_dotenv

load_dotenv()

def get_env_var(var_name, default=None):
    """Reads an environment variable, dropping inline comments and surrounding quotes."""
    value = os.getenv(var_name)
    if not value:
        return default
    value = value.partition("#")[0]
    return value.strip().strip("'\"").strip() or default

# Codeforces
CF_HANDLE = get_env_var("CF_HANDLE", "pritish_1")

# LeetCode
LEETCODE_USERNAME = get_env_var("LEETCODE_USERNAME", "pritish__mishraa")

# --- Page Settings ---
# Minutes east of UTC used to decide which submissions count as "today" (IST by default).
UTC_OFFSET_MINUTES = int(get_env_var("UTC_OFFSET_MINUTES", "330"))
OUTPUT_DIR = get_env_var("OUTPUT_DIR", "src/pages")
PAGE_LAYOUT = get_env_var("PAGE_LAYOUT", "../layouts/blogLayout.astro")
REQUEST_TIMEOUT = float(get_env_var("REQUEST_TIMEOUT", "30.0"))


def target_timezone():
    """The fixed-offset timezone every "today" comparison is made in."""
    return pytz.FixedOffset(UTC_OFFSET_MINUTES)
