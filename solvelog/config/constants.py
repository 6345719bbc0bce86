# API URLs
CODEFORCES_API_URL = "https://codeforces.com/api"
LEETCODE_API_URL = "https://leetcode.com/graphql/"

# Submission window
DEFAULT_LIMIT = 10
LIMIT_STEP = 10

# Fallback label for Codeforces submissions still being judged
PENDING_VERDICT = "TESTING"
