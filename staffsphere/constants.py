# --- Environment Constants ---
ENV_DEVELOPMENT = "development"
ENV_STAGING = "staging"
ENV_PRODUCTION = "production"
ENV_TESTING = "testing"
# --- End Environment Constants ---

# --- Auth Constants ---
JWT_ALGORITHM = "HS256"
DEFAULT_TOKEN_LIFETIME_SECONDS = 24 * 60 * 60  # one day
AUTH_COOKIE_NAME = "token"
BEARER_PREFIX = "Bearer "

# --- Employee Constants ---
DEFAULT_DEPARTMENT = "Not Assigned"
DEFAULT_JOB_TITLE = "Employee"

# --- Pagination Constants ---
DEFAULT_PAGE = 1
DEFAULT_PAGE_SIZE = 10

# --- Performance Constants ---
MIN_REVIEW_RATING = 1
MAX_REVIEW_RATING = 5
DEFAULT_REVIEW_RATING = 3
DEFAULT_REVIEWER = "System"

# --- Dashboard Constants ---
TOP_EMPLOYEES_LIMIT = 5
