"""Constants for mock generation."""

from datetime import timedelta

# Default integer window when a numeric bound is missing
DEFAULT_INT_RANGE = (0, 9999)

# Default text length window when a length bound is missing
DEFAULT_TEXT_LENGTH = (1, 20)

# Length of fallback text samples
FALLBACK_TEXT_LENGTH = 10

# Recent dates are drawn from the last day
RECENT_DATE_WINDOW = "-1d"

# Binary fields get this many random bytes
BINARY_LENGTH = 16

# Digits of generated big integers
BIGINT_DIGITS = 18

# 24 hex characters, the width of a document-database object id
OBJECT_ID_TEMPLATE = "^" * 24

# Default nesting depth before generation fails
DEFAULT_MAX_DEPTH = 32

# Separator between segments of a dotted field path
PATH_SEPARATOR = "."

# Span used for the open side of a date window with a single bound
DEFAULT_DATE_SPAN = timedelta(days=365 * 30)
