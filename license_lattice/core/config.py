import os
from dotenv import load_dotenv

load_dotenv()

# logging
LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO").upper()

# parsing: reject license identifiers that are not in the SPDX table
STRICT_PARSING = os.getenv("STRICT_PARSING", "true").strip().lower() not in {"0", "false", "no", "off"}

# api guard: comparisons with more distinct terms than this are refused
MAX_DISTINCT_TERMS = int(os.getenv("MAX_DISTINCT_TERMS", "12"))

# optional alternate JSON file with the license / exception / range tables
SPDX_DATA_PATH = os.getenv("SPDX_DATA_PATH")
