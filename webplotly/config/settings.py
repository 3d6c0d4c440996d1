import os
from typing import Optional


# --- small helpers for env parsing ---
def _env_float(name: str, default: Optional[float]) -> Optional[float]:
    v = os.getenv(name)
    if v is None or not v.strip():
        return default
    try:
        return float(v)
    except ValueError:
        return default


# --- Service endpoints (fixed) ---
BASE_URL = "https://plot.ly"
SIGNUP_PATH = "/apimkacct"
CLIENTRESP_PATH = "/clientresp"

# --- Client defaults ---
# Whether server `message` fields are printed to stdout
DEFAULT_VERBOSE = True

# --- JSON codec defaults ---
JSON_UTF8 = True
JSON_CANONICAL_KEYS = True

# --- Operational knobs (read from the process environment only) ---
# None leaves the timeout to requests (blocks until the server answers)
REQUEST_TIMEOUT = _env_float("PLOTLY_REQUEST_TIMEOUT", None)

LOG_LEVEL = os.getenv("LOG_LEVEL", "WARNING")  # options: DEBUG, INFO, WARNING, ERROR


def signup_url() -> str:
    return BASE_URL + SIGNUP_PATH


def clientresp_url() -> str:
    return BASE_URL + CLIENTRESP_PATH


if __name__ == "__main__":
    # Quick sanity check
    print(f"Signup endpoint: {signup_url()}")
    print(f"Data endpoint: {clientresp_url()}")
    print(f"Request timeout: {REQUEST_TIMEOUT}")
    print(f"Log level: {LOG_LEVEL}")
