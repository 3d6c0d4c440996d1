# webplotly/constants.py
"""
Request/response vocabulary shared across the client.

Import examples:
    from .constants import Origin, Keys
"""

from typing import Final, Set


# --------- Call origins ---------

class Origin:
    """Value of the `origin` envelope field; tells the server which call this is."""
    PLOT: Final[str] = "plot"
    STYLE: Final[str] = "style"
    LAYOUT: Final[str] = "layout"
    SIGNUP: Final[str] = "apimkacct"

    DATA_CALLS: Final[Set[str]] = {PLOT, STYLE, LAYOUT}


# --------- Keys (keep in one place so we don’t typo them) ---------

class Keys:
    class Envelope:
        PLATFORM: Final[str] = "platform"
        VERSION: Final[str] = "version"
        ARGS: Final[str] = "args"
        USERNAME: Final[str] = "un"
        API_KEY: Final[str] = "key"
        ORIGIN: Final[str] = "origin"
        KWARGS: Final[str] = "kwargs"
        EMAIL: Final[str] = "email"

    class Options:
        FILENAME: Final[str] = "filename"
        FILEOPT: Final[str] = "fileopt"

    class Response:
        URL: Final[str] = "url"
        FILENAME: Final[str] = "filename"
        MESSAGE: Final[str] = "message"
        WARNING: Final[str] = "warning"
        ERROR: Final[str] = "error"
        # signup only
        TMP_PW: Final[str] = "tmp_pw"
        API_KEY: Final[str] = "api_key"
