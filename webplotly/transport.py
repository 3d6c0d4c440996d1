# webplotly/transport.py
from typing import Any, Dict, Optional

import requests

from .config import settings
from .errors import PlotlyError, PlotlyHTTPError
from .json_codec import DEFAULT_CODEC, JSONCodecConfig, decode
from . import utils

logger = utils.setup_logger(__name__)


def post_form(
    url: str,
    payload: Dict[str, Any],
    codec: JSONCodecConfig = DEFAULT_CODEC,
    timeout: Optional[float] = settings.REQUEST_TIMEOUT,
) -> Dict[str, Any]:
    """
    POSTs `payload` as form fields and returns the decoded JSON body.

    Raises:
        PlotlyHTTPError: the status is not 2xx (raw response attached).
        json.JSONDecodeError: the body is not JSON.
        PlotlyError: the body is JSON but not an object.
    Network failures from requests propagate untouched.
    """
    logger.debug(f"POST {url} origin={payload.get('origin')} platform={payload.get('platform')}")
    r = requests.post(url, data=payload, timeout=timeout)

    if r.status_code < 200 or r.status_code >= 300:
        logger.debug(f"POST {url} failed ({r.status_code}): {utils.truncate(r.text)}")
        raise PlotlyHTTPError(r.status_code, r.text, response=r)

    body = r.content.decode("utf-8") if codec.utf8 else r.text
    content = decode(body)
    if not isinstance(content, dict):
        raise PlotlyError(f"Expected a JSON object from {url}, got {type(content).__name__}")
    return content
