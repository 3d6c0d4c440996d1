# webplotly/responses.py
import warnings
from typing import Any, Dict

from .constants import Keys
from .errors import PlotlyServerError, PlotlyWarning
from . import utils

logger = utils.setup_logger(__name__)


def interpret_response(
    content: Dict[str, Any],
    verbose: bool = True,
    stacklevel: int = 2,
) -> Dict[str, Any]:
    """
    Applies the service's response conventions to a decoded body:

    - `error`   -> raises PlotlyServerError carrying the value verbatim
    - `warning` -> warnings.warn(..., PlotlyWarning), whatever `verbose` says
    - `message` -> printed to stdout, only when `verbose`

    `stacklevel` is passed to warnings.warn; callers wrapping this function
    add their own frames so the warning points at user code.

    Returns `content` unchanged.
    """
    error = content.get(Keys.Response.ERROR)
    if error:
        logger.debug(f"Server reported an error: {error}")
        raise PlotlyServerError(error, content)

    warning = content.get(Keys.Response.WARNING)
    if warning:
        logger.info(f"Server warning: {warning}")
        warnings.warn(str(warning), PlotlyWarning, stacklevel=stacklevel)

    message = content.get(Keys.Response.MESSAGE)
    if message and verbose:
        print(message)

    return content
