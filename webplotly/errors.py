# webplotly/errors.py
from typing import Any, Optional


class PlotlyError(Exception):
    """Base class for everything this client raises on its own."""


class PlotlyHTTPError(PlotlyError):
    """
    The service answered with a non-success HTTP status.
    The raw `requests.Response` is kept on `.response`.
    """

    def __init__(self, status_code: int, body: str, response: Optional[Any] = None):
        super().__init__(f"Plotly request failed ({status_code}): {body}")
        self.status_code = status_code
        self.body = body
        self.response = response


class PlotlyServerError(PlotlyError):
    """The decoded response carried a truthy `error` field."""

    def __init__(self, error: Any, content: Optional[dict] = None):
        super().__init__(str(error))
        self.error = error
        self.content = content


class PlotlyArgumentError(PlotlyError, TypeError):
    pass


class PlotlyWarning(UserWarning):
    pass
