"""Client for the plot.ly REST API."""

from .client import Plotly
from .errors import (
    PlotlyArgumentError,
    PlotlyError,
    PlotlyHTTPError,
    PlotlyServerError,
    PlotlyWarning,
)
from .json_codec import JSONCodecConfig
from .version import __version__

__all__ = [
    "Plotly",
    "JSONCodecConfig",
    "PlotlyError",
    "PlotlyHTTPError",
    "PlotlyServerError",
    "PlotlyArgumentError",
    "PlotlyWarning",
    "__version__",
]
