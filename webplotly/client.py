# webplotly/client.py
from typing import Any, Dict, List, Optional

from .args import split_args
from .config import settings
from .constants import Keys, Origin
from .json_codec import DEFAULT_CODEC, JSONCodecConfig, encode
from .responses import interpret_response
from .transport import post_form
from .version import PLATFORM, __version__
from . import utils

logger = utils.setup_logger(__name__)


class Plotly:
    """
    Client for the plot.ly REST API.

    Usage::

        login = Plotly.signup("alice", "alice@example.com")
        py = Plotly("alice", login["api_key"])

        r = py.plot([1, 2, 3, 4], [10, 15, 13, 17], filename="demo")
        py.style({"type": "bar"})   # targets "demo", remembered from the plot response
        print(r["url"])

    Data calls take ``(*data, *flat_options, **options)``: leading lists, tuples,
    dicts and numpy arrays are data; the first plain scalar starts a flat
    key/value option list (see `webplotly.args.split_args`).

    The client remembers the `filename` returned by the server so that later
    style/layout calls modify the same plot. That state is plain instance
    data: use one client per thread.
    """

    platform = PLATFORM

    def __init__(
        self,
        un: str,
        key: str,
        fileopt: Optional[str] = None,
        filename: Optional[str] = None,
        verbose: bool = settings.DEFAULT_VERBOSE,
        codec: JSONCodecConfig = DEFAULT_CODEC,
    ):
        self.un = un
        self.key = key
        self.fileopt = fileopt
        self.filename = filename
        self.verbose = verbose
        self.codec = codec

    def __repr__(self) -> str:
        return f"Plotly(un={self.un!r}, filename={self.filename!r}, fileopt={self.fileopt!r})"

    @classmethod
    def version(cls) -> str:
        return __version__

    @classmethod
    def signup(cls, un: str, email: str, verbose: bool = True) -> Dict[str, Any]:
        """
        Creates a new account. The response holds `tmp_pw` (temporary password)
        and `api_key`, which is what the constructor needs.
        """
        payload = {
            Keys.Envelope.VERSION: cls.version(),
            Keys.Envelope.USERNAME: un,
            Keys.Envelope.EMAIL: email,
            Keys.Envelope.PLATFORM: cls.platform,
        }
        logger.debug(f"Signing up {un!r} ({Origin.SIGNUP})")
        content = post_form(settings.signup_url(), payload, codec=DEFAULT_CODEC)
        content = interpret_response(content, verbose=verbose, stacklevel=3)
        if content.get(Keys.Response.API_KEY) and content.get(Keys.Response.TMP_PW):
            logger.debug(f"Account {un!r} created; api key and temporary password received")
        return content

    # -------- data calls --------

    def plot(self, *args, **kwargs) -> Dict[str, Any]:
        """Sends data to be plotted and stored."""
        return self._call_wrap(Origin.PLOT, args, kwargs)

    def style(self, *args, **kwargs) -> Dict[str, Any]:
        """Styles the data traces sent with plot()."""
        return self._call_wrap(Origin.STYLE, args, kwargs)

    def layout(self, *args, **kwargs) -> Dict[str, Any]:
        """Customizes the layout, axes and legend."""
        return self._call_wrap(Origin.LAYOUT, args, kwargs)

    # -------- internals --------

    def make_payload(
        self,
        args: List[Any],
        un: Optional[str],
        key: Optional[str],
        origin: str,
        kwargs: Dict[str, Any],
    ) -> Dict[str, Any]:
        """Request envelope; `args` and `kwargs` go out as separate JSON strings."""
        return {
            Keys.Envelope.PLATFORM: self.platform,
            Keys.Envelope.VERSION: self.version(),
            Keys.Envelope.ARGS: encode(args, self.codec),
            Keys.Envelope.USERNAME: un,
            Keys.Envelope.API_KEY: key,
            Keys.Envelope.ORIGIN: origin,
            Keys.Envelope.KWARGS: encode(kwargs, self.codec),
        }

    def build_request(self, origin: str, args, kwargs=None) -> Dict[str, Any]:
        """Splits the call arguments, resolves credentials/defaults and returns the envelope."""
        data, options = split_args(args, kwargs)

        # Per-call credentials win, but are not forwarded as plot options
        un = options.pop(Keys.Envelope.USERNAME, None) or self.un
        key = options.pop(Keys.Envelope.API_KEY, None) or self.key

        # Falsy values ("" or None) fall back to the stored defaults
        options[Keys.Options.FILENAME] = options.get(Keys.Options.FILENAME) or self.filename
        options[Keys.Options.FILEOPT] = options.get(Keys.Options.FILEOPT) or self.fileopt

        return self.make_payload(data, un, key, origin, options)

    def _call_wrap(self, origin: str, args, kwargs) -> Dict[str, Any]:
        if origin not in Origin.DATA_CALLS:
            raise ValueError(f"Unknown data call origin: {origin!r}")
        payload = self.build_request(origin, args, kwargs)
        content = post_form(settings.clientresp_url(), payload, codec=self.codec)
        content = interpret_response(content, verbose=self.verbose, stacklevel=4)
        logger.debug(f"{origin} call answered, url={content.get(Keys.Response.URL)}")

        filename = content.get(Keys.Response.FILENAME)
        if filename:
            logger.debug(f"Remembering filename {filename!r} for later calls")
            self.filename = filename
        return content
