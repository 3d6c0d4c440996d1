# webplotly/args.py
from typing import Any, Dict, List, Optional, Sequence, Tuple

from .errors import PlotlyArgumentError
from .json_codec import is_compound


def split_args(
    args: Sequence[Any],
    kwargs: Optional[Dict[str, Any]] = None,
) -> Tuple[List[Any], Dict[str, Any]]:
    """
    Splits a data call's positional arguments into (data, options).

    Positional arguments are slurped into `data` while they are compound values
    (lists, tuples, mappings, numpy arrays). The first plain scalar ends the data
    portion: it and everything after it are read as a flat key, value, key, value
    list. So all of these are equivalent:

        split_args([x0, y0, x1, y1])
        split_args([[x0, y0, x1, y1]])   -> data is the single list-of-lists
        split_args([x0, y0, "filename", "f"])  == split_args([x0, y0], {"filename": "f"})

    Native keyword arguments are merged over the flat tail.
    """
    data: List[Any] = []
    i = 0
    while i < len(args) and is_compound(args[i]):
        data.append(args[i])
        i += 1

    tail = list(args[i:])
    if len(tail) % 2:
        raise PlotlyArgumentError(
            f"Options after the data must come in key/value pairs, got {len(tail)} item(s): {tail!r}"
        )

    options: Dict[str, Any] = {}
    for key, value in zip(tail[0::2], tail[1::2]):
        if not isinstance(key, str):
            raise PlotlyArgumentError(f"Option names must be strings, got {type(key).__name__}: {key!r}")
        options[key] = value

    if kwargs:
        options.update(kwargs)
    return data, options
