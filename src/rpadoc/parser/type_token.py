"""Decoding of x:Property type tokens such as ``InArgument(x:String)``."""

from typing import Tuple

from rpadoc.errors import InvalidTypeTokenError, UsageError


def parse_argument_type(token: str) -> Tuple[str, str]:
    """Split an argument type token into its direction and type name.

    The direction is everything before the first ``(``; the type name is
    everything between the first ``:`` and the first ``)``. The namespace
    prefix is discarded and the direction is not validated here.

    Args:
        token: Value of the ``Type`` attribute, e.g. ``InArgument(sd:DataTable)``

    Returns:
        Tuple of (direction, type name), e.g. ``("InArgument", "DataTable")``

    Raises:
        UsageError: If the token is missing or not a string
        InvalidTypeTokenError: If the delimiters are missing or out of order
    """
    if not token or not isinstance(token, str):
        raise UsageError("argument type parameter is required and must be a string")

    open_index = token.find("(")
    colon_index = token.find(":")
    close_index = token.find(")")

    if open_index < 0 or colon_index < 0 or close_index < 0:
        raise InvalidTypeTokenError(token)
    if not open_index < colon_index < close_index:
        raise InvalidTypeTokenError(token)

    return token[:open_index], token[colon_index + 1:close_index]
