"""
Raw token table.

tokenize() turns invocation tokens (program path excluded) into a flat mapping
from bare argument name to its attached value:

    --verbose        → {"verbose": ""}
    --output=a.txt   → {"output": "a.txt"}
    -o=a.txt         → {"o": "a.txt"}

Dash stripping removes the first occurrence of "--" anywhere in the token, or
failing that the first "-". The value is everything after the first "=".
Later tokens overwrite earlier ones with the same key.
"""
from collections.abc import Iterable


def _strip(token):
    if "--" in token:
        return token.replace("--", "", 1)
    if "-" in token:
        return token.replace("-", "", 1)
    return token


def tokenize(tokens, /):
    """
    Build the raw argument table from invocation tokens.

    Parameters
    - tokens: Iterable[str]
      The invocation tokens without the program path.

    Returns
    - dict[str, str]: key → value, where "" means no value was attached.

    Raises
    - TypeError: when tokens is a plain string or holds a non-string item.
    """
    if isinstance(tokens, str) or not isinstance(tokens, Iterable):
        raise TypeError("tokenize() argument must be an iterable of strings")

    table = {}
    for token in tokens:
        if not isinstance(token, str):
            raise TypeError("tokenize() argument must be an iterable of strings")
        key, _, value = _strip(token).partition("=")
        table[key] = value
    return table


__all__ = (
    "tokenize",
)
