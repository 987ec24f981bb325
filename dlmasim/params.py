"""Reading of ``key=value`` parameter files."""

from __future__ import annotations

from os import PathLike


class ConfigurationError(Exception):
    """Raised when a parameter file is missing, unreadable or inconsistent."""


def split_string_by_delimiter(text: str, delimiter: str) -> list[str]:
    """Split ``text`` on ``delimiter``, dropping one trailing empty token.

    This matches reading tokens one by one up to each delimiter: an empty
    string yields no tokens and a trailing delimiter adds no empty token.
    """
    tokens = text.split(delimiter)
    if tokens and tokens[-1] == "":
        tokens.pop()
    return tokens


def read_key_values(path: str | PathLike[str]) -> dict[str, str]:
    """Read a parameter file into a mapping of keys to raw string values.

    Lines without a value are ignored; a key given twice keeps its last value.
    """
    try:
        with open(path, encoding="utf-8") as handle:
            lines = [line.rstrip("\n") for line in handle]
    except OSError as exc:
        raise ConfigurationError(
            "either file does not exist or does not have permissions"
        ) from exc

    values: dict[str, str] = {}
    for line in lines:
        tokens = split_string_by_delimiter(line, "=")
        if len(tokens) >= 2:
            values[tokens[0]] = tokens[1]
    return values