"""Split raw process arguments into directories and single-character flags."""

from typing import Sequence

from errors import ArgumentParseError
from models import Configuration


def classify(argv: Sequence[str]) -> Configuration:
    """Build a Configuration from argv (program name first).

    Tokens starting with "-" contribute each following character as a flag,
    so "-la" yields {"l", "a"}. Every other token, "." included, is a
    directory. With no directory tokens the current directory is listed.
    """
    directories: list[str] = []
    flags: set[str] = set()

    for position, token in enumerate(argv[1:], start=1):
        if not token:
            raise ArgumentParseError(f"argument {position} is empty")
        if token[0] == "-":
            flags.update(token[1:])
        else:
            directories.append(token)

    return Configuration(directories=directories or ["."], flags=flags)
