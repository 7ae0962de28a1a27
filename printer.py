"""Render directory listings, optionally in long format, to a text stream."""

import stat
from datetime import datetime, timezone
from typing import Optional, Sequence, TextIO

from collector import collect_directory
from models import Configuration, DirectoryEntry, EntryMetadata
from owners import OwnerResolver, PasswdOwnerResolver

RESET = "\x1b[0m"
BLUE = "\x1b[34;1m"
MAGENTA = "\x1b[35;1m"
YELLOW = "\x1b[33;1m"
GREEN = "\x1b[32;1m"
CYAN = "\x1b[36;1m"

# Owner, group, other; each read, write, execute
PERMISSION_BITS = (
    (stat.S_IRUSR, "r"),
    (stat.S_IWUSR, "w"),
    (stat.S_IXUSR, "x"),
    (stat.S_IRGRP, "r"),
    (stat.S_IWGRP, "w"),
    (stat.S_IXGRP, "x"),
    (stat.S_IROTH, "r"),
    (stat.S_IWOTH, "w"),
    (stat.S_IXOTH, "x"),
)

SIZE_UNITS = (("k", 1000), ("M", 1000**2), ("G", 1000**3), ("T", 1000**4))

MONTHS = ("Jan", "Feb", "Mar", "Apr", "May", "Jun",
          "Jul", "Aug", "Sep", "Oct", "Nov", "Dec")


def paint(text: str, code: str, color: bool) -> str:
    return f"{code}{text}{RESET}" if color else text


def displayable(text: str) -> str:
    """Replace undecodable filename bytes (surrogate escapes) with U+FFFD."""
    return text.encode("utf-8", "surrogateescape").decode("utf-8", "replace")


def format_permissions(mode: int, is_directory: bool) -> str:
    """Convert a numeric mode to a permission string such as -rw-r--r--."""
    type_char = "d" if is_directory else "-"
    bits = "".join(symbol if mode & bit else "-" for bit, symbol in PERMISSION_BITS)
    return f"{type_char}{bits}"


def format_size(
    size_bytes: int, units: Sequence[tuple[str, int]] = SIZE_UNITS
) -> str:
    """Scale a byte count to the largest decimal unit it reaches.

    Unscaled counts are right-aligned in five columns plus a trailing space.
    """
    for suffix, unit_size in reversed(units):
        if size_bytes >= unit_size:
            return f"{size_bytes / unit_size:.3f}{suffix}"

    return f"{size_bytes:>5} "


def format_timestamp(timestamp: float) -> str:
    """Format as e.g. "2021 Feb  6 07:08:09" in UTC."""
    dt = datetime.fromtimestamp(timestamp, tz=timezone.utc)
    return f"{dt.year} {MONTHS[dt.month - 1]} {dt.day:>2} {dt:%H:%M:%S}"


def format_name(entry: DirectoryEntry, config: Configuration, color: bool) -> str:
    if not entry.is_directory:
        return displayable(entry.name)
    suffix = "/" if config.mark_directories else ""
    return paint(f"{displayable(entry.name)}{suffix}", BLUE, color)


def format_metadata(metadata: EntryMetadata, color: bool) -> str:
    """The long-mode columns that precede an entry's name."""
    fields = [
        paint(format_permissions(metadata.mode, metadata.is_directory), MAGENTA, color),
        paint(displayable(metadata.owner), YELLOW, color),
        paint(format_size(metadata.size), GREEN, color),
        paint(format_timestamp(metadata.mtime), CYAN, color),
    ]
    return " ".join(fields)


def write_entries(
    directory: str,
    config: Configuration,
    sink: TextIO,
    resolver: OwnerResolver,
    color: bool,
) -> None:
    entries = collect_directory(directory, config, resolver)

    if config.long_format:
        for entry in entries:
            sink.write(
                f"{format_metadata(entry.metadata, color)} "
                f"{format_name(entry, config, color)}\n"
            )
        return

    for entry in entries:
        sink.write(f"{format_name(entry, config, color)}  ")
    sink.write("\n")


def render(
    config: Configuration,
    sink: TextIO,
    *,
    resolver: Optional[OwnerResolver] = None,
    color: bool = True,
) -> None:
    """Write the listing of every configured directory to sink.

    Raises DirectoryReadError or MetadataReadError; output already written
    for earlier directories stays written.
    """
    if resolver is None:
        resolver = PasswdOwnerResolver()

    last = len(config.directories) - 1
    for i, directory in enumerate(config.directories):
        if last > 0:
            sink.write(f"{displayable(directory)}:\n")

        write_entries(directory, config, sink, resolver, color)

        if i < last:
            sink.write("\n")
