"""Read directory entries and their metadata into Pydantic models."""

import logging
import os
import stat

from errors import DirectoryReadError, MetadataReadError
from models import Configuration, DirectoryEntry, EntryMetadata
from owners import OwnerResolver, owner_name

logger = logging.getLogger(__name__)


def is_hidden(name: str) -> bool:
    return name.startswith(".")


def collect_metadata(path: str, resolver: OwnerResolver) -> EntryMetadata:
    """Stat a single path for long-mode display."""
    try:
        st = os.stat(path)
    except OSError as e:
        raise MetadataReadError(path, e) from e

    return EntryMetadata(
        mode=st.st_mode,
        is_directory=stat.S_ISDIR(st.st_mode),
        uid=st.st_uid,
        owner=owner_name(resolver, st.st_uid),
        size=st.st_size,
        mtime=st.st_mtime,
    )


def read_children(directory: str) -> list[DirectoryEntry]:
    """List the immediate children of directory, sorted by path."""
    entries = []
    try:
        with os.scandir(directory) as it:
            for e in it:
                path = os.path.join(directory, e.name)
                entries.append(
                    DirectoryEntry(name=e.name, path=path, is_directory=e.is_dir())
                )
    except OSError as e:
        raise DirectoryReadError(directory, e) from e

    logger.debug("read %d entries from %s", len(entries), directory)
    return sorted(entries, key=lambda entry: entry.path)


def pseudo_entries(directory: str) -> list[DirectoryEntry]:
    """The "." and ".." entries shown with the a flag."""
    logger.debug("adding . and .. for %s", directory)
    return [
        DirectoryEntry(name=".", path=directory, is_directory=True),
        DirectoryEntry(name="..", path=os.path.join(directory, ".."), is_directory=True),
    ]


def collect_directory(
    directory: str, config: Configuration, resolver: OwnerResolver
) -> list[DirectoryEntry]:
    """Collect the entries to display for one directory, in display order."""
    entries = read_children(directory)

    if config.show_hidden:
        entries = pseudo_entries(directory) + entries
    else:
        entries = [entry for entry in entries if not is_hidden(entry.name)]

    if config.long_format:
        for entry in entries:
            entry.metadata = collect_metadata(entry.path, resolver)

    return entries
