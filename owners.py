"""Resolve numeric owner ids to user names."""

import logging
import pwd
from typing import Protocol

from errors import UnknownOwner

logger = logging.getLogger(__name__)


class OwnerResolver(Protocol):
    """Maps a numeric uid to a user name, raising UnknownOwner if it can't."""

    def resolve(self, uid: int) -> str: ...


class PasswdOwnerResolver:
    """Looks owners up in the system user database."""

    def resolve(self, uid: int) -> str:
        try:
            return pwd.getpwuid(uid).pw_name
        except KeyError:
            raise UnknownOwner(uid) from None


def owner_name(resolver: OwnerResolver, uid: int) -> str:
    """Resolve uid, falling back to the number itself."""
    try:
        return resolver.resolve(uid)
    except UnknownOwner as e:
        logger.warning("%s, showing numeric id", e)
        return str(uid)
