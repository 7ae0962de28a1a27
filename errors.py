"""Exceptions raised while parsing arguments and reading directories."""


class ListingError(Exception):
    """Base class for every error tinyls reports."""


class ArgumentParseError(ListingError):
    pass


class DirectoryReadError(ListingError):
    def __init__(self, directory: str, cause: OSError):
        super().__init__(f"{directory}: {cause.strerror or cause}")
        self.directory = directory
        self.cause = cause


class MetadataReadError(ListingError):
    def __init__(self, path: str, cause: OSError):
        super().__init__(f"cannot read metadata of {path}: {cause.strerror or cause}")
        self.path = path
        self.cause = cause


class UnknownOwner(ListingError, KeyError):
    """The numeric owner id has no entry in the user database."""

    def __init__(self, uid: int):
        super().__init__(f"no user name for uid {uid}")
        self.uid = uid

    def __str__(self) -> str:
        # KeyError.__str__ would repr() the message
        return self.args[0]
