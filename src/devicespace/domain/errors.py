from __future__ import annotations

"""
Domain Error Taxonomy.

Every structural failure raised while parsing a command transcript or
navigating the reconstructed tree derives from DeviceSpaceError, so the
solver engine can catch one family and turn it into a failed result.
"""


class DeviceSpaceError(Exception):
    """Base class for all solver domain errors."""


class CommandSyntaxError(DeviceSpaceError):
    """
    A command block or listing entry matched none of the known grammars.

    Attributes:
        text: The offending (trimmed) input text.
    """

    def __init__(self, message: str, text: str) -> None:
        super().__init__(f"{message}: \"{text}\"")
        self.text = text


class EntryNotFoundError(DeviceSpaceError):
    """
    Navigation referenced a child name absent from the current directory.

    Attributes:
        name: The missing child name.
    """

    def __init__(self, name: str) -> None:
        super().__init__(f"attempted to access non-existent entry '{name}'")
        self.name = name


class EntryTypeError(DeviceSpaceError):
    """
    A directory-only operation was performed on a file node, or a cursor
    was asked to rest on a file.

    Attributes:
        operation: Name of the rejected operation.
    """

    def __init__(self, operation: str) -> None:
        super().__init__(
            f"'{operation}' performed on wrong type of entry (file vs directory)"
        )
        self.operation = operation
