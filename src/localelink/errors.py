"""localelink exception hierarchy.

Shared across the config loader, URL parsing, the resolver, and the
link shell so every module raises and catches the same types.
"""


class LocaleLinkError(Exception):
    """Base for all localelink-specific errors."""


class ConfigurationError(LocaleLinkError):
    """Raised when locale configuration is invalid.

    Only the config loader raises this. The policy and resolver trust
    the ``LocaleConfig`` they are handed.
    """


class DestinationError(LocaleLinkError, TypeError):
    """Raised when a link destination is neither a string nor an href mapping.

    Also a ``TypeError`` so callers that already guard against bad
    argument types keep working.
    """

    def __init__(self, value: object, detail: str = "") -> None:
        self.value = value
        message = detail or (
            f"Link destination must be a string or a mapping with 'pathname' "
            f"and 'query', got {type(value).__name__}: {value!r}"
        )
        super().__init__(message)
