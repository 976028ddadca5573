"""Error taxonomy for tool operations.

Every failure a tool can report derives from ``SearchScapeError``; the
dispatcher converts these into error results instead of letting them escape.
"""


class SearchScapeError(Exception):
    """Base class for errors reported back to the tool caller."""

    kind = "error"


class ToolValidationError(SearchScapeError):
    """A required argument is missing or has an unrecognized value."""

    kind = "validation"


class UpstreamError(SearchScapeError):
    """An external API returned a non-success status or a malformed body."""

    kind = "upstream"


class PreconditionError(SearchScapeError):
    """The operation needs state that has not been established yet."""

    kind = "precondition"


class ConfigurationError(SearchScapeError):
    """A provider cannot be created, usually because an API key is not set."""

    kind = "configuration"
