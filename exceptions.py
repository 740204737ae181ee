class OpticsError(Exception):
    """Base class for every error raised by the OPTICS toolkit."""


class ParseError(OpticsError):
    """A text or CSV input record could not be turned into a point."""

    def __init__(self, line_number, line, reason):
        self.line_number = line_number
        self.line = line
        self.reason = reason
        super().__init__(f"line {line_number}: {reason} ({line!r})")


class DuplicateIdentifierError(OpticsError):
    """Two input records share the same identifier."""

    def __init__(self, identifier):
        self.identifier = identifier
        super().__init__(f"duplicate point identifier {identifier!r}")


class InvalidConfigurationError(OpticsError):
    """min_pts or epsilon is out of range."""


class OpticsCancelled(OpticsError):
    """The run was cancelled between two point expansions.

    ``ordering`` holds the entries produced before the cancellation was seen.
    """

    def __init__(self, ordering):
        self.ordering = ordering
        super().__init__(f"OPTICS run cancelled after {len(ordering)} points")
