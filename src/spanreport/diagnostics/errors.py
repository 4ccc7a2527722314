"""spanreport exception hierarchy.

Contract violations (a label pointing outside its source, an unknown source
id, a line number that does not exist) abort the current render call. A
wrong position silently mis-points at unrelated code, so nothing here is
ever clamped or guessed.

Python 3.13+. Zero external dependencies.
"""

__all__ = [
    "ContractViolationError",
    "LineOutOfRangeError",
    "OffsetOutOfRangeError",
    "RegistryError",
    "SpanReportError",
    "UnknownSourceError",
]


class SpanReportError(Exception):
    """Base exception for all spanreport errors."""


class ContractViolationError(SpanReportError):
    """Caller passed a position or identifier that does not exist.

    Fatal to the render call in progress. There is no partial or degraded
    rendering mode.
    """


class OffsetOutOfRangeError(ContractViolationError):
    """Byte offset outside its source, or inside a multi-byte character.

    Attributes:
        offset: The offending byte offset
        limit: Length of the source content in bytes
    """

    def __init__(self, message: str, *, offset: int, limit: int) -> None:
        """Initialize OffsetOutOfRangeError.

        Args:
            message: Error message
            offset: The offending byte offset
            limit: Length of the source content in bytes
        """
        super().__init__(message)
        self.offset = offset
        self.limit = limit


class LineOutOfRangeError(ContractViolationError):
    """Line number is zero or greater than the source's line count.

    Attributes:
        line: The offending 1-based line number
        line_count: Number of lines in the source
    """

    def __init__(self, message: str, *, line: int, line_count: int) -> None:
        """Initialize LineOutOfRangeError.

        Args:
            message: Error message
            line: The offending 1-based line number
            line_count: Number of lines in the source
        """
        super().__init__(message)
        self.line = line
        self.line_count = line_count


class UnknownSourceError(ContractViolationError, LookupError):
    """Source id was never registered with the SourceStore.

    Attributes:
        source_id: The unknown id
    """

    def __init__(self, message: str, *, source_id: int) -> None:
        super().__init__(message)
        self.source_id = source_id


class RegistryError(SpanReportError):
    """Registry installed twice, or used before installation.

    A programming error at the call site, not a runtime condition to
    recover from.
    """
