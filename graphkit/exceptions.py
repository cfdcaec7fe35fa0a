"""
Exception hierarchy for graphkit.

Everything raised on purpose by the package derives from GraphkitError.
"""


class GraphkitError(Exception):
    """Base class for all graphkit errors."""


class EmptyQueueError(GraphkitError, IndexError):
    """Raised when popping or peeking an empty PriorityQueue."""


class GraphError(GraphkitError):
    """A graph operation was asked to break one of the graph's rules."""


class GraphFormatError(GraphError, ValueError):
    """A line of graph text could not be tokenized."""

    def __init__(self, message: str, line_number: int | None = None) -> None:
        self.line_number = line_number
        if line_number is not None:
            message = f"line {line_number}: {message}"
        super().__init__(message)
