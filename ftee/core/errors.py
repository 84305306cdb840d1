"""Error taxonomy for ftee runs.

Every error here is run-fatal. The run driver annotates an error with the
input file and line number it came from before it propagates, so the
message tells the user exactly where the run stopped.
"""

from __future__ import annotations


class FteeError(RuntimeError):
    """Base class for every error that aborts an ftee run."""

    def __init__(self, message: str) -> None:
        super().__init__(message)
        self.message = message
        self.source: str | None = None
        self.line_number: int | None = None

    def locate(self, source: str, line_number: int | None = None) -> FteeError:
        """Record where the error happened, keeping any earlier location."""
        if self.source is None:
            self.source = source
            self.line_number = line_number
        return self

    def __str__(self) -> str:
        if self.source is None:
            return self.message
        if self.line_number is None:
            return f"Error processing {self.source}: {self.message}"
        return f"Error processing {self.source} (line {self.line_number}): {self.message}"


class MalformedDirectiveError(FteeError):
    """A line mentions the delimiter but is not a valid directive."""

    def __init__(self, message: str, delimiter: str) -> None:
        super().__init__(message)
        self.delimiter = delimiter


class UnboundedDelimiterError(MalformedDirectiveError):
    """The delimiter text appears, but never as a standalone field."""

    def __init__(self, delimiter: str) -> None:
        super().__init__(f"Delimiter {delimiter} must be surrounded by whitespace", delimiter)


class MultipleDelimitersError(MalformedDirectiveError):
    """The delimiter appears as a standalone field more than once."""

    def __init__(self, delimiter: str) -> None:
        super().__init__(f"Found more than one delimiter {delimiter} in line.", delimiter)


class MissingTargetsError(MalformedDirectiveError):
    """The delimiter is not followed by any destination name."""

    def __init__(self, delimiter: str) -> None:
        super().__init__(f"No file names found after delimiter {delimiter}", delimiter)


class InputOpenError(FteeError):
    """An input file could not be opened for reading."""

    def __init__(self, path: str, reason: str) -> None:
        super().__init__(f"Couldn't open input file: {reason}")
        self.path = path


class ReadError(FteeError):
    """An input stream failed mid-read."""


class DestinationCreateError(FteeError):
    """An output file could not be created or truncated."""

    def __init__(self, name: str, reason: str) -> None:
        super().__init__(f"Couldn't create output file {name}: {reason}")
        self.name = name


class WriteError(FteeError):
    """Writing to, flushing or closing an output file failed."""

    def __init__(self, name: str, reason: str) -> None:
        super().__init__(f"Couldn't write output file {name}: {reason}")
        self.name = name
