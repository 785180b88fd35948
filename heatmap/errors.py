# errors.py
# Exceptions raised by the pipeline. The CLI reports str(e) and exits.


class HeatmapError(Exception):
    """Base class for every failure that aborts a run."""


class InputReadError(HeatmapError):
    """The readings file could not be read."""


class ReadingParseError(HeatmapError):
    """A token in the readings file is not an integer."""


class ReadingCountError(ReadingParseError):
    """Fewer readings than grid cells."""

    def __init__(self, expected: int, actual: int):
        self.expected = expected
        self.actual = actual
        super().__init__(f"Expected {expected} readings, got {actual}")


class OutputWriteError(HeatmapError):
    """The output document could not be written."""
