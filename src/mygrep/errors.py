"""Error types raised outside the scanner and reported by the CLI."""


class MygrepError(Exception):
    """Base for errors reported to the user as ``Error: <message>``."""

    def __init__(self, message: str, *notes: str) -> None:
        """Store the diagnostic message and any extra lines printed after it."""
        super().__init__(message)
        self.message = message
        self.notes = notes


class UsageError(MygrepError):
    """Invalid option or wrong number of arguments."""


class InputAccessError(MygrepError):
    """The input file could not be opened or read."""
