class SantaError(Exception):
    """Base exception for secret_santa failures."""


class DuplicateYearError(SantaError):
    """Raised when the history already holds an entry for the target year."""

    def __init__(self, year: int):
        super().__init__(f"There is already an entry for {year}")
        self.year = year


class SolverStuckError(SantaError):
    """Raised when an assignment attempt (or every allowed attempt) dead-ends."""

    def __init__(self, message: str, attempts: int = 1):
        super().__init__(message)
        self.attempts = attempts


class DatasetNotFoundError(SantaError, FileNotFoundError):
    """Raised when the dataset file does not exist."""


class DatasetParseError(SantaError, ValueError):
    """Raised when the dataset document is malformed."""


class DatasetReadError(SantaError, OSError):
    """Raised when an existing dataset file cannot be read."""


class DatasetSaveError(SantaError, OSError):
    """Raised when the dataset cannot be written."""


class DrawExecutionError(SantaError):
    """Raised when the draw pipeline fails for an unexpected reason."""
