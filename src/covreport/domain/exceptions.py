"""Domain exceptions: all public errors of covreport.

Hexagonal architecture: all exceptions visible to users defined in domain.
Application/Infrastructure raise these, not their own public exceptions.
"""

from __future__ import annotations

from pathlib import Path


class CovReportError(Exception):
    """Base for all covreport error exceptions.

    Allows: except CovReportError to catch all library errors.
    """


class OutputDirectoryError(CovReportError, OSError):
    """Report output directory could not be created.

    Fatal: aborts the whole report run.
    Inherits OSError for semantic correctness (filesystem failure).

    Attributes:
        path: Directory that could not be created.
        reason: Error description from the OS.
    """

    def __init__(self, path: Path, reason: str) -> None:
        """Initialize with failed directory and reason."""
        self.path = path
        self.reason = reason
        super().__init__(f"Unable to create output directory {path}: {reason}")


class ReportOpenError(CovReportError, OSError):
    """Report file could not be opened for writing.

    Raised only by the annotated listing; other reports skip silently.

    Attributes:
        file_name: Report file name that failed to open.
    """

    def __init__(self, file_name: str) -> None:
        """Initialize with report file name."""
        self.file_name = file_name
        super().__init__(f"Unable to open {file_name}")


class UnpairedCoverageError(CovReportError, AssertionError):
    """Uncovered ranges and uncovered branches must be present together.

    Contract violation from the upstream analysis: exactly one of the two
    collections was supplied. Indicates corrupted input, never recovered.

    Attributes:
        symbol_name: Symbol with the broken pair (None if unknown).
    """

    def __init__(self, symbol_name: str | None = None) -> None:
        """Initialize with offending symbol name."""
        self.symbol_name = symbol_name
        subject = f"symbol '{symbol_name}'" if symbol_name else "symbol"
        super().__init__(
            f"{subject}: uncovered ranges and uncovered branches must be both present or both absent"
        )


class UnknownSymbolSetError(CovReportError, KeyError):
    """Requested symbol set is not known.

    Attributes:
        set_name: Unknown symbol set name.
    """

    def __init__(self, set_name: str) -> None:
        """Initialize with unknown set name."""
        self.set_name = set_name
        super().__init__(f"Unknown symbol set: {set_name}")

    def __str__(self) -> str:
        """Plain message (KeyError quotes it otherwise)."""
        return str(self.args[0])


class UnknownSymbolError(CovReportError, KeyError):
    """Requested symbol is not known.

    Attributes:
        symbol_name: Unknown symbol name.
    """

    def __init__(self, symbol_name: str) -> None:
        """Initialize with unknown symbol name."""
        self.symbol_name = symbol_name
        super().__init__(f"Unknown symbol: {symbol_name}")

    def __str__(self) -> str:
        """Plain message (KeyError quotes it otherwise)."""
        return str(self.args[0])
