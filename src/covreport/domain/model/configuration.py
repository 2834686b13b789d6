"""Report run configuration."""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime
from pathlib import Path


@dataclass(frozen=True, slots=True)
class ReportConfig:
    """Settings shared by every report of one run.

    Immutable configuration object with FAIL-FIRST validation.

    Attributes:
        output_directory: Root directory; each set gets a subdirectory
        project_name: Project name shown in report headers
        branch_info_available: Executables carried branch instrumentation
        verbose: Log every generated report at INFO level
        timestamp: Run time shown in report headers
    """

    output_directory: Path
    project_name: str
    branch_info_available: bool = True
    verbose: bool = False
    timestamp: datetime = field(default_factory=datetime.now)

    def __post_init__(self) -> None:
        """Validate invariants. FAIL-FIRST."""
        if self.output_directory is None:
            raise TypeError("output_directory must not be None")
        if not self.project_name:
            raise ValueError("project_name must not be empty")
        object.__setattr__(self, "output_directory", Path(self.output_directory))
