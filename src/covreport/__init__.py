"""covreport - coverage report generation for analyzed binary symbols."""

__version__ = "0.1.0"

from covreport.application.orchestrator import generate_reports
from covreport.infrastructure.logging import configure_logging

__all__ = ["configure_logging", "generate_reports", "__version__"]
