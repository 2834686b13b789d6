"""Ports: contracts the domain expects from collaborators."""

from covreport.domain.ports.coverage_map import CoverageMapProtocol
from covreport.domain.ports.formatter import FormatterProtocol

__all__ = [
    "CoverageMapProtocol",
    "FormatterProtocol",
]
