"""Domain model: immutable value objects describing analyzed symbols."""

from covreport.domain.model.annotation import Annotation
from covreport.domain.model.configuration import ReportConfig
from covreport.domain.model.coverage_detail import CoverageDetail
from covreport.domain.model.coverage_map import CoverageMap
from covreport.domain.model.coverage_range import CoverageRange, CoverageRanges, CoverageSpan
from covreport.domain.model.desired_symbols import DesiredSymbols
from covreport.domain.model.enums import AnnotationState, UncoveredReason
from covreport.domain.model.instruction import Instruction
from covreport.domain.model.run_statistics import RunStatistics
from covreport.domain.model.set_counters import SetCounters
from covreport.domain.model.symbol import SymbolInformation, SymbolStats

__all__ = [
    "Annotation",
    "AnnotationState",
    "CoverageDetail",
    "CoverageMap",
    "CoverageRange",
    "CoverageRanges",
    "CoverageSpan",
    "DesiredSymbols",
    "Instruction",
    "ReportConfig",
    "RunStatistics",
    "SetCounters",
    "SymbolInformation",
    "SymbolStats",
    "UncoveredReason",
]
