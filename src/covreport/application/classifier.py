"""Annotation classifier: coverage facts → annotation state for one line."""

from __future__ import annotations

from typing import TYPE_CHECKING

from covreport.domain.model.annotation import Annotation
from covreport.domain.model.enums import AnnotationState

if TYPE_CHECKING:
    from covreport.domain.model.coverage_detail import CoverageDetail
    from covreport.domain.model.instruction import Instruction
    from covreport.domain.ports.coverage_map import CoverageMapProtocol


def classify(
    *,
    executed: bool,
    is_branch: bool,
    always_taken: bool,
    never_taken: bool,
) -> AnnotationState:
    """Pure decision table for a real instruction. First match wins.

    Example:
        >>> classify(executed=True, is_branch=True, always_taken=False, never_taken=False)
        <AnnotationState.EXECUTED: 2>
    """
    if not executed:
        return AnnotationState.NEVER_EXECUTED
    if is_branch:
        if always_taken:
            return AnnotationState.BRANCH_ALWAYS_TAKEN
        if never_taken:
            return AnnotationState.BRANCH_NEVER_TAKEN
    return AnnotationState.EXECUTED


def annotate_instruction(
    instruction: Instruction,
    coverage_map: CoverageMapProtocol,
    base_address: int,
    detail: CoverageDetail,
) -> Annotation:
    """Classify one listing line of a referenced symbol.

    Non-instruction lines are plain source with no range id. Never executed
    lines take their id from the uncovered ranges; branch lines take it
    from the uncovered branches, even when both outcomes were seen.

    Args:
        instruction: Line to classify
        coverage_map: Unified coverage map of the owning symbol
        base_address: Base address of the owning symbol
        detail: Uncovered ranges/branches of the owning symbol

    Returns:
        Annotation with state and range id (0 = none).
    """
    if not instruction.is_instruction:
        return Annotation(AnnotationState.SOURCE)

    address = instruction.address
    offset = address - base_address

    executed = coverage_map.was_executed(offset)
    is_branch = executed and coverage_map.is_branch(offset)
    always_taken = is_branch and coverage_map.was_always_taken(offset)
    never_taken = is_branch and not always_taken and coverage_map.was_never_taken(offset)

    state = classify(
        executed=executed,
        is_branch=is_branch,
        always_taken=always_taken,
        never_taken=never_taken,
    )

    if state is AnnotationState.NEVER_EXECUTED:
        return Annotation(state, detail.uncovered_ranges.get_id(address))
    if is_branch:
        return Annotation(state, detail.uncovered_branches.get_id(address))
    return Annotation(state)
