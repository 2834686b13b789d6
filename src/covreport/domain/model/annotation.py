"""Annotation attached to one line of the annotated listing."""

from dataclasses import dataclass

from covreport.domain.model.enums import AnnotationState


@dataclass(frozen=True, slots=True)
class Annotation:
    """Classification result for one listing line.

    Attributes:
        state: Annotation state
        range_id: Id of the uncovered range/branch the line belongs to (0 = none)
    """

    state: AnnotationState
    range_id: int = 0

    def __post_init__(self) -> None:
        """Validate invariants. FAIL-FIRST."""
        if self.range_id < 0:
            raise ValueError(f"range_id must be >= 0, got {self.range_id}")

    @property
    def text(self) -> str:
        """Suffix appended to the formatted line ("" for none)."""
        return self.state.suffix
