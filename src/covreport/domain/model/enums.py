"""Domain enumerations."""

from enum import Enum, auto


class UncoveredReason(Enum):
    """Why an address range was recorded as uncovered."""

    NOT_EXECUTED = auto()  # bytes never executed
    BRANCH_ALWAYS_TAKEN = auto()  # fall-through path never seen
    BRANCH_NEVER_TAKEN = auto()  # jump path never seen
    BRANCH_NOT_EXECUTED = auto()  # branch instruction never reached

    @property
    def label(self) -> str:
        """Human-readable label used in reports."""
        return self.name.replace("_", " ")


class AnnotationState(Enum):
    """Classification of one line in the annotated listing.

    Assigned once per line, recomputed on every report run.
    """

    SOURCE = auto()  # label/comment line
    EXECUTED = auto()  # executed, no interesting branch outcome
    NEVER_EXECUTED = auto()
    BRANCH_ALWAYS_TAKEN = auto()
    BRANCH_NEVER_TAKEN = auto()

    @property
    def suffix(self) -> str:
        """Annotation text appended to the formatted line."""
        return _SUFFIXES[self]


_SUFFIXES = {
    AnnotationState.SOURCE: "",
    AnnotationState.EXECUTED: "",
    AnnotationState.NEVER_EXECUTED: "<== NOT EXECUTED",
    AnnotationState.BRANCH_ALWAYS_TAKEN: "<== ALWAYS TAKEN",
    AnnotationState.BRANCH_NEVER_TAKEN: "<== NEVER TAKEN",
}
