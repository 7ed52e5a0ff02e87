"""Status enum for vaccination urgency levels."""

from enum import Enum


class Status(Enum):
    """Vaccination status categories. Value is the urgency score (higher = more urgent)."""

    COMPLETED = 0
    DUE_SOON = 1
    OVERDUE = 2

    @property
    def key(self) -> str:
        """Machine-readable key, e.g. 'due-soon'."""
        return self.name.lower().replace("_", "-")

    @property
    def label(self) -> str:
        """Human-readable label shown on the status badge."""
        return _LABELS[self]

    @property
    def urgency(self) -> int:
        return self.value


_LABELS = {
    Status.COMPLETED: "Completed",
    Status.DUE_SOON: "Due Soon",
    Status.OVERDUE: "Overdue",
}
