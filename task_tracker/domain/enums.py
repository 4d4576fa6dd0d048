"""Domain enumerations for the task tracker."""

from enum import Enum


class TaskStatus(str, Enum):
    """Task lifecycle status.

    No transition graph is enforced: a task may move from any status to any
    other status.
    """

    TODO = "TODO"
    IN_PROGRESS = "IN_PROGRESS"
    COMPLETED = "COMPLETED"
    CANCELLED = "CANCELLED"

    @classmethod
    def values(cls) -> list[str]:
        """Return all valid status values as strings.

        Returns:
            List of enum value strings (e.g. for validation or serialization).
        """
        return [status.value for status in cls]
