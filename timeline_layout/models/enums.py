"""
Enum definitions for the timeline layout.

These enums are used across models and provide type-safe status/priority values.
"""

from enum import Enum


class TaskStatus(str, Enum):
    """Work item status. DONE is the only terminal state."""

    TODO = "To Do"
    IN_PROGRESS = "In Progress"
    REVIEW = "Review"
    PENDING_CLIENT = "Pending Client"
    APPROVED = "Approved"
    REJECTED = "Rejected"
    READY = "Ready"
    DONE = "Done"


# Canonical ordering of status groups on the timeline
STATUS_ORDER: tuple[TaskStatus, ...] = (
    TaskStatus.TODO,
    TaskStatus.IN_PROGRESS,
    TaskStatus.REVIEW,
    TaskStatus.PENDING_CLIENT,
    TaskStatus.APPROVED,
    TaskStatus.REJECTED,
    TaskStatus.READY,
    TaskStatus.DONE,
)

STATUS_LABELS: dict[TaskStatus, str] = {
    TaskStatus.TODO: "К выполнению",
    TaskStatus.IN_PROGRESS: "В работе",
    TaskStatus.REVIEW: "На проверке",
    TaskStatus.PENDING_CLIENT: "Ждет клиента",
    TaskStatus.APPROVED: "Утверждено",
    TaskStatus.REJECTED: "На доработке",
    TaskStatus.READY: "Готово",
    TaskStatus.DONE: "Выполнено",
}


class Priority(str, Enum):
    """Priority level."""

    LOW = "Low"
    MEDIUM = "Medium"
    HIGH = "High"


class ViewKind(str, Enum):
    """
    Timeline view span.

    WEEK = 7 days from Monday
    TWO_WEEKS = 14 days from Monday
    MONTH = fixed 30 days from the 1st of the month
    """

    WEEK = "1week"
    TWO_WEEKS = "2weeks"
    MONTH = "month"


class GroupBy(str, Enum):
    """Dimension used to split the timeline into rows."""

    ASSIGNEE = "assignee"
    PROJECT = "project"
    STATUS = "status"


class OverdueGranularity(str, Enum):
    """Unit used to express an overdue duration."""

    DAYS = "days"
    HOURS = "hours"
