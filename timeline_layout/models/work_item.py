"""
Work item and reference data models.

Work items are owned by the surrounding application; the layout core only
reads them.
"""

from datetime import datetime
from typing import Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator

from timeline_layout.models.enums import Priority, TaskStatus
from timeline_layout.utils.datetime_utils import ensure_utc


class WorkItem(BaseModel):
    """A time-bounded task shown on the timeline."""

    model_config = ConfigDict(frozen=True, from_attributes=True)

    id: str = Field(..., min_length=1)
    title: str = Field(..., description="Task title")
    description: Optional[str] = Field(None, description="Task details")
    status: TaskStatus = Field(TaskStatus.TODO, description="Status")
    priority: Priority = Field(Priority.MEDIUM, description="Priority")
    start: Optional[datetime] = Field(None, description="Work started at")
    deadline: Optional[datetime] = Field(None, description="Deadline / planned end")
    estimated_hours: Optional[float] = Field(None, ge=0, description="Estimated effort (hours)")
    assignee_id: Optional[str] = Field(None, description="Assignee reference")
    project_id: Optional[str] = Field(None, description="Project reference")

    @field_validator("start", "deadline")
    @classmethod
    def normalize_to_utc(cls, value: Optional[datetime]) -> Optional[datetime]:
        """Naive instants are taken as UTC."""
        return ensure_utc(value)

    @property
    def is_done(self) -> bool:
        return self.status == TaskStatus.DONE


class Identity(BaseModel):
    """An assignee or project as listed in reference data."""

    model_config = ConfigDict(frozen=True)

    id: str
    name: str
    avatar: Optional[str] = None


class ReferenceData(BaseModel):
    """Canonical ordering of assignees and projects for grouping."""

    model_config = ConfigDict(frozen=True)

    assignees: tuple[Identity, ...] = ()
    projects: tuple[Identity, ...] = ()
