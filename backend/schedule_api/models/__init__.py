"""ORM models. Importing this package registers every table on Base.metadata."""

from schedule_api.models.feedback import Feedback
from schedule_api.models.schedule_entry import ScheduleEntry

__all__ = ["Feedback", "ScheduleEntry"]
