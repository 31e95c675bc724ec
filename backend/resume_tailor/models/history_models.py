from pydantic import BaseModel
from datetime import datetime


class ResumeHistoryCreate(BaseModel):
    """Request to store a generated résumé in the user's history."""

    user_id: str
    resume_text: str
    job_description: str
    title: str = "Resume"


class ResumeHistoryEntry(BaseModel):
    """A stored résumé."""

    id: str
    user_id: str
    resume_text: str
    job_description: str
    timestamp: datetime
    title: str = "Resume"


class ResumeHistoryCreated(BaseModel):
    id: str
