from fastapi import APIRouter, Depends, HTTPException

from resume_tailor.models.history_models import (
    ResumeHistoryCreate,
    ResumeHistoryCreated,
    ResumeHistoryEntry,
)
from resume_tailor.services.history_service import ResumeHistoryStore
from resume_tailor.utils.dependencies import get_history_store

router = APIRouter()


@router.post("/", response_model=ResumeHistoryCreated)
async def save_to_history(
    req: ResumeHistoryCreate,
    history: ResumeHistoryStore = Depends(get_history_store),
):
    """Store a generated résumé in the user's history."""
    if not req.resume_text.strip():
        raise HTTPException(status_code=400, detail="Resume text cannot be empty")
    entry_id = history.save_resume_to_history(
        user_id=req.user_id,
        resume_text=req.resume_text,
        job_description=req.job_description,
        title=req.title,
    )
    return ResumeHistoryCreated(id=entry_id)


@router.get("/{user_id}", response_model=list[ResumeHistoryEntry])
async def list_history(
    user_id: str,
    history: ResumeHistoryStore = Depends(get_history_store),
):
    """The user's stored résumés, newest first."""
    return history.get_user_resume_history(user_id)
