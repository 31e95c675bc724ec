from fastapi import APIRouter, Depends, HTTPException, Query

from resume_tailor.exceptions import ResumeTailorError
from resume_tailor.models.tailor_models import (
    ComposeRequest,
    TailorRequest,
    TailorResponse,
    TailorSavedState,
)
from resume_tailor.services.response_cache import ResponseCache
from resume_tailor.services.state_store import (
    OWNER_PATTERN,
    KeyValueStore,
    load_tailor_state,
    save_tailor_state,
)
from resume_tailor.services.tailor_service import compose_resume, tailor_resume
from resume_tailor.utils.dependencies import (
    APIKeys,
    get_api_keys,
    get_response_cache,
    get_state_store,
    to_http_error,
)

router = APIRouter()


@router.post("/", response_model=TailorResponse)
async def tailor_resume_endpoint(
    req: TailorRequest,
    api_keys: APIKeys = Depends(get_api_keys),
    cache: ResponseCache = Depends(get_response_cache),
):
    """Optimize the résumé (or one part of it) for the job description."""
    try:
        return await tailor_resume(
            cache=cache,
            api_key=api_keys.get_key(req.provider),
            provider=req.provider,
            scope=req.scope,
            job_description=req.job_description,
            resume_text=req.resume_text,
        )
    except ResumeTailorError as e:
        raise to_http_error(e)


@router.post("/compose", response_model=TailorResponse)
async def compose_resume_endpoint(
    req: ComposeRequest,
    api_keys: APIKeys = Depends(get_api_keys),
    cache: ResponseCache = Depends(get_response_cache),
):
    """Combine separately optimized sections into the final résumé."""
    try:
        return await compose_resume(
            cache=cache,
            api_key=api_keys.get_key(req.provider),
            provider=req.provider,
            job_description=req.job_description,
            resume_text=req.resume_text,
            sections=req.sections,
        )
    except ResumeTailorError as e:
        raise to_http_error(e)


@router.post("/state", status_code=204)
async def save_tailor_progress(
    state: TailorSavedState,
    owner: str | None = Query(None, pattern=OWNER_PATTERN),
    store: KeyValueStore = Depends(get_state_store),
):
    """Save the screen state. The API key is never written server-side."""
    save_tailor_state(store, state.model_copy(update={"api_key": None}), owner=owner)


@router.get("/state", response_model=TailorSavedState)
async def load_tailor_progress(
    owner: str | None = Query(None, pattern=OWNER_PATTERN),
    store: KeyValueStore = Depends(get_state_store),
):
    state = load_tailor_state(store, owner=owner)
    if state is None:
        raise HTTPException(status_code=404, detail="No saved progress")
    return state
