from fastapi import APIRouter

from resume_tailor.models.llm_models import ProviderModelInfo
from resume_tailor.services.llm_service import get_providers_info

router = APIRouter()


@router.get("/providers", response_model=list[ProviderModelInfo])
async def list_providers():
    """
    List the supported LLM providers and their default models.
    No API keys required; this is public metadata.
    """
    return get_providers_info()
