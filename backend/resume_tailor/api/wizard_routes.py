from fastapi import APIRouter, Depends, HTTPException, Query

from resume_tailor.exceptions import ResumeTailorError
from resume_tailor.models.wizard_models import (
    WIZARD_STEPS,
    FieldUpdate,
    WizardCreateRequest,
    WizardState,
    WizardStep,
)
from resume_tailor.services.state_store import (
    OWNER_PATTERN,
    KeyValueStore,
    load_wizard_state,
    save_wizard_state,
)
from resume_tailor.services.wizard_service import ResumeWizard, WizardRegistry
from resume_tailor.utils.dependencies import (
    APIKeys,
    get_api_keys,
    get_state_store,
    get_wizard_registry,
    to_http_error,
)

router = APIRouter()


def _resolve_wizard(registry: WizardRegistry, wizard_id: str) -> ResumeWizard:
    wizard = registry.get(wizard_id)
    if not wizard:
        raise HTTPException(status_code=404, detail=f"Wizard '{wizard_id}' not found")
    return wizard


@router.get("/steps", response_model=list[WizardStep])
async def list_steps():
    """The fixed wizard steps, in order."""
    return list(WIZARD_STEPS)


@router.post("/", response_model=WizardState)
async def create_wizard(
    req: WizardCreateRequest,
    registry: WizardRegistry = Depends(get_wizard_registry),
):
    """Start a new wizard session at step 1."""
    return registry.create(provider=req.provider, auto_advance=req.auto_advance).snapshot()


@router.post("/load", response_model=WizardState)
async def load_wizard(
    owner: str | None = Query(None, pattern=OWNER_PATTERN),
    auto_advance: bool = False,
    registry: WizardRegistry = Depends(get_wizard_registry),
    store: KeyValueStore = Depends(get_state_store),
):
    """Restore saved progress into a new wizard session."""
    saved = load_wizard_state(store, owner=owner)
    if saved is None:
        raise HTTPException(status_code=404, detail="No saved progress")
    return registry.restore(saved, auto_advance=auto_advance).snapshot()


@router.get("/{wizard_id}", response_model=WizardState)
async def get_wizard(
    wizard_id: str,
    registry: WizardRegistry = Depends(get_wizard_registry),
):
    return _resolve_wizard(registry, wizard_id).snapshot()


@router.put("/{wizard_id}/fields/{field_name}", response_model=WizardState)
async def update_field(
    wizard_id: str,
    field_name: str,
    update: FieldUpdate,
    api_keys: APIKeys = Depends(get_api_keys),
    registry: WizardRegistry = Depends(get_wizard_registry),
):
    """Overwrite one input field (re-arms auto-advance when enabled)."""
    wizard = _resolve_wizard(registry, wizard_id)
    try:
        wizard.update_field(field_name, update.value, api_key=api_keys.get_key(wizard.provider))
    except KeyError:
        raise HTTPException(status_code=404, detail=f"Unknown field '{field_name}'")
    return wizard.snapshot()


@router.post("/{wizard_id}/advance", response_model=WizardState)
async def advance_wizard(
    wizard_id: str,
    api_keys: APIKeys = Depends(get_api_keys),
    registry: WizardRegistry = Depends(get_wizard_registry),
):
    """Process the current step and move to the next one."""
    wizard = _resolve_wizard(registry, wizard_id)
    try:
        return await wizard.advance(api_keys.get_key(wizard.provider))
    except ResumeTailorError as e:
        raise to_http_error(e)


@router.post("/{wizard_id}/back", response_model=WizardState)
async def wizard_back(
    wizard_id: str,
    registry: WizardRegistry = Depends(get_wizard_registry),
):
    wizard = _resolve_wizard(registry, wizard_id)
    try:
        return wizard.back()
    except ResumeTailorError as e:
        raise to_http_error(e)


@router.post("/{wizard_id}/finalize", response_model=WizardState)
async def finalize_wizard(
    wizard_id: str,
    api_keys: APIKeys = Depends(get_api_keys),
    registry: WizardRegistry = Depends(get_wizard_registry),
):
    """Retry the final résumé generation after the last step."""
    wizard = _resolve_wizard(registry, wizard_id)
    try:
        return await wizard.finalize(api_keys.get_key(wizard.provider))
    except ResumeTailorError as e:
        raise to_http_error(e)


@router.post("/{wizard_id}/save", status_code=204)
async def save_wizard(
    wizard_id: str,
    owner: str | None = Query(None, pattern=OWNER_PATTERN),
    registry: WizardRegistry = Depends(get_wizard_registry),
    store: KeyValueStore = Depends(get_state_store),
):
    """Save the session's inputs and outputs."""
    wizard = _resolve_wizard(registry, wizard_id)
    save_wizard_state(store, wizard.to_saved_state(), owner=owner)
