import pytest

from resume_tailor.models.tailor_models import TailorSavedState
from resume_tailor.models.wizard_models import WizardSavedState
from resume_tailor.services.state_store import (
    TAILOR_STATE_KEY,
    WIZARD_STATE_KEY,
    InMemoryStore,
    JsonFileStore,
    load_tailor_state,
    load_wizard_state,
    save_tailor_state,
    save_wizard_state,
    state_key,
)


@pytest.fixture(params=["memory", "file"])
def store(request, tmp_path):
    if request.param == "memory":
        return InMemoryStore()
    return JsonFileStore(tmp_path / "state")


def test_nothing_saved_loads_none(store):
    assert load_tailor_state(store) is None
    assert load_wizard_state(store) is None


def test_tailor_state_round_trip(store):
    state = TailorSavedState(
        resume_text="John Doe",
        job_description="Senior PM",
        provider="deepseek",
        optimized_summary="NEW SUMMARY",
        final_resume="FINAL",
    )

    save_tailor_state(store, state)

    assert load_tailor_state(store) == state


def test_wizard_state_round_trip(store):
    state = WizardSavedState(
        current_step=4,
        form_data={"jobDescription": "Senior PM", "skills": "Python"},
        outputs={"jobDescription": "ANALYSIS"},
    )

    save_wizard_state(store, state)

    assert load_wizard_state(store) == state


def test_flows_use_separate_keys():
    store = InMemoryStore()
    save_tailor_state(store, TailorSavedState(resume_text="R"))

    assert store.get(TAILOR_STATE_KEY) is not None
    assert store.get(WIZARD_STATE_KEY) is None
    assert load_wizard_state(store) is None


def test_owners_are_isolated(store):
    save_wizard_state(store, WizardSavedState(current_step=2), owner="alice")
    save_wizard_state(store, WizardSavedState(current_step=7), owner="bob")

    assert load_wizard_state(store, owner="alice").current_step == 2
    assert load_wizard_state(store, owner="bob").current_step == 7
    assert load_wizard_state(store) is None


def test_state_key_namespacing():
    assert state_key(WIZARD_STATE_KEY) == "resumeWizardData"
    assert state_key(WIZARD_STATE_KEY, "u1") == "resumeWizardData.u1"


def test_corrupt_blob_loads_none():
    store = InMemoryStore()
    store.set(WIZARD_STATE_KEY, "{not json")

    assert load_wizard_state(store) is None


def test_file_store_writes_one_file_per_key(tmp_path):
    store = JsonFileStore(tmp_path)
    save_tailor_state(store, TailorSavedState(resume_text="R"), owner="u1")

    assert (tmp_path / "resumeTailorData.u1.json").exists()


@pytest.mark.parametrize("owner", ["../escape", "a/b", "with space"])
def test_file_store_rejects_unsafe_keys(tmp_path, owner):
    store = JsonFileStore(tmp_path)
    with pytest.raises(ValueError):
        save_tailor_state(store, TailorSavedState(), owner=owner)
