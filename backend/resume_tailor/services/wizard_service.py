"""
Wizard Service — the 10-step résumé rewriting sequence.

Each step has one required text field. Advancing sends that field (plus
earlier outputs as context) to the provider, stores the reply as the step's
output and moves on. After the last step, one more call aggregates every
output into the final résumé.

States:
  awaiting_input(k) ── advance ──▶ processing(k) ── ok ──▶ awaiting_input(k+1)
                                        └──── error ──▶ awaiting_input(k)
  processing(N) ── ok ──▶ completed(N) ── aggregate ok ──▶ finished
                                  └──── aggregate error ──▶ completed(N)

One provider call may be in flight per wizard. The optional auto-advance
mode arms a single debounce timer on every edit of the current field.
"""

from __future__ import annotations

import asyncio
import json
import logging
import uuid
from typing import Optional, Sequence

from resume_tailor.config import settings
from resume_tailor.exceptions import (
    MissingCredentialError,
    MissingInputError,
    ResumeTailorError,
    WizardBusyError,
    WizardStateError,
)
from resume_tailor.models.llm_models import ChatProvider
from resume_tailor.models.wizard_models import (
    WIZARD_STEPS,
    WizardSavedState,
    WizardState,
    WizardStatus,
    WizardStep,
)
from resume_tailor.services import llm_service
from resume_tailor.services.prompt_builder import build_final_prompt, build_step_prompt
from resume_tailor.services.response_cache import ResponseCache

logger = logging.getLogger(__name__)


class ResumeWizard:
    """Linear state machine over WIZARD_STEPS."""

    def __init__(
        self,
        *,
        cache: ResponseCache,
        provider: ChatProvider | str = ChatProvider.OPENAI,
        steps: Sequence[WizardStep] = WIZARD_STEPS,
        auto_advance: bool = False,
        auto_advance_delay: float | None = None,
        wizard_id: str | None = None,
    ):
        self.id = wizard_id or str(uuid.uuid4())
        self.cache = cache
        self.provider = ChatProvider(provider)
        self.steps = tuple(steps)
        self.auto_advance = auto_advance
        self.auto_advance_delay = (
            auto_advance_delay if auto_advance_delay is not None else settings.auto_advance_delay
        )

        self.form_data: dict[str, str] = {step.field_name: "" for step in self.steps}
        self.outputs: dict[str, str] = {}
        self.current_step = 1
        self.status = WizardStatus.AWAITING_INPUT
        self.final_resume: Optional[str] = None
        self.last_error: Optional[str] = None

        self._in_flight = False
        self._timer: asyncio.TimerHandle | None = None
        self._auto_task: asyncio.Task | None = None

    # ── Properties ───────────────────────────────────────────────────────

    @property
    def total_steps(self) -> int:
        return len(self.steps)

    @property
    def step(self) -> WizardStep:
        return self.steps[self.current_step - 1]

    @property
    def busy(self) -> bool:
        return self._in_flight

    @property
    def auto_advance_pending(self) -> bool:
        return self._timer is not None

    # ── Input ────────────────────────────────────────────────────────────

    def update_field(self, field_name: str, value: str, api_key: str | None = None) -> None:
        """
        Overwrite one form field.

        With auto-advance on, editing the current step's field (re)arms the
        debounce timer; `api_key` is captured by that timer only.
        """
        if field_name not in self.form_data:
            raise KeyError(field_name)
        self.form_data[field_name] = value

        if self.auto_advance and field_name == self.step.field_name:
            self._schedule_auto_advance(api_key)

    # ── Transitions ──────────────────────────────────────────────────────

    async def advance(self, api_key: str | None) -> WizardState:
        """
        Process the current step and move forward.

        From completed(N) this retries the final aggregation only.

        Raises:
            WizardBusyError: a call is already in flight
            MissingInputError: the current field is empty
            MissingCredentialError: no API key
            ProviderError: the provider call failed (state unchanged)
        """
        self._ensure_idle()
        self._cancel_auto_advance()

        if self.status == WizardStatus.FINISHED:
            raise WizardStateError("Resume optimization is already complete")
        if self.status == WizardStatus.COMPLETED:
            return await self.finalize(api_key)

        step = self.step
        current_input = self.form_data.get(step.field_name, "")
        if not current_input.strip():
            raise MissingInputError("Please enter input for this step first")
        if not api_key:
            raise MissingCredentialError()

        self._in_flight = True
        self.status = WizardStatus.PROCESSING
        logger.info(f"Wizard {self.id[:8]}: processing step {step.index} ({step.field_name})")
        try:
            output = await self._process_step(step, current_input, api_key)
        except Exception as e:
            self.status = WizardStatus.AWAITING_INPUT
            self.last_error = _error_message(e)
            logger.warning(f"Wizard {self.id[:8]}: step {step.index} failed: {self.last_error}")
            raise
        finally:
            self._in_flight = False

        self.outputs[step.field_name] = output
        self.last_error = None
        self.status = WizardStatus.COMPLETED
        logger.info(f"Wizard {self.id[:8]}: step {step.index} completed")

        if self.current_step < self.total_steps:
            self.current_step += 1
            self.status = WizardStatus.AWAITING_INPUT
            return self.snapshot()

        return await self.finalize(api_key)

    async def finalize(self, api_key: str | None) -> WizardState:
        """Run the final aggregation call. Only valid from completed(N)."""
        self._ensure_idle()
        if self.status != WizardStatus.COMPLETED or self.current_step != self.total_steps:
            raise WizardStateError("Complete all steps before generating the final resume")
        if not api_key:
            raise MissingCredentialError()

        job_description = self.form_data.get("jobDescription", "")
        prompt = build_final_prompt(job_description, self.outputs)

        self._in_flight = True
        logger.info(f"Wizard {self.id[:8]}: generating final resume")
        try:
            self.final_resume = await self.cache.fetch(
                provider=self.provider,
                section="wizard:final",
                job_description=job_description,
                content=self._serialized_outputs(),
                call=lambda: llm_service.complete(
                    provider=self.provider,
                    api_key=api_key,
                    prompt=prompt,
                    prompt_name="wizard_final",
                ),
            )
        except Exception as e:
            self.last_error = _error_message(e)
            logger.warning(f"Wizard {self.id[:8]}: final resume failed: {self.last_error}")
            raise
        finally:
            self._in_flight = False

        self.last_error = None
        self.status = WizardStatus.FINISHED
        logger.info(f"Wizard {self.id[:8]}: finished")
        return self.snapshot()

    def back(self) -> WizardState:
        """Return to the previous step. No validation and no provider call."""
        self._ensure_idle()
        self._cancel_auto_advance()
        if self.current_step > 1:
            self.current_step -= 1
        self.status = WizardStatus.AWAITING_INPUT
        self.final_resume = None
        self.last_error = None
        return self.snapshot()

    # ── Auto-advance ─────────────────────────────────────────────────────

    def _schedule_auto_advance(self, api_key: str | None) -> None:
        self._cancel_auto_advance()
        if self._in_flight:
            return
        if not self.form_data.get(self.step.field_name, "").strip():
            return
        loop = asyncio.get_running_loop()
        self._timer = loop.call_later(
            self.auto_advance_delay, self._fire_auto_advance, self.current_step, api_key
        )

    def _cancel_auto_advance(self) -> None:
        if self._timer is not None:
            self._timer.cancel()
            self._timer = None

    def _fire_auto_advance(self, armed_step: int, api_key: str | None) -> None:
        self._timer = None
        # Only the step whose field was edited may advance
        if armed_step != self.current_step:
            return
        if self._in_flight or self.status != WizardStatus.AWAITING_INPUT:
            return
        if not self.form_data.get(self.step.field_name, "").strip():
            return
        self._auto_task = asyncio.ensure_future(self._run_auto_advance(api_key))

    async def _run_auto_advance(self, api_key: str | None) -> None:
        try:
            await self.advance(api_key)
        except ResumeTailorError as e:
            self.last_error = e.message
            logger.info(f"Wizard {self.id[:8]}: auto-advance stopped: {e.message}")

    async def wait_for_auto_advance(self) -> None:
        """Await the auto-advance run started by the last timer, if any."""
        if self._auto_task is not None:
            await self._auto_task

    # ── Persistence ──────────────────────────────────────────────────────

    def snapshot(self) -> WizardState:
        return WizardState(
            id=self.id,
            provider=self.provider,
            status=self.status,
            current_step=self.current_step,
            total_steps=self.total_steps,
            step=self.step,
            form_data=dict(self.form_data),
            outputs=dict(self.outputs),
            final_resume=self.final_resume,
            last_error=self.last_error,
            auto_advance=self.auto_advance,
            busy=self._in_flight,
        )

    def to_saved_state(self) -> WizardSavedState:
        """Inputs, outputs and provider. The API key is never included."""
        return WizardSavedState(
            provider=self.provider,
            current_step=self.current_step,
            form_data=dict(self.form_data),
            outputs=dict(self.outputs),
            final_resume=self.final_resume,
        )

    @classmethod
    def from_saved_state(
        cls,
        saved: WizardSavedState,
        *,
        cache: ResponseCache,
        auto_advance: bool = False,
    ) -> "ResumeWizard":
        wizard = cls(cache=cache, provider=saved.provider, auto_advance=auto_advance)
        for field_name, value in saved.form_data.items():
            if field_name in wizard.form_data:
                wizard.form_data[field_name] = value
        wizard.outputs = {k: v for k, v in saved.outputs.items() if k in wizard.form_data}
        wizard.current_step = min(max(saved.current_step, 1), wizard.total_steps)
        if saved.final_resume and wizard.current_step == wizard.total_steps:
            wizard.final_resume = saved.final_resume
            wizard.status = WizardStatus.FINISHED
        elif wizard.current_step == wizard.total_steps and wizard.step.field_name in wizard.outputs:
            wizard.status = WizardStatus.COMPLETED
        return wizard

    # ── Helpers ──────────────────────────────────────────────────────────

    def _ensure_idle(self) -> None:
        if self._in_flight:
            raise WizardBusyError()

    async def _process_step(self, step: WizardStep, current_input: str, api_key: str) -> str:
        prompt = build_step_prompt(step.index, current_input, self.outputs)
        return await self.cache.fetch(
            provider=self.provider,
            section=f"wizard:{step.index}",
            job_description=self.form_data.get("jobDescription", ""),
            content=current_input + "\n" + self._serialized_outputs(),
            call=lambda: llm_service.complete(
                provider=self.provider,
                api_key=api_key,
                prompt=prompt,
                prompt_name="wizard_step",
            ),
        )

    def _serialized_outputs(self) -> str:
        ordered = {s.field_name: self.outputs[s.field_name] for s in self.steps if s.field_name in self.outputs}
        return json.dumps(ordered, ensure_ascii=False)


def _error_message(error: Exception) -> str:
    if isinstance(error, ResumeTailorError):
        return error.message
    return str(error) or "Failed to process"


class WizardRegistry:
    """Live wizard sessions for one process, all sharing one response cache."""

    def __init__(self, cache: ResponseCache):
        self.cache = cache
        self._wizards: dict[str, ResumeWizard] = {}

    def create(
        self,
        provider: ChatProvider | str = ChatProvider.OPENAI,
        auto_advance: bool = False,
    ) -> ResumeWizard:
        wizard = ResumeWizard(cache=self.cache, provider=provider, auto_advance=auto_advance)
        self._wizards[wizard.id] = wizard
        logger.info(f"Wizard created: id={wizard.id} provider={wizard.provider.value}")
        return wizard

    def restore(self, saved: WizardSavedState, auto_advance: bool = False) -> ResumeWizard:
        wizard = ResumeWizard.from_saved_state(saved, cache=self.cache, auto_advance=auto_advance)
        self._wizards[wizard.id] = wizard
        return wizard

    def get(self, wizard_id: str) -> ResumeWizard | None:
        return self._wizards.get(wizard_id)

    def __len__(self) -> int:
        return len(self._wizards)
