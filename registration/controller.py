"""
Wizard controller: owns the current step, the busy flag and the draft for one
registration session, and runs step changes through the transition graph.
"""

import logging
from typing import Any, Callable, List, Optional

from pydantic import ValidationError

from config.settings import WizardSettings

from registration.errors import (
    IncompleteDraft,
    InvalidFieldValue,
    InvalidTransition,
    NotPrintable,
    TransitionInProgress,
    UnknownField,
)
from registration.graph import WizardGraphFactory
from registration.printing import ConsolePrinter, Printer
from registration.state import (
    RegistrationDraft,
    TransitionState,
    WizardSnapshot,
    WizardStep,
)
from registration.validator import FORWARD_TARGETS, INCOMPLETE_DRAFT, DraftValidator
from registration.views import (
    DEFAULT_INSTITUTION_CODE,
    DEFAULT_INSTITUTION_NAME,
    StepView,
    project,
)

logger = logging.getLogger(__name__)

Listener = Callable[[WizardSnapshot], None]


class WizardController:
    def __init__(
        self,
        factory: WizardGraphFactory,
        printer: Optional[Printer] = None,
        institution_name: str = DEFAULT_INSTITUTION_NAME,
        institution_code: str = DEFAULT_INSTITUTION_CODE,
    ):
        self.validator = factory.validator
        self.printer = printer or ConsolePrinter()
        self.institution_name = institution_name
        self.institution_code = institution_code

        self._graph = factory.compile()
        self._step = WizardStep.LANDING
        self._busy = False
        self._draft = RegistrationDraft()
        self._in_flight = False
        self._listeners: List[Listener] = []

    @classmethod
    def from_settings(cls, settings: WizardSettings, printer: Optional[Printer] = None) -> "WizardController":
        factory = WizardGraphFactory(DraftValidator(), delay=settings.transition_delay)
        return cls(
            factory,
            printer=printer,
            institution_name=settings.institution_name,
            institution_code=settings.institution_code,
        )

    @property
    def step(self) -> WizardStep:
        return self._step

    @property
    def busy(self) -> bool:
        return self._busy

    @property
    def draft(self) -> RegistrationDraft:
        return self._draft

    def snapshot(self) -> WizardSnapshot:
        return WizardSnapshot(step=self._step, busy=self._busy, draft=self._draft)

    def view(self) -> StepView:
        return project(
            self._step,
            self._draft,
            institution_name=self.institution_name,
            institution_code=self.institution_code,
        )

    def subscribe(self, listener: Listener) -> Callable[[], None]:
        """
        Register a render callback. It is called with a fresh snapshot after
        every change. Returns a function that removes it again.
        """
        self._listeners.append(listener)

        def unsubscribe() -> None:
            if listener in self._listeners:
                self._listeners.remove(listener)

        return unsubscribe

    def _publish(self) -> None:
        snap = self.snapshot()
        for listener in list(self._listeners):
            listener(snap)

    def update_field(self, field: str, value: Any) -> RegistrationDraft:
        if field not in RegistrationDraft.model_fields:
            raise UnknownField(field)

        data = self._draft.model_dump()
        data[field] = value
        try:
            draft = RegistrationDraft.model_validate(data)
        except ValidationError as exc:
            logger.warning("Rejected value for %s: %r", field, value)
            raise InvalidFieldValue(field, value, exc) from exc

        self._draft = draft
        logger.debug("Field %s updated", field)
        self._publish()
        return draft

    def reset(self) -> None:
        self._draft = RegistrationDraft()
        logger.debug("Draft cleared")
        self._publish()

    def missing_fields(self) -> List[str]:
        return self.validator.compute_missing_fields(self._draft)

    def can_advance(self) -> bool:
        """Whether the forward control of the current step is enabled."""
        if self._busy or self._in_flight:
            return False
        if self._step is WizardStep.ENTRY:
            return self.validator.is_complete(self._draft)
        return True

    async def advance(self) -> WizardSnapshot:
        return await self.go_to(FORWARD_TARGETS[self._step])

    async def go_to(self, target: WizardStep) -> WizardSnapshot:
        target = WizardStep(target)
        if self._in_flight:
            logger.warning("Transition to %s ignored, another one is running", target.name)
            raise TransitionInProgress(target)

        self._in_flight = True
        source = self._step
        final: Optional[TransitionState] = None
        try:
            async for values in self._graph.astream(
                {"current": source, "target": target, "draft": self._draft},
                stream_mode="values",
            ):
                final = _as_state(values)
                self._absorb(final)
        finally:
            self._in_flight = False
            if self._busy:
                self._busy = False
                self._publish()

        if final is not None and final.rejection:
            if final.rejection == INCOMPLETE_DRAFT:
                logger.warning(
                    "Cannot leave %s, missing: %s", source.name, ", ".join(final.missing_fields)
                )
                raise IncompleteDraft(final.missing_fields)
            logger.warning("Refused transition %s -> %s", source.name, target.name)
            raise InvalidTransition(source, target)

        logger.info("Moved %s -> %s", source.name, target.name)
        return self.snapshot()

    def _absorb(self, state: TransitionState) -> None:
        changed = False
        if state.busy != self._busy:
            self._busy = state.busy
            changed = True
        if state.current is not self._step:
            self._step = state.current
            changed = True
        # edits made while the transition runs survive, except across a restart
        if state.draft_reset and self._draft != RegistrationDraft():
            self._draft = RegistrationDraft()
            changed = True
        if changed:
            self._publish()

    def print_details(self) -> None:
        if self._busy or self._in_flight:
            raise NotPrintable("Cannot print while a transition is running")
        if self._step is not WizardStep.COMPLETE:
            raise NotPrintable(f"Nothing to print on the {self._step.name} step")

        logger.info("Printing registration details")
        self.printer(self.view())


def _as_state(values: Any) -> TransitionState:
    if isinstance(values, TransitionState):
        return values
    return TransitionState.model_validate(values)
