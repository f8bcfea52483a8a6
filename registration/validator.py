from typing import FrozenSet, Iterable, List, Literal, Optional, Tuple

from registration.state import (
    REQUIRED_FIELDS,
    RegistrationDraft,
    TransitionState,
    WizardStep,
)

INCOMPLETE_DRAFT = "incomplete_draft"
INVALID_TRANSITION = "invalid_transition"

SANCTIONED_TRANSITIONS: FrozenSet[Tuple[WizardStep, WizardStep]] = frozenset(
    {
        (WizardStep.LANDING, WizardStep.ENTRY),
        (WizardStep.ENTRY, WizardStep.REVIEW),
        (WizardStep.REVIEW, WizardStep.ENTRY),
        (WizardStep.REVIEW, WizardStep.COMPLETE),
        (WizardStep.COMPLETE, WizardStep.LANDING),
    }
)

# Forward control of each step, as offered on screen.
FORWARD_TARGETS = {
    WizardStep.LANDING: WizardStep.ENTRY,
    WizardStep.ENTRY: WizardStep.REVIEW,
    WizardStep.REVIEW: WizardStep.COMPLETE,
    WizardStep.COMPLETE: WizardStep.LANDING,
}


class DraftValidator:
    def __init__(self, required_fields: Optional[Iterable[str]] = None):
        self.required_fields = tuple(required_fields or REQUIRED_FIELDS)

    def compute_missing_fields(self, draft: RegistrationDraft) -> List[str]:
        missing: List[str] = []

        for field in self.required_fields:
            val = getattr(draft, field, None)
            if val is None:
                missing.append(field)
                continue
            # only emptiness counts; whitespace is content
            if isinstance(val, str) and val == "":
                missing.append(field)

        return sorted(missing)

    def is_complete(self, draft: RegistrationDraft) -> bool:
        return not self.compute_missing_fields(draft)

    @staticmethod
    def is_sanctioned(source: WizardStep, target: WizardStep) -> bool:
        return (source, target) in SANCTIONED_TRANSITIONS

    def authorize(self, state: TransitionState) -> dict:
        """
        Graph node. Records why a request is refused instead of raising, so the
        conditional edge can route on it.
        """
        if not self.is_sanctioned(state.current, state.target):
            return {"rejection": INVALID_TRANSITION, "missing_fields": []}

        if state.current is WizardStep.ENTRY and state.target is WizardStep.REVIEW:
            missing = self.compute_missing_fields(state.draft)
            if missing:
                return {"rejection": INCOMPLETE_DRAFT, "missing_fields": missing}

        return {"rejection": None, "missing_fields": [], "busy": True}

    @staticmethod
    def should_proceed(state: TransitionState) -> Literal["reject", "proceed"]:
        return "reject" if state.rejection else "proceed"
