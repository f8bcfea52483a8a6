"""
Per-step projections of the wizard for the presentation layer.

Rendering itself (layout, icons, animation) belongs to whoever consumes a
StepView; this module only decides what each step shows.
"""

from typing import List, Optional, Tuple

from pydantic import BaseModel, ConfigDict, Field

from registration.state import RegistrationDraft, WizardStep

DEFAULT_INSTITUTION_NAME = "Government Polytechnic College Chegunta 519"
DEFAULT_INSTITUTION_CODE = "GPTCC519"

SUBTITLES = {
    WizardStep.LANDING: "Student Registration",
    WizardStep.ENTRY: "Student Registration Form",
    WizardStep.REVIEW: "Review Details",
    WizardStep.COMPLETE: "Registration Complete",
}

# label shown on screen -> draft field
DETAIL_ROWS = (
    ("Name", "full_name"),
    ("Phone", "phone_number"),
    ("Branch", "branch"),
    ("PIN", "pin_number"),
    ("Caste", "caste_category"),
)


class StepView(BaseModel):
    model_config = ConfigDict(frozen=True)

    step: WizardStep
    title: str
    subtitle: str
    rows: List[Tuple[str, str]] = Field(default_factory=list)
    message: Optional[str] = None
    detail: Optional[str] = None
    footer: str


def detail_rows(draft: RegistrationDraft) -> List[Tuple[str, str]]:
    form = draft.as_form()
    return [(label, form[field]) for label, field in DETAIL_ROWS]


def project(
    step: WizardStep,
    draft: RegistrationDraft,
    institution_name: str = DEFAULT_INSTITUTION_NAME,
    institution_code: str = DEFAULT_INSTITUTION_CODE,
) -> StepView:
    rows: List[Tuple[str, str]] = []
    message = detail = None

    if step in (WizardStep.REVIEW, WizardStep.COMPLETE):
        rows = detail_rows(draft)
    if step is WizardStep.COMPLETE:
        message = "Registration Successful!"
        detail = "Your registration has been completed successfully"

    return StepView(
        step=step,
        title=institution_name,
        subtitle=SUBTITLES[step],
        rows=rows,
        message=message,
        detail=detail,
        footer=f"© {institution_code}",
    )
