from enum import Enum, IntEnum
from typing import Dict, List, Optional

from pydantic import BaseModel, ConfigDict, Field, ValidationInfo, field_validator


class WizardStep(IntEnum):
    LANDING = 1
    ENTRY = 2
    REVIEW = 3
    COMPLETE = 4


class _Choice(str, Enum):
    """
    Closed set of select options. The value is the option name the draft
    reports back; ``code`` is the short form the select list stores ("MEC",
    "BC-A"). Lookup accepts the value, the code, the member name in any
    spelling ("bc_a", "BcA") or the member itself.
    """

    def __new__(cls, value: str, code: str, description: str):
        obj = str.__new__(cls, value)
        obj._value_ = value
        obj.code = code
        obj.description = description
        return obj

    @classmethod
    def _missing_(cls, value):
        if not isinstance(value, str):
            return None
        wanted = _normalize(value)
        for member in cls:
            if wanted in (_normalize(member.name), _normalize(member.value), _normalize(member.code)):
                return member
        return None

    def __str__(self) -> str:
        return self.value


def _normalize(text: str) -> str:
    return "".join(ch for ch in text.upper() if ch.isalnum())


class Branch(_Choice):
    ELECTRICAL_ELECTRONICS = (
        "ElectricalElectronics", "EEE", "EEE (Electrical & Electronics Engineering)"
    )
    MECHANICAL = ("Mechanical", "MEC", "MEC (Mechanical Engineering)")


class CasteCategory(_Choice):
    SC = ("SC", "SC", "SC (Scheduled Caste)")
    ST = ("ST", "ST", "ST (Scheduled Tribe)")
    BC_A = ("BC_A", "BC-A", "BC-A (Backward Class A)")
    BC_B = ("BC_B", "BC-B", "BC-B (Backward Class B)")
    BC_C = ("BC_C", "BC-C", "BC-C (Backward Class C)")
    BC_D = ("BC_D", "BC-D", "BC-D (Backward Class D)")
    EBC = ("EBC", "EBC", "EBC (Economically Backward Class)")
    OBC = ("OBC", "OBC", "OBC (Other Backward Class)")
    OC = ("OC", "OC", "OC (Open Category)")
    EWS = ("EWS", "EWS", "EWS (Economically Weaker Section)")
    OTHERS = ("OTHERS", "OTHERS", "Others")


_CHOICE_FIELDS = {"branch": Branch, "caste_category": CasteCategory}


class RegistrationDraft(BaseModel):
    model_config = ConfigDict(frozen=True)

    full_name: str = Field(default="", description="Student's full name")
    phone_number: str = Field(default="", description="Contact number, free form")
    branch: Optional[Branch] = Field(default=None, description="Branch of study")
    pin_number: str = Field(default="", description="Polytechnic PIN number")
    caste_category: Optional[CasteCategory] = Field(
        default=None, description="Reservation category"
    )

    @field_validator("branch", "caste_category", mode="before")
    @classmethod
    def _coerce_choice(cls, value, info: ValidationInfo):
        if isinstance(value, Enum) or not isinstance(value, str):
            return value
        if value == "":
            return None
        return _CHOICE_FIELDS[info.field_name](value)

    def as_form(self) -> Dict[str, str]:
        """
        Field values as the entry form holds them: plain strings, "" when unset.
        """
        form: Dict[str, str] = {}
        for name in type(self).model_fields:
            value = getattr(self, name)
            form[name] = "" if value is None else str(value)
        return form


REQUIRED_FIELDS = tuple(RegistrationDraft.model_fields)


class WizardSnapshot(BaseModel):
    """What the presentation layer sees after every change."""

    model_config = ConfigDict(frozen=True)

    step: WizardStep
    busy: bool
    draft: RegistrationDraft


class TransitionState(BaseModel):
    """Working state of one pass through the transition graph."""

    current: WizardStep
    target: WizardStep
    draft: RegistrationDraft = Field(default_factory=RegistrationDraft)
    busy: bool = False

    rejection: Optional[str] = Field(default=None, description="Why the request was refused")
    missing_fields: List[str] = Field(default_factory=list)
    draft_reset: bool = Field(default=False, description="Transition cleared the draft")
