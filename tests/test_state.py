import pytest
from pydantic import ValidationError

from registration.state import Branch, CasteCategory, RegistrationDraft, TransitionState, WizardStep


def test_draft_defaults_are_empty():
    assert RegistrationDraft().as_form() == {
        "full_name": "",
        "phone_number": "",
        "branch": "",
        "pin_number": "",
        "caste_category": "",
    }


@pytest.mark.parametrize(
    "raw, expected",
    [
        ("MEC", Branch.MECHANICAL),
        ("Mechanical", Branch.MECHANICAL),
        ("ElectricalElectronics", Branch.ELECTRICAL_ELECTRONICS),
        ("electrical_electronics", Branch.ELECTRICAL_ELECTRONICS),
        (Branch.ELECTRICAL_ELECTRONICS, Branch.ELECTRICAL_ELECTRONICS),
    ],
)
def test_branch_accepts_code_name_or_member(raw, expected):
    assert RegistrationDraft(branch=raw).branch is expected


@pytest.mark.parametrize("raw", ["BC-A", "BC_A", "bc_a", CasteCategory.BC_A])
def test_caste_category_spellings(raw):
    assert RegistrationDraft(caste_category=raw).caste_category is CasteCategory.BC_A


def test_blank_choice_means_unset():
    draft = RegistrationDraft(branch="", caste_category="")
    assert draft.branch is None
    assert draft.caste_category is None


def test_unknown_choice_rejected():
    with pytest.raises(ValidationError):
        RegistrationDraft(branch="Civil")
    with pytest.raises(ValidationError):
        RegistrationDraft(caste_category="XYZ")


def test_phone_number_is_not_format_checked():
    draft = RegistrationDraft(phone_number="call me maybe")
    assert draft.phone_number == "call me maybe"


def test_as_form_reports_option_names():
    draft = RegistrationDraft(
        full_name="A. Rao", branch=Branch.MECHANICAL, caste_category=CasteCategory.BC_D
    )
    form = draft.as_form()
    assert form["branch"] == "Mechanical"
    assert form["caste_category"] == "BC_D"


def test_code_written_reads_back_as_option_name():
    draft = RegistrationDraft(branch="MEC", caste_category="BC-A")
    assert draft.as_form()["branch"] == "Mechanical"
    assert draft.branch.code == "MEC"
    assert draft.caste_category.code == "BC-A"


def test_choice_descriptions():
    assert Branch.ELECTRICAL_ELECTRONICS.description == (
        "EEE (Electrical & Electronics Engineering)"
    )
    assert CasteCategory.OTHERS.description == "Others"
    assert len(CasteCategory) == 11


def test_draft_is_immutable():
    draft = RegistrationDraft()
    with pytest.raises(ValidationError):
        draft.full_name = "x"


def test_steps_follow_page_order():
    assert [s.value for s in WizardStep] == [1, 2, 3, 4]
    assert WizardStep(3) is WizardStep.REVIEW


def test_transition_state_is_plain_pydantic():
    assert "arbitrary_types_allowed" not in TransitionState.model_config
    state = TransitionState(current=1, target=2)
    assert state.current is WizardStep.LANDING
    assert state.draft_reset is False
