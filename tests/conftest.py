import asyncio

import pytest

from registration.controller import WizardController
from registration.graph import WizardGraphFactory
from registration.state import WizardStep
from registration.validator import DraftValidator

COMPLETE_FORM = {
    "full_name": "A. Rao",
    "phone_number": "9876543210",
    "branch": "Mechanical",
    "pin_number": "123456",
    "caste_category": "OBC",
}


class RecordingPrinter:
    def __init__(self):
        self.views = []

    def __call__(self, view):
        self.views.append(view)


def make_controller(delay: float = 0.0, printer=None) -> WizardController:
    factory = WizardGraphFactory(DraftValidator(), delay=delay)
    return WizardController(factory, printer=printer or RecordingPrinter())


def fill(wizard: WizardController, form=None) -> None:
    for field, value in (form or COMPLETE_FORM).items():
        wizard.update_field(field, value)


def walk_to(wizard: WizardController, step: WizardStep) -> None:
    """Drive the wizard along the sanctioned path until it sits on `step`."""
    path = [WizardStep.ENTRY, WizardStep.REVIEW, WizardStep.COMPLETE]
    for target in path:
        if wizard.step is step:
            return
        if target is WizardStep.REVIEW:
            fill(wizard)
        asyncio.run(wizard.go_to(target))


@pytest.fixture
def printer():
    return RecordingPrinter()


@pytest.fixture
def wizard(printer):
    return make_controller(printer=printer)
