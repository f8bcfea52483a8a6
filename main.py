import asyncio

from config.log import setup_logging
from config.settings import WizardSettings
from registration.controller import WizardController
from registration.errors import IncompleteDraft
from registration.state import WizardStep


async def run():
    patches = [
        {"full_name": "A. Rao", "branch": "Mechanical", "pin_number": "123456"},
        {"caste_category": "OBC"},
        {"phone_number": "9876543210"},
    ]

    # load settings + logging
    settings = WizardSettings.from_env()
    setup_logging(settings.log_level)

    wizard = WizardController.from_settings(settings)
    wizard.subscribe(
        lambda snap: print(f"  [{snap.step.name}] busy={snap.busy}")
    )

    # landing -> entry
    await wizard.go_to(WizardStep.ENTRY)

    # fill the form one patch at a time, trying to move on after each
    for i, patch in enumerate(patches, 1):
        for field, value in patch.items():
            wizard.update_field(field, value)
        print(f"\nPATCH #{i}")
        try:
            await wizard.go_to(WizardStep.REVIEW)
        except IncompleteDraft as exc:
            print("missing_fields:", exc.missing_fields)

    view = wizard.view()
    print(f"\n{view.subtitle}")
    for label, value in view.rows:
        print(f"  {label}: {value}")

    # confirm, print, start over
    await wizard.go_to(WizardStep.COMPLETE)
    wizard.print_details()
    await wizard.go_to(WizardStep.LANDING)

    print("\nDraft after restart:", wizard.draft.as_form())


def main():
    asyncio.run(run())


if __name__ == "__main__":
    main()
