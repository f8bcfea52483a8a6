from typing import Iterable, List


class WizardError(Exception):
    """Base class for requests the wizard refuses."""


class IncompleteDraft(WizardError):
    def __init__(self, missing_fields: Iterable[str]):
        self.missing_fields: List[str] = sorted(missing_fields)
        super().__init__(
            "Required fields are empty: " + ", ".join(self.missing_fields)
        )


class InvalidTransition(WizardError):
    def __init__(self, source, target):
        self.source = source
        self.target = target
        super().__init__(f"No transition from {source.name} to {target.name}")


class TransitionInProgress(WizardError):
    def __init__(self, target):
        self.target = target
        super().__init__(
            f"Another transition is still running, {target.name} request ignored"
        )


class NotPrintable(WizardError):
    pass


class UnknownField(WizardError, KeyError):
    def __init__(self, field: str):
        self.field = field
        super().__init__(f"Unknown registration field: {field!r}")

    def __str__(self) -> str:
        return self.args[0]


class InvalidFieldValue(WizardError, ValueError):
    def __init__(self, field: str, value, cause: Exception):
        self.field = field
        self.value = value
        self.cause = cause
        super().__init__(f"Invalid value for {field}: {value!r}")
