import os
from typing import Literal

from dotenv import load_dotenv
from pydantic import BaseModel, ConfigDict, Field

from registration.views import DEFAULT_INSTITUTION_CODE, DEFAULT_INSTITUTION_NAME

load_dotenv()


class WizardSettings(BaseModel):
    model_config = ConfigDict(frozen=True)

    transition_delay_ms: int = Field(default=300, ge=0)
    institution_name: str = DEFAULT_INSTITUTION_NAME
    institution_code: str = DEFAULT_INSTITUTION_CODE
    log_level: Literal["DEBUG", "INFO", "WARNING", "ERROR"] = "INFO"

    @property
    def transition_delay(self) -> float:
        return self.transition_delay_ms / 1000

    @classmethod
    def from_env(cls) -> "WizardSettings":
        values = {
            "transition_delay_ms": os.getenv("WIZARD_TRANSITION_DELAY_MS"),
            "institution_name": os.getenv("WIZARD_INSTITUTION_NAME"),
            "institution_code": os.getenv("WIZARD_INSTITUTION_CODE"),
            "log_level": os.getenv("WIZARD_LOG_LEVEL"),
        }
        if values["log_level"]:
            values["log_level"] = values["log_level"].upper()
        return cls(**{k: v for k, v in values.items() if v})
