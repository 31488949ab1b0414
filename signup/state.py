from typing import Any, Dict, Literal, Optional
from pydantic import BaseModel, ConfigDict, Field, field_validator, model_validator

from signup.fields import FIELD_NAMES, initial_form


class FormEvent(BaseModel):
    type: Literal["change", "blur", "submit"]
    name: Optional[str] = Field(default=None, description="Field the event targets")
    value: Optional[str] = Field(default=None, description="Field value at event time")

    @model_validator(mode="after")
    def check_target(self) -> "FormEvent":
        if self.type == "submit":
            return self
        if self.name not in FIELD_NAMES:
            raise ValueError(f"Unknown form field: {self.name!r}")
        if self.type == "change" and self.value is None:
            raise ValueError("change event requires a value")
        return self

    @classmethod
    def change(cls, name: str, value: str) -> "FormEvent":
        return cls(type="change", name=name, value=value)

    @classmethod
    def blur(cls, name: str, value: Optional[str] = None) -> "FormEvent":
        return cls(type="blur", name=name, value=value)

    @classmethod
    def submit(cls) -> "FormEvent":
        return cls(type="submit")


class SignupState(BaseModel):
    model_config = ConfigDict(arbitrary_types_allowed=True)

    values: Dict[str, str] = Field(default_factory=initial_form)
    errors: Dict[str, str] = Field(default_factory=dict)
    touched: Dict[str, bool] = Field(default_factory=dict)

    event: Optional[Dict[str, Optional[str]]] = Field(
        default=None, description="Event being processed, as FormEvent.model_dump()"
    )
    submitted: bool = False
    submission_count: int = 0

    @field_validator("event", mode="before")
    @classmethod
    def check_event(cls, v: Any) -> Optional[Dict[str, Optional[str]]]:
        # checkpoints hold plain dicts, not FormEvent instances
        if v is None:
            return None
        return FormEvent.model_validate(v).model_dump()

    @property
    def form_event(self) -> Optional[FormEvent]:
        if self.event is None:
            return None
        return FormEvent.model_validate(self.event)
