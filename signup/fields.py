from typing import Dict, List, Optional
from pydantic import BaseModel, ConfigDict


class FieldSpec(BaseModel):
    model_config = ConfigDict(frozen=True)

    name: str
    label: str
    input_type: str = "text"
    placeholder: Optional[str] = None

    @property
    def error_id(self) -> str:
        return f"{self.name}-error"


# initial form order, also the order errors are reported in
FIELD_NAMES: List[str] = [
    "first_name",
    "last_name",
    "dob",
    "email",
    "password",
    "confirm_password",
    "phone",
    "country",
]

FIELDS: Dict[str, FieldSpec] = {
    spec.name: spec
    for spec in (
        FieldSpec(name="first_name", label="First Name", placeholder="Enter your First Name"),
        FieldSpec(name="last_name", label="Last Name", placeholder="Enter your Last Name"),
        FieldSpec(name="dob", label="Date of Birth", input_type="date"),
        FieldSpec(name="country", label="Country", placeholder="Enter your Country"),
        FieldSpec(name="email", label="Email", input_type="email", placeholder="Enter your email"),
        FieldSpec(name="phone", label="Phone", input_type="tel", placeholder="Enter your phone number"),
        FieldSpec(name="password", label="Password", input_type="password", placeholder="Enter password"),
        FieldSpec(
            name="confirm_password",
            label="Confirm Password",
            input_type="password",
            placeholder="Re-enter password",
        ),
    )
}

# page order
DISPLAY_ORDER: List[str] = list(FIELDS)

FORM_TITLE = "Sign up"
SUCCESS_MESSAGE = "Form Submitted Successfully ✅"
TIP = (
    "Move between fields to see blur validation.\n"
    "Submit to validate the whole form.\n"
    "Form clears after a successful submit."
)


def initial_form() -> Dict[str, str]:
    return {name: "" for name in FIELD_NAMES}
