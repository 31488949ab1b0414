import logging
import re
from typing import Dict, Literal, Mapping, Optional

from signup.fields import FIELD_NAMES, SUCCESS_MESSAGE, initial_form
from signup.state import SignupState

logger = logging.getLogger(__name__)

# browser whitespace (String.prototype.trim, regex \s); differs from str.isspace
WHITESPACE = (
    "\t\n\v\f\r \u00a0\u1680\u2000-\u200a"
    "\u2028\u2029\u202f\u205f\u3000\ufeff"
)

BLANK_PATTERN = re.compile(f"[{WHITESPACE}]*")
EMAIL_PATTERN = re.compile(f"[^{WHITESPACE}]+@[^{WHITESPACE}]+\\.[^{WHITESPACE}]+")
PHONE_PATTERN = re.compile(r"\d{10}", re.ASCII)
MIN_PASSWORD_LENGTH = 6


def is_blank(value: str) -> bool:
    return BLANK_PATTERN.fullmatch(value) is not None


class SignupValidator:
    def validate_field(
        self, name: str, value: str, all_values: Optional[Mapping[str, str]] = None
    ) -> str:
        """
        Error message for one field, or "" when the value is acceptable.
        confirm_password is checked against all_values["password"].
        """
        all_values = all_values or {}

        if name == "first_name":
            if is_blank(value):
                return "First Name is required"
            return ""

        if name == "last_name":
            if is_blank(value):
                return "Last Name is required"
            return ""

        if name == "dob":
            if not value:
                return "Date of Birth is required"
            return ""

        if name == "email":
            if not value:
                return "Email is required"
            if not EMAIL_PATTERN.fullmatch(value):
                return "Email address is invalid"
            return ""

        if name == "password":
            if not value:
                return "Password is required"
            if len(value) < MIN_PASSWORD_LENGTH:
                return f"Password must be at least {MIN_PASSWORD_LENGTH} characters"
            return ""

        if name == "confirm_password":
            if not value:
                return "Confirm Password is required"
            if value != all_values.get("password", ""):
                return "Passwords do not match"
            return ""

        if name == "phone":
            if not value:
                return "Phone number is required"
            if not PHONE_PATTERN.fullmatch(value):
                return "Phone number must be 10 digits"
            return ""

        if name == "country":
            if is_blank(value):
                return "Country name is required"
            return ""

        return ""

    def validate_form(self, values: Mapping[str, str]) -> Dict[str, str]:
        errors: Dict[str, str] = {}

        for field in FIELD_NAMES:
            msg = self.validate_field(field, values.get(field, ""), values)
            if msg:
                errors[field] = msg

        return errors

    @staticmethod
    def _with_error(errors: Dict[str, str], name: str, msg: str) -> Dict[str, str]:
        updated = dict(errors)
        if msg:
            updated[name] = msg
        else:
            updated.pop(name, None)
        return updated

    def handle_change(self, state: SignupState) -> SignupState:
        event = state.form_event
        name, value = event.name, event.value
        values = {**state.values, name: value}
        errors = state.errors

        # untouched fields stay quiet while the user is still typing
        if state.touched.get(name):
            msg = self.validate_field(name, value, values)
            errors = self._with_error(errors, name, msg)

        logger.debug("change %s (touched=%s)", name, bool(state.touched.get(name)))
        return state.model_copy(
            update={"values": values, "errors": errors, "submitted": False}
        )

    def handle_blur(self, state: SignupState) -> SignupState:
        event = state.form_event
        name = event.name
        value = event.value
        if value is None:
            value = state.values.get(name, "")

        msg = self.validate_field(name, value, state.values)

        logger.debug("blur %s -> %s", name, "invalid" if msg else "ok")
        return state.model_copy(
            update={
                "touched": {**state.touched, name: True},
                "errors": self._with_error(state.errors, name, msg),
                "submitted": False,
            }
        )

    def handle_submit(self, state: SignupState) -> SignupState:
        errors = self.validate_form(state.values)

        logger.debug("submit with %d invalid field(s)", len(errors))
        return state.model_copy(
            update={
                "touched": {name: True for name in FIELD_NAMES},
                "errors": errors,
                "submitted": False,
            }
        )

    @staticmethod
    def should_complete(state: SignupState) -> Literal["end", "complete"]:
        return "complete" if len(state.errors) == 0 else "end"

    @staticmethod
    def complete(state: SignupState) -> SignupState:
        count = state.submission_count + 1
        logger.info("%s (submission #%d)", SUCCESS_MESSAGE, count)

        return state.model_copy(
            update={
                "values": initial_form(),
                "errors": {},
                "touched": {},
                "submitted": True,
                "submission_count": count,
            }
        )
