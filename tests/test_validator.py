import pytest


@pytest.mark.parametrize(
    "name,value,expected",
    [
        ("first_name", "", "First Name is required"),
        ("first_name", "   ", "First Name is required"),
        ("first_name", " Khushi ", ""),
        ("last_name", "\t", "Last Name is required"),
        ("last_name", "Kaushik", ""),
        ("dob", "", "Date of Birth is required"),
        ("dob", "2004-01-01", ""),
        ("email", "", "Email is required"),
        ("email", " ", "Email address is invalid"),
        ("email", "khushi@gmail", "Email address is invalid"),
        ("email", "khushi gmail.com", "Email address is invalid"),
        ("email", "a@b.c", ""),
        ("email", "a@b.c\n", "Email address is invalid"),
        ("password", "", "Password is required"),
        ("password", "12345", "Password must be at least 6 characters"),
        ("password", "123456", ""),
        ("phone", "", "Phone number is required"),
        ("phone", "999999999", "Phone number must be 10 digits"),
        ("phone", "99999999999", "Phone number must be 10 digits"),
        ("phone", "99999-9999", "Phone number must be 10 digits"),
        ("phone", "٩٩٩٩٩٩٩٩٩٩", "Phone number must be 10 digits"),
        ("phone", "9999999999\n", "Phone number must be 10 digits"),
        ("phone", "9999999999", ""),
        ("country", " ", "Country name is required"),
        ("country", "India", ""),
    ],
)
def test_validate_field(validator, name, value, expected):
    assert validator.validate_field(name, value, {}) == expected


def test_confirm_password_compares_with_password(validator):
    values = {"password": "secret1"}

    assert validator.validate_field("confirm_password", "", values) == "Confirm Password is required"
    assert validator.validate_field("confirm_password", "secret2", values) == "Passwords do not match"
    assert validator.validate_field("confirm_password", "secret1", values) == ""


def test_unknown_field_has_no_error(validator):
    assert validator.validate_field("nickname", "", {}) == ""


def test_validate_form_valid(validator, valid_values):
    assert validator.validate_form(valid_values) == {}


def test_validate_form_empty_reports_every_field_in_form_order(validator):
    from signup.fields import FIELD_NAMES, initial_form

    errors = validator.validate_form(initial_form())

    assert list(errors) == FIELD_NAMES
    assert errors["phone"] == "Phone number is required"


def test_validate_form_only_failing_fields(validator, valid_values):
    values = {**valid_values, "confirm_password": "other1", "email": "nope"}

    assert validator.validate_form(values) == {
        "email": "Email address is invalid",
        "confirm_password": "Passwords do not match",
    }


@pytest.mark.parametrize(
    "name,value,expected",
    [
        ("first_name", "\ufeff", "First Name is required"),
        ("last_name", "\u00a0\u3000", "Last Name is required"),
        ("country", "\x1c", ""),
        ("first_name", "\x85", ""),
        ("email", "a@b.c\ufeff", "Email address is invalid"),
        ("email", "a\x1c@b.c", ""),
    ],
)
def test_whitespace_matches_browser(validator, name, value, expected):
    assert validator.validate_field(name, value, {}) == expected
