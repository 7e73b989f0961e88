"""Pure contact form validation."""

import re

# WHATWG "valid e-mail address" production, as used by <input type="email">.
EMAIL_PATTERN = re.compile(
    r"^[a-zA-Z0-9.!#$%&'*+/=?^_`{|}~-]+@[a-zA-Z0-9]"
    r"(?:[a-zA-Z0-9-]{0,61}[a-zA-Z0-9])?"
    r"(?:\.[a-zA-Z0-9](?:[a-zA-Z0-9-]{0,61}[a-zA-Z0-9])?)*$"
)

CONTACT_FIELDS = ("name", "email", "message")


def is_valid_email(value: str) -> bool:
    return bool(EMAIL_PATTERN.match(value))


def contact_errors(values: dict[str, str]) -> dict[str, str]:
    """
    Validate contact form values.

    Returns a mapping of field name to error message; empty means valid.
    """
    errors = {}
    for name in CONTACT_FIELDS:
        if not (values.get(name) or "").strip():
            errors[name] = "This field is required."

    email = (values.get("email") or "").strip()
    if "email" not in errors and not is_valid_email(email):
        errors["email"] = "Please enter a valid email address."
    return errors
