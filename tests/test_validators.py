"""
Tests for the user-profile body validation pipeline.
"""

from utils.validators import Invalid, Valid, validate_user_create, validate_user_update

VALID_BODY = {"name": "Alice Johnson", "email": "alice@example.com", "age": 18, "role": "admin"}


def _messages(result):
    assert isinstance(result, Invalid)
    return [(e.param, e.msg) for e in result.errors]


class TestValidateCreate:
    def test_valid_body(self):
        result = validate_user_create(VALID_BODY)
        assert isinstance(result, Valid)
        assert result.record == VALID_BODY

    def test_empty_body_reports_every_field_in_order(self):
        assert _messages(validate_user_create({})) == [
            ("name", "Invalid value"),
            ("name", "Name is required"),
            ("email", "Email is required"),
            ("email", "Valid email format is required"),
            ("age", "Age must be between 0 and 125"),
            ("role", "Role must be admin or user"),
        ]

    def test_non_string_name_is_invalid_but_not_empty(self):
        assert _messages(validate_user_create({**VALID_BODY, "name": 5})) == [
            ("name", "Invalid value"),
        ]

    def test_errors_carry_body_location(self):
        result = validate_user_create({**VALID_BODY, "role": "guest"})
        assert result.errors[0].location == "body"

    def test_bad_email_format(self):
        assert _messages(validate_user_create({**VALID_BODY, "email": "not-an-email"})) == [
            ("email", "Valid email format is required"),
        ]

    def test_age_bounds(self):
        assert isinstance(validate_user_create({**VALID_BODY, "age": 0}), Valid)
        assert isinstance(validate_user_create({**VALID_BODY, "age": 125}), Valid)
        assert _messages(validate_user_create({**VALID_BODY, "age": -1})) == [
            ("age", "Age must be between 0 and 125"),
        ]
        assert _messages(validate_user_create({**VALID_BODY, "age": 126})) == [
            ("age", "Age must be between 0 and 125"),
        ]

    def test_age_rejects_non_integers(self):
        for age in (17.5, "abc", True, None):
            assert isinstance(validate_user_create({**VALID_BODY, "age": age}), Invalid)

    def test_numeric_string_age_is_normalized(self):
        result = validate_user_create({**VALID_BODY, "age": "42"})
        assert isinstance(result, Valid)
        assert result.record["age"] == 42

    def test_role_must_be_exact(self):
        assert isinstance(validate_user_create({**VALID_BODY, "role": "user"}), Valid)
        assert isinstance(validate_user_create({**VALID_BODY, "role": "Admin"}), Invalid)


class TestValidateUpdate:
    def test_empty_body_is_valid(self):
        result = validate_user_update({})
        assert isinstance(result, Valid)
        assert result.record == {}

    def test_only_supplied_fields_returned(self):
        result = validate_user_update({"name": "Bob"})
        assert result.record == {"name": "Bob"}

    def test_empty_name_still_fails(self):
        assert _messages(validate_user_update({"name": ""})) == [("name", "Name is required")]

    def test_null_age_counts_as_absent(self):
        result = validate_user_update({"age": None})
        assert isinstance(result, Valid)
        assert result.record == {}

    def test_supplied_fields_are_checked(self):
        assert _messages(validate_user_update({"email": "nope", "role": "guest"})) == [
            ("email", "Valid email format is required"),
            ("role", "Role must be admin or user"),
        ]
