import pytest

from core.auth_service import (
    LOGGED_IN,
    LOGGED_OUT,
    get_identity,
    login,
    login_state,
    logout,
    validate_login,
)
from core.profile_service import load_profile, save_profile


@pytest.mark.parametrize("email", ["ana@example.com", "a.b+c@mail.co.uk"])
def test_valid_login_input(email):
    assert validate_login("Ana", email) == (True, {})


@pytest.mark.parametrize("email", ["", "ana", "ana@example", "ana @example.com", "@example.com"])
def test_invalid_email(email):
    ok, errors = validate_login("Ana", email)
    assert ok is False
    assert errors["email"] == "Enter a valid mail address"


def test_blank_first_name():
    ok, errors = validate_login("   ", "ana@example.com")
    assert ok is False
    assert "first_name" in errors


def test_starts_logged_out(kv_store):
    assert login_state(kv_store) == LOGGED_OUT
    assert get_identity(kv_store) is None


def test_login_persists_identity(kv_store):
    ok, errors = login(kv_store, " Ana ", "ana@example.com")
    assert ok is True
    assert errors == {}
    assert get_identity(kv_store) == {"name": "Ana", "email": "ana@example.com"}
    assert login_state(kv_store) == LOGGED_IN


def test_invalid_login_does_not_persist(kv_store):
    ok, errors = login(kv_store, "", "not-an-email")
    assert ok is False
    assert set(errors) == {"first_name", "email"}
    assert login_state(kv_store) == LOGGED_OUT


def test_logout_clears_identity_but_keeps_profile(kv_store):
    login(kv_store, "Ana", "ana@example.com")
    save_profile(kv_store, {"lastName": "Silva", "checkedOrder": True})

    assert logout(kv_store) is True

    assert login_state(kv_store) == LOGGED_OUT
    profile = load_profile(kv_store)
    assert profile["lastName"] == "Silva"
    assert profile["checkedOrder"] is True


def test_corrupt_identity_is_logged_out(kv_store):
    kv_store.set("user_data", "{not json")
    assert get_identity(kv_store) is None
    assert login_state(kv_store) == LOGGED_OUT
