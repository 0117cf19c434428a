# core/auth_service.py
import json
import re
from core.errors import StorageError
from core.profile_service import SESSION_KEY, clear_session

EMAIL_REGEX = re.compile(r"^[^\s@]+@[^\s@]+\.[^\s@]+$")

LOGGED_OUT = "logged_out"
LOGGED_IN = "logged_in"


def validate_login(first_name: str, email: str):
    """Return (ok, errors) where errors maps field name -> message."""
    errors = {}
    if not (first_name or "").strip():
        errors["first_name"] = "First name cannot be empty"
    if not EMAIL_REGEX.match(email or ""):
        errors["email"] = "Enter a valid mail address"
    return not errors, errors


def login(store, first_name: str, email: str):
    """Validate the typed identity and persist it as the current session."""
    ok, errors = validate_login(first_name, email)
    if not ok:
        return False, errors

    user = {"name": first_name.strip(), "email": email.strip()}
    try:
        store.set(SESSION_KEY, json.dumps(user))
    except StorageError as e:
        print(f"❌ Error saving user data: {e}")
        return False, {"form": "Could not save your login. Please try again."}
    print(f"✅ Logged in as {user['email']}")
    return True, {}


def logout(store):
    try:
        clear_session(store)
        print("🔴 Logged out")
        return True
    except StorageError as e:
        print(f"❌ Error clearing user data: {e}")
        return False


def get_identity(store):
    """Stored {"name", "email"} of the logged-in user, or None."""
    try:
        raw = store.get(SESSION_KEY)
    except StorageError as e:
        print(f"❌ Error loading user data: {e}")
        return None
    if not raw:
        return None
    try:
        user = json.loads(raw)
    except ValueError:
        print("⚠️ Stored user data is corrupt, treating as logged out")
        return None
    return user if isinstance(user, dict) else None


def login_state(store) -> str:
    return LOGGED_IN if get_identity(store) else LOGGED_OUT
