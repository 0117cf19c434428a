# core/profile_service.py
from core.errors import StorageError

SESSION_KEY = "user_data"
AVATAR_KEY = "profileImage"

TEXT_FIELDS = ["firstName", "lastName", "email", "phoneN"]
FLAG_FIELDS = ["checkedOrder", "checkedPassword", "checkedOffers", "checkedNewsletter"]
PROFILE_KEYS = [AVATAR_KEY] + TEXT_FIELDS + FLAG_FIELDS


def default_profile(identity=None):
    """Blank profile; a logged-in identity seeds first name and email."""
    identity = identity or {}
    profile = {field: "" for field in TEXT_FIELDS}
    profile.update({flag: False for flag in FLAG_FIELDS})
    profile[AVATAR_KEY] = None
    profile["firstName"] = identity.get("name") or ""
    profile["email"] = identity.get("email") or ""
    return profile


def load_profile(store, identity=None):
    """Read every profile key, falling back to defaults for missing ones."""
    profile = default_profile(identity)
    try:
        stored = store.get_many(PROFILE_KEYS)
    except StorageError as e:
        print(f"❌ Failed to load profile data: {e}")
        return profile

    for field in TEXT_FIELDS:
        if stored.get(field):
            profile[field] = stored[field]
    for flag in FLAG_FIELDS:
        profile[flag] = stored.get(flag) == "true"
    profile[AVATAR_KEY] = stored.get(AVATAR_KEY) or None
    return profile


def _serialize(field, value):
    if field in FLAG_FIELDS:
        return "true" if value else "false"
    if field == AVATAR_KEY:
        return value or ""
    return "" if value is None else str(value)


def save_profile(store, fields: dict):
    """
    Persist the given profile fields in one transaction.

    Only the supplied fields are written; the rest keep their stored values.
    """
    unknown = [field for field in fields if field not in PROFILE_KEYS]
    if unknown:
        raise ValueError(f"Unknown profile fields: {', '.join(unknown)}")

    try:
        store.set_many({field: _serialize(field, value) for field, value in fields.items()})
    except StorageError as e:
        print(f"❌ Failed to save profile data: {e}")
        return False, "Could not save your changes."
    print("✅ Profile saved")
    return True, "Your changes have been saved!"


def clear_session(store):
    """Forget the logged-in identity; profile details stay stored."""
    store.remove(SESSION_KEY)


def initials(first_name: str, last_name: str) -> str:
    first = first_name[:1].upper() if first_name else ""
    last = last_name[:1].upper() if last_name else ""
    return f"{first}{last}"
