"""User-facing message catalogue."""

DEFAULT_LOCALE = "he"

MESSAGES: dict[str, dict[str, str]] = {
    "he": {
        "missing_credentials": "נא למלא טלפון וסיסמה",
        "invalid_credentials": "מספר טלפון או סיסמה שגויים",
        "invalid_request": "בקשה לא תקינה",
        "login_failed": "שגיאה בהתחברות",
    },
    "en": {
        "missing_credentials": "missing phone or password",
        "invalid_credentials": "invalid phone or password",
        "invalid_request": "invalid request",
        "login_failed": "login failed",
    },
}


def get_message(key: str, locale: str = DEFAULT_LOCALE) -> str:
    """
    Look up a message for the given locale.

    Unknown locales fall back to the default locale.

    Args:
        key: Message key
        locale: Locale code (e.g. "he", "en")

    Returns:
        Localized message text
    """
    catalogue = MESSAGES.get(locale.lower(), MESSAGES[DEFAULT_LOCALE])
    return catalogue[key]
