"""User-facing rendering of :class:`~envedit.errors.EnvEditError`."""

from __future__ import annotations

from envedit.errors import EnvEditError

DEFAULT_LOCALE = "en"

MESSAGES: dict[str, dict[str, str]] = {
    "en": {
        "key_already_exists": "The key '{key}' already exists.",
        "key_not_exists": "The key '{key}' does not exist.",
        "backup_not_found": "No backup named '{name}' was found.",
        "file_not_found": "The env file '{path}' does not exist.",
    },
    "el": {
        "key_already_exists": "Το κλειδί '{key}' υπάρχει ήδη.",
        "key_not_exists": "Το κλειδί '{key}' δεν υπάρχει.",
        "backup_not_found": "Δεν βρέθηκε αντίγραφο ασφαλείας '{name}'.",
        "file_not_found": "Το αρχείο '{path}' δεν υπάρχει.",
    },
}


def render_error(error: EnvEditError, locale: str = DEFAULT_LOCALE) -> str:
    """Format *error* for humans; unknown locales fall back to English."""
    templates = MESSAGES.get(locale, MESSAGES[DEFAULT_LOCALE])
    template = templates.get(error.kind)
    if template is None:
        return str(error)
    return template.format(
        key=getattr(error, "key", ""),
        name=getattr(error, "name", ""),
        path=getattr(error, "path", ""),
    )
