"""Internationalization helpers for the setup flow.

Provide translation strings and the lookup used by every user-facing message.
The current language lives in the module-level ``LANG`` and is set once by
the runner from ``--lang``.

Typical usage::

    from starterkit.setup.i18n import translate
    translate("directory_created", name="demo")

"""

from __future__ import annotations

from typing import Any

from starterkit.config import LANG as _DEFAULT_LANG

LANG: str = _DEFAULT_LANG
TEXTS: dict[str, dict[str, str]] = {
    "en": {
        "welcome": "Create Express.js Starterkit",
        "node_too_old": (
            "You are running Node {version}.\n"
            "Create Expressjs Starterkit requires Node {minimum} or higher.\n"
            "Please update your version of Node."
        ),
        "node_recommendation": (
            "Recommendation using node version {recommended} (found {version})"
        ),
        "node_not_found": (
            "Node.js could not be run. "
            "Create Expressjs Starterkit requires Node {minimum} or higher."
        ),
        "node_version_unparsable": "Could not read a Node.js version from '{version}'.",
        "usage_missing_name": "You have to provide a name to your app.",
        "usage_example_intro": "For example:",
        "usage_example": "    {cli} my-app",
        "prompt_template": "What project template would you like to generate?",
        "prompt_project_name": "Project name:",
        "prompt_package_manager": "Prefer to install dependencies with:",
        "invalid_project_name": (
            "Project name may only include letters, numbers, underscores, "
            "dashes and dots."
        ),
        "invalid_choice": "Invalid choice, pick one of: {choices}",
        "too_many_attempts": "Too many invalid answers, giving up.",
        "prompt_cancelled": "Prompt cancelled.",
        "interrupted": "Interrupted.",
        "unsupported_choice": "Unsupported value '{value}'. Choose one of: {choices}",
        "unsupported_template": "Unsupported template '{value}'. Choose one of: {choices}",
        "unsupported_package_manager": (
            "Unsupported package manager '{value}'. Choose one of: {choices}"
        ),
        "directory_created": "Successfully created directory {name}",
        "directory_exists": (
            "The file {name} already exists in the current directory, "
            "please give it another name."
        ),
        "directory_failed": "Could not create directory {name}: {error}",
        "cloning": "Cloning repository...",
        "installing": "Installing dependencies...",
        "installed": "Dependencies installed successfully",
        "cleaning": "Removing useless files",
        "done": "The installation is done, this is ready to use!",
        "command_not_found": "Command '{command}' was not found. Is it installed and on PATH?",
        "command_not_runnable": "Command '{command}' could not be run: {error}",
        "cwd_unusable": "Working directory {cwd} cannot be used: {error}",
        "log_file_failed": "Could not open log file {path}: {error}",
        "command_failed": "Command '{command}' failed with exit code {code}.",
        "cleanup_failed": "Could not remove {path}: {error}",
        "steps_title": "Setup steps",
        "step_column": "Step",
        "status_column": "Status",
        "step_create": "Create directory",
        "step_clone": "Clone template",
        "step_install": "Install dependencies",
        "step_cleanup": "Remove .git",
    },
    "sv": {
        "welcome": "Skapa Express.js Starterkit",
        "node_too_old": (
            "Du kör Node {version}.\n"
            "Create Expressjs Starterkit kräver Node {minimum} eller senare.\n"
            "Uppdatera din version av Node."
        ),
        "node_recommendation": (
            "Rekommendation: använd Node-version {recommended} (hittade {version})"
        ),
        "node_not_found": (
            "Node.js kunde inte köras. "
            "Create Expressjs Starterkit kräver Node {minimum} eller senare."
        ),
        "node_version_unparsable": "Kunde inte läsa en Node.js-version från '{version}'.",
        "usage_missing_name": "Du måste ange ett namn på din app.",
        "usage_example_intro": "Till exempel:",
        "usage_example": "    {cli} my-app",
        "prompt_template": "Vilken projektmall vill du generera?",
        "prompt_project_name": "Projektnamn:",
        "prompt_package_manager": "Installera beroenden med:",
        "invalid_project_name": (
            "Projektnamnet får bara innehålla bokstäver, siffror, understreck, "
            "bindestreck och punkter."
        ),
        "invalid_choice": "Ogiltigt val, välj ett av: {choices}",
        "too_many_attempts": "För många ogiltiga svar, avbryter.",
        "prompt_cancelled": "Frågan avbröts.",
        "interrupted": "Avbrutet.",
        "unsupported_choice": "Värdet '{value}' stöds inte. Välj ett av: {choices}",
        "unsupported_template": "Mallen '{value}' stöds inte. Välj en av: {choices}",
        "unsupported_package_manager": (
            "Pakethanteraren '{value}' stöds inte. Välj en av: {choices}"
        ),
        "directory_created": "Katalogen {name} skapades",
        "directory_exists": (
            "Filen {name} finns redan i den aktuella katalogen, "
            "välj ett annat namn."
        ),
        "directory_failed": "Kunde inte skapa katalogen {name}: {error}",
        "cloning": "Klonar repository...",
        "installing": "Installerar beroenden...",
        "installed": "Beroendena installerades",
        "cleaning": "Tar bort onödiga filer",
        "done": "Installationen är klar, projektet är redo att användas!",
        "command_not_found": "Kommandot '{command}' hittades inte. Är det installerat och finns i PATH?",
        "command_not_runnable": "Kommandot '{command}' kunde inte köras: {error}",
        "cwd_unusable": "Arbetskatalogen {cwd} kan inte användas: {error}",
        "log_file_failed": "Kunde inte öppna loggfilen {path}: {error}",
        "command_failed": "Kommandot '{command}' misslyckades med slutkod {code}.",
        "cleanup_failed": "Kunde inte ta bort {path}: {error}",
        "steps_title": "Installationssteg",
        "step_column": "Steg",
        "status_column": "Status",
        "step_create": "Skapa katalog",
        "step_clone": "Klona mall",
        "step_install": "Installera beroenden",
        "step_cleanup": "Ta bort .git",
    },
}


def translate(key: str, **fields: Any) -> str:
    r"""Translate a UI key to the current language.

    Returns the string for ``key`` in the current ``LANG``, falling back to
    English and finally to the key itself. Keyword arguments are substituted
    with ``str.format``.

    Parameters
    ----------
    key : str
        The message key.
    **fields : Any
        Values for the ``{placeholders}`` in the message.

    Returns
    -------
    str
        The translated and formatted message, or ``key`` when unknown.

    Examples
    --------
    >>> translate("directory_created", name="demo")
    'Successfully created directory demo'
    >>> translate("UNKNOWN_KEY")
    'UNKNOWN_KEY'
    """
    catalogue = TEXTS.get(LANG, TEXTS["en"])
    text = catalogue.get(key, TEXTS["en"].get(key, key))
    if fields:
        return text.format(**fields)
    return text


_ = translate


def set_language(lang: str | None) -> str:
    """Select the UI language, falling back to English for unknown codes."""
    global LANG
    LANG = lang if lang in TEXTS else "en"
    return LANG


__all__ = ["LANG", "TEXTS", "_", "set_language", "translate"]
