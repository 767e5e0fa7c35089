"""
Error message formatting and language catalogues.

Templates use ``str.format`` positional placeholders: ``"must be longer than {0}"``.
Language catalogues are YAML files named ``<language>.yaml`` mapping rule names
to templates.
"""

import os
from collections.abc import Sequence
from datetime import date
from pathlib import Path
from typing import Any

import yaml

from fieldrules.exceptions import MessageCatalogError

ERROR_DEFAULT = "Invalid"

DEFAULT_LANG_DIR = Path(__file__).resolve().parents[2] / "lang"


def stringify_param(value: Any) -> str:
    """
    Render a rule parameter for display in a message.

    Lists render as ``['a', 'b']``, dates as ``YYYY-MM-DD``, anything else
    through ``str()``.
    """
    if isinstance(value, list | tuple):
        return "['" + "', '".join(str(item) for item in value) + "']"
    if isinstance(value, date):
        return value.strftime("%Y-%m-%d")
    try:
        return str(value)
    except Exception:
        return object.__repr__(value)


def format_message(template: str, params: Sequence[Any] = ()) -> str:
    """
    Substitute rule parameters into a message template.

    Extra parameters are ignored. A template whose placeholders cannot be
    filled is returned as-is; this function never raises.

    Args:
        template: Message template with positional placeholders
        params: Rule parameters, in declaration order

    Returns:
        The formatted message
    """
    values = [stringify_param(value) for value in params]
    try:
        return template.format(*values)
    except (IndexError, KeyError, ValueError, AttributeError, TypeError):
        return template


def resolve_lang_dir(lang_dir: str | Path | None = None) -> Path:
    """Pick the language directory: explicit, then FIELDRULES_LANG_DIR, then bundled."""
    if lang_dir is not None:
        return Path(lang_dir)
    env_dir = os.getenv("FIELDRULES_LANG_DIR")
    if env_dir:
        return Path(env_dir)
    return DEFAULT_LANG_DIR


def load_messages(language: str, lang_dir: str | Path | None = None) -> dict[str, str]:
    """
    Load the message templates for a language.

    Args:
        language: Language code, e.g. "en"
        lang_dir: Directory holding ``<language>.yaml`` files

    Returns:
        Mapping of rule name to message template

    Raises:
        MessageCatalogError: If the file is missing or is not a mapping
    """
    path = resolve_lang_dir(lang_dir) / f"{language}.yaml"
    if not path.is_file():
        raise MessageCatalogError(f"Language file not found: {path}")

    try:
        with open(path, encoding="utf-8") as f:
            catalogue = yaml.safe_load(f)
    except yaml.YAMLError as e:
        raise MessageCatalogError(f"Invalid language file {path}: {e}") from e

    if catalogue is None:
        return {}
    if not isinstance(catalogue, dict):
        raise MessageCatalogError(f"Language file {path} must contain a mapping of rule names to messages")

    return {str(rule): str(message) for rule, message in catalogue.items()}
