"""
Rule registry mapping rule names to checks and default messages.

A registry resolves a name in this order: its own registered rules, its
parent registry (if any), then the built-in rules. Registering a name that
matches a built-in overrides the built-in for every validator using the
registry.
"""

import threading
from collections.abc import Mapping
from pathlib import Path

from fieldrules.core.validators import BUILTIN_RULES, BaseRule, CallbackRule
from fieldrules.core.validators.custom_validator import Check
from fieldrules.exceptions import UnknownRule
from fieldrules.observability.logger import get_logger

from .messages import ERROR_DEFAULT, load_messages

logger = get_logger(__name__)


class RuleRegistry:
    """
    Registry of named rules.

    Registries are shared by reference: every validator holding a registry sees
    rules registered on it afterwards. Use child() to layer instance- or
    module-specific rules over a shared registry without mutating it.
    """

    def __init__(
        self,
        parent: "RuleRegistry | None" = None,
        builtins: Mapping[str, BaseRule] | None = None,
    ):
        """
        Initialize the registry.

        Args:
            parent: Registry consulted when a name is not registered here
            builtins: Built-in rules by name (defaults to BUILTIN_RULES)
        """
        self.parent = parent
        self.builtins = dict(BUILTIN_RULES if builtins is None else builtins)
        self._rules: dict[str, BaseRule] = {}
        self._messages: dict[str, str] = {}
        self._language_messages: dict[str, str] = {}
        self._language: str | None = None
        self._lang_dir: Path | None = None
        self._lock = threading.Lock()

    def register(self, name: str, check: Check, message: str = ERROR_DEFAULT) -> None:
        """
        Register or replace a rule.

        Args:
            name: Rule name used in declarations
            check: Callable ``(value, params, field_name) -> bool``
            message: Default message template for failures

        Raises:
            InvalidRule: If check is not callable
        """
        rule = CallbackRule(name, check)
        with self._lock:
            replaced = name in self._rules or name in self.builtins
            self._rules[name] = rule
            self._messages[name] = message
        logger.debug(f"Registered rule '{name}'" + (" (override)" if replaced else ""))

    def unregister(self, name: str) -> None:
        """Remove a registered rule; built-ins of the same name become visible again."""
        with self._lock:
            self._rules.pop(name, None)
            self._messages.pop(name, None)

    def has(self, name: str) -> bool:
        """True if the name resolves to a registered or built-in rule."""
        if name in self._rules:
            return True
        if self.parent is not None:
            return self.parent.has(name)
        return name in self.builtins

    def resolve(self, name: str) -> BaseRule:
        """
        Resolve a rule name to its rule.

        Raises:
            UnknownRule: If the name is neither registered nor built-in
        """
        rule = self._rules.get(name)
        if rule is not None:
            return rule
        if self.parent is not None:
            return self.parent.resolve(name)
        try:
            return self.builtins[name]
        except KeyError:
            raise UnknownRule(name) from None

    def default_message(self, name: str) -> str:
        """
        Default message template for a rule.

        Looks at the message given at registration, then the loaded language
        messages, then the parent registry, falling back to "Invalid".
        """
        if name in self._messages:
            return self._messages[name]
        if name in self._language_messages:
            return self._language_messages[name]
        if self.parent is not None:
            return self.parent.default_message(name)
        return ERROR_DEFAULT

    def set_messages(self, messages: Mapping[str, str]) -> dict[str, str]:
        """Replace the language message templates, keyed by rule name."""
        with self._lock:
            self._language_messages = dict(messages)
        return dict(self._language_messages)

    @property
    def language(self) -> str | None:
        return self._language

    @property
    def lang_dir(self) -> Path | None:
        return self._lang_dir

    def set_language(self, language: str, lang_dir: str | Path | None = None) -> None:
        """
        Load default messages for a language.

        Messages are only reloaded when the language or directory differs from
        the current setting.

        Raises:
            MessageCatalogError: If the language file is missing or malformed
        """
        new_dir = Path(lang_dir) if lang_dir is not None else None
        if language == self._language and new_dir == self._lang_dir:
            return

        messages = load_messages(language, new_dir)
        self.set_messages(messages)
        with self._lock:
            self._language = language
            self._lang_dir = new_dir
        logger.debug(f"Loaded {len(messages)} messages for language '{language}'")

    def child(self) -> "RuleRegistry":
        """Create a registry that inherits this one's rules and messages."""
        return RuleRegistry(parent=self, builtins=self.builtins)

    def __contains__(self, name: str) -> bool:
        return self.has(name)

    def __repr__(self) -> str:
        return f"RuleRegistry(rules={sorted(self._rules)}, language={self._language!r})"


default_registry = RuleRegistry()


def register_rule(name: str, check: Check, message: str = ERROR_DEFAULT) -> None:
    """Register a rule on the process-wide default registry."""
    default_registry.register(name, check, message)
