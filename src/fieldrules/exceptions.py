"""
Exceptions raised by fieldrules.

Validation failures are never exceptions: a failing check is recorded as an
error message on the validator. The classes below signal programmer errors
(unknown or invalid rules, misplaced message overrides) and broken message
catalogues, and are raised synchronously at the call site.
"""


class FieldRulesError(Exception):
    """Base class for all fieldrules errors."""


class UnknownRule(FieldRulesError, LookupError):
    """Raised when a rule name resolves to neither a registered nor a built-in rule."""

    def __init__(self, rule_name: str):
        self.rule_name = rule_name
        super().__init__(
            f"Rule '{rule_name}' has not been registered with register_rule() "
            "and is not a built-in rule"
        )


class InvalidRule(FieldRulesError, TypeError):
    """Raised when registering a rule whose check is not callable."""

    def __init__(self, rule_name: str, check: object):
        self.rule_name = rule_name
        super().__init__(
            f"Check for rule '{rule_name}' must be callable, got {type(check).__name__}"
        )


class NoDeclarationToAnnotate(FieldRulesError):
    """Raised when message() is called before any rule has been declared."""

    def __init__(self):
        super().__init__("message() must follow a rule() declaration")


class MessageCatalogError(FieldRulesError):
    """Raised when a language message file is missing or malformed."""
