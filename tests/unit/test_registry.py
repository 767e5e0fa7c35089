"""
Unit tests for RuleRegistry.
"""

import threading

import pytest

from fieldrules import InvalidRule, MessageCatalogError, RuleRegistry, UnknownRule, register_rule
from fieldrules.core.rules import default_registry
from fieldrules.core.validators import BUILTIN_RULES, CallbackRule, RequiredRule


class TestRegistration:
    """Tests for register() and unregister()"""

    def test_register_non_callable_raises(self, registry):
        with pytest.raises(InvalidRule) as exc_info:
            registry.register("broken", "not a function")
        assert exc_info.value.rule_name == "broken"
        assert "broken" not in registry

    def test_invalid_rule_is_a_type_error(self, registry):
        with pytest.raises(TypeError):
            registry.register("broken", 42)

    def test_registered_rule_resolves_to_callback(self, registry):
        registry.register("positive", lambda value, params, field: value > 0, "must be positive")
        rule = registry.resolve("positive")
        assert isinstance(rule, CallbackRule)
        assert rule.check(3, [], "n", {}) is True
        assert registry.default_message("positive") == "must be positive"

    def test_default_message_is_invalid(self, registry):
        registry.register("anything", lambda value, params, field: True)
        assert registry.default_message("anything") == "Invalid"
        assert registry.default_message("required") == "Invalid"

    def test_last_registration_wins(self, registry):
        registry.register("flag", lambda value, params, field: False, "first")
        registry.register("flag", lambda value, params, field: True, "second")
        assert registry.resolve("flag").check(None, [], "f", {}) is True
        assert registry.default_message("flag") == "second"

    def test_unregister_restores_builtin(self, registry):
        registry.register("required", lambda value, params, field: True)
        registry.unregister("required")
        assert isinstance(registry.resolve("required"), RequiredRule)

    def test_module_level_register_targets_default_registry(self):
        register_rule("tagged", lambda value, params, field: True, "tag")
        assert "tagged" in default_registry
        assert default_registry.default_message("tagged") == "tag"

    def test_concurrent_registration(self, registry):
        def register_many(offset):
            for i in range(50):
                registry.register(f"rule_{offset}_{i}", lambda value, params, field: True)

        threads = [threading.Thread(target=register_many, args=(n,)) for n in range(8)]
        for thread in threads:
            thread.start()
        for thread in threads:
            thread.join()

        assert all(registry.has(f"rule_{n}_{i}") for n in range(8) for i in range(50))


class TestResolution:
    """Tests for resolve() and has()"""

    def test_builtin_resolution(self, registry):
        assert registry.resolve("required") is BUILTIN_RULES["required"]

    def test_unknown_rule_raises(self, registry):
        with pytest.raises(UnknownRule):
            registry.resolve("zzz")

    def test_unknown_rule_is_a_lookup_error(self, registry):
        with pytest.raises(LookupError):
            registry.resolve("zzz")

    def test_has(self, registry):
        assert registry.has("email") is True
        assert registry.has("zzz") is False
        assert "dateFormat" in registry

    def test_custom_builtins(self):
        registry = RuleRegistry(builtins={"required": RequiredRule()})
        assert registry.has("required")
        assert not registry.has("email")


class TestChildRegistry:
    """Tests for parent/child registries"""

    def test_child_sees_parent_rules(self, registry):
        registry.register("shared", lambda value, params, field: True, "shared message")
        child = registry.child()
        assert child.has("shared")
        assert child.default_message("shared") == "shared message"

    def test_child_rules_do_not_leak_to_parent(self, registry):
        child = registry.child()
        child.register("private", lambda value, params, field: True)
        assert not registry.has("private")

    def test_child_override_shadows_parent(self, registry):
        registry.register("check", lambda value, params, field: False)
        child = registry.child()
        child.register("check", lambda value, params, field: True)
        assert child.resolve("check").check(None, [], "f", {}) is True
        assert registry.resolve("check").check(None, [], "f", {}) is False

    def test_child_language_is_independent(self, registry):
        child = registry.child()
        child.set_language("en")
        assert child.default_message("required") == "is required"
        assert registry.default_message("required") == "Invalid"


class TestLanguage:
    """Tests for set_language() and set_messages()"""

    def test_set_language_loads_messages(self, registry):
        registry.set_language("en")
        assert registry.language == "en"
        assert registry.default_message("email") == "is not a valid email address"

    def test_registered_message_beats_language(self, registry):
        registry.set_language("en")
        registry.register("required", lambda value, params, field: True, "custom")
        assert registry.default_message("required") == "custom"

    def test_same_language_not_reloaded(self, registry, monkeypatch):
        calls = []

        def fake_load(language, lang_dir=None):
            calls.append((language, lang_dir))
            return {"required": "needed"}

        monkeypatch.setattr("fieldrules.core.rules.registry.load_messages", fake_load)
        registry.set_language("xx")
        registry.set_language("xx")
        assert len(calls) == 1

        registry.set_language("yy")
        assert len(calls) == 2

    def test_unknown_language_raises(self, registry):
        with pytest.raises(MessageCatalogError):
            registry.set_language("klingon")
        assert registry.language is None

    def test_set_messages_replaces_table(self, registry):
        registry.set_messages({"required": "one"})
        registry.set_messages({"email": "two"})
        assert registry.default_message("required") == "Invalid"
        assert registry.default_message("email") == "two"
