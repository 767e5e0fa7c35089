"""
Rule configuration management.

Loads rule declarations from YAML files and applies them to a Validator.
"""

from pathlib import Path
from typing import Any

import yaml

from .rule_engine import Validator


class RuleConfigLoader:
    """
    Loads rule declarations from YAML configuration files.

    Two layouts are accepted under the ``rules`` key. The shorthand mapping
    mirrors Validator.rules():
    ```yaml
    rules:
      required: [name, email]
      length:
        - [name, 3, 16]
      email: email
    ```

    The list layout allows a custom message per declaration:
    ```yaml
    rules:
      - rule: required
        fields: [name, email]
      - rule: min
        fields: age
        params: [18]
        message: "must be at least {0}"
    ```
    """

    def __init__(self, config_path: str | Path):
        """
        Initialize the rule config loader.

        Args:
            config_path: Path to the YAML configuration file
        """
        self.config_path = Path(config_path)
        if not self.config_path.exists():
            raise FileNotFoundError(f"Rule configuration file not found: {config_path}")

    def load_rules(self) -> list[dict[str, Any]]:
        """
        Load and parse rule declarations from the YAML file.

        Returns:
            List of declarations with keys rule, fields, params and
            (optionally) message

        Raises:
            ValueError: If YAML is invalid or missing required fields
        """
        with open(self.config_path, encoding="utf-8") as f:
            try:
                config = yaml.safe_load(f)
            except yaml.YAMLError as e:
                raise ValueError(f"Invalid YAML in {self.config_path}: {e}") from e

        if not isinstance(config, dict) or "rules" not in config:
            raise ValueError("Configuration file must contain 'rules' section")

        rules = config["rules"]
        if isinstance(rules, dict):
            return self._parse_shorthand(rules)
        if isinstance(rules, list):
            return [self._parse_rule(rule_def, idx) for idx, rule_def in enumerate(rules)]
        raise ValueError("'rules' must be a mapping or a list")

    def _parse_shorthand(self, rules: dict[str, Any]) -> list[dict[str, Any]]:
        declarations = []
        for rule_name, targets in rules.items():
            entries = targets if isinstance(targets, list) else [targets]
            for entry in entries:
                if isinstance(entry, list):
                    if not entry:
                        raise ValueError(f"Empty declaration for rule '{rule_name}'")
                    fields, params = entry[0], entry[1:]
                else:
                    fields, params = entry, []
                declarations.append({"rule": rule_name, "fields": fields, "params": params})
        return declarations

    def _parse_rule(self, rule_def: Any, idx: int) -> dict[str, Any]:
        """
        Parse a single declaration from the list layout.

        Raises:
            ValueError: If the declaration is invalid
        """
        if not isinstance(rule_def, dict):
            raise ValueError(f"Rule #{idx} must be a mapping")
        if "rule" not in rule_def:
            raise ValueError(f"Rule #{idx} is missing 'rule'")
        if "fields" not in rule_def:
            raise ValueError(f"Rule #{idx} ('{rule_def['rule']}') is missing 'fields'")

        params = rule_def.get("params", [])
        if not isinstance(params, list):
            params = [params]

        declaration = {
            "rule": rule_def["rule"],
            "fields": rule_def["fields"],
            "params": params,
        }
        if rule_def.get("message") is not None:
            declaration["message"] = str(rule_def["message"])
        return declaration

    def apply(self, validator: Validator) -> Validator:
        """
        Declare every loaded rule on a validator.

        Raises:
            UnknownRule: If a rule name is not known to the validator's registry
        """
        for declaration in self.load_rules():
            validator.rule(declaration["rule"], declaration["fields"], *declaration["params"])
            if "message" in declaration:
                validator.message(declaration["message"])
        return validator
