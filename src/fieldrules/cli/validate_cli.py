"""
Command-line interface for validating a data file against a rule file.

Usage:
    fieldrules validate --data <file> --rules <rules.yaml> [options]

Exit status is 0 when the data is valid, 1 when it is not, and 2 when the
input or rule files cannot be used.
"""

import argparse
import sys
from pathlib import Path

import yaml

from fieldrules.core.rules import RuleConfigLoader, Validator, default_registry
from fieldrules.exceptions import FieldRulesError
from fieldrules.observability.logger import get_logger, setup_logger

logger = get_logger("fieldrules.cli")

EXIT_VALID = 0
EXIT_INVALID = 1
EXIT_ERROR = 2


def load_data(path: Path) -> dict:
    """
    Load field values from a JSON or YAML file.

    Raises:
        ValueError: If the file does not contain a mapping
    """
    with open(path, encoding="utf-8") as f:
        # JSON is a subset of YAML
        data = yaml.safe_load(f)
    if not isinstance(data, dict):
        raise ValueError(f"Data file {path} must contain a mapping of field names to values")
    return data


def validate_command(args) -> int:
    """
    Execute the validate command.

    Args:
        args: Command-line arguments

    Returns:
        Process exit status
    """
    data_path = Path(args.data)
    if not data_path.exists():
        logger.error(f"Data file not found: {args.data}")
        return EXIT_ERROR

    fields = [name.strip() for name in args.fields.split(",") if name.strip()] if args.fields else None

    try:
        data = load_data(data_path)
        # Scope the language to this run; registered rules stay visible
        registry = default_registry.child()
        validator = Validator(data, fields=fields, lang=args.lang, lang_dir=args.lang_dir, registry=registry)
        RuleConfigLoader(args.rules).apply(validator)
    except (OSError, ValueError, yaml.YAMLError, FieldRulesError) as e:
        logger.error(f"Cannot validate {args.data}: {e}")
        return EXIT_ERROR

    passed = validator.validate()
    result = validator.result()
    print(result.model_dump_json(indent=2))

    logger.info(
        f"Validated {data_path.name}: {'passed' if passed else 'failed'} "
        f"({result.rule_count} rules, {len(result.errors)} fields with errors)"
    )
    return EXIT_VALID if passed else EXIT_INVALID


def main(argv: list[str] | None = None) -> int:
    """Main CLI entry point."""
    parser = argparse.ArgumentParser(
        prog="fieldrules",
        description="Validate field values against declarative rules",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  # Validate a JSON payload
  fieldrules validate --data signup.json --rules rules/signup.yaml

  # Only consider some fields, with Spanish messages
  fieldrules validate --data signup.json --rules rules/signup.yaml \\
      --fields name,email --lang es
        """,
    )

    subparsers = parser.add_subparsers(dest="command", help="Available commands")

    validate_parser = subparsers.add_parser("validate", help="Validate a data file")
    validate_parser.add_argument(
        "--data",
        required=True,
        help="Path to a JSON or YAML file holding field values",
    )
    validate_parser.add_argument(
        "--rules",
        required=True,
        help="Path to the rules YAML file",
    )
    validate_parser.add_argument(
        "--fields",
        help="Comma-separated allow-list of fields to keep from the data file",
    )
    validate_parser.add_argument(
        "--lang",
        default="en",
        help="Language for error messages (default: en)",
    )
    validate_parser.add_argument(
        "--lang-dir",
        help="Directory containing <lang>.yaml message files",
    )
    validate_parser.add_argument(
        "--log-level",
        default=None,
        choices=["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"],
        help="Log level (default: LOG_LEVEL env var or INFO)",
    )

    args = parser.parse_args(argv)

    if not args.command:
        parser.print_help()
        return EXIT_ERROR

    if args.log_level:
        setup_logger(level=args.log_level)

    if args.command == "validate":
        return validate_command(args)

    return EXIT_ERROR


if __name__ == "__main__":
    sys.exit(main())
