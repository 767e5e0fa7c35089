"""
Unit tests for message formatting and language catalogues.
"""

from datetime import date, datetime

import pytest

from fieldrules import MessageCatalogError, format_message, load_messages
from fieldrules.core.rules.messages import DEFAULT_LANG_DIR, stringify_param
from fieldrules.core.validators import BUILTIN_RULES


class TestFormatMessage:
    """Tests for format_message"""

    def test_plain_parameters(self):
        assert format_message("must be between {0} and {1}", [3, 5]) == "must be between 3 and 5"

    def test_auto_numbered_placeholders(self):
        assert format_message("must be {} long", [8]) == "must be 8 long"

    def test_list_parameter(self):
        assert format_message("one of {0}", [["a", "b"]]) == "one of ['a', 'b']"

    def test_date_parameters(self):
        assert format_message("before {0}", [date(2024, 6, 1)]) == "before 2024-06-01"
        assert format_message("after {0}", [datetime(2024, 6, 1, 13, 45)]) == "after 2024-06-01"

    def test_extra_parameters_ignored(self):
        assert format_message("is required", ["unused", 1]) == "is required"

    def test_missing_parameters_return_template(self):
        assert format_message("between {0} and {1}", [3]) == "between {0} and {1}"

    def test_malformed_template_returned_as_is(self):
        assert format_message("brace { here", [1]) == "brace { here"
        assert format_message("{name}", []) == "{name}"

    def test_no_parameters(self):
        assert format_message("Invalid") == "Invalid"


class TestStringifyParam:
    """Tests for stringify_param"""

    def test_tuple_renders_like_list(self):
        assert stringify_param((1, 2)) == "['1', '2']"

    def test_empty_list(self):
        assert stringify_param([]) == "['']"

    def test_unprintable_value_degrades(self):
        class Broken:
            def __str__(self):
                raise RuntimeError("no")

        assert stringify_param(Broken()).startswith("<")


class TestLoadMessages:
    """Tests for load_messages"""

    def test_bundled_english_covers_all_builtins(self):
        messages = load_messages("en")
        assert set(BUILTIN_RULES) <= set(messages)

    def test_bundled_spanish_covers_all_builtins(self):
        messages = load_messages("es")
        assert set(BUILTIN_RULES) <= set(messages)
        assert messages["required"] == "es obligatorio"

    def test_default_dir_is_packaged(self):
        assert (DEFAULT_LANG_DIR / "en.yaml").is_file()

    def test_custom_directory(self, tmp_path):
        (tmp_path / "fr.yaml").write_text('required: "est obligatoire"\nmin: 5\n', encoding="utf-8")
        assert load_messages("fr", tmp_path) == {"required": "est obligatoire", "min": "5"}

    def test_directory_from_environment(self, tmp_path, monkeypatch):
        (tmp_path / "de.yaml").write_text('required: "ist erforderlich"\n', encoding="utf-8")
        monkeypatch.setenv("FIELDRULES_LANG_DIR", str(tmp_path))
        assert load_messages("de") == {"required": "ist erforderlich"}

    def test_missing_file_raises(self, tmp_path):
        with pytest.raises(MessageCatalogError):
            load_messages("en", tmp_path)

    def test_non_mapping_raises(self, tmp_path):
        (tmp_path / "xx.yaml").write_text("- a\n- b\n", encoding="utf-8")
        with pytest.raises(MessageCatalogError):
            load_messages("xx", tmp_path)

    def test_invalid_yaml_raises(self, tmp_path):
        (tmp_path / "xx.yaml").write_text("required: [unclosed\n", encoding="utf-8")
        with pytest.raises(MessageCatalogError):
            load_messages("xx", tmp_path)

    def test_empty_file_is_empty_catalogue(self, tmp_path):
        (tmp_path / "xx.yaml").write_text("", encoding="utf-8")
        assert load_messages("xx", tmp_path) == {}
