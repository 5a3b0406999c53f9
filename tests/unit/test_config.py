#  Copyright (c) 2025 Tom Villani, Ph.D.
"""Tests for configuration loading and registry population."""
import logging

import pytest

from acrodoc.ast import Emphasis, Subscript, extract_text
from acrodoc.config import (
    build_registry,
    find_config_in_parents,
    get_acronyms_section,
    load_acronyms,
    load_config_file,
)
from acrodoc.exceptions import ConfigFileError, DuplicateKeyError, InvalidConfigurationError
from acrodoc.options import AcronymsOptions

YAML_CONFIG = """\
acronyms:
  style: short-long
  sorting: initial
  insert_links: no
  keys:
    - key: RL
      shortname: RL
      longname: Reinforcement Learning
    - key: IVD
      shortname: IVD
      longname: "*in vitro* diagnostic"
      parse_markdown: true
      plural:
        longname: "*in vitro* diagnostics"
"""

TOML_CONFIG = """\
[acronyms]
style = "long-long"

[[acronyms.keys]]
key = "CPU"
shortname = "CPU"
longname = "Central Processing Unit"
"""

JSON_CONFIG = """\
{"acronyms": {"non_existing": "??", "keys": [{"key": "GPU", "shortname": "GPU", "longname": "Graphics Processing Unit"}]}}
"""

PYPROJECT_CONFIG = """\
[project]
name = "demo"

[tool.acrodoc.acronyms]
sorting = "alphabetical-case-insensitive"

[[tool.acrodoc.acronyms.keys]]
key = "ML"
shortname = "ML"
longname = "Machine Learning"
"""


@pytest.mark.unit
class TestLoadConfigFile:
    """Test reading configuration files."""

    def test_yaml(self, write_config) -> None:
        """Test loading a YAML file."""
        config = load_config_file(write_config("acronyms.yaml", YAML_CONFIG))
        assert config["acronyms"]["style"] == "short-long"

    def test_toml(self, write_config) -> None:
        """Test loading a TOML file."""
        config = load_config_file(write_config("acronyms.toml", TOML_CONFIG))
        assert config["acronyms"]["keys"][0]["key"] == "CPU"

    def test_json(self, write_config) -> None:
        """Test loading a JSON file."""
        config = load_config_file(write_config("acronyms.json", JSON_CONFIG))
        assert config["acronyms"]["non_existing"] == "??"

    def test_pyproject_section(self, write_config) -> None:
        """Test that only the [tool.acrodoc] table of pyproject.toml is returned."""
        config = load_config_file(write_config("pyproject.toml", PYPROJECT_CONFIG))
        assert set(config) == {"acronyms"}

    def test_empty_yaml(self, write_config) -> None:
        """Test that an empty YAML file is an empty configuration."""
        assert load_config_file(write_config("empty.yml", "")) == {}

    def test_missing_file(self, tmp_path) -> None:
        """Test that a missing file raises with its path."""
        with pytest.raises(ConfigFileError) as exc_info:
            load_config_file(tmp_path / "nope.yaml")
        assert exc_info.value.file_path.endswith("nope.yaml")

    def test_unsupported_extension(self, write_config) -> None:
        """Test that unknown extensions are rejected."""
        with pytest.raises(ConfigFileError, match="Unsupported"):
            load_config_file(write_config("acronyms.ini", "[acronyms]"))

    @pytest.mark.parametrize(
        "name,content",
        [("bad.yaml", "acronyms: [unclosed"), ("bad.toml", "acronyms = "), ("bad.json", "{not json")],
    )
    def test_malformed_files(self, write_config, name, content) -> None:
        """Test that parse errors are wrapped with the original error."""
        with pytest.raises(ConfigFileError) as exc_info:
            load_config_file(write_config(name, content))
        assert exc_info.value.original_error is not None

    def test_yaml_root_must_be_mapping(self, write_config) -> None:
        """Test that a YAML list at root level is rejected."""
        with pytest.raises(ConfigFileError, match="mapping"):
            load_config_file(write_config("list.yaml", "- a\n- b\n"))


@pytest.mark.unit
class TestFindConfig:
    """Test configuration discovery."""

    def test_found_in_parent(self, tmp_path) -> None:
        """Test that a configuration file in a parent directory is found."""
        (tmp_path / ".acrodoc.yaml").write_text(YAML_CONFIG, encoding="utf-8")
        nested = tmp_path / "a" / "b"
        nested.mkdir(parents=True)

        assert find_config_in_parents(nested) == (tmp_path / ".acrodoc.yaml").resolve()

    def test_pyproject_without_section_is_skipped(self, tmp_path) -> None:
        """Test that a pyproject.toml without [tool.acrodoc] is not a configuration."""
        (tmp_path / "pyproject.toml").write_text('[project]\nname = "x"\n', encoding="utf-8")
        result = find_config_in_parents(tmp_path)
        assert result is None or result.parent != tmp_path.resolve()

    def test_pyproject_with_section(self, tmp_path) -> None:
        """Test that a pyproject.toml with a [tool.acrodoc] section is found."""
        (tmp_path / "pyproject.toml").write_text(PYPROJECT_CONFIG, encoding="utf-8")
        assert find_config_in_parents(tmp_path) == (tmp_path / "pyproject.toml").resolve()


@pytest.mark.unit
class TestBuildRegistry:
    """Test populating the registry from configuration."""

    def test_load_acronyms_yaml(self, write_config) -> None:
        """Test loading options and definitions together."""
        options, registry = load_acronyms(write_config("acronyms.yaml", YAML_CONFIG))

        assert options.style == "short-long"
        assert options.insert_links is False
        assert registry.keys() == ["RL", "IVD"]
        assert registry.lookup("RL").longname_text == "Reinforcement Learning"

    def test_parse_markdown_names(self, write_config) -> None:
        """Test that parse_markdown turns names into rich text."""
        _options, registry = load_acronyms(write_config("acronyms.yaml", YAML_CONFIG))
        ivd = registry.lookup("IVD")

        assert isinstance(ivd.longname[0], Emphasis)
        assert ivd.longname_text == "in vitro diagnostic"
        assert extract_text(ivd.plural_longname) == "in vitro diagnostics"

    def test_names_without_parse_markdown_stay_literal(self) -> None:
        """Test that markdown syntax is kept as text without parse_markdown."""
        registry = build_registry({"keys": [{"key": "X", "shortname": "X", "longname": "*literal*"}]})
        assert registry.lookup("X").longname_text == "*literal*"

    def test_subscript_markdown(self) -> None:
        """Test a subscript in a parsed name."""
        registry = build_registry(
            {"keys": [{"key": "CO2", "shortname": "CO~2~", "longname": "carbon dioxide", "parse_markdown": True}]}
        )
        shortname = registry.lookup("CO2").shortname

        assert any(isinstance(node, Subscript) for node in shortname)
        assert extract_text(shortname) == "CO2"

    def test_mapping_form_of_keys(self) -> None:
        """Test keys given as a mapping from key to definition."""
        registry = build_registry({"keys": {"RL": {"shortname": "RL", "longname": "Reinforcement Learning"}}})
        assert registry.lookup("RL").shortname_text == "RL"

    def test_numeric_names_are_stringified(self) -> None:
        """Test that YAML scalars other than strings become text."""
        registry = build_registry({"keys": [{"key": 42, "shortname": 42, "longname": "The Answer"}]})
        assert registry.lookup("42").shortname_text == "42"

    @pytest.mark.parametrize(
        "definition",
        [{"shortname": "RL", "longname": "R"}, {"key": "RL", "longname": "R"}, {"key": "RL", "shortname": "RL"}],
    )
    def test_incomplete_definitions(self, definition) -> None:
        """Test that key, shortname and longname are required."""
        with pytest.raises(InvalidConfigurationError):
            build_registry({"keys": [definition]})

    def test_keys_must_be_list(self) -> None:
        """Test that a scalar keys entry is rejected."""
        with pytest.raises(InvalidConfigurationError):
            build_registry({"keys": "RL"})

    def test_mapping_entries_must_be_mappings(self) -> None:
        """Test that a scalar definition in the mapping form is rejected."""
        with pytest.raises(InvalidConfigurationError, match="RL"):
            build_registry({"keys": {"RL": "Reinforcement Learning"}})

    def test_section_must_be_mapping(self) -> None:
        """Test that the acronyms section must be a mapping."""
        with pytest.raises(InvalidConfigurationError):
            get_acronyms_section({"acronyms": ["RL"]})
        assert get_acronyms_section({}) == {}


@pytest.mark.unit
class TestDuplicatesAndFromfile:
    """Test duplicate handling and external definition files."""

    DUPLICATED = {
        "keys": [
            {"key": "RL", "shortname": "RL", "longname": "Reinforcement Learning"},
            {"key": "RL", "shortname": "RL", "longname": "Robot Learning"},
        ]
    }

    def test_warn_keeps_first(self, caplog) -> None:
        """Test the default policy: warn and keep the first definition."""
        with caplog.at_level(logging.WARNING, logger="acrodoc"):
            registry = build_registry(self.DUPLICATED)

        assert registry.lookup("RL").longname_text == "Reinforcement Learning"
        assert "RL" in caplog.text

    def test_error_policy(self) -> None:
        """Test that the error policy raises."""
        with pytest.raises(DuplicateKeyError):
            build_registry(self.DUPLICATED, AcronymsOptions(on_duplicate="error"))

    def test_keep_policy_is_silent(self, caplog) -> None:
        """Test that the keep policy keeps the first definition silently."""
        with caplog.at_level(logging.WARNING, logger="acrodoc"):
            registry = build_registry(self.DUPLICATED, AcronymsOptions(on_duplicate="keep"))

        assert registry.lookup("RL").longname_text == "Reinforcement Learning"
        assert caplog.text == ""

    def test_fromfile_loaded_first(self, write_config) -> None:
        """Test that fromfile definitions come before inline keys, relative to the config."""
        write_config("shared.yml", "acronyms:\n  keys:\n    - {key: CPU, shortname: CPU, longname: Central Processing Unit}\n")
        main = write_config(
            "main.yml",
            "acronyms:\n  fromfile: shared.yml\n  sorting: initial\n"
            "  keys:\n    - {key: RL, shortname: RL, longname: Reinforcement Learning}\n",
        )

        _options, registry = load_acronyms(main)

        assert registry.keys() == ["CPU", "RL"]
        assert registry.lookup("CPU").definition_order == 0

    def test_fromfile_missing(self, write_config) -> None:
        """Test that a missing fromfile raises."""
        main = write_config("main.yml", "acronyms:\n  fromfile: [missing.yml]\n")
        with pytest.raises(ConfigFileError):
            load_acronyms(main)
