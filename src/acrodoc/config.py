#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/acrodoc/config.py
"""Configuration file discovery, loading and registry population.

Acronyms are defined in an ``acronyms`` section holding the options of
:class:`~acrodoc.options.AcronymsOptions` plus a ``keys`` list::

    acronyms:
      style: short-long
      sorting: initial
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

The section may live in a YAML, TOML or JSON file, or in the
``[tool.acrodoc.acronyms]`` table of a ``pyproject.toml``.
"""

from __future__ import annotations

import json
import logging
import sys
from pathlib import Path

if sys.version_info >= (3, 11):
    import tomllib
else:
    import tomli as tomllib  # type: ignore[import-not-found,unused-ignore]
from typing import Any, Dict, Mapping, Optional

import yaml

from acrodoc.ast.nodes import Node
from acrodoc.constants import CONFIG_FILENAMES, CONFIG_SECTION
from acrodoc.exceptions import ConfigFileError, DuplicateKeyError, InvalidConfigurationError
from acrodoc.options import AcronymsOptions
from acrodoc.parsers.markdown import InlineMarkdownParser
from acrodoc.registry import AcronymRegistry
from acrodoc.utils.text import str_to_boolean

logger = logging.getLogger(__name__)


def _load_pyproject_acrodoc_section(pyproject_path: Path) -> Dict[str, Any]:
    """Load the [tool.acrodoc] section from a pyproject.toml file.

    Returns
    -------
    dict
        The section, or an empty dict if not present

    Raises
    ------
    ConfigFileError
        If pyproject.toml cannot be parsed or the section is not a table

    """
    data = _load_toml_config(pyproject_path)
    config = data.get("tool", {}).get("acrodoc", {})
    if not isinstance(config, dict):
        raise ConfigFileError(
            f"[tool.acrodoc] section in {pyproject_path} must be a table, got {type(config).__name__}",
            file_path=str(pyproject_path),
        )
    return config


def find_config_in_parents(start_dir: Optional[Path] = None) -> Optional[Path]:
    """Find a configuration file by searching parent directories.

    Walks up from ``start_dir`` (default: the current directory) to the
    filesystem root, checking each directory for ``.acrodoc.yaml``,
    ``.acrodoc.yml``, ``.acrodoc.toml``, ``.acrodoc.json`` and finally a
    ``pyproject.toml`` with a ``[tool.acrodoc]`` section.

    Returns
    -------
    Path or None
        Path to the first configuration file found

    """
    current = (start_dir or Path.cwd()).resolve()

    while True:
        for filename in CONFIG_FILENAMES:
            config_path = current / filename
            if not config_path.is_file():
                continue
            if filename != "pyproject.toml":
                return config_path
            try:
                if _load_pyproject_acrodoc_section(config_path):
                    return config_path
            except ConfigFileError:
                logger.debug(f"Skipping unreadable {config_path}")

        parent = current.parent
        if parent == current:
            break
        current = parent

    return None


def load_config_file(config_path: Path | str) -> Dict[str, Any]:
    """Load configuration from a YAML, TOML, JSON or pyproject.toml file.

    Parameters
    ----------
    config_path : Path or str
        Path to the configuration file

    Returns
    -------
    dict
        Configuration dictionary loaded from file

    Raises
    ------
    ConfigFileError
        If the file cannot be read, parsed, or has an unsupported format

    """
    config_path = Path(config_path)

    if not config_path.is_file():
        raise ConfigFileError(f"Configuration file does not exist: {config_path}", file_path=str(config_path))

    ext = config_path.suffix.lower()
    if config_path.name.lower() == "pyproject.toml":
        return _load_pyproject_acrodoc_section(config_path)
    elif ext == ".toml":
        return _load_toml_config(config_path)
    elif ext in (".yaml", ".yml"):
        return _load_yaml_config(config_path)
    elif ext == ".json":
        return _load_json_config(config_path)
    raise ConfigFileError(
        f"Unsupported config file format: {ext}. Use .yaml, .toml, or .json", file_path=str(config_path)
    )


def _load_toml_config(config_path: Path) -> Dict[str, Any]:
    try:
        with open(config_path, "rb") as f:
            return tomllib.load(f)
    except tomllib.TOMLDecodeError as e:
        raise ConfigFileError(f"Invalid TOML in config file {config_path}: {e}", str(config_path), e) from e
    except OSError as e:
        raise ConfigFileError(f"Error reading TOML config {config_path}: {e}", str(config_path), e) from e


def _load_yaml_config(config_path: Path) -> Dict[str, Any]:
    try:
        with open(config_path, "r", encoding="utf-8") as f:
            config = yaml.safe_load(f)
    except yaml.YAMLError as e:
        raise ConfigFileError(f"Invalid YAML in config file {config_path}: {e}", str(config_path), e) from e
    except OSError as e:
        raise ConfigFileError(f"Error reading YAML config {config_path}: {e}", str(config_path), e) from e

    if config is None:
        return {}
    if not isinstance(config, dict):
        raise ConfigFileError(
            f"YAML config file must contain a mapping at root level, got {type(config).__name__}",
            file_path=str(config_path),
        )
    return config


def _load_json_config(config_path: Path) -> Dict[str, Any]:
    try:
        with open(config_path, "r", encoding="utf-8") as f:
            config = json.load(f)
    except json.JSONDecodeError as e:
        raise ConfigFileError(f"Invalid JSON in config file {config_path}: {e}", str(config_path), e) from e
    except OSError as e:
        raise ConfigFileError(f"Error reading JSON config {config_path}: {e}", str(config_path), e) from e

    if not isinstance(config, dict):
        raise ConfigFileError(
            f"JSON config file must contain an object at root level, got {type(config).__name__}",
            file_path=str(config_path),
        )
    return config


def get_acronyms_section(config: Mapping[str, Any]) -> Dict[str, Any]:
    """Return the ``acronyms`` section of a loaded configuration.

    A missing section is an empty configuration.

    Raises
    ------
    InvalidConfigurationError
        If the section is not a mapping

    """
    section = config.get(CONFIG_SECTION, {})
    if section is None:
        return {}
    if not isinstance(section, dict):
        raise InvalidConfigurationError(
            f"The `{CONFIG_SECTION}` section must be a mapping, got {type(section).__name__}",
            parameter_name=CONFIG_SECTION,
            parameter_value=section,
        )
    return section


def _iter_definitions(keys: Any) -> list[Dict[str, Any]]:
    """Normalize the ``keys`` entry to a list of definition mappings."""
    if keys is None:
        return []
    if isinstance(keys, dict):
        # Mapping form: {RL: {shortname: ..., longname: ...}}
        definitions = []
        for key, value in keys.items():
            if value is None:
                value = {}
            if not isinstance(value, dict):
                raise InvalidConfigurationError(
                    f"Acronym definition '{key}' must be a mapping, got {type(value).__name__}",
                    parameter_name="keys",
                    parameter_value=value,
                )
            definitions.append({"key": key, **value})
        return definitions
    if not isinstance(keys, list):
        raise InvalidConfigurationError(
            f"`keys` must be a list of acronym definitions, got {type(keys).__name__}",
            parameter_name="keys",
            parameter_value=keys,
        )
    for index, definition in enumerate(keys):
        if not isinstance(definition, dict):
            raise InvalidConfigurationError(
                f"Acronym definition #{index + 1} must be a mapping, got {type(definition).__name__}",
                parameter_name="keys",
                parameter_value=definition,
            )
    return keys


class RegistryBuilder:
    """Populate an acronym registry from configuration definitions.

    Parameters
    ----------
    options : AcronymsOptions
        Validated options (``on_duplicate`` is honoured here)
    registry : AcronymRegistry, optional
        Registry to populate; a new one is created if omitted

    """

    def __init__(self, options: AcronymsOptions, registry: Optional[AcronymRegistry] = None) -> None:
        """Initialize the builder."""
        self.options = options
        self.registry = registry if registry is not None else AcronymRegistry()
        self._markdown_parser: Optional[InlineMarkdownParser] = None

    def _name_value(self, value: Any, parse_markdown: bool) -> list[Node] | str:
        if parse_markdown:
            if self._markdown_parser is None:
                self._markdown_parser = InlineMarkdownParser()
            return self._markdown_parser.parse(str(value))
        return str(value)

    def add_definition(self, definition: Mapping[str, Any]) -> None:
        """Register one acronym definition.

        Raises
        ------
        InvalidConfigurationError
            If the key, shortname or longname is missing
        DuplicateKeyError
            If the key is already registered and ``on_duplicate`` is "error"

        """
        key = definition.get("key")
        if key is None or str(key) == "":
            raise InvalidConfigurationError(
                f"Acronym definition without a `key`: {dict(definition)}", parameter_name="key"
            )
        key = str(key)
        for required in ("shortname", "longname"):
            if definition.get(required) is None:
                raise InvalidConfigurationError(
                    f"Acronym '{key}' has no `{required}`", parameter_name=required, parameter_value=key
                )

        if key in self.registry:
            if self.options.on_duplicate == "error":
                raise DuplicateKeyError(key)
            if self.options.on_duplicate == "warn":
                logger.warning(f"Acronym key '{key}' is defined more than once; keeping the first definition")
            return

        parse_markdown = str_to_boolean(definition.get("parse_markdown", False))
        plural = definition.get("plural") or {}
        if not isinstance(plural, dict):
            raise InvalidConfigurationError(
                f"The `plural` entry of acronym '{key}' must be a mapping", parameter_name="plural", parameter_value=key
            )

        plural_shortname = plural.get("shortname")
        plural_longname = plural.get("longname")
        self.registry.register(
            key,
            self._name_value(definition["shortname"], parse_markdown),
            self._name_value(definition["longname"], parse_markdown),
            self._name_value(plural_shortname, parse_markdown) if plural_shortname is not None else None,
            self._name_value(plural_longname, parse_markdown) if plural_longname is not None else None,
        )

    def add_definitions(self, keys: Any) -> None:
        """Register a ``keys`` entry (list or mapping form), in order."""
        for definition in _iter_definitions(keys):
            self.add_definition(definition)

    def add_file(self, path: Path | str) -> None:
        """Register the acronyms defined in another configuration file."""
        logger.debug(f"Loading acronym definitions from {path}")
        section = get_acronyms_section(load_config_file(path))
        self.add_definitions(section.get("keys"))


def build_registry(
    section: Mapping[str, Any],
    options: Optional[AcronymsOptions] = None,
    base_dir: Optional[Path] = None,
) -> AcronymRegistry:
    """Build the registry of a document from its ``acronyms`` section.

    Definitions from ``fromfile`` files are registered first, in the listed
    order, then the inline ``keys``, so definition order follows that
    sequence.

    Parameters
    ----------
    section : Mapping
        The ``acronyms`` configuration section
    options : AcronymsOptions, optional
        Options; parsed from ``section`` if omitted
    base_dir : Path, optional
        Directory against which relative ``fromfile`` paths are resolved

    Returns
    -------
    AcronymRegistry
        The populated registry

    """
    if options is None:
        options = AcronymsOptions.from_dict(section)

    builder = RegistryBuilder(options)
    for filename in options.fromfile:
        path = Path(filename)
        if base_dir is not None and not path.is_absolute():
            path = base_dir / path
        builder.add_file(path)
    builder.add_definitions(section.get("keys"))

    logger.info(f"Loaded {len(builder.registry)} acronyms")
    return builder.registry


def load_acronyms(config_path: Path | str, **option_overrides: Any) -> tuple[AcronymsOptions, AcronymRegistry]:
    """Load options and acronym definitions from a configuration file.

    Parameters
    ----------
    config_path : Path or str
        Path to the configuration file
    **option_overrides
        Option values replacing those of the file before the registry is built

    Returns
    -------
    tuple of (AcronymsOptions, AcronymRegistry)
        Validated options and the populated registry

    """
    config_path = Path(config_path)
    section = get_acronyms_section(load_config_file(config_path))
    options = AcronymsOptions.from_dict(section)
    if option_overrides:
        options = options.create_updated(**option_overrides)
    return options, build_registry(section, options, base_dir=config_path.parent)
