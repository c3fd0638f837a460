"""
Reads and writes fsquery settings files.

Settings live in a small YAML document with ``probe`` and ``selection``
sections. Files are looked up by name in a few well-known folders unless an
explicit path is given; a missing file means the built-in defaults apply.
"""

import yaml
from pathlib import Path
from typing import Dict, Any, Optional, List, Tuple, Union
import logging
from dataclasses import dataclass

from ..models.config import QueryConfig, validate_config_dict


logger = logging.getLogger(__name__)

_SECTION_COMMENTS = {
    'probe': "Node probe settings",
    'selection': "Selector settings",
}

_HEADER = [
    "# fsquery configuration",
    "# Controls how paths are probed and how selectors build candidate names",
    "",
]


@dataclass
class ConfigParseResult:
    """Outcome of ``ConfigParser.load_config``; ``config_path`` is None for defaults."""
    config: QueryConfig
    warnings: List[str]
    config_path: Optional[Path]
    is_default: bool


class ConfigurationError(Exception):
    """A settings file is missing, unreadable or malformed."""
    pass


def _write_text(path: Path, content: str) -> None:
    path.parent.mkdir(parents=True, exist_ok=True)
    with open(path, 'w', encoding='utf-8') as f:
        f.write(content)


class ConfigParser:
    """
    Turns settings files into ``QueryConfig`` objects.

    With ``strict_mode`` any warning produced while loading is raised as a
    ``ConfigurationError``. ``search_paths`` replaces the default lookup
    folders (cwd, home, ``~/.config/fsquery``).
    """

    DEFAULT_CONFIG_NAMES = [
        '.fsquery.yaml',
        '.fsquery.yml',
        'fsquery.yaml',
        'fsquery.yml'
    ]

    def __init__(self, strict_mode: bool = False, search_paths: Optional[List[Path]] = None):
        self.strict_mode = strict_mode
        self.search_paths = search_paths
        self.logger = logging.getLogger(f"{__name__}.{self.__class__.__name__}")

    def load_config(self, config_path: Optional[Union[str, Path]] = None) -> ConfigParseResult:
        """
        Build a configuration from ``config_path``, a discovered file, or defaults.

        Any failure, including unexpected ones, surfaces as ``ConfigurationError``.
        """
        try:
            return self._load(config_path)
        except ConfigurationError:
            raise
        except Exception as e:
            raise ConfigurationError(f"Failed to load configuration: {e}") from e

    def _load(self, config_path: Optional[Union[str, Path]]) -> ConfigParseResult:
        if config_path:
            source = Path(config_path)
            if not source.exists():
                raise ConfigurationError(f"Configuration file not found: {source}")
            raw = self._load_yaml_file(source)
        else:
            source, raw = self._find_and_load_config()

        is_default = raw is None
        query_config = QueryConfig.from_dict(
            self._validate_config_data(self._get_default_config() if is_default else raw)
        )

        warnings = query_config.validate_configuration()
        if is_default:
            warnings.append("No configuration file found, using default settings")
        if warnings and self.strict_mode:
            raise ConfigurationError(f"Configuration warnings in strict mode: {'; '.join(warnings)}")

        self.logger.info(f"Configuration loaded successfully from {source or 'defaults'}")
        return ConfigParseResult(
            config=query_config,
            warnings=warnings,
            config_path=source,
            is_default=is_default
        )

    def _get_search_paths(self) -> List[Path]:
        if self.search_paths is not None:
            return list(self.search_paths)
        return [
            Path.cwd(),
            Path.home(),
            Path.home() / '.config' / 'fsquery',
        ]

    def _candidate_files(self):
        for folder in self._get_search_paths():
            for name in self.DEFAULT_CONFIG_NAMES:
                candidate = folder / name
                if candidate.is_file():
                    yield candidate

    def _find_and_load_config(self) -> Tuple[Optional[Path], Optional[Dict[str, Any]]]:
        """Return the first readable settings file and its data, else ``(None, None)``."""
        for candidate in self._candidate_files():
            try:
                data = self._load_yaml_file(candidate)
            except ConfigurationError as e:
                # Broken files are skipped, not fatal
                self.logger.warning(f"Failed to load {candidate}: {e}")
                continue
            self.logger.info(f"Found configuration file: {candidate}")
            return candidate, data

        self.logger.info("No configuration file found, using defaults")
        return None, None

    def _load_yaml_file(self, file_path: Path) -> Dict[str, Any]:
        # Empty documents count as an empty mapping
        try:
            with open(file_path, 'r', encoding='utf-8') as f:
                content = f.read()
        except OSError as e:
            raise ConfigurationError(f"Cannot read configuration file {file_path}: {e}") from e

        if not content.strip():
            self.logger.warning(f"Configuration file is empty: {file_path}")
            return {}

        try:
            data = yaml.safe_load(content)
        except yaml.YAMLError as e:
            raise ConfigurationError(f"Invalid YAML syntax in {file_path}: {e}") from e

        if data is None:
            return {}
        if not isinstance(data, dict):
            raise ConfigurationError(f"Configuration file must contain a YAML object, got {type(data).__name__}")
        return data

    def _validate_config_data(self, config_data: Dict[str, Any]) -> Dict[str, Any]:
        try:
            return validate_config_dict(config_data)
        except ValueError as e:
            raise ConfigurationError(f"Configuration validation failed: {e}") from e

    def _get_default_config(self) -> Dict[str, Any]:
        return QueryConfig().to_dict()

    def save_config(self, config: QueryConfig, output_path: Union[str, Path]) -> None:
        """Write ``config`` as commented YAML, creating parent folders as needed."""
        output_path = Path(output_path)
        try:
            _write_text(output_path, self._generate_yaml_with_comments(config.to_dict()))
        except OSError as e:
            raise ConfigurationError(f"Cannot write configuration file {output_path}: {e}") from e
        self.logger.info(f"Configuration saved to {output_path}")

    def _generate_yaml_with_comments(self, config_dict: Dict[str, Any]) -> str:
        lines = list(_HEADER)
        for section, comment in _SECTION_COMMENTS.items():
            if section not in config_dict:
                continue
            body = yaml.dump({section: config_dict[section]}, default_flow_style=False, sort_keys=False)
            lines.extend([f"# {comment}", body.rstrip(), ""])
        return "\n".join(lines)

    def validate_config_file(self, config_path: Union[str, Path]) -> List[str]:
        """Check a settings file and return its problems; an empty list means it is usable."""
        config_path = Path(config_path)
        if not config_path.exists():
            return [f"Configuration file not found: {config_path}"]

        try:
            self._validate_config_data(self._load_yaml_file(config_path))
        except ConfigurationError as e:
            return [str(e)]
        return []

    def get_config_template(self) -> str:
        return self._generate_yaml_with_comments(self._get_default_config())


def load_config(config_path: Optional[Union[str, Path]] = None, strict_mode: bool = False) -> ConfigParseResult:
    """Shortcut for ``ConfigParser(strict_mode).load_config(config_path)``."""
    return ConfigParser(strict_mode=strict_mode).load_config(config_path)


def validate_config_file(config_path: Union[str, Path]) -> List[str]:
    return ConfigParser().validate_config_file(config_path)


def create_config_template(output_path: Union[str, Path]) -> None:
    """Write the default settings, with comments, to ``output_path``."""
    output_path = Path(output_path)
    try:
        _write_text(output_path, ConfigParser().get_config_template())
    except OSError as e:
        raise ConfigurationError(f"Cannot create template file {output_path}: {e}") from e
