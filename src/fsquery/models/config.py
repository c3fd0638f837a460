"""
Configuration data models for fsquery.

This module defines the settings that shape how paths are probed and how
selectors build candidate file names from a name and its extensions.
"""

from typing import Any, Dict, List
from pydantic import BaseModel, Field


class ProbeConfig(BaseModel):
    """
    Configuration for the node probe.

    Attributes:
        follow_symlinks: Classify a symlink by its target instead of the link itself
        expand_user: Expand a leading ``~`` in path strings before resolving
    """

    follow_symlinks: bool = Field(True, description="Classify symlinks by their target")
    expand_user: bool = Field(True, description="Expand a leading ~ in path strings")

    def to_dict(self) -> Dict[str, Any]:
        return self.model_dump()


class SelectionConfig(BaseModel):
    """
    Configuration for selector candidate names.

    Attributes:
        auto_dot_extensions: Prefix extensions given without a leading dot with one
    """

    auto_dot_extensions: bool = Field(True, description="Prefix bare extensions with a dot")

    def normalize_extension(self, ext: str) -> str:
        """Normalize one candidate extension; the empty string stays empty."""
        if ext and self.auto_dot_extensions and not ext.startswith('.'):
            return '.' + ext
        return ext

    def candidate_name(self, name: str, ext: str) -> str:
        """Build the file name probed for ``name`` with candidate ``ext``."""
        return name + self.normalize_extension(ext)

    def to_dict(self) -> Dict[str, Any]:
        return self.model_dump()


class QueryConfig(BaseModel):
    """
    Main configuration class for fsquery.

    Attributes:
        probe: Node probe settings
        selection: Selector settings
    """

    probe: ProbeConfig = Field(default_factory=ProbeConfig, description="Node probe settings")
    selection: SelectionConfig = Field(default_factory=SelectionConfig, description="Selector settings")

    def validate_configuration(self) -> List[str]:
        """
        Check for settings that are valid but likely surprising.

        Returns:
            List of warning messages
        """
        warnings = []
        if not self.probe.follow_symlinks:
            warnings.append("Symlinks are not followed; a link to a folder is classified as a file")
        if not self.selection.auto_dot_extensions:
            warnings.append("Extensions are used verbatim; pass them with a leading dot")
        return warnings

    def to_dict(self) -> Dict[str, Any]:
        """Convert configuration to dictionary representation."""
        return {
            'probe': self.probe.to_dict(),
            'selection': self.selection.to_dict(),
        }

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> 'QueryConfig':
        """Create configuration from dictionary representation."""
        return cls.model_validate(data)

    def __str__(self) -> str:
        parts = [f"Follow symlinks: {self.probe.follow_symlinks}"]
        parts.append(f"Expand user: {self.probe.expand_user}")
        parts.append(f"Auto-dot extensions: {self.selection.auto_dot_extensions}")
        return " | ".join(parts)


KNOWN_SECTIONS = {
    'probe': set(ProbeConfig.model_fields),
    'selection': set(SelectionConfig.model_fields),
}


def validate_config_dict(config_data: Dict[str, Any]) -> Dict[str, Any]:
    """
    Validate a configuration dictionary.

    Args:
        config_data: Dictionary containing configuration data

    Returns:
        Validated and normalized configuration dictionary

    Raises:
        ValueError: If configuration is invalid
    """
    if not isinstance(config_data, dict):
        raise ValueError(f"Configuration must be a mapping, got {type(config_data).__name__}")

    for section, values in config_data.items():
        if section not in KNOWN_SECTIONS:
            raise ValueError(f"Unknown configuration section: {section}")
        if values is None:
            continue
        if not isinstance(values, dict):
            raise ValueError(f"Section '{section}' must be a mapping")
        for key in values:
            if key not in KNOWN_SECTIONS[section]:
                raise ValueError(f"Unknown key '{key}' in section '{section}'")

    config = QueryConfig.from_dict({k: v for k, v in config_data.items() if v is not None})
    return config.to_dict()
