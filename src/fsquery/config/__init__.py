"""
Configuration management package for fsquery.

This package provides configuration parsing, validation, and management
functionality.
"""

from .parser import (
    ConfigParser,
    ConfigParseResult,
    ConfigurationError,
    load_config,
    validate_config_file,
    create_config_template
)

__all__ = [
    'ConfigParser',
    'ConfigParseResult', 
    'ConfigurationError',
    'load_config',
    'validate_config_file',
    'create_config_template'
]
