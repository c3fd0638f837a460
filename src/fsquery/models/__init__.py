"""
Data models for fsquery.

This module contains the entry, result, error and configuration structures
used throughout the package.
"""

from .errors import FsError, FsErrorKind, ResultError
from .nodes import FileNode, FolderNode, FsNode, NodeMetadata, NodeType
from .result import Failure, Result, Success

__all__ = [
    'FsError',
    'FsErrorKind',
    'ResultError',
    'FileNode',
    'FolderNode',
    'FsNode',
    'NodeMetadata',
    'NodeType',
    'Failure',
    'Result',
    'Success',
]
