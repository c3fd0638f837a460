"""
fsquery - Core Package

A declarative, exception-free query layer over a filesystem tree: navigate
folders with ``cd`` and select files or folders by name with extension fallback.
Every operation returns a Result instead of raising.
"""

from .models.errors import FsError, FsErrorKind, ResultError
from .models.nodes import FileNode, FolderNode, FsNode, NodeMetadata, NodeType
from .models.result import Failure, Result, Success, fail, success
from .query.navigator import FolderQuery, FsNodeQuery, navigate_folder, navigate_node
from .query.select import MultiSelect, Select, SingleSelect
from .tools.probe import NodeProbe

__version__ = "0.1.0"

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
    'fail',
    'success',
    'FolderQuery',
    'FsNodeQuery',
    'navigate_folder',
    'navigate_node',
    'MultiSelect',
    'Select',
    'SingleSelect',
    'NodeProbe',
]
