"""
Query layer for fsquery: folder navigation, node references and selectors.
"""

from .navigator import FolderQuery, FsNodeQuery, navigate_folder, navigate_node
from .select import MultiSelect, Select, SingleSelect

__all__ = [
    'FolderQuery',
    'FsNodeQuery',
    'navigate_folder',
    'navigate_node',
    'MultiSelect',
    'Select',
    'SingleSelect',
]
