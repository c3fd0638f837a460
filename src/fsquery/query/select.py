"""
Selectors bound to a fallible folder.

``Select`` is the factory reached through ``FolderQuery.select``; it hands out
single and multi selectors fixed to a required node type. Every selector first
sequences on the bound folder result, so a failed folder is returned unchanged
without any probing.
"""

from typing import List, Optional, Sequence

from ..models.nodes import FolderNode, FsNode, NodeType
from ..models.result import Result
from ..tools.probe import NodeProbe, default_probe
from .resolver import resolve_many, resolve_one


class SingleSelect:
    """
    Resolves exactly one entry of a required type.

    Use the named constructors ``SingleSelect.file`` and ``SingleSelect.folder``.
    """

    def __init__(self, result: Result[FolderNode], node_type: NodeType, probe: Optional[NodeProbe] = None):
        self.result = result
        self.node_type = node_type
        self.probe = probe or default_probe()

    @classmethod
    def file(cls, result: Result[FolderNode], probe: Optional[NodeProbe] = None) -> 'SingleSelect':
        return cls(result, NodeType.FILE, probe)

    @classmethod
    def folder(cls, result: Result[FolderNode], probe: Optional[NodeProbe] = None) -> 'SingleSelect':
        return cls(result, NodeType.FOLDER, probe)

    def by_path(self, name: str, *extensions: str) -> Result[FsNode]:
        """
        Select one entry by name, trying extensions in order.

        Args:
            name: Name or relative path inside the bound folder
            *extensions: Candidate extensions, with or without leading dot;
                none means the bare name

        Returns:
            Success with the first matching entry, or Failure with
            ``not-found`` referencing the folder (or the folder's own failure)
        """
        return self.result.chain(
            lambda folder: resolve_one(self.probe, folder, name, extensions, self.node_type)
        )

    def __repr__(self) -> str:
        return f"SingleSelect({self.node_type.value})"


class MultiSelect:
    """
    Resolves zero or more entries, omitting paths that do not resolve.

    ``node_type`` of None accepts files and folders alike. Use the named
    constructors ``MultiSelect.node``, ``MultiSelect.file`` and ``MultiSelect.folder``.
    """

    def __init__(self, result: Result[FolderNode], node_type: Optional[NodeType], probe: Optional[NodeProbe] = None):
        self.result = result
        self.node_type = node_type
        self.probe = probe or default_probe()

    @classmethod
    def node(cls, result: Result[FolderNode], probe: Optional[NodeProbe] = None) -> 'MultiSelect':
        return cls(result, None, probe)

    @classmethod
    def file(cls, result: Result[FolderNode], probe: Optional[NodeProbe] = None) -> 'MultiSelect':
        return cls(result, NodeType.FILE, probe)

    @classmethod
    def folder(cls, result: Result[FolderNode], probe: Optional[NodeProbe] = None) -> 'MultiSelect':
        return cls(result, NodeType.FOLDER, probe)

    def by_path(self, name: str, *extensions: str) -> Result[List[FsNode]]:
        return self.by_paths([name], *extensions)

    def by_paths(self, paths: Sequence[str], *extensions: str) -> Result[List[FsNode]]:
        """
        Select entries for several relative paths.

        Each path is resolved independently with first-match extension
        fallback. Paths that do not resolve are left out of the list.

        Args:
            paths: Relative paths inside the bound folder
            *extensions: Candidate extensions shared by every path

        Returns:
            Success with the resolved entries in input order, or the bound
            folder's failure
        """
        paths = list(paths)
        return self.result.chain(
            lambda folder: resolve_many(self.probe, folder, paths, extensions, self.node_type)
        )

    def __repr__(self) -> str:
        return f"MultiSelect({self.node_type.value if self.node_type else 'node'})"


class Select:
    """Factory of typed selectors over one folder result."""

    def __init__(self, result: Result[FolderNode], probe: Optional[NodeProbe] = None):
        self.result = result
        self.probe = probe or default_probe()

    @property
    def file(self) -> SingleSelect:
        return SingleSelect.file(self.result, self.probe)

    @property
    def folder(self) -> SingleSelect:
        return SingleSelect.folder(self.result, self.probe)

    @property
    def nodes(self) -> MultiSelect:
        return MultiSelect.node(self.result, self.probe)

    @property
    def files(self) -> MultiSelect:
        return MultiSelect.file(self.result, self.probe)

    @property
    def folders(self) -> MultiSelect:
        return MultiSelect.folder(self.result, self.probe)
