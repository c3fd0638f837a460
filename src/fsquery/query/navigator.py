"""
Folder navigation and node references.

``FolderQuery`` wraps a fallible folder and moves through the tree with ``cd``;
``FsNodeQuery`` wraps a fallible entry of either kind and can step to its
parent folder or narrow itself to a folder. Once a chain holds a failure, every
further step forwards that same failure without touching the filesystem.
"""

import os
from typing import Optional, Union
import logging

from ..models import errors
from ..models.nodes import BaseFsNode, FolderNode, FsNode
from ..models.result import Result, fail, success
from ..tools.probe import NodeProbe, PathLike, default_probe
from .select import Select


logger = logging.getLogger(__name__)


def _as_relative(segment: PathLike) -> str:
    """Strip leading separators so joining never leaves the base folder."""
    raw = os.fspath(segment)
    _, rest = os.path.splitdrive(raw)
    return rest.lstrip(os.sep + (os.altsep or ''))


class FolderQuery:
    """
    Immutable handle on a fallible folder.

    Attributes:
        result: Success with the folder node, or the failure that ended the chain
        probe: Probe used for every step of this chain
    """

    def __init__(self, result: Result[FolderNode], probe: Optional[NodeProbe] = None):
        self.result = result
        self.probe = probe or default_probe()

    def cd(self, folder_path: PathLike) -> 'FolderQuery':
        """
        Navigate to a folder relative to the current one.

        Args:
            folder_path: Segment relative to this folder (may contain separators or
                ``..``); a leading separator does not make it absolute

        Returns:
            New FolderQuery for the joined path, or one carrying the current failure
        """
        return self.result.match(
            success=lambda node: FolderQuery(
                self.probe.probe_folder(os.path.join(node.path, _as_relative(folder_path))),
                self.probe,
            ),
            fail=lambda error: self._forward(error, f"cd {folder_path}"),
        )

    @property
    def select(self) -> Select:
        return Select(self.result, self.probe)

    def get(self) -> Result[FolderNode]:
        return self.result

    def _forward(self, error: errors.FsError, step: str) -> 'FolderQuery':
        logger.debug(f"Skipping {step}: {error}")
        return FolderQuery(self.result, self.probe)

    def __repr__(self) -> str:
        return self.result.match(
            success=lambda node: f"FolderQuery({node.path})",
            fail=lambda error: f"FolderQuery({error})",
        )


class FsNodeQuery:
    """Immutable handle on a fallible entry of either kind."""

    def __init__(self, result: Result[FsNode], probe: Optional[NodeProbe] = None):
        self.result = result
        self.probe = probe or default_probe()

    @property
    def parent(self) -> FolderQuery:
        """Folder containing the entry, probed afresh."""
        return self.result.match(
            success=lambda node: FolderQuery(
                self.probe.probe_folder(os.path.dirname(node.path)),
                self.probe,
            ),
            fail=lambda error: FolderQuery(fail(error), self.probe),
        )

    @property
    def as_folder(self) -> FolderQuery:
        """The entry itself as a folder; no probing, ``not-folder`` for files."""
        return self.result.match(
            success=lambda node: FolderQuery(
                success(node) if node.is_folder() else fail(errors.not_a_folder(node.path)),
                self.probe,
            ),
            fail=lambda error: FolderQuery(fail(error), self.probe),
        )

    def get(self) -> Result[FsNode]:
        return self.result

    def __repr__(self) -> str:
        return self.result.match(
            success=lambda node: f"FsNodeQuery({node})",
            fail=lambda error: f"FsNodeQuery({error})",
        )


def navigate_folder(source: Union[PathLike, FolderNode], probe: Optional[NodeProbe] = None) -> FolderQuery:
    """
    Start a navigation chain at a folder.

    Args:
        source: Path to probe as a folder, or an already resolved FolderNode
        probe: Probe for the chain; the module default when omitted

    Returns:
        FolderQuery holding the folder or the failure to resolve it

    Raises:
        TypeError: If source is neither a path nor a node
    """
    probe = probe or default_probe()
    if isinstance(source, FolderNode):
        return FolderQuery(success(source), probe)
    if isinstance(source, BaseFsNode):
        return FolderQuery(fail(errors.not_a_folder(source.path)), probe)
    if isinstance(source, (str, os.PathLike)):
        return FolderQuery(probe.probe_folder(source), probe)
    raise TypeError(f"Cannot navigate from {type(source).__name__}")


def navigate_node(source: Union[PathLike, FsNode], probe: Optional[NodeProbe] = None) -> FsNodeQuery:
    """
    Wrap an entry of either kind.

    Args:
        source: Path to probe, or an already resolved node (no I/O)
        probe: Probe for the chain; the module default when omitted

    Returns:
        FsNodeQuery holding the node or the failure to resolve it

    Raises:
        TypeError: If source is neither a path nor a node
    """
    probe = probe or default_probe()
    if isinstance(source, BaseFsNode):
        return FsNodeQuery(success(source), probe)
    if isinstance(source, (str, os.PathLike)):
        return FsNodeQuery(probe.probe(source), probe)
    raise TypeError(f"Cannot navigate from {type(source).__name__}")
