"""
Node probe for fsquery.

This module inspects one path at a time against the operating system and turns
the outcome into a ``Result``: a classified ``FileNode``/``FolderNode`` with a
metadata snapshot, or an ``FsError``. OS errors never escape; absence becomes
``not-found`` and anything else becomes ``unknown`` with the original error kept.
"""

import os
from pathlib import Path
from typing import Dict, Optional, Union
from datetime import datetime
import logging
import stat

from ..models import errors
from ..models.config import QueryConfig
from ..models.nodes import FileNode, FolderNode, FsNode, NodeMetadata, NodeType, build_node
from ..models.result import Result, fail, success


logger = logging.getLogger(__name__)

PathLike = Union[str, os.PathLike]


class NodeProbe:
    """
    Resolves single paths to classified filesystem entries.

    Every call performs a fresh ``stat``; nothing is cached between calls.
    The probe keeps counters of its calls for diagnostics.
    """

    def __init__(self, config: Optional[QueryConfig] = None):
        """
        Initialize the probe.

        Args:
            config: Configuration object; defaults are used when omitted
        """
        self.config = config or QueryConfig()
        self._stats = self._empty_stats()

    def probe(self, path: PathLike) -> Result[FsNode]:
        """
        Probe a path and classify it.

        Args:
            path: Absolute or relative path; relative paths resolve against the cwd

        Returns:
            Success with a FileNode or FolderNode, or Failure with
            ``not-found``/``unknown``
        """
        self._stats['probes'] += 1
        resolved = self._resolve(path)
        logger.debug(f"Probing {resolved}")

        try:
            if self.config.probe.follow_symlinks:
                stat_result = os.stat(resolved)
            else:
                stat_result = os.lstat(resolved)
        except FileNotFoundError:
            self._stats['missing'] += 1
            return fail(errors.not_found(str(resolved)))
        except (OSError, ValueError) as e:
            # Embedded NUL bytes and unencodable names raise ValueError
            logger.warning(f"Error probing {resolved}: {e}")
            self._stats['errors'] += 1
            return fail(errors.unknown(e))

        self._stats['found'] += 1
        node_type = NodeType.FOLDER if stat.S_ISDIR(stat_result.st_mode) else NodeType.FILE
        return success(build_node(resolved, node_type, self._extract_metadata(stat_result)))

    def probe_folder(self, path: PathLike) -> Result[FolderNode]:
        """Probe a path that must be a folder; a file yields ``not-folder``."""
        return self.probe(path).chain(
            lambda node: success(node) if node.is_folder() else fail(errors.not_a_folder(node.path))
        )

    def probe_file(self, path: PathLike) -> Result[FileNode]:
        """Probe a path that must be a file; a folder yields ``not-file``."""
        return self.probe(path).chain(
            lambda node: success(node) if node.is_file() else fail(errors.not_a_file(node.path))
        )

    def probe_as(self, path: PathLike, node_type: Optional[NodeType]) -> Result[FsNode]:
        """
        Probe a path narrowed to a node type.

        Args:
            path: Path to probe
            node_type: Required type, or None to accept either kind

        Returns:
            Result of the matching narrowed probe
        """
        if node_type is NodeType.FILE:
            return self.probe_file(path)
        if node_type is NodeType.FOLDER:
            return self.probe_folder(path)
        return self.probe(path)

    def _resolve(self, path: PathLike) -> Path:
        # Lexical normalization only; symlinks stay in the stored path
        raw = os.fspath(path)
        if self.config.probe.expand_user:
            raw = os.path.expanduser(raw)
        return Path(os.path.abspath(raw))

    def _extract_metadata(self, stat_result: os.stat_result) -> NodeMetadata:
        created_time = None
        if hasattr(stat_result, 'st_birthtime'):
            created_time = datetime.fromtimestamp(stat_result.st_birthtime)

        return NodeMetadata(
            size=stat_result.st_size,
            access_time=datetime.fromtimestamp(stat_result.st_atime),
            modified_time=datetime.fromtimestamp(stat_result.st_mtime),
            change_time=datetime.fromtimestamp(stat_result.st_ctime),
            created_time=created_time,
        )

    @staticmethod
    def _empty_stats() -> Dict[str, int]:
        return {
            'probes': 0,
            'found': 0,
            'missing': 0,
            'errors': 0
        }

    def get_stats(self) -> Dict[str, int]:
        """
        Get statistics about probe calls.

        Returns:
            Dictionary containing call counters
        """
        return self._stats.copy()

    def reset_stats(self) -> None:
        """Reset the statistics counters."""
        self._stats = self._empty_stats()


_default_probe = NodeProbe()


def default_probe() -> NodeProbe:
    """Return the module-level probe used when callers supply none."""
    return _default_probe


def create_fs_node(path: PathLike) -> Result[FsNode]:
    return _default_probe.probe(path)


def create_folder_node(path: PathLike) -> Result[FolderNode]:
    return _default_probe.probe_folder(path)


def create_file_node(path: PathLike) -> Result[FileNode]:
    return _default_probe.probe_file(path)
