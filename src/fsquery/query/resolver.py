"""
First-match extension resolution shared by the selectors.

A name is tried against each candidate extension in the order given and the
first candidate that exists with the required type wins. No directory listing
is involved; each candidate costs exactly one probe.
"""

import os
from typing import Iterable, List, Optional, Sequence
import logging

from ..models import errors
from ..models.nodes import FolderNode, FsNode, NodeType
from ..models.result import Result, fail, success
from ..tools.probe import NodeProbe


logger = logging.getLogger(__name__)


def candidate_extensions(extensions: Sequence[str]) -> List[str]:
    """Return the extensions to try; no extensions means the bare name."""
    return list(extensions) if extensions else ['']


def resolve_first(
    probe: NodeProbe,
    folder: FolderNode,
    name: str,
    extensions: Sequence[str],
    node_type: Optional[NodeType],
) -> Optional[FsNode]:
    """
    Resolve ``name`` inside ``folder`` with first-match extension fallback.

    Args:
        probe: Probe used for every candidate
        folder: Folder the name is relative to
        name: Relative name or path, without extension
        extensions: Candidate extensions in priority order
        node_type: Required node type, or None to accept either kind

    Returns:
        The first matching node, or None if no candidate matches
    """
    selection = probe.config.selection

    for ext in candidate_extensions(extensions):
        candidate = os.path.join(folder.path, selection.candidate_name(name, ext))
        result = probe.probe_as(candidate, node_type)
        if result.is_success():
            return result.get()
        logger.debug(f"Candidate {candidate} rejected: {result.error}")

    return None


def resolve_one(
    probe: NodeProbe,
    folder: FolderNode,
    name: str,
    extensions: Sequence[str],
    node_type: NodeType,
) -> Result[FsNode]:
    node = resolve_first(probe, folder, name, extensions, node_type)
    if node is None:
        return fail(errors.not_found(folder.path))
    return success(node)


def resolve_many(
    probe: NodeProbe,
    folder: FolderNode,
    paths: Iterable[str],
    extensions: Sequence[str],
    node_type: Optional[NodeType],
) -> Result[List[FsNode]]:
    """
    Resolve each path independently, omitting the ones that do not resolve.

    Output order follows input order; duplicates are resolved again.
    """
    nodes = []
    for path in paths:
        node = resolve_first(probe, folder, path, extensions, node_type)
        if node is not None:
            nodes.append(node)
    return success(nodes)
