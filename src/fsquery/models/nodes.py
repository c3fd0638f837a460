"""
Filesystem entry data models for fsquery.

This module defines the classified filesystem entries produced by the node
probe: a shared base shape (path, parsed path components and a metadata
snapshot) and the two variants, files and folders, told apart by a literal
``type`` discriminator.
"""

from typing import Any, Dict, Literal, Optional, Union
from datetime import datetime
from pathlib import Path
from enum import Enum
from pydantic import BaseModel, ConfigDict, Field, field_validator


class NodeType(Enum):
    """Enumeration of filesystem entry kinds."""
    FILE = "file"
    FOLDER = "folder"


class NodeMetadata(BaseModel):
    """
    Point-in-time metadata snapshot of a filesystem entry.

    Values are captured once when the entry is probed and are never refreshed.

    Attributes:
        size: Entry size in bytes
        access_time: Last access timestamp
        modified_time: Last modification timestamp
        change_time: Last status change timestamp
        created_time: Creation timestamp (None where the platform has no birth time)
    """

    model_config = ConfigDict(frozen=True)

    size: int = Field(..., ge=0, description="Entry size in bytes")
    access_time: datetime = Field(..., description="Last access timestamp")
    modified_time: datetime = Field(..., description="Last modification timestamp")
    change_time: datetime = Field(..., description="Last status change timestamp")
    created_time: Optional[datetime] = Field(None, description="Creation timestamp")

    def to_dict(self) -> Dict[str, Any]:
        """Convert metadata to dictionary representation."""
        data = self.model_dump()
        for key in ('access_time', 'modified_time', 'change_time', 'created_time'):
            if data[key]:
                data[key] = data[key].isoformat()
        return data


class BaseFsNode(BaseModel):
    """
    Shape shared by every classified filesystem entry.

    Attributes:
        path: Canonical absolute path of the entry
        directory: Absolute path of the containing directory
        base_name: Final path component including the extension
        file_name: Final path component without the extension
        ext: Extension including the leading dot, empty when there is none
        metadata: Metadata snapshot taken at probe time
    """

    model_config = ConfigDict(frozen=True)

    path: str = Field(..., min_length=1, description="Canonical absolute path")
    directory: str = Field(..., description="Containing directory")
    base_name: str = Field(..., description="Final path component")
    file_name: str = Field(..., description="Final path component without extension")
    ext: str = Field("", description="Extension with leading dot")
    metadata: Optional[NodeMetadata] = Field(None, description="Metadata snapshot")

    @field_validator('path')
    @classmethod
    def validate_path(cls, v: str) -> str:
        """Reject relative paths; entries always carry an absolute path."""
        if not Path(v).is_absolute():
            raise ValueError(f"Node path must be absolute: {v}")
        return v

    def is_file(self) -> bool:
        return self.type == 'file'

    def is_folder(self) -> bool:
        return self.type == 'folder'

    @property
    def node_type(self) -> NodeType:
        return NodeType(self.type)

    def to_dict(self) -> Dict[str, Any]:
        """Convert node to dictionary representation."""
        data = self.model_dump()
        if self.metadata:
            data['metadata'] = self.metadata.to_dict()
        return data

    def __str__(self) -> str:
        return f"{self.type}: {self.path}"


class FileNode(BaseFsNode):
    """A classified file entry."""

    type: Literal['file'] = 'file'


class FolderNode(BaseFsNode):
    """A classified folder entry."""

    type: Literal['folder'] = 'folder'


FsNode = Union[FileNode, FolderNode]


def build_node(path: Path, node_type: NodeType, metadata: Optional[NodeMetadata] = None) -> FsNode:
    """
    Build a node of the given type from an absolute path.

    Args:
        path: Canonical absolute path
        node_type: Kind observed for the path
        metadata: Optional metadata snapshot

    Returns:
        FileNode or FolderNode with parsed path components
    """
    node_cls = FolderNode if node_type is NodeType.FOLDER else FileNode
    return node_cls(
        path=str(path),
        directory=str(path.parent),
        base_name=path.name,
        file_name=path.stem,
        ext=path.suffix,
        metadata=metadata,
    )
