"""Arrange a flat list of playlists into the user's folder hierarchy."""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass, field, replace
from itertools import count
from typing import Any

from .models import Playlist, PlaylistFolder, PlaylistFolderItem


@dataclass
class PlaylistFolderNode:
    """A node of the exported playlist folder tree: a folder or a playlist."""

    name: str | None
    node_type: str
    uri: str = ""
    children: list[PlaylistFolderNode] = field(default_factory=list)

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> PlaylistFolderNode:
        """Build from an exported node; ``uri`` and ``children`` are optional."""
        return cls(
            name=data.get("name"),
            node_type=data["type"],
            uri=data.get("uri", ""),
            children=[cls.from_dict(child) for child in data.get("children", ())],
        )


def structurize(
    playlists: Iterable[Playlist], nodes: Iterable[PlaylistFolderNode]
) -> list[PlaylistFolderItem]:
    """Place ``playlists`` into the folders described by ``nodes``.

    Every folder yields two entries: the folder itself and a link back to its
    parent. Playlists not referenced by any node end up in the root folder.
    The given playlists are not modified.
    """
    remaining = {p.id.id: p for p in playlists}
    items: list[PlaylistFolderItem] = []
    folder_ids = count(1)

    def add(level: Iterable[PlaylistFolderNode], current: int) -> None:
        for node in level:
            _, sep, ident = node.uri.rpartition(":")
            if not sep:
                continue
            if node.node_type == "folder":
                target = next(folder_ids)
                name = node.name if node.name is not None else f"folder_{current}"
                items.append(PlaylistFolder(name, current, target))
                items.append(PlaylistFolder(f"← {name}", target, current))
                add(node.children, target)
            elif (playlist := remaining.pop(ident, None)) is not None:
                items.append(replace(playlist, current_folder_id=current))

    add(nodes, 0)
    items.extend(replace(p, current_folder_id=0) for p in remaining.values())
    return items