"""Load and dump file maps in the ``{rootFolderId, fileMap}`` JSON shape.

The shape matches what browser front ends already ship as demo data::

    {"rootFolderId": "root",
     "fileMap": {"root": {"id": "root", "name": "Home", "isDir": true,
                          "childrenIds": ["a"], "childrenCount": 1}, ...}}

``childrenCount`` is accepted for compatibility but must agree with
``childrenIds`` when present.
"""

from __future__ import annotations

import json
from importlib import resources
from pathlib import Path

from ..errors import FileMapError
from .integrity import find_integrity_violations
from .store import NodeStore
from .types import Node

DEMO_FILE_MAP = "demo_fs_map.json"


def _node_from_dict(node_id: str, raw: object) -> Node:
    if not isinstance(raw, dict):
        raise FileMapError(f"entry {node_id!r} is not an object")
    declared_id = raw.get("id", node_id)
    if declared_id != node_id:
        raise FileMapError(f"entry {node_id!r} declares id {declared_id!r}")

    name = raw.get("name", node_id)
    if not isinstance(name, str):
        raise FileMapError(f"entry {node_id!r} has a non-string name")
    is_dir = bool(raw.get("isDir", False))
    parent_id = raw.get("parentId")
    if parent_id is not None and not isinstance(parent_id, str):
        raise FileMapError(f"entry {node_id!r} has a non-string parentId")

    children_ids = raw.get("childrenIds") or []
    if not isinstance(children_ids, list) or not all(isinstance(child, str) for child in children_ids):
        raise FileMapError(f"entry {node_id!r} has malformed childrenIds")
    children_count = raw.get("childrenCount")
    if children_count is not None and children_count != len(children_ids):
        raise FileMapError(
            f"entry {node_id!r} childrenCount {children_count!r} != {len(children_ids)} childrenIds"
        )

    return Node(
        id=node_id,
        name=name,
        is_dir=is_dir,
        parent_id=parent_id,
        children_ids=tuple(children_ids),
        selectable=raw.get("selectable", True) is not False,
        openable=raw.get("openable", True) is not False,
    )


def file_map_from_dict(data: object) -> NodeStore:
    """Build a validated ``NodeStore`` from decoded file-map JSON."""
    if not isinstance(data, dict):
        raise FileMapError("file map must be a JSON object")
    root_id = data.get("rootFolderId")
    file_map = data.get("fileMap")
    if not isinstance(root_id, str) or not isinstance(file_map, dict):
        raise FileMapError("file map needs a string rootFolderId and an object fileMap")

    nodes = [_node_from_dict(str(node_id), raw) for node_id, raw in file_map.items()]
    store = NodeStore.from_nodes(root_id, nodes)
    problems = find_integrity_violations(store)
    if problems:
        raise FileMapError("inconsistent file map: " + "; ".join(problems))
    return store


def file_map_to_dict(store: NodeStore) -> dict[str, object]:
    """Serialize ``store`` back into the ``{rootFolderId, fileMap}`` shape."""
    file_map: dict[str, dict[str, object]] = {}
    for node in store:
        entry: dict[str, object] = {"id": node.id, "name": node.name, "isDir": node.is_dir}
        if node.parent_id is not None:
            entry["parentId"] = node.parent_id
        if node.is_dir:
            entry["childrenIds"] = list(node.children_ids)
            entry["childrenCount"] = node.children_count
        if not node.selectable:
            entry["selectable"] = False
        if not node.openable:
            entry["openable"] = False
        file_map[node.id] = entry
    return {"rootFolderId": store.root_id, "fileMap": file_map}


def load_file_map(path: Path) -> NodeStore:
    """Read and validate a file map from ``path``."""
    try:
        data = json.loads(path.read_text(encoding="utf-8"))
    except (OSError, ValueError) as exc:
        raise FileMapError(f"{path}: cannot read file map ({exc})") from exc
    return file_map_from_dict(data)


def load_demo_file_map() -> NodeStore:
    """Return the file map bundled with the package."""
    text = resources.files("vfsbrowser.data").joinpath(DEMO_FILE_MAP).read_text(encoding="utf-8")
    return file_map_from_dict(json.loads(text))


__all__ = [
    "file_map_from_dict",
    "file_map_to_dict",
    "load_file_map",
    "load_demo_file_map",
]
