"""Domain model for the virtual file tree.

This package contains non-UI tree primitives:
- the immutable ``Node`` datatype and selectable/openable helpers
- the copy-on-write ``NodeStore`` with create/delete/move operations
- referential-integrity checks
- file-map JSON loading and dumping
"""

from __future__ import annotations

from .types import Node, is_folder, is_openable, is_selectable
from .store import NEW_FOLDER_ID_PREFIX, NodeStore
from .integrity import check_integrity, find_integrity_violations
from .fs_map import file_map_from_dict, file_map_to_dict, load_demo_file_map, load_file_map

__all__ = [
    "Node",
    "is_folder",
    "is_openable",
    "is_selectable",
    "NEW_FOLDER_ID_PREFIX",
    "NodeStore",
    "check_integrity",
    "find_integrity_violations",
    "file_map_from_dict",
    "file_map_to_dict",
    "load_file_map",
    "load_demo_file_map",
]
