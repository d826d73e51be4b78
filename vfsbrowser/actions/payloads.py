"""Typed payloads carried by action requests."""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import MISSING, dataclass, fields, is_dataclass

from ..errors import PayloadError

CLICK_SINGLE = "single"
CLICK_DOUBLE = "double"


@dataclass(frozen=True)
class MouseClickFilePayload:
    file_id: str
    file_display_index: int
    click_type: str = CLICK_SINGLE
    ctrl_key: bool = False
    shift_key: bool = False
    alt_key: bool = False

    def __post_init__(self) -> None:
        if self.file_display_index < 0:
            raise PayloadError(f"file_display_index must be >= 0, got {self.file_display_index!r}")
        if self.click_type not in (CLICK_SINGLE, CLICK_DOUBLE):
            raise PayloadError(f"click_type must be 'single' or 'double', got {self.click_type!r}")


@dataclass(frozen=True)
class OpenFilesPayload:
    target_file_id: str | None = None
    file_ids: tuple[str, ...] = ()

    def __post_init__(self) -> None:
        object.__setattr__(self, "file_ids", tuple(self.file_ids))

    @property
    def file_to_open(self) -> str | None:
        if self.target_file_id is not None:
            return self.target_file_id
        return self.file_ids[0] if self.file_ids else None


@dataclass(frozen=True)
class MoveFilesPayload:
    file_ids: tuple[str, ...]
    source_id: str
    destination_id: str

    def __post_init__(self) -> None:
        object.__setattr__(self, "file_ids", tuple(self.file_ids))


@dataclass(frozen=True)
class ChangeSelectionPayload:
    selection: frozenset[str] = frozenset()

    def __post_init__(self) -> None:
        object.__setattr__(self, "selection", frozenset(self.selection))


@dataclass(frozen=True)
class OpenFileContextMenuPayload:
    client_x: int
    client_y: int
    trigger_file_id: str | None = None


@dataclass(frozen=True)
class CreateFolderPayload:
    name: str = ""


def coerce_payload(payload_type: type | None, payload: object) -> object:
    """Return ``payload`` as an instance of ``payload_type``.

    Instances pass through, mappings become keyword arguments and ``None``
    builds the default payload. Actions without a payload type take anything.
    """
    if payload_type is None or isinstance(payload, payload_type):
        return payload
    if not is_dataclass(payload_type):
        raise PayloadError(f"payload type {payload_type!r} is not a dataclass")
    if payload is None:
        payload = {}
    if not isinstance(payload, Mapping):
        raise PayloadError(f"expected {payload_type.__name__} or a mapping, got {type(payload).__name__}")

    names = {item.name for item in fields(payload_type)}
    unknown = sorted(str(key) for key in payload if key not in names)
    if unknown:
        raise PayloadError(f"{payload_type.__name__} has no field(s) {', '.join(unknown)}")
    missing = sorted(
        item.name
        for item in fields(payload_type)
        if item.default is MISSING and item.default_factory is MISSING and item.name not in payload
    )
    if missing:
        raise PayloadError(f"{payload_type.__name__} is missing {', '.join(missing)}")
    return payload_type(**payload)


__all__ = [
    "CLICK_SINGLE",
    "CLICK_DOUBLE",
    "MouseClickFilePayload",
    "OpenFilesPayload",
    "MoveFilesPayload",
    "ChangeSelectionPayload",
    "OpenFileContextMenuPayload",
    "CreateFolderPayload",
    "coerce_payload",
]
