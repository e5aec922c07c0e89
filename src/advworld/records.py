from dataclasses import dataclass
from typing import Any, Optional
from dacite import from_dict
from dacite.exceptions import DaciteError, DaciteFieldError
from .errors import WorldMappingError

# Intermediate records, mirroring the world document.
# Every field may be absent. Nothing is cross-checked here; see builder.py.

@dataclass
class ItemRecord:
    name: Optional[str] = None
    description: Optional[str] = None

@dataclass
class RoomRecord:
    name: Optional[str] = None
    description: Optional[str] = None
    exits: Optional[dict[Optional[str], Optional[str]]] = None
    items: Optional[list[Optional[str]]] = None

@dataclass
class WorldRecord:
    player_start: Optional[str] = None
    items: Optional[list[Optional[ItemRecord]]] = None
    rooms: Optional[list[Optional[RoomRecord]]] = None

# Document key -> record field. Any other key is ignored.
WORLD_KEYS = {
    "playerStart": "player_start",
    "items": "items",
    "rooms": "rooms",
}

def map_world_record(tree: Any) -> WorldRecord:
    """
    Map a parsed world document onto a WorldRecord.
    Raises WorldMappingError if a field holds the wrong kind of value.
    """
    if not isinstance(tree, dict):
        raise WorldMappingError(f"World document must be an object, not {_describe_type(tree)}.")

    data = {field_name: tree[key] for key, field_name in WORLD_KEYS.items() if key in tree}
    try:
        return from_dict(WorldRecord, data)
    except DaciteFieldError as exc:
        field_path = _document_field_path(exc.field_path)
        raise WorldMappingError(f"Field '{field_path}' has the wrong type: {exc}", field_path=field_path) from exc
    except DaciteError as exc:
        raise WorldMappingError(f"World document did not match the expected schema: {exc}") from exc

def _document_field_path(field_path: Optional[str]) -> Optional[str]:
    if not field_path:
        return field_path
    head, _, rest = field_path.partition(".")
    for key, field_name in WORLD_KEYS.items():
        if head == field_name:
            head = key
    return f"{head}.{rest}" if rest else head

def _describe_type(value: Any) -> str:
    if isinstance(value, list):
        return "a list"
    if isinstance(value, str):
        return "a string"
    return type(value).__name__
