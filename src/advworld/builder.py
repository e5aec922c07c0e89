import logging
from typing import Optional
from .errors import (
    MissingFieldError,
    DuplicateItemError,
    DuplicateRoomError,
    BrokenExitError,
    UnknownItemReferenceError,
    UnknownStartRoomError,
)
from .records import ItemRecord, RoomRecord, WorldRecord
from .world import World, Item, Room, DEFAULT_ITEM_DESCRIPTION, DEFAULT_ROOM_DESCRIPTION, normalize_direction

logger = logging.getLogger(__name__)

def build_world(record: WorldRecord, warnings: Optional[list[str]] = None) -> World:
    """
    Build a validated World from the intermediate records of a world document.

    Rooms are created in one pass and linked in a second pass, so an exit may
    refer to a room defined later in the document.

    Entries with a blank name (items, rooms, exits and room item references)
    are skipped. A message for each is appended to 'warnings' if provided.
    Dangling references and duplicate names raise a WorldBuildError, and no
    World is returned.
    """
    builder = WorldBuilder(warnings)
    return builder.build(record)

class WorldBuilder:
    def __init__(self, warnings: Optional[list[str]] = None):
        self.warnings: list[str] = warnings if warnings is not None else []
        self.items: dict[str, Item] = {}
        self.rooms: dict[str, Room] = {}

    def build(self, record: WorldRecord) -> World:
        rooms, player_start = self.check_shape(record)
        self.create_items(record.items or [])
        self.create_rooms(rooms)
        self.link_rooms(rooms)
        start_room_name = self.resolve_start(player_start)

        logger.info("Built world with %d rooms and %d items, starting in '%s'.",
                    len(self.rooms), len(self.items), start_room_name)
        return World(rooms=self.rooms, items=self.items, start_room_name=start_room_name)

    def warn(self, message: str):
        logger.warning(message)
        self.warnings.append(message)

    def check_shape(self, record: WorldRecord) -> tuple[list[Optional[RoomRecord]], str]:
        if record.rooms is None:
            raise MissingFieldError("rooms")
        if is_blank(record.player_start):
            raise MissingFieldError("playerStart")
        if record.items is None:
            logger.info("No 'items' list in world document. No items will be loaded.")
        return record.rooms, record.player_start

    def create_items(self, item_records: list[Optional[ItemRecord]]):
        for item_record in item_records:
            if item_record is None or is_blank(item_record.name):
                self.warn("Skipping item with a missing name.")
                continue

            name = item_record.name.strip()
            if name in self.items:
                raise DuplicateItemError(name)

            self.items[name] = Item(name=name, description=or_default(item_record.description, DEFAULT_ITEM_DESCRIPTION))
            logger.debug("Created item '%s'.", name)

    def create_rooms(self, room_records: list[Optional[RoomRecord]]):
        # Names and descriptions only. Exits and items are linked once every room exists.
        for room_record in room_records:
            if room_record is None or is_blank(room_record.name):
                self.warn("Skipping room with a missing name.")
                continue

            name = room_record.name.strip()
            if name in self.rooms:
                raise DuplicateRoomError(name)

            self.rooms[name] = Room(name=name, description=or_default(room_record.description, DEFAULT_ROOM_DESCRIPTION))
            logger.debug("Created room '%s'.", name)

    def link_rooms(self, room_records: list[Optional[RoomRecord]]):
        for room_record in room_records:
            if room_record is None or is_blank(room_record.name):
                continue        # Already reported by create_rooms

            room = self.rooms[room_record.name.strip()]
            self.link_exits(room, room_record.exits or {})
            self.add_items(room, room_record.items or [])

    def link_exits(self, room: Room, exits: dict[Optional[str], Optional[str]]):
        for direction, destination in exits.items():
            if is_blank(direction) or is_blank(destination):
                self.warn(f"Skipping exit with a missing direction or destination in room '{room.name}'.")
                continue

            direction = normalize_direction(direction)
            destination = destination.strip()
            if destination not in self.rooms:
                raise BrokenExitError(room.name, direction, destination)

            # Last one wins if two directions normalize to the same key
            room.add_exit(direction, destination)
            logger.debug("Linked exit '%s' from '%s' to '%s'.", direction, room.name, destination)

    def add_items(self, room: Room, item_names: list[Optional[str]]):
        for item_name in item_names:
            if is_blank(item_name):
                self.warn(f"Skipping item with a missing name listed in room '{room.name}'.")
                continue

            item_name = item_name.strip()
            item = self.items.get(item_name)
            if item is None:
                raise UnknownItemReferenceError(room.name, item_name)

            room.add_item(item)
            logger.debug("Placed item '%s' in room '%s'.", item_name, room.name)

    def resolve_start(self, player_start: str) -> str:
        start_room_name = player_start.strip()
        if start_room_name not in self.rooms:
            raise UnknownStartRoomError(start_room_name)
        return start_room_name

def is_blank(value: Optional[str]) -> bool:
    return value is None or not value.strip()

def or_default(value: Optional[str], default: str) -> str:
    return default if is_blank(value) else value
