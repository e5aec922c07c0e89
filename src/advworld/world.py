from dataclasses import dataclass, field
from typing import Optional

DEFAULT_ITEM_DESCRIPTION = "An item."
DEFAULT_ROOM_DESCRIPTION = "A non-descript location."

def normalize_direction(direction: str) -> str:
    return direction.strip().lower()

@dataclass(frozen=True)
class Item:
    name: str
    description: str = DEFAULT_ITEM_DESCRIPTION

@dataclass
class Room:
    name: str
    description: str = DEFAULT_ROOM_DESCRIPTION
    exits: dict[str, str] = field(default_factory=dict)     # Normalized direction -> destination room name
    items: list[Item] = field(default_factory=list)         # References into World.items, never copies

    def add_exit(self, direction: str, destination: str):
        if not direction or not direction.strip():
            raise ValueError("Exit direction cannot be empty.")
        if not destination or not destination.strip():
            raise ValueError("Exit destination cannot be empty.")
        self.exits[normalize_direction(direction)] = destination.strip()

    def add_item(self, item: Item):
        if item is None:
            raise ValueError("Cannot add a missing item to a room.")
        self.items.append(item)

    def remove_item(self, item: Item) -> bool:
        """
        Remove the first reference to this exact Item object.
        Returns False if the room does not hold it.
        """
        if item is None:
            raise ValueError("Cannot remove a missing item from a room.")
        for index, held in enumerate(self.items):
            if held is item:
                del self.items[index]
                return True
        return False

@dataclass
class World:
    """
    A text adventure world, loaded and validated from a world file.
    The item table owns every Item. Rooms refer to the same objects.
    """
    rooms: dict[str, Room]
    items: dict[str, Item]
    start_room_name: str

    def get_room(self, name: str) -> Optional[Room]:
        return self.rooms.get(name)

    def get_item(self, name: str) -> Optional[Item]:
        return self.items.get(name)

    def start_room(self) -> Room:
        return self.rooms[self.start_room_name]

def validate_world(world: World) -> list[str]:
    """
    Check a World against its structural invariants.
    Useful after gameplay has mutated room contents.
    """
    issues: list[str] = []

    for key, room in world.rooms.items():
        if key != room.name.strip():
            issues.append(f"Room '{room.name}' is stored under the key '{key}'.")

        for direction, destination in room.exits.items():
            if destination not in world.rooms:
                issues.append(f"Exit '{direction}' in room '{key}' leads to unknown room '{destination}'.")

        for item in room.items:
            if world.items.get(item.name) is not item:
                issues.append(f"Item '{item.name}' in room '{key}' is not the item registered in the 'items' list.")

    for key, item in world.items.items():
        if key != item.name.strip():
            issues.append(f"Item '{item.name}' is stored under the key '{key}'.")

    if world.start_room_name not in world.rooms:
        issues.append(f"Player start room '{world.start_room_name}' was not found in the 'rooms' list.")

    return issues
