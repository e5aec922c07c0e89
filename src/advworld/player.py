from dataclasses import dataclass, field
from .world import Item

@dataclass
class Player:
    """
    The player's position and inventory.
    Inventory entries are the same Item objects held by the World and its rooms.
    """
    current_room_name: str
    inventory: list[Item] = field(default_factory=list)

    def __post_init__(self):
        self.current_room_name = _room_name(self.current_room_name)

    def move_to(self, room_name: str):
        self.current_room_name = _room_name(room_name)

    def take_item(self, item: Item):
        if item is None:
            raise ValueError("Cannot add a missing item to the inventory.")
        self.inventory.append(item)

    def drop_item(self, item: Item) -> bool:
        if item is None:
            raise ValueError("Cannot drop a missing item from the inventory.")
        for index, held in enumerate(self.inventory):
            if held is item:
                del self.inventory[index]
                return True
        return False

def _room_name(name: str) -> str:
    if not name or not name.strip():
        raise ValueError("Room name cannot be empty.")
    return name.strip()
