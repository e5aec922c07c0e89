from pathlib import Path
from typing import Optional

class WorldLoadError(Exception):
    """
    Base class for everything that can go wrong while loading a world file.
    The loader attaches the file path before the error reaches the caller.
    """
    def __init__(self, message: str):
        super().__init__(message)
        self.message = message
        self.path: Optional[Path] = None

    def __str__(self) -> str:
        if self.path is not None:
            return f"{self.path}: {self.message}"
        return self.message

class WorldReadError(WorldLoadError):
    """Raised when the world file cannot be read"""

class WorldParseError(WorldLoadError):
    """Raised when the world file is not a well formed document"""

class EmptyDocumentError(WorldParseError):
    """Raised when the world file is well formed, but contains nothing"""

class WorldMappingError(WorldLoadError):
    """Raised when a field of the world document has the wrong type"""

    def __init__(self, message: str, field_path: Optional[str] = None):
        super().__init__(message)
        self.field_path = field_path

class WorldBuildError(WorldLoadError):
    """Raised when the world document is structurally invalid"""
    phase: str = ""

class MissingFieldError(WorldBuildError):
    phase = "shape"

    def __init__(self, field_name: str):
        super().__init__(f"Required field '{field_name}' is missing or empty.")
        self.field_name = field_name

class DuplicateItemError(WorldBuildError):
    phase = "items"

    def __init__(self, name: str):
        super().__init__(f"Duplicate item name '{name}'.")
        self.name = name

class DuplicateRoomError(WorldBuildError):
    phase = "rooms"

    def __init__(self, name: str):
        super().__init__(f"Duplicate room name '{name}'.")
        self.name = name

class BrokenExitError(WorldBuildError):
    phase = "links"

    def __init__(self, room: str, direction: str, destination: str):
        super().__init__(f"Exit '{direction}' in room '{room}' leads to unknown room '{destination}'.")
        self.room = room
        self.direction = direction
        self.destination = destination

class UnknownItemReferenceError(WorldBuildError):
    phase = "links"

    def __init__(self, room: str, item: str):
        super().__init__(f"Item '{item}' listed in room '{room}' was not found in the 'items' list.")
        self.room = room
        self.item = item

class UnknownStartRoomError(WorldBuildError):
    phase = "start"

    def __init__(self, name: str):
        super().__init__(f"Player start room '{name}' was not found in the 'rooms' list.")
        self.name = name
