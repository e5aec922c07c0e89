import logging
from pathlib import Path
from typing import Optional
from .builder import build_world
from .errors import WorldLoadError, WorldReadError
from .parser import parse_document, format_for_path
from .records import map_world_record
from .world import World

logger = logging.getLogger(__name__)

def load_world(path: Path, warnings: Optional[list[str]] = None) -> World:
    """
    Load a world file (JSON, or YAML by file extension) into a validated World.

    Warnings for skipped entries are appended to 'warnings' if provided.
    Raises a WorldLoadError subclass, carrying the file path, if the file
    cannot be read or does not describe a valid world.
    """
    path = Path(path)
    logger.info("Loading world from %s", path)

    try:
        world_text = read_world_text(path)
        tree = parse_document(world_text, format_for_path(path))
        record = map_world_record(tree)
        world = build_world(record, warnings)
    except WorldLoadError as exc:
        exc.path = path
        logger.debug("Failed to load world: %s", exc)
        raise

    return world

def read_world_text(path: Path) -> str:
    try:
        with path.open("r", encoding="utf-8-sig") as world_file:
            return world_file.read()
    except (OSError, UnicodeDecodeError) as exc:
        raise WorldReadError(f"Could not read world file: {exc}") from exc
