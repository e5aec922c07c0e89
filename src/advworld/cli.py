import sys
from importlib.metadata import version, PackageNotFoundError
from typing import Optional, Sequence
from .args import parse_main_args
from .errors import WorldLoadError
from .loader import load_world
from .logging_config import setup_logging
from .world import World

def main(argv: Optional[Sequence[str]] = None) -> int:

    # Parse arguments
    args = parse_main_args(argv)
    setup_logging(args.log_level)

    # Load world definition
    warnings: list[str] = []
    try:
        world: World = load_world(args.world, warnings)
    except WorldLoadError as exc:
        print(f"WORLD LOAD FAILED\nFile: {args.world}\n{exc.message}")
        return 1

    print()
    print("**************************************************")
    print(f"advworld v{package_version()}")
    print(f"  World: {args.world}")
    print(f"  Rooms: {len(world.rooms)}")
    print(f"  Items: {len(world.items)}")
    print(f"  Start: {world.start_room_name}")
    print("**************************************************")

    if warnings:
        warning_lines = "\n".join([f"- {warning}" for warning in warnings])
        print(f"WORLD WARNINGS\nFile: {args.world}\n{warning_lines}")
        if args.strict:
            return 1

    return 0

def package_version() -> str:
    try:
        return version("advworld")
    except PackageNotFoundError:
        return "dev"

if __name__ == "__main__":
    sys.exit(main())
