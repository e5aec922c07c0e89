import argparse
import os
from pathlib import Path
from typing import Optional, Sequence

LOG_LEVEL_ENV = "ADVWORLD_LOG_LEVEL"
LOG_LEVELS = ["DEBUG", "INFO", "WARNING", "ERROR"]

def parse_main_args(argv: Optional[Sequence[str]] = None):
    parser = argparse.ArgumentParser(description="advworld - Text adventure world loader")
    parser.add_argument(
        "--world",
        type=Path,
        default=Path("assets/worlds/example.json"),
        help="Path to a world JSON or YAML file"
    )
    parser.add_argument(
        "--log-level",
        type=str.upper,
        default=os.environ.get(LOG_LEVEL_ENV, "WARNING").upper(),
        choices=LOG_LEVELS,
        help=f"Logging level. Defaults to ${LOG_LEVEL_ENV}, or WARNING."
    )
    parser.add_argument(
        "--strict",
        action="store_true",
        help="Fail if any entries were skipped while loading"
    )
    return parser.parse_args(argv)
