import json
from pathlib import Path
from typing import Any, Literal
import yaml
from .errors import WorldParseError, EmptyDocumentError

DocumentFormat = Literal["json", "yaml"]

YAML_SUFFIXES = {".yaml", ".yml"}

def format_for_path(path: Path) -> DocumentFormat:
    if path.suffix.lower() in YAML_SUFFIXES:
        return "yaml"
    return "json"

def parse_document(text: str, fmt: DocumentFormat = "json") -> Any:
    """
    Decode world file text into an untyped tree of dicts, lists and scalars.
    Raises WorldParseError on malformed syntax, and EmptyDocumentError if the
    document is well formed but holds nothing.
    """
    if fmt == "yaml":
        tree = _parse_yaml(text)
    else:
        tree = _parse_json(text)

    if tree is None or tree == {}:
        raise EmptyDocumentError("World document is empty.")

    return tree

def _parse_json(text: str) -> Any:
    if not text.strip():
        return None
    try:
        return json.loads(text)
    except json.JSONDecodeError as exc:
        raise WorldParseError(f"Invalid JSON at line {exc.lineno}, column {exc.colno}: {exc.msg}") from exc

def _parse_yaml(text: str) -> Any:
    try:
        return yaml.safe_load(text)
    except yaml.MarkedYAMLError as exc:
        mark = exc.problem_mark
        location = f" at line {mark.line + 1}, column {mark.column + 1}" if mark else ""
        raise WorldParseError(f"Invalid YAML{location}: {exc.problem}") from exc
    except yaml.YAMLError as exc:
        raise WorldParseError(f"Invalid YAML: {exc}") from exc
