"""Read and write the registry JSON file."""

import json
import os
import tempfile
from pathlib import Path
from typing import Any

from pydantic import TypeAdapter, ValidationError

from .models import ElementRecord, Registry

_registry_adapter = TypeAdapter(dict[str, ElementRecord])


class RegistryLoadError(Exception):
    """Raised when a registry file is missing or malformed."""


def registry_to_json(registry: Registry) -> dict[str, Any]:
    """Convert a registry to the flat tag -> record JSON shape."""
    return {tag: record.model_dump(by_alias=True) for tag, record in registry.items()}


def write_registry(registry: Registry, output_path: Path) -> Path:
    """Write registry to JSON, replacing any existing file atomically.

    Args:
        registry: Registry to save
        output_path: Destination JSON path

    Returns:
        Path to the written file
    """
    output_path.parent.mkdir(parents=True, exist_ok=True)
    content = json.dumps(registry_to_json(registry), indent=2, ensure_ascii=False) + "\n"

    fd, tmp_name = tempfile.mkstemp(dir=output_path.parent, prefix=f".{output_path.name}.", suffix=".tmp")
    try:
        with os.fdopen(fd, "w", encoding="utf-8") as f:
            f.write(content)
        os.replace(tmp_name, output_path)
    except BaseException:
        Path(tmp_name).unlink(missing_ok=True)
        raise

    return output_path


def load_registry(path: Path) -> Registry:
    """Load and validate a registry JSON file.

    Args:
        path: Path to elements.json

    Returns:
        Registry keyed by tag

    Raises:
        RegistryLoadError: If the file is missing, not JSON, or fails schema checks
    """
    if not path.exists():
        raise RegistryLoadError(f"Registry file not found: {path}")

    try:
        with path.open(encoding="utf-8") as f:
            data = json.load(f)
    except json.JSONDecodeError as e:
        raise RegistryLoadError(f"Invalid JSON in {path}: {e}") from e

    try:
        registry = _registry_adapter.validate_python(data)
    except ValidationError as e:
        raise RegistryLoadError(f"Registry schema error in {path}: {e}") from e

    for key, record in registry.items():
        if key != record.tag:
            raise RegistryLoadError(f"Key '{key}' does not match record tag '{record.tag}' in {path}")

    return registry
