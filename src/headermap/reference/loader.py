"""Schema catalog and matching config loaders.

Alias documents are JSON objects of canonical id -> entry. Several
documents are merged into one SchemaCatalog, the first document to define
a canonical id wins.

Usage:
    from headermap.reference import load_bundled_catalog, load_all_schemas

    catalog = load_bundled_catalog()
    catalog = load_all_schemas("aliases/")
"""

from __future__ import annotations

import json
from pathlib import Path

from loguru import logger
from pydantic import ValidationError

from headermap.models.config import MatchingConfig
from headermap.models.schema import SchemaCatalog, SchemaEntry

DEFAULT_SCHEMA_DIR = Path(__file__).resolve().parent.parent / "data" / "aliases"

DEFAULT_SCHEMA_FILES: tuple[str, ...] = (
    "feeding-data-alias.json",
    "production-data-alias.json",
    "stirrer-data-alias.json",
    "tank-data-alias.json",
)


class SchemaLoadError(Exception):
    """A schema or config document could not be read or parsed."""


def load_schema(json_path: str | Path) -> dict[str, SchemaEntry]:
    """Load a single alias document.

    Args:
        json_path: Path to a JSON object of canonical id -> entry.

    Returns:
        Entries keyed by canonical id, in document order.

    Raises:
        FileNotFoundError: If the file does not exist.
        SchemaLoadError: If the file is not valid JSON or an entry is malformed.
    """
    json_path = Path(json_path)
    if not json_path.exists():
        raise FileNotFoundError(f"Schema file not found: {json_path}")

    try:
        raw = json.loads(json_path.read_text(encoding="utf-8"))
    except json.JSONDecodeError as e:
        msg = f"Failed to load schema from {json_path}: {e}"
        raise SchemaLoadError(msg) from e

    if not isinstance(raw, dict):
        msg = f"Failed to load schema from {json_path}: expected a JSON object"
        raise SchemaLoadError(msg)

    entries: dict[str, SchemaEntry] = {}
    for key, data in raw.items():
        try:
            entries[key] = SchemaEntry.model_validate(data)
        except ValidationError as e:
            msg = f"Invalid schema entry '{key}' in {json_path}: {e}"
            raise SchemaLoadError(msg) from e

    logger.debug("Loaded {n} schema entries from {path}", n=len(entries), path=json_path.name)
    return entries


def load_all_schemas(
    directory: str | Path = DEFAULT_SCHEMA_DIR,
    files: tuple[str, ...] | list[str] = DEFAULT_SCHEMA_FILES,
) -> SchemaCatalog:
    """Merge alias documents from a directory into one catalog.

    Documents are read in the order given. Missing documents are skipped
    with a warning; duplicate canonical ids keep the first definition.

    Args:
        directory: Directory holding the alias documents.
        files: Document filenames to read, in merge order.

    Returns:
        SchemaCatalog in first-seen order.

    Raises:
        FileNotFoundError: If the directory does not exist.
        SchemaLoadError: If any present document is malformed.
    """
    directory = Path(directory)
    if not directory.is_dir():
        raise FileNotFoundError(f"Schema directory not found: {directory}")

    merged: dict[str, SchemaEntry] = {}
    for filename in files:
        path = directory / filename
        if not path.exists():
            logger.warning("Schema file missing, skipping: {}", path)
            continue

        try:
            entries = load_schema(path)
        except SchemaLoadError:
            logger.exception("Failed to load schema file: {}", path.name)
            raise

        for key, entry in entries.items():
            if key in merged:
                logger.debug("Duplicate canonical id '{}' in {}, keeping first", key, path.name)
                continue
            merged[key] = entry

    logger.info("Loaded {} canonical columns from {}", len(merged), directory)
    return SchemaCatalog(merged)


def load_bundled_catalog() -> SchemaCatalog:
    """Load the bundled sample catalog from the default data location."""
    return load_all_schemas(DEFAULT_SCHEMA_DIR)


def load_matching_config(json_path: str | Path) -> MatchingConfig:
    """Load a MatchingConfig from a JSON file.

    Omitted fields take their defaults. Threshold ordering is validated
    by the model.

    Raises:
        FileNotFoundError: If the file does not exist.
        SchemaLoadError: If the file is not valid JSON or fails validation.
    """
    json_path = Path(json_path)
    if not json_path.exists():
        raise FileNotFoundError(f"Config file not found: {json_path}")

    try:
        config = MatchingConfig.model_validate_json(json_path.read_text(encoding="utf-8"))
    except ValidationError as e:
        msg = f"Invalid matching config in {json_path}: {e}"
        raise SchemaLoadError(msg) from e

    logger.debug("Loaded matching config from {}", json_path)
    return config
