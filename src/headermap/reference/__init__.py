"""Schema catalog reference data.

Re-exports for convenient imports:
    from headermap.reference import load_all_schemas, load_bundled_catalog
"""

from headermap.reference.loader import (
    DEFAULT_SCHEMA_DIR,
    DEFAULT_SCHEMA_FILES,
    SchemaLoadError,
    load_all_schemas,
    load_bundled_catalog,
    load_matching_config,
    load_schema,
)

__all__ = [
    "DEFAULT_SCHEMA_DIR",
    "DEFAULT_SCHEMA_FILES",
    "SchemaLoadError",
    "load_all_schemas",
    "load_bundled_catalog",
    "load_matching_config",
    "load_schema",
]
