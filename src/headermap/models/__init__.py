"""Pydantic data models shared across all headermap components.

All models are re-exported here for convenient imports:
    from headermap.models import SchemaEntry, SchemaCatalog, MatchingConfig, MappingResult
"""

from headermap.models.config import MatchingConfig, ThresholdPair
from headermap.models.mapping import (
    MappingAction,
    MappingReport,
    MappingResult,
    MatchType,
    summarize_results,
)
from headermap.models.schema import SchemaCatalog, SchemaEntry

__all__ = [
    # schema
    "SchemaEntry",
    "SchemaCatalog",
    # config
    "ThresholdPair",
    "MatchingConfig",
    # mapping
    "MatchType",
    "MappingAction",
    "MappingResult",
    "MappingReport",
    "summarize_results",
]
