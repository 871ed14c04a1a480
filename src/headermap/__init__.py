"""Header mapping: match free-form column headers to a canonical schema."""

__version__ = "0.1.0"
