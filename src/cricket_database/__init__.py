"""Cricket Database Bootstrap - Core package."""

from .bootstrap import apply_schema, ensure_database_exists, run_bootstrap, verify_schema
from .config import get_settings

__all__ = ["apply_schema", "ensure_database_exists", "get_settings", "run_bootstrap", "verify_schema"]
