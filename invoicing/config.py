"""Centralized configuration for the invoicing back-end.

This module provides:
- Single source of truth for where entity files are stored
- Logging settings read from the environment

Usage:
    from invoicing.config import get_data_dir, ENTITY_FILES

    products_file = get_data_dir() / ENTITY_FILES["products"]
"""

import os
from pathlib import Path
from typing import Dict, Optional


# =============================================================================
# STORAGE CONFIGURATION
# =============================================================================

# Repo root directory
_REPO_ROOT = Path(__file__).resolve().parent.parent

# Directory holding one JSON file per entity type
# Allow environment variable override for container support
DEFAULT_DATA_DIR = _REPO_ROOT / "Data"

# Route name -> backing file name
ENTITY_FILES: Dict[str, str] = {
    "categories": "categories.json",
    "customers": "customers.json",
    "invoices": "invoices.json",
    "products": "products.json",
}


# =============================================================================
# LOGGING CONFIGURATION
# =============================================================================

LOG_LEVEL = os.environ.get("INVOICING_LOG_LEVEL", "INFO")
LOG_FILE: Optional[str] = os.environ.get("INVOICING_LOG_FILE") or None


def get_data_dir() -> Path:
    """Get the data directory, re-reading the environment.

    Returns:
        Path from INVOICING_DATA_DIR, or the repo-local Data/ directory.
    """
    return Path(os.environ.get("INVOICING_DATA_DIR", str(DEFAULT_DATA_DIR)))


def get_entity_file(entity_name: str) -> Path:
    """Get the backing file for an entity type.

    Args:
        entity_name: Route name of the entity type (e.g. 'products')

    Raises:
        KeyError: If the entity type is unknown
    """
    return get_data_dir() / ENTITY_FILES[entity_name]
