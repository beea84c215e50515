"""Invoicing back-end.

A small HTTP API for managing:
- Products and product categories
- Customers
- Invoices with line items

Every entity type is persisted to its own JSON file under the data directory.

Usage:
    ./start_server.py  # From repo root
"""

from .server import app

__all__ = ['app']
