# src/spotprice/adapters/__init__.py
"""
Adapters Layer - External Interfaces

This package contains all adapters for external systems:
- Providers (spot-hinta.fi API, demo data)
- Formatting (dashboard card text)
"""

__all__ = []
