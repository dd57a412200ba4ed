"""
Adapters Layer - External Interfaces

This package contains all adapters for external systems:
- Providers (APIs)
"""

__all__ = []
