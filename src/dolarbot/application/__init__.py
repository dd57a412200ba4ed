"""
Application Layer - Use Cases and Services

This package contains the facade that callers use to query quotes.
"""

from dolarbot.application.api_calls import ApiCalls

__all__ = [
    "ApiCalls",
]
