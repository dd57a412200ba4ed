# src/dolarbot/__init__.py
"""
DolarBot API - Argentine Dollar Quote Client

A cached, asynchronous client for the api-dolar-argentina REST service.
It normalizes the official, blue, bank and market dollar quotes plus the
country-risk indicator into immutable domain objects.
"""

__version__ = "1.0.0"
