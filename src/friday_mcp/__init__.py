"""MCP server for the Friday Data scraping, search and extraction API."""

__version__ = "1.0.1"
