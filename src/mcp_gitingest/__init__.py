"""MCP server exposing gitingest repository ingestion as agent tools."""

__version__ = "1.0.0"
