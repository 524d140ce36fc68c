"""Helpers shared by the MCP server packages."""
