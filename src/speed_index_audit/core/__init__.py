"""Core audit logic — scoring curve, audit orchestration, sources, and data models.

This module is framework-agnostic. It has no dependency on MCP, FastMCP,
or any server framework; the tool server imports from here.
"""
