"""Core business logic: scoring, GitHub client, markdown parsing, and data models.

This module is framework-agnostic. It has no dependency on MCP, FastMCP,
or any server framework. The FastMCP server in ``doc_intelligence.server``
is a thin adapter over ``dispatch``.
"""
