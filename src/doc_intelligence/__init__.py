"""Documentation Intelligence MCP Server.

Ask your AI how well a GitHub repository is documented: README quality score,
improvement suggestions, and code search for related docs.
"""

__version__ = "0.1.0"
