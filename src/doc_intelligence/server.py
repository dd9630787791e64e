"""Documentation Intelligence MCP Server.

FastMCP server exposing one action-dispatching tool.
Run: doc-intelligence-mcp
"""

from __future__ import annotations

import logging
import os
from contextlib import asynccontextmanager
from typing import AsyncIterator

from mcp.server.fastmcp import FastMCP
from mcp.types import ToolAnnotations

from .core.clients.github import get_api_base
from .core.dispatch import dispatch, parse_action
from .core.errors import MissingCredential
from .core.models import Action
from .core.render import render_report, render_search_results, render_suggestions
from .manifest import DocIntelligencePlugin

logger = logging.getLogger(__name__)

READ_ONLY = ToolAnnotations(readOnlyHint=True, destructiveHint=False, idempotentHint=True, openWorldHint=True)

MANIFEST_RESOURCE_URI = "manifest://doc-intelligence"


@asynccontextmanager
async def lifespan(server: FastMCP) -> AsyncIterator[None]:
    """Configure logging; the server holds no other state."""
    logging.basicConfig(level=logging.INFO, format="%(asctime)s %(name)s %(levelname)s %(message)s")
    logger.info("Documentation Intelligence server starting (GitHub API: %s)", get_api_base())
    yield


mcp = FastMCP(
    DocIntelligencePlugin.name,
    instructions=DocIntelligencePlugin.description,
    lifespan=lifespan,
)


def _get_github_token() -> str:
    env_var = DocIntelligencePlugin.token_env_var()
    token = os.environ.get(env_var, "")
    if not token:
        raise MissingCredential(f"{env_var} environment variable is required. Create a token at {DocIntelligencePlugin.settings[0]['url']}")
    return token


@mcp.resource(MANIFEST_RESOURCE_URI, mime_type="application/json")
def plugin_manifest() -> str:
    """Action schema and required settings of the documentation tool."""
    return DocIntelligencePlugin.render()


@mcp.tool(annotations=READ_ONLY)
async def analyze_github_documentation(owner: str, repo: str, action: str, query: str = "") -> dict:
    """Analyze GitHub repository documentation and suggest improvements.

    Args:
        owner: GitHub repository owner (user or organization).
        repo: GitHub repository name.
        action: 'analyze' scores the README, 'suggest' lists improvements,
                'search' finds files matching the query.
        query: Search text. Required when action is 'search'.
    """
    token = _get_github_token()
    selected = parse_action(action)
    result = await dispatch(owner, repo, selected, query=query or None, token=token)

    if selected == Action.ANALYZE:
        return {
            "action": selected.value,
            "owner": owner,
            "repo": repo,
            "report": result.model_dump(mode="json"),
            "markdown": render_report(result),
            "summary": _report_summary(result),
        }
    if selected == Action.SUGGEST:
        return {
            "action": selected.value,
            "owner": owner,
            "repo": repo,
            "suggestions": result,
            "markdown": render_suggestions(owner, repo, result),
            "summary": f"{len(result)} suggestion(s) for {owner}/{repo}",
        }
    return {
        "action": selected.value,
        "owner": owner,
        "repo": repo,
        "query": query,
        "results": [hit.model_dump(mode="json") for hit in result],
        "count": len(result),
        "markdown": render_search_results(query, result),
        "summary": f"Found {len(result)} file(s) in {owner}/{repo} matching '{query}'",
    }


def _report_summary(report) -> str:
    parts = [f"Overall documentation score: {report.overall_score:.0f}/100"]
    if report.readme is not None:
        parts.append(f"README quality: {report.readme.quality}/100")
    if report.issues:
        parts.append(f"{len(report.issues)} issue(s): " + "; ".join(i.description for i in report.issues))
    return " | ".join(parts)


def main():
    """Entry point for the CLI command."""
    mcp.run()


if __name__ == "__main__":
    main()
