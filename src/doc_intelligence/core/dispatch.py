"""Single entry point for the documentation tool.

Validates the request, routes it to the analyzer, suggester or code search,
and folds every downstream failure into one ``AnalysisFailure``.
"""

from __future__ import annotations

import logging
from typing import Optional, Union

import httpx

from .analyzer import analyze_documentation, suggest_improvements
from .errors import AnalysisFailure, InvalidAction, InvalidInput, MissingCredential, MissingQuery
from .models import Action, DocumentationReport, SearchHit
from .search import find_related_docs

logger = logging.getLogger(__name__)

DispatchResult = Union[DocumentationReport, list[str], list[SearchHit]]


def parse_action(action: Union[str, Action, None]) -> Action:
    """Normalize an action name; raises InvalidAction for anything unknown."""
    if isinstance(action, Action):
        return action
    try:
        return Action((action or "").strip().lower())
    except ValueError:
        valid = ", ".join(a.value for a in Action)
        raise InvalidAction(f"Invalid action '{action}'. Expected one of: {valid}") from None


async def dispatch(
    owner: str,
    repo: str,
    action: Union[str, Action],
    query: Optional[str] = None,
    token: Optional[str] = None,
    transport: Optional[httpx.AsyncBaseTransport] = None,
) -> DispatchResult:
    """Run one documentation action against ``owner/repo``.

    Args:
        owner: Repository owner.
        repo: Repository name.
        action: ``analyze``, ``suggest`` or ``search``.
        query: Search text, required for ``search``.
        token: GitHub personal access token.
        transport: Optional httpx transport, used by tests.

    Returns:
        A ``DocumentationReport`` for analyze, a list of suggestion strings
        for suggest, and a list of ``SearchHit`` for search.

    Raises:
        MissingCredential, MissingQuery, InvalidAction, InvalidInput: bad request.
        AnalysisFailure: any GitHub or content failure, with the upstream message.
    """
    if not token:
        raise MissingCredential("GitHub token is required")
    if not owner or not owner.strip() or not repo or not repo.strip():
        raise InvalidInput("Repository owner and name are required")
    selected = parse_action(action)
    if selected == Action.SEARCH and (not query or not query.strip()):
        raise MissingQuery("Search query is required for search action")

    try:
        if selected == Action.ANALYZE:
            return await analyze_documentation(token, owner, repo, transport=transport)
        if selected == Action.SUGGEST:
            return await suggest_improvements(token, owner, repo, transport=transport)
        return await find_related_docs(token, owner, repo, query, transport=transport)
    except (AnalysisFailure, httpx.HTTPError) as exc:
        url = getattr(exc, "url", None)
        if url:
            logger.warning("Action %s on %s/%s failed at %s: %s", selected.value, owner, repo, url, exc)
        else:
            logger.warning("Action %s on %s/%s failed: %s", selected.value, owner, repo, exc)
        raise AnalysisFailure(f"Failed to analyze documentation: {exc}") from exc
