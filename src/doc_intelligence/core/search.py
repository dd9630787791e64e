"""Code search for documentation related to a query, scoped to one repository."""

from __future__ import annotations

import logging
from typing import Optional

import httpx

from .clients import github
from .errors import AnalysisFailure, InvalidInput
from .models import SearchHit

logger = logging.getLogger(__name__)

SEARCH_PAGE_SIZE = 10


def _to_hit(item: dict) -> SearchHit:
    text_matches = item.get("text_matches") or []
    context = (text_matches[0].get("fragment") or "") if text_matches else ""
    return SearchHit(
        path=item["path"],
        url=item.get("html_url", ""),
        score=item.get("score") or 0.0,
        context=context,
    )


async def find_related_docs(
    token: str,
    owner: str,
    repo: str,
    query: str,
    transport: Optional[httpx.AsyncBaseTransport] = None,
) -> list[SearchHit]:
    """Search ``owner/repo`` for files matching ``query``.

    Results keep GitHub's relevance order and scores; at most
    ``SEARCH_PAGE_SIZE`` hits are returned.
    """
    if not query or not query.strip():
        raise InvalidInput("Search query must not be empty")

    try:
        items = await github.search_code(
            token, f"{query} repo:{owner}/{repo}", per_page=SEARCH_PAGE_SIZE, transport=transport,
        )
    except httpx.HTTPError as exc:
        raise AnalysisFailure(f"Could not reach GitHub code search: {exc}") from exc

    try:
        hits = [_to_hit(item) for item in items[:SEARCH_PAGE_SIZE]]
    except (AttributeError, KeyError, TypeError, ValueError) as exc:
        raise AnalysisFailure(f"Unexpected code search result: {exc}") from exc

    logger.info("Code search in %s/%s for '%s' returned %d hit(s)", owner, repo, query, len(hits))
    return hits
