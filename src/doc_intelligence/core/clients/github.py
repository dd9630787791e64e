"""GitHub REST API client.

API docs: https://docs.github.com/en/rest
Rate limit: 5,000 requests/hour with a token; code search is limited to
10 requests/minute. Retries and rate-limit handling are left to the caller.
"""

from __future__ import annotations

import base64
import binascii
import logging
import os
from typing import Optional
from urllib.parse import quote

import httpx

from ..errors import AnalysisFailure, GitHubAPIError
from ..models import ContentEntry

logger = logging.getLogger(__name__)

DEFAULT_API_BASE = "https://api.github.com"
API_VERSION = "2022-11-28"

JSON_MEDIA_TYPE = "application/vnd.github+json"
# Code search only returns text_matches fragments for this media type.
TEXT_MATCH_MEDIA_TYPE = "application/vnd.github.text-match+json"

MAX_SEARCH_PAGE_SIZE = 100


def get_api_base() -> str:
    """GitHub API root, overridable with GITHUB_API_URL for GitHub Enterprise."""
    return os.environ.get("GITHUB_API_URL", DEFAULT_API_BASE).rstrip("/")


def _client(token: str, transport: Optional[httpx.AsyncBaseTransport] = None, accept: str = JSON_MEDIA_TYPE) -> httpx.AsyncClient:
    return httpx.AsyncClient(
        base_url=get_api_base(),
        headers={
            "Accept": accept,
            "Authorization": f"Bearer {token}",
            "X-GitHub-Api-Version": API_VERSION,
        },
        timeout=httpx.Timeout(30.0, connect=10.0),
        transport=transport,
    )


def _raise_for_status(response: httpx.Response) -> None:
    """Raise GitHubAPIError carrying GitHub's own message for non-2xx responses."""
    if response.is_success:
        return
    try:
        body = response.json()
    except ValueError:
        body = None
    if isinstance(body, dict) and body.get("message"):
        message = body["message"]
    else:
        message = response.text or response.reason_phrase
    raise GitHubAPIError(response.status_code, message, url=str(response.request.url))


def _json(response: httpx.Response):
    """Decode a successful response body, which GitHub always sends as JSON."""
    try:
        return response.json()
    except ValueError as exc:
        raise AnalysisFailure(f"GitHub returned a non-JSON response from {response.request.url}") from exc


def _contents_url(owner: str, repo: str, path: str) -> str:
    return f"/repos/{quote(owner, safe='')}/{quote(repo, safe='')}/contents/{quote(path.strip('/'))}"


async def list_repository_contents(
    token: str,
    owner: str,
    repo: str,
    path: str = "",
    transport: Optional[httpx.AsyncBaseTransport] = None,
) -> list[ContentEntry]:
    """List a repository directory (the root when ``path`` is empty).

    Args:
        token: GitHub personal access token.
        owner: Repository owner (user or organization).
        repo: Repository name.
        path: Directory path relative to the repository root.
        transport: Optional httpx transport, used by tests.

    Returns:
        Directory entries in the order GitHub returns them. A file path
        yields a single entry with its content.
    """
    url = _contents_url(owner, repo, path)
    logger.debug("Listing contents of %s/%s at '%s'", owner, repo, path)

    async with _client(token, transport) as client:
        response = await client.get(url)
        _raise_for_status(response)
        data = _json(response)

    if isinstance(data, dict):
        data = [data]
    try:
        return [ContentEntry.model_validate(item) for item in data]
    except (TypeError, ValueError) as exc:
        raise AnalysisFailure(f"Unexpected contents listing for {owner}/{repo}: {exc}") from exc


def decode_content(entry: ContentEntry) -> str:
    """Decode the content GitHub ships with a file entry into text."""
    if entry.content is None:
        raise AnalysisFailure(f"No content returned for {entry.path}")
    if entry.encoding not in (None, "", "base64"):
        if entry.encoding == "none":
            raise AnalysisFailure(f"{entry.path} is too large to be returned by the contents API")
        raise AnalysisFailure(f"Unsupported content encoding '{entry.encoding}' for {entry.path}")
    try:
        raw = base64.b64decode(entry.content)
        return raw.decode("utf-8")
    except (binascii.Error, UnicodeDecodeError) as exc:
        raise AnalysisFailure(f"Malformed content in {entry.path}: {exc}") from exc


async def fetch_file_text(
    token: str,
    owner: str,
    repo: str,
    path: str,
    transport: Optional[httpx.AsyncBaseTransport] = None,
) -> str:
    """Fetch a single file from the repository and return it as UTF-8 text."""
    entries = await list_repository_contents(token, owner, repo, path, transport=transport)
    files = [e for e in entries if e.type == "file"]
    if len(files) != 1:
        raise AnalysisFailure(f"{path} in {owner}/{repo} is not a file")
    return decode_content(files[0])


async def search_code(
    token: str,
    query: str,
    per_page: int = 10,
    transport: Optional[httpx.AsyncBaseTransport] = None,
) -> list[dict]:
    """Run a GitHub code search and return the raw result items.

    Items keep GitHub's relevance ordering and include ``text_matches`` when
    GitHub found a matching fragment.
    """
    params = {
        "q": query,
        "per_page": max(1, min(per_page, MAX_SEARCH_PAGE_SIZE)),
    }
    logger.debug("Searching code: %s", query)

    async with _client(token, transport, accept=TEXT_MATCH_MEDIA_TYPE) as client:
        response = await client.get("/search/code", params=params)
        _raise_for_status(response)
        data = _json(response)

    if not isinstance(data, dict) or not isinstance(data.get("items", []), list):
        raise AnalysisFailure(f"Unexpected code search payload for {query}")
    items = data.get("items", [])
    if data.get("incomplete_results"):
        logger.warning("GitHub code search returned incomplete results for %s", query)
    return items
