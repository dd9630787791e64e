"""Tests for repository-scoped code search."""

import pytest

from doc_intelligence.core.errors import AnalysisFailure, InvalidInput
from doc_intelligence.core.search import SEARCH_PAGE_SIZE, find_related_docs


def _item(path, score, fragment=None):
    item = {"path": path, "html_url": f"https://github.com/octo/widget/blob/main/{path}", "score": score}
    if fragment is not None:
        item["text_matches"] = [{"fragment": fragment}, {"fragment": "second"}]
    return item


class TestFindRelatedDocs:
    @pytest.mark.asyncio
    async def test_maps_hits_in_github_order(self, fake_github):
        fake_github.add_json("/search/code", {"items": [
            _item("docs/install.md", 3.5, "pip install widget"),
            _item("README.md", 7.0),
        ]})

        hits = await find_related_docs("tok", "octo", "widget", "install", transport=fake_github.transport)

        assert [h.path for h in hits] == ["docs/install.md", "README.md"]
        assert hits[0].url == "https://github.com/octo/widget/blob/main/docs/install.md"
        assert hits[0].score == 3.5
        assert hits[0].context == "pip install widget"
        assert hits[1].context == ""

    @pytest.mark.asyncio
    async def test_query_is_scoped_to_repository(self, fake_github):
        fake_github.add_json("/search/code", {"items": []})

        await find_related_docs("tok", "octo", "widget", "config file", transport=fake_github.transport)

        params = fake_github.requests[0].url.params
        assert params["q"] == "config file repo:octo/widget"
        assert params["per_page"] == str(SEARCH_PAGE_SIZE)

    @pytest.mark.asyncio
    async def test_at_most_ten_hits(self, fake_github):
        fake_github.add_json("/search/code", {"items": [_item(f"f{i}.md", 1.0) for i in range(15)]})

        hits = await find_related_docs("tok", "octo", "widget", "x", transport=fake_github.transport)

        assert len(hits) == 10

    @pytest.mark.asyncio
    @pytest.mark.parametrize("query", ["", "   "])
    async def test_empty_query(self, query, fake_github):
        with pytest.raises(InvalidInput):
            await find_related_docs("tok", "octo", "widget", query, transport=fake_github.transport)
        assert fake_github.requests == []

    @pytest.mark.asyncio
    async def test_malformed_item(self, fake_github):
        fake_github.add_json("/search/code", {"items": [{"html_url": "no path"}]})

        with pytest.raises(AnalysisFailure, match="Unexpected"):
            await find_related_docs("tok", "octo", "widget", "x", transport=fake_github.transport)

    @pytest.mark.asyncio
    async def test_rate_limited(self, fake_github):
        fake_github.add_json("/search/code", {"message": "API rate limit exceeded"}, status_code=403)

        with pytest.raises(AnalysisFailure, match="rate limit"):
            await find_related_docs("tok", "octo", "widget", "x", transport=fake_github.transport)
