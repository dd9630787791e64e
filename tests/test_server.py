"""Tests for the FastMCP tool wrapper and plugin manifest."""

import json

import pytest

from doc_intelligence import server
from doc_intelligence.core.errors import MissingCredential
from doc_intelligence.core.models import DocumentationReport, ReadmeAnalysis, SearchHit
from doc_intelligence.manifest import DocIntelligencePlugin


@pytest.fixture
def recorded_dispatch(monkeypatch):
    """Replace dispatch with a stub returning canned results per action."""
    calls = []
    results = {
        "analyze": DocumentationReport(owner="octo", repo="widget", readme=ReadmeAnalysis(quality=80)),
        "suggest": ["Add usage examples"],
        "search": [SearchHit(path="a.md", url="u", score=1.5)],
    }

    async def fake_dispatch(owner, repo, action, query=None, token=None, transport=None):
        calls.append({"owner": owner, "repo": repo, "action": action.value, "query": query, "token": token})
        return results[action.value]

    monkeypatch.setattr(server, "dispatch", fake_dispatch)
    monkeypatch.setenv("GITHUB_TOKEN", "env-token")
    return calls


class TestTool:
    @pytest.mark.asyncio
    async def test_analyze(self, recorded_dispatch):
        result = await server.analyze_github_documentation("octo", "widget", "analyze")

        assert recorded_dispatch == [{"owner": "octo", "repo": "widget", "action": "analyze", "query": None, "token": "env-token"}]
        assert result["report"]["overall_score"] == 80
        assert result["report"]["readme"]["quality"] == 80
        assert "80/100" in result["summary"]
        assert result["markdown"].startswith("# Documentation report for octo/widget")

    @pytest.mark.asyncio
    async def test_suggest(self, recorded_dispatch):
        result = await server.analyze_github_documentation("octo", "widget", "suggest")

        assert result["suggestions"] == ["Add usage examples"]
        assert result["summary"] == "1 suggestion(s) for octo/widget"

    @pytest.mark.asyncio
    async def test_search(self, recorded_dispatch):
        result = await server.analyze_github_documentation("octo", "widget", "search", query="install")

        assert recorded_dispatch[0]["query"] == "install"
        assert result["results"] == [{"path": "a.md", "url": "u", "score": 1.5, "context": ""}]
        assert result["count"] == 1

    @pytest.mark.asyncio
    async def test_missing_token(self, recorded_dispatch, monkeypatch):
        monkeypatch.delenv("GITHUB_TOKEN")

        with pytest.raises(MissingCredential, match="GITHUB_TOKEN"):
            await server.analyze_github_documentation("octo", "widget", "analyze")
        assert recorded_dispatch == []


class TestManifest:
    def test_actions_match_schema(self):
        schema = DocIntelligencePlugin.parameters
        assert schema["properties"]["action"]["enum"] == ["analyze", "suggest", "search"]
        assert schema["required"] == ["owner", "repo", "action"]

    def test_token_setting(self):
        setting = DocIntelligencePlugin.settings[0]
        assert setting["label"] == "GitHub Token"
        assert setting["type"] == "password"
        assert DocIntelligencePlugin.token_env_var() == "GITHUB_TOKEN"

    def test_resource_is_json(self):
        manifest = json.loads(server.plugin_manifest())
        assert manifest["tool"] == "analyze_github_documentation"
