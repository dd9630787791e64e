"""Shared fixtures: a fake GitHub API served through httpx.MockTransport."""

import base64

import httpx
import pytest


class FakeGitHub:
    """Minimal stand-in for the GitHub REST API.

    Routes are keyed by URL path; every handled request is recorded so tests
    can assert on call order, headers and query parameters.
    """

    def __init__(self):
        self.routes = {}
        self.requests = []

    def add_json(self, path, payload, status_code=200):
        self.routes[path] = (status_code, payload)

    def add_text(self, path, text, status_code=200):
        self.routes[path] = (status_code, text)

    def add_listing(self, owner, repo, names):
        self.add_json(
            f"/repos/{owner}/{repo}/contents/",
            [{"name": n, "path": n, "type": "file", "sha": "abc", "size": 1} for n in names],
        )

    def add_file(self, owner, repo, path, text):
        encoded = base64.b64encode(text.encode("utf-8")).decode("ascii")
        # GitHub wraps base64 content at 60 characters
        wrapped = "\n".join(encoded[i:i + 60] for i in range(0, len(encoded), 60))
        self.add_json(
            f"/repos/{owner}/{repo}/contents/{path}",
            {"name": path.rsplit("/", 1)[-1], "path": path, "type": "file", "content": wrapped, "encoding": "base64"},
        )

    def handler(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        route = self.routes.get(request.url.path)
        if route is None:
            return httpx.Response(404, json={"message": "Not Found"})
        status_code, payload = route
        if isinstance(payload, str):
            return httpx.Response(status_code, text=payload)
        return httpx.Response(status_code, json=payload)

    @property
    def transport(self) -> httpx.MockTransport:
        return httpx.MockTransport(self.handler)

    @property
    def paths(self):
        return [r.url.path for r in self.requests]


@pytest.fixture(autouse=True)
def _default_api_base(monkeypatch):
    monkeypatch.delenv("GITHUB_API_URL", raising=False)


@pytest.fixture
def fake_github():
    return FakeGitHub()


FULL_README = """# Widget

## Description

Widgets for everyone.

## Installation

```bash
pip install widget
```

## Usage

Import it.

## Contributing

Pull requests welcome.
"""
