import json
from typing import Optional

import pytest
from fastapi.testclient import TestClient

from recipe_publisher.deps import get_settings, get_store
from recipe_publisher.exceptions import ReadFailed, WriteFailed
from recipe_publisher.main import app
from recipe_publisher.routers.publish import limiter
from recipe_publisher.services.github_store import StoredDocument
from recipe_publisher.settings import Settings

PASSWORD = "s3cret"


# --- In-memory content store ---

class FakeStore:
    """Stands in for the GitHub contents API.

    Each commit bumps the sha; a commit whose sha does not match the current
    one is rejected the way GitHub answers 409.
    """

    def __init__(self, documents: Optional[dict] = None):
        self.documents = {}
        self.version = 0
        self.commits = []
        self.fail_read = False
        self.fetches = 0
        for path, records in (documents or {}).items():
            self.put_json(path, records)

    def put_json(self, path, records):
        self.put_raw(path, json.dumps(records))

    def put_raw(self, path, content):
        self.version += 1
        self.documents[path] = StoredDocument(content=content, sha=f"sha-{self.version}")

    def load(self, path):
        return json.loads(self.documents[path].content)

    def fetch(self, path, ref):
        self.fetches += 1
        if self.fail_read:
            raise ReadFailed("upstream exploded")
        return self.documents.get(path)

    def commit(self, path, content, branch, message, sha=None):
        self.commits.append({"path": path, "content": content, "branch": branch, "message": message, "sha": sha})
        current = self.documents.get(path)
        current_sha = current.sha if current else None
        if sha != current_sha:
            raise WriteFailed('{"message": "is at sha-x but expected sha-y"}')
        self.put_raw(path, content)


@pytest.fixture
def settings():
    return Settings(
        _env_file=None,
        admin_password=PASSWORD,
        gh_token="ghp_test_token",
        gh_owner="octo",
        gh_repo="site",
        gh_file="custom-recipes.json",
        gh_branch="main",
        allowed_origins="",
    )


@pytest.fixture
def store():
    return FakeStore()


@pytest.fixture
def client(settings, store):
    """Test client with settings and store overrides."""
    app.dependency_overrides[get_settings] = lambda: settings
    app.dependency_overrides[get_store] = lambda: store
    limiter.reset()
    with TestClient(app) as c:
        yield c
    app.dependency_overrides.clear()
