import base64
import logging
from dataclasses import dataclass
from typing import Optional, Protocol
from urllib.parse import quote

import requests

from ..exceptions import ReadFailed, WriteFailed
from ..settings import Settings

logger = logging.getLogger("recipe_publisher.store")


@dataclass
class StoredDocument:
    content: str
    sha: str


class ContentStore(Protocol):
    def fetch(self, path: str, ref: str) -> Optional[StoredDocument]: ...

    def commit(
        self, path: str, content: str, branch: str, message: str, sha: Optional[str] = None
    ) -> None: ...


class GitHubContentStore:
    """Reads and commits a single file through the GitHub contents API.

    fetch() returns None when the file does not exist yet (first write).
    commit() passes the blob sha when updating, so a concurrent change makes
    GitHub reject the write with 409 instead of silently clobbering it.
    """

    def __init__(
        self,
        token: str,
        owner: str,
        repo: str,
        api_url: str = "https://api.github.com",
        timeout: float = 30.0,
        session: Optional[requests.Session] = None,
    ):
        self.owner = owner
        self.repo = repo
        self.api_url = api_url.rstrip("/")
        self.timeout = timeout
        self.session = session or requests.Session()
        self.headers = {
            "Authorization": f"Bearer {token}",
            "Accept": "application/vnd.github+json",
        }

    def _url(self, path: str) -> str:
        return f"{self.api_url}/repos/{self.owner}/{self.repo}/contents/{quote(path, safe='/')}"

    def fetch(self, path: str, ref: str) -> Optional[StoredDocument]:
        try:
            r = self.session.get(
                self._url(path), headers=self.headers, params={"ref": ref}, timeout=self.timeout
            )
        except requests.RequestException as e:
            logger.error(f"GET {path}@{ref} failed: {e}")
            raise ReadFailed(str(e))

        if r.status_code == 404:
            logger.info(f"{path}@{ref} not found, starting a new collection")
            return None
        if r.status_code != 200:
            logger.error(f"GET {path}@{ref} returned {r.status_code}")
            raise ReadFailed(r.text)

        body = r.json()
        # Files over 1 MB come back without inline content
        if body.get("encoding") == "none":
            raise ReadFailed(f"{path} is too large for the contents API")

        content = base64.b64decode(body.get("content") or "").decode("utf-8", errors="replace")
        return StoredDocument(content=content, sha=body["sha"])

    def commit(
        self, path: str, content: str, branch: str, message: str, sha: Optional[str] = None
    ) -> None:
        payload = {
            "message": message,
            "content": base64.b64encode(content.encode("utf-8")).decode("ascii"),
            "branch": branch,
        }
        if sha:
            payload["sha"] = sha

        try:
            r = self.session.put(
                self._url(path), headers=self.headers, json=payload, timeout=self.timeout
            )
        except requests.RequestException as e:
            logger.error(f"PUT {path}@{branch} failed: {e}")
            raise WriteFailed(str(e))

        if not 200 <= r.status_code < 300:
            logger.error(f"PUT {path}@{branch} returned {r.status_code}")
            raise WriteFailed(r.text)

        logger.info(f"Committed {path}@{branch}: {message}")


def get_store(settings: Settings) -> GitHubContentStore:
    return GitHubContentStore(
        token=settings.gh_token,
        owner=settings.gh_owner,
        repo=settings.gh_repo,
        api_url=settings.gh_api_url,
        timeout=settings.gh_timeout_seconds,
    )
