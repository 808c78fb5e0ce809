"""GitHub API adapter."""

import logging

import requests

from issues.adapters.base import IssueSource
from issues.config import DEFAULT_API_URL, DEFAULT_USER_AGENT
from issues.models import FetchFailure, FetchResult, FetchSuccess

logger = logging.getLogger(__name__)


def handle_response(resp: requests.Response) -> FetchResult:
    """Parse the body and classify the response by status code.

    The body is parsed as JSON whatever the status; a body that is not JSON
    raises.
    """
    logger.info("Got response: status_code=%s", resp.status_code)
    logger.debug("Response body: %s", resp.text)
    body = resp.json()
    if resp.status_code == 200:
        return FetchSuccess(payload=body)
    return FetchFailure(status_code=resp.status_code, payload=body)


class GitHubAdapter(IssueSource):
    """GitHub API implementation."""

    def __init__(self, api_url: str = DEFAULT_API_URL, user_agent: str = DEFAULT_USER_AGENT) -> None:
        self._api_url = api_url.rstrip("/")
        self._session = requests.Session()
        self._session.headers["User-agent"] = user_agent

    def issues_url(self, user: str, project: str) -> str:
        return f"{self._api_url}/repos/{user}/{project}/issues"

    def fetch(self, user: str, project: str) -> FetchResult:
        logger.info("Fetching %s's project %s", user, project)
        resp = self._session.request("GET", self.issues_url(user, project))
        return handle_response(resp)
