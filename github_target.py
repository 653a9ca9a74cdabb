#!/usr/bin/env python3
"""GitHub API wrapper for listing and creating destination repositories."""

from __future__ import annotations

from typing import TYPE_CHECKING, Any, Dict, List, Optional, Tuple, Union

import github
import requests

if TYPE_CHECKING:
    from github.AuthenticatedUser import AuthenticatedUser
    from github.Organization import Organization

from config import DEFAULT_GITHUB_API_URL, CloneMethod, GitHubConfig
from errors import CreateError, FetchError
from logging_utils import Logger
from models import CreateRepositoryRequest, DestinationRepository

GITHUB_API_VERSION = "2022-11-28"


class GitHubTarget:
    """Wrapper around GitHub API to list and create repositories.

    Repositories live under ``config.org`` when set, otherwise under the
    account that owns the token.
    """

    def __init__(
        self, config: GitHubConfig, push_method: CloneMethod = CloneMethod.SSH
    ) -> None:
        self.config = config
        self.push_method = push_method
        self.api: Optional[github.Github] = None
        self.owner: Optional[Union["Organization", "AuthenticatedUser"]] = None

    @property
    def api_url(self) -> str:
        return self.config.api_url.rstrip("/")

    def connect(self) -> None:
        Logger.info(f"init github API: {self.api_url}")
        try:
            auth = github.Auth.Token(self.config.token)
            if self.api_url != DEFAULT_GITHUB_API_URL:
                self.api = github.Github(base_url=self.api_url, auth=auth)
            else:
                self.api = github.Github(auth=auth)

            if self.config.org:
                self._check_org_visibility()
                self.owner = self.api.get_organization(self.config.org)
            else:
                self.owner = self.api.get_user()
            Logger.debug(f"github owner: {self.owner.login}")
        except github.BadCredentialsException as e:
            raise FetchError("authentication failed (github): invalid token") from e
        except github.GithubException as e:
            raise FetchError(f"github error: {e}") from e
        except requests.RequestException as e:
            raise FetchError(f"failed to contact github api: {e}") from e

    def _get_api_headers(self) -> dict:
        """Get standard API headers for GitHub requests."""
        return {
            "Accept": "application/vnd.github+json",
            "Authorization": f"Bearer {self.config.token}",
            "X-GitHub-Api-Version": GITHUB_API_VERSION,
        }

    def _check_org_visibility(self) -> None:
        """Check that the organization exists and is visible to the token."""
        r_org = requests.get(
            f"{self.api_url}/orgs/{self.config.org}", headers=self._get_api_headers()
        )
        if r_org.status_code == 401:
            raise FetchError(
                "unauthorized (401): token invalid or not authorized for GitHub API"
            )
        if r_org.status_code == 403:
            raise FetchError(
                "forbidden (403): token lacks permission to access the organization. "
                "Possible causes: missing read:org scope or SAML SSO not authorized "
                "for this token."
            )
        if r_org.status_code == 404:
            raise FetchError(
                f"not found (404): organization '{self.config.org}' does not "
                "exist or is not visible to this token."
            )
        if r_org.status_code != 200:
            Logger.warn(
                f"unexpected response checking org visibility: {r_org.status_code}"
            )

    def _repositories_endpoint(self) -> Tuple[str, Dict[str, Any]]:
        params: Dict[str, Any] = {"per_page": self.config.page_size}
        if self.config.org:
            params["type"] = "all"
            return f"{self.api_url}/orgs/{self.config.org}/repos", params
        params["type"] = "owner"
        return f"{self.api_url}/user/repos", params

    def _fetch_page(
        self, url: str, params: Optional[Dict[str, Any]]
    ) -> Tuple[List[dict], Optional[str]]:
        """Fetch one page of repositories and the URL of the next page, if any."""
        try:
            response = requests.get(url, headers=self._get_api_headers(), params=params)
        except requests.RequestException as e:
            raise FetchError(f"error listing github repositories: {e}") from e

        if response.status_code != 200:
            raise FetchError(
                f"error listing github repositories: status {response.status_code}"
            )

        try:
            items = response.json()
        except ValueError as e:
            raise FetchError(f"error listing github repositories: invalid JSON: {e}") from e

        next_url = response.links.get("next", {}).get("url")
        return items, next_url

    def list_repositories(self) -> List[DestinationRepository]:
        """Return every repository of the org (or the user), across all pages."""
        owner = self.config.org or "the authenticated user"
        Logger.info(f"listing github repositories for {owner}")

        url, params = self._repositories_endpoint()
        repositories: List[DestinationRepository] = []
        page = 0
        next_url: Optional[str] = url
        while next_url:
            page += 1
            items, next_url = self._fetch_page(next_url, params)
            # The next link already carries the query string
            params = None
            repositories.extend(self._to_destination_repository(item) for item in items)
            Logger.debug(f"page {page}: {len(items)} repositories")

        Logger.info(f"found {len(repositories)} github repositories")
        return repositories

    def _push_url(self, ssh_url: str, clone_url: str) -> str:
        if self.push_method == CloneMethod.SSH:
            return ssh_url
        return clone_url

    def _to_destination_repository(self, data: dict) -> DestinationRepository:
        return DestinationRepository(
            name=data["name"],
            full_name=data.get("full_name", ""),
            push_url=self._push_url(data.get("ssh_url", ""), data.get("clone_url", "")),
        )

    def create_repository(
        self, request: CreateRepositoryRequest
    ) -> DestinationRepository:
        if self.api is None or self.owner is None:
            raise CreateError("github API not initialized")
        try:
            repo = self.owner.create_repo(
                name=request.name,
                description=request.description,
                private=request.private,
                auto_init=False,
            )
        except (github.GithubException, requests.RequestException) as e:
            raise CreateError(f"failed to create repo '{request.name}': {e}") from e

        Logger.info(f"created repo: {repo.full_name}")
        if request.topics:
            self._apply_topics(repo, request.topics)
        return DestinationRepository(
            name=repo.name,
            full_name=repo.full_name,
            push_url=self._push_url(repo.ssh_url, repo.clone_url),
        )

    @staticmethod
    def _apply_topics(repo, topics: List[str]) -> None:
        """Set topics on a new repository. A rejection is logged and the mirror goes on."""
        try:
            repo.replace_topics(topics)
        except (github.GithubException, requests.RequestException) as e:
            Logger.warn(f"failed to set topics on '{repo.full_name}': {e}")

    def set_default_branch(
        self, repository: DestinationRepository, branch: str
    ) -> None:
        """Point the default branch at ``branch``; it must exist, so call after a push."""
        if self.api is None:
            raise CreateError("github API not initialized")
        try:
            repo = self.api.get_repo(repository.full_name)
            if repo.default_branch != branch:
                repo.edit(default_branch=branch)
        except (github.GithubException, requests.RequestException) as e:
            raise CreateError(
                f"failed to set default branch '{branch}' on '{repository.full_name}': {e}"
            ) from e
