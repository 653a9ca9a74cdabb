#!/usr/bin/env python3
"""GitLab API wrapper for discovering the projects to migrate."""

from __future__ import annotations

from typing import List, Optional

import gitlab
import requests

from config import CloneMethod, Visibility
from errors import FetchError
from logging_utils import Logger
from models import SourceProject


class GitLabSource:
    """Wrapper around GitLab API to enumerate projects."""

    def __init__(
        self, url: str, token: str, clone_method: CloneMethod = CloneMethod.SSH
    ) -> None:
        self.url = url
        self.token = token
        self.clone_method = clone_method
        self.api: Optional[gitlab.Gitlab] = None

    def connect(self) -> None:
        Logger.info(f"init gitlab API: {self.url}")
        try:
            self.api = gitlab.Gitlab(url=self.url, private_token=self.token)
            self.api.auth()
        except gitlab.exceptions.GitlabAuthenticationError as e:
            raise FetchError(f"authentication error (gitlab): {e}") from e
        except (gitlab.exceptions.GitlabError, requests.RequestException) as e:
            raise FetchError(f"failed to initialize gitlab API: {e}") from e

    def list_projects(self, group: str = "") -> List[SourceProject]:
        """Return every project in ``group`` and its subgroups.

        Without a group, the projects owned by the authenticated user are
        returned instead.
        """
        if self.api is None:
            raise FetchError("gitlab API not initialized")

        try:
            if group:
                Logger.info(f"discovering projects under: {group}")
                root_group = self.api.groups.get(group, lazy=True)
                raw_projects = root_group.projects.list(
                    all=True, include_subgroups=True
                )
            else:
                Logger.info("discovering projects owned by the authenticated user")
                raw_projects = self.api.projects.list(owned=True, all=True)
        except (gitlab.exceptions.GitlabError, requests.RequestException) as e:
            where = f"group '{group}'" if group else "the authenticated user"
            raise FetchError(f"error listing gitlab projects for {where}: {e}") from e

        projects = [self._to_source_project(project) for project in raw_projects]
        for project in projects:
            Logger.debug(f"found: {project.name}")
        Logger.info(f"found {len(projects)} gitlab projects")
        return projects

    def _to_source_project(self, project: object) -> SourceProject:
        if self.clone_method == CloneMethod.SSH:
            clone_url = getattr(project, "ssh_url_to_repo", "")
        else:
            clone_url = getattr(project, "http_url_to_repo", "")

        # 'topics' replaced 'tag_list' in GitLab 14.5; older servers send only the latter
        tags = getattr(project, "topics", None)
        if tags is None:
            tags = getattr(project, "tag_list", None)

        return SourceProject(
            name=getattr(project, "name", ""),
            description=getattr(project, "description", None) or "",
            visibility=getattr(project, "visibility", Visibility.PRIVATE.value),
            default_branch=getattr(project, "default_branch", None) or "",
            tags=list(tags or []),
            clone_url=clone_url or "",
        )
