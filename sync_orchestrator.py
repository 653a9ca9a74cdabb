#!/usr/bin/env python3
"""Main orchestrator for migrating GitLab projects to GitHub."""

from __future__ import annotations

from typing import Optional, TextIO

from capabilities import MirrorTool, ProjectSource, RepoDestination
from config import Config
from confirmation import confirm
from errors import FetchError, PromptError
from github_target import GitHubTarget
from gitlab_source import GitLabSource
from logging_utils import Logger
from migrator import Migrator
from mirror_tool import GitMirrorTool
from models import MigrationReport
from reconciler import reconcile

# Exit codes
EXIT_SUCCESS = 0
EXIT_EXECUTION_ERROR = 1


class SyncOrchestrator:
    def __init__(
        self,
        cfg: Config,
        source: Optional[ProjectSource] = None,
        destination: Optional[RepoDestination] = None,
        mirror_tool: Optional[MirrorTool] = None,
        stdin: Optional[TextIO] = None,
        stdout: Optional[TextIO] = None,
    ) -> None:
        self.cfg = cfg
        self.source = source or GitLabSource(
            cfg.gitlab.url, cfg.gitlab.token, clone_method=cfg.git.clone_method
        )
        self.destination = destination or GitHubTarget(
            cfg.github, push_method=cfg.git.push_method
        )
        self.migrator = Migrator(self.destination, mirror_tool or GitMirrorTool())
        self.stdin = stdin
        self.stdout = stdout

    def run(self) -> int:
        """Connect, list both sides, confirm, then migrate the missing projects.

        When every project already exists on GitHub the confirmation prompt is
        not shown: nothing would be written, so the skipped list is reported
        and the run ends.
        """
        try:
            self.source.connect()
            self.destination.connect()

            projects = self.source.list_projects(self.cfg.gitlab.group)
            repositories = self.destination.list_repositories()
            reconciliation = reconcile(projects, repositories)

            if not reconciliation.candidates:
                Logger.info("nothing to migrate, every project already exists on github")
                self._report(MigrationReport(skipped=reconciliation.skipped))
                return EXIT_SUCCESS

            answer = confirm(
                [project.name for project in projects],
                stdin=self.stdin,
                stdout=self.stdout,
            )
            if not answer.proceed:
                Logger.warn("process cancelled, exiting")
                return EXIT_SUCCESS

            report = self.migrator.run(reconciliation)
            self._report(report)
            return EXIT_SUCCESS
        except FetchError as e:
            Logger.error(f"error fetching repositories: {e}")
            return EXIT_EXECUTION_ERROR
        except PromptError as e:
            Logger.error(str(e))
            return EXIT_EXECUTION_ERROR

    @staticmethod
    def _report(report: MigrationReport) -> None:
        if report.migrated:
            Logger.success(f"migrated: [{', '.join(report.migrated)}]")
        if report.failed:
            Logger.error(f"failed: [{', '.join(report.failed)}]")
        if report.skipped:
            Logger.info(f"ignored: [{', '.join(report.skipped)}]")
