#!/usr/bin/env python3
"""Create, clone and push each GitLab project that is missing on GitHub."""

from __future__ import annotations

import shutil
from pathlib import Path
from typing import Optional

from capabilities import MirrorTool, RepoDestination
from config import CLONE_ROOT_DIRNAME
from errors import CreateError, FilesystemError, MigrationError, ProcessError
from logging_utils import Logger
from models import (CreateRepositoryRequest, DestinationRepository,
                    MigrationReport, Reconciliation, SourceProject)
from security import SecurityValidator


class Migrator:
    """Mirror every migration candidate, one at a time.

    A failure on one project is logged and the loop moves on. A repository
    created on GitHub is left in place when a later step fails.
    """

    def __init__(
        self,
        destination: RepoDestination,
        mirror_tool: MirrorTool,
        workspace: Optional[Path] = None,
    ) -> None:
        self.destination = destination
        self.mirror_tool = mirror_tool
        self.workspace = workspace

    def run(self, reconciliation: Reconciliation) -> MigrationReport:
        report = MigrationReport(skipped=list(reconciliation.skipped))
        total = len(reconciliation.candidates)

        for idx, project in enumerate(reconciliation.candidates, start=1):
            Logger.info(f"[{idx}/{total}] migrating: {project.name}")
            try:
                self._migrate(project)
            except MigrationError as e:
                Logger.error(f"{project.name}: {e}")
                if isinstance(e, ProcessError) and e.stderr:
                    Logger.debug(f"{project.name}: git said: {e.stderr}")
                report.failed.append(project.name)
                continue
            report.migrated.append(project.name)
            Logger.success(f"[{idx}/{total}] migrated: {project.name}")

        return report

    def _migrate(self, project: SourceProject) -> None:
        request = CreateRepositoryRequest.from_project(project)

        Logger.info(f"creating github repo for {project.name}")
        repo = self.destination.create_repository(request)

        clone_path = self._prepare_clone_path(project.name)

        Logger.info(f"cloning {project.clone_url} to push up")
        self.mirror_tool.clone_mirror(project.clone_url, clone_path)

        Logger.info(f"pushing up project {project.name}")
        self.mirror_tool.push_mirror(repo.push_url, clone_path)

        if request.default_branch:
            self._apply_default_branch(repo, request.default_branch)

    def _apply_default_branch(self, repo: DestinationRepository, branch: str) -> None:
        try:
            self.destination.set_default_branch(repo, branch)
        except CreateError as e:
            Logger.warn(f"{repo.name}: {e}")

    def clone_root(self) -> Path:
        if self.workspace is not None:
            return self.workspace
        try:
            return Path.cwd() / CLONE_ROOT_DIRNAME
        except OSError as e:
            raise FilesystemError(f"error finding working directory: {e}") from e

    def _prepare_clone_path(self, project_name: str) -> Path:
        """Return an empty clone target, removing any leftover from an earlier run."""
        try:
            dirname = SecurityValidator.validate_dirname(project_name)
        except ValueError as e:
            raise FilesystemError(f"cannot use project name as a directory: {e}") from e

        clone_path = self.clone_root() / dirname
        if clone_path.exists() or clone_path.is_symlink():
            Logger.debug(f"removing stale clone: {clone_path}")
            try:
                if clone_path.is_dir() and not clone_path.is_symlink():
                    shutil.rmtree(clone_path)
                else:
                    clone_path.unlink()
            except OSError as e:
                raise FilesystemError(f"error cleaning up folder {clone_path}: {e}") from e
        return clone_path
