"""Tests for SyncOrchestrator end-to-end flow with fake collaborators."""

from __future__ import annotations

import io
from pathlib import Path
from typing import List
from unittest.mock import MagicMock

import pytest

from config import CloneMethod, Config, GitHubConfig, GitLabConfig, GitOperationConfig
from errors import FetchError
from migrator import Migrator
from models import DestinationRepository, SourceProject
from sync_orchestrator import EXIT_EXECUTION_ERROR, EXIT_SUCCESS, SyncOrchestrator


def _make_config() -> Config:
    return Config(
        gitlab=GitLabConfig(url='https://gitlab.com', token='gl-token', group='example'),
        github=GitHubConfig(api_url='https://api.github.com', token='gh-token', org='example-org'),
        git=GitOperationConfig(clone_method=CloneMethod.SSH, push_method=CloneMethod.SSH),
    )


def _project(name: str) -> SourceProject:
    return SourceProject(
        name=name,
        description='',
        visibility='private',
        default_branch='main',
        tags=[],
        clone_url=f'git@gitlab.com:example/{name}.git',
    )


def _repo(name: str) -> DestinationRepository:
    return DestinationRepository(
        name=name,
        full_name=f'example-org/{name}',
        push_url=f'git@github.com:example-org/{name}.git',
    )


def _orchestrator(
    answer: str,
    projects: List[SourceProject],
    repos: List[DestinationRepository],
    tmp_path: Path,
):
    source = MagicMock()
    source.list_projects.return_value = projects
    destination = MagicMock()
    destination.list_repositories.return_value = repos
    destination.create_repository.side_effect = lambda request: _repo(request.name)
    mirror = MagicMock()
    stdout = io.StringIO()

    orchestrator = SyncOrchestrator(
        _make_config(),
        source=source,
        destination=destination,
        mirror_tool=mirror,
        stdin=io.StringIO(answer),
        stdout=stdout,
    )
    orchestrator.migrator = Migrator(destination, mirror, workspace=tmp_path)
    return orchestrator, source, destination, mirror, stdout


def test_run_migrates_only_missing_projects(tmp_path: Path, capsys) -> None:
    orchestrator, source, destination, mirror, stdout = _orchestrator(
        'yes\n',
        [_project('billing-svc'), _project('Payments API')],
        [_repo('billing-svc')],
        tmp_path,
    )

    assert orchestrator.run() == EXIT_SUCCESS

    source.list_projects.assert_called_once_with('example')
    created = [call.args[0].name for call in destination.create_repository.call_args_list]
    assert created == ['Payments-API']
    assert mirror.clone_mirror.call_count == 1
    assert mirror.push_mirror.call_count == 1
    assert 'billing-svc\nPayments API\n' in stdout.getvalue()
    assert 'ignored: [billing-svc]' in capsys.readouterr().out


@pytest.mark.parametrize('answer', ['no\n', '\n', ''])
def test_decline_or_cancel_writes_nothing(answer: str, tmp_path: Path) -> None:
    orchestrator, _, destination, mirror, _ = _orchestrator(
        answer, [_project('new-one')], [], tmp_path
    )

    assert orchestrator.run() == EXIT_SUCCESS

    destination.create_repository.assert_not_called()
    mirror.clone_mirror.assert_not_called()
    mirror.push_mirror.assert_not_called()


def test_nothing_to_migrate_skips_prompt(tmp_path: Path) -> None:
    orchestrator, _, destination, _, stdout = _orchestrator(
        '', [_project('Tools')], [_repo('tools')], tmp_path
    )

    assert orchestrator.run() == EXIT_SUCCESS

    assert stdout.getvalue() == ''
    destination.create_repository.assert_not_called()


def test_fetch_error_aborts_before_prompt(tmp_path: Path) -> None:
    orchestrator, _, destination, _, stdout = _orchestrator(
        'yes\n', [_project('demo')], [], tmp_path
    )
    destination.list_repositories.side_effect = FetchError('status 500')

    assert orchestrator.run() == EXIT_EXECUTION_ERROR

    assert stdout.getvalue() == ''
    destination.create_repository.assert_not_called()


def test_source_connect_failure_aborts(tmp_path: Path) -> None:
    orchestrator, source, destination, _, _ = _orchestrator('yes\n', [], [], tmp_path)
    source.connect.side_effect = FetchError('authentication error (gitlab)')

    assert orchestrator.run() == EXIT_EXECUTION_ERROR
    destination.list_repositories.assert_not_called()
