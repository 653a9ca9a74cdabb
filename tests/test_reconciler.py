"""Tests for matching GitLab projects against existing GitHub repositories."""

from __future__ import annotations

from typing import List

from models import CreateRepositoryRequest, DestinationRepository, SourceProject
from reconciler import reconcile
from utils import names_match, normalize_repo_name, sanitize_topics


def _project(name: str, **overrides) -> SourceProject:
    fields = dict(
        name=name,
        description='',
        visibility='private',
        default_branch='main',
        tags=[],
        clone_url=f'git@gitlab.com:example/{name}.git',
    )
    fields.update(overrides)
    return SourceProject(**fields)


def _repos(*names: str) -> List[DestinationRepository]:
    return [
        DestinationRepository(
            name=name,
            full_name=f'example-org/{name}',
            push_url=f'git@github.com:example-org/{name}.git',
        )
        for name in names
    ]


def test_normalize_repo_name_replaces_every_space() -> None:
    assert normalize_repo_name('Payments API') == 'Payments-API'
    assert normalize_repo_name('a b  c') == 'a-b--c'
    assert normalize_repo_name('plain') == 'plain'


def test_names_match_ignores_case_after_normalizing() -> None:
    assert names_match('Payments API', 'payments-api')
    assert names_match('BILLING-svc', 'billing-SVC')
    assert not names_match('Payments API', 'Payments API')
    assert not names_match('billing', 'billing-svc')


def test_reconcile_example_scenario() -> None:
    """A project already on GitHub is skipped, the other becomes a candidate."""
    billing = _project('billing-svc')
    payments = _project('Payments API')

    result = reconcile([billing, payments], _repos('billing-svc'))

    assert result.candidates == [payments]
    assert result.skipped == ['billing-svc']
    assert CreateRepositoryRequest.from_project(payments).name == 'Payments-API'


def test_reconcile_without_destination_repos_keeps_everything() -> None:
    projects = [_project('one'), _project('Two Words'), _project('three')]

    result = reconcile(projects, [])

    assert result.candidates == projects
    assert result.skipped == []


def test_reconcile_all_present_skips_everything_in_source_order() -> None:
    projects = [_project('Alpha Beta'), _project('gamma'), _project('DELTA')]

    result = reconcile(projects, _repos('delta', 'alpha-beta', 'Gamma'))

    assert result.candidates == []
    assert result.skipped == ['Alpha Beta', 'gamma', 'DELTA']


def test_reconcile_counts_multiple_matches_once() -> None:
    """Several case variants on GitHub still skip the project exactly once."""
    result = reconcile([_project('Tools')], _repos('tools', 'TOOLS', 'Tools'))

    assert result.skipped == ['Tools']
    assert result.candidates == []


def test_reconcile_every_project_lands_in_exactly_one_list() -> None:
    projects = [_project(name) for name in ('a', 'B c', 'd', 'E', 'f g h')]

    result = reconcile(projects, _repos('A', 'f-g-h', 'unrelated'))

    candidate_names = [p.name for p in result.candidates]
    assert sorted(candidate_names + result.skipped) == sorted(p.name for p in projects)
    assert not set(candidate_names) & set(result.skipped)
    assert result.skipped == ['a', 'f g h']


def test_create_request_maps_project_fields() -> None:
    project = _project(
        'Payments API',
        description='Handles payments',
        visibility='internal',
        default_branch='develop',
        tags=['Python', 'billing team', 'python'],
    )

    request = CreateRepositoryRequest.from_project(project)

    assert request.name == 'Payments-API'
    assert request.description == 'Handles payments'
    assert request.private is False
    assert request.default_branch == 'develop'
    assert request.topics == ['python', 'billing-team']


def test_create_request_private_only_for_private_visibility() -> None:
    assert CreateRepositoryRequest.from_project(_project('x')).private is True
    public = _project('x', visibility='public')
    assert CreateRepositoryRequest.from_project(public).private is False


def test_sanitize_topics_drops_empty_entries() -> None:
    assert sanitize_topics(['  ', '--', 'C++ Tools']) == ['c-tools']


def test_create_request_keeps_at_most_twenty_topics() -> None:
    project = _project('tagged', tags=[f'tag-{i}' for i in range(25)])

    topics = CreateRepositoryRequest.from_project(project).topics

    assert topics == [f'tag-{i}' for i in range(20)]
