"""Tests for command line parsing and configuration building."""

from __future__ import annotations

import pytest

from argument_parser import parse_arguments
from config import AuthHeader, CloneMethod, Scope
from errors import ConfigError


@pytest.fixture(autouse=True)
def _environment(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv('HOME', '/home/alice')
    monkeypatch.delenv('GITHUB_TOKEN', raising=False)


def test_defaults() -> None:
    cfg = parse_arguments(['--token', 'ghp_secret'])

    assert cfg.api.url == 'https://api.github.com/'
    assert cfg.api.token == 'ghp_secret'
    assert cfg.api.timeout_s == 30
    assert isinstance(cfg.api.timeout_s, int)
    assert cfg.api.auth_header == AuthHeader.BEARER
    assert cfg.fetch.personal == Scope.ALL
    assert cfg.fetch.organizations == Scope.ALL
    assert cfg.fetch.page_size == 50
    assert cfg.manifest.prefix == '/home/alice/Repos/github.com'
    assert cfg.manifest.clone_method == CloneMethod.SSH
    assert cfg.manifest.include_archived is False
    assert cfg.manifest.ssh_prefix is False
    assert cfg.manifest.exclude is None
    assert cfg.output.path is None


def test_all_options() -> None:
    cfg = parse_arguments([
        '--api', 'https://git.example.com/',
        '--token', 'abc',
        '--auth-header-token',
        '--personal', 'public',
        '--organizations', 'none',
        '--archived',
        '--http',
        '--ssh',
        '--exclude', 'bar, baz',
        '--output', 'github.mr',
        '--prefix', '/srv/code',
        '--timeout', '5',
        '--verbose',
    ])

    assert cfg.api.url == 'https://git.example.com/'
    assert cfg.api.auth_header == AuthHeader.TOKEN
    assert cfg.api.timeout_s == 5
    assert cfg.fetch.personal == Scope.PUBLIC
    assert cfg.fetch.organizations == Scope.NONE
    assert cfg.manifest.include_archived is True
    assert cfg.manifest.clone_method == CloneMethod.HTTPS
    assert cfg.manifest.ssh_prefix is True
    assert cfg.manifest.exclude == 'bar, baz'
    assert cfg.manifest.prefix == '/srv/code'
    assert cfg.output.path == 'github.mr'
    assert cfg.verbose is True


def test_default_prefix_for_self_hosted_api() -> None:
    cfg = parse_arguments(['--api', 'https://git.example.com/', '--token', 'abc'])
    assert cfg.manifest.prefix == '/home/alice/Repos/git.example.com'


@pytest.mark.parametrize('option', ['--personal', '--organizations'])
@pytest.mark.parametrize('value', ['everything', 'PUBLIC', '', 'owner', ' all ', 'none\n'])
def test_invalid_scope_is_config_error(option: str, value: str) -> None:
    with pytest.raises(ConfigError, match='valid settings'):
        parse_arguments(['--token', 'abc', option, value])


def test_fractional_timeout_is_rejected() -> None:
    with pytest.raises(SystemExit):
        parse_arguments(['--token', 'abc', '--timeout', '2.5'])


def test_token_from_environment(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv('GITHUB_TOKEN', 'from-env')
    assert parse_arguments([]).api.token == 'from-env'


def test_flag_token_wins_over_environment(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv('GITHUB_TOKEN', 'from-env')
    assert parse_arguments(['--token', 'from-flag']).api.token == 'from-flag'


def test_missing_token_is_config_error() -> None:
    with pytest.raises(ConfigError, match='token'):
        parse_arguments([])


def test_invalid_api_url_is_config_error() -> None:
    with pytest.raises(ConfigError):
        parse_arguments(['--token', 'abc', '--api', 'ftp://example.com'])


def test_version_exits_before_token_check(capsys: pytest.CaptureFixture) -> None:
    with pytest.raises(SystemExit) as excinfo:
        parse_arguments(['--version', '--personal', 'bogus'])

    assert excinfo.value.code == 0
    assert capsys.readouterr().out.strip() == 'github2mr 1.0.0'
