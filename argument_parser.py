#!/usr/bin/env python3
"""Command line argument parsing and configuration building."""

from __future__ import annotations

import argparse
import os
from typing import List, Optional

from config import (DEFAULT_API_URL, DEFAULT_TIMEOUT_S, PAGE_SIZE,
                    PROCESS_NAME, TOKEN_ENV_VAR, VERSION, ApiConfig,
                    AuthHeader, CloneMethod, Config, FetchConfig,
                    ManifestConfig, OutputConfig, Scope)
from errors import ConfigError
from security import SecurityValidator
from utils import default_prefix

SCOPE_HELP = "Valid values are 'public', 'private', 'none', or 'all'."


def _create_argument_parser() -> argparse.ArgumentParser:
    """Create and configure the argument parser."""
    parser = argparse.ArgumentParser(
        prog=PROCESS_NAME,
        description="Generate an mr configuration file listing your github repositories",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  %(prog)s > ~/Repos/.mrconfig
  %(prog)s --personal public --organizations none --http
  %(prog)s --exclude "dotfiles, sandbox" --archived --output github.mr
  %(prog)s --api https://git.example.com/ --auth-header-token --ssh
        """,
    )
    parser.add_argument(
        "--version",
        action="version",
        version=f"{PROCESS_NAME} {VERSION}",
        help="Report upon our version, and terminate",
    )
    parser.add_argument(
        "-v",
        "--verbose",
        action="store_true",
        dest="verbose",
        help="Show debug output",
    )
    return parser


def _add_api_arguments(parser: argparse.ArgumentParser) -> None:
    """Add remote API arguments to parser."""
    parser.add_argument(
        "--api",
        dest="api_url",
        default=DEFAULT_API_URL,
        help="The API end-point to use for the remote git-host",
    )
    parser.add_argument(
        "--token",
        dest="token",
        help=f"The API token used to authenticate (or set {TOKEN_ENV_VAR} env var)",
    )
    parser.add_argument(
        "--auth-header-token",
        action="store_true",
        dest="auth_header_token",
        help="Use an authorization-header including 'token' rather than "
        "'bearer' (required for gitbucket)",
    )
    parser.add_argument(
        "--timeout",
        dest="timeout_s",
        type=int,
        default=DEFAULT_TIMEOUT_S,
        help=f"Seconds to wait for each API response (default: {DEFAULT_TIMEOUT_S})",
    )


def _add_selection_arguments(parser: argparse.ArgumentParser) -> None:
    """Add repository selection and filtering arguments to parser."""
    parser.add_argument(
        "--personal",
        dest="personal",
        default=Scope.ALL.value,
        help=f"Which personal repositories to fetch. {SCOPE_HELP}",
    )
    parser.add_argument(
        "--organizations",
        dest="organizations",
        default=Scope.ALL.value,
        help=f"Which organizational repositories to fetch. {SCOPE_HELP}",
    )
    parser.add_argument(
        "--archived",
        action="store_true",
        dest="archived",
        help="Include archived repositories in the output",
    )
    parser.add_argument(
        "--exclude",
        dest="exclude",
        default="",
        help="Comma-separated list of repositories to exclude",
    )


def _add_output_arguments(parser: argparse.ArgumentParser) -> None:
    """Add clone-command and output arguments to parser."""
    parser.add_argument(
        "--http",
        action="store_true",
        dest="http",
        help="Generate HTTP-based clones rather than SSH-based ones",
    )
    parser.add_argument(
        "--ssh",
        action="store_true",
        dest="ssh",
        help="Add 'ssh://'-prefix to the git clone command",
    )
    parser.add_argument(
        "--output",
        dest="output",
        default="",
        help="Write output to the named file, instead of printing to STDOUT",
    )
    parser.add_argument(
        "--prefix",
        dest="prefix",
        default="",
        help="The prefix beneath which to store the repositories upon the "
        "current system (default: $HOME/Repos/<git host>)",
    )


def _validate_parsed_arguments(args: argparse.Namespace) -> None:
    """Validate parsed arguments, raising ConfigError on the first bad one."""
    args.personal_scope = Scope.parse(args.personal)
    args.organizations_scope = Scope.parse(args.organizations)

    try:
        args.api_url = SecurityValidator.validate_api_url(args.api_url)
        if args.output:
            args.output = SecurityValidator.validate_file_path(args.output)
    except ValueError as e:
        raise ConfigError(f"configuration validation error: {e}") from e

    if args.timeout_s <= 0 or args.timeout_s > 600:
        raise ConfigError("timeout must be between 0 and 600 seconds")


def _get_and_validate_token(args: argparse.Namespace) -> str:
    """Resolve the token from the command line, falling back to the environment."""
    token = args.token or os.getenv(TOKEN_ENV_VAR)
    if not token:
        raise ConfigError(
            f"please specify your github token (use --token or {TOKEN_ENV_VAR})"
        )
    try:
        return SecurityValidator.validate_token(token)
    except ValueError as e:
        raise ConfigError(f"invalid token: {e}") from e


def parse_arguments(argv: Optional[List[str]] = None) -> Config:
    """Parse command line arguments and return configuration object."""
    parser = _create_argument_parser()
    _add_api_arguments(parser)
    _add_selection_arguments(parser)
    _add_output_arguments(parser)

    args = parser.parse_args(argv)

    _validate_parsed_arguments(args)
    token = _get_and_validate_token(args)

    return Config(
        api=ApiConfig(
            url=args.api_url,
            token=token,
            auth_header=(
                AuthHeader.TOKEN if args.auth_header_token else AuthHeader.BEARER
            ),
            timeout_s=args.timeout_s,
        ),
        fetch=FetchConfig(
            personal=args.personal_scope,
            organizations=args.organizations_scope,
            page_size=PAGE_SIZE,
        ),
        manifest=ManifestConfig(
            prefix=args.prefix or default_prefix(args.api_url),
            include_archived=args.archived,
            clone_method=CloneMethod.HTTPS if args.http else CloneMethod.SSH,
            ssh_prefix=args.ssh,
            exclude=args.exclude or None,
        ),
        output=OutputConfig(path=args.output or None),
        verbose=args.verbose,
    )
