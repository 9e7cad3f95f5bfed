"""CLI helper utilities shared across commands."""

import json
import sys
from typing import NoReturn, Optional

import click

from ..config import NriSettings, SettingsError, load_settings
from ..context import EnvironmentProjectContext, StaticProjectContext
from ..resolver import NriResolver


class NriContext:
    def __init__(self):
        self.project = None
        self.verbose = False


pass_context = click.make_pass_decorator(NriContext, ensure=True)


def fail(message: str) -> NoReturn:
    """Print an error to stderr and exit with status 1."""
    click.echo(f"Error: {message}", err=True)
    sys.exit(1)


def echo_json(data) -> None:
    click.echo(json.dumps(data, indent=2))


def require_settings() -> NriSettings:
    try:
        return load_settings()
    except SettingsError as e:
        fail(str(e))


def build_resolver(project: Optional[str]) -> NriResolver:
    """Resolver rooted at --project, else the environment's project."""
    settings = require_settings()
    if project:
        context = StaticProjectContext(project)
    else:
        context = EnvironmentProjectContext(settings)
    return NriResolver(project_context=context, settings=settings)
