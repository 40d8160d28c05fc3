"""Helpers shared by the CLI commands."""

import click
from rich.console import Console

from docsrel.core.config import DocsrelConfig
from docsrel.core.errors import ConfigError
from docsrel.core.service import ReleaseProvider, ReleaseService

console = Console()


def load_config(options: dict) -> DocsrelConfig:
    """Build the config from --config, then apply --org and --token."""
    config_path = options.get("config_path")
    if config_path:
        config = DocsrelConfig.load(config_path)
    else:
        config = DocsrelConfig.default()

    if options.get("org"):
        config.org = options["org"]
    if options.get("token"):
        config.token = options["token"]
    return config


def get_service(ctx: click.Context) -> ReleaseProvider:
    """Return the release service for this invocation.

    A service already present in the context object is used as-is.
    """
    options = ctx.find_root().obj
    if "service" not in options:
        try:
            service = ReleaseService.from_config(load_config(options))
        except ConfigError as e:
            console.print(f"[red]Error:[/red] {e}")
            raise SystemExit(1)
        options["service"] = ctx.with_resource(service)
    return options["service"]
