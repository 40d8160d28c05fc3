"""CLI entry point for docsrel."""

from pathlib import Path

import click

from docsrel import __version__
from docsrel.commands import release, releases
from docsrel.core.logging_config import setup_logging


@click.group()
@click.version_option(version=__version__, prog_name="docsrel")
@click.option("--org", envvar="DOCSREL_ORG", help="GitHub organization owning the projects.")
@click.option("--token", envvar="GITHUB_TOKEN", help="GitHub access token.")
@click.option(
    "--config",
    "config_path",
    type=click.Path(dir_okay=False, path_type=Path),
    help="YAML file with org, token, api_url and timeout.",
)
@click.option("--verbose", "-v", is_flag=True, help="Log API requests to stderr.")
@click.option("--log-json", is_flag=True, help="Emit logs as JSON lines.")
@click.pass_context
def main(ctx, org, token, config_path, verbose, log_json):
    """docsrel - find project releases that ship documentation.

    Lists GitHub releases carrying a docs.tar.gz asset, sorted by
    semantic version.

    Examples:

        docsrel --org my-org releases my-project

        docsrel --org my-org releases my-project --all --json

        docsrel --org my-org release my-project v1.2.0
    """
    setup_logging("DEBUG" if verbose else "WARNING", json_output=log_json)
    ctx.ensure_object(dict)
    ctx.obj.setdefault("org", org)
    ctx.obj.setdefault("token", token)
    ctx.obj.setdefault("config_path", config_path)


# Register commands
main.add_command(releases.releases)
main.add_command(release.release)


if __name__ == "__main__":
    main()
