"""Release command implementation."""

import json

import click
import httpx
from rich.panel import Panel

from docsrel.commands.common import console, get_service
from docsrel.core.errors import DocsrelError, ReleaseNotFoundError


@click.command()
@click.argument("project")
@click.argument("tag")
@click.option("--json", "as_json", is_flag=True, help="Print the release as JSON.")
@click.pass_context
def release(ctx, project: str, tag: str, as_json: bool):
    """Show the documentation archive of PROJECT at TAG.

    TAG must match the release tag exactly (e.g. v1.2.0).
    """
    service = get_service(ctx)
    try:
        found = service.get_release(project, tag)
    except ReleaseNotFoundError as e:
        console.print(f"[red]Error:[/red] {e}")
        console.print("[dim]Drafts, prereleases and releases without docs.tar.gz are not listed[/dim]")
        raise SystemExit(1)
    except (DocsrelError, httpx.HTTPError, ValueError) as e:
        console.print(f"[red]Error:[/red] {e}")
        raise SystemExit(1)

    if as_json:
        click.echo(json.dumps(found.to_dict(), indent=2))
        return

    lines = [
        f"[bold]Tag:[/bold] {found.tag}",
        f"[bold]Version:[/bold] {found.version}",
        f"[bold]Docs:[/bold] {found.docs_url}",
    ]
    console.print(Panel("\n".join(lines), title=f"[green]{project}[/green]"))
