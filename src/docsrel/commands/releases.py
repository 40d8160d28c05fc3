"""Releases command implementation."""

import json

import click
import httpx
from rich.table import Table

from docsrel.commands.common import console, get_service
from docsrel.core.errors import DocsrelError


@click.command()
@click.argument("project")
@click.option("--all", "fetch_all", is_flag=True, help="Follow every page, not only the latest 100 releases.")
@click.option("--json", "as_json", is_flag=True, help="Print a JSON array instead of a table.")
@click.pass_context
def releases(ctx, project: str, fetch_all: bool, as_json: bool):
    """List releases of PROJECT that ship a docs.tar.gz archive.

    Releases are sorted by ascending semantic version.
    """
    service = get_service(ctx)
    try:
        found = service.list_releases(project, all=fetch_all)
    except (DocsrelError, httpx.HTTPError, ValueError) as e:
        console.print(f"[red]Error:[/red] {e}")
        raise SystemExit(1)

    if as_json:
        click.echo(json.dumps([r.to_dict() for r in found], indent=2))
        return

    if not found:
        console.print(f"No releases with documentation found for {project}")
        return

    table = Table(show_header=True, header_style="bold")
    table.add_column("Tag", no_wrap=True)
    table.add_column("Docs")

    for r in found:
        table.add_row(r.tag, r.docs_url)

    console.print(table)
    console.print(f"\n{len(found)} release(s) with documentation")
