"""Command-line interface for fediview."""

import asyncio
from enum import Enum
from pathlib import Path
from typing import Optional

import typer
from rich.console import Console

from fediview import Converter, InstanceConfig, SQLiteStore, __version__
from fediview.core.exporter import to_json
from fediview.exceptions import FediviewError
from fediview.logging import configure_logging
from fediview.models.entities import Instance
from fediview.store import create_store, load_snapshot

app = typer.Typer(
    name="fediview",
    help="Render API views from a fediview SQLite store",
    add_completion=False,
)
console = Console()


class ViewKind(str, Enum):
    ACCOUNT = "account"
    ACCOUNT_SENSITIVE = "account-sensitive"
    ACCOUNT_ADMIN = "account-admin"
    STATUS = "status"
    INSTANCE_V1 = "instance-v1"
    INSTANCE_V2 = "instance-v2"


def version_callback(value: bool):
    if value:
        console.print(f"fediview version {__version__}")
        raise typer.Exit()


@app.callback()
def main(
    version: bool = typer.Option(
        False,
        "--version",
        "-v",
        callback=version_callback,
        is_eager=True,
        help="Show version and exit",
    ),
):
    """fediview - entity to API view conversion."""
    pass


@app.command()
def load(
    snapshot: Path = typer.Argument(..., exists=True, dir_okay=False, help="Snapshot JSON file"),
    db: Optional[Path] = typer.Option(None, "--db", help="SQLite database path"),
):
    """Load a snapshot of entities into a SQLite store."""
    config = InstanceConfig()
    db_path = db or Path(config.sqlite_path)

    async def run():
        async with SQLiteStore(str(db_path), host=config.host) as store:
            return await store.load_snapshot(load_snapshot(snapshot))

    rows = asyncio.run(run())
    console.print(f"[green]✓[/green] Loaded {rows} rows into {db_path}")


@app.command()
def show(
    kind: ViewKind = typer.Argument(..., help="View to render"),
    entity_id: str = typer.Argument("", help="Account or status ID"),
    viewer: Optional[str] = typer.Option(None, "--viewer", help="Viewing account ID"),
    db: Optional[Path] = typer.Option(None, "--db", help="SQLite database path"),
):
    """Render one entity as its API view."""
    config = InstanceConfig()
    configure_logging(config)

    async def run():
        async with create_store(config, db) as store:
            converter = Converter(store, config)

            if kind in (ViewKind.INSTANCE_V1, ViewKind.INSTANCE_V2):
                instance = Instance(
                    id=config.host,
                    domain=config.host,
                    uri=f"{config.protocol}://{config.host}",
                    title=config.host,
                )
                if kind == ViewKind.INSTANCE_V1:
                    return await converter.instance_to_view_v1(instance)
                return await converter.instance_to_view_v2(instance)

            if kind == ViewKind.STATUS:
                status = await store.get_status_by_id(entity_id)
                viewing = await store.get_account_by_id(viewer) if viewer else None
                return await converter.status_to_view(status, viewer=viewing)

            account = await store.get_account_by_id(entity_id)
            if kind == ViewKind.ACCOUNT_SENSITIVE:
                return await converter.account_to_view_sensitive(account)
            if kind == ViewKind.ACCOUNT_ADMIN:
                return await converter.account_to_admin_view(account)
            return await converter.account_to_view_public(account)

    try:
        view = asyncio.run(run())
    except FediviewError as e:
        console.print(f"[red]Failed to render {kind.value} {entity_id}: {e}[/red]")
        raise typer.Exit(1)

    console.print_json(to_json(view))


if __name__ == "__main__":
    app()
