"""CLI commands for corerpc.

``corerpc call`` runs any registered method, ``corerpc methods`` lists the
registry, ``corerpc node-version`` asks the daemon which version it runs.
"""

from __future__ import annotations

import json
from decimal import Decimal
from pathlib import Path
from typing import Any, Optional

import typer
from pydantic import BaseModel
from rich.console import Console
from rich.markup import escape
from rich.table import Table

from corerpc import __version__
from corerpc.cli.logging_utils import configure_console_logging, ensure_rotating_log_file
from corerpc.client import Client, negotiate_version
from corerpc.client.base import transport_from_settings
from corerpc.config.loader import load_settings
from corerpc.config.schema import RpcSettings
from corerpc.errors import CoreRpcError
from corerpc.registry import DEFAULT_REGISTRY, describe
from corerpc.version import DaemonVersion

app = typer.Typer(
    name="corerpc",
    help="corerpc - typed JSON-RPC client for Bitcoin Core",
    no_args_is_help=True,
)

console = Console()


def parse_value(raw: str) -> Any:
    """Parse CLI input value as JSON if possible; fallback to string."""
    text = raw.strip()
    if text == "":
        return ""
    try:
        return json.loads(text, parse_float=Decimal)
    except json.JSONDecodeError:
        lowered = text.lower()
        if lowered in {"true", "false"}:
            return lowered == "true"
        return text


def to_jsonable(value: Any) -> Any:
    """Typed result -> plain JSON data using the daemon's field names."""
    if isinstance(value, BaseModel):
        return value.model_dump(mode="json", by_alias=True, exclude_none=True)
    if isinstance(value, Decimal):
        return format(value, "f")
    if isinstance(value, dict):
        return {k: to_jsonable(v) for k, v in value.items()}
    if isinstance(value, (list, tuple)):
        return [to_jsonable(v) for v in value]
    return value


def _parse_daemon_version(value: str) -> DaemonVersion:
    try:
        return DaemonVersion.parse(value)
    except ValueError as e:
        raise typer.BadParameter(str(e)) from e


def _settings(ctx: typer.Context) -> RpcSettings:
    opts: dict[str, Any] = ctx.obj or {}
    try:
        settings = load_settings(opts.get("config"))
    except ValueError as e:
        console.print(f"[red]{escape(str(e))}[/red]")
        raise typer.Exit(1) from e
    overrides = {k: v for k, v in opts.get("overrides", {}).items() if v is not None}
    if overrides:
        settings = settings.model_copy(update=overrides)
    return settings


def _fail(error: CoreRpcError) -> None:
    console.print(f"[red]{escape(f'[{error.code}] {error.message}')}[/red]")
    raise typer.Exit(1)


def version_callback(value: bool):
    if value:
        console.print(f"corerpc v{__version__}")
        raise typer.Exit()


@app.callback()
def main(
    ctx: typer.Context,
    config: Optional[Path] = typer.Option(None, "--config", "-c", help="Settings file (JSON)"),
    url: Optional[str] = typer.Option(None, "--url", help="RPC endpoint, e.g. http://127.0.0.1:8332"),
    user: Optional[str] = typer.Option(None, "--user", "-u", help="RPC user"),
    password: Optional[str] = typer.Option(None, "--password", "-p", help="RPC password"),
    cookie: Optional[Path] = typer.Option(None, "--cookie", help="Path to the daemon .cookie file"),
    wallet: Optional[str] = typer.Option(None, "--wallet", "-w", help="Wallet name for wallet calls"),
    daemon_version: Optional[str] = typer.Option(
        None, "--version", help="Daemon major version (e.g. 26); negotiated when omitted"
    ),
    verbose: bool = typer.Option(False, "--verbose", help="Log every call at debug level"),
    log_file: Optional[Path] = typer.Option(None, "--log-file", help="Also write logs to a rotating file"),
    show_version: bool = typer.Option(
        None, "--show-version", "-V", callback=version_callback, is_eager=True
    ),
):
    """corerpc - typed JSON-RPC client for Bitcoin Core."""
    configure_console_logging(verbose)
    if log_file is not None:
        ensure_rotating_log_file(log_file)
    parsed_version = _parse_daemon_version(daemon_version) if daemon_version else None
    ctx.obj = {
        "config": config,
        "overrides": {
            "url": url,
            "user": user,
            "password": password,
            "cookie_file": cookie,
            "wallet": wallet,
            "version": int(parsed_version) if parsed_version is not None else None,
        },
    }


@app.command()
def call(
    ctx: typer.Context,
    method: str = typer.Argument(..., help="Registry key, e.g. getblockcount or getblock_hex"),
    params: Optional[list[str]] = typer.Argument(None, help="Positional arguments (JSON where possible)"),
):
    """Call a method and print the typed result as JSON."""
    settings = _settings(ctx)
    args = [parse_value(p) for p in params or []]
    try:
        with Client.from_settings(settings) as client:
            result = client.call(method, *args)
    except CoreRpcError as e:
        _fail(e)
    except ValueError as e:
        console.print(f"[red]{escape(str(e))}[/red]")
        raise typer.Exit(1) from e
    console.print_json(data=to_jsonable(result))


@app.command()
def methods(
    version: Optional[str] = typer.Option(None, "--version", "-v", help="Only methods available on this version"),
):
    """List registered methods with their version ranges."""
    target = _parse_daemon_version(version) if version else None
    table = Table(title=f"Methods ({target.label})" if target else "Methods")
    table.add_column("Key", style="cyan")
    table.add_column("RPC")
    table.add_column("Versions")
    table.add_column("Signature", style="dim")
    for name in DEFAULT_REGISTRY.names():
        for descriptor in DEFAULT_REGISTRY.descriptors(name):
            if target is not None and target not in descriptor.versions:
                continue
            table.add_row(name, descriptor.rpc_method, str(descriptor.versions), describe(descriptor))
    console.print(table)


@app.command("node-version")
def node_version(ctx: typer.Context):
    """Ask the daemon which version it runs."""
    settings = _settings(ctx)
    try:
        with transport_from_settings(settings) as transport:
            detected = negotiate_version(transport, protocol=settings.protocol)
    except CoreRpcError as e:
        _fail(e)
    except ValueError as e:
        console.print(f"[red]{escape(str(e))}[/red]")
        raise typer.Exit(1) from e
    console.print(f"[green]✓[/green] {detected.label}")


if __name__ == "__main__":
    app()
