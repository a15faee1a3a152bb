"""CLI commands for libgit2dart_plugin.

Each command builds an in-process registrar, attaches the plugin once, and talks to it
through the configured method channel, the same way a host runtime would.
"""

import json
from pathlib import Path
from typing import Any

import typer
from rich.console import Console
from rich.markup import escape
from rich.table import Table

from libgit2dart_plugin import __logo__, __version__
from libgit2dart_plugin.channel.method_channel import MethodChannel
from libgit2dart_plugin.channel.types import MethodResult, ResultKind
from libgit2dart_plugin.cli.shared.logging_utils import configure_stderr, ensure_rotating_log_file
from libgit2dart_plugin.config.access import get_config
from libgit2dart_plugin.config.loader import get_config_path
from libgit2dart_plugin.config.schema import Config
from libgit2dart_plugin.plugin.commands import Command
from libgit2dart_plugin.plugin.dispatcher import register_with_registrar
from libgit2dart_plugin.plugin.platform_info import HostPlatform, platform_version
from libgit2dart_plugin.plugin.registrar import Registrar
from libgit2dart_plugin.utils.exceptions import PluginError

app = typer.Typer(
    name="libgit2dart-plugin",
    help=f"{__logo__} libgit2dart-plugin - host side of the libgit2dart method channel",
    no_args_is_help=True,
)

console = Console()

_METHOD_DOCS: dict[Command, tuple[str, str]] = {
    Command.GET_PLATFORM_VERSION: ("ignored", "\"<OS name> <OS version string>\""),
}


def version_callback(value: bool) -> None:
    if value:
        console.print(f"{__logo__} libgit2dart-plugin v{__version__}")
        raise typer.Exit()


@app.callback()
def main(
    version: bool = typer.Option(None, "--version", "-v", callback=version_callback, is_eager=True),
    verbose: bool = typer.Option(False, "--verbose", help="Log dispatch details to stderr"),
):
    """libgit2dart-plugin - host side of the libgit2dart method channel."""
    configure_stderr("DEBUG" if verbose else "WARNING")


def _load(config_path: Path | None) -> Config:
    try:
        config = get_config(config_path=config_path)
    except PluginError as exc:
        console.print(f"[red]{escape(exc.message)}[/red]")
        raise typer.Exit(1) from exc
    if config.logging.file:
        ensure_rotating_log_file("libgit2dart-plugin", config.logging)
    return config


def _attach(config: Config) -> MethodChannel:
    registrar = Registrar()
    register_with_registrar(registrar, config=config)
    return registrar.channel(config.channel.name)


def _parse_args(raw: str | None) -> Any:
    if raw is None:
        return None
    try:
        return json.loads(raw)
    except json.JSONDecodeError as exc:
        console.print(f"[red]--args is not valid JSON: {exc.msg}[/red]")
        raise typer.Exit(2) from exc


def _result_payload(result: MethodResult) -> dict[str, Any]:
    if result.kind is ResultKind.SUCCESS:
        return {"ok": True, "result": result.value}
    if result.kind is ResultKind.NOT_IMPLEMENTED:
        return {"ok": False, "notImplemented": True}
    err = result.error
    return {
        "ok": False,
        "error": {"code": err.code, "message": err.message, "details": err.details} if err else None,
    }


@app.command()
def call(
    method: str = typer.Argument(..., help="Method name, e.g. getPlatformVersion"),
    args: str = typer.Option(None, "--args", "-a", help="Arguments as JSON"),
    as_json: bool = typer.Option(False, "--json", help="Print the outcome as JSON"),
    config_path: Path = typer.Option(None, "--config", "-c", help="Config file path"),
):
    """Send one method call through the channel and print the outcome."""
    config = _load(config_path)
    arguments = _parse_args(args)
    result = _attach(config).invoke_method(method, arguments)

    if as_json:
        console.print_json(json.dumps(_result_payload(result), ensure_ascii=False))
    elif result.kind is ResultKind.SUCCESS:
        console.print(result.value if isinstance(result.value, str) else json.dumps(result.value), markup=False)
    elif result.kind is ResultKind.NOT_IMPLEMENTED:
        console.print(f"[yellow]not implemented:[/yellow] {escape(method)}")
    else:
        err = result.error
        code = err.code if err else "UNKNOWN"
        message = (err.message or "") if err else ""
        console.print(f"[red]error {escape(f'[{code}]')}:[/red] {escape(message)}")

    if result.kind is ResultKind.ERROR:
        raise typer.Exit(1)


@app.command()
def methods():
    """List the methods the plugin answers."""
    table = Table(title="libgit2dart methods")
    table.add_column("Method", style="cyan")
    table.add_column("Arguments")
    table.add_column("Result")
    for command in Command:
        arguments, outcome = _METHOD_DOCS.get(command, ("", ""))
        table.add_row(command.value, arguments, outcome)
    console.print(table)


@app.command()
def status(
    config_path: Path = typer.Option(None, "--config", "-c", help="Config file path"),
):
    """Show configuration and host platform."""
    path = config_path or get_config_path()
    config = _load(config_path)

    console.print(f"{__logo__} libgit2dart-plugin Status\n")
    console.print(f"Config: {path} {'[green]✓[/green]' if path.exists() else '[dim]defaults[/dim]'}")
    console.print(f"Channel: {config.channel.name} [dim]({config.channel.codec})[/dim]")
    console.print(f"Platform: {platform_version(HostPlatform.current())}", markup=False)


if __name__ == "__main__":
    app()
