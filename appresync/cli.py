"""Click-based CLI for appresync - resync apps with the platform."""

from __future__ import annotations

import asyncio
import sys
from pathlib import Path
from typing import Optional
from uuid import UUID

import click
import yaml
from pydantic import ValidationError
from rich.prompt import Confirm

from appresync import __version__
from appresync.client import GraphQLResyncClient, TaggedCache
from appresync.config import (
    ensure_config_exists,
    get_config_path,
    load_config,
    load_config_or_default,
    validate_config_file,
)
from appresync.logger import ResyncLog, ResyncLogger
from appresync.output import create_console
from appresync.sync import AppMethod, Environment, ResyncModal, Success

console = create_console()


@click.group()
@click.version_option(version=__version__, prog_name="appresync")
def cli() -> None:
    """appresync - Resync apps with the platform.

    Sends a resync request for an app so that its updated function
    configuration is pulled from the URL it is served from.

    \b
    Serve apps:   resync from their current URL or an override URL
    Connect apps: migrate to serve by setting an override URL
    """
    pass


@cli.command()
@click.argument("app_external_id")
@click.option("--url", "-u", required=True, help="URL the app is currently served from")
@click.option("--override-url", "-o", default=None, help="Resync from this URL instead")
@click.option(
    "--method",
    "-m",
    type=click.Choice([m.value for m in AppMethod]),
    default=AppMethod.SERVE.value,
    show_default=True,
    help="How the app is connected",
)
@click.option("--platform", "-p", default=None, help="Hosting platform of the app (e.g. vercel)")
@click.option("--env-id", type=click.UUID, default=None, help="Environment ID (default: from config)")
@click.option("--yes", "-y", is_flag=True, help="Skip confirmation prompt")
@click.option("--verbose", "-v", is_flag=True, help="Show detailed output")
def resync(
    app_external_id: str,
    url: str,
    override_url: Optional[str],
    method: str,
    platform: Optional[str],
    env_id: Optional[UUID],
    yes: bool,
    verbose: bool,
) -> None:
    """Resync an app from the URL where it serves its functions.

    For apps using connect this migrates the app to serve, which
    requires --override-url.
    """
    try:
        config = load_config_or_default()
    except (ValidationError, yaml.YAMLError) as e:
        console.print_error(f"Invalid configuration: {e}")
        sys.exit(1)

    out = create_console(verbose=verbose or config.output.verbose, colored=config.output.colored)
    logger = ResyncLogger(out.rich, verbose=out.verbose)

    env_id = env_id or config.environment.id
    if env_id is None:
        out.print_error("No environment ID. Pass --env-id or set environment.id in the config.")
        sys.exit(1)

    client = GraphQLResyncClient(
        config.api.endpoint,
        token=config.api.token,
        timeout=config.api.timeout,
        cache=TaggedCache(),
    )
    modal = ResyncModal(
        app_external_id,
        url,
        Environment(id=env_id, slug=config.environment.slug),
        client,
        notifier=logger,
        app_method=method,
        platform=platform,
    )
    controller = modal.open()

    if override_url is not None:
        controller.set_override_enabled(True)
        controller.set_override_value(override_url)

    view = modal.view()
    out.print_view(view)

    if not controller.can_submit:
        out.print_error(f"{view.confirm_label} requires --override-url")
        sys.exit(1)

    if not yes and not Confirm.ask(f"{view.confirm_label}?", default=True, console=out.rich):
        logger.warning("Resync cancelled")
        modal.close()
        return

    request = controller.build_request()
    out.print_request(request)

    outcome = asyncio.run(modal.confirm())
    if outcome is None:
        out.print_error("Resync was not submitted")
        sys.exit(1)

    log_path = Path(config.output.log_file) if config.output.log_file else None
    ResyncLog(log_path).record(request, outcome)

    out.print_outcome(outcome)
    if not isinstance(outcome, Success):
        sys.exit(1)


@cli.command()
@click.option("--lines", "-n", default=50, help="Number of entries to show")
def log(lines: int) -> None:
    """Show recent resync attempts, newest first."""
    try:
        config = load_config_or_default()
    except (ValidationError, yaml.YAMLError) as e:
        console.print_error(f"Invalid configuration: {e}")
        sys.exit(1)

    log_path = Path(config.output.log_file) if config.output.log_file else None
    entries = ResyncLog(log_path).recent(lines)

    logger = ResyncLogger(console.rich)
    if not entries:
        logger.info("No resync log found. Run 'resync' first.")
        return

    logger.entries(entries)


@cli.group()
def config() -> None:
    """Configuration file commands."""
    pass


@config.command("init")
def config_init() -> None:
    """Create a default configuration file."""
    path, created = ensure_config_exists()
    if created:
        console.print_success(f"Created configuration: {path}")
    else:
        console.print_info(f"Configuration already exists: {path}")


@config.command("path")
def config_path() -> None:
    """Print the configuration file path."""
    click.echo(str(get_config_path()))


@config.command("show")
def config_show() -> None:
    """Show the current configuration."""
    path = get_config_path()
    try:
        cfg = load_config(path)
    except FileNotFoundError as e:
        console.print_error(str(e))
        sys.exit(1)
    except (ValidationError, yaml.YAMLError) as e:
        console.print_error(f"Invalid configuration: {e}")
        sys.exit(1)

    console.print_config_summary(str(path), cfg)


@config.command("validate")
def config_validate() -> None:
    """Validate the configuration file."""
    is_valid, errors = validate_config_file()
    if is_valid:
        console.print_success("Configuration is valid")
        return

    for error in errors:
        console.print_error(error)
    sys.exit(1)
