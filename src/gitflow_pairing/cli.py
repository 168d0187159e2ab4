"""Command-line interface for GitFlow Pairing."""

import os
import shutil
import sys
from pathlib import Path
from typing import Optional

import click
import yaml

from ._version import __version__
from .cli_utils import exit_with_error, setup_logging
from .config import ConfigLoader
from .core.hooks import install_hooks
from .core.rewriter import MessageRewriter
from .errors import PairingError


def _split_ids(value: str) -> list[str]:
    return [developer_id.strip() for developer_id in value.split(",") if developer_id.strip()]


def _default_executable() -> str:
    found = shutil.which("gitflow-pairing")
    if found:
        return found
    return str(Path(sys.argv[0]).resolve())


@click.group()
@click.version_option(version=__version__, prog_name="GitFlow Pairing")
@click.help_option("-h", "--help")
@click.option(
    "--config",
    "-c",
    type=click.Path(dir_okay=False, path_type=Path),
    default=None,
    help="Path to YAML configuration file (default: $GITFLOW_PAIRING_CONFIG "
    "or ~/.gitflow-pairing.yaml)",
)
@click.option(
    "--log",
    type=click.Choice(["none", "INFO", "DEBUG"], case_sensitive=False),
    default="none",
    help="Enable logging with specified level (default: none)",
)
@click.pass_context
def cli(ctx: click.Context, config: Optional[Path], log: str) -> None:
    """GitFlow Pairing - credit co-authors and issue ids in commit messages.

    \b
    Start a commit message with a tag group to credit developers for
    that commit only, e.g. "[alice,bob,42] Fix login". Without tags, the
    repository's default developers are credited.
    """
    setup_logging(log, __name__)
    ctx.ensure_object(dict)
    ctx.obj["config_path"] = config or ConfigLoader.default_config_path()


@cli.command(name="add-dev")
@click.argument("developer_id")
@click.argument("name")
@click.argument("email")
@click.pass_context
def add_dev(ctx: click.Context, developer_id: str, name: str, email: str) -> None:
    """Register a developer under DEVELOPER_ID.

    \b
    EXAMPLES:
      gitflow-pairing add-dev alice "Alice Anderson" alice@example.com
    """
    try:
        cfg = ConfigLoader.load(ctx.obj["config_path"])
        developer = cfg.add_developer(developer_id, name, email)
        ConfigLoader.save(cfg)
        click.echo(f"✅ Added dev {developer_id}: {developer}")
    except PairingError as e:
        exit_with_error(e)


@cli.command(name="add-repo")
@click.argument(
    "path", type=click.Path(file_okay=False, path_type=Path), default=None, required=False
)
@click.option("--devs", "devs", default="", help="Comma separated default developer ids")
@click.option("--issue-id", default="", help="Default issue id for commits in this repo")
@click.pass_context
def add_repo(ctx: click.Context, path: Optional[Path], devs: str, issue_id: str) -> None:
    """Configure default developers for the repository at PATH (default: cwd).

    \b
    EXAMPLES:
      gitflow-pairing add-repo ~/src/project --devs alice,bob
      gitflow-pairing add-repo --devs alice --issue-id PROJ-1
    """
    repo_path = str((path or Path.cwd()).expanduser().resolve())
    try:
        cfg = ConfigLoader.load(ctx.obj["config_path"])
        cfg.add_repository(repo_path, _split_ids(devs), issue_id)
        ConfigLoader.save(cfg)
        click.echo(f"✅ Added repo {repo_path}")
    except PairingError as e:
        exit_with_error(e)


@cli.command(name="update-repo-devs")
@click.argument("devs")
@click.pass_context
def update_repo_devs(ctx: click.Context, devs: str) -> None:
    """Replace the default developers of the current repository.

    DEVS is a comma separated list of developer ids.
    """
    try:
        cfg = ConfigLoader.load(ctx.obj["config_path"])
        repo_path = cfg.update_repository_developers(os.getcwd(), _split_ids(devs))
        ConfigLoader.save(cfg)
        click.echo(f"✅ Updated devs of repo {repo_path}")
    except PairingError as e:
        exit_with_error(e)


@cli.command(name="init-repo")
@click.argument(
    "path", type=click.Path(file_okay=False, path_type=Path), default=None, required=False
)
@click.option("--overwrite", is_flag=True, help="Replace existing commit message hooks")
@click.option(
    "--executable",
    default=None,
    help="Command the hooks should run (default: this gitflow-pairing executable)",
)
def init_repo(path: Optional[Path], overwrite: bool, executable: Optional[str]) -> None:
    """Install the commit message hooks into the repository at PATH (default: cwd)."""
    try:
        written = install_hooks(path or Path.cwd(), executable or _default_executable(), overwrite)
        for hook_path in written:
            click.echo(f"✅ Installed {hook_path}")
    except PairingError as e:
        exit_with_error(e)


@cli.command(name="add-info")
@click.argument("message_file", type=click.Path(exists=True, dir_okay=False, path_type=Path))
@click.pass_context
def add_info(ctx: click.Context, message_file: Path) -> None:
    """Rewrite MESSAGE_FILE with issue id and co-author trailers.

    This is what the installed git hooks run.
    """
    try:
        cfg = ConfigLoader.load(ctx.obj["config_path"])
        MessageRewriter(cfg).process_file(message_file, os.getcwd())
    except PairingError as e:
        exit_with_error(e)


@cli.command(name="list-devs")
@click.pass_context
def list_devs(ctx: click.Context) -> None:
    """List all registered developers."""
    try:
        cfg = ConfigLoader.load(ctx.obj["config_path"])
    except PairingError as e:
        exit_with_error(e)
        return

    if not cfg.developers:
        click.echo("No developers found. Add one with add-dev.")
        return

    click.echo(f"{'ID':<15} {'Name':<30} {'Email'}")
    click.echo("-" * 75)
    for developer_id, developer in cfg.developers.items():
        click.echo(f"{developer_id:<15} {developer.name:<30} {developer.email}")


@cli.command(name="show")
@click.pass_context
def show(ctx: click.Context) -> None:
    """Print the configuration as YAML."""
    try:
        cfg = ConfigLoader.load(ctx.obj["config_path"])
    except PairingError as e:
        exit_with_error(e)
        return

    click.echo(yaml.safe_dump(cfg.to_dict(), default_flow_style=False, sort_keys=False), nl=False)


def main() -> None:
    """Main entry point."""
    cli()


if __name__ == "__main__":
    main()
