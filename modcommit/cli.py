#!/usr/bin/env python3

import json
import sys

import click
from rich.console import Console
from rich.table import Table

from modcommit import __version__
from modcommit.config import load_config, configure_logging, logger
from modcommit.exit_codes import CommandError, INTERRUPTED
from modcommit.infra.git_client import GitClient
from modcommit.infra.installer import INSTALLERS, PackageInstaller
from modcommit.services.commit_service import ModuleCommitService

err_console = Console(stderr=True)


def _stdout_is_tty():
    return sys.stdout.isatty()


def _render_summary(result):
    """Print a human readable summary on stderr."""
    table = Table(title="modcommit", show_header=False)
    table.add_column("Field", style="bold cyan")
    table.add_column("Value")
    table.add_row("parent", f"{result.parent_ref} ({result.parent})")
    table.add_row("installer", result.installer)
    table.add_row("modules", ", ".join(result.modules) or "(none)")
    table.add_row("tree", result.tree)
    table.add_row("commit", result.commit)
    err_console.print(table)


@click.command(context_settings={'help_option_names': ['-h', '--help']})
@click.version_option(version=__version__, prog_name='modcommit')
@click.argument('modules', nargs=-1)
@click.option('--parent', default=None, metavar='REF',
              help='Parent commit of the new commit (default: HEAD)')
@click.option('--installer', 'installer_name', type=click.Choice(INSTALLERS), default=None,
              help='Package manager used to install the modules (default: pip)')
@click.option('--git-dir', type=click.Path(file_okay=False), default=None,
              help='Repository git directory (default: $GIT_DIR or discovery)')
@click.option('--json', 'json_output', is_flag=True, help='Output the result as JSON')
@click.option('--verbose', '-v', is_flag=True, help='Show debug logging and a summary')
def cli(modules, parent, installer_name, git_dir, json_output, verbose):
    """Create a commit object containing freshly installed MODULES.

    The modules are installed into a temporary directory, staged into a
    new tree through a temporary index, and committed on top of the
    parent. The working tree, index and refs of the repository are not
    touched; only the new commit id is printed.

    Examples:

    \b
        modcommit requests click
        modcommit --parent origin/main --installer npm left-pad
        git branch vendored $(modcommit requests)
    """
    try:
        config = load_config()
        configure_logging('DEBUG' if verbose else config['logging']['level'])

        service = ModuleCommitService(
            config=config,
            git_client=GitClient(executable=config['git']['executable'], git_dir=git_dir),
            installer=PackageInstaller.from_config(config, name=installer_name),
        )
        result = service.build(modules, parent=parent or config['commit']['parent'])
    except KeyboardInterrupt:
        click.echo("Interrupted by user", err=True)
        sys.exit(INTERRUPTED)
    except CommandError as e:
        logger.debug(f"{type(e).__name__}: {e}")
        click.echo(f"Error: {e}", err=True)
        sys.exit(e.exit_code)

    if verbose:
        _render_summary(result)

    if json_output:
        click.echo(json.dumps(result.to_dict(), ensure_ascii=False))
    else:
        click.echo(result.commit, nl=_stdout_is_tty())


def main():
    cli()

if __name__ == "__main__":
    main()
