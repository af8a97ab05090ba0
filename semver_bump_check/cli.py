import logging
from typing import Optional

import click

from . import __version__
from .compare import compare_versions
from .util import BumpCheckError
from .versionfile import FileShape


def run_check(
        path: str, key: Optional[str], shape: FileShape,
) -> None:
    """Run the comparison and report the outcome the way the CLI does."""
    try:
        current, previous = compare_versions(path, key, shape)
    except BumpCheckError as e:
        raise click.ClickException(str(e)) from e
    click.echo(f"Current version ({current}) is greater than previous "
               f"version ({previous}) 🚀🚀🚀")


@click.group(context_settings={"max_content_width": 90})
@click.version_option(__version__, prog_name="sbc")
@click.option("-v", "--verbose", is_flag=True, help="log debug output.")
def cli(verbose: bool) -> None:
    """Check that a version file was bumped since the previous commit."""
    if verbose:
        logging.basicConfig(format="%(levelname)s %(name)s: %(message)s")
        logging.getLogger(__package__).setLevel(logging.DEBUG)


@cli.command(name="json")
@click.option("-f", "--file", required=True,
              help="structured version file (json, toml or yaml).")
@click.option("-k", "--key", required=True,
              help="key holding the version, dots reach into tables.")
def handle_json(file: str, key: str) -> None:
    """Use for a structured version file."""
    run_check(file, key, FileShape.STRUCTURED)


@cli.command(name="plain")
@click.option("-f", "--file", required=True,
              help="plain text version file.")
def handle_plain(file: str) -> None:
    """Use for a plain version file."""
    run_check(file, None, FileShape.PLAIN_TEXT)


def main() -> None:
    """Entry point, reads options from `SBC_*` environment variables too."""
    cli(auto_envvar_prefix="SBC")


if __name__ == "__main__":
    main()
