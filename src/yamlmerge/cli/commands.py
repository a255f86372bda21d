"""CLI commands for yamlmerge."""

import logging
import sys
from pathlib import Path

import click
from pydantic import ValidationError

from yamlmerge.config.loader import load_document, render_yaml, write_output
from yamlmerge.config.settings import AppSettings
from yamlmerge.core.exceptions import YamlMergeError
from yamlmerge.core.merger import merge
from yamlmerge.core.roles import list_roots, resolve_roles

__version__ = "1.0.0"

SINGLE_LINE_HELP = "Simple tool that recursively merges YAML files"

logger = logging.getLogger(__name__)


def _setup_logging(level: str) -> None:
    logging.basicConfig(
        level=getattr(logging, level.upper(), logging.WARNING),
        format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
        stream=sys.stderr,
    )


def _load_settings() -> AppSettings:
    try:
        return AppSettings()
    except ValidationError as e:
        raise click.ClickException(f"Invalid settings in environment:\n{e}") from e


@click.command()
@click.argument("input_file", metavar="INPUT", type=click.Path(dir_okay=False, path_type=Path))
@click.argument("base", required=False)
@click.argument("override", required=False)
@click.option("--get-roots", is_flag=True, help="Print all root-level node names and exit.")
@click.option(
    "-o",
    "--output",
    type=click.Path(dir_okay=False, path_type=Path),
    default=None,
    help="Write the merged document to a file instead of stdout.",
)
@click.option("--sort-keys/--no-sort-keys", default=None, help="Sort mapping keys in the output.")
@click.option("--log-level", default=None, help="Log level (DEBUG, INFO, WARNING, ERROR)")
@click.version_option(__version__, prog_name="yamlmerge")
def cli(
    input_file: Path,
    base: str | None,
    override: str | None,
    get_roots: bool,
    output: Path | None,
    sort_keys: bool | None,
    log_level: str | None,
) -> None:
    """Recursively merge the OVERRIDE root of INPUT onto its BASE root.

    INPUT is a YAML (or TOML) file whose top-level keys name configuration
    roots. Values under OVERRIDE win over those under BASE at every nesting
    level, and the merged tree is printed as YAML.
    """
    settings = _load_settings()
    if log_level:
        settings.log_level = log_level
    _setup_logging(settings.log_level)

    if not get_roots and (base is None or override is None):
        raise click.UsageError("BASE and OVERRIDE are required unless --get-roots is given")

    try:
        document = load_document(input_file)

        if get_roots:
            for name in list_roots(document):
                click.echo(name)
            return

        base_tree, override_tree = resolve_roles(document, base, override)
        merged = merge(base_tree, override_tree)
        text = render_yaml(
            merged,
            sort_keys=settings.sort_keys if sort_keys is None else sort_keys,
            indent=settings.indent,
        )
    except YamlMergeError as e:
        logger.debug("Merge of %s failed", input_file, exc_info=True)
        raise click.ClickException(str(e)) from e

    if output is None:
        click.echo(text, nl=False)
        return
    try:
        write_output(text, output)
    except YamlMergeError as e:
        raise click.ClickException(str(e)) from e


def main() -> None:
    """Console entry point."""
    try:
        settings = _load_settings()
    except click.ClickException as e:
        e.show()
        sys.exit(e.exit_code)
    if settings.single_line_help:
        click.echo(SINGLE_LINE_HELP)
        sys.exit(0)
    cli()
