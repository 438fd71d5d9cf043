"""CLI entrypoint for vaultjoin."""

import logging
import sys
from pathlib import Path
from typing import Any, Callable

import click
from rich.logging import RichHandler

from . import __version__
from .joining.strategies import Branded, Strategy, TypeAndKey

KEY_TYPES: dict[str, type] = {"str": str, "int": int}


def _configure_logging(verbose: bool) -> None:
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(message)s",
        handlers=[RichHandler(show_path=False)],
    )


def _strategy_options(func: Callable[..., Any]) -> Callable[..., Any]:
    """Options selecting a Branded or TypeAndKey strategy."""
    options = [
        click.option("--brand", "brand_key", default=None, metavar="FIELD",
                     help="Key lives under this frontmatter field (Branded)"),
        click.option("--type-key", default=None, metavar="FIELD",
                     help="Field holding the note type (TypeAndKey)"),
        click.option("--note-type", default=None, metavar="VALUE",
                     help="Required value of --type-key (TypeAndKey)"),
        click.option("--id-key", default=None, metavar="FIELD",
                     help="Field holding the key on matching notes (TypeAndKey)"),
        click.option("--key-type", type=click.Choice(sorted(KEY_TYPES)), default="str",
                     help="Type keys must have"),
    ]
    for option in reversed(options):
        func = option(func)
    return func


def _build_strategy(
    brand_key: str | None,
    type_key: str | None,
    note_type: str | None,
    id_key: str | None,
    key_type: str,
) -> Strategy:
    typed = KEY_TYPES[key_type]
    type_and_key = (type_key, note_type, id_key)

    if brand_key and any(type_and_key):
        raise click.UsageError("--brand cannot be combined with --type-key/--note-type/--id-key")
    if brand_key:
        return Branded(brand_key, key_type=typed)
    if all(type_and_key):
        return TypeAndKey(type_key, note_type, id_key, key_type=typed)
    raise click.UsageError("Pass --brand FIELD, or all of --type-key, --note-type and --id-key")


@click.group()
@click.version_option(__version__, prog_name="vaultjoin")
@click.option(
    "--vault",
    "-v",
    type=click.Path(exists=False, file_okay=False, dir_okay=True, path_type=Path),
    default=None,
    envvar="VAULTJOIN_VAULT",
    help="Path to vault root (defaults to $VAULTJOIN_VAULT, then the current directory)",
)
@click.option("--verbose", "-V", is_flag=True, help="Log per-note decisions")
@click.pass_context
def cli(ctx: click.Context, vault: Path | None, verbose: bool) -> None:
    """vaultjoin - Join Markdown vault notes to external records by frontmatter key."""
    ctx.ensure_object(dict)
    _configure_logging(verbose)

    if vault is None:
        vault = Path.cwd()

    if not vault.exists() or not vault.is_dir():
        raise click.BadParameter(f"Directory '{vault}' does not exist.", param_hint="--vault / -v")

    ctx.obj["vault"] = vault.resolve()


@cli.command()
@_strategy_options
@click.option("--json", "output_json", is_flag=True, help="Output results as JSON")
@click.pass_context
def index(
    ctx: click.Context,
    brand_key: str | None,
    type_key: str | None,
    note_type: str | None,
    id_key: str | None,
    key_type: str,
    output_json: bool,
) -> None:
    """List notes by the key extracted from their frontmatter.

    Examples:

        vaultjoin index --brand id --key-type int

        vaultjoin index --type-key type --note-type person --id-key person_id
    """
    from .commands.index_cmd import run_index

    strategy = _build_strategy(brand_key, type_key, note_type, id_key, key_type)
    sys.exit(run_index(ctx.obj["vault"], strategy, output_json=output_json))


@cli.command()
@click.argument("note")
@click.option("--json", "output_json", is_flag=True, help="Output results as JSON")
@click.pass_context
def show(ctx: click.Context, note: str, output_json: bool) -> None:
    """Print the frontmatter and body of NOTE (path relative to the vault)."""
    from .commands.show import run_show

    sys.exit(run_show(ctx.obj["vault"], note, output_json=output_json))


@cli.command()
@click.argument("key")
@click.argument("default_path")
@_strategy_options
@click.option(
    "--metadata-file",
    type=click.Path(exists=True, dir_okay=False, path_type=Path),
    required=True,
    help="YAML file holding the frontmatter to write",
)
@click.option(
    "--body-file",
    type=click.Path(exists=True, dir_okay=False, path_type=Path),
    default=None,
    help="File holding the note body (empty body if omitted)",
)
@click.pass_context
def join(
    ctx: click.Context,
    key: str,
    default_path: str,
    brand_key: str | None,
    type_key: str | None,
    note_type: str | None,
    id_key: str | None,
    key_type: str,
    metadata_file: Path,
    body_file: Path | None,
) -> None:
    """Create or update the note joined to KEY.

    If a note in the vault already carries KEY it is overwritten (frontmatter
    and body); otherwise a new note is created at DEFAULT_PATH, relative to the
    vault root.

    Examples:

        vaultjoin join 7 people/7.md --brand id --key-type int --metadata-file person.yml
    """
    from .commands.join import run_join

    strategy = _build_strategy(brand_key, type_key, note_type, id_key, key_type)
    try:
        typed_key = KEY_TYPES[key_type](key)
    except ValueError:
        raise click.BadParameter(f"'{key}' is not a valid {key_type}", param_hint="KEY")

    exit_code = run_join(
        ctx.obj["vault"],
        strategy,
        typed_key,
        default_path,
        metadata_file=metadata_file,
        body_file=body_file,
    )
    sys.exit(exit_code)


def main() -> None:
    """Main entrypoint."""
    cli()


if __name__ == "__main__":
    main()
