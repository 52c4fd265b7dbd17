"""CLI adapter for ``dog_records`` built on ``lib_cli_exit_tools``.

Purpose
-------
Expose the dogs loader as a command line tool: read the file, print the
parsed collection, or print one of the two distinguishable error messages.

Contents
--------
* :data:`CLICK_CONTEXT_SETTINGS` – shared Click settings ensuring ``-h`` works.
* :func:`cli` – root command that wires global traceback handling into
  ``lib_cli_exit_tools``.
* :func:`cli_info` – prints distribution metadata for quick diagnostics.
* :func:`cli_show` – calls :func:`dog_records.core.load_dogs` and prints the
  dogs as JSON.
* :func:`cli_generate_example` – writes a sample ``dogs.json``.
* :func:`main` – entry point used by ``console_scripts`` registration.

System Role
-----------
Outermost layer. Expected failures (:class:`GetDogsError`) are rendered here
on stderr and mapped to their exit code; anything unexpected is left to
``lib_cli_exit_tools`` so tracebacks follow the ``--traceback`` flag.
"""

from __future__ import annotations

import json
import sys
from importlib import metadata
from pathlib import Path
from typing import Final, Optional, Sequence

import lib_cli_exit_tools
import rich_click as click

from .application.get_dogs import VARIANTS, describe_failure
from .core import dump_dogs, load_dogs, resolve_settings
from .domain.errors import GetDogsError
from .examples import generate_example as _generate_example

CLICK_CONTEXT_SETTINGS = {"help_option_names": ["-h", "--help"]}
_TRACEBACK_SUMMARY_LIMIT: Final[int] = 500
_TRACEBACK_VERBOSE_LIMIT: Final[int] = 10_000
_OPAQUE_EXIT_CODE: Final[int] = 1

VARIANT_CHOICES: Final[tuple[str, ...]] = tuple(VARIANTS)


def _resolve_version() -> str:
    """Return the installed package version, or ``"0.0.0"`` when not installed."""

    try:
        return metadata.version("dog_records")
    except metadata.PackageNotFoundError:
        return "0.0.0"


@click.group(
    help="Read a JSON file of dogs and report why it failed",
    context_settings=CLICK_CONTEXT_SETTINGS,
    invoke_without_command=False,
)
@click.version_option(
    version=_resolve_version(),
    prog_name="dog_records",
    message="dog_records version %(version)s",
)
@click.option(
    "--traceback/--no-traceback",
    is_flag=True,
    default=False,
    help="Show full Python traceback on errors",
)
@click.pass_context
def cli(ctx: click.Context, traceback: bool) -> None:
    """Root command configuring traceback handling for all subcommands.

    Side Effects
        Mutates ``lib_cli_exit_tools.config.traceback`` and
        ``lib_cli_exit_tools.config.traceback_force_color``.
    """

    ctx.ensure_object(dict)
    ctx.obj["traceback"] = traceback
    lib_cli_exit_tools.config.traceback = traceback
    lib_cli_exit_tools.config.traceback_force_color = traceback


@cli.command("info", context_settings=CLICK_CONTEXT_SETTINGS)
def cli_info() -> None:
    """Print basic distribution metadata so users can confirm installation."""

    try:
        meta = metadata.metadata("dog_records")
    except metadata.PackageNotFoundError:
        click.echo("dog_records (metadata unavailable)")
        return
    click.echo(f"Info for {meta.get('Name', 'dog_records')}:")
    click.echo(f"  Version         : {meta.get('Version', _resolve_version())}")
    click.echo(f"  Requires-Python : {meta.get('Requires-Python', '>=3.10')}")
    summary = meta.get("Summary")
    if summary:
        click.echo(f"  Summary         : {summary}")


@cli.command("show", context_settings=CLICK_CONTEXT_SETTINGS)
@click.option(
    "--file",
    "file_path",
    type=click.Path(path_type=Path, dir_okay=True, file_okay=True),
    default=None,
    help="JSON file to read (defaults to $DOG_RECORDS_FILE or ./dogs.json)",
)
@click.option(
    "--variant",
    type=click.Choice(VARIANT_CHOICES, case_sensitive=False),
    default=None,
    help="Error propagation style (defaults to $DOG_RECORDS_VARIANT or converted)",
)
@click.option(
    "--indent",
    type=int,
    default=None,
    help="Pretty-print JSON output with the provided indent size",
)
@click.pass_context
def cli_show(
    ctx: click.Context,
    file_path: Optional[Path],
    variant: Optional[str],
    indent: Optional[int],
) -> None:
    """Load the dogs file and print its records as a JSON array.

    On failure prints ``bad file: ...`` or ``bad JSON: ...`` to stderr and exits
    with 66 or 65 respectively. The ``opaque`` variant cannot tell the two
    apart without inspecting the exception type, and always exits with 1.
    """

    try:
        settings = resolve_settings(file_path=file_path, variant=variant)
    except ValueError as exc:
        # --variant is a Choice, so only the environment can reach this
        raise click.BadParameter(str(exc), param_hint="DOG_RECORDS_VARIANT") from exc
    try:
        dogs = load_dogs(settings.file_path, variant=settings.variant)
    except GetDogsError as exc:
        click.echo(str(exc), err=True)
        ctx.exit(exc.exit_code)
    except (OSError, ValueError) as exc:
        if settings.variant != "opaque":
            raise
        click.echo(describe_failure(exc), err=True)
        ctx.exit(_OPAQUE_EXIT_CODE)
    else:
        click.echo(dump_dogs(dogs, indent=indent))


@cli.command("generate-example", context_settings=CLICK_CONTEXT_SETTINGS)
@click.option(
    "--destination",
    type=click.Path(path_type=Path, file_okay=False, dir_okay=True, resolve_path=True),
    required=True,
    help="Directory that will receive dogs.json",
)
@click.option(
    "--force/--no-force",
    default=False,
    help="Overwrite an existing dogs.json if set",
    show_default=True,
)
def cli_generate_example(destination: Path, force: bool) -> None:
    """Write a sample dogs.json under *destination* and list what was written."""

    created = _generate_example(destination, force=force)
    click.echo(json.dumps([str(path) for path in created], indent=2))


def main(argv: Optional[Sequence[str]] = None, *, restore_traceback: bool = True) -> int:
    """Execute the CLI with shared exit handling and return the exit code."""

    previous_traceback = getattr(lib_cli_exit_tools.config, "traceback", False)
    previous_force_color = getattr(lib_cli_exit_tools.config, "traceback_force_color", False)
    try:
        try:
            return lib_cli_exit_tools.run_cli(
                cli,
                argv=list(argv) if argv is not None else None,
                prog_name="dog_records",
            )
        except BaseException as exc:  # noqa: BLE001 - funnel through shared printers
            lib_cli_exit_tools.print_exception_message(
                trace_back=lib_cli_exit_tools.config.traceback,
                length_limit=(
                    _TRACEBACK_VERBOSE_LIMIT if lib_cli_exit_tools.config.traceback else _TRACEBACK_SUMMARY_LIMIT
                ),
            )
            return lib_cli_exit_tools.get_system_exit_code(exc)
    finally:
        if restore_traceback:
            lib_cli_exit_tools.config.traceback = previous_traceback
            lib_cli_exit_tools.config.traceback_force_color = previous_force_color


if __name__ == "__main__":  # pragma: no cover - exercised via console entry point
    raise SystemExit(main(sys.argv[1:]))
