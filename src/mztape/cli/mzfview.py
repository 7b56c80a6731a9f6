"""
mzfview - Sharp MZ Tape File Viewer
===================================

This module implements the command-line interface for viewing Sharp MZ
series tape files (.mzf, .m12, .mzt). It prints the tape header, hex
dumps of the header and body, and lists BASIC programs saved by
SP-5025, SA-5510 or S-BASIC.

Usage Examples
--------------
View a tape file:
    $ mzfview game.mzf

Only the BASIC listing:
    $ mzfview game.mzf --listing-only

Render graphics for the mz-ascii.ttf terminal font:
    $ mzfview game.mzf --charset font

Plain 7-bit output:
    $ mzfview game.mzf --charset ascii -o game.txt

List an MZ-80 BASIC file saved from a non-standard load address:
    $ mzfview odd.mzf --dialect sp5025

Copyright (c) 2026 mztape Contributors
"""

import logging
import sys
from pathlib import Path
from typing import List, Optional

import click

from mztape import __version__
from mztape.charset import RenderMode
from mztape.cli.errors import ExitCode, handle_cli_exception
from mztape.errors import MZTapeError, UsageError
from mztape.mzf import Dialect, read_tape
from mztape.report import ViewerOptions, render_report


# =============================================================================
# Command Class
# =============================================================================

class ViewerCommand(click.Command):
    """Click command that reports usage errors through the mztape handler."""

    def parse_args(self, ctx: click.Context, args: List[str]) -> List[str]:
        try:
            return super().parse_args(ctx, args)
        except click.UsageError as e:
            handle_cli_exception(
                UsageError(f"{ctx.get_usage()}\nError: {e.format_message()}")
            )


def setup_logging(verbose: bool) -> None:
    """Configure logging on stderr based on verbosity."""
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(levelname)s: %(message)s",
    )


# =============================================================================
# CLI Definition
# =============================================================================

@click.command(cls=ViewerCommand)
@click.argument(
    "tape_file",
    type=click.Path(path_type=Path),
)
@click.option(
    "-o", "--output",
    type=click.Path(dir_okay=False, path_type=Path),
    help="Output file (default: stdout)",
)
@click.option(
    "-c", "--charset",
    type=click.Choice([m.value for m in RenderMode], case_sensitive=False),
    default=RenderMode.UNICODE.value,
    show_default=True,
    help="How Sharp-ASCII graphics are rendered: Unicode glyphs, "
         "mz-ascii.ttf private-use code points, or 7-bit ASCII",
)
@click.option(
    "-d", "--dialect",
    type=click.Choice(["auto"] + [d.value for d in Dialect if d is not Dialect.NONE],
                      case_sensitive=False),
    default="auto",
    show_default=True,
    help="BASIC dialect to list with (default: detect from the header)",
)
@click.option(
    "-l", "--listing-only",
    is_flag=True,
    help="Print only the BASIC listing",
)
@click.option(
    "--no-dump",
    is_flag=True,
    help="Omit the header and body hex dumps",
)
@click.option(
    "-v", "--verbose",
    is_flag=True,
    help="Verbose output",
)
@click.version_option(version=__version__, prog_name="mzfview")
def main(
    tape_file: Path,
    output: Optional[Path],
    charset: str,
    dialect: str,
    listing_only: bool,
    no_dump: bool,
    verbose: bool,
) -> None:
    """
    View a Sharp MZ series tape file.

    TAPE_FILE is the .mzf, .m12 or .mzt file to view.

    Prints the tape header, hex dumps of header and body, and the program
    listing for SP-5025 (MZ-80K), SA-5510 (MZ-80A) and S-BASIC (MZ-700)
    BASIC files.

    Examples:

        # Full report
        mzfview game.mzf

        # Listing only, as plain ASCII
        mzfview game.mzf --listing-only --charset ascii
    """
    setup_logging(verbose)

    options = ViewerOptions(
        mode=RenderMode(charset.lower()),
        dialect=None if dialect.lower() == "auto" else Dialect(dialect.lower()),
        show_header=not listing_only,
        show_dump=not (listing_only or no_dump),
    )

    try:
        tape = read_tape(tape_file)
    except MZTapeError as e:
        handle_cli_exception(e, verbose)

    if verbose:
        click.echo(f"Input file: {tape_file} ({len(tape.body)} body bytes)", err=True)
        click.echo(f"Dialect: {(options.dialect or tape.dialect).display_name}", err=True)

    result = render_report(tape, options)
    if not listing_only:
        result = f"mzfview {tape_file}\n\n{result}"

    if output:
        try:
            output.write_text(result, encoding="utf-8")
            if verbose:
                click.echo(f"Output written to: {output}", err=True)
        except OSError as e:
            click.echo(f"Error writing {output}: {e}", err=True)
            sys.exit(ExitCode.ERROR)
    else:
        click.echo(result, nl=False)


# =============================================================================
# Entry Point
# =============================================================================

if __name__ == "__main__":
    main()
