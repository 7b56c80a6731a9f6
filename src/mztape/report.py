"""
Tape File Report
================

Assembles the viewer's output for one tape file:

1. Header report (type, name, size, load and exec addresses)
2. Full 128-byte header in hex
3. Body in hex with a Sharp-ASCII gutter
4. The detokenized program, when the file holds a BASIC dialect the
   viewer knows, or a notice when an MZ-80 BASIC file's dialect cannot
   be told from its load address
"""

from dataclasses import dataclass
from typing import List, Optional
import logging

from mztape.basic import get_decoder
from mztape.charset import CharacterMapper, RenderMode
from mztape.dump import format_hex_rows
from mztape.mzf import Dialect, TapeFile, format_header_dump, format_header_report

# Logger for this module
logger = logging.getLogger(__name__)

UNDETERMINED_NOTICE = "Unable to determine BASIC (?) type from file header"


@dataclass
class ViewerOptions:
    """
    Report settings, filled from the command line.

    Attributes:
        mode: Render mode for Sharp-ASCII characters
        dialect: Force a BASIC dialect instead of detecting it (None = detect)
        show_header: Include the header report and header hex dump
        show_dump: Include the hex dumps
        show_listing: Include the detokenized program
    """
    mode: RenderMode = RenderMode.UNICODE
    dialect: Optional[Dialect] = None
    show_header: bool = True
    show_dump: bool = True
    show_listing: bool = True


def effective_dialect(tape: TapeFile, options: ViewerOptions) -> Dialect:
    """The dialect to list with: the forced one, else the detected one."""
    if options.dialect is not None:
        return options.dialect
    return tape.dialect


def render_listing(tape: TapeFile, options: Optional[ViewerOptions] = None) -> List[str]:
    """
    Render the program listing section.

    Returns:
        Listing lines, the undetermined-dialect notice, or nothing for
        files that hold no BASIC program.
    """
    options = options or ViewerOptions()
    dialect = effective_dialect(tape, options)

    decoder = get_decoder(dialect, options.mode)
    if decoder is None:
        if tape.header.dialect_undetermined:
            logger.info(
                f"MZ-80 BASIC file loads at ${tape.header.load_address:04X}, "
                f"which matches no known BASIC"
            )
            return [UNDETERMINED_NOTICE]
        return []

    logger.debug(f"Listing {tape.source or 'tape'} as {dialect.display_name}")
    return [str(line) for line in decoder.decode(tape.body)]


def render_report(tape: TapeFile, options: Optional[ViewerOptions] = None) -> str:
    """
    Render the full report for a tape file.

    Args:
        tape: The tape file
        options: Report settings

    Returns:
        Report text, newline terminated
    """
    options = options or ViewerOptions()
    mapper = CharacterMapper(
        variant=effective_dialect(tape, options).machine_variant,
        mode=options.mode,
    )
    sections: List[List[str]] = []

    if options.show_header:
        sections.append(format_header_report(tape.header, tape.source, mapper))
        if options.show_dump:
            sections.append(format_header_dump(tape.header))

    if options.show_dump:
        encoding = "ASCII" if options.mode is RenderMode.ASCII else "UTF-8"
        title = f"File body in hexadecimal and {encoding}"
        sections.append([title, "-" * len(title), ""] + format_hex_rows(tape.body, mapper))

    if tape.is_truncated:
        sections.append([
            f"Warning: file ends after {len(tape.body)} of "
            f"{tape.header.body_size} declared body bytes"
        ])

    if options.show_listing:
        listing = render_listing(tape, options)
        if listing:
            sections.append(listing)

    return "\n\n".join("\n".join(section) for section in sections) + "\n"
