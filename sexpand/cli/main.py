import logging

import sexpand
import sexpand.utils.click as click
from sexpand.nodelist_parser import expand_hostnames
from sexpand.render import DEFAULT_SEPARATOR, normalize_separator, render
from sexpand.utils.config import SETTINGS
from sexpand.utils.logger import LOGGER


@click.command(
    help="Expand a SLURM-style hostname PATTERN (e.g. n[01-05,09]) into hostnames, "
    "substitute each into EXPRESSION at '{}' and join them with SEPARATOR. "
    "Pass '\\n' as SEPARATOR to print one hostname per line."
)
@click.argument("pattern", type=str)
@click.argument("expression", type=str, default="")
@click.argument("separator", type=str, default=DEFAULT_SEPARATOR)
@click.option(
    "--debug/--no-debug",
    default=None,
    help="Log debug output and open a debugger on unexpected errors. "
    "Defaults to SEXPAND_DEBUG.",
)
@click.option(
    "--rich-traceback/--no-rich-traceback",
    default=None,
    help="Render unexpected errors with rich. Defaults to SEXPAND_RICH_TRACEBACK.",
)
@click.version_option(sexpand.__version__, prog_name="sexpand")
def cli(
    pattern: str,
    expression: str,
    separator: str,
    debug: bool | None,
    rich_traceback: bool | None,
):
    SETTINGS.override(debug=debug, rich_traceback=rich_traceback)
    if SETTINGS.debug:
        LOGGER.setLevel(logging.DEBUG)

    LOGGER.debug(
        "pattern=%r expression=%r separator=%r", pattern, expression, separator
    )
    hostnames = expand_hostnames(pattern)
    output = render(hostnames, expression, separator)
    LOGGER.debug(
        "Expanded %d hostnames, joining with %r",
        len(hostnames),
        normalize_separator(separator),
    )

    for line in output.split("\n"):
        click.echo(line)


if __name__ == "__main__":
    cli()
