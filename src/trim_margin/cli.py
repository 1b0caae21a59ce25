import sys
import typing

import click

from trim_margin.exceptions import MarginNotFound
from trim_margin.logger import logger, set_verbose
from trim_margin.margin import BLANKS, DEFAULT_MARKER, MarginTrimmer, split_lines


class MarkerType(click.ParamType):
    name = "marker"

    def convert(self, value, param, ctx):
        if len(value) != 1:
            self.fail("%r is not a single character" % value, param, ctx)
        if value in BLANKS:
            logger.warning("Blank margin marker %r matches the first blank", value)
        return value


@click.command()
@click.argument("files", nargs=-1, type=click.File("r"))
@click.option("--marker", default=DEFAULT_MARKER, show_default=True, type=MarkerType())
@click.option("--strict", is_flag=True, default=False)
@click.option("--output-path", required=False, type=click.Path(dir_okay=False))
@click.option("--verbose", "-v", is_flag=True, default=False)
def main(files, marker, strict, output_path, verbose):
    set_verbose(verbose)
    if not files:
        files = (click.get_text_stream("stdin"),)

    run(files, marker=marker, strict=strict, output_path=output_path)


def run(
    sources: typing.Iterable[typing.TextIO],
    marker: str = DEFAULT_MARKER,
    strict: bool = False,
    output_path: typing.Optional[str] = None,
):
    """Trim the margin of every source and write the results in order."""
    trimmer = MarginTrimmer(marker, strict=strict)

    results = []
    for fh in sources:
        name = getattr(fh, "name", "<stdin>")
        logger.info("Trimming margin of %s (marker %r)", name, marker)
        try:
            text = fh.read()
            result = trimmer.trim(text)
        except MarginNotFound as exc:
            logger.error(
                "%s:%d: missing %r margin in %r", name, exc.lineno, exc.marker, exc.line
            )
            sys.exit(1)

        logger.debug(
            "%s: %d lines in, %d lines out",
            name,
            len(split_lines(text)),
            len(split_lines(result)),
        )
        results.append(result)

    output = "".join(result + "\n" for result in results)
    if output_path:
        with open(output_path, "w") as fh:
            fh.write(output)
        logger.info("Written %d inputs to %s", len(results), output_path)
    else:
        click.echo(output, nl=False)
