#!/usr/bin/env python

import json
import sys

import click


def text_postprocess(line):
    return line.rstrip("\r\n")


def bin_postprocess(line, encoding="utf-8"):
    return line.decode(encoding).rstrip("\r\n")


def iter_lines(files, encoding="utf-8"):
    if len(files) == 0:
        for line in sys.stdin.readlines():
            yield text_postprocess(line)
    else:
        for fp in files:
            if fp.endswith(".bz2"):
                import bz2
                with bz2.open(fp, 'rt', encoding=encoding) as f:
                    for line in f.readlines():
                        yield text_postprocess(line)
            elif fp.endswith(".gz"):
                import gzip
                with gzip.open(fp, 'r') as f:
                    for line in f.readlines():
                        yield bin_postprocess(line, encoding=encoding)
            else:
                with open(fp, 'rt', encoding=encoding) as f:
                    for line in f.readlines():
                        yield text_postprocess(line)


def format_parsed_line(pline, format_type):
    if format_type == "object":
        return str(pline)
    elif format_type == "json":
        return json.dumps(pline, ensure_ascii=False, sort_keys=True)


@click.command()
@click.argument("files", nargs=-1)
@click.option("--config", "-c", default=None,
              help="filename of parser config (configparser format)")
@click.option("--parser", "-p", default=None,
              help="filename of parser script")
@click.option("--encoding", default="utf-8",
              help="encoding to load input data")
@click.option("--output", "-o", default=None,
              help="output filename")
@click.option("--type", "-t", "format_type", default="object",
              type=click.Choice(["object", "json"]),
              help="output format type, one of [object, json]")
@click.option("--raw", "-r", "preserve_original", is_flag=True,
              help="add the input line as rawEvent")
@click.option("--show-input", "-i", "show_input", is_flag=True,
              help="additionally show the input string line as is")
@click.option("--skip-invalid", "-s", "skip_invalid", is_flag=True,
              help="skip lines that are not parsable as LEEF")
@click.option("--verbose", "-v", is_flag=True,
              help="verbose output of parsing progress")
def main(files, config, parser, encoding, output, format_type,
         preserve_original, show_input, skip_invalid, verbose):
    """Parse LEEF messages given in FILES (or stdin if FILES not given)."""

    from leef2map._common import LeefParseFailure
    from leef2map.load import load_from_config, load_from_script
    from leef2map.preset import default
    if config:
        lp = load_from_config(config)
    elif parser:
        lp = load_from_script(parser)
    else:
        lp = default()

    if output:
        f_output = open(output, "w")
    else:
        f_output = sys.stdout

    # flag not given: use the setting of the parser
    preserve_original = preserve_original or None

    try:
        for line in iter_lines(files, encoding=encoding):
            if line.strip() == "":
                continue
            if show_input:
                f_output.write(line + "\n")
            try:
                pline = lp.process_line(line,
                                        preserve_original=preserve_original,
                                        verbose=verbose)
            except LeefParseFailure as e:
                if skip_invalid:
                    if verbose:
                        print("skipped: {0}".format(e))
                    continue
                raise click.ClickException("{0}: {1}".format(e, line[:50]))
            f_output.write(format_parsed_line(pline, format_type) + "\n")
    finally:
        if f_output is not sys.stdout:
            f_output.close()


if __name__ == "__main__":
    main()
