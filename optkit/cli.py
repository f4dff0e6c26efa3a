import os
import sys
import logging

from pathlib import Path
from typing import Optional, Sequence

from . import config, const, vt100
from .errors import OptError
from .model import Schema
from .parser import ArgParser

_logger = logging.getLogger(__name__)

SCHEMA = [
    {
        "option": "config",
        "type": "text",
        "description": "Schema file to parse against (.json or .toml)",
    },
    {"option": "c", "type": "alias", "target": "config"},
    {"option": "indent", "type": "int", "description": "Indentation of the JSON output"},
    {"option": "i", "type": "alias", "target": "indent"},
    {"option": "verbose", "type": "count", "description": "Enable verbose logging"},
    {"option": "v", "type": "alias", "target": "verbose"},
    {"option": "help", "type": "flag", "description": "Show this help message"},
    {"option": "h", "type": "alias", "target": "help"},
    {"option": "version", "type": "flag", "description": "Show current version"},
]

_parser = ArgParser(SCHEMA)


def setupLogging(verbosity: int) -> None:
    if verbosity > 0:
        logging.basicConfig(
            level=logging.DEBUG,
            stream=sys.stderr,
            format=f"{vt100.CYAN}%(asctime)s{vt100.RESET} {vt100.YELLOW}%(levelname)s{vt100.RESET} %(name)s: %(message)s",
            datefmt="%Y-%m-%d %H:%M:%S",
        )
    else:
        logging.basicConfig(
            level=logging.WARNING,
            stream=sys.stderr,
            format="%(levelname)s %(name)s: %(message)s",
        )


def usage() -> str:
    return f"{const.ARGV0} {_parser.schema.usage()} [--] ARGS..."


def help(schema: Optional[Schema] = None) -> None:
    vt100.title(const.ARGV0)
    print()

    vt100.subtitle("Usage")
    print(vt100.indent(usage()))
    print()

    vt100.subtitle("Description")
    print(vt100.indent(const.DESCRIPTION))
    print()

    vt100.subtitle("Options")
    for name, description in _parser.schema.help():
        print(vt100.indent(f"--{name}  {description}"))
    print()

    if schema is not None:
        vt100.subtitle("Schema")
        print(vt100.indent(schema.usage()))
        for name, description in schema.help():
            print(vt100.indent(f"{name}  {description}", 8))
        print()


def main(argv: Optional[Sequence[str]] = None) -> int:
    """
    Parses ARGS against the schema given with --config and prints the result as JSON.
    """
    extra = os.environ.get(const.EXTRA_ARGS_ENV, None)
    args = (extra.split(" ") if extra else []) + list(
        sys.argv[1:] if argv is None else argv
    )

    try:
        opts, params, operands = _parser.parse(args)
        setupLogging(int(opts.get("verbose", 0)))

        if opts.get("version"):
            print(f"optkit v{const.VERSION_STR}")
            return 0

        schema = None
        if "config" in opts:
            schema = Schema.load(config.read(Path(str(opts["config"]))))

        if opts.get("help"):
            help(schema)
            return 0

        if schema is None:
            raise OptError("no schema given, use --config=FILE")

        if len(schema) == 0:
            vt100.warning("the schema declares no options")

        for name in params:
            vt100.warning(f"ignoring parameter '{name}', pass it after '--'")

        result = ArgParser(schema).parse(list(operands))
        indent = int(opts.get("indent", const.DEFAULT_INDENT))
        print(result.toJson(indent=indent))
        return 0

    except OptError as e:
        _logger.debug("Parsing failed", exc_info=e)
        vt100.error(str(e))
        print(f"Usage: {usage()}", file=sys.stderr)
        return 1

    except KeyboardInterrupt:
        print()
        return 1
