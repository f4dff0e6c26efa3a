from . import (
    cli,
    config,
    const,
    errors,
    model,
    parser,
    results,
    validate,
)

from .cli import main
from .config import normalizeEntries, read, readJson, readToml
from .errors import (
    ConfigError,
    DanglingTargetError,
    ImmutableError,
    InvalidIntError,
    MalformedInputError,
    NullArgError,
    NullIntError,
    OptError,
    SchemaError,
    UnknownOptionError,
    UnsupportedTypeError,
)
from .model import Entry, Kind, Schema
from .parser import ArgParser
from .results import Operands, Options, Parameters, Result
from .validate import validateEntries, validateEntry


__all__ = [
    "ArgParser",
    "ConfigError",
    "DanglingTargetError",
    "Entry",
    "ImmutableError",
    "InvalidIntError",
    "Kind",
    "MalformedInputError",
    "NullArgError",
    "NullIntError",
    "Operands",
    "OptError",
    "Options",
    "Parameters",
    "Result",
    "Schema",
    "SchemaError",
    "UnknownOptionError",
    "UnsupportedTypeError",
    "cli",
    "config",
    "const",
    "errors",
    "main",
    "model",
    "normalizeEntries",
    "parser",
    "read",
    "readJson",
    "readToml",
    "results",
    "validate",
    "validateEntries",
    "validateEntry",
]
