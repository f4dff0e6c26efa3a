import logging
import dataclasses as dt

from collections.abc import Mapping, Sequence
from typing import Optional, Union

from .errors import (
    MalformedInputError,
    NullArgError,
    NullIntError,
    UnknownOptionError,
    UnsupportedTypeError,
)
from .model import (
    AliasEntry,
    CountEntry,
    Entry,
    FlagEntry,
    IntEntry,
    Kind,
    ListEntry,
    Schema,
    TextEntry,
)
from .config import RawSchema
from .results import OptionValue, Operands, Options, Parameters, Result
from .scan import Scan
from .utils import toNumber

_logger = logging.getLogger(__name__)

# --- Tokens ----------------------------------------------------------------- #


@dt.dataclass
class Token:
    """
    Base class for command-line tokens.
    """

    pass


@dt.dataclass
class LongToken(Token):
    """
    A GNU-style long option, `--name` or `--name=value`.

    Attributes:
        name: The option name.
        value: The text after the first `=`, or None if there is no `=`.
    """

    name: str
    value: Optional[str]


@dt.dataclass
class ShortToken(Token):
    """
    A cluster of short options, `-abc`, without the leading dash.
    """

    cluster: str


@dt.dataclass
class ParameterToken(Token):
    name: str
    value: str


@dt.dataclass
class OperandToken(Token):
    value: str


def parseArg(arg: str) -> Token:
    """Classifies a single command-line argument."""
    s = Scan(arg)
    if s.skipStr("--"):
        s.save()
        name = s.until("=")
        if name and s.skipStr("="):
            return LongToken(name, s.rest())
        s.restore()
        return LongToken(s.rest(), None)

    if s.skipStr("-"):
        # a second dash would have matched above
        if not s.eof():
            return ShortToken(s.rest())
        return OperandToken(arg)

    name = s.until("=")
    if name and s.skipStr("="):
        return ParameterToken(name, s.rest())

    return OperandToken(arg)


# --- Parser ----------------------------------------------------------------- #


class ArgParser:
    """
    Parses argument vectors against a schema.

    The schema is normalized and validated once, when the parser is created,
    and is never modified afterwards. A single parser can be shared freely.
    """

    schema: Schema

    def __init__(self, schema: Union[Schema, RawSchema]):
        """
        Args:
            schema: A `Schema`, a mapping of option name to entry, or a list
                    of entries carrying their own `option` field.

        Raises:
            SchemaError: If the schema is malformed.
        """
        self.schema = Schema.load(schema)

    def parse(self, argList: Sequence[str]) -> Result:
        """
        Parses a list of arguments according to the schema.

        Returns:
            A fresh, immutable `Result`.

        Raises:
            MalformedInputError: If `argList` is not a sequence of strings.
            NullArgError: If an option is missing its argument.
            InvalidIntError: If a numeric option gets a non-numeric value.
            UnknownOptionError: If an option is not in the schema.
        """
        if isinstance(argList, (str, bytes)) or not isinstance(argList, Sequence):
            raise MalformedInputError("argList must be a sequence of strings")

        for arg in argList:
            if not isinstance(arg, str):
                raise MalformedInputError(
                    f"argList must only contain strings, found {type(arg).__name__}"
                )

        # options: short options and GNU-style long options
        options: dict[str, OptionValue] = {}
        # parameters: name=value variable assignments
        parameters: dict[str, str] = {}
        # operands: positional arguments
        operands: list[str] = []

        stopParsing = False
        stack = list(argList)
        while len(stack) > 0:
            arg = stack.pop(0)

            if stopParsing:
                operands.append(arg)
                continue

            if arg == "--":
                stopParsing = True
                continue

            tok = parseArg(arg)
            if isinstance(tok, LongToken):
                name, value = self._parseLong(tok)
                self._accumulate(options, name, value)
            elif isinstance(tok, ShortToken):
                nextArg = stack[0] if len(stack) > 0 else None
                pairs, consumed = self._parseShort(tok, nextArg)
                for name, value in pairs.items():
                    self._accumulate(options, name, value)
                if consumed:
                    stack.pop(0)
            elif isinstance(tok, ParameterToken):
                parameters[tok.name] = tok.value
            elif isinstance(tok, OperandToken):
                operands.append(tok.value)
            else:
                raise ValueError(f"Unexpected token: {type(tok)}")

        return Result(Options(options), Parameters(parameters), Operands(operands))

    def _lookup(self, name: str) -> tuple[str, Entry, Optional[str]]:
        """
        Looks up an option and follows it if it is an alias.

        Returns:
            The name the value is stored under, its entry, and the alias that
            was written on the command line (None if no alias was involved).
        """
        if name not in self.schema:
            raise UnknownOptionError(name)

        target, entry = self.schema.resolve(name)
        if isinstance(entry, AliasEntry):
            # aliases of aliases are not followed
            raise UnsupportedTypeError(entry.type.value)

        return target, entry, (name if target != name else None)

    def _missing(
        self, err: type[NullArgError], name: str, alias: Optional[str]
    ) -> NullArgError:
        if alias is not None:
            return err(alias, name)
        return err(name)

    def _coerce(self, entry: Entry, value: str) -> OptionValue:
        if isinstance(entry, IntEntry):
            return toNumber(value)
        if isinstance(entry, ListEntry):
            return entry.split(value)
        return value

    def _accumulate(
        self, options: dict[str, OptionValue], name: str, value: OptionValue
    ) -> None:
        kind = self.schema[name].type
        if kind == Kind.COUNT:
            options[name] = options.get(name, 0) + value  # type: ignore
        elif kind == Kind.LIST:
            options[name] = options.get(name, []) + value  # type: ignore
        else:
            options[name] = value

    def _parseLong(self, tok: LongToken) -> tuple[str, OptionValue]:
        name, entry, alias = self._lookup(tok.name)
        value = tok.value

        if isinstance(entry, FlagEntry):
            return name, True

        elif isinstance(entry, TextEntry):
            if value is not None:
                return name, value
            elif entry.default is not None:
                return name, entry.default
            raise self._missing(NullArgError, name, alias)

        elif isinstance(entry, IntEntry):
            if value:
                return name, toNumber(value)
            elif entry.default is not None:
                return name, entry.default
            raise self._missing(NullIntError, name, alias)

        elif isinstance(entry, CountEntry):
            if value is not None:
                return name, toNumber(value)
            return name, 1

        elif isinstance(entry, ListEntry):
            if value is not None:
                return name, entry.split(value)
            raise self._missing(NullArgError, name, alias)

        raise UnsupportedTypeError(entry.type.value)

    def _parseShort(
        self, tok: ShortToken, nextArg: Optional[str]
    ) -> tuple[Mapping[str, OptionValue], bool]:
        """
        Walks a short option cluster.

        Returns:
            The values found in the cluster, and whether `nextArg` was
            consumed as the value of its last option.
        """
        pairs: dict[str, OptionValue] = {}

        s = Scan(tok.cluster)
        while not s.eof():
            c = s.curr()
            s.next()
            name, entry, alias = self._lookup(c)

            if isinstance(entry, FlagEntry):
                pairs[name] = True

            elif isinstance(entry, CountEntry):
                pairs[name] = pairs.get(name, 0) + 1  # type: ignore

            elif isinstance(entry, (TextEntry, IntEntry, ListEntry)):
                if not s.eof():
                    pairs[name] = self._coerce(entry, s.rest())
                    return pairs, False

                if isinstance(entry, (TextEntry, IntEntry)) and entry.default is not None:
                    pairs[name] = entry.default
                    return pairs, False

                if nextArg is not None:
                    _logger.debug(f"Option '-{c}' takes '{nextArg}' as its value")
                    pairs[name] = self._coerce(entry, nextArg)
                    return pairs, True

                if isinstance(entry, IntEntry):
                    raise self._missing(NullIntError, name, alias)
                raise self._missing(NullArgError, name, alias)

            else:
                raise UnsupportedTypeError(entry.type.value)

        return pairs, False
