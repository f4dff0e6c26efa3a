import logging
import dataclasses as dt

from collections.abc import Iterator, Mapping
from enum import Enum
from types import MappingProxyType
from typing import Any, Optional

from dataclasses_json import DataClassJsonMixin

from . import config, const
from .errors import DanglingTargetError, UnsupportedTypeError

_logger = logging.getLogger(__name__)


class Kind(Enum):
    """
    Enum representing the different kinds of options.
    """

    FLAG = "flag"
    TEXT = "text"
    INT = "int"
    COUNT = "count"
    LIST = "list"
    ALIAS = "alias"


# --- Entries ---------------------------------------------------------------- #


@dt.dataclass(frozen=True)
class Entry(DataClassJsonMixin):
    """
    Base class for all config entries.
    """

    type: Kind
    """Kind of the option."""
    description: str = ""
    """Free-form description, only used for usage strings."""

    def takesValue(self) -> bool:
        return self.type in (Kind.TEXT, Kind.INT, Kind.LIST)

    def placeholder(self) -> str:
        return f"<{self.type.value}>"

    @staticmethod
    def parse(data: Mapping[str, Any]) -> "Entry":
        """
        Builds the entry variant matching the `type` tag of a validated raw entry.
        """
        try:
            kind = Kind(data["type"])
        except ValueError:
            raise UnsupportedTypeError(str(data["type"]))

        return KINDS[kind].from_dict(dict(data))


@dt.dataclass(frozen=True)
class FlagEntry(Entry):
    type: Kind = Kind.FLAG


@dt.dataclass(frozen=True)
class TextEntry(Entry):
    type: Kind = Kind.TEXT
    default: Optional[str] = None
    """Value used when the option is given without one."""


@dt.dataclass(frozen=True)
class IntEntry(Entry):
    type: Kind = Kind.INT
    default: Optional[int] = None
    """Value used when the option is given without one."""

    def __post_init__(self):
        # JSON may spell an integer as 3.0
        if isinstance(self.default, float):
            object.__setattr__(self, "default", int(self.default))


@dt.dataclass(frozen=True)
class CountEntry(Entry):
    type: Kind = Kind.COUNT


@dt.dataclass(frozen=True)
class ListEntry(Entry):
    type: Kind = Kind.LIST
    sep: Optional[str] = None
    """Separator between items, defaults to a comma."""

    @property
    def separator(self) -> str:
        return const.DEFAULT_SEP if self.sep is None else self.sep

    def split(self, value: str) -> list[str]:
        if value == "":
            return []
        if self.separator == "":
            return list(value)
        return value.split(self.separator)


@dt.dataclass(frozen=True)
class AliasEntry(Entry):
    type: Kind = Kind.ALIAS
    target: str = ""
    """Name of the entry this alias forwards to."""


KINDS: dict[Kind, type[Entry]] = {
    Kind.FLAG: FlagEntry,
    Kind.TEXT: TextEntry,
    Kind.INT: IntEntry,
    Kind.COUNT: CountEntry,
    Kind.LIST: ListEntry,
    Kind.ALIAS: AliasEntry,
}


# --- Schema ----------------------------------------------------------------- #


class Schema(Mapping[str, Entry]):
    """
    An immutable mapping of option name to config entry.

    Use `Schema.load` to build one from raw data; it normalizes and validates
    the entries before anything is constructed. Building one directly from
    entries still checks that every alias target exists.
    """

    _entries: Mapping[str, Entry]

    def __init__(self, entries: Mapping[str, Entry]):
        for name, entry in entries.items():
            if isinstance(entry, AliasEntry) and entry.target not in entries:
                raise DanglingTargetError(name, entry.target)
        self._entries = MappingProxyType(dict(entries))

    @staticmethod
    def load(raw: "config.RawSchema | Schema") -> "Schema":
        """
        Builds a schema from either raw form.

        Args:
            raw: A mapping keyed by option name, or a list of entries
                 carrying their own `option` field.

        Raises:
            SchemaError: If the schema is malformed.
        """
        if isinstance(raw, Schema):
            return raw

        normalized = config.normalizeEntries(raw)
        schema = Schema({name: Entry.parse(data) for name, data in normalized.items()})
        _logger.debug(f"Loaded schema with options {', '.join(schema)}")
        return schema

    def __getitem__(self, name: str) -> Entry:
        return self._entries[name]

    def __iter__(self) -> Iterator[str]:
        return iter(self._entries)

    def __len__(self) -> int:
        return len(self._entries)

    def __repr__(self) -> str:
        return f"Schema({dict(self._entries)!r})"

    def resolve(self, name: str) -> tuple[str, Entry]:
        """
        Follows an alias one level.

        Returns:
            The target name and entry, or `name` and its own entry if it is
            not an alias.
        """
        entry = self._entries[name]
        if isinstance(entry, AliasEntry):
            return entry.target, self._entries[entry.target]
        return name, entry

    def usage(self) -> str:
        """Returns a one-line synopsis of the schema."""
        res = []
        for name, entry in self._entries.items():
            if isinstance(entry, AliasEntry):
                continue

            aliases = [
                alias
                for alias, other in self._entries.items()
                if isinstance(other, AliasEntry) and other.target == name
            ]
            flags = []
            for n in sorted([name] + aliases, key=len):
                if len(n) == 1:
                    flags.append(f"-{n}")
                elif entry.takesValue():
                    flags.append(f"--{n}={entry.placeholder()}")
                else:
                    flags.append(f"--{n}")
            res.append(f"[{', '.join(flags)}]")
        return " ".join(res)

    def help(self) -> list[tuple[str, str]]:
        """Returns (name, description) pairs for every described entry."""
        return [(name, entry.description) for name, entry in self._entries.items() if entry.description]
