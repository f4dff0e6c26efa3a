import json
import math
import dataclasses as dt

from collections.abc import Iterator, Mapping
from typing import Any, NoReturn, Optional, TypeVar, Union

from .errors import ImmutableError

V = TypeVar("V")

OptionValue = Union[bool, str, int, float, list[str]]


class Frozen(Mapping[str, V]):
    """
    A read-only, insertion-ordered mapping.

    Lookups behave like a dict; every mutator raises `ImmutableError`.
    """

    _items: dict[str, V]

    def __init__(self, items: Optional[Mapping[str, V]] = None):
        self._items = dict(items or ())

    def __getitem__(self, key: str) -> V:
        return self._items[key]

    def __iter__(self) -> Iterator[str]:
        return iter(self._items)

    def __len__(self) -> int:
        return len(self._items)

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self._items!r})"

    def _refuse(self, *args: Any, **kwargs: Any) -> NoReturn:
        raise ImmutableError(f"you cannot modify {type(self).__name__.lower()}")

    __setitem__ = _refuse
    __delitem__ = _refuse
    clear = _refuse
    pop = _refuse
    popitem = _refuse
    setdefault = _refuse
    update = _refuse

    def toDict(self) -> dict[str, Any]:
        """Returns a plain dict copy, with list values copied too."""
        return {k: list(v) if isinstance(v, (list, tuple)) else v for k, v in self._items.items()}


class Options(Frozen[OptionValue]):
    def __getitem__(self, key: str) -> OptionValue:
        value = self._items[key]
        if isinstance(value, list):
            # list values must not leak a mutable reference
            return list(value)
        return value


class Parameters(Frozen[str]):
    pass


class Operands(tuple[str, ...]):
    pass


@dt.dataclass(frozen=True)
class Result:
    """
    The outcome of one `ArgParser.parse` call.

    Attributes:
        options: Short and long options, keyed by their (alias-resolved) name.
        parameters: `name=value` assignments.
        operands: Positional arguments, and everything after `--`.
    """

    options: Options
    parameters: Parameters
    operands: Operands

    def __iter__(self) -> Iterator[Any]:
        return iter((self.options, self.parameters, self.operands))

    def toDict(self) -> dict[str, Any]:
        return {
            "options": self.options.toDict(),
            "parameters": self.parameters.toDict(),
            "operands": list(self.operands),
        }

    def toJson(self, indent: int | None = None) -> str:
        """
        Serializes the result as strict JSON; infinite numbers become null.
        """
        return json.dumps(_finite(self.toDict()), indent=indent, allow_nan=False)


def _finite(value: Any) -> Any:
    if isinstance(value, float) and not math.isfinite(value):
        return None
    if isinstance(value, dict):
        return {k: _finite(v) for k, v in value.items()}
    if isinstance(value, list):
        return [_finite(v) for v in value]
    return value
