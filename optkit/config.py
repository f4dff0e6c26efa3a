import json
import logging

from collections.abc import Mapping, Sequence
from pathlib import Path
from types import MappingProxyType
from typing import Any, Union

from .errors import ConfigError, SchemaError
from .validate import RawEntry, validateEntries

_logger = logging.getLogger(__name__)

RawSchema = Union[Mapping[str, RawEntry], Sequence[RawEntry]]


def _checkEntry(entry: Any) -> None:
    if entry is None:
        raise SchemaError("entry cannot be null")
    if not isinstance(entry, Mapping):
        raise SchemaError("option config entry must be an object")
    if entry.get("type") is None:
        raise SchemaError('config entry missing "type"')


def normalizeEntries(entryList: RawSchema) -> Mapping[str, RawEntry]:
    """
    Normalizes a raw schema into a read-only mapping keyed by option name.

    The schema may be a mapping already keyed by option name, or a list of
    entries each carrying its own `option` field. In the latter form the
    `option` field becomes the key and is dropped from the entry.

    Args:
        entryList: The raw schema.

    Returns:
        A validated, read-only mapping of option name to entry.

    Raises:
        SchemaError: If the schema is malformed.
    """
    if isinstance(entryList, Mapping):
        output: dict[str, RawEntry] = {}
        for option, entry in entryList.items():
            _checkEntry(entry)
            output[option] = MappingProxyType(dict(entry))

        validateEntries(output)
        return MappingProxyType(output)

    if isinstance(entryList, (str, bytes)) or not isinstance(entryList, Sequence):
        raise SchemaError("input value must be an object or an array")

    output = {}
    for entry in entryList:
        _checkEntry(entry)
        if "option" not in entry:
            raise SchemaError("'option' not found in config entry")

        entryConfig = dict(entry)
        option = entryConfig.pop("option")
        if option in output:
            _logger.debug(f"Option '{option}' is declared twice, keeping the last one")
        output[option] = MappingProxyType(entryConfig)

    validateEntries(output)
    return MappingProxyType(output)


def _loadToml(buf: str) -> Any:
    try:
        import tomllib
    except ImportError:
        raise ConfigError(
            "In order to read TOML files, you need to upgrade to Python3.11 or higher."
        )

    return tomllib.loads(buf)


def readJson(path: Path) -> Mapping[str, RawEntry]:
    """
    Reads a schema from a JSON file.
    """
    path = Path(path)
    try:
        with open(path, "r", encoding="utf8") as f:
            data = json.loads(f.read())
    except (OSError, ValueError) as e:
        raise ConfigError(f"Failed to read {path}: {e}")

    _logger.debug(f"Loaded JSON schema from '{path}'")
    return normalizeEntries(data)


def readToml(path: Path) -> Mapping[str, RawEntry]:
    """
    Reads a schema from the `entries` key of a TOML file.

    `entries` may be an array of tables, each with an `option` key, or a table
    of tables keyed by option name.
    """
    path = Path(path)
    try:
        with open(path, "r", encoding="utf8") as f:
            data = _loadToml(f.read())
    except (OSError, ValueError) as e:
        # tomllib.TOMLDecodeError is a ValueError
        raise ConfigError(f"Failed to read {path}: {e}")

    if "entries" not in data:
        raise ConfigError(f"Missing 'entries' in {path}")

    _logger.debug(f"Loaded TOML schema from '{path}'")
    return normalizeEntries(data["entries"])


def read(path: Path) -> Mapping[str, RawEntry]:
    """
    Reads a schema from a JSON or TOML file, depending on its suffix.
    """
    path = Path(path)
    if path.suffix == ".toml":
        return readToml(path)
    return readJson(path)
