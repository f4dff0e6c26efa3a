import logging

from collections.abc import Mapping
from typing import Any

from .errors import DanglingTargetError, SchemaError, UnsupportedTypeError
from .utils import isInteger

_logger = logging.getLogger(__name__)

RawEntry = Mapping[str, Any]

TAGS = ("flag", "text", "int", "count", "list", "alias")


def validateEntry(entry: RawEntry) -> None:
    """
    Checks a single labeled config entry for structural correctness.

    Args:
        entry: The raw entry, carrying its own `option` key.

    Raises:
        SchemaError: If a mandatory field is missing or has the wrong type.
        UnsupportedTypeError: If the `type` tag is not one of `TAGS`.
    """
    if not isinstance(entry, Mapping):
        raise SchemaError("option config entry must be an object")

    for key in ("option", "type"):
        if key not in entry:
            raise SchemaError(f"'{key}' not found in config entry")

    if "description" in entry and not isinstance(entry["description"], str):
        raise SchemaError("description value must be a string")

    tag = entry["type"]

    if tag in ("flag", "count"):
        # no extra mandatory values
        return

    if tag == "text":
        if "default" in entry and not isinstance(entry["default"], str):
            raise SchemaError("default value must be a string")

    elif tag == "int":
        if "default" in entry and not isInteger(entry["default"]):
            raise SchemaError("default value must be an integer")

    elif tag == "list":
        if "sep" in entry and not isinstance(entry["sep"], str):
            raise SchemaError("sep value must be a string")

    elif tag == "alias":
        if "target" not in entry:
            raise SchemaError(f"'target' not found in alias option {entry['option']}")
        if not isinstance(entry["target"], str):
            raise SchemaError("target value must be a string")

    else:
        raise UnsupportedTypeError(str(tag))


def validateEntries(entries: Mapping[str, RawEntry]) -> None:
    """
    Validates a whole schema keyed by option name.

    Every entry is checked first, then every alias target is looked up.
    A valid schema has no observable effect.
    """
    aliases: list[tuple[str, str]] = []

    for option, config in entries.items():
        if not isinstance(config, Mapping):
            raise SchemaError(f"config entry for option '{option}' must be an object")

        validateEntry({"option": option, **config})
        if config["type"] == "alias":
            aliases.append((option, config["target"]))

    for name, target in aliases:
        if target not in entries:
            raise DanglingTargetError(name, target)

    _logger.debug(f"Validated {len(entries)} entries ({len(aliases)} aliases)")
