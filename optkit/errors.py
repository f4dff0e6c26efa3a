from typing import Optional


class OptError(RuntimeError):
    """Base class for every error raised by optkit."""

    pass


# --- Schema ----------------------------------------------------------------- #


class SchemaError(OptError):
    pass


class UnsupportedTypeError(SchemaError):
    def __init__(self, tag: str):
        self.tag = tag
        super().__init__(f"option type '{tag}' is not supported")


class DanglingTargetError(SchemaError):
    def __init__(self, name: str, target: str):
        self.name = name
        self.target = target
        super().__init__(f"target value '{target}' for option '{name}' was not found")


class ConfigError(OptError):
    pass


# --- Parsing ---------------------------------------------------------------- #


def _describe(name: str, target: Optional[str]) -> str:
    if target:
        return f"option '{name}' (alias for '{target}')"
    return f"option '{name}'"


class NullArgError(OptError):
    """
    A value-taking option received no value and has no default.

    Attributes:
        name: The option as written on the command line.
        target: The aliased option, if `name` is an alias.
    """

    def __init__(self, name: str, target: Optional[str] = None):
        self.name = name
        self.target = target
        super().__init__(self._message())

    def _message(self) -> str:
        return f"{_describe(self.name, self.target)} must take an argument"


class NullIntError(NullArgError):
    def _message(self) -> str:
        return f"{_describe(self.name, self.target)} requires a numeric argument"


class InvalidIntError(OptError, ValueError):
    def __init__(self, value: str):
        self.value = value
        super().__init__(f"'{value}' is not a valid number")


class UnknownOptionError(OptError, LookupError):
    def __init__(self, name: str):
        self.name = name
        super().__init__(f"unknown option '{name}'")


class ImmutableError(OptError, TypeError):
    pass


class MalformedInputError(OptError, TypeError):
    pass
