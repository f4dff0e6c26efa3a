VERSION = (0, 3, 1)
VERSION_STR = f"{VERSION[0]}.{VERSION[1]}.{VERSION[2]}{'-' +  str(VERSION[-1]) if len(VERSION) > 3 else ''}"
DESCRIPTION = "GNU-style option, parameter and operand parsing driven by a declarative schema"

ARGV0 = "optkit"
EXTRA_ARGS_ENV = "OPTKIT_EXTRA_ARGS"

DEFAULT_SEP = ","
DEFAULT_INDENT = 2
