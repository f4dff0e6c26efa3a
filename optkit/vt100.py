import os
import sys

from typing import Optional, TextIO

RED = "\033[31m"
YELLOW = "\033[33m"
CYAN = "\033[36m"
WHITE = "\033[37m"

BOLD = "\033[1m"
UNDERLINE = "\033[4m"
RESET = "\033[0m"


def enabled(stream: TextIO) -> bool:
    if "NO_COLOR" in os.environ:
        return False
    return hasattr(stream, "isatty") and stream.isatty()


def paint(text: str, color: str, stream: Optional[TextIO] = None) -> str:
    if not enabled(stream or sys.stdout):
        return text
    return f"{color}{text}{RESET}"


def indent(text: str, indent: int = 4) -> str:
    return " " * indent + text.replace("\n", "\n" + " " * indent)


def title(text: str):
    print(paint(text, BOLD + WHITE + UNDERLINE))


def subtitle(text: str):
    print(paint(text, BOLD + WHITE) + ":")


def error(msg: str) -> None:
    print(f"{paint('Error:', RED, sys.stderr)} {msg}\n", file=sys.stderr)


def warning(msg: str) -> None:
    print(f"{paint('Warning:', YELLOW, sys.stderr)} {msg}\n", file=sys.stderr)
