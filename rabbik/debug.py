"""Coloured diagnostic messages for the console."""

from __future__ import annotations

import inspect


class FatalError(RuntimeError):
    """Raised when the engine reaches a state it cannot continue from."""


def format_info(message: str | bytes) -> str:
    """Render an informational message; UTF-8 bytes are decoded."""
    if isinstance(message, (bytes, bytearray)):
        return bytes(message).decode("utf-8", errors="replace")
    return str(message)


def format_warning(func: str, file: str, line: int, message: str) -> str:
    return (
        f"\033[93m[WARNING] {func}:\033[39m {message}\n"
        f"          \033[33mAt:\033[90m {file}\033[39m::\033[90m{line}\033[0m"
    )


def format_error(func: str, file: str, line: int, message: str) -> str:
    return (
        f"\033[91m[ ERROR ] {func}:\033[39m {message}\n"
        f"          \033[31mAt:\033[90m {file}\033[39m::\033[90m{line}\033[0m"
    )


def format_error_assert(
    func: str, file: str, line: int, expr: str, message: str, action: str
) -> str:
    return (
        f'\033[91m[ ERROR ] {func}:\033[39m Assertion "{expr}" failed: {message} '
        f'Executing "{action}".\n'
        f"          \033[31mAt:\033[90m {file}\033[39m::\033[90m{line}\033[0m"
    )


def format_fatal(func: str, file: str, line: int, message: str) -> str:
    return (
        f"\033[97;101m[ FATAL ] {func}:\033[39;49m {message}\n"
        f"          \033[37;41mAt:\033[90;49m {file}\033[39m::\033[90m{line}\033[0m"
    )


def format_fatal_assert(func: str, file: str, line: int, expr: str, message: str) -> str:
    return (
        f'\033[97;101m[ FATAL ] {func}:\033[39;49m Assertion "{expr}" failed: {message} Crashing.\n'
        f"          \033[37;41mAt:\033[90;49m {file}\033[39m::\033[90m{line}\033[0m"
    )


def _caller() -> tuple[str, str, int]:
    """Return the function, file and line of the caller of the public helper."""
    frame = inspect.currentframe()
    try:
        target = frame.f_back.f_back if frame and frame.f_back else None
        if target is None:
            return "<unknown>", "<unknown>", 0
        code = target.f_code
        return code.co_name, code.co_filename, target.f_lineno
    finally:
        del frame


def info(message: str) -> None:
    print(format_info(message))


def warn(message: str) -> None:
    print(format_warning(*_caller(), message))


def error(message: str) -> None:
    print(format_error(*_caller(), message))


def fatal(message: str) -> None:
    """Print a fatal message and raise :class:`FatalError`."""
    print(format_fatal(*_caller(), message))
    raise FatalError(message)