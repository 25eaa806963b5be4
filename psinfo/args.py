"""Command-line argument validation for psinfo."""

from dataclasses import dataclass
from itertools import takewhile

LIST_FLAG = "-l"
REPORT_FLAG = "-r"

USAGE = (
    "\033[1;33m ------------------- Información de PSINFO --------------------\n\033[0m"
    "Uso: psinfo [ -l pid1 pid2 ... ] [ -r ]\n"
    "\nPara ejemplos más detallados del comando, visita la man page del programa "
    'ejecutando "man psinfo"\n\n'
)

_ERROR_HEADER = "\033[1;31m ERROR. PARÁMETROS INCORRECTOS \033[0m\n"
_ERROR_FOOTER = (
    "\033[1;33m Para más información acceda a la man page del comando "
    "ejecutando: man psinfo\033[0m\n"
)


class UsageError(Exception):
    """Raised when the command line is empty or malformed; str() is the text to show."""


@dataclass(frozen=True)
class Arguments:
    """Validated command line: the pids to inspect and the flags given."""

    pids: tuple[str, ...]
    list_mode: bool = False
    report: bool = False


def _error(body: str) -> UsageError:
    return UsageError(_ERROR_HEADER + body + _ERROR_FOOTER)


def is_numeric(text: str) -> bool:
    """Return True if every character is an ASCII digit (an empty string counts)."""
    return all(char in "0123456789" for char in text)


def _parse_list(rest: list[str]) -> Arguments:
    if not rest or rest[0] == REPORT_FLAG:
        raise _error(
            "Después de la flag -l debe ir mínimo un pid. "
            "Ejemplo: psinfo -l pid1 pid2 ...\n\n"
        )
    pids = list(takewhile(lambda arg: arg != REPORT_FLAG, rest))
    for pid in pids:
        if not is_numeric(pid):
            raise _error(
                "Todos los process ids deben ser numéricos. "
                f"El parámetro que causa el error es: {pid} ...\n\n"
            )
    tail = rest[len(pids):]
    if len(tail) > 1:
        raise _error("La bandera -r debe estar al final del comando.\n")
    return Arguments(pids=tuple(pids), list_mode=True, report=bool(tail))


def _parse_single(args: list[str]) -> Arguments:
    pid, rest = args[0], args[1:]
    if not is_numeric(pid):
        raise _error(f"PID '{pid}' no es válido. Debe ser numérico.\n")
    if rest:
        if rest[0] != REPORT_FLAG:
            raise _error(
                "Si quiere pasar múltiples process id, debe poner la flag -l. "
                "Ejemplo: psinfo -l pid1 pid2 ...\n\n"
            )
        if len(rest) > 1:
            raise UsageError("Error: La bandera -r debe estar al final del comando.\n")
    return Arguments(pids=(pid,), list_mode=False, report=bool(rest))


def parse_arguments(argv) -> Arguments:
    """Validate the arguments (without the program name) and return them parsed."""
    args = list(argv)
    if not args:
        raise UsageError(USAGE)
    if args[0] == LIST_FLAG:
        return _parse_list(args[1:])
    return _parse_single(args)