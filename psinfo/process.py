"""Reading process status information and writing it out."""

from pathlib import Path

SEPARATOR = "-" * 72 + "\n"
REPORT_PREFIX = "psinfo-report-"
REPORT_SUFFIX = ".info"

_FIELDS = (
    ("Name:", "Nombre del proceso: "),
    ("State:", "Estado del proceso: "),
    ("VmSize:", "Tamaño de la imagen de memoria: "),
    ("VmExe:", "Tamaño de la memoria TEXT: "),
    ("VmData:", "Tamaño de la memoria DATA: "),
    ("VmStk:", "Tamaño de la memoria STACK: "),
    ("voluntary_ctxt_switches:", "# de cambios de contexto voluntarios: "),
    ("nonvoluntary_ctxt_switches:", "# de cambios de contexto no voluntarios: "),
)


def _describe(line: str) -> str:
    for prefix, label in _FIELDS:
        if line.startswith(prefix):
            # Skip the prefix and the separator character that follows it.
            return label + line[len(prefix) + 1:]
    return ""


def read_process_info(pid: str, proc_root="/proc") -> str:
    """Return a description of the process, or a notice if it cannot be read."""
    path = Path(proc_root) / pid / "status"
    try:
        with open(path, encoding="utf-8", errors="replace") as status:
            return "".join(_describe(line) for line in status)
    except OSError:
        return f"El proceso con pid {pid} no existe o fue terminado\n"


def format_process_queue(entries) -> str:
    """Render the collected process descriptions as the console listing."""
    parts = ["\nINFORMACIÓN DE LOS PROCESOS: \n", SEPARATOR]
    for entry in entries:
        parts.append(entry + "\n")
        parts.append(SEPARATOR)
    return "".join(parts)


def report_filename(pids) -> str:
    """Return the report file name built from the pids."""
    pids = list(pids)
    if not pids:
        return REPORT_PREFIX
    return REPORT_PREFIX + "-".join(pids) + REPORT_SUFFIX


def write_report(pids, entries, directory=".") -> Path:
    """Write each entry to the report file in directory and return its path."""
    path = Path(directory) / report_filename(pids)
    with open(path, "w", encoding="utf-8") as report:
        for entry in entries:
            report.write(entry + "\n")
    return path