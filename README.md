# psinfo

`psinfo` reads `/proc/<pid>/status` and shows these fields for one or more
processes:

- name (`Name`)
- state (`State`)
- memory image size (`VmSize`)
- TEXT, DATA and STACK segment sizes (`VmExe`, `VmData`, `VmStk`)
- voluntary and non-voluntary context switches

The labels and messages it prints are in Spanish.

## Installation

```
pip install .
```

## Usage

```
psinfo pid
psinfo pid -r
psinfo -l pid1 pid2 ...
psinfo -l pid1 pid2 ... -r
```

- Give a single numeric PID to see that process.
- Use `-l` as the first argument, followed by one or more numeric PIDs, to see
  several processes.
- Add `-r` as the last argument to also write a report file in the current
  directory, named `psinfo-report-<pid1>-<pid2>-....info`. The file holds the
  same entries as the console listing, without the separator lines.

A PID whose status file cannot be read (the process does not exist or has
ended) gets a notice in place of its details. When the arguments are wrong (a
non-numeric PID, several PIDs without `-l`, `-l` with no PID after it, or `-r`
anywhere but at the end) `psinfo` prints an error message and exits with
status 1. With no arguments it prints a usage summary and exits with status 1.

## Library use

```python
from psinfo.args import parse_arguments, UsageError
from psinfo.process import read_process_info, format_process_queue, write_report

args = parse_arguments(["-l", "1", "2", "-r"])
# Arguments(pids=('1', '2'), list_mode=True, report=True)

entries = [read_process_info(pid, "/proc") for pid in args.pids]
print(format_process_queue(entries), end="")

if args.report:
    path = write_report(args.pids, entries, ".")
```

- `psinfo.args.parse_arguments(argv)` takes the arguments without the program
  name and returns an `Arguments` (`pids`, `list_mode`, `report`), or raises
  `UsageError`, whose text is the message the command prints.
- `psinfo.args.is_numeric(text)` tells whether every character is an ASCII
  digit.
- `psinfo.process.read_process_info(pid, proc_root)` returns the description
  of one process; `proc_root` defaults to `/proc`.
- `psinfo.process.report_filename(pids)` returns the report file name and
  `write_report(pids, entries, directory)` writes it, returning its path.
- `psinfo.cli.main(argv)` runs the command and returns its exit status.

## Limitations

`psinfo` only reads the Linux `/proc` status files. On a system without them
every PID gets the "not found" notice. It takes its information only from
`status`, and does not watch processes over time. No manual page is installed.