"""Command entry point for psinfo."""

import sys

from psinfo.args import UsageError, parse_arguments
from psinfo.process import format_process_queue, read_process_info, write_report


def main(argv=None) -> int:
    """Show status information for the pids given; return the exit status."""
    if argv is None:
        argv = sys.argv[1:]
    try:
        arguments = parse_arguments(argv)
    except UsageError as exc:
        print(str(exc), end="")
        return 1

    entries = [read_process_info(pid) for pid in arguments.pids]
    if arguments.report:
        write_report(arguments.pids, entries)
    print(format_process_queue(entries), end="")
    return 0


if __name__ == "__main__":
    sys.exit(main())