import argparse
import logging
import os
import sys

from scheduler_sim.backend import (IO_ERROR, LOG_FILE, USAGE_ERROR, SchedulerError, configure_logging,
                                   load_processes_from_path, log_action, save_report)
from scheduler_sim.report import plot_chart, show_results
from scheduler_sim.scheduling import DEFAULT_QUANTUM, run_all
from scheduler_sim.utils import slug


class _ArgumentParser(argparse.ArgumentParser):
    def error(self, message):
        raise SchedulerError(USAGE_ERROR, f"{message}\n{self.format_usage().strip()}")


def _positive_int(value):
    try:
        number = int(value)
    except ValueError:
        raise argparse.ArgumentTypeError(f"invalid integer: {value!r}") from None
    if number < 1:
        raise argparse.ArgumentTypeError(f"must be positive, got {number}")
    return number


def build_arg_parser():
    parser = _ArgumentParser(
        prog="scheduler-sim",
        description="Simulate FCFS, SJF, priority and round-robin CPU scheduling over a process file.",
    )
    parser.add_argument("path", help="CSV file with rows: pid, burst, arrival[, priority]")
    parser.add_argument("--quantum", type=_positive_int, default=DEFAULT_QUANTUM,
                        help="round-robin time quantum (default: %(default)s)")
    parser.add_argument("--chart-dir", help="save a Gantt chart image per algorithm into this directory")
    parser.add_argument("--export", metavar="BASE", help="write JSON and CSV reports named BASE_<timestamp>")
    parser.add_argument("--log-file", default=LOG_FILE, help="log file (default: %(default)s)")
    parser.add_argument("-v", "--verbose", action="store_true", help="log every context switch")
    return parser


def save_charts(runs, directory):
    try:
        os.makedirs(directory, exist_ok=True)
    except OSError as e:
        raise SchedulerError(IO_ERROR, f"cannot create chart directory {directory}: {e}") from e
    paths = []
    for name, _, timeline in runs:
        path = os.path.join(directory, f"{slug(name)}.png")
        try:
            plot_chart(name, timeline, path)
        except OSError as e:
            raise SchedulerError(IO_ERROR, f"cannot write chart {path}: {e}") from e
        log_action(f"Saved Gantt chart to {path}")
        paths.append(path)
    return paths


def main(argv=None):
    args = None
    try:
        args = build_arg_parser().parse_args(argv)
        configure_logging(args.log_file, logging.DEBUG if args.verbose else logging.INFO)
        processes = load_processes_from_path(args.path)
        runs = run_all(processes, args.quantum)
        for name, result, timeline in runs:
            log_action(f"Ran {name} over {len(result)} processes")
            show_results(name, result, timeline, sys.stdout)
        if args.chart_dir:
            save_charts(runs, args.chart_dir)
        if args.export:
            json_path, csv_path = save_report(runs, args.export)
            print(f"Report saved to:\n- JSON: {json_path}\n- CSV: {csv_path}")
    except SchedulerError as e:
        if args is not None:
            logging.error(str(e))
        print(f"error: {e}", file=sys.stderr)
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())
