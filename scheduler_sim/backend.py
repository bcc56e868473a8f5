import csv
import datetime
import json
import logging

from scheduler_sim.utils import summarize

LOG_FILE = 'scheduler_simulator.log'
LOG_FORMAT = '%(asctime)s %(levelname)s: %(message)s'

USAGE_ERROR = 'usage'
IO_ERROR = 'io'
DATA_ERROR = 'data'


class SchedulerError(Exception):
    """Fatal error for the batch run, tagged with the kind of failure."""

    def __init__(self, kind, message):
        super().__init__(message)
        self.kind = kind
        self.message = message

    def __str__(self):
        return f"{self.kind} error: {self.message}"


def configure_logging(filename=LOG_FILE, level=logging.INFO):
    logging.basicConfig(filename=filename, level=level, format=LOG_FORMAT, force=True)

def log_action(action):
    logging.info(action)


def _parse_int(field, line_num, name):
    text = field.strip()
    digits = text[1:] if text[:1] in ("+", "-") else text
    if not (digits.isascii() and digits.isdigit()):
        raise SchedulerError(DATA_ERROR, f"line {line_num}: {name} {field!r} is not an integer")
    return int(text, 10)

def load_processes(lines):
    """Read `pid, burst, arrival[, priority]` rows into process dicts."""
    processes = []
    seen = set()
    reader = csv.reader(lines)
    try:
        for row in reader:
            if not row or all(not field.strip() for field in row):
                continue
            line_num = reader.line_num
            if len(row) not in (3, 4):
                raise SchedulerError(DATA_ERROR, f"line {line_num}: expected 3 or 4 fields, got {len(row)}")
            pid = _parse_int(row[0], line_num, 'process id')
            burst = _parse_int(row[1], line_num, 'burst duration')
            arrival = _parse_int(row[2], line_num, 'arrival time')
            priority = _parse_int(row[3], line_num, 'priority') if len(row) == 4 else 0
            if burst <= 0:
                raise SchedulerError(DATA_ERROR, f"line {line_num}: burst duration must be positive, got {burst}")
            if arrival < 0:
                raise SchedulerError(DATA_ERROR, f"line {line_num}: arrival time must be non-negative, got {arrival}")
            if pid in seen:
                raise SchedulerError(DATA_ERROR, f"line {line_num}: duplicate process id {pid}")
            seen.add(pid)
            processes.append({'pid': pid, 'arrival_time': arrival, 'burst_time': burst, 'priority': priority})
    except csv.Error as e:
        raise SchedulerError(DATA_ERROR, f"line {reader.line_num}: {e}") from None
    if not processes:
        raise SchedulerError(DATA_ERROR, "no processes in input")
    return processes

def load_processes_from_path(path):
    try:
        with open(path, newline='', encoding='utf-8') as f:
            processes = load_processes(f)
    except OSError as e:
        raise SchedulerError(IO_ERROR, f"{path}: {e.strerror or e}") from e
    except UnicodeDecodeError as e:
        raise SchedulerError(DATA_ERROR, f"{path}: not a text file ({e.reason})") from None
    log_action(f"Loaded {len(processes)} processes from {path}")
    return processes


def save_report(runs, base_filename="schedule_report"):
    """Write every run to timestamped JSON and CSV files and return both paths."""
    timestamp = datetime.datetime.now().strftime("%Y%m%d_%H%M%S")
    json_path = f"{base_filename}_{timestamp}.json"
    csv_path = f"{base_filename}_{timestamp}.csv"
    payload = []
    for name, result, timeline in runs:
        avg_wait, avg_turnaround, throughput = summarize(result)
        payload.append({
            'algorithm': name,
            'processes': result,
            'timeline': [{'pid': pid, 'start': start, 'stop': stop} for pid, start, stop in timeline],
            'average_wait': avg_wait,
            'average_turnaround': avg_turnaround,
            'throughput': throughput,
        })
    try:
        with open(json_path, "w", encoding="utf-8") as jf:
            json.dump({'runs': payload}, jf, indent=2)
        with open(csv_path, "w", newline='', encoding="utf-8") as cf:
            writer = csv.writer(cf)
            writer.writerow(['algorithm', 'pid', 'priority', 'burst_time', 'arrival_time',
                             'wait_time', 'turnaround_time', 'exit_time'])
            for name, result, _ in runs:
                for row in result:
                    writer.writerow([name, row['pid'], row['priority'], row['burst_time'], row['arrival_time'],
                                     row['wait_time'], row['turnaround_time'], row['exit_time']])
    except OSError as e:
        raise SchedulerError(IO_ERROR, f"cannot write report: {e}") from e
    log_action(f"Exported report to {json_path}, {csv_path}")
    return json_path, csv_path
