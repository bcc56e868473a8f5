def summarize(result):
    """Return (average wait, average turnaround, throughput) for a run's rows."""
    if not result:
        return 0.0, 0.0, 0.0
    count = len(result)
    avg_wait = sum(row['wait_time'] for row in result) / count
    avg_turnaround = sum(row['turnaround_time'] for row in result) / count
    last_exit = max(row['exit_time'] for row in result)
    throughput = count / last_exit if last_exit else 0.0
    return avg_wait, avg_turnaround, throughput

def fmt2(value):
    return f"{value:.2f}"

def slug(title):
    return '-'.join(title.lower().replace(',', ' ').split())
