import logging

DEFAULT_QUANTUM = 2

FCFS_TITLE = "First-come, first-serve"
SJF_TITLE = "Shortest-job-first"
PRIORITY_TITLE = "Priority"
RR_TITLE = "Round-robin"


def _new_state(processes):
    # exit_time stays None until the process finishes
    return [{'remaining': p['burst_time'], 'wait': 0, 'exit_time': None} for p in processes]

def is_done(state):
    return all(s['exit_time'] is not None for s in state)

def advance(processes, state, current, time):
    """Account for the time unit that ended at `time`.

    The running process loses one unit of remaining burst and every other
    arrived, unfinished process waits one more unit.
    """
    for index, p in enumerate(processes):
        s = state[index]
        if p['arrival_time'] >= time or s['exit_time'] is not None:
            continue
        if index == current:
            s['remaining'] -= 1
            if s['remaining'] == 0:
                s['exit_time'] = time
        else:
            s['wait'] += 1

def ready_indexes(processes, state, time):
    return [i for i, p in enumerate(processes)
            if p['arrival_time'] <= time and state[i]['exit_time'] is None]

def build_result(processes, state):
    result = []
    for p, s in zip(processes, state):
        result.append({
            'pid': p['pid'],
            'priority': p['priority'],
            'burst_time': p['burst_time'],
            'arrival_time': p['arrival_time'],
            'wait_time': s['wait'],
            'turnaround_time': s['wait'] + p['burst_time'],
            'exit_time': s['exit_time'],
        })
    return result


# Scheduling Algorithms
def fcfs(processes):
    processes = [p.copy() for p in processes]
    order = sorted(range(len(processes)), key=lambda i: processes[i]['arrival_time'])
    clock = 0
    rows = {}
    timeline = []
    for i in order:
        p = processes[i]
        wait_time = max(0, clock - p['arrival_time'])
        start_time = p['arrival_time'] + wait_time
        exit_time = start_time + p['burst_time']
        rows[i] = {
            'pid': p['pid'],
            'priority': p['priority'],
            'burst_time': p['burst_time'],
            'arrival_time': p['arrival_time'],
            'wait_time': wait_time,
            'turnaround_time': wait_time + p['burst_time'],
            'exit_time': exit_time,
        }
        timeline.append((p['pid'], start_time, exit_time))
        clock = exit_time
    return FCFS_TITLE, [rows[i] for i in range(len(processes))], timeline


def _preemptive(title, processes, rank, preempts):
    """Tick loop shared by the shortest-remaining-time variants.

    `rank` orders candidates when the CPU is free, `preempts` decides
    whether a waiting candidate takes the CPU from the running process.
    """
    processes = [p.copy() for p in processes]
    state = _new_state(processes)
    timeline = []
    current = None
    start = time = 0
    while processes:
        advance(processes, state, current, time)
        ready = ready_indexes(processes, state, time)
        key = lambda i: rank(processes[i], state[i])
        if current is not None and state[current]['exit_time'] is None:
            challenger = min((i for i in ready if i != current), key=key, default=None)
            if challenger is None or not preempts(processes, state, challenger, current):
                time += 1
                continue
            logging.debug("%s t=%d: %s preempted by %s", title, time,
                          processes[current]['pid'], processes[challenger]['pid'])
            nxt = challenger
        else:
            nxt = min(ready, key=key, default=None)
        if current is not None:
            timeline.append((processes[current]['pid'], start, time))
        if nxt is not None:
            logging.debug("%s t=%d: dispatch %s", title, time, processes[nxt]['pid'])
        current, start = nxt, time
        if is_done(state):
            break
        time += 1
    return title, build_result(processes, state), timeline


def sjf(processes):
    def rank(p, s):
        return (s['remaining'], p['arrival_time'], p['pid'])

    def preempts(procs, state, challenger, current):
        return state[challenger]['remaining'] < state[current]['remaining']

    return _preemptive(SJF_TITLE, processes, rank, preempts)


def priority_scheduling(processes):
    def rank(p, s):
        return (s['remaining'], -p['priority'], p['arrival_time'], p['pid'])

    def preempts(procs, state, challenger, current):
        left, right = state[challenger]['remaining'], state[current]['remaining']
        if left < right:
            return True
        # equal remaining burst: priority breaks the tie, never overrides
        return left == right and procs[challenger]['priority'] > procs[current]['priority']

    return _preemptive(PRIORITY_TITLE, processes, rank, preempts)


def get_next_process(processes, state, current, time):
    """Circular scan from the slot after `current` for an arrived, unfinished process.

    Returns None when a full circle finds nothing eligible.
    """
    count = len(processes)
    origin = -1 if current is None else current
    for step in range(1, count + 1):
        index = (origin + step) % count
        if state[index]['exit_time'] is None and processes[index]['arrival_time'] <= time:
            return index
    return None


def round_robin(processes, quantum=DEFAULT_QUANTUM):
    if quantum < 1:
        raise ValueError(f"quantum must be positive, got {quantum}")
    processes = [p.copy() for p in processes]
    state = _new_state(processes)
    timeline = []
    current = None
    start = time = used = 0
    while processes:
        advance(processes, state, current, time)
        if current is not None:
            used += 1
            if state[current]['exit_time'] is None and used < quantum:
                time += 1
                continue
            timeline.append((processes[current]['pid'], start, time))
        nxt = get_next_process(processes, state, current, time)
        if nxt is not None:
            logging.debug("%s t=%d: dispatch %s", RR_TITLE, time, processes[nxt]['pid'])
        current, start, used = nxt, time, 0
        if nxt is None and is_done(state):
            break
        time += 1
    return RR_TITLE, build_result(processes, state), timeline


ALGORITHMS = (fcfs, sjf, priority_scheduling, round_robin)

def run_all(processes, quantum=DEFAULT_QUANTUM):
    runs = []
    for algorithm in ALGORITHMS:
        if algorithm is round_robin:
            runs.append(algorithm(processes, quantum))
        else:
            runs.append(algorithm(processes))
    return runs
