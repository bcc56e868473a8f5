from scheduler_sim.scheduling import (DEFAULT_QUANTUM, fcfs, get_next_process, priority_scheduling,
                                      round_robin, run_all, sjf)
from scheduler_sim.utils import summarize

__version__ = "1.0.0"
