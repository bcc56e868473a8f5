import matplotlib
matplotlib.use("Agg")
import matplotlib.pyplot as plt

from scheduler_sim.utils import fmt2, summarize

GANTT_CELL_WIDTH = 8
TABLE_HEADER = ["ID", "Priority", "Burst", "Arrival", "Wait", "Turnaround", "Exit"]
TABLE_KEYS = ['pid', 'priority', 'burst_time', 'arrival_time', 'wait_time', 'turnaround_time', 'exit_time']


def output_title(title, out=None):
    print("-" * (len(title) * 2), file=out)
    print(" " * (len(title) // 2), title, file=out)
    print("-" * (len(title) * 2), file=out)

def output_gantt(timeline, out=None):
    print("Gantt schedule", file=out)
    cells = []
    for pid, _, _ in timeline:
        pid = str(pid)
        padding = " " * ((GANTT_CELL_WIDTH - len(pid)) // 2)
        cells.append(f"{padding}{pid}{padding}|")
    print("|" + "".join(cells), file=out)
    marks = [f"{start}\t" for _, start, _ in timeline]
    if timeline:
        marks.append(str(timeline[-1][2]))
    print("".join(marks), file=out)
    print(file=out)

def _border(widths):
    return "+" + "+".join("-" * (w + 2) for w in widths) + "+"

def _line(cells, widths):
    return "|" + "|".join(f" {cell:>{w}} " for cell, w in zip(cells, widths)) + "|"

def output_schedule(result, summary, out=None):
    avg_wait, avg_turnaround, throughput = summary
    rows = [[str(row[key]) for key in TABLE_KEYS] for row in result]
    footer = ["", "", "", "",
              f"Average {fmt2(avg_wait)}",
              f"Average {fmt2(avg_turnaround)}",
              f"Throughput {fmt2(throughput)}/t"]
    widths = [max(len(cell) for cell in column) for column in zip(TABLE_HEADER, footer, *rows)]
    print("Schedule table", file=out)
    print(_border(widths), file=out)
    print(_line(TABLE_HEADER, widths), file=out)
    print(_border(widths), file=out)
    for cells in rows:
        print(_line(cells, widths), file=out)
    print(_border(widths), file=out)
    print(_line(footer, widths), file=out)
    print(_border(widths), file=out)

def show_results(name, result, timeline, out=None):
    output_title(name, out)
    output_gantt(timeline, out)
    output_schedule(result, summarize(result), out)


def plot_chart(name, timeline, path):
    """Save the run's Gantt chart, one bar lane per process, as an image."""
    lanes = []
    for pid, _, _ in timeline:
        if pid not in lanes:
            lanes.append(pid)
    fig, ax = plt.subplots(figsize=(10, 2 + 0.5 * len(lanes)))
    colors = plt.cm.tab20.colors
    for pid, start, end in timeline:
        i = lanes.index(pid)
        ax.broken_barh([(start, end - start)], (i * 10, 9), facecolors=colors[i % len(colors)], edgecolors='black')
        ax.text(start + (end - start) / 2, i * 10 + 4.5, str(pid), ha='center', va='center', color='black', fontsize=9)
    ax.set_ylim(0, max(len(lanes), 1) * 10)
    ax.set_xlabel("Time")
    ax.set_yticks([i * 10 + 4.5 for i in range(len(lanes))])
    ax.set_yticklabels([str(pid) for pid in lanes])
    ax.set_title(f"Gantt Chart - {name}")
    fig.tight_layout()
    fig.savefig(path)
    plt.close(fig)
    return path
