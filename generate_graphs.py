import sys

import matplotlib.pyplot as plt

from page_table import FIFO, LRU
from simulator import VirtualMemorySimulator, read_trace

ALGORITHMS = [FIFO, LRU]
FRAME_COUNTS = [4, 8, 16, 32, 64]
METRICS = ['page_faults', 'disk_accesses', 'dirty_writes']
TITLES = ['Page Faults', 'Disk Accesses', 'Dirty Page Writes']


def collect_results(trace_file, frame_counts=FRAME_COUNTS, algorithms=ALGORITHMS, num_pages=None):
    references = list(read_trace(trace_file))
    if num_pages is None:
        num_pages = max((page for page, _ in references), default=0) + 1

    results = {}
    for algorithm in algorithms:
        results[algorithm] = {metric: [] for metric in METRICS}
        for num_frames in frame_counts:
            simulator = VirtualMemorySimulator(algorithm=algorithm, num_pages=num_pages,
                                               num_frames=num_frames)
            stats = simulator.run_trace(references)
            for metric in METRICS:
                results[algorithm][metric].append(getattr(stats, metric))
    return results


def plot_results(results, frame_counts=FRAME_COUNTS, output='algorithm_comparison.png'):
    fig, axes = plt.subplots(1, len(METRICS), figsize=(15, 5))
    fig.suptitle('Page Replacement Algorithm Comparison', fontsize=14, fontweight='bold')

    for ax, metric, title in zip(axes, METRICS, TITLES):
        for algorithm, data in results.items():
            ax.plot(frame_counts, data[metric], marker='o', label=algorithm)
        ax.set_title(title)
        ax.set_xlabel('Frames')
        ax.set_xticks(frame_counts)
        ax.grid(alpha=0.3)

    handles, labels = axes[0].get_legend_handles_labels()
    fig.legend(handles, labels, loc='lower center', ncol=len(labels), frameon=True)

    plt.tight_layout()
    plt.subplots_adjust(bottom=0.15)
    fig.savefig(output, dpi=300, bbox_inches='tight')
    plt.close(fig)
    return output


def main(argv=None):
    args = sys.argv[1:] if argv is None else argv
    trace_file = args[0] if args else 'data1.txt'

    print("Running simulations...")
    results = collect_results(trace_file)
    output = plot_results(results)
    print(f"\nGraph saved as '{output}'")


if __name__ == '__main__':
    main()
