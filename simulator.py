import sys

from page_table import PageTable, PageTableError, FIFO, LRU, UNUSED, RESIDENT, EVICTED
from memory_manager import PhysicalMemory, Statistics

NUM_PAGES = 128
NUM_FRAMES = 32

STATUS_LABELS = {UNUSED: '-', RESIDENT: 'mem', EVICTED: 'disk'}


class VirtualMemorySimulator:

    def __init__(self, algorithm=FIFO, num_pages=NUM_PAGES, num_frames=NUM_FRAMES, verbose=False):
        self.algorithm = algorithm
        self.stats = Statistics()
        self.physical_memory = PhysicalMemory(num_frames=num_frames, stats=self.stats)
        self.page_table = PageTable(algorithm, num_pages, self.physical_memory, self.stats,
                                    verbose=verbose)
        self.current_time = 0
        self.verbose = verbose

    def handle_memory_reference(self, page_num, operation):
        self.current_time += 1
        return self.page_table.request_page(page_num, operation, self.current_time)

    def run_trace(self, references):
        for page_num, operation in references:
            self.handle_memory_reference(page_num, operation)
        return self.stats

    def run_simulation(self, filename):
        print(f"\n{'='*60}")
        print(f"Running {self.algorithm} algorithm on {filename}")
        print(f"{'='*60}")

        self.run_trace(read_trace(filename))

        print(f"\nResults:")
        print(self.stats)
        if self.verbose:
            self.show_page_table_status()
        print(f"{'='*60}\n")

        return self.stats

    def show_page_table_status(self):
        print(format_page_table(self.page_table.status_snapshot()))


def read_trace(filename):
    """Yield (page_num, mode) pairs from a trace file of '<page> <mode>' lines."""
    with open(filename, 'r') as f:
        for line in f:
            parts = line.split('#', 1)[0].split()
            if len(parts) != 2:
                continue
            try:
                page_num = int(parts[0])
            except ValueError:
                continue
            yield page_num, parts[1]


def format_page_table(views):
    def column(value, width):
        return f"{'-' if value is None else value:>{width}}"

    lines = [f"{'Page':>4} {'Status':>6} {'Mod?':>4} {'Frame':>6} {'Acc(t)':>7} "
             f"{'Load(t)':>7} {'#Peeks':>7} {'#Pokes':>7}"]
    for view in views:
        lines.append(f"[{view.page_num:02d}] {STATUS_LABELS.get(view.status, '?'):>6} "
                     f"{'yes' if view.modified else 'no':>4} {column(view.frame, 6)} "
                     f"{column(view.access_time, 7)} {column(view.load_time, 7)} "
                     f"{view.peeks:>7} {view.pokes:>7}")
    return '\n'.join(lines)


def main(argv=None):
    algorithms = [FIFO, LRU]
    args = sys.argv[1:] if argv is None else argv
    data_files = args or ['data1.txt', 'data2.txt']

    results = {}

    try:
        for data_file in data_files:
            results[data_file] = {}
            print(f"\n{'#'*60}")
            print(f"# Processing {data_file}")
            print(f"{'#'*60}")

            for algorithm in algorithms:
                simulator = VirtualMemorySimulator(algorithm=algorithm)
                stats = simulator.run_simulation(data_file)
                results[data_file][algorithm] = {
                    'page_faults': stats.page_faults,
                    'page_hits': stats.page_hits,
                    'disk_accesses': stats.disk_accesses,
                    'dirty_writes': stats.dirty_writes
                }
    except PageTableError as e:
        print(f"Error: {e}", file=sys.stderr)
        sys.exit(1)

    # Print summary
    print("\n" + "="*80)
    print("SUMMARY OF ALL RESULTS")
    print("="*80)

    for data_file in data_files:
        print(f"\n{data_file}:")
        print(f"{'Algorithm':<10} {'Page Faults':<15} {'Page Hits':<15} {'Disk Accesses':<15} {'Dirty Writes':<15}")
        print("-" * 75)
        for algorithm in algorithms:
            r = results[data_file][algorithm]
            print(f"{algorithm:<10} {r['page_faults']:<15} {r['page_hits']:<15} "
                  f"{r['disk_accesses']:<15} {r['dirty_writes']:<15}")

    return results


if __name__ == '__main__':
    main()
