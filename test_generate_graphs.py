import matplotlib
matplotlib.use('Agg')

from page_table import FIFO, LRU
from generate_graphs import collect_results, plot_results


def write_cycle_trace(tmp_path):
    # Pages 0..4 touched twice in a loop, every third access a write
    lines = [f"{i % 5} {'w' if i % 3 == 0 else 'r'}" for i in range(10)]
    path = tmp_path / 'cycle.txt'
    path.write_text('\n'.join(lines) + '\n')
    return str(path)


def test_collect_results_per_frame_count(tmp_path):
    trace_file = write_cycle_trace(tmp_path)
    results = collect_results(trace_file, frame_counts=[2, 8])

    assert set(results) == {FIFO, LRU}
    for algorithm in (FIFO, LRU):
        assert results[algorithm]['page_faults'] == [10, 5]
        assert len(results[algorithm]['disk_accesses']) == 2
    # With enough frames nothing is ever evicted, so nothing is written back
    assert results[LRU]['dirty_writes'][1] == 0


def test_plot_results_writes_png(tmp_path):
    trace_file = write_cycle_trace(tmp_path)
    frame_counts = [2, 4]
    results = collect_results(trace_file, frame_counts=frame_counts)
    output = plot_results(results, frame_counts=frame_counts, output=str(tmp_path / 'out.png'))

    with open(output, 'rb') as f:
        assert f.read(8) == b'\x89PNG\r\n\x1a\n'
