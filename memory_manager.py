class PhysicalMemory:
    def __init__(self, num_frames=32, stats=None):
        self.num_frames = num_frames
        self.stats = stats if stats is not None else Statistics()
        # Each frame stores (virtual_page_num, load_time) or None if free
        self.frames = [None] * num_frames
        # Backing store: virtual_page_num -> load_time of the last saved copy
        self.backing_store = {}

    def find_free_frame(self):
        for i, frame in enumerate(self.frames):
            if frame is None:
                return i
        return None

    def load_frame(self, frame_num, virtual_page_num, time):
        self.frames[frame_num] = (virtual_page_num, time)
        self.stats.count_load()

    def save_frame(self, frame_num):
        frame = self.frames[frame_num]
        if frame is None:
            raise ValueError(f"Cannot save empty frame {frame_num}")
        virtual_page_num, load_time = frame
        # Frames hold no data, so record which load of the page was written back
        self.backing_store[virtual_page_num] = load_time
        self.stats.count_save()

    def free_frame(self, frame_num):
        self.frames[frame_num] = None

    def get_frame_info(self, frame_num):
        return self.frames[frame_num]

    def is_full(self):
        return self.find_free_frame() is None


class Statistics:
    def __init__(self):
        self.page_faults = 0
        self.page_hits = 0
        self.frame_loads = 0
        self.dirty_writes = 0

    def count_page_fault(self):
        self.page_faults += 1

    def count_page_hit(self):
        self.page_hits += 1

    def count_load(self):
        self.frame_loads += 1

    def count_save(self):
        self.dirty_writes += 1

    @property
    def disk_accesses(self):
        # Every load reads the page in, every dirty eviction writes one out
        return self.frame_loads + self.dirty_writes

    def __str__(self):
        return (f"Page Faults: {self.page_faults}\n"
                f"Page Hits: {self.page_hits}\n"
                f"Disk Accesses: {self.disk_accesses}\n"
                f"Dirty Writes: {self.dirty_writes}")
