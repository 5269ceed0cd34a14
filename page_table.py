from collections import namedtuple

# Page status values
UNUSED = 'unused'
RESIDENT = 'resident'
EVICTED = 'evicted'

# Replacement policies
FIFO = 'FIFO'
LRU = 'LRU'

# Access modes
READ = 'r'
WRITE = 'w'


class PageTableError(Exception):
    pass


class InvalidPageNumber(PageTableError, ValueError):
    def __init__(self, page_num, num_pages):
        super().__init__(f"Invalid page reference: {page_num} (valid range 0..{num_pages - 1})")
        self.page_num = page_num


class InvalidAccessMode(PageTableError, ValueError):
    def __init__(self, mode):
        super().__init__(f"Unknown access mode: {mode!r}")
        self.mode = mode


class CorruptState(PageTableError, RuntimeError):
    pass


PageView = namedtuple('PageView', [
    'page_num', 'status', 'modified', 'frame',
    'access_time', 'load_time', 'peeks', 'pokes',
])


class PageTableEntry:
    def __init__(self, page_num):
        self.page_num = page_num
        self.status = UNUSED
        self.modified = False
        self.frame = None  # None means not in memory
        self.access_time = None
        self.load_time = None
        self.peeks = 0  # number of reads
        self.pokes = 0  # number of writes
        # Links into the replacement queue, only set while resident
        self.prev = None
        self.next = None

    def is_valid(self):
        return self.status == RESIDENT

    def view(self):
        return PageView(self.page_num, self.status, self.modified, self.frame,
                        self.access_time, self.load_time, self.peeks, self.pokes)


class ReplacementQueue:
    """
    Doubly linked list threaded through the resident page table entries.

    The head is always the next victim and the tail the page most recently
    loaded. FIFO and LRU share this structure; with reorder_on_hit set, a
    hit moves the entry to the tail so the head becomes the least recently
    used page instead of the oldest loaded one.
    """

    def __init__(self, reorder_on_hit=False):
        self.reorder_on_hit = reorder_on_hit
        self.head = None
        self.tail = None
        self.size = 0

    def __len__(self):
        return self.size

    def __iter__(self):
        entry = self.head
        while entry is not None:
            yield entry
            entry = entry.next

    def __contains__(self, entry):
        return entry.prev is not None or self.head is entry

    def append(self, entry):
        entry.next = None
        entry.prev = self.tail
        if self.tail is None:
            self.head = entry
        else:
            self.tail.next = entry
        self.tail = entry
        self.size += 1

    def remove(self, entry):
        if entry.prev is not None:
            entry.prev.next = entry.next
        else:
            self.head = entry.next
        if entry.next is not None:
            entry.next.prev = entry.prev
        else:
            self.tail = entry.prev
        entry.prev = None
        entry.next = None
        self.size -= 1

    def pop_head(self):
        if self.head is None:
            raise CorruptState("No resident page available for eviction")
        victim = self.head
        self.remove(victim)
        return victim

    def move_to_tail(self, entry):
        if entry is self.tail:
            return
        self.remove(entry)
        self.append(entry)

    def touch(self, entry):
        if self.reorder_on_hit:
            self.move_to_tail(entry)


class PageTable:

    def __init__(self, policy, num_pages, memory, stats, verbose=False):
        if policy not in (FIFO, LRU):
            raise ValueError(f"Unknown algorithm: {policy}")
        if num_pages <= 0:
            raise ValueError(f"Page table needs at least one page, got {num_pages}")
        self.policy = policy
        self.num_pages = num_pages
        self.memory = memory
        self.stats = stats
        self.verbose = verbose
        self.entries = []
        self.reset()

    def reset(self):
        # Give back the frames held by resident pages before forgetting them
        for entry in self.entries:
            if entry.is_valid():
                self.memory.free_frame(entry.frame)
        self.entries = [PageTableEntry(i) for i in range(self.num_pages)]
        self.queue = ReplacementQueue(reorder_on_hit=(self.policy == LRU))

    def get_entry(self, page_num):
        if page_num < 0 or page_num >= self.num_pages:
            raise InvalidPageNumber(page_num, self.num_pages)
        return self.entries[page_num]

    def request_page(self, page_num, mode, time):
        entry = self.get_entry(page_num)
        mode = normalize_mode(mode)

        if entry.is_valid():
            self.stats.count_page_hit()
            self.queue.touch(entry)
        elif entry.status in (UNUSED, EVICTED):
            frame_num = self.memory.find_free_frame()
            if frame_num is None:
                frame_num = self.evict_page()
            if self.verbose:
                print(f"Page {page_num} given frame {frame_num}")

            self.memory.load_frame(frame_num, page_num, time)
            self.queue.append(entry)

            entry.status = RESIDENT
            entry.modified = False
            entry.frame = frame_num
            entry.access_time = time
            entry.load_time = time
            self.stats.count_page_fault()
        else:
            raise CorruptState(f"Invalid page status for page {page_num}: {entry.status!r}")

        if mode == READ:
            entry.peeks += 1
        else:
            entry.pokes += 1
            entry.modified = True

        entry.access_time = time
        return entry.frame

    def evict_page(self):
        # Victim is always at the head of the queue
        victim = self.queue.pop_head()
        if self.verbose:
            print(f"Evict page {victim.page_num}")

        frame_num = victim.frame
        if victim.modified:
            self.memory.save_frame(frame_num)

        victim.status = EVICTED
        victim.modified = False
        victim.frame = None
        victim.access_time = None
        victim.load_time = None

        return frame_num

    def next_victim(self):
        if self.queue.head is None:
            return None
        return self.queue.head.page_num

    def resident_pages(self):
        return [entry.page_num for entry in self.queue]

    def status_snapshot(self):
        return [entry.view() for entry in self.entries]


def normalize_mode(mode):
    lowered = mode.lower() if isinstance(mode, str) else mode
    if lowered not in (READ, WRITE):
        raise InvalidAccessMode(mode)
    return lowered
