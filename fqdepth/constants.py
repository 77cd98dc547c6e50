BUFFER_SIZE = 16 * 1024 * 1024
MAX_LINE_LENGTH = 65536
GZIP_MAGIC = b'\x1f\x8b'
VERBOSE = False
NAME_WIDTH = 30
try:
    from multiprocessing import cpu_count

    MAX_THREAD_COUNT = cpu_count()
except NotImplementedError:
    MAX_THREAD_COUNT = 2
DEFAULT_THREAD_COUNT = 1
