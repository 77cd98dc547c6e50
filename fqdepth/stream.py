"""
Line oriented access to plain and gzip-compressed input files.

Compression is detected from the file content (gzip magic bytes), never from
the file name. Lines are returned as ``bytes`` without the line terminator.
"""
import gzip
import io
import zlib
from contextlib import contextmanager

from fqdepth import constants


class InputFileError(IOError):
    def __init__(self, fname, reason):
        super().__init__(reason)
        self.fname = fname
        self.reason = reason

    def __reduce__(self):
        return self.__class__, (self.fname, self.reason)

    def __str__(self):
        return 'Cannot open file %s: %s' % (self.fname, self.reason)


class LineTooLongException(Exception):
    def __init__(self, fname, line_number, max_line_length):
        self.fname = fname
        self.line_number = line_number
        self.max_line_length = max_line_length

    def __str__(self):
        return 'Line %d of %s is longer than %d bytes.' % (
            self.line_number, self.fname, self.max_line_length,
        )


def is_gzipped(handle):
    return handle.peek(len(constants.GZIP_MAGIC))[:len(constants.GZIP_MAGIC)] == \
        constants.GZIP_MAGIC


@contextmanager
def open_stream(fname, buffer_size=None):
    """
    Open `fname` for binary reading, decompressing it on the fly if it is gzipped.
    The file is closed when the context exits, whatever the reason.
    """
    if buffer_size is None:
        buffer_size = constants.BUFFER_SIZE
    try:
        handle = open(fname, 'rb', buffering=buffer_size)
    except OSError as e:
        raise InputFileError(fname, e.strerror or str(e)) from e
    with handle:
        try:
            gzipped = is_gzipped(handle)
        except OSError as e:
            raise InputFileError(fname, e.strerror or str(e)) from e
        if gzipped:
            with io.BufferedReader(gzip.GzipFile(fileobj=handle), buffer_size) as stream:
                yield stream
        else:
            yield handle


def read_lines(fname, max_line_length=None, buffer_size=None):
    """
    Yield the lines of `fname` with the trailing ``\\n`` or ``\\r\\n`` removed.

    Lines longer than `max_line_length` bytes are rejected with
    LineTooLongException instead of being split or truncated.
    """
    if max_line_length is None:
        max_line_length = constants.MAX_LINE_LENGTH
    with open_stream(fname, buffer_size) as stream:
        line_number = 0
        while True:
            try:
                line = stream.readline(max_line_length + 2)
            except (OSError, EOFError, zlib.error) as e:
                raise InputFileError(fname, str(e)) from e
            if not line:
                return
            line_number += 1
            if line.endswith(b'\r\n'):
                line = line[:-2]
            elif line.endswith(b'\n'):
                line = line[:-1]
            if len(line) > max_line_length:
                raise LineTooLongException(fname, line_number, max_line_length)
            yield line
