from collections import namedtuple
from contextlib import closing
from itertools import islice

from .perf import running_time
from .stream import read_lines
from .utils import format_number, verbose_print

LINES_PER_RECORD = 4

ReadFileStats = namedtuple('ReadFileStats', ('source', 'base_count', 'record_count'))


def count_read_bases(fname, max_line_length=None, buffer_size=None):
    """
    Count sequenced bases and records of a FASTQ-like file.

    Records are groups of four lines (header, sequence, separator, quality) and
    only the sequence line is measured. Neither the separator nor the quality
    line is validated. A truncated trailing record is dropped as a whole.
    """
    bases = reads = 0
    with running_time('Reading reads {}'.format(fname)):
        with closing(read_lines(fname, max_line_length, buffer_size)) as lines:
            while True:
                record = list(islice(lines, LINES_PER_RECORD))
                if not record:
                    break
                if len(record) < LINES_PER_RECORD:
                    verbose_print('Discarding incomplete record at the end of {} ({} lines).'.format(
                        fname, len(record),
                    ))
                    break
                bases += len(record[1])
                reads += 1
    verbose_print('{}: {} reads, {} bp'.format(fname, format_number(reads), format_number(bases)))
    return ReadFileStats(source=fname, base_count=bases, record_count=reads)
