"""
Reference genome length from FASTA-like or GenBank-like files.

The format is detected once, from the first meaningful line, and all records of
the file are summed into a single length.
"""
from contextlib import closing
from enum import Enum

from .perf import running_time
from .stream import read_lines
from .utils import format_number, verbose_print

LETTERS = b'ABCDEFGHIJKLMNOPQRSTUVWXYZabcdefghijklmnopqrstuvwxyz'
DIGITS = b'0123456789'
COMMENT_MARKERS = (b';', b'#')


class GenomeFormat(Enum):
    SEQUENCE_RECORD = 'fasta'
    ANNOTATED_FLAT = 'genbank'


class Section(Enum):
    OUTSIDE = 0
    INSIDE = 1


class UnknownFormatException(Exception):
    def __init__(self, fname=None):
        self.fname = fname

    def __str__(self):
        return 'Could not determine format for %s (expected FASTA or GenBank)' % self.fname


class EmptyGenomeException(Exception):
    def __init__(self, fname=None):
        self.fname = fname

    def __str__(self):
        if self.fname is None:
            return 'Genome length is zero'
        return 'Genome length of %s is zero' % self.fname


def count_letters(line):
    return len(line) - len(line.translate(None, LETTERS))


class GenomeLengthCounter:
    def __init__(self, fname=None):
        self.fname = fname
        self.total = 0
        self._format = None
        self.section = Section.OUTSIDE

    @property
    def format(self):
        return self._format

    def _detect(self, line):
        if line.startswith(b'>'):
            self._format = GenomeFormat.SEQUENCE_RECORD
        elif line.startswith(b'LOCUS'):
            self._format = GenomeFormat.ANNOTATED_FLAT
        else:
            raise UnknownFormatException(self.fname)
        verbose_print('Detected {} format in {}.'.format(self._format.value, self.fname))

    def feed(self, line):
        line = line.lstrip(b' \t')
        if self._format is None:
            if not line.strip() or line.startswith(COMMENT_MARKERS):
                return
            # the detecting line is a header in both formats
            self._detect(line)
            return

        if self._format is GenomeFormat.SEQUENCE_RECORD:
            if line.startswith((b'>', b';')):
                return
            self.total += count_letters(line)
        else:
            if line.startswith(b'ORIGIN'):
                self.section = Section.INSIDE
            elif line.startswith(b'//'):
                self.section = Section.OUTSIDE
            elif self.section is Section.INSIDE:
                self.total += count_letters(line.lstrip(DIGITS).lstrip(b' '))

    def result(self):
        if self._format is None:
            raise UnknownFormatException(self.fname)
        return self.total


def genome_length(fname, max_line_length=None, buffer_size=None):
    counter = GenomeLengthCounter(fname)
    with running_time('Reading genome {}'.format(fname)):
        with closing(read_lines(fname, max_line_length, buffer_size)) as lines:
            for line in lines:
                counter.feed(line)
    length = counter.result()
    verbose_print('Genome length: {} bp'.format(format_number(length)))
    return length


def require_genome_length(fname, max_line_length=None, buffer_size=None):
    length = genome_length(fname, max_line_length, buffer_size)
    if length == 0:
        raise EmptyGenomeException(fname)
    return length
