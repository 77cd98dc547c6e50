import argparse
import os
import sys
from functools import partial
from multiprocessing import Pool

from fqdepth import constants, version_string
from .data import aggregate, print_output
from .genome import EmptyGenomeException, UnknownFormatException, require_genome_length
from .perf import running_time, running_time_decorator
from .reads import count_read_bases
from .stream import InputFileError, LineTooLongException
from .utils import find_duplicates, verbose_print, warning

DESCRIPTION = 'Calculates average sequencing read depth from FASTQ files against a reference genome.'
EPILOG = '''Default output: coverage as a single number (e.g., 45.23)
Verbose output: formatted summary of reads and bases per file

Examples:
  %(prog)s -g ref.fasta reads_R1.fq.gz reads_R2.fq.gz
  %(prog)s -g ref.gbk.gz -v sample1.fq sample2.fq sample3.fq
'''


class MissingFileException(Exception):
    def __init__(self, fname, kind):
        self.fname = fname
        self.kind = kind

    def __str__(self):
        return '%s file not found: %s' % (self.kind, self.fname)


class ArgumentParser(argparse.ArgumentParser):
    def error(self, message):
        self.print_usage(sys.stderr)
        self.exit(1, 'Error: %s\n' % message)


def check_input_files(genome, reads):
    if not os.path.exists(genome):
        raise MissingFileException(genome, 'Genome')
    duplicates = find_duplicates(reads)
    for fname in reads:
        if not os.path.exists(fname):
            raise MissingFileException(fname, 'FASTQ')
        if fname in duplicates:
            warning("File '{}' appears multiple times in input".format(fname))
            duplicates.remove(fname)


def count_reads(reads, thread_count=1, max_line_length=None, buffer_size=None):
    count = partial(count_read_bases, max_line_length=max_line_length, buffer_size=buffer_size)
    if thread_count > 1 and len(reads) > 1:
        with running_time('Counting {} read files in {} processes'.format(len(reads), thread_count)):
            with Pool(min(thread_count, len(reads))) as pool:
                return pool.map(count, reads)
    return [count(fname) for fname in reads]


@running_time_decorator
def main(args):
    check_input_files(args.genome, args.reads)

    genome_length = require_genome_length(args.genome, max_line_length=args.max_line_length)
    stats = count_reads(
        args.reads,
        thread_count=args.thread_count,
        max_line_length=args.max_line_length,
    )
    result = aggregate(genome_length, stats)
    verbose_print('Coverage: {}'.format(result.coverage))
    print_output(args.genome, result, stats, verbose=args.verbose, as_yaml=args.yaml)
    return result


def positive_int(value):
    try:
        x = int(value)
    except ValueError:
        raise argparse.ArgumentTypeError('invalid integer value: %r' % value)
    if x <= 0:
        raise argparse.ArgumentTypeError('must be a positive integer: %r' % value)
    return x


def create_parser():
    parser = ArgumentParser(
        description=DESCRIPTION,
        epilog=EPILOG,
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )
    parser.add_argument('reads', nargs='+', metavar='reads.fq(.gz)',
                        help='One or more FASTQ files (optionally gzipped)')
    parser.add_argument('-g', '--genome', required=True, metavar='FILE',
                        help='Reference genome (FASTA or GenBank, optionally gzipped)')
    parser.add_argument('-v', '--verbose', action='store_true',
                        help='Show detailed statistics')
    parser.add_argument('--yaml', action='store_true',
                        help='Print the statistics as a YAML document')
    parser.add_argument('-T', '--thread-count', type=positive_int,
                        default=constants.DEFAULT_THREAD_COUNT,
                        help='Number of processes counting read files (max useful: {})'.format(
                            constants.MAX_THREAD_COUNT))
    parser.add_argument('-L', '--max-line-length', type=positive_int,
                        default=constants.MAX_LINE_LENGTH,
                        help='Reject input lines longer than this many bytes')
    parser.add_argument('-d', '--debug', action='store_true',
                        help='Print progress and timing information to stderr')
    parser.add_argument('--version', action='version', version=version_string,
                        help='Print version and exit.')
    return parser


def run(argv=None):
    args = create_parser().parse_intermixed_args(argv)
    if args.debug:
        constants.VERBOSE = True
    try:
        main(args)
    except (
        MissingFileException,
        InputFileError,
        LineTooLongException,
        UnknownFormatException,
        EmptyGenomeException,
    ) as e:
        sys.stderr.write('Error: {}\n'.format(e))
        return 1
    return 0


if __name__ == '__main__':
    sys.exit(run())
