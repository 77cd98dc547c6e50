#! /usr/bin/env python3
import argparse
import sys

from fqdepth.reads import count_read_bases
from fqdepth.stream import InputFileError, LineTooLongException


def main(args):
    try:
        for fname in args.reads:
            stats = count_read_bases(fname)
            print(stats.base_count, stats.record_count, fname)
    except (InputFileError, LineTooLongException) as e:
        sys.stderr.write('Error: {}\n'.format(e))
        return 1
    return 0


if __name__ == '__main__':
    parser = argparse.ArgumentParser(description='Count bases and reads in FASTQ files')
    parser.add_argument('reads', nargs='+', help='Input reads (optionally gzipped)')

    args = parser.parse_args()
    sys.exit(main(args))
