#! /usr/bin/env python3
import argparse
import sys

from fqdepth.genome import UnknownFormatException, genome_length
from fqdepth.stream import InputFileError, LineTooLongException


def main(args):
    try:
        print(genome_length(args.genome))
    except (InputFileError, LineTooLongException, UnknownFormatException) as e:
        sys.stderr.write('Error: {}\n'.format(e))
        return 1
    return 0


if __name__ == '__main__':
    parser = argparse.ArgumentParser(description='Compute genome length of a FASTA or GenBank file')
    parser.add_argument('genome', help='Reference genome (optionally gzipped)')

    args = parser.parse_args()
    sys.exit(main(args))
