import sys
from os import path

from fqdepth import constants


def verbose_print(message):
    if not constants.VERBOSE:
        return
    sys.stderr.write(message + "\n")


def warning(message):
    sys.stderr.write('Warning: {}\n'.format(message))


def format_number(x):
    return '{:,}'.format(x)


def basename(fname):
    return path.basename(fname)


def find_duplicates(items):
    seen = set()
    duplicates = list()
    for item in items:
        if item in seen and item not in duplicates:
            duplicates.append(item)
        seen.add(item)
    return duplicates
