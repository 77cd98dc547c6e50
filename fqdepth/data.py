from collections import namedtuple

import yaml

from fqdepth import __version__, constants
from .genome import EmptyGenomeException
from .utils import basename, format_number

AggregateResult = namedtuple(
    'AggregateResult', ('total_bases', 'total_reads', 'genome_length', 'coverage'),
)


def aggregate(genome_length, stats):
    if genome_length <= 0:
        raise EmptyGenomeException()
    if not stats:
        raise ValueError('At least one read file is required.')
    total_bases = sum(s.base_count for s in stats)
    total_reads = sum(s.record_count for s in stats)
    return AggregateResult(
        total_bases=total_bases,
        total_reads=total_reads,
        genome_length=genome_length,
        coverage=total_bases / genome_length,
    )


def format_coverage(result):
    return '%.2f' % result.coverage


def format_table(result, stats, name_width=constants.NAME_WIDTH):
    reads_width = max(len(format_number(x)) for x in
                      [result.total_reads] + [s.record_count for s in stats])
    bases_width = max(len(format_number(x)) for x in
                      [result.total_bases] + [s.base_count for s in stats])
    label = ' ' * (name_width + 3)

    lines = ['Reference genome: %s bp' % format_number(result.genome_length)]
    lines.append('{:<{}}{:>{}}'.format(
        'Total reads:', len(label), format_number(result.total_reads), reads_width,
    ))
    for s in stats:
        lines.append('  {:<{}} {:>{}}'.format(
            basename(s.source), name_width, format_number(s.record_count), reads_width,
        ))
    lines.append('{:<{}}{:>{}} bp'.format(
        'Total bases:', len(label), format_number(result.total_bases), bases_width,
    ))
    for s in stats:
        lines.append('  {:<{}} {:>{}} bp'.format(
            basename(s.source), name_width, format_number(s.base_count), bases_width,
        ))
    lines.append('Average coverage: %.2fx' % result.coverage)
    return '\n'.join(lines)


def output_data(genome, result, stats):
    return {
        'version': __version__,
        'genome': genome,
        'genome_length': result.genome_length,
        'total_reads': result.total_reads,
        'total_bases': result.total_bases,
        'coverage': float(result.coverage),
        'files': [
            {
                'file': s.source,
                'reads': s.record_count,
                'bases': s.base_count,
            } for s in stats
        ],
    }


def print_output(genome, result, stats, verbose=False, as_yaml=False):
    if as_yaml:
        data = output_data(genome, result, stats)
        print(yaml.dump(data, indent=4, default_flow_style=False, sort_keys=False), end='')
        return data
    if verbose:
        print(format_table(result, stats))
    else:
        print(format_coverage(result))
