#!/usr/bin/env python
# -*- coding: utf-8 -*-

"""
test_data
----------------------------------

Tests for `fqdepth.data` module.
"""

import io
import unittest
from contextlib import redirect_stdout

import yaml

from fqdepth.data import aggregate, format_coverage, format_table, print_output
from fqdepth.genome import EmptyGenomeException
from fqdepth.reads import ReadFileStats


class TestAggregate(unittest.TestCase):
    def test_coverage(self):
        result = aggregate(100, [ReadFileStats('reads.fq', 450, 3)])
        self.assertEqual(result.coverage, 4.5)
        self.assertEqual(format_coverage(result), '4.50')

    def test_sums(self):
        stats = [
            ReadFileStats('a.fq', 1000, 10),
            ReadFileStats('b.fq', 0, 0),
            ReadFileStats('a.fq', 1000, 10),
        ]
        result = aggregate(3000, stats)
        self.assertEqual(result.total_bases, 2000)
        self.assertEqual(result.total_reads, 20)
        self.assertEqual(result.genome_length, 3000)
        self.assertAlmostEqual(result.coverage, 2000 / 3000)
        self.assertEqual(format_coverage(result), '0.67')

    def test_large_counts(self):
        result = aggregate(3, [ReadFileStats('a.fq', 2 ** 62, 1), ReadFileStats('b.fq', 2 ** 62, 1)])
        self.assertEqual(result.total_bases, 2 ** 63)

    def test_zero_genome(self):
        with self.assertRaises(EmptyGenomeException):
            aggregate(0, [ReadFileStats('a.fq', 10, 1)])

    def test_no_stats(self):
        with self.assertRaises(ValueError):
            aggregate(10, [])


class TestOutput(unittest.TestCase):
    def setUp(self):
        self.stats = [
            ReadFileStats('/data/run1/sample_R1.fq.gz', 1234567, 8176),
            ReadFileStats('sample_R2.fq', 10, 1),
        ]
        self.result = aggregate(1000000, self.stats)

    def test_table(self):
        expected = '\n'.join([
            'Reference genome: 1,000,000 bp',
            'Total reads:                     8,177',
            '  sample_R1.fq.gz                8,176',
            '  sample_R2.fq                       1',
            'Total bases:                     1,234,577 bp',
            '  sample_R1.fq.gz                1,234,567 bp',
            '  sample_R2.fq                          10 bp',
            'Average coverage: 1.23x',
        ])
        self.assertEqual(format_table(self.result, self.stats), expected)

    def test_print_default(self):
        out = io.StringIO()
        with redirect_stdout(out):
            print_output('ref.fa', self.result, self.stats)
        self.assertEqual(out.getvalue(), '1.23\n')

    def test_print_yaml(self):
        out = io.StringIO()
        with redirect_stdout(out):
            data = print_output('ref.fa', self.result, self.stats, as_yaml=True)
        loaded = yaml.safe_load(out.getvalue())
        self.assertDictEqual(loaded, data)
        self.assertEqual(loaded['genome_length'], 1000000)
        self.assertEqual(loaded['total_bases'], 1234577)
        self.assertEqual([f['reads'] for f in loaded['files']], [8176, 1])
        self.assertAlmostEqual(loaded['coverage'], 1.234577)


if __name__ == '__main__':
    import sys
    sys.exit(unittest.main())
