'''
Created on Oct 18, 2026

@author: pleyte
'''
import contextlib
import gzip
import io
import json
import os
import tempfile
import unittest
from nirvana_cnv.nirvana_cnv_to_csv import NirvanaCnvToCsv, main

HEADER_LINE = 'sample,gene,chromosome,start,end,filters,copyNumber,transcripts\r\n'


def _position(start, gene, transcript):
    return {'chromosome': 'chr7',
            'position': start,
            'svEnd': start + 1000,
            'filters': ['PASS'],
            'samples': [{'copyNumber': 3}],
            'variants': [{'transcripts': [{'hgnc': gene, 'transcript': transcript}]}]}


class TestNirvanaCnvToCsv(unittest.TestCase):

    def setUp(self):
        self._tmp_dir = tempfile.TemporaryDirectory()
        self._output = self._path('out.csv')

    def tearDown(self):
        self._tmp_dir.cleanup()

    def _path(self, name):
        return os.path.join(self._tmp_dir.name, name)

    def _write_annotation(self, sample_pair, positions):
        path = self._path(f"{sample_pair}.cnv.annotations.json.gz")
        with gzip.open(path, 'wt', encoding='utf-8') as f:
            json.dump({'positions': positions}, f)
        return path

    def _read_output(self):
        with open(self._output, encoding='utf-8', newline='') as f:
            return f.read()

    def test_two_variants_same_transcript(self):
        position = _position(100, 'GUSB', 'T1')
        position['variants'].append({'transcripts': [{'hgnc': 'GUSB', 'transcript': 'T1'}]})
        path = self._write_annotation('LP1-DNA_A01_LP2-DNA_A01', [position])

        rows = NirvanaCnvToCsv(['GUSB']).process([path], self._output)

        self.assertEqual(rows, 1)
        self.assertEqual(self._read_output(), HEADER_LINE + 'LP2,GUSB,chr7,100,1100,PASS,3,T1\r\n')

    def test_no_matching_gene(self):
        path = self._write_annotation('LP1-DNA_A01_LP2-DNA_A01', [_position(100, 'EGFR', 'T1')])
        self.assertEqual(NirvanaCnvToCsv(['GUSB']).process([path], self._output), 0)
        self.assertEqual(self._read_output(), HEADER_LINE)

    def test_only_one_gene_matches(self):
        path = self._write_annotation('LP1-DNA_A01_LP2-DNA_A01', [_position(100, 'EGFR', 'T9')])
        NirvanaCnvToCsv(['GUSB', 'EGFR']).process([path], self._output)
        self.assertEqual(self._read_output(), HEADER_LINE + 'LP2,EGFR,chr7,100,1100,PASS,3,T9\r\n')

    def test_row_order(self):
        a = self._write_annotation('LP1-DNA_A01_LP2-DNA_A01', [_position(100, 'EGFR', 'T2'), _position(50, 'GUSB', 'T1')])
        b = self._write_annotation('LP3-DNA_A01_LP4-DNA_A01', [_position(10, 'GUSB', 'T1')])

        NirvanaCnvToCsv(['GUSB', 'EGFR']).process([b, a], self._output)

        lines = self._read_output().splitlines()
        self.assertEqual([x.split(',')[:4] for x in lines[1:]],
                         [['LP4', 'GUSB', 'chr7', '10'],
                          ['LP2', 'GUSB', 'chr7', '50'],
                          ['LP2', 'EGFR', 'chr7', '100']])

    def test_missing_file_skipped(self):
        path = self._write_annotation('LP1-DNA_A01_LP2-DNA_A01', [_position(100, 'GUSB', 'T1')])
        missing = self._path('LP5-DNA_A01_LP6-DNA_A01.cnv.annotations.json.gz')

        with self.assertLogs('nirvana_cnv.nirvana_cnv_to_csv', level='WARNING') as logs:
            rows = NirvanaCnvToCsv(['GUSB']).process([missing, path], self._output)

        self.assertEqual(rows, 1)
        self.assertTrue(any('not found' in x for x in logs.output))
        self.assertEqual(self._read_output(), HEADER_LINE + 'LP2,GUSB,chr7,100,1100,PASS,3,T1\r\n')

    def test_malformed_file_skipped(self):
        bad = self._path('LP7-DNA_A01_LP8-DNA_A01.cnv.annotations.json.gz')
        with open(bad, 'w') as f:
            f.write('not gzip')
        path = self._write_annotation('LP1-DNA_A01_LP2-DNA_A01', [_position(100, 'GUSB', 'T1')])

        with self.assertLogs('nirvana_cnv.nirvana_cnv_to_csv', level='WARNING'):
            rows = NirvanaCnvToCsv(['GUSB']).process([bad, path], self._output)

        self.assertEqual(rows, 1)

    def test_bad_transcript_id_skipped(self):
        position = _position(100, 'GUSB', 'T1')
        position['variants'].append({'transcripts': [{'hgnc': 'GUSB', 'transcript': 12345}]})
        bad = self._write_annotation('LP7-DNA_A01_LP8-DNA_A01', [position])
        path = self._write_annotation('LP1-DNA_A01_LP2-DNA_A01', [_position(100, 'GUSB', 'T1')])

        with self.assertLogs('nirvana_cnv.nirvana_cnv_to_csv', level='WARNING') as logs:
            rows = NirvanaCnvToCsv(['GUSB']).process([bad, path], self._output)

        self.assertEqual(rows, 1)
        self.assertTrue(any('not a valid annotation file' in x for x in logs.output))
        self.assertEqual(self._read_output(), HEADER_LINE + 'LP2,GUSB,chr7,100,1100,PASS,3,T1\r\n')

    def test_multiple_samples_warning(self):
        position = _position(100, 'GUSB', 'T1')
        position['samples'] = [{'copyNumber': 1}, {'copyNumber': 4}]
        path = self._write_annotation('LP1-DNA_A01_LP2-DNA_A01', [position])

        with self.assertLogs('nirvana_cnv.nirvana_cnv_to_csv', level='WARNING'):
            NirvanaCnvToCsv(['GUSB']).process([path], self._output)

        self.assertEqual(self._read_output(), HEADER_LINE + 'LP2,GUSB,chr7,100,1100,PASS,1,T1\r\n')

    def test_main(self):
        self._write_annotation('LP1-DNA_A01_LP2-DNA_A01', [_position(100, 'GUSB', 'T1')])
        files = self._path('*.cnv.annotations.json.gz')

        stdout = io.StringIO()
        with contextlib.redirect_stdout(stdout), contextlib.redirect_stderr(io.StringIO()):
            main(['GUSB,EGFR', files, self._output])

        self.assertIn(f"Done. Results are in: {self._output}", stdout.getvalue())
        self.assertEqual(self._read_output(), HEADER_LINE + 'LP2,GUSB,chr7,100,1100,PASS,3,T1\r\n')

    def test_main_usage(self):
        stderr = io.StringIO()
        with contextlib.redirect_stderr(stderr):
            with self.assertRaises(SystemExit) as cm:
                main(['GUSB', 'file.json.gz'])

        self.assertEqual(cm.exception.code, 1)
        self.assertIn('usage', stderr.getvalue())

    def test_main_no_genes(self):
        with contextlib.redirect_stderr(io.StringIO()):
            with self.assertRaises(SystemExit) as cm:
                main([',', 'file.json.gz', self._output])

        self.assertEqual(cm.exception.code, 1)


if __name__ == "__main__":
    unittest.main()
