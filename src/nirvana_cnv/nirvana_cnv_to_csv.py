'''
Extract the copy number variants that overlap transcripts of a list of genes from Nirvana cnv annotation
files (*.cnv.annotations.json.gz) and write them to a single csv with one row per sample, gene and position.

Usage:
    nirvana-cnv-to-csv <GENE_LIST> <FILE_LIST> <OUTPUT_CSV>

eg
    nirvana-cnv-to-csv GUSB,EGFR "*.cnv.annotations.json.gz" all_samples.csv
    nirvana-cnv-to-csv GUSB "LP2105628-DNA_A01_LP2105633-DNA_A01.cnv.annotations.json.gz" single_sample.csv

Created on Oct 18, 2026

@author: pleyte
'''
import argparse
import logging.config
import os
import sys
from nirvana_cnv.annotation_document import AnnotationDocument, MalformedInputError
from nirvana_cnv.cnv_extractor import CnvExtractor
from nirvana_cnv.io.annotation_reader import AnnotationReader
from nirvana_cnv.io.cnv_csv_writer import CnvCsvWriter
from nirvana_cnv.util import file_list
from nirvana_cnv.util.log_config import LogConfig


class NirvanaCnvToCsv(object):
    '''
    Run the extractor over every file and gene, appending to one csv
    '''
    def __init__(self, genes: list[str], sample_regex: str = file_list.DEFAULT_SAMPLE_REGEX):
        '''
        Constructor
        '''
        self._logger = logging.getLogger(__name__)
        self._genes = genes
        self._sample_regex = sample_regex
        self._reader = AnnotationReader()
        self._extractor = CnvExtractor()

    def process(self, annotation_files: list[str], output_filename: str) -> int:
        """
        Write the header, then the records of each file in the order given, gene by gene.
        Files that are missing or can't be parsed are skipped with a warning.
        Returns the number of rows written.
        """
        writer = CnvCsvWriter(output_filename)
        writer.write_header()

        rows = 0
        for annotation_file in annotation_files:
            if not os.path.exists(annotation_file):
                self._logger.warning(f"'{annotation_file}' not found. Skipping.")
                continue

            try:
                document = self._reader.read(annotation_file)
            except MalformedInputError as e:
                self._logger.warning(f"'{annotation_file}' is not a valid annotation file. Skipping. {e}")
                continue

            self._warn_multiple_samples(annotation_file, document)
            sample = file_list.get_sample_id(annotation_file, self._sample_regex)

            for gene in self._genes:
                written = writer.append(list(self._extractor.extract(document, gene, sample)))
                self._logger.info(f"Wrote {written} {gene} rows for sample '{sample}' from {annotation_file}")
                rows += written

        return rows

    def _warn_multiple_samples(self, annotation_file: str, document: AnnotationDocument):
        multi_sample = sum(1 for p in document.positions if len(p.copy_numbers) > 1)
        if multi_sample:
            self._logger.warning(f"{multi_sample} positions in {annotation_file} have more than one sample; "
                                 "copyNumber is taken from the first sample that has one")


class _ArgumentParser(argparse.ArgumentParser):
    '''
    Exit with status 1, rather than argparse's 2, on bad arguments
    '''
    def error(self, message):
        self.print_usage(sys.stderr)
        self.exit(1, f"{self.prog}: error: {message}\n")


def _parse_args(argv=None):
    parser = _ArgumentParser(description='Write the copy number variants of a list of genes, from Nirvana cnv annotation files, to csv')

    parser.add_argument('genes', metavar='GENE_LIST', help="Comma separated gene symbols, eg 'GUSB,EGFR'")
    parser.add_argument('files', metavar='FILE_LIST', help="Comma separated annotation files (json.gz), may be quoted wildcards eg '*.cnv.annotations.json.gz'")
    parser.add_argument('output', metavar='OUTPUT_CSV', help="Output file (csv)")
    parser.add_argument('--sample_regex', default=file_list.DEFAULT_SAMPLE_REGEX,
                        help="Pattern of the ids in the file name; the second match is the sample (default: %(default)s)")
    parser.add_argument('--log_file', help="Log to this file instead of stderr", required=False)
    parser.add_argument('--version', action='version', version='0.0.1')

    args = parser.parse_args(argv)
    args.genes = file_list.split_list(args.genes)
    if not args.genes:
        parser.error("GENE_LIST has no genes")
    return args


def main(argv=None):
    args = _parse_args(argv)

    if args.log_file:
        logging.config.dictConfig(LogConfig(args.log_file).file_config)
    else:
        logging.config.dictConfig(LogConfig().stderr_config)

    annotation_files = file_list.expand_file_list(args.files)

    nirvana_cnv_to_csv = NirvanaCnvToCsv(args.genes, args.sample_regex)
    nirvana_cnv_to_csv.process(annotation_files, args.output)

    print(f"Done. Results are in: {args.output}")


if __name__ == '__main__':
    main()
