'''
Select the cnv positions of an annotation document that overlap transcripts of a gene

Created on Oct 18, 2026

@author: pleyte
'''
from collections.abc import Iterator
import logging
from nirvana_cnv.annotation_document import AnnotationDocument, Position
from nirvana_cnv.cnv_record import CnvRecord


class CnvExtractor(object):
    '''
    Project annotation positions onto CnvRecords for one gene at a time.
    Holds no state between calls so the same inputs always give the same records.
    '''
    def __init__(self):
        '''
        Constructor
        '''
        self._logger = logging.getLogger(__name__)

    def extract(self, document: AnnotationDocument, gene: str, sample: str) -> Iterator[CnvRecord]:
        """
        Yield one record per position, in document order, having at least one transcript whose hgnc symbol
        equals gene (case sensitive). Positions without a matching transcript are skipped.
        """
        for position in document.positions:
            transcripts = self.get_matched_transcripts(position, gene)
            if not transcripts:
                continue

            yield CnvRecord(sample,
                            gene,
                            position.chromosome,
                            position.start,
                            position.end,
                            list(position.filters),
                            self.get_copy_number(position),
                            transcripts)

    def get_matched_transcripts(self, position: Position, gene: str) -> list[str]:
        """
        Distinct transcript ids, across all variants of the position, belonging to gene. Sorted.
        """
        matched = {t.transcript
                   for v in position.variants
                   for t in v.transcripts
                   if t.hgnc == gene and t.transcript is not None}
        return sorted(matched)

    def get_copy_number(self, position: Position) -> int:
        """
        The copy number of the first sample entry that has one
        """
        return next((cn for cn in position.copy_numbers if cn is not None), None)
