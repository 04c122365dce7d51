'''
Created on Oct 18, 2026

@author: pleyte
'''
import csv
import logging
import pandas as pd
from nirvana_cnv.cnv_record import CnvRecord, HEADERS

# RFC 4180 line break. The csv writer only quotes line break characters that appear in its terminator,
# so both \r and \n need to be in it.
LINE_TERMINATOR = '\r\n'


class CnvCsvWriter(object):
    '''
    Write CnvRecords to a csv that grows one batch at a time.
    The header is written by write_header(), which also truncates the file.
    '''
    def __init__(self, output_filename: str):
        '''
        Constructor
        '''
        self._logger = logging.getLogger(__name__)
        self._output_filename = output_filename

    def write_header(self):
        pd.DataFrame(columns=HEADERS).to_csv(self._output_filename, index=False, lineterminator=LINE_TERMINATOR,
                                             encoding='utf-8')

    def append(self, records: list[CnvRecord]) -> int:
        """
        Append records to the end of the csv and return the number written.
        Fields containing a comma, quote, \\r or \\n are quoted; None is written as an empty field.
        """
        if not records:
            return 0

        # object dtype keeps ints as ints when a column also has None
        df = pd.DataFrame([r.as_row() for r in records], columns=HEADERS, dtype=object)
        df.to_csv(self._output_filename, mode='a', header=False, index=False, lineterminator=LINE_TERMINATOR,
                  quoting=csv.QUOTE_MINIMAL, encoding='utf-8')

        self._logger.debug(f"Appended {df.shape[0]} rows to {self._output_filename}")
        return df.shape[0]
