'''
Created on Oct 18, 2026

@author: pleyte
'''
import gzip
import json
import logging
from nirvana_cnv.annotation_document import AnnotationDocument, MalformedInputError


class AnnotationReader(object):
    '''
    Read a gzipped Nirvana annotation json into an AnnotationDocument
    '''
    def __init__(self):
        '''
        Constructor
        '''
        self._logger = logging.getLogger(__name__)

    def read(self, annotation_file: str) -> AnnotationDocument:
        """
        Decompress and parse the file. Anything that isn't gzipped json with a positions array raises
        MalformedInputError. A missing file raises FileNotFoundError.
        """
        try:
            with gzip.open(annotation_file, 'rt', encoding='utf-8') as f:
                data = json.load(f)
        except FileNotFoundError:
            raise
        except (OSError, EOFError, UnicodeDecodeError, json.JSONDecodeError) as e:
            raise MalformedInputError(f"Unable to read {annotation_file}: {e}") from e

        document = AnnotationDocument.from_json(data)
        self._logger.info(f"Read {len(document.positions)} positions from {annotation_file}")
        return document
