'''
Helpers for the comma separated gene and file arguments and for naming samples after their files

Created on Oct 18, 2026

@author: pleyte
'''
import glob
import logging
import os
import re

ANNOTATION_SUFFIX = '.cnv.annotations.json.gz'
DEFAULT_SAMPLE_REGEX = 'LP[0-9]+'

_logger = logging.getLogger(__name__)


def split_list(value: str) -> list[str]:
    """
    Split a comma separated argument, dropping blanks
    """
    return [x.strip() for x in value.split(',') if x.strip()]


def expand_file_list(file_list: str) -> list[str]:
    """
    Split a comma separated list of files and expand any wildcards. Matches of a pattern are sorted.
    A pattern that matches nothing is kept as is so that it is reported as missing later.
    """
    files = []
    for chunk in split_list(file_list):
        pattern = os.path.expanduser(chunk)
        matches = sorted(glob.glob(pattern))
        if matches:
            files.extend(matches)
        else:
            files.append(pattern)
    return files


def get_sample_id(filename: str, sample_regex: str = DEFAULT_SAMPLE_REGEX) -> str:
    """
    The second id in the file's name, eg LP2105633 in LP2105628-DNA_A01_LP2105633-DNA_A01.cnv.annotations.json.gz
    Returns an empty string when the name has fewer than two ids.
    """
    name = os.path.basename(filename)
    if name.endswith(ANNOTATION_SUFFIX):
        name = name[:-len(ANNOTATION_SUFFIX)]

    ids = re.findall(sample_regex, name)
    if len(ids) < 2:
        _logger.warning(f"Unable to find a second sample id matching {sample_regex} in {filename}")
        return ''
    return ids[1]
