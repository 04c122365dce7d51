'''
Typed view of a Nirvana CNV annotation json (the `positions` array and the parts of each position we report on)

Created on Oct 18, 2026

@author: pleyte
'''
from dataclasses import dataclass, field


class MalformedInputError(ValueError):
    '''
    Raised when an annotation file can't be decoded or doesn't have the expected structure
    '''


@dataclass(slots=True)
class Transcript:
    hgnc: str = None
    transcript: str = None


@dataclass(slots=True)
class Variant:
    transcripts: list[Transcript] = field(default_factory=list)


@dataclass(slots=True)
class Position:
    chromosome: str
    start: int

    # svEnd, absent for some events
    end: int = None
    filters: list[str] = field(default_factory=list)

    # copyNumber of each sample entry, None where the entry has none
    copy_numbers: list[int] = field(default_factory=list)
    variants: list[Variant] = field(default_factory=list)

    def __str__(self):
        return f"{self.chromosome}:{self.start}-{self.end}"


@dataclass(slots=True)
class AnnotationDocument:
    positions: list[Position] = field(default_factory=list)

    @classmethod
    def from_json(cls, data) -> 'AnnotationDocument':
        """
        Build a document from parsed json. Structural problems raise MalformedInputError rather than
        surfacing later as KeyError/TypeError.
        """
        if not isinstance(data, dict):
            raise MalformedInputError(f"Expected a json object at the root, found {type(data).__name__}")

        positions = data.get('positions')
        if not isinstance(positions, list):
            raise MalformedInputError("Annotation json does not have a 'positions' array")

        return cls([_to_position(i, x) for i, x in enumerate(positions)])


def _get_list(obj: dict, key: str, where: str) -> list:
    """
    Return obj[key] as a list, treating a missing or null value as empty
    """
    value = obj.get(key)
    if value is None:
        return []
    if not isinstance(value, list):
        raise MalformedInputError(f"{where}: '{key}' should be an array, found {type(value).__name__}")
    return value


def _to_position(index: int, x) -> Position:
    where = f"positions[{index}]"
    if not isinstance(x, dict):
        raise MalformedInputError(f"{where} is not an object")

    chromosome = x.get('chromosome')
    if not isinstance(chromosome, str):
        raise MalformedInputError(f"{where} has no chromosome")

    start = x.get('position')
    if not isinstance(start, int) or isinstance(start, bool):
        raise MalformedInputError(f"{where} has no integer position")

    copy_numbers = []
    for s in _get_list(x, 'samples', where):
        copy_numbers.append(s.get('copyNumber') if isinstance(s, dict) else None)

    variants = []
    for v in _get_list(x, 'variants', where):
        if not isinstance(v, dict):
            raise MalformedInputError(f"{where}: variant is not an object")
        variants.append(Variant([_to_transcript(t, where) for t in _get_list(v, 'transcripts', where)]))

    # null filters are dropped
    return Position(chromosome,
                    start,
                    x.get('svEnd'),
                    [str(f) for f in _get_list(x, 'filters', where) if f is not None],
                    copy_numbers,
                    variants)


def _to_transcript(t, where: str) -> Transcript:
    if not isinstance(t, dict):
        raise MalformedInputError(f"{where}: transcript is not an object")

    for key in ('hgnc', 'transcript'):
        if t.get(key) is not None and not isinstance(t[key], str):
            raise MalformedInputError(f"{where}: transcript {key} should be a string, found {type(t[key]).__name__}")

    return Transcript(t.get('hgnc'), t.get('transcript'))
