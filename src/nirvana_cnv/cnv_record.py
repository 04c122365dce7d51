from dataclasses import dataclass, field

HEADERS = ['sample', 'gene', 'chromosome', 'start', 'end', 'filters', 'copyNumber', 'transcripts']


@dataclass(slots=True)
class CnvRecord:
    sample: str
    gene: str
    chromosome: str
    start: int
    end: int = None
    filters: list[str] = field(default_factory=list)
    copy_number: int = None

    # Distinct transcripts of the gene that overlap the cnv
    transcripts: list[str] = field(default_factory=list)

    def as_row(self) -> list:
        """
        Values in HEADERS order with the list fields joined by ';'
        """
        return [self.sample,
                self.gene,
                self.chromosome,
                self.start,
                self.end,
                ';'.join(self.filters),
                self.copy_number,
                ';'.join(self.transcripts)]

    def __str__(self):
        return f"{self.sample} {self.gene} {self.chromosome}:{self.start}-{self.end}"
