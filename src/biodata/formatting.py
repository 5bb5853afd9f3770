"""Plain-text formatting of sequence records."""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from biodata.entrez.models import SeqRecord

RECORD_HEADER = "=== SEQUENCE RECORD ==="


@dataclass(frozen=True)
class ResultSummary:
    """One line of a search result list."""

    accession: str
    title: str
    description: str


def summarize_record(accession: str, record: SeqRecord) -> ResultSummary:
    """Build the list entry for a fetched record.

    The description names the first reference title, falling back to the
    organism when the record has no references.
    """
    if record.references and record.references[0].title:
        source = record.references[0].title
    else:
        source = record.organism
    return ResultSummary(
        accession=accession,
        title=record.definition,
        description=f"{accession} - {record.moltype} - {source}",
    )


def summarize_records(records: list[SeqRecord], ids: list[str]) -> list[ResultSummary]:
    """Build list entries for an efetch response.

    GBSeq records carry no Entrez UID, so search ids are only paired with
    records when efetch returned exactly one record per id. Otherwise each
    entry is identified by its accession.
    """
    paired = len(ids) == len(records)
    return [
        summarize_record(
            ids[position] if paired else record.primary_accession,
            record,
        )
        for position, record in enumerate(records)
    ]


def format_record(record: SeqRecord, label_padding: int = 20) -> str:
    """Render a record as labelled sections.

    Locus/accession, molecule type, description and record info are always
    emitted; optional fields and empty sections are left out.
    """
    lines: list[str] = []

    def field(label: str, value: object, indent: str = "") -> None:
        lines.append(f"{indent}{label:<{label_padding}} {value}")

    lines.append(RECORD_HEADER)
    field("Locus:", record.locus)
    field("Accession:", record.primary_accession)

    lines.append("")
    lines.append("--- SEQUENCE CHARACTERISTICS ---")
    field("Molecule Type:", record.moltype)
    if record.strandedness:
        field("Strand Type:", record.strandedness)
    if record.topology:
        field("Topology:", record.topology)
    if record.division:
        field("Division:", record.division)

    lines.append("")
    lines.append("--- DESCRIPTION ---")
    field("Definition:", record.definition)
    field("Organism:", record.organism)

    if record.keywords:
        lines.append("")
        lines.append("--- KEYWORDS ---")
        lines.extend(f"  • {keyword}" for keyword in record.keywords)

    if record.references:
        lines.append("")
        lines.append("--- REFERENCES ---")
        for position, ref in enumerate(record.references, start=1):
            lines.append(f"Reference {ref.number if ref.number is not None else position}:")
            if ref.title:
                field("Title:", ref.title, indent="  ")
            if len(ref.authors) == 1:
                field("Author:", ref.authors[0], indent="  ")
            elif ref.authors:
                field("Authors:", f"{ref.authors[0]} et al.", indent="  ")
            if ref.journal:
                field("Journal:", ref.journal, indent="  ")
            if ref.pubmed:
                field("PubMed:", ref.pubmed, indent="  ")

    lines.append("")
    lines.append("--- RECORD INFO ---")
    field("Created:", record.create_date or "")
    field("Last Updated:", record.update_date or "")

    return "\n".join(line.rstrip() for line in lines).strip()
