"""Shared test fixtures for the biodata browser tests."""

from __future__ import annotations

from pathlib import Path
from typing import TYPE_CHECKING

import pytest

from biodata.catalog import build_registry
from biodata.config import Settings
from biodata.entrez.models import Reference, SeqRecord
from biodata.exceptions import BiodataError, FetchError

if TYPE_CHECKING:
    from biodata.navigation import Registry


GBSET_XML = b"""<?xml version="1.0" encoding="UTF-8"?>
<!DOCTYPE GBSet PUBLIC "-//NCBI//NCBI GBSeq/EN" "https://www.ncbi.nlm.nih.gov/dtd/NCBI_GBSeq.dtd">
<GBSet>
  <GBSeq>
    <GBSeq_locus>NM_000207</GBSeq_locus>
    <GBSeq_length>465</GBSeq_length>
    <GBSeq_strandedness>single</GBSeq_strandedness>
    <GBSeq_moltype>mRNA</GBSeq_moltype>
    <GBSeq_topology>linear</GBSeq_topology>
    <GBSeq_division>PRI</GBSeq_division>
    <GBSeq_update-date>10-AUG-2024</GBSeq_update-date>
    <GBSeq_create-date>31-OCT-2000</GBSeq_create-date>
    <GBSeq_definition>Homo sapiens insulin (INS), transcript variant 1, mRNA</GBSeq_definition>
    <GBSeq_primary-accession>NM_000207</GBSeq_primary-accession>
    <GBSeq_organism>Homo sapiens</GBSeq_organism>
    <GBSeq_taxonomy>Eukaryota; Metazoa; Chordata</GBSeq_taxonomy>
    <GBSeq_keywords>
      <GBKeyword>RefSeq</GBKeyword>
      <GBKeyword>MANE Select</GBKeyword>
    </GBSeq_keywords>
    <GBSeq_references>
      <GBReference>
        <GBReference_reference>1</GBReference_reference>
        <GBReference_authors>
          <GBAuthor>Smith,J.</GBAuthor>
          <GBAuthor>Jones,K.</GBAuthor>
        </GBReference_authors>
        <GBReference_title>Insulin gene regulation</GBReference_title>
        <GBReference_journal>J. Biol. Chem. 280 (1), 1-10 (2005)</GBReference_journal>
        <GBReference_pubmed>15501234</GBReference_pubmed>
      </GBReference>
    </GBSeq_references>
    <GBSeq_sequence>a</GBSeq_sequence>
  </GBSeq>
  <GBSeq>
    <GBSeq_locus>AB000001</GBSeq_locus>
    <GBSeq_moltype>DNA</GBSeq_moltype>
    <GBSeq_definition>Synthetic construct</GBSeq_definition>
    <GBSeq_primary-accession>AB000001</GBSeq_primary-accession>
    <GBSeq_organism>synthetic construct</GBSeq_organism>
  </GBSeq>
</GBSet>
"""

ESEARCH_XML = b"""<?xml version="1.0" encoding="UTF-8" ?>
<!DOCTYPE eSearchResult PUBLIC "-//NLM//DTD esearch 20060628//EN" "https://eutils.ncbi.nlm.nih.gov/eutils/dtd/20060628/esearch.dtd">
<eSearchResult>
  <Count>2</Count>
  <RetMax>2</RetMax>
  <RetStart>0</RetStart>
  <IdList>
    <Id>1677498621</Id>
    <Id>186439</Id>
  </IdList>
  <QueryTranslation>genbank[filter] AND "insulin"[All Fields]</QueryTranslation>
</eSearchResult>
"""


def make_record(accession: str, **overrides: object) -> SeqRecord:
    """Build a SeqRecord with sensible defaults."""
    data: dict[str, object] = {
        "locus": accession,
        "moltype": "DNA",
        "definition": f"Record {accession}",
        "primary_accession": accession,
        "organism": "Homo sapiens",
        "create_date": "01-JAN-2020",
        "update_date": "02-JAN-2020",
    }
    data.update(overrides)
    return SeqRecord(**data)  # type: ignore[arg-type]


@pytest.fixture
def settings(tmp_path: Path) -> Settings:
    """Settings isolated from the environment and writing into tmp_path."""
    return Settings(
        _env_file=None,  # type: ignore[call-arg]
        log_file=tmp_path / "biodata.log",
        sequence_path=tmp_path / "sequence.txt",
    )


@pytest.fixture
def fatal_settings(tmp_path: Path) -> Settings:
    """Settings with the legacy exit-on-fetch-error policy."""
    return Settings(
        _env_file=None,  # type: ignore[call-arg]
        log_file=tmp_path / "biodata.log",
        sequence_path=tmp_path / "sequence.txt",
        exit_on_fetch_error=True,
    )


@pytest.fixture
def registry(settings: Settings) -> Registry:
    """Registry wired from the startup catalog."""
    return build_registry(settings)


@pytest.fixture
def sample_records() -> list[SeqRecord]:
    """Three fetched records, the first with references and keywords."""
    return [
        make_record(
            "NM_000207",
            moltype="mRNA",
            definition="Homo sapiens insulin (INS), mRNA",
            keywords=["RefSeq"],
            references=[Reference(number=1, title="Insulin gene regulation", authors=["Smith,J."])],
        ),
        make_record("AB000001", organism="synthetic construct"),
        make_record("X00001", topology="circular"),
    ]


class FakeEntrezClient:
    """Stands in for EntrezClient; records calls and returns canned data."""

    def __init__(
        self,
        ids: list[str] | None = None,
        records: list[SeqRecord] | None = None,
        error: BiodataError | None = None,
    ) -> None:
        self.ids = ids or []
        self.records = records or []
        self.error = error
        self.searches: list[tuple[str, str, str]] = []
        self.fetches: list[tuple[str, list[str], bool]] = []
        self.saved: list[tuple[str, str, Path]] = []
        self.closed = False

    async def search(self, database: str, filter: str, query: str) -> tuple[list[str], str]:
        self.searches.append((database, filter, query))
        if self.error is not None:
            raise self.error
        return list(self.ids), f"{filter}[filter] {query}"

    async def efetch(
        self, database: str, ids: list[str], whole_sequence: bool = False
    ) -> list[SeqRecord]:
        self.fetches.append((database, list(ids), whole_sequence))
        return list(self.records)

    async def save_sequence(self, database: str, accession: str, path: Path) -> Path:
        if self.error is not None:
            raise self.error
        self.saved.append((database, accession, path))
        path.write_text("acgt", encoding="utf-8")
        return path

    async def aclose(self) -> None:
        self.closed = True


@pytest.fixture
def fake_client(sample_records: list[SeqRecord]) -> FakeEntrezClient:
    """Client returning the three sample records."""
    return FakeEntrezClient(ids=["111", "222", "333"], records=sample_records)


@pytest.fixture
def failing_client() -> FakeEntrezClient:
    """Client whose search always fails."""
    return FakeEntrezClient(error=FetchError("Failed to make request: connection refused"))
