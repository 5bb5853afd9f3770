"""Entrez response models."""

from pydantic import BaseModel, Field


class SearchResult(BaseModel):
    """Decoded esearch response."""

    ids: list[str] = Field(default_factory=list)
    query_translation: str = ""
    count: int = 0
    ret_max: int = 0
    ret_start: int = 0
    query_key: str | None = None
    web_env: str | None = None


class Reference(BaseModel):
    """A literature reference attached to a sequence record."""

    number: int | None = None
    title: str | None = None
    authors: list[str] = Field(default_factory=list)
    journal: str | None = None
    pubmed: str | None = None


class SeqRecord(BaseModel):
    """A GenBank sequence record (one GBSeq element)."""

    locus: str = ""
    length: int | None = None
    strandedness: str | None = None
    moltype: str = ""
    topology: str | None = None
    division: str | None = None
    definition: str = ""
    primary_accession: str = ""
    create_date: str | None = None
    update_date: str | None = None
    organism: str = ""
    taxonomy: str | None = None
    references: list[Reference] = Field(default_factory=list)
    keywords: list[str] = Field(default_factory=list)
    sequence: str | None = None  # Only present when fetched whole
