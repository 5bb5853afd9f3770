"""Tests for E-utilities XML decoding."""

from __future__ import annotations

import pytest

from biodata.entrez.parser import parse_esearch, parse_gbset
from biodata.exceptions import FetchError, RecordDecodeError

from .conftest import ESEARCH_XML, GBSET_XML


class TestParseEsearch:
    """Tests for eSearchResult decoding."""

    def test_ids_and_translation(self) -> None:
        """Ids keep document order; the query translation is kept verbatim."""
        result = parse_esearch(ESEARCH_XML)
        assert result.ids == ["1677498621", "186439"]
        assert result.query_translation == 'genbank[filter] AND "insulin"[All Fields]'
        assert result.count == 2
        assert result.ret_max == 2
        assert result.query_key is None

    def test_empty_id_list(self) -> None:
        """A search without hits decodes to no ids."""
        payload = b"<eSearchResult><Count>0</Count><IdList/></eSearchResult>"
        result = parse_esearch(payload)
        assert result.ids == []
        assert result.count == 0
        assert result.query_translation == ""

    def test_error_element(self) -> None:
        """An ERROR element inside the result is raised."""
        payload = b"<eSearchResult><ERROR>Invalid db name</ERROR></eSearchResult>"
        with pytest.raises(RecordDecodeError, match="Invalid db name"):
            parse_esearch(payload)

    def test_wrong_root(self) -> None:
        """A different document type is rejected."""
        with pytest.raises(RecordDecodeError, match="Unexpected XML root"):
            parse_esearch(b"<GBSet/>")


class TestParseGbset:
    """Tests for GBSet decoding."""

    def test_full_record(self) -> None:
        """All fields of a complete GBSeq are decoded."""
        record = parse_gbset(GBSET_XML)[0]
        assert record.locus == "NM_000207"
        assert record.length == 465
        assert record.strandedness == "single"
        assert record.moltype == "mRNA"
        assert record.topology == "linear"
        assert record.division == "PRI"
        assert record.primary_accession == "NM_000207"
        assert record.organism == "Homo sapiens"
        assert record.create_date == "31-OCT-2000"
        assert record.update_date == "10-AUG-2024"
        assert record.keywords == ["RefSeq", "MANE Select"]
        assert record.sequence == "a"

    def test_references(self) -> None:
        """References keep their number, authors and identifiers."""
        reference = parse_gbset(GBSET_XML)[0].references[0]
        assert reference.number == 1
        assert reference.title == "Insulin gene regulation"
        assert reference.authors == ["Smith,J.", "Jones,K."]
        assert reference.pubmed == "15501234"

    def test_sparse_record(self) -> None:
        """Missing elements become None or empty collections."""
        records = parse_gbset(GBSET_XML)
        assert len(records) == 2
        sparse = records[1]
        assert sparse.primary_accession == "AB000001"
        assert sparse.length is None
        assert sparse.topology is None
        assert sparse.references == []
        assert sparse.keywords == []

    def test_efetch_error_document(self) -> None:
        """eFetchResult errors are surfaced as decode errors."""
        payload = b"<eFetchResult><ERROR>Empty id list</ERROR></eFetchResult>"
        with pytest.raises(RecordDecodeError, match="Empty id list"):
            parse_gbset(payload)

    def test_malformed_xml(self) -> None:
        """Broken XML is a fetch failure, keeping the parser error as cause."""
        with pytest.raises(FetchError) as exc_info:
            parse_gbset(b"<GBSet><GBSeq>")
        assert exc_info.value.cause is not None
