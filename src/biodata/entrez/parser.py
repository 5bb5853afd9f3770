"""XML decoding for E-utilities responses."""

from __future__ import annotations

import logging
import xml.etree.ElementTree as ET

from ..exceptions import RecordDecodeError
from .models import Reference, SearchResult, SeqRecord

logger = logging.getLogger(__name__)


def _parse_root(payload: bytes, expected: str) -> ET.Element:
    try:
        root = ET.fromstring(payload)
    except ET.ParseError as e:
        raise RecordDecodeError(f"Failed to parse XML: {e}", cause=e) from e

    if root.tag != expected:
        # E-utilities reports some failures as <eFetchResult><ERROR>...</ERROR>
        error = root.findtext(".//ERROR")
        if error:
            raise RecordDecodeError(f"Entrez error: {error.strip()}")
        raise RecordDecodeError(f"Unexpected XML root <{root.tag}>, expected <{expected}>")
    return root


def _text(element: ET.Element, path: str) -> str | None:
    value = element.findtext(path)
    if value is None:
        return None
    value = value.strip()
    return value or None


def _int(element: ET.Element, path: str) -> int | None:
    value = _text(element, path)
    if value is None:
        return None
    try:
        return int(value)
    except ValueError:
        logger.debug("Ignoring non-integer <%s>: %r", path, value)
        return None


def parse_esearch(payload: bytes) -> SearchResult:
    """Decode an eSearchResult document."""
    root = _parse_root(payload, "eSearchResult")

    error = _text(root, "ERROR")
    if error:
        raise RecordDecodeError(f"Entrez error: {error}")

    return SearchResult(
        ids=[id_.text.strip() for id_ in root.findall("IdList/Id") if id_.text],
        query_translation=_text(root, "QueryTranslation") or "",
        count=_int(root, "Count") or 0,
        ret_max=_int(root, "RetMax") or 0,
        ret_start=_int(root, "RetStart") or 0,
        query_key=_text(root, "QueryKey"),
        web_env=_text(root, "WebEnv"),
    )


def _parse_reference(element: ET.Element) -> Reference:
    return Reference(
        number=_int(element, "GBReference_reference"),
        title=_text(element, "GBReference_title"),
        authors=[a.text.strip() for a in element.findall("GBReference_authors/GBAuthor") if a.text],
        journal=_text(element, "GBReference_journal"),
        pubmed=_text(element, "GBReference_pubmed"),
    )


def _parse_seq(element: ET.Element) -> SeqRecord:
    return SeqRecord(
        locus=_text(element, "GBSeq_locus") or "",
        length=_int(element, "GBSeq_length"),
        strandedness=_text(element, "GBSeq_strandedness"),
        moltype=_text(element, "GBSeq_moltype") or "",
        topology=_text(element, "GBSeq_topology"),
        division=_text(element, "GBSeq_division"),
        definition=_text(element, "GBSeq_definition") or "",
        primary_accession=_text(element, "GBSeq_primary-accession") or "",
        create_date=_text(element, "GBSeq_create-date"),
        update_date=_text(element, "GBSeq_update-date"),
        organism=_text(element, "GBSeq_organism") or "",
        taxonomy=_text(element, "GBSeq_taxonomy"),
        references=[
            _parse_reference(ref) for ref in element.findall("GBSeq_references/GBReference")
        ],
        keywords=[k.text.strip() for k in element.findall("GBSeq_keywords/GBKeyword") if k.text],
        sequence=_text(element, "GBSeq_sequence"),
    )


def parse_gbset(payload: bytes) -> list[SeqRecord]:
    """Decode a GBSet document into sequence records, in document order."""
    root = _parse_root(payload, "GBSet")
    return [_parse_seq(seq) for seq in root.findall("GBSeq")]
