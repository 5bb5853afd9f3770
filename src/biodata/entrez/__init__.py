"""NCBI Entrez access: models, XML decoding and the async client."""

from __future__ import annotations

from .client import EntrezClient
from .models import Reference, SearchResult, SeqRecord
from .parser import parse_esearch, parse_gbset

__all__ = [
    "EntrezClient",
    "Reference",
    "SearchResult",
    "SeqRecord",
    "parse_esearch",
    "parse_gbset",
]
