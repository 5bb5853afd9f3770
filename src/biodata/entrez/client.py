"""Async client for the NCBI Entrez E-utilities."""

from __future__ import annotations

import asyncio
import logging
from pathlib import Path
from typing import TYPE_CHECKING

import httpx

from ..exceptions import EntrezRequestError, FetchError
from .parser import parse_esearch, parse_gbset

if TYPE_CHECKING:
    from types import TracebackType

    from ..config import Settings
    from .models import SearchResult, SeqRecord

logger = logging.getLogger(__name__)


class EntrezClient:
    """Search and fetch GenBank records over a shared httpx client.

    Supports async context manager protocol for guaranteed cleanup:
        async with EntrezClient(settings) as client:
            ids, query = await client.search("nuccore", "refseq", "insulin")
    """

    def __init__(self, settings: Settings, http_client: httpx.AsyncClient | None = None) -> None:
        self._settings = settings
        self._base_url = settings.eutils_base_url.rstrip("/")
        self._owns_client = http_client is None
        self._http = http_client or httpx.AsyncClient(
            timeout=httpx.Timeout(settings.request_timeout, connect=10.0),
        )

    async def __aenter__(self) -> EntrezClient:
        return self

    async def __aexit__(
        self,
        exc_type: type[BaseException] | None,
        exc_val: BaseException | None,
        exc_tb: TracebackType | None,
    ) -> None:
        await self.aclose()

    async def aclose(self) -> None:
        """Close the underlying HTTP client if this instance created it."""
        if self._owns_client:
            await self._http.aclose()

    async def _get(self, endpoint: str, params: dict[str, str | int]) -> bytes:
        url = f"{self._base_url}/{endpoint}"
        logger.debug("GET %s %s", url, params)
        try:
            response = await self._http.get(url, params=params)
            response.raise_for_status()
        except httpx.HTTPStatusError as e:
            raise EntrezRequestError(
                f"{endpoint} returned HTTP {e.response.status_code}", cause=e
            ) from e
        except httpx.HTTPError as e:
            raise EntrezRequestError(f"Failed to make request to {endpoint}: {e}", cause=e) from e
        except httpx.InvalidURL as e:
            # Not an HTTPError subclass; raised for a malformed base URL
            raise EntrezRequestError(f"Invalid request URL for {endpoint}: {e}", cause=e) from e
        return response.content

    async def esearch(self, database: str, filter: str, query: str) -> SearchResult:
        """Run an esearch for `query` restricted to the `filter` token."""
        term = f"{filter}[filter] {query}" if filter else query
        payload = await self._get(
            "esearch.fcgi",
            {
                "db": database,
                "term": term,
                "retmode": "xml",
                "sort": self._settings.search_sort,
                "retmax": self._settings.max_results,
            },
        )
        result = parse_esearch(payload)
        logger.info("esearch %s %r: %d of %d ids", database, term, len(result.ids), result.count)
        return result

    async def search(self, database: str, filter: str, query: str) -> tuple[list[str], str]:
        """Search and return (record ids, normalized query text)."""
        result = await self.esearch(database, filter, query)
        return result.ids, result.query_translation or query

    async def efetch(
        self, database: str, ids: list[str], whole_sequence: bool = False
    ) -> list[SeqRecord]:
        """Fetch GenBank records for `ids`.

        Unless `whole_sequence` is set only the first residue is requested,
        which keeps result lists cheap to load.
        """
        if not ids:
            return []
        params: dict[str, str | int] = {
            "db": database,
            "id": ",".join(ids),
            "retmode": "xml",
            "rettype": "gb",
        }
        if not whole_sequence:
            params["seq_start"] = 1
            params["seq_stop"] = 1
        payload = await self._get("efetch.fcgi", params)
        records = parse_gbset(payload)
        logger.info("efetch %s: %d records", database, len(records))
        return records

    async def save_sequence(self, database: str, accession: str, path: Path) -> Path:
        """Fetch the full sequence of one record and write it to `path`, overwriting."""
        records = await self.efetch(database, [accession], whole_sequence=True)
        if not records:
            raise FetchError(f"No record returned for {accession}")
        sequence = records[0].sequence or ""
        try:
            await asyncio.to_thread(path.write_text, sequence, encoding="utf-8")
        except OSError as e:
            raise FetchError(f"Could not write {path}: {e}", cause=e) from e
        logger.info("Saved %d residues of %s to %s", len(sequence), accession, path)
        return path
