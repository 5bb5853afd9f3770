"""Deferred effects requested by page handlers and their interpreter."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import TYPE_CHECKING

from ..exceptions import BiodataError
from .actions import FetchFailed, FetchSucceeded, SequenceSaved

if TYPE_CHECKING:
    from pathlib import Path

    from ..entrez.client import EntrezClient
    from .actions import Action

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Effect:
    """Base class for effects. `page_id` names the requesting page."""

    page_id: int


@dataclass(frozen=True)
class SearchAndFetch(Effect):
    """Search `database` for `query` within `filter`, then fetch the hits."""

    database: str
    filter: str
    query: str


@dataclass(frozen=True)
class DownloadSequence(Effect):
    """Fetch the whole sequence of `accession` and write it to `path`."""

    database: str
    accession: str
    path: Path


async def run_effect(effect: Effect, client: EntrezClient) -> Action:
    """Run an effect to completion and return its single completion action."""
    try:
        if isinstance(effect, SearchAndFetch):
            ids, query = await client.search(effect.database, effect.filter, effect.query)
            records = await client.efetch(effect.database, ids)
            return FetchSucceeded(
                page_id=effect.page_id, records=records, ids=ids, query=query
            )
        if isinstance(effect, DownloadSequence):
            path = await client.save_sequence(effect.database, effect.accession, effect.path)
            return SequenceSaved(page_id=effect.page_id, accession=effect.accession, path=path)
    except BiodataError as e:
        logger.warning("Effect %s failed: %s", type(effect).__name__, e.message)
        return FetchFailed(page_id=effect.page_id, error=e)
    raise TypeError(f"Unknown effect: {effect!r}")
