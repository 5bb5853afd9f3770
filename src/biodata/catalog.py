"""Startup taxonomy: the static menu and search pages wired into the registry.

Ids below the runtime offset (settings.result_page_offset) are reserved for
these pages; fetched results are numbered from the offset upwards.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import TYPE_CHECKING

from .navigation import MenuPage, Registry, SearchPage
from .ui.theme import DEFAULT_THEME

if TYPE_CHECKING:
    from .config import Settings
    from .ui.theme import Theme

ROOT_PAGE = 0


@dataclass(frozen=True)
class MenuSpec:
    page_id: int
    title: str
    description: str
    options: list[tuple[str, int]] = field(default_factory=list)


@dataclass(frozen=True)
class SearchSpec:
    page_id: int
    title: str
    description: str
    filter: str
    database: str | None = None  # None: settings.default_database


PageSpec = MenuSpec | SearchSpec

CATALOG: list[PageSpec] = [
    MenuSpec(
        ROOT_PAGE,
        "Biodata",
        "What biological data are you interested in?",
        [("DNA", 1), ("RNA", 2), ("Protein", 3), ("Literature", 4)],
    ),
    # Categories
    MenuSpec(
        1,
        "DNA",
        "Which kind of DNA sequence?",
        [("Genomic", 10), ("Organelle", 11), ("Plasmid", 12)],
    ),
    MenuSpec(
        2,
        "RNA",
        "Which kind of RNA sequence?",
        [("Messenger RNA", 20), ("Non-coding RNA", 21)],
    ),
    MenuSpec(
        3,
        "Protein",
        "Which kind of protein sequence?",
        [("Translated coding sequences", 30), ("Curated reference proteins", 31)],
    ),
    MenuSpec(
        4,
        "Literature",
        "Find sequence records through their publications",
        [("By author", 40), ("By journal or title", 41)],
    ),
    # Sub-types
    MenuSpec(10, "Genomic", "Choose a source database", [("GenBank", 100), ("RefSeq", 101)]),
    MenuSpec(
        11,
        "Organelle",
        "Choose a source database",
        [("Mitochondrion", 102), ("Chloroplast", 103)],
    ),
    MenuSpec(12, "Plasmid", "Choose a source database", [("GenBank plasmids", 104)]),
    MenuSpec(
        20, "Messenger RNA", "Choose a source database", [("GenBank mRNA", 110), ("RefSeq", 111)]
    ),
    MenuSpec(21, "Non-coding RNA", "Choose a source database", [("GenBank ncRNA", 112)]),
    MenuSpec(30, "Translated coding sequences", "Choose a source database", [("GenPept", 120)]),
    MenuSpec(31, "Curated reference proteins", "Choose a source database", [("RefSeq", 121)]),
    MenuSpec(40, "By author", "Choose a source database", [("Nucleotide", 130), ("Protein", 131)]),
    MenuSpec(41, "By journal or title", "Choose a source database", [("Nucleotide", 132)]),
    # Source databases
    SearchSpec(100, "GenBank", "Search GenBank nucleotide records", "genbank", "nuccore"),
    SearchSpec(101, "RefSeq", "Search RefSeq genomic records", "refseq", "nuccore"),
    SearchSpec(102, "Mitochondrion", "Search mitochondrial sequences", "mitochondrion", "nuccore"),
    SearchSpec(103, "Chloroplast", "Search chloroplast sequences", "chloroplast", "nuccore"),
    SearchSpec(104, "GenBank plasmids", "Search plasmid sequences", "plasmid", "nuccore"),
    SearchSpec(110, "GenBank mRNA", "Search messenger RNA records", "biomol_mrna", "nuccore"),
    SearchSpec(111, "RefSeq", "Search RefSeq transcripts", "refseq", "nuccore"),
    SearchSpec(112, "GenBank ncRNA", "Search non-coding RNA records", "biomol_ncrna", "nuccore"),
    SearchSpec(120, "GenPept", "Search GenPept protein records", "genbank", "protein"),
    SearchSpec(121, "RefSeq", "Search RefSeq protein records", "refseq", "protein"),
    SearchSpec(
        130,
        "Nucleotide",
        "Search nucleotide records by author, e.g. Smith J[Author]",
        "genbank",
        "nuccore",
    ),
    SearchSpec(
        131,
        "Protein",
        "Search protein records by author, e.g. Smith J[Author]",
        "genbank",
        "protein",
    ),
    SearchSpec(
        132,
        "Nucleotide",
        "Search nucleotide records by journal or publication title",
        "genbank",
        "nuccore",
    ),
]


def build_page(spec: PageSpec, settings: Settings) -> MenuPage | SearchPage:
    if isinstance(spec, MenuSpec):
        return MenuPage(
            page_id=spec.page_id,
            title=spec.title,
            labels=[label for label, _ in spec.options],
            destinations=[dest for _, dest in spec.options],
            description=spec.description,
        )
    return SearchPage(
        page_id=spec.page_id,
        title=spec.title,
        filter=spec.filter,
        description=spec.description,
        database=spec.database or settings.default_database,
    )


def build_registry(
    settings: Settings,
    theme: Theme = DEFAULT_THEME,
    catalog: list[PageSpec] | None = None,
) -> Registry:
    """Construct every static page and wire them into a validated registry."""
    specs = CATALOG if catalog is None else catalog
    registry = Registry(settings, theme=theme, root_page=ROOT_PAGE)
    for spec in specs:
        if spec.page_id >= settings.result_page_offset:
            raise ValueError(
                f"Static page id {spec.page_id} is inside the result range "
                f"(>= {settings.result_page_offset})"
            )
        registry.register(spec.page_id, build_page(spec, settings))
    registry.validate()
    return registry
