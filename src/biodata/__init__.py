"""Biodata - Interactive terminal browser for NCBI sequence records."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from biodata.config import Settings

__version__ = "0.1.0"


def configure_logging(settings: Settings) -> None:
    """Send logs to the configured file; the terminal belongs to the TUI."""
    settings.log_file.parent.mkdir(parents=True, exist_ok=True)
    logging.basicConfig(
        filename=settings.log_file,
        level=getattr(logging, settings.log_level.upper(), logging.INFO),
        format="%(asctime)s %(levelname)s:%(name)s:%(message)s",
    )


def main() -> int:
    """Run the biodata TUI and return its exit code."""
    from biodata.app import BiodataApp
    from biodata.config import get_settings

    settings = get_settings()
    configure_logging(settings)
    logging.getLogger(__name__).info("Starting biodata %s", __version__)

    app = BiodataApp(settings)
    app.run()
    return app.return_code or 0


__all__ = ["configure_logging", "main"]
