"""
Command entry point for the mobile backend analytics component.

Runs one initialize -> process -> export cycle against a fresh DataAnalyzer,
logs the analysis memo and prints the export snapshot as JSON.

Usage:
    python -m mobile_backend.main
    python -m mobile_backend.main --no-export --verbose
"""

import asyncio
import json
import logging

import click

from mobile_backend import __version__
from mobile_backend.core.config import get_settings
from mobile_backend.jobs.analysis_memo import generate_memo_content
from mobile_backend.services.analyzer import DataAnalyzer

logger = logging.getLogger(__name__)


async def run(export: bool = True) -> None:
    """
    Run a single analysis cycle.

    The analyzer is always shut down, including when initialization or
    processing fails.
    """
    analyzer = DataAnalyzer()
    logger.info("Mobile backend analyzer starting")
    try:
        await analyzer.initialize()
        result = await analyzer.process_data()
        logger.info("\n" + generate_memo_content(result))

        if export:
            click.echo(json.dumps(analyzer.export_data(), indent=2))
    finally:
        analyzer.shutdown()
        logger.info("Mobile backend analyzer stopped")


@click.command()
@click.version_option(__version__)
@click.option("--no-export", is_flag=True, help="Skip printing the export snapshot")
@click.option("--verbose", "-v", is_flag=True, help="Enable debug logging")
def cli(no_export: bool, verbose: bool) -> None:
    """Run one mobile backend analysis cycle."""
    level = "DEBUG" if verbose else get_settings().log_level.upper()
    logging.basicConfig(
        level=level,
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
    )
    asyncio.run(run(export=not no_export))


if __name__ == "__main__":
    cli()
