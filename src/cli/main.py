# src/cli/main.py
from __future__ import annotations

import asyncio
import json
import logging
import sys

import click

logger = logging.getLogger("kloth")


def _setup_logging(level: str) -> None:
    logging.basicConfig(
        level=getattr(logging, level.upper(), logging.INFO),
        format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
    )


async def _extract(url: str, headless: bool):
    from src.core.browser import BrowserPool
    from src.extraction.orchestrator import ImageExtractor

    pool = BrowserPool(headless=headless)
    try:
        return await ImageExtractor(browser_pool=pool).extract(url)
    finally:
        await pool.close()


@click.group()
@click.option("--log-level", default="INFO", help="Logging level")
def cli(log_level: str):
    """Kloth: product image extraction for e-commerce product pages"""
    _setup_logging(log_level)


@cli.command()
@click.argument("url")
@click.option("--headless/--no-headless", default=True, help="Run browser headless")
def extract(url: str, headless: bool):
    """Extract the product image and gallery for a product URL."""
    from src.core.errors import ExtractionFailed, InvalidURL, UnsupportedDomain

    try:
        result = asyncio.run(_extract(url, headless))
    except (InvalidURL, UnsupportedDomain) as e:
        click.echo(str(e), err=True)
        sys.exit(2)
    except ExtractionFailed as e:
        click.echo(f"Extraction failed: {e}", err=True)
        sys.exit(1)

    click.echo(json.dumps({"url": url, **result.to_payload()}, indent=2))
    if not result.found:
        click.echo("No product image found.", err=True)


@cli.command()
def domains():
    """List supported merchant domains."""
    from src.registry.domains import lookup, supported_domains

    keys = supported_domains()
    click.echo(f"{'Domain':<25} {'Adapter':<22} {'Mode':<6}")
    click.echo("-" * 55)
    for domain in keys:
        adapter = lookup(domain)
        mode = "render" if adapter.requires_rendering else "api"
        click.echo(f"{domain:<25} {adapter.name:<22} {mode:<6}")
    click.echo(f"\n{len(keys)} domains")


if __name__ == "__main__":
    cli()
