"""
Curator CLI - curate, verify and inspect learning resources from a terminal
"""

import asyncio
import json
import sys

import click
from rich.console import Console
from rich.table import Table

from curator import __version__
from curator.config import get_config
from curator.pipeline import get_pipeline, reset_pipeline
from curator.utils import get_logger, setup_logging
from curator.verification.fallback import synthesize_fallback_url

console = Console()
logger = get_logger(__name__)


async def _with_pipeline(action):
    """Run *action(pipeline)* and always release the pipeline's HTTP client."""
    pipeline = get_pipeline()
    try:
        return await action(pipeline)
    finally:
        await pipeline.aclose()
        reset_pipeline()
        logger.debug("Released curation pipeline and its HTTP client")


# ═══════════════════════════════════════════════════════════════════
# MAIN CLI GROUP
# ═══════════════════════════════════════════════════════════════════

@click.group()
@click.version_option(version=__version__)
@click.option("--log-level", default=None, help="Override CURATOR_LOG_LEVEL")
def main(log_level):
    """
    Resource Curator - verified learning resources for a target role
    """
    cfg = get_config()
    setup_logging(log_level or cfg.log_level, cfg.log_file)


# ═══════════════════════════════════════════════════════════════════
# CURATION
# ═══════════════════════════════════════════════════════════════════

@main.command()
@click.argument("role_title")
@click.option("--description", "-d", default="", help="Free-text role description")
@click.option("--requirement", "-r", "requirements", multiple=True, help="Skill requirement (repeatable)")
@click.option("--json", "as_json", is_flag=True, help="Print persisted JSON records")
def curate(role_title, description, requirements, as_json):
    """Select and verify learning resources for ROLE_TITLE"""
    resources = asyncio.run(_with_pipeline(
        lambda p: p.curate(role_title, description, list(requirements))
    ))

    if as_json:
        click.echo(json.dumps([r.to_record() for r in resources], indent=2))
        return

    table = Table(title=f"Learning resources for {role_title}")
    table.add_column("Type", style="cyan")
    table.add_column("Title")
    table.add_column("Provider", style="magenta")
    table.add_column("Price")
    table.add_column("Verified")
    table.add_column("Link", overflow="fold")

    for r in resources:
        table.add_row(
            r.type.value,
            r.title,
            r.provider,
            r.cost_tier.value,
            "[green]✓[/green]" if r.verified else "[yellow]fallback[/yellow]",
            r.url if r.verified else (r.fallback_url or ""),
        )
    console.print(table)


# ═══════════════════════════════════════════════════════════════════
# VERIFICATION
# ═══════════════════════════════════════════════════════════════════

@main.command()
@click.argument("urls", nargs=-1, required=True)
@click.option("--json", "as_json", is_flag=True, help="Print outcome dicts")
def verify(urls, as_json):
    """Check reachability of one or more URLs"""
    outcomes = asyncio.run(_with_pipeline(
        lambda p: p.batch_verifier.verify_all(list(urls))
    ))

    if as_json:
        click.echo(json.dumps([o.to_dict() for o in outcomes], indent=2))
    else:
        table = Table(title="Link verification")
        table.add_column("URL", overflow="fold")
        table.add_column("Reachable")
        table.add_column("Method", style="cyan")
        table.add_column("Status")
        table.add_column("Reason", style="yellow")
        for o in outcomes:
            table.add_row(
                o.url,
                "[green]yes[/green]" if o.is_reachable else "[red]no[/red]",
                o.method.value,
                str(o.http_status) if o.http_status is not None else "-",
                o.failure_reason.value if o.failure_reason else "",
            )
        console.print(table)

    if not all(o.is_reachable for o in outcomes):
        sys.exit(1)


@main.command()
@click.argument("url")
@click.argument("resource_type")
@click.argument("title")
def fallback(url, resource_type, title):
    """Print the fallback link for a resource"""
    click.echo(synthesize_fallback_url(url, resource_type, title))


# ═══════════════════════════════════════════════════════════════════
# CATALOG
# ═══════════════════════════════════════════════════════════════════

@main.command()
@click.argument("name", required=False)
def categories(name):
    """List catalog categories, or the entries of one category"""
    selector = get_pipeline().selector
    if not name:
        for category in selector.categories():
            console.print(f"  • {category}")
        return

    table = Table(title=f"Catalog: {name}")
    table.add_column("Type", style="cyan")
    table.add_column("Title")
    table.add_column("Provider", style="magenta")
    table.add_column("Difficulty")
    for r in selector.resources_by_category(name):
        table.add_row(r.type.value, r.title, r.provider, r.difficulty.value)
    console.print(table)


if __name__ == "__main__":
    main()
