"""
Command-line interface for the Lighthouse audit tool
"""
import asyncio
import json

import click

from core.config import settings
from core.exceptions import LighthouseToolError
from core.logging import get_logger, setup_logging
from host.context import ContextOptions, PlaywrightContext, default_launch_options
from host.registry import ToolRegistry
from lighthouse_audit.tool import build_tools
from lighthouse_audit.types import TOOL_NAME, AuditCategory, FormFactor, OutputFormat

logger = get_logger(__name__)


def parse_thresholds(ctx, param, values):
    """Turn CATEGORY=MIN pairs into a threshold map"""
    if not values:
        return None

    thresholds = {}
    for value in values:
        category, sep, minimum = value.partition("=")
        if not sep or not category:
            raise click.BadParameter(f"expected CATEGORY=MIN, got {value!r}")
        try:
            thresholds[category] = float(minimum)
        except ValueError:
            raise click.BadParameter(f"threshold for {category} must be a number, got {minimum!r}")
    return thresholds


def build_registry(reports_dir=None) -> ToolRegistry:
    registry = ToolRegistry()
    registry.register_many(build_tools(settings.capture_snapshot, base_dir=reports_dir))
    return registry


async def run_audit(url: str, params: dict, reports_dir=None, port=None) -> dict:
    """Launch Chromium, open the URL and run lighthouse_audit on it"""
    registry = build_registry(reports_dir)
    options = ContextOptions(launch_options=default_launch_options(port=port))

    async with PlaywrightContext(options) as context:
        await context.navigate(url)
        response = await registry.dispatch(TOOL_NAME, context, params)

    return response.to_dict()


@click.group()
@click.version_option(version=settings.app_version)
def cli():
    """Lighthouse audit tool - web quality audits on a live browser page"""
    pass


@cli.command()
def schema():
    """Print the registered tool descriptors"""
    click.echo(json.dumps(build_registry().list_schemas(), indent=2))


@cli.command()
@click.argument("url")
@click.option(
    "--category",
    "categories",
    multiple=True,
    type=click.Choice([c.value for c in AuditCategory]),
    help="Category to audit, repeatable (default: accessibility)",
)
@click.option("--form-factor", type=click.Choice([f.value for f in FormFactor]), default=None)
@click.option("--output", type=click.Choice([o.value for o in OutputFormat]), default=None)
@click.option(
    "--threshold",
    "thresholds",
    multiple=True,
    callback=parse_thresholds,
    help="Minimum score as CATEGORY=MIN (0-100), repeatable",
)
@click.option("--reports-dir", default=None, help="Base directory for lighthouse-reports")
@click.option("--port", type=int, default=None, help="Remote-debugging port for Chromium")
def audit(url, categories, form_factor, output, thresholds, reports_dir, port):
    """Run a Lighthouse audit against URL"""
    params = {}
    if categories:
        params["categories"] = list(categories)
    if form_factor:
        params["formFactor"] = form_factor
    if output:
        params["output"] = output
    if thresholds:
        params["thresholds"] = thresholds

    try:
        result = asyncio.run(run_audit(url, params, reports_dir=reports_dir, port=port))
    except LighthouseToolError as e:
        logger.error(f"Audit of {url} failed: {e.message}")
        click.echo(json.dumps(e.to_dict(), indent=2))
        raise SystemExit(1)

    click.echo(json.dumps(result, indent=2))


def main():
    """Main entry point"""
    setup_logging()
    cli()


if __name__ == "__main__":
    main()
