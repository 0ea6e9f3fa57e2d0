# src/rundeck_importer/cli.py
"""Import current Rundeck state as normalized resources."""

import asyncio
import click
import json
from pathlib import Path
import structlog

from rundeck_importer.config.settings import Settings
from rundeck_importer.clients.rundeck import build_async_client
from rundeck_importer.core.exceptions import DiscoveryException, RundeckImporterException
from rundeck_importer.core.utils import setup_logging
from rundeck_importer.filters import ResourceFilter
from rundeck_importer.provider import RundeckProvider

logger = structlog.get_logger(__name__)

SECRET_CONFIG_KEYS = ("token", "password")


def _resolve_kinds(provider: RundeckProvider, resources: str) -> list:
    supported = list(provider.supported_services())
    if resources.strip() == "*":
        return supported
    return [kind.strip() for kind in resources.split(",") if kind.strip()]


@click.group()
@click.option('--debug', is_flag=True, help='Enable debug logging')
@click.option('--verbose', '-v', is_flag=True, help='Enable verbose output')
@click.pass_context
def cli(ctx, debug, verbose):
    """Import current state to Terraform configuration from Rundeck."""
    ctx.ensure_object(dict)
    
    settings = Settings.create_from_env()
    debug = debug or settings.debug
    
    log_level = "DEBUG" if debug else settings.log_level.value
    setup_logging(config_path=settings.log_config, log_level=log_level)
    
    ctx.obj['settings'] = settings
    ctx.obj['verbose'] = verbose


@cli.command(name="import")
@click.option('--resources', '-r', default='jobs,projects', show_default=True,
              help='Comma separated resource kinds, or * for all')
@click.option('--output', '-o', default='./rundeck_resources.json', help='Output JSON file path')
@click.option('--filter', '-f', 'filters', multiple=True, help='Keep only listed ids, e.g. job=id1:id2')
@click.option('--link-projects', is_flag=True, help='Reference owning projects from job resources')
@click.pass_context
def import_resources(ctx, resources, output, filters, link_projects):
    """Discover Rundeck projects and jobs and write them as JSON."""
    settings = ctx.obj['settings']
    verbose = ctx.obj['verbose']
    
    try:
        settings.rundeck.validate_auth()
        resource_filter = ResourceFilter.parse(filters)
    except RundeckImporterException as e:
        click.echo(f"❌ {e}", err=True)
        ctx.exit(1)
    
    provider = RundeckProvider(link_projects=link_projects)
    provider.configure(settings.rundeck.as_provider_args())
    kinds = _resolve_kinds(provider, resources)
    
    async def run_import():
        logger.info(f"{provider.get_name()} importing", kinds=kinds)
        discovered = {}
        skipped = {}
        async with build_async_client(provider.connection_config) as http_client:
            provider.http_client = http_client
            for kind in kinds:
                if verbose:
                    click.echo(f"🔍 Discovering {kind}...")
                result = await provider.discover_with_metadata(kind, verbose=verbose)
                if result["status"] != "success":
                    raise DiscoveryException(kind, result["error"])
                discovered[kind] = resource_filter.apply(result["data"])
                if result["metadata"]["errors"]:
                    skipped[kind] = result["metadata"]["errors"]
        return discovered, skipped
    
    try:
        discovered, skipped = asyncio.run(run_import())
    except RundeckImporterException as e:
        logger.error("Import failed", error=str(e))
        click.echo(f"❌ Import failed: {e}", err=True)
        ctx.exit(1)
    
    config = {
        key: value for key, value in provider.get_config().items()
        if key not in SECRET_CONFIG_KEYS
    }
    document = {
        "provider": provider.get_name(),
        "config": config,
        "resource_connections": provider.resource_connections(),
        "resources": {
            kind: [resource.to_dict() for resource in found]
            for kind, found in discovered.items()
        },
        "skipped": skipped,
    }
    
    output_path = Path(output)
    output_path.parent.mkdir(parents=True, exist_ok=True)
    with open(output_path, 'w') as f:
        json.dump(document, f, indent=2, default=str)
    
    click.echo("✅ Import completed successfully!")
    click.echo(f"📁 Resources saved to: {output_path}")
    for kind, found in discovered.items():
        click.echo(f"   {kind}: {len(found)}")
    for kind, errors in skipped.items():
        click.echo(f"⚠️  {kind}: {len(errors)} skipped, see \"skipped\" in the output")


@cli.command()
@click.pass_context
def check(ctx):
    """Check that the configured Rundeck server answers."""
    settings = ctx.obj['settings']
    
    try:
        settings.rundeck.validate_auth()
    except RundeckImporterException as e:
        click.echo(f"❌ {e}", err=True)
        ctx.exit(1)
    
    provider = RundeckProvider()
    provider.configure(settings.rundeck.as_provider_args())
    
    if asyncio.run(provider.health_check()):
        click.echo(f"✅ {provider.get_config()['url']} is reachable")
        return
    click.echo(f"❌ {provider.get_config()['url']} did not answer", err=True)
    ctx.exit(1)


@cli.command(name="list")
def list_services():
    """List supported resource kinds."""
    for kind in RundeckProvider().supported_services():
        click.echo(kind)


def main():
    cli(obj={})


if __name__ == '__main__':
    main()
