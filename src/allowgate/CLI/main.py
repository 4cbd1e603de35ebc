"""
Command Line Interface for allowgate.
"""
import logging

import click

from ..constants import GLOBAL_IMAGE_ALLOWLIST
from ..errors import AllowgateError, InvalidPatternError, ParseError
from ..FILTERS.global_filter import GlobalAllowlistFilter
from ..MATCHERS.allowlist import image_in_policy_allowlist
from ..PARSERS.config_parser import ConfigParser
from ..REGISTRY.image_reference import ImageReference


@click.group()
@click.option('--config', '-c', type=click.Path(dir_okay=False), help='Allowlist config file path')
@click.option('--env-file', type=click.Path(dir_okay=False), help='.env file used for ${VAR} interpolation')
@click.option('--verbose', '-v', is_flag=True, help='Enable debug logging')
@click.pass_context
def cli(ctx, config, env_file, verbose):
    """
    allowgate - container image allowlist gate.

    Decides which images are exempt from admission policy checks.
    """
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )
    ctx.ensure_object(dict)
    ctx.obj['config'] = None
    if config:
        try:
            ctx.obj['config'] = ConfigParser(env_file=env_file).parse(config)
        except AllowgateError as e:
            click.echo(f"Error: {e}", err=True)
            ctx.exit(2)


@cli.command('filter')
@click.argument('images', nargs=-1)
@click.pass_context
def filter_images(ctx, images):
    """Print the images that are not in the global allowlist."""
    config = ctx.obj.get('config')
    allowlist = config.global_allowlist if config else GLOBAL_IMAGE_ALLOWLIST
    for image in GlobalAllowlistFilter(allowlist).remove_allowed(images):
        click.echo(image)


@cli.command()
@click.argument('image')
@click.option('--policy', '-p', help='Name of a policy in the config file')
@click.option('--pattern', 'patterns', multiple=True, help='Allowlist name pattern (repeatable)')
@click.pass_context
def check(ctx, image, policy, patterns):
    """Check an image against a policy allowlist."""
    allowlist = list(patterns)
    if policy:
        config = ctx.obj.get('config')
        if config is None:
            click.echo("Error: --policy requires --config.", err=True)
            ctx.exit(2)
        try:
            allowlist.extend(config.policy(policy).patterns)
        except KeyError:
            click.echo(f"Error: policy {policy!r} not found.", err=True)
            ctx.exit(2)

    try:
        allowed = image_in_policy_allowlist(image, allowlist)
    except InvalidPatternError as e:
        click.echo(f"Error: {e}", err=True)
        ctx.exit(2)

    click.echo("allowed" if allowed else "denied")
    ctx.exit(0 if allowed else 1)


@cli.command()
@click.argument('image')
@click.pass_context
def parse(ctx, image):
    """Show how an image reference is parsed."""
    try:
        ref = ImageReference.parse(image)
    except ParseError as e:
        click.echo(f"Error: {e}", err=True)
        ctx.exit(2)

    click.echo(f"{'REGISTRY':12} {ref.registry}")
    click.echo(f"{'REPOSITORY':12} {ref.repository}")
    click.echo(f"{'TAG':12} {ref.tag or ''}")
    click.echo(f"{'DIGEST':12} {ref.digest or ''}")


def main():
    """
    Main entry point for the CLI.
    """
    cli(obj={})


if __name__ == '__main__':
    main()
