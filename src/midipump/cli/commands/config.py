"""Config command implementations."""

import click

from midipump.models import AppConfig


@click.group(name="config")
def config_group():
    """Show or reset midipump settings."""
    pass


@config_group.command(name="show")
@click.pass_context
def show_config(ctx):
    """Display the current configuration."""
    config: AppConfig = ctx.obj["config"]
    for field, value in config.model_dump().items():
        click.echo(f"{field}: {value}")


@config_group.command(name="path")
@click.pass_context
def config_path(ctx):
    """Print the config file location."""
    click.echo(str(ctx.obj["config_path"]))


@config_group.command(name="reset")
@click.pass_context
def reset_config(ctx):
    """Overwrite the config file with defaults."""
    path = ctx.obj["config_path"]
    AppConfig().save(path)
    click.echo(f"Configuration reset: {path}")
