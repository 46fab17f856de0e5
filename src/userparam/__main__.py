import click

from userparam.cli.check import check
from userparam.cli.describe import describe


@click.group(invoke_without_command=True)
@click.pass_context
def cli(ctx: click.Context) -> None:
    """userparam CLI"""
    # Show help when no subcommand is provided
    if ctx.invoked_subcommand is None:
        click.echo(ctx.get_help())


cli.add_command(check)
cli.add_command(describe)


if __name__ == "__main__":
    cli()
