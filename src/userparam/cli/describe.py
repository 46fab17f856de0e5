import click

from userparam.cli.check import SUBTYPE_CHOICES, build_user_settings
from userparam.cli.utils import configure_logging, output_error, output_result
from userparam.config import load_config
from userparam.messages import MessageFormatter
from userparam.services import create_param_validator


@click.command(name="describe")
@click.option(
    "--allow",
    "allowed",
    multiple=True,
    type=click.Choice(SUBTYPE_CHOICES),
    help="Allowed user subtype (repeatable)",
)
@click.option("--multi", is_flag=True, help="Describe a multi-value parameter")
@click.option("--name", "param_name", default="user", show_default=True, help="Parameter name")
@click.option("--config", "config_path", type=click.Path(), help="Path to userparam.yaml")
@click.option("--json-output", is_flag=True, help="Output in JSON format")
@click.option("--debug", is_flag=True, help="Show detailed debug information")
def describe(
    allowed: tuple[str, ...],
    multi: bool,
    param_name: str,
    config_path: str | None,
    json_output: bool,
    debug: bool,
) -> None:
    """Show parameter info and help text for a user parameter.

    Examples:
        userparam describe                         # Default subtypes
        userparam describe --allow name --allow id --multi
        userparam describe --json-output
    """
    configure_logging(debug)

    try:
        validator = create_param_validator(load_config(config_path))
        settings = build_user_settings(allowed, multi)
        info = validator.get_param_info(param_name, settings)
        formatter = MessageFormatter()
        help_text = {
            topic: formatter.format(msg)
            for topic, msg in validator.get_help_info(param_name, settings).items()
        }

        if json_output:
            output_result({"info": info, "help": help_text}, json_output)
        else:
            lines = [f"Parameter: {param_name}"]
            lines.extend(f"  {key}: {value}" for key, value in info.items() if key != "name")
            lines.append("Help:")
            lines.extend(f"  {text}" for text in help_text.values())
            output_result("\n".join(lines))
    except Exception as e:
        output_error(e, json_output, debug)
