import click

from userparam.cli.utils import configure_logging, get_env_flag, output_error, output_result
from userparam.config import load_config
from userparam.services import create_param_validator
from userparam.validator import UserSubtype

SUBTYPE_CHOICES = [st.value for st in UserSubtype]


def build_user_settings(
    allowed: tuple[str, ...], multi: bool, return_object: bool = False
) -> dict[str, object]:
    """Settings for the ad-hoc user parameter built from command line flags."""
    settings: dict[str, object] = {"type": "user", "isMulti": multi, "returnObject": return_object}
    if allowed:
        settings["allowedUserTypes"] = list(allowed)
    return settings


@click.command(name="check")
@click.argument("values", nargs=-1, required=True)
@click.option(
    "--allow",
    "allowed",
    multiple=True,
    type=click.Choice(SUBTYPE_CHOICES),
    help="Allowed user subtype (repeatable). Defaults to name, ip, cidr and interwiki.",
)
@click.option("--multi", is_flag=True, help="Treat the values as one multi-value parameter")
@click.option("--return-object", is_flag=True, help="Output the full identity, not just the name")
@click.option("--high-limits", is_flag=True, help="Apply the high multi-value limit")
@click.option("--config", "config_path", type=click.Path(), help="Path to userparam.yaml")
@click.option("--json-output", is_flag=True, help="Output in JSON format")
@click.option("--debug", is_flag=True, help="Show detailed debug information")
def check(
    values: tuple[str, ...],
    allowed: tuple[str, ...],
    multi: bool,
    return_object: bool,
    high_limits: bool,
    config_path: str | None,
    json_output: bool,
    debug: bool,
) -> None:
    """Validate values as a user parameter.

    Prints the canonical user name of each value, or the validation failure.
    Accounts known to the validator come from the ``users`` section of the
    configuration.

    Examples:
        userparam check Example                  # Validate a user name
        userparam check 127.0.0.1 --allow name   # Fails: IPs not allowed
        userparam check --multi Example ::1      # Multi-value parameter
        userparam check '#1' --allow id --return-object --json-output
    """
    if not high_limits:
        high_limits = get_env_flag("USERPARAM_HIGH_LIMITS")

    configure_logging(debug)

    if len(values) > 1 and not multi:
        raise click.UsageError("Pass --multi to check more than one value")

    try:
        validator = create_param_validator(load_config(config_path))
        settings = validator.normalize_settings(
            build_user_settings(allowed, multi, return_object), "user"
        )
        raw = list(values) if multi else values[0]
        result = validator.get_value("user", raw, settings, {"use_high_limits": high_limits})
        if return_object and not json_output:
            result = [_describe(u) for u in result] if multi else _describe(result)
        output_result(result, json_output)
    except Exception as e:
        output_error(e, json_output, debug)


def _describe(user: object) -> str:
    user_id = getattr(user, "id", 0)
    name = getattr(user, "name", user)
    return f"{name} (id {user_id})" if user_id else f"{name} (not registered)"
