import json
import logging
import os
import traceback
from typing import Any

import click

from userparam.validator import TypeConverter


def get_env_flag(env_var: str, default: bool = False) -> bool:
    """Get a boolean flag from an environment variable.

    Args:
        env_var: Name of the environment variable
        default: Default value if environment variable is not set

    Returns:
        True if the environment variable is set to "1", "true", or "yes" (case insensitive)
        False otherwise
    """
    value = os.environ.get(env_var, "").lower()
    return value in ("1", "true", "yes") if value else default


def configure_logging(debug: bool = False) -> None:
    """Configure logging for all modules.

    Args:
        debug: Whether to enable debug logging
    """
    if not debug:
        debug = get_env_flag("USERPARAM_DEBUG")

    log_level = logging.DEBUG if debug else logging.WARNING

    root_logger = logging.getLogger()
    root_logger.setLevel(log_level)

    # Remove any existing handlers to avoid duplicate messages
    for handler in root_logger.handlers[:]:
        root_logger.removeHandler(handler)

    handler = logging.StreamHandler()
    handler.setLevel(log_level)
    formatter = logging.Formatter("%(levelname)s:%(name)s:%(message)s")
    handler.setFormatter(formatter)
    root_logger.addHandler(handler)

    logging.getLogger("userparam").setLevel(log_level)


def format_error(error: Exception, debug: bool = False) -> dict[str, Any]:
    """Format an error for output.

    Validation failures also report their failure code.
    """
    error_info: dict[str, Any] = {"error": str(error)}

    code = getattr(error, "code", None)
    if isinstance(code, str):
        error_info["code"] = code

    if debug:
        error_info["traceback"] = traceback.format_exc()
        error_info["type"] = error.__class__.__name__

    return error_info


def output_result(result: Any, json_output: bool = False) -> None:
    """Output a result in either JSON or human-readable format."""
    if json_output:
        payload = {"status": "ok", "result": TypeConverter.serialize_for_output(result)}
        click.echo(json.dumps(payload, indent=2, default=str))
    elif isinstance(result, list):
        for row in result:
            click.echo(row)
    else:
        click.echo(result)


def output_error(error: Exception, json_output: bool = False, debug: bool = False) -> None:
    """Output an error in either JSON or human-readable format and abort."""
    error_info = format_error(error, debug)

    if json_output:
        click.echo(json.dumps({"status": "error", **error_info}, indent=2))
    else:
        click.echo(f"Error: {error_info['error']}", err=True)
        if debug and "traceback" in error_info:
            click.echo("\nTraceback:", err=True)
            click.echo(error_info["traceback"], err=True)

    raise click.Abort()
