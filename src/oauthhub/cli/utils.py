import json
import logging
import os
import traceback
from pathlib import Path
from typing import Any

import click

from ..config import load_config
from ..service import OAuthService


def get_env_flag(env_var: str, default: bool = False) -> bool:
    """Get a boolean flag from an environment variable.

    Returns:
        True if the environment variable is set to "1", "true", or "yes" (case insensitive)
    """
    value = os.environ.get(env_var, "").lower()
    return value in ("1", "true", "yes") if value else default


def configure_logging(debug: bool = False) -> None:
    """Configure logging for all modules.

    Args:
        debug: Whether to enable debug logging
    """
    if not debug:
        debug = get_env_flag("OAUTHHUB_DEBUG")

    log_level = logging.DEBUG if debug else logging.WARNING

    root_logger = logging.getLogger()
    root_logger.setLevel(log_level)

    # Remove any existing handlers to avoid duplicate messages
    for handler in root_logger.handlers[:]:
        root_logger.removeHandler(handler)

    handler = logging.StreamHandler()
    handler.setLevel(log_level)
    handler.setFormatter(logging.Formatter("%(levelname)s:%(name)s:%(message)s"))
    root_logger.addHandler(handler)

    # httpx logs every request at INFO, including full URLs
    logging.getLogger("httpx").setLevel(logging.DEBUG if debug else logging.WARNING)


def load_service(config_path: str | None) -> OAuthService:
    """Build a service from the config file (or the default search path)."""
    config = load_config(Path(config_path) if config_path else None)
    return OAuthService.from_config(config)


def format_error(error: Exception, debug: bool = False) -> dict[str, Any]:
    error_info = {"error": str(error)}

    if debug:
        error_info["traceback"] = traceback.format_exc()
        error_info["type"] = error.__class__.__name__

    return error_info


def output_result(result: Any, json_output: bool = False) -> None:
    """Output a result in either JSON or human-readable format."""
    if json_output:
        click.echo(json.dumps({"status": "ok", "result": result}, indent=2, default=str))
    elif isinstance(result, list):
        for row in result:
            click.echo(row)
    elif isinstance(result, dict):
        click.echo(json.dumps(result, indent=2, default=str))
    else:
        click.echo(result)


def output_error(error: Exception, json_output: bool = False, debug: bool = False) -> None:
    """Output an error in either JSON or human-readable format, then abort."""
    error_info = format_error(error, debug)

    if json_output:
        click.echo(json.dumps({"status": "error", **error_info}, indent=2))
    else:
        click.echo(f"Error: {error_info['error']}", err=True)
        if debug and "traceback" in error_info:
            click.echo("\nTraceback:", err=True)
            click.echo(error_info["traceback"], err=True)

    raise click.Abort()
