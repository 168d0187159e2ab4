"""Shared CLI utility functions for GitFlow Pairing.

Contains infrastructure helpers used by every CLI command: logging setup and
the conversion of errors into a single terminal message.
"""

import logging
import sys
import traceback

import click

from .utils.debug import is_debug_mode


def setup_logging(log: str, module_name: str = __name__) -> logging.Logger:
    """Configure logging for a CLI command based on the --log option value.

    Args:
        log: Value of the --log CLI option.  One of "none", "INFO", "DEBUG"
             (case-insensitive).
        module_name: The ``__name__`` of the calling module.

    Returns:
        A configured :class:`logging.Logger` for the calling module.
    """
    if log.upper() != "NONE":
        log_level = getattr(logging, log.upper())
        logging.basicConfig(
            level=log_level,
            format="[%(levelname)s] %(filename)s:%(lineno)d - %(message)s",
            handlers=[logging.StreamHandler(sys.stderr)],
            force=True,
        )

        # Propagate the level to the package namespace so all sub-module
        # loggers pick it up without extra configuration.
        logging.getLogger("gitflow_pairing").setLevel(log_level)

        module_logger = logging.getLogger(module_name)
        module_logger.debug(f"Logging enabled at {log.upper()} level")
    else:
        # Hooks run on every commit; stay quiet unless asked.
        logging.getLogger("gitflow_pairing").setLevel(logging.CRITICAL)
        module_logger = logging.getLogger(module_name)

    return module_logger


def format_error_chain(error: BaseException) -> str:
    """Join an exception's message with the messages of its causes.

    Example::

        >>> try:
        ...     try:
        ...         raise OSError("disk full")
        ...     except OSError as e:
        ...         raise RuntimeError("write failed") from e
        ... except RuntimeError as e:
        ...     format_error_chain(e)
        'write failed: disk full'
    """
    messages = []
    current = error
    while current is not None:
        message = str(current)
        if message and message not in messages:
            messages.append(message)
        current = current.__cause__
    return ": ".join(messages)


def exit_with_error(error: BaseException) -> None:
    """Print ``error`` to stderr and exit with status 1.

    The traceback is included when GITFLOW_PAIRING_DEBUG is set.
    """
    click.echo(f"❌ Error: {format_error_chain(error)}", err=True)
    if is_debug_mode():
        click.echo(
            "".join(traceback.format_exception(type(error), error, error.__traceback__)),
            err=True,
        )
    sys.exit(1)
