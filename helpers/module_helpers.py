#!/usr/bin/env python3
"""Common utilities for module scripts."""

import argparse
import logging
import subprocess


def run_command(cmd: list[str], check: bool = True) -> subprocess.CompletedProcess:
    """Run a command to completion, capturing its output as text.

    Args:
        cmd: Command list to execute
        check: Raise on a non-zero exit status

    Returns:
        The completed process

    Raises:
        subprocess.CalledProcessError: If check is set and the command fails
        FileNotFoundError: If the executable does not exist
    """
    logging.getLogger("helpers").debug("Running: %s", " ".join(cmd))
    return subprocess.run(cmd, capture_output=True, text=True, check=check)


def launch_detached(cmd: list[str]) -> subprocess.Popen:
    """Start a command in its own session and return without waiting.

    The child outlives the caller; its output is discarded.

    Raises:
        OSError: If the process cannot be started
    """
    logging.getLogger("helpers").debug("Launching detached: %s", " ".join(cmd))
    return subprocess.Popen(
        cmd,
        stdin=subprocess.DEVNULL,
        stdout=subprocess.DEVNULL,
        stderr=subprocess.DEVNULL,
        start_new_session=True,
    )


def create_module_parser(
    prog: str,
    description: str,
    subcommands: dict[str, dict]
) -> argparse.ArgumentParser:
    """Create a standardized argument parser for a module.

    Args:
        prog: Program name
        description: Module description
        subcommands: Dictionary mapping command names to their config:
            - 'help': Help text for the subcommand
            - 'arguments': Optional list of argument configs as tuples:
                (args, kwargs) where args are positional arguments to add_argument
                and kwargs are keyword arguments

    Example:
        parser = create_module_parser(
            "vchange",
            "Browse and apply themes",
            {
                "apply-theme": {
                    "help": "Switch to a theme",
                    "arguments": [
                        (["name"], {"help": "Theme name"}),
                    ]
                }
            }
        )

    Returns:
        Configured ArgumentParser with a global -v/--verbose flag
    """
    parser = argparse.ArgumentParser(prog=prog, description=description)
    parser.add_argument(
        "-v", "--verbose",
        action="store_true",
        help="Enable verbose output",
    )
    subparsers = parser.add_subparsers(dest="command", required=True)

    for cmd_name, cmd_config in subcommands.items():
        subparser = subparsers.add_parser(cmd_name, help=cmd_config.get("help", ""))

        for args, kwargs in cmd_config.get("arguments", []):
            subparser.add_argument(*args, **kwargs)

    return parser
