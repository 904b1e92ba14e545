"""Helper utilities for vchange modules."""

from .general_helpers import ScriptConfig, SUITE_NAME
from .module_helpers import (
    run_command,
    launch_detached,
    create_module_parser,
)
from .xdg_helpers import get_xdg_config_file, get_xdg_data_file

__all__ = [
    "ScriptConfig",
    "SUITE_NAME",
    "run_command",
    "launch_detached",
    "create_module_parser",
    "get_xdg_config_file",
    "get_xdg_data_file",
]
