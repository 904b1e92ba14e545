"""XDG Base Directory helpers for locating application config and data files."""

from pathlib import Path
from xdg import BaseDirectory


def get_xdg_config_file(application: str, filename: str) -> Path:
    """Get the path to an application's config file using XDG Base Directory spec.

    Args:
        application: Name of the application (e.g., 'omarchy', 'nvim')
        filename: Relative path below the application's config dir

    Returns:
        Path to the config file (may not exist)

    Examples:
        >>> get_xdg_config_file('omarchy', 'current/theme')
        PosixPath('/home/user/.config/omarchy/current/theme')
    """
    config_dir = Path(BaseDirectory.xdg_config_home) / application
    return config_dir / filename


def get_xdg_data_file(application: str, filename: str) -> Path:
    """Get the path to an application's data file under XDG_DATA_HOME.

    Examples:
        >>> get_xdg_data_file('omarchy', 'themes')
        PosixPath('/home/user/.local/share/omarchy/themes')
    """
    data_dir = Path(BaseDirectory.xdg_data_home) / application
    return data_dir / filename
