"""
Search path configuration for theme lookup.

Builds the ordered list of icon roots from the XDG environment variables.
"""

from pathlib import Path

from pydantic_settings import BaseSettings

from hyprcursor.errors import ConfigurationError

DEFAULT_DATA_ROOT = Path("/usr/share/icons")
ICONS_SUBDIR = "icons"


class SearchPathSettings(BaseSettings):
    """Environment-derived settings for the theme search path."""

    # XDG Settings
    xdg_data_dirs: str | None = None
    xdg_data_home: str | None = None
    xdg_home: str | None = None

    # Home directory
    home: str | None = None

    model_config = {"env_prefix": ""}

    def home_dir(self) -> Path:
        """
        Get the user's home directory.

        Returns:
            $XDG_HOME if set, else $HOME

        Raises:
            ConfigurationError: If neither variable is set
        """
        home = self.xdg_home or self.home
        if not home:
            raise ConfigurationError("$HOME is not set")
        return Path(home)

    def user_roots(self) -> list[Path]:
        """
        Get the per-user icon roots.

        Returns:
            [$XDG_DATA_HOME/icons, ~/.icons]
        """
        home = self.home_dir()
        data_home = Path(self.xdg_data_home) if self.xdg_data_home else home / ".local/share"
        return [data_home / ICONS_SUBDIR, home / ".icons"]

    def system_roots(self) -> list[Path]:
        """
        Get the system icon roots.

        Returns:
            One <dir>/icons per $XDG_DATA_DIRS entry, or /usr/share/icons
        """
        if self.xdg_data_dirs is None:
            return [DEFAULT_DATA_ROOT]
        return [Path(entry) / ICONS_SUBDIR for entry in self.xdg_data_dirs.split(":") if entry]

    def search_roots(self) -> list[Path]:
        """Get every icon root, user roots first."""
        return self.user_roots() + self.system_roots()


def default_search_roots() -> list[Path]:
    """
    Get the icon roots for the current environment.

    Returns:
        Ordered list of directories to scan for themes
    """
    return SearchPathSettings().search_roots()
