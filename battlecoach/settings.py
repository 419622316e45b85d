"""ABOUTME: Configuration logic and path settings for the project.
ABOUTME: Provides paths for the scoring and logging configuration files."""

from pathlib import Path

from pydantic import computed_field
from pydantic_settings import BaseSettings, SettingsConfigDict

from battlecoach import __version__


def _get_project_root() -> Path:
    """Find project root by looking for pyproject.toml."""
    current = Path(__file__).resolve().parent
    while current != current.parent:
        if (current / "pyproject.toml").exists():
            return current
        current = current.parent
    return Path(__file__).resolve().parent.parent


class Settings(BaseSettings):
    """Contains settings for this project."""

    model_config = SettingsConfigDict(env_prefix="BATTLECOACH_")

    VERSION: str = __version__
    """Project version."""

    PROJECT_ROOT: Path = _get_project_root()
    """Root directory of the project."""

    @computed_field  # type: ignore[prop-decorator]
    @property
    def configs_dir(self) -> Path:
        """Directory containing configuration files."""
        return self.PROJECT_ROOT / "configs"

    @computed_field  # type: ignore[prop-decorator]
    @property
    def scoring_config_path(self) -> Path:
        """Path to the scoring.yml file with the analyzer weights."""
        return self.configs_dir / "scoring.yml"

    @computed_field  # type: ignore[prop-decorator]
    @property
    def logging_config_path(self) -> Path:
        """Path to the logging.yml dictConfig file."""
        return self.configs_dir / "logging.yml"


settings = Settings()
