"""Configuration management for Budgetbook.

Reads configuration from ~/.config/budgetbook.toml and creates default config if needed.
"""

from pathlib import Path
from dataclasses import dataclass
import tomllib
import tomli_w


@dataclass
class Config:
    """Application configuration.

    Attributes:
        base_dir: Root for data, logs and exports unless overridden.
        db_data_dir: Directory holding the sqlite file with the month documents.
        db_filename: Name of the sqlite file.
        log_level: Level name for both log handlers (e.g. "INFO").
        log_dir: Directory for the dated log files.
        export_dir: Default destination of `month export`.
    """

    base_dir: Path
    db_data_dir: Path
    db_filename: str
    log_level: str
    log_dir: Path
    export_dir: Path

    @property
    def db_path(self) -> Path:
        """Get the full database path (data_dir/filename)."""
        return self.db_data_dir / self.db_filename

    @classmethod
    def default(cls) -> "Config":
        """Create a Config with default values."""
        home = Path.home()
        base_dir = home / "data" / "budgetbook"
        return cls(
            base_dir=base_dir,
            db_data_dir=base_dir / "db",
            db_filename="budgetbook.db",
            log_level="INFO",
            log_dir=base_dir / "logs",
            export_dir=base_dir / "exports",
        )


def get_config_path() -> Path:
    """Get the path to the config file."""
    return Path.home() / ".config" / "budgetbook.toml"


def get_migrations_dir() -> Path:
    """Get the path to the migrations directory.

    This is always relative to the code location, not configurable.
    """
    return Path(__file__).parent / "db" / "migrations"


def load_config() -> Config:
    """Load configuration from file, creating default if it doesn't exist.

    Returns:
        Config object with loaded or default values.
    """
    config_path = get_config_path()

    # First run: write the defaults so there is a file to edit
    if not config_path.exists():
        config = Config.default()
        _write_config(config)
        return config

    # Load existing config
    with open(config_path, "rb") as f:
        data = tomllib.load(f)

    return config_from_dict(data)


def config_from_dict(data: dict) -> Config:
    """Build a Config from parsed TOML data, using defaults for missing values.

    Args:
        data: Dictionary as produced by tomllib.

    Returns:
        Config object.
    """
    # Every section is optional; paths default to live under base_dir
    base_dir = Path(data.get("base_dir", Path.home() / "data" / "budgetbook"))

    db_config = data.get("database", {})
    db_data_dir = Path(db_config.get("data_dir", base_dir / "db"))
    db_filename = db_config.get("filename", "budgetbook.db")

    log_config = data.get("logging", {})
    log_level = log_config.get("level", "INFO")
    log_dir = Path(log_config.get("log_dir", base_dir / "logs"))

    # Where `month export` writes files when no --output is given
    export_config = data.get("export", {})
    export_dir = Path(export_config.get("export_dir", base_dir / "exports"))

    return Config(
        base_dir=base_dir,
        db_data_dir=db_data_dir,
        db_filename=db_filename,
        log_level=log_level,
        log_dir=log_dir,
        export_dir=export_dir,
    )


def config_to_dict(config: Config) -> dict:
    """Convert a Config to the TOML structure written to disk."""
    return {
        "base_dir": str(config.base_dir),
        "database": {
            "data_dir": str(config.db_data_dir),
            "filename": config.db_filename,
        },
        "logging": {
            "level": config.log_level,
            "log_dir": str(config.log_dir),
        },
        "export": {
            "export_dir": str(config.export_dir),
        },
    }


def _write_config(config: Config) -> None:
    """Write config to the config file.

    Args:
        config: Config object to write.
    """
    config_path = get_config_path()

    # Ensure config directory exists
    config_path.parent.mkdir(parents=True, exist_ok=True)

    # Write TOML file
    with open(config_path, "wb") as f:
        tomli_w.dump(config_to_dict(config), f)
