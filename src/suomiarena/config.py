"""Configuration settings for the practice engine and data server."""
import os
from dataclasses import dataclass, field
from pathlib import Path
from typing import Optional

from dotenv import load_dotenv

# Define base directory
BASE_DIR = Path(__file__).parent.parent.parent

# Load environment variables from .env file
env_file = ".env.test" if os.getenv("ENV") == "test" else ".env"
load_dotenv(env_file)


# Define data directories from environment variables
DATA_DIR = Path(os.getenv("DATA_DIR", "./data"))
CSV_FILE = DATA_DIR / os.getenv("CSV_FILE_NAME", "suomiarena-data.csv")

# Game settings
MEMORISE_MAX_REQUIRED = 3  # correct answers a memorise item can escalate to
VOCABULARY_CYCLE_SIZE = 20  # words per vocabulary cycle ("1a", "1b", ...)


def ensure_directories() -> None:
    """Ensure all required directories exist."""
    directories = [
        DATA_DIR,
    ]

    for directory in directories:
        directory.mkdir(parents=True, exist_ok=True)


@dataclass
class PathSettings:
    """Path configuration settings."""
    base_dir: Path = BASE_DIR
    data_dir: Path = DATA_DIR
    csv_file: Path = CSV_FILE


@dataclass
class DatabaseSettings:
    """Local storage database settings."""
    url: str = os.getenv("DATABASE_URL", "sqlite:///suomiarena.db")
    echo: bool = os.getenv("DATABASE_ECHO", "false").lower() == "true"


@dataclass
class LoggingSettings:
    """Logging configuration settings."""
    level: str = os.getenv("LOG_LEVEL", "INFO")
    format: str = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
    dir: Optional[str] = os.getenv("LOG_DIR", None)
    rotation: str = os.getenv("LOG_ROTATION", "midnight")
    interval: int = int(os.getenv("LOG_INTERVAL", "1"))
    backup_count: int = int(os.getenv("LOG_BACKUP_COUNT", "7"))


@dataclass
class ServerSettings:
    """Data server settings."""
    host: str = os.getenv("SERVER_HOST", "127.0.0.1")
    port: int = int(os.getenv("SERVER_PORT", "3001"))


@dataclass
class PersistenceSettings:
    """Progress persistence settings."""
    api_base_url: str = os.getenv("API_BASE_URL", "http://localhost:3001/api")
    timeout: float = float(os.getenv("API_TIMEOUT", "5.0"))
    storage_key: str = os.getenv("STORAGE_KEY", "suomiarena-progress-v1")
    remote_enabled: bool = os.getenv("REMOTE_ENABLED", "true").lower() == "true"


@dataclass
class GameSettings:
    """Practice session settings."""
    memorise_max_required: int = int(os.getenv("MEMORISE_MAX_REQUIRED", str(MEMORISE_MAX_REQUIRED)))
    vocabulary_cycle_size: int = int(os.getenv("VOCABULARY_CYCLE_SIZE", str(VOCABULARY_CYCLE_SIZE)))


@dataclass
class MonitoringSettings:
    """Prometheus exporter settings."""
    enabled: bool = os.getenv("METRICS_ENABLED", "false").lower() == "true"
    port: int = int(os.getenv("METRICS_PORT", "9090"))


def get_path_settings() -> PathSettings:
    """Get path settings."""
    return PathSettings()


def get_database_settings() -> DatabaseSettings:
    """Get database settings."""
    return DatabaseSettings()


def get_logging_settings() -> LoggingSettings:
    """Get logging settings."""
    return LoggingSettings()


def get_server_settings() -> ServerSettings:
    """Get server settings."""
    return ServerSettings()


def get_persistence_settings() -> PersistenceSettings:
    """Get persistence settings."""
    return PersistenceSettings()


def get_game_settings() -> GameSettings:
    """Get game settings."""
    return GameSettings()


def get_monitoring_settings() -> MonitoringSettings:
    """Get monitoring settings."""
    return MonitoringSettings()


@dataclass
class Settings:
    """Main settings class that combines all configuration settings."""
    paths: PathSettings = field(default_factory=get_path_settings)
    database: DatabaseSettings = field(default_factory=get_database_settings)
    logging: LoggingSettings = field(default_factory=get_logging_settings)
    server: ServerSettings = field(default_factory=get_server_settings)
    persistence: PersistenceSettings = field(default_factory=get_persistence_settings)
    game: GameSettings = field(default_factory=get_game_settings)
    monitoring: MonitoringSettings = field(default_factory=get_monitoring_settings)

    def validate(self) -> None:
        """Validate settings and raise ValueError if invalid."""
        if not self.persistence.storage_key:
            raise ValueError("STORAGE_KEY is required")

        if self.persistence.timeout <= 0:
            raise ValueError("API_TIMEOUT must be positive")

        if self.game.memorise_max_required < 1:
            raise ValueError("MEMORISE_MAX_REQUIRED must be at least 1")

        if self.game.vocabulary_cycle_size < 1:
            raise ValueError("VOCABULARY_CYCLE_SIZE must be positive")

        if not 0 < self.server.port < 65536:
            raise ValueError("SERVER_PORT must be a valid TCP port")


# Create global settings instance
settings = Settings()
settings.validate()
