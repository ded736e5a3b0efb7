import os
from dataclasses import dataclass
from functools import lru_cache

from dotenv import load_dotenv

load_dotenv()

ID_STRATEGIES = ("max_plus_one", "monotonic")
LOG_LEVELS = ("CRITICAL", "ERROR", "WARNING", "INFO", "DEBUG")


@dataclass(frozen=True)
class Settings:
    """Application settings loaded from environment variables."""

    # API
    api_host: str = os.getenv("API_HOST", "0.0.0.0")
    api_port: int = int(os.getenv("API_PORT", "8000"))
    api_reload: bool = os.getenv("API_RELOAD", "true").lower() == "true"

    # Logging
    log_level: str = os.getenv("LOG_LEVEL", "INFO").upper()

    # Expenses
    expenses_path: str = os.getenv("EXPENSES_PATH", "/api/expenses")
    seed_samples: bool = os.getenv("EXPENSES_SEED_SAMPLES", "true").lower() == "true"
    # "max_plus_one" can reissue the id of a deleted max-id record, "monotonic" never does
    id_strategy: str = os.getenv("EXPENSES_ID_STRATEGY", "max_plus_one")

    def __post_init__(self) -> None:
        """Validate settings after initialization."""
        if self.id_strategy not in ID_STRATEGIES:
            raise ValueError(
                f"EXPENSES_ID_STRATEGY must be one of {list(ID_STRATEGIES)}, "
                f"got {self.id_strategy!r}"
            )

        if self.log_level not in LOG_LEVELS:
            raise ValueError(f"LOG_LEVEL must be one of {list(LOG_LEVELS)}, got {self.log_level!r}")

        if not self.expenses_path.startswith("/"):
            raise ValueError("EXPENSES_PATH must start with '/'")


@lru_cache
def get_settings() -> Settings:
    """Get cached settings instance."""
    return Settings()


# Global settings instance
settings = get_settings()
