"""
⚙️ Configuration Management
Centralized configuration for the numbers game solver
"""

from pathlib import Path
from typing import Optional
from functools import lru_cache

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Main solver configuration, overridable through NUMBERS_GA_* variables"""

    model_config = SettingsConfigDict(
        env_prefix="NUMBERS_GA_",
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    # Environment
    environment: str = Field(default="development")
    debug: bool = Field(default=False)
    log_level: str = Field(default="INFO")
    log_to_file: bool = Field(default=False)
    logs_dir: Path = Field(default=Path("logs"))

    # Genetic algorithm
    population_size: int = Field(default=1000, ge=1)
    max_generations: int = Field(default=1000, ge=1)
    crossover_prob: float = Field(default=0.9, ge=0.0, le=1.0)
    number_mutation_prob: float = Field(default=0.2, ge=0.0, le=1.0)
    operator_mutation_prob: float = Field(default=0.1, ge=0.0, le=1.0)
    random_seed: Optional[int] = Field(default=None)

    @field_validator("logs_dir")
    @classmethod
    def ensure_path_absolute(cls, v):
        """Make sure the logs directory is absolute"""
        if isinstance(v, str):
            v = Path(v)
        return v.resolve()

    @field_validator("log_level")
    @classmethod
    def validate_log_level(cls, v):
        """Validate the log level"""
        valid_levels = ["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"]
        if v.upper() not in valid_levels:
            raise ValueError(f"Invalid log level. Must be one of: {valid_levels}")
        return v.upper()

    def is_production(self) -> bool:
        return self.environment.lower() == "production"

    def is_development(self) -> bool:
        return self.environment.lower() == "development"

    def is_testing(self) -> bool:
        return self.environment.lower() == "testing"


@lru_cache()
def get_settings() -> Settings:
    """
    Return the configuration instance.
    Cached so the environment is only read once per process.
    """
    return Settings()
