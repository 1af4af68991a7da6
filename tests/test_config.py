"""
🧪 Tests Configuration
Settings defaults, environment overrides and validation
"""

import pytest
from pydantic import ValidationError

from core.config import Settings, get_settings


class TestSettings:
    """Test suite for Settings"""

    def test_defaults(self, monkeypatch):
        for name in ("POPULATION_SIZE", "MAX_GENERATIONS", "LOG_LEVEL", "ENVIRONMENT"):
            monkeypatch.delenv(f"NUMBERS_GA_{name}", raising=False)
        settings = Settings(_env_file=None)

        assert settings.population_size == 1000
        assert settings.max_generations == 1000
        assert settings.crossover_prob == 0.9
        assert settings.number_mutation_prob == 0.2
        assert settings.operator_mutation_prob == 0.1
        assert settings.random_seed is None
        assert settings.log_level == "INFO"
        assert settings.is_development()

    def test_environment_override(self, monkeypatch):
        monkeypatch.setenv("NUMBERS_GA_POPULATION_SIZE", "50")
        monkeypatch.setenv("NUMBERS_GA_RANDOM_SEED", "17")
        monkeypatch.setenv("NUMBERS_GA_ENVIRONMENT", "testing")

        settings = Settings(_env_file=None)

        assert settings.population_size == 50
        assert settings.random_seed == 17
        assert settings.is_testing()
        assert not settings.is_production()

    def test_env_file(self, tmp_path):
        env_file = tmp_path / ".env"
        env_file.write_text("NUMBERS_GA_MAX_GENERATIONS=25\n", encoding="utf-8")

        settings = Settings(_env_file=env_file)

        assert settings.max_generations == 25

    def test_log_level_normalized(self):
        assert Settings(log_level="debug").log_level == "DEBUG"

    def test_invalid_log_level(self):
        with pytest.raises(ValidationError, match="Invalid log level"):
            Settings(log_level="VERBOSE")

    @pytest.mark.parametrize("field,value", [
        ("population_size", 0),
        ("max_generations", -5),
        ("crossover_prob", 1.1),
        ("number_mutation_prob", -0.01),
    ])
    def test_bounds(self, field, value):
        with pytest.raises(ValidationError):
            Settings(**{field: value})

    def test_logs_dir_absolute(self):
        assert Settings(logs_dir="relative/logs").logs_dir.is_absolute()

    def test_get_settings_cached(self):
        get_settings.cache_clear()
        assert get_settings() is get_settings()
        get_settings.cache_clear()

    def test_only_runtime_fields(self):
        """Project metadata lives in the core package, not in the settings"""
        import core

        assert not {"project_name", "version", "description"} & set(Settings.model_fields)
        assert core.__version__ == "0.1.0"
