"""
Configuration Module

Loads settings from environment variables and the .env file.
"""

import os
from dataclasses import dataclass
from typing import List, Optional
from pathlib import Path

# Load .env file if it exists
from dotenv import load_dotenv
PROJECT_ROOT = Path(__file__).resolve().parents[2]
ENV_PATH = PROJECT_ROOT / "config" / ".env"
load_dotenv(dotenv_path=ENV_PATH)

DEFAULT_MAX_NESTING_DEPTH = 100
VALID_LOG_LEVELS = ["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"]


@dataclass
class CalculatorConfig:
    """
    Calculator configuration.

    All settings can be overridden with environment variables.
    See config/.env.example for available options.
    """

    # === Evaluator Settings ===
    max_nesting_depth: int = DEFAULT_MAX_NESTING_DEPTH  # Parens/functions/unary signs

    # === Shell Settings ===
    show_banner: bool = True

    # === Logging Settings ===
    log_level: str = "WARNING"
    log_json: bool = False
    log_file: Optional[str] = None

    @classmethod
    def from_env(cls) -> "CalculatorConfig":
        """
        Load configuration from environment variables.

        Environment variables override defaults. Malformed numbers
        fall back to the default.
        """
        def get_bool(key: str, default: bool) -> bool:
            value = os.getenv(key, str(default)).lower()
            return value in ("true", "1", "yes")

        def get_int(key: str, default: int) -> int:
            try:
                return int(os.getenv(key, default))
            except ValueError:
                return default

        return cls(
            max_nesting_depth=get_int("CALC_MAX_NESTING_DEPTH", DEFAULT_MAX_NESTING_DEPTH),
            show_banner=get_bool("CALC_SHOW_BANNER", True),
            log_level=os.getenv("LOG_LEVEL", "WARNING").upper(),
            log_json=get_bool("LOG_JSON", False),
            log_file=os.getenv("LOG_FILE") or None,
        )

    def validate(self) -> List[str]:
        """
        Validate the configuration.

        Returns:
            List of error messages (empty if valid)
        """
        errors = []

        if self.max_nesting_depth < 1:
            errors.append("CALC_MAX_NESTING_DEPTH must be at least 1")

        if self.log_level.upper() not in VALID_LOG_LEVELS:
            errors.append(f"LOG_LEVEL must be one of: {', '.join(VALID_LOG_LEVELS)}")

        return errors

    def __post_init__(self):
        errors = self.validate()
        if errors:
            raise ValueError(f"Configuration errors: {errors}")


def load_config() -> CalculatorConfig:
    """
    Load configuration from environment.

    Usage:
        from exprcalc.config import load_config
        config = load_config()
    """
    return CalculatorConfig.from_env()


if __name__ == "__main__":
    # Run this file directly to see current config
    config = load_config()
    print("Current Configuration:")
    print(f"  Max Nesting Depth: {config.max_nesting_depth}")
    print(f"  Show Banner: {config.show_banner}")
    print(f"  Log Level: {config.log_level}")
    print(f"  JSON Logs: {config.log_json}")
    print(f"  Log File: {config.log_file or 'None'}")
