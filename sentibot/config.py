"""
Application configuration: reads all settings from environment variables.
"""

from typing import List

from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    # ── App ──────────────────────────────────────────────
    APP_NAME: str = "Sentibot"
    APP_VERSION: str = "1.0.0"
    DEBUG: bool = False
    LOG_LEVEL: str = "INFO"

    # ── Knowledge Base ───────────────────────────────────
    KNOWLEDGE_BASE_PATH: str = ""  # empty -> packaged default
    QUIT_COMMANDS: str = "quit,exit,bye"

    # ── Analytics ────────────────────────────────────────
    ANALYTICS_URL: str = "https://api.example.com/analytics"
    ANALYTICS_ENABLED: bool = True
    ANALYTICS_TIMEOUT: float = 10.0
    ANALYTICS_DRAIN_TIMEOUT: float = 2.0

    # ── Population Pipeline ──────────────────────────────
    POPULATION_API_URL: str = (
        "https://api.worldbank.org/v2/country/WLD/indicator/SP.POP.TOTL"
        "?format=json&per_page=1000"
    )
    POPULATION_PROJECTION_YEARS: int = 50
    CHART_PATH: str = "world_population_growth.svg"

    class Config:
        env_file = ".env"
        env_file_encoding = "utf-8"

    @property
    def quit_commands(self) -> List[str]:
        return [c.strip().lower() for c in self.QUIT_COMMANDS.split(",") if c.strip()]

    @property
    def log_level(self) -> str:
        return "DEBUG" if self.DEBUG else self.LOG_LEVEL.upper()


settings = Settings()
