"""
Application configuration using Pydantic settings.
"""

from pydantic_settings import BaseSettings, SettingsConfigDict

from typing import List, Optional


class Settings(BaseSettings):
    """Application settings."""

    # App
    app_name: str = "Flowledger"
    log_level: str = "INFO"

    # AI Provider
    ai_provider: str = "openrouter"  # openrouter, ollama, openai, anthropic
    ai_model: str = "amazon/nova-2-lite-v1:free"
    ai_base_url: Optional[str] = None  # For Ollama: http://localhost:11434
    ai_max_tokens: int = 4000
    ai_temperature: float = 0.7
    ai_app_url: str = "http://localhost:3000"
    ai_app_title: str = "AI Expense Tracker"
    ai_analysis_limit: int = 50

    # API Keys (optional based on provider)
    openrouter_api_key: Optional[str] = None
    openai_api_key: Optional[str] = None
    anthropic_api_key: Optional[str] = None

    # Calendar (Python weekday numbering: 0 = Monday, 6 = Sunday)
    first_weekday: int = 6
    calendar_first_weekday: int = 0

    # Charts
    income_base_color: str = "#22C55E"
    expense_base_color: str = "#EF4444"
    investment_base_color: str = "#3B82F6"

    # Default categories
    income_categories: List[str] = ["Salary", "Bonus", "Other Income"]
    expense_categories: List[str] = [
        "Food",
        "Dining",
        "Transport",
        "Housing",
        "Utilities",
        "Entertainment",
        "Shopping",
        "Health",
    ]
    investment_categories: List[str] = ["Stocks", "Savings", "Retirement"]

    # Server
    api_host: str = "0.0.0.0"
    api_port: int = 8000
    frontend_url: str = "http://localhost:5173"

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False
    )


# Global settings instance
settings = Settings()
