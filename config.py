"""
config.py — Application settings from environment variables.
Every variable uses the SHUNT_CALC_ prefix.
"""
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    # Logging
    log_level: str = "INFO"

    # CLI
    repl_prompt: str = "> "
    float_digits: int = 0  # 0 = print repr() of non-integral results

    # App
    app_title: str = "ShuntCalc"
    app_version: str = "0.1.0"

    model_config = SettingsConfigDict(env_prefix="SHUNT_CALC_", env_file=".env", extra="ignore")
