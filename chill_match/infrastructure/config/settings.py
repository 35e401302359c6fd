from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    model_config = SettingsConfigDict(env_file=".env", env_file_encoding="utf-8", extra="ignore")

    DATABASE_URL: str
    CREATE_TABLES: bool = False


class ScoringSettings(BaseSettings):
    model_config = SettingsConfigDict(env_file=".env", env_file_encoding="utf-8", env_prefix="MATCH_", extra="ignore")

    # point budgets, must add up to 100
    shared_services_weight: int = 30
    shared_history_weight: int = 30
    genre_weight: int = 25
    frequency_weight: int = 15

    frequency_tolerance: int = 10
    default_min_score: int = 0
