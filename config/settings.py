from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
    )

    # Layout (defaults: 2025-01-01T00:00:00Z epoch, 1024 machines, 4096 ids/ms)
    SNOWFLAKE_EPOCH_START_MS: int = 1_735_689_600_000
    SNOWFLAKE_EPOCH_OFFSET_MS: int = 0
    SNOWFLAKE_MACHINE_ID_BITS: int = 10
    SNOWFLAKE_SEQUENCE_BITS: int = 12

    # Host: each running instance must get its own machine id
    SNOWFLAKE_MACHINE_ID: int = 0

    # App
    LOG_LEVEL: str = "INFO"


settings = Settings()
