from pydantic import field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    model_config = SettingsConfigDict(
        env_file=".env",
        env_ignore_empty=True,
        extra="ignore",
    )

    # Marker replaced by bound arguments in query templates
    PLACEHOLDER: str = "?"

    # Player move notifier defaults (seconds / number of positions kept)
    PLAYER_MOVE_INTERVAL: float = 0.5
    PLAYER_MOVE_HISTORY_LENGTH: int = 20

    # Connect timeout (seconds) for connect_handle()
    EXTERNAL_DB_CONNECT_TIMEOUT: int = 10

    @field_validator("PLACEHOLDER")
    @classmethod
    def _single_char(cls, v: str) -> str:
        if len(v) != 1:
            raise ValueError("PLACEHOLDER must be a single character")
        return v

    @field_validator("PLAYER_MOVE_INTERVAL")
    @classmethod
    def _positive_interval(cls, v: float) -> float:
        if v <= 0:
            raise ValueError("PLAYER_MOVE_INTERVAL must be positive")
        return v

    @field_validator("PLAYER_MOVE_HISTORY_LENGTH")
    @classmethod
    def _positive_history(cls, v: int) -> int:
        if v < 1:
            raise ValueError("PLAYER_MOVE_HISTORY_LENGTH must be at least 1")
        return v


settings = Settings()  # type: ignore
