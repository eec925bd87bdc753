from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    MAX_MONTHS: int = 600
    PAID_OFF_EPSILON: float = 0.01
    DEFAULT_CARD_RATE: float = 0.20
    CARD_MIN_PAYMENT_RATE: float = 0.05
    UPCOMING_WINDOW_DAYS: int = 7
    CORS_ORIGINS: list[str] = ["http://localhost:3000"]
    LOG_LEVEL: str = "INFO"

    model_config = {"env_file": ".env", "env_file_encoding": "utf-8"}


settings = Settings()
