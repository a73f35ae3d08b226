"""Runtime settings, read from the environment or a .env file."""

from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    # === HTTP server ===
    HOST: str = "0.0.0.0"
    PORT: int = 8000
    RELOAD: bool = False

    # === Logging ===
    LOG_LEVEL: str = "INFO"

    # === Slots ===
    DEFAULT_INDEX: int = 0  # card index used when no slot key is set

    model_config = {"env_file": ".env", "env_prefix": "SLOTMACHINE_"}


settings = Settings()
