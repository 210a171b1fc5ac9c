from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    model_config = SettingsConfigDict(env_prefix="MENET_")

    # Storage settings
    network_store_path: str = "data/network.json"
    warning_state_path: str = "data/warning_state.json"

    # Warning lifecycle
    snooze_hours: float = 24.0

    # Insight settings
    top_leverage_count: int = 5
    fragility_threshold: float = 3.0
    conflict_threshold: float = 0.5

    log_level: str = "INFO"  # Can be DEBUG, INFO, WARNING, ERROR, CRITICAL


settings = Settings()
