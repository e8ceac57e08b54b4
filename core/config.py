from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    # Static geofence dataset, loaded once at startup
    ZONES_PATH: str = "zones.json"

    # Security / features
    ALLOW_ORIGINS: str = "http://localhost:5173"
    DEFAULT_BUILDING_HEIGHT: float = 10.0
    EVENTS_MAX: int = 200
    WS_PUSH_INTERVAL: float = 0.2
    LOG_LEVEL: str = "INFO"

    # Server
    HOST: str = "127.0.0.1"
    PORT: int = 8000

    model_config = SettingsConfigDict(env_file=".env", env_file_encoding="utf-8", extra="ignore")

    @property
    def allowed_origins(self) -> list[str]:
        return [o.strip() for o in self.ALLOW_ORIGINS.split(",") if o.strip()]
