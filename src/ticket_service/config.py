from typing import Literal

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
    )

    log_level: str = "INFO"
    log_format: Literal["json", "console"] = "json"

    # In-process collaborators; set to false to simulate an outage
    payment_service_online: bool = True
    seat_reservation_service_online: bool = True


settings = Settings()
