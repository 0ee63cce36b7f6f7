from functools import lru_cache
from typing import Optional

from pydantic import Field
from pydantic_settings import SettingsConfigDict, BaseSettings


class ServerSettings(BaseSettings):
    server_ip: str = Field("127.0.0.1", validation_alias="SERVER_IP")
    server_port: int = Field(10764, validation_alias="SERVER_PORT")

    log_ring_size: int = Field(200, validation_alias="LOG_RING_SIZE")
    log_level: str = Field("INFO", validation_alias="LOG_LEVEL")

    # None keeps history in memory only.
    history_path: Optional[str] = Field(None, validation_alias="HISTORY_PATH")
    history_max_items: int = Field(50, validation_alias="HISTORY_MAX_ITEMS")

    qr_box_size: int = Field(10, validation_alias="QR_BOX_SIZE")
    qr_border: int = Field(2, validation_alias="QR_BORDER")
    qr_error_correction: str = Field("M", validation_alias="QR_ERROR_CORRECTION")
    model_config = SettingsConfigDict(env_file=".env", env_file_encoding="utf-8", populate_by_name=True, extra="ignore")


@lru_cache
def get_settings() -> ServerSettings:
    return ServerSettings()
