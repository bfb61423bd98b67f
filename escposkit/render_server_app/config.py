from functools import lru_cache
from typing import Optional

from pydantic import Field
from pydantic_settings import SettingsConfigDict, BaseSettings


class RenderSettings(BaseSettings):
    server_ip: str = Field("127.0.0.1", validation_alias="SERVER_IP")
    server_port: int = Field(10290, validation_alias="SERVER_PORT")

    log_ring_size: int = Field(200, validation_alias="LOG_RING_SIZE")

    # None selects the packaged table
    command_table_path: Optional[str] = Field(None, validation_alias="COMMAND_TABLE_PATH")
    default_code_page: str = Field("CP437", validation_alias="DEFAULT_CODE_PAGE")
    replacement_char: str = Field("?", validation_alias="REPLACEMENT_CHAR")
    model_config = SettingsConfigDict(env_file=".env", env_file_encoding="utf-8", populate_by_name=True, extra="ignore")


@lru_cache
def get_settings() -> RenderSettings:
    return RenderSettings()
