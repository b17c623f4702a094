from typing import List

from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    cors_origins: List[str] = ["http://localhost:5173"]
    max_upload_bytes: int = 1024 * 1024
    default_download_name: str = "transposed.txt"
    log_level: str = "INFO"

    class Config:
        env_file = ".env"


settings = Settings()
