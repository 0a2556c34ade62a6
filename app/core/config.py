from typing import List

from pydantic_settings import BaseSettings
from functools import lru_cache

class Settings(BaseSettings):
    PROJECT_NAME: str = "Customer Record Service"
    DATABASE_URL: str = "sqlite:///./customers.db"
    LOG_LEVEL: str = "INFO"

    DEFAULT_PAGE_SIZE: int = 10
    ENABLE_METRICS: bool = True

    CORS_ORIGINS_STR: str = "http://localhost:3000"

    @property
    def CORS_ORIGINS(self) -> List[str]:
        return [origin.strip() for origin in self.CORS_ORIGINS_STR.split(',')]


    def model_post_init(self, __context) -> None:
        if self.DEFAULT_PAGE_SIZE < 1:
            raise ValueError("DEFAULT_PAGE_SIZE must be a positive integer")


    class Config:
        env_file = ".env"

@lru_cache()
def get_settings():
    return Settings()
