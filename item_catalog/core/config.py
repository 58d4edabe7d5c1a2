from typing import Optional

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    # DB 접속 정보 (DB_URL 우선, 없으면 MySQL 또는 SQLite)
    DB_URL: Optional[str] = None
    DB_USER: Optional[str] = None
    DB_PASSWORD: Optional[str] = None
    DB_HOST: Optional[str] = None
    DB_PORT: int = 3306
    DB_NAME: str = "mercari"
    DB_PATH: str = "db/mercari.sqlite3"

    # 이미지 저장소
    IMAGE_DIR: str = "images"
    IMAGE_EXTENSION: str = ".jpg"
    DEFAULT_IMAGE: str = "default.jpg"

    # 서버 설정
    FRONT_URL: str = "http://localhost:3000"
    SERVER_PORT: int = 9000
    DEBUG: bool = True
    LOG_LEVEL: str = "DEBUG"

    # 환경변수 파일
    model_config = SettingsConfigDict(env_file=".env", extra="ignore")

    @property
    def database_url(self) -> str:
        if self.DB_URL:
            return self.DB_URL
        if self.DB_HOST:
            return (
                f"mysql+pymysql://{self.DB_USER}:{self.DB_PASSWORD}"
                f"@{self.DB_HOST}:{self.DB_PORT}/{self.DB_NAME}?charset=utf8mb4"
            )
        return f"sqlite:///{self.DB_PATH}"


# 전역 설정 인스턴스
settings = Settings()
