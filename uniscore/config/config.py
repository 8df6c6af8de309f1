"""
환경 변수 설정
"""
from pydantic_settings import BaseSettings
from functools import lru_cache


class Settings(BaseSettings):
    # 성적 레코드 저장 위치 (학생별 디렉터리가 이 아래에 생성됨)
    RECORD_DIR: str = "data"

    # 대학별 가중치 카탈로그 JSON 경로 (비어 있으면 패키지 내장 데이터 사용)
    WEIGHT_TABLE_PATH: str = ""

    # Logging
    LOG_LEVEL: str = "INFO"

    # Server
    BACKEND_PORT: int = 8000
    FRONTEND_URL: str = "http://localhost:5173"

    class Config:
        env_file = ".env"
        case_sensitive = True
        extra = "ignore"


@lru_cache()
def get_settings() -> Settings:
    return Settings()


# 전역 설정 객체
settings = get_settings()
