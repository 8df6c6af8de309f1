"""
FastAPI 메인 애플리케이션
정시 환산점수 계산 API
"""
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from uniscore import __version__
from uniscore.config import settings
from uniscore.routes import calculator

# FastAPI 앱 생성
app = FastAPI(
    title="uniscore API",
    description="수능 성적 → 대학별 정시 환산점수",
    version=__version__,
)

# CORS 설정 (프론트엔드 연결)
app.add_middleware(
    CORSMiddleware,
    allow_origins=[
        settings.FRONTEND_URL,
        "http://localhost:5173",
    ],
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

# 라우터 등록
app.include_router(calculator.calculator_bp, prefix="/api/calculator", tags=["수능계산기"])


@app.get("/api/health")
async def health_check():
    """헬스 체크"""
    return {"status": "healthy"}


if __name__ == "__main__":
    import uvicorn

    uvicorn.run(
        "uniscore.main:app",
        host="0.0.0.0",
        port=settings.BACKEND_PORT,
        reload=True,
    )
