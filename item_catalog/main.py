# item_catalog/main.py
import logging
from contextlib import asynccontextmanager

import uvicorn
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from item_catalog.core.config import settings
from item_catalog.core.database import engine, init_db
from item_catalog.core.logger import setup_logging

from item_catalog.routers.item_router import router as item_router
from item_catalog.routers.image_router import router as image_router
from item_catalog.routers.category_router import router as category_router
from item_catalog.schemas.item_schema import MessageResponse
from item_catalog.services.image_service import get_image_store

logger = logging.getLogger(__name__)


# --------------------------------
# 서버 이벤트
# --------------------------------
@asynccontextmanager
async def lifespan(_: FastAPI):
    setup_logging(settings.LOG_LEVEL)
    init_db(engine)
    logger.info("✅ DB 테이블 자동 생성 완료 (%s)", engine.url.render_as_string(hide_password=True))
    get_image_store().ensure_default()
    logger.info("🚀 서버 시작 (이미지 디렉터리: %s)", settings.IMAGE_DIR)
    yield
    logger.info("🛑 서버 종료")


app = FastAPI(title="Item Catalog API", debug=settings.DEBUG, lifespan=lifespan)

# CORS
app.add_middleware(
    CORSMiddleware,
    allow_origins=[settings.FRONT_URL],
    allow_methods=["GET", "PUT", "POST", "DELETE"],
    allow_headers=["*"],
)

# --------------------------------
# 라우터 등록
# --------------------------------
app.include_router(item_router)
app.include_router(image_router)
app.include_router(category_router)


# --------------------------------
# 기본 페이지
# --------------------------------
@app.get("/", response_model=MessageResponse)
def root():
    return MessageResponse(message="Hello, world!")


if __name__ == "__main__":
    uvicorn.run("item_catalog.main:app", host="0.0.0.0", port=settings.SERVER_PORT)
