from fastapi import APIRouter, Depends
from fastapi.responses import FileResponse

from item_catalog.services.image_service import ImageStore, get_image_store

# 이미지 조회 라우터
router = APIRouter(tags=["Images"])


# 이미지 파일 반환 (없거나 잘못된 참조면 기본 이미지)
@router.get("/image/{image_filename}")
def get_image(image_filename: str, image_store: ImageStore = Depends(get_image_store)):
    return FileResponse(image_store.resolve(image_filename))
