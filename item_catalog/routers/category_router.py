from fastapi import APIRouter, Depends, HTTPException
from sqlalchemy.orm import Session
from typing import List

from item_catalog.core.database import get_db
from item_catalog.core.exceptions import StorageError
from item_catalog.schemas.category_schema import CategoryResponse
from item_catalog.services.category_service import CategoryService

# 카테고리 관련 API 라우터 (조회 전용, 생성은 상품 등록 시)
router = APIRouter(prefix="/categories", tags=["Categories"])


# 카테고리 전체 조회
@router.get("/", response_model=List[CategoryResponse])
def read_categories(db: Session = Depends(get_db)):
    try:
        return CategoryService(db).list_categories()
    except StorageError:
        raise HTTPException(status_code=500, detail="Could not read categories from DB")
