import logging

from fastapi import APIRouter, Depends, File, Form, HTTPException, UploadFile
from sqlalchemy.orm import Session

from item_catalog.core.database import get_db
from item_catalog.core.exceptions import CategoryResolutionError, InvalidReference, StorageError, ValidationError
from item_catalog.schemas.item_schema import ItemCreateResponse, ItemListResponse, ItemResponse
from item_catalog.services.image_service import ImageStore, get_image_store
from item_catalog.services.item_service import ItemService
from item_catalog.services.search_service import SearchService

logger = logging.getLogger(__name__)

# 상품 관련 API 라우터
router = APIRouter(tags=["Items"])


# 전체 상품 조회
@router.get("/items", response_model=ItemListResponse)
def read_items(db: Session = Depends(get_db)):
    try:
        items = ItemService(db).list_items()
    except StorageError:
        raise HTTPException(status_code=500, detail="Could not read items from DB")
    return ItemListResponse(items=items)


# 상품 등록 (multipart: name, category, image)
@router.post("/items", response_model=ItemCreateResponse)
def add_item(
    name: str = Form(""),
    category: str = Form(""),
    image: UploadFile = File(None),
    db: Session = Depends(get_db),
    image_store: ImageStore = Depends(get_image_store),
):
    if image is None:
        raise HTTPException(status_code=400, detail="Image not found")
    logger.debug("상품 수신: name=%s, category=%s", name, category)

    try:
        item = ItemService(db, image_store).create_item(name, category, image.file)
    except (ValidationError, InvalidReference) as e:
        raise HTTPException(status_code=400, detail=str(e))
    except CategoryResolutionError:
        raise HTTPException(status_code=500, detail="Could not resolve category")
    except StorageError:
        raise HTTPException(status_code=500, detail="Could not add item")
    except OSError:
        logger.exception("업로드 이미지 읽기 실패")
        raise HTTPException(status_code=500, detail="Could not hash image")

    return ItemCreateResponse(message=f"item received: {name}, {category}", item=item)


# 단일 상품 조회
@router.get("/items/{item_id}", response_model=ItemResponse)
def read_item(item_id: int, db: Session = Depends(get_db)):
    try:
        item = ItemService(db).get_item(item_id)
    except StorageError:
        raise HTTPException(status_code=500, detail="Could not read items from DB")
    if item is None:
        raise HTTPException(status_code=404, detail="Item with that ID was not found")
    return item


# 키워드 검색 (결과 없음 = 빈 목록)
@router.get("/search", response_model=ItemListResponse)
def search_items(keyword: str = "", db: Session = Depends(get_db)):
    try:
        items = SearchService(db).search_by_keyword(keyword)
    except StorageError:
        raise HTTPException(status_code=500, detail="Could not retrieve items with keyword")
    return ItemListResponse(items=items)
