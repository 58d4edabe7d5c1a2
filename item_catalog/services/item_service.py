import logging
from typing import BinaryIO, List, Optional, Union

from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from item_catalog.core.config import settings
from item_catalog.core.exceptions import StorageError, ValidationError
from item_catalog.crud import item_crud
from item_catalog.schemas.item_schema import ItemResponse
from item_catalog.services.category_service import CategoryService
from item_catalog.services.image_service import ImageStore, validate_reference

logger = logging.getLogger(__name__)

# DB 정수 ID 범위 (signed 64-bit)
MIN_ITEM_ID = -(2 ** 63)
MAX_ITEM_ID = 2 ** 63 - 1


class ItemService:
    """
    상품(Item) 등록/조회 서비스

    등록 순서: 이미지 저장 → 카테고리 확정 → 상품 INSERT.
    카테고리 ID가 확정되기 전에는 상품 행을 쓰지 않는다.
    """
    def __init__(self, db: Session, image_store: Optional[ImageStore] = None):
        self.db = db
        self.image_store = image_store

    # CREATE 이미지 바이트까지 포함한 상품 등록
    def create_item(self, name: str, category_name: str, image: Union[bytes, BinaryIO]) -> ItemResponse:
        _require(name, "name")
        _require(category_name, "category")
        if self.image_store is None:
            raise RuntimeError("ItemService.create_item requires an image store")

        image_name = self.image_store.store(image)
        return self.add_item(name, category_name, image_name)

    # CREATE 이미지 참조가 확정된 상품 등록
    def add_item(self, name: str, category_name: str, image_name: str) -> ItemResponse:
        _require(name, "name")
        _require(image_name, "image")
        extension = self.image_store.extension if self.image_store is not None else settings.IMAGE_EXTENSION
        validate_reference(image_name, extension)

        category_id = CategoryService(self.db).resolve_or_create(category_name)

        try:
            item = item_crud.create_item(self.db, name, category_id, image_name)
        except SQLAlchemyError as e:
            self.db.rollback()
            logger.exception("상품 등록 실패: %s", name)
            raise StorageError(f"Could not insert item {name!r}") from e

        logger.info("상품 등록: id=%s, name=%s, category_id=%s, image=%s", item.id, name, category_id, image_name)
        return ItemResponse(id=item.id, name=item.name, category=item.category.name, image=item.image_name)

    # READ 전체 상품 조회
    def list_items(self) -> List[ItemResponse]:
        try:
            rows = item_crud.get_items(self.db)
        except SQLAlchemyError as e:
            logger.exception("상품 목록 조회 실패")
            raise StorageError("Could not read items") from e
        return [ItemResponse(**row._mapping) for row in rows]

    # READ 단일 상품 조회 (없으면 None)
    def get_item(self, item_id: int) -> Optional[ItemResponse]:
        # 범위 밖 ID는 드라이버 OverflowError 대신 조회 결과 없음
        if not MIN_ITEM_ID <= item_id <= MAX_ITEM_ID:
            return None
        try:
            row = item_crud.get_item_by_id(self.db, item_id)
        except SQLAlchemyError as e:
            logger.exception("상품 조회 실패: id=%s", item_id)
            raise StorageError(f"Could not read item {item_id}") from e
        return ItemResponse(**row._mapping) if row is not None else None


def _require(value: str, field: str) -> None:
    if not value or not value.strip():
        raise ValidationError(f"{field} is required")
