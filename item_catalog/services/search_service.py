import logging
from typing import List

from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from item_catalog.core.exceptions import StorageError
from item_catalog.crud import item_crud
from item_catalog.schemas.item_schema import ItemResponse

logger = logging.getLogger(__name__)


class SearchService:
    def __init__(self, db: Session):
        self.db = db

    # 상품 이름 부분 검색 (빈 키워드 = 전체, 결과 없음 = 빈 리스트)
    def search_by_keyword(self, keyword: str) -> List[ItemResponse]:
        keyword = keyword or ""
        logger.debug("검색 키워드: %r", keyword)
        try:
            rows = item_crud.search_items(self.db, keyword)
        except SQLAlchemyError as e:
            logger.exception("상품 검색 실패: %r", keyword)
            raise StorageError(f"Could not search items with keyword {keyword!r}") from e
        return [ItemResponse(**row._mapping) for row in rows]
