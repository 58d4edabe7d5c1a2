import logging

from sqlalchemy.exc import IntegrityError, SQLAlchemyError
from sqlalchemy.orm import Session

from item_catalog.core.exceptions import CategoryResolutionError, StorageError, ValidationError
from item_catalog.crud import category_crud

logger = logging.getLogger(__name__)

# 조회 → 생성 → 재조회 최대 시도 횟수
MAX_RESOLVE_ATTEMPTS = 3


class CategoryService:
    """
    카테고리(Category) 관련 비즈니스 로직을 관리하는 서비스 클래스

    resolve_or_create 는 '조회 → 없으면 생성' 순서로 동작한다.
    동시에 같은 새 이름을 생성하면 DB의 lower(name) 유니크 인덱스가
    한쪽 INSERT 를 거부하고, 거부된 쪽은 다시 조회해서 상대가 만든 ID를 사용한다.
    """
    def __init__(self, db: Session):
        self.db = db

    # 이름 → 카테고리 ID (없으면 1회 생성)
    def resolve_or_create(self, name: str) -> int:
        if not name or not name.strip():
            raise ValidationError("category is required")

        for attempt in range(1, MAX_RESOLVE_ATTEMPTS + 1):
            try:
                category = category_crud.get_category_by_name(self.db, name)
                if category is not None:
                    logger.debug("기존 카테고리 사용: %s (id=%s)", category.name, category.id)
                    return category.id

                category = category_crud.create_category(self.db, name)
                logger.info("카테고리 생성: %s (id=%s)", category.name, category.id)
                return category.id

            except IntegrityError:
                # 다른 요청이 먼저 생성함 → 재조회
                self.db.rollback()
                logger.info("카테고리 생성 경합, 재조회: %s (시도 %d/%d)", name, attempt, MAX_RESOLVE_ATTEMPTS)

            except SQLAlchemyError as e:
                self.db.rollback()
                logger.exception("카테고리 조회/생성 실패: %s", name)
                raise StorageError(f"Could not resolve category {name!r}") from e

        raise CategoryResolutionError(
            f"Category {name!r} conflicted on insert but could not be found after {MAX_RESOLVE_ATTEMPTS} attempts"
        )

    # READ 카테고리 목록 조회
    def list_categories(self):
        try:
            return category_crud.get_categories(self.db)
        except SQLAlchemyError as e:
            logger.exception("카테고리 목록 조회 실패")
            raise StorageError("Could not list categories") from e
