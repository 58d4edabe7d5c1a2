from sqlalchemy import func
from sqlalchemy.orm import Session
from item_catalog.models.category_model import Category


# READ 카테고리 이름으로 조회 (대소문자 무시, 바인딩 파라미터)
def get_category_by_name(db: Session, name: str):
    return (
        db.query(Category)
        .filter(func.lower(Category.name) == func.lower(name))
        .first()
    )


# READ-ALL 전체 카테고리 목록 조회 (ID 순)
def get_categories(db: Session):
    return db.query(Category).order_by(Category.id).all()


# CREATE 새로운 카테고리 추가
# 이름 중복 시 commit 단계에서 IntegrityError 발생 (호출 측에서 처리)
def create_category(db: Session, name: str):
    category = Category(name=name)
    db.add(category)
    db.commit()
    db.refresh(category)
    return category
