from sqlalchemy import select
from sqlalchemy.orm import Session
from item_catalog.models.category_model import Category
from item_catalog.models.item_model import Item


# 카테고리 이름으로 치환된 상품 조회 (INNER JOIN)
def item_rows():
    return (
        select(
            Item.id,
            Item.name,
            Category.name.label("category"),
            Item.image_name.label("image"),
        )
        .join(Category, Item.category_id == Category.id)
        .order_by(Item.id)
    )


# READ-ALL 전체 상품 조회 (등록 순)
def get_items(db: Session):
    return db.execute(item_rows()).all()


# READ 단일 상품 조회 (ID 기준)
def get_item_by_id(db: Session, item_id: int):
    return db.execute(item_rows().where(Item.id == item_id)).first()


# READ 상품 이름 부분 검색 (대소문자 무시, %/_ 는 문자 그대로)
def search_items(db: Session, keyword: str):
    stmt = item_rows().where(Item.name.icontains(keyword, autoescape=True))
    return db.execute(stmt).all()


# CREATE 상품 등록 (category_id 는 이미 확정된 값)
def create_item(db: Session, name: str, category_id: int, image_name: str):
    db_item = Item(name=name, category_id=category_id, image_name=image_name)
    db.add(db_item)
    db.commit()
    db.refresh(db_item)
    return db_item
