from sqlalchemy import Column, String, BigInteger, Integer, Index, func
from sqlalchemy.orm import relationship
from item_catalog.core.database import Base  # SQLAlchemy Base 클래스, 모든 모델은 이 클래스를 상속해야 함

# SQLite는 INTEGER PRIMARY KEY만 자동 증가
PrimaryKey = BigInteger().with_variant(Integer, "sqlite")


class Category(Base):

    __tablename__ = "categories"  # DB 테이블명 지정

    # 고유 ID, 자동 증가
    id = Column(PrimaryKey, primary_key=True, autoincrement=True)

    # 카테고리 이름 (처음 등록된 표기 그대로 저장)
    name = Column(String(100), nullable=False)

    # 역참조 (Item.category 연결)
    items = relationship("Item", back_populates="category")


# 대소문자 무시 중복 불가 (동시 생성 경합 시 한쪽 INSERT 거부)
Index("uq_categories_name_lower", func.lower(Category.name), unique=True)
