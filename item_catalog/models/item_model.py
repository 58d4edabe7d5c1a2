from sqlalchemy import Column, String, ForeignKey
from sqlalchemy.orm import relationship
from item_catalog.core.database import Base  # SQLAlchemy Base 클래스, 모든 모델은 이 클래스를 상속해야 함
from item_catalog.models.category_model import PrimaryKey

class Item(Base):
    __tablename__ = "items"  # DB 테이블명 지정

    # 고유 ID, 자동 증가 (서버 할당)
    id = Column(PrimaryKey, primary_key=True, autoincrement=True)

    # 상품 이름
    name = Column(String(255), nullable=False)  # 필수 입력

    # 카테고리 FK (Category.id 참조)
    category_id = Column(PrimaryKey, ForeignKey("categories.id"), nullable=False)

    # 이미지 참조 (<sha256>.jpg)
    image_name = Column(String(255), nullable=False)

    # relationship (조인 시 사용)
    category = relationship("Category", back_populates="items")
