from pydantic import BaseModel, ConfigDict
from typing import List


# 상품 응답 스키마 (category 는 카테고리 이름, image 는 이미지 참조)
class ItemResponse(BaseModel):
    id: int
    name: str
    category: str
    image: str

    model_config = ConfigDict(from_attributes=True)


# 상품 목록 응답 스키마
class ItemListResponse(BaseModel):
    items: List[ItemResponse]


# 메시지 응답 스키마
class MessageResponse(BaseModel):
    message: str


# 상품 등록 응답 스키마
class ItemCreateResponse(MessageResponse):
    item: ItemResponse
