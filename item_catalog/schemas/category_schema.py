from pydantic import BaseModel, ConfigDict

# 기본 스키마
class CategoryBase(BaseModel):
    name: str

# 응답용 스키마
class CategoryResponse(CategoryBase):
    id: int

    model_config = ConfigDict(from_attributes=True)
