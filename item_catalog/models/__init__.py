from item_catalog.models.category_model import Category
from item_catalog.models.item_model import Item

__all__ = ["Category", "Item"]
