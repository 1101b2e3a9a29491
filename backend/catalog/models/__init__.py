from catalog.models.product import Product
from catalog.models.category import Category, ProductCategory
from catalog.models.brand import Brand
from catalog.models.review import Review, Comment

__all__ = ["Product", "Category", "ProductCategory", "Brand", "Review", "Comment"]
