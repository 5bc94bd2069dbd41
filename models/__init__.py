from models.brand import Brand
from models.category import Category
from models.media import Media

__all__ = [
    "Brand",
    "Category",
    "Media",
]
