# Django discovers models through the app module.
from .infrastructure.models import CategoryModel, ProductModel  # noqa: F401
