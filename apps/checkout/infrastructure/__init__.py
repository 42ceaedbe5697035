# Adapters
from .local_order_gateway import LocalOrderGateway
from .repository_cart_store import RepositoryCartStore

__all__ = ['LocalOrderGateway', 'RepositoryCartStore']
