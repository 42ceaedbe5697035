# Django discovers models through the app module.
from .infrastructure.models import AddressModel  # noqa: F401
