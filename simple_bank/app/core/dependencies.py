from functools import lru_cache

from ..services import Registry
from .config import get_settings


@lru_cache()
def get_registry() -> Registry:
    settings = get_settings()
    return Registry(id_prefix=settings.id_prefix, start=settings.id_start)
