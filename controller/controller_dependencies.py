# controller/controller_dependencies.py
from core.extractor import Extractor
from service.store_service import StoreService


def get_store_service() -> StoreService:
    # One extractor per request; it holds no open handles between calls.
    _extractor = Extractor()
    _service = StoreService(_extractor)
    return _service
