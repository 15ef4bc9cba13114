# service/store_service.py
import logging
from pydantic_core import PydanticSerializationError
from starlette.concurrency import run_in_threadpool
from core.extractor import Extractor
from util.enums import ExtractionFailure
from util.errors import ExtractionError
from util.timing import timed

logger = logging.getLogger(__name__)


class StoreService:
    def __init__(self, extractor: Extractor) -> None:
        self._extractor = extractor

    async def dump(self, path: str) -> str:
        """
        Snapshot the store at `path` and return it as compact JSON text.
        LMDB reads block, so the scan runs on the threadpool.
        Raises ExtractionError; nothing partial is ever returned.
        """
        with timed(logger, "dump.extract"):
            snapshot = await run_in_threadpool(self._extractor.extract, path)

        try:
            payload = snapshot.model_dump_json()
        except (PydanticSerializationError, ValueError) as e:
            raise ExtractionError(
                ExtractionFailure.SERIALIZATION_FAILED, cause=e
            ) from e

        logger.info("dump.serialized chars=%d", len(payload))
        return payload
