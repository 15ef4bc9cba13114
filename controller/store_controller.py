# controller/store_controller.py
import logging
from fastapi import APIRouter, Depends, Request, Response, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from pydantic import ValidationError
from controller.controller_dependencies import get_store_service
from model.api import DumpStoreRequest, DumpStoreResponse
from service.store_service import StoreService
from util.constants import InternalURIs
from util.enums import ErrorMessage
from util.errors import AppError, ExtractionError

logger = logging.getLogger(__name__)

store_router = APIRouter()


async def read_dump_request(request: Request) -> DumpStoreRequest:
    # Body is decoded as JSON whatever the Content-Type says.
    raw = await request.body()
    try:
        return DumpStoreRequest.model_validate_json(raw)
    except ValidationError as e:
        raise RequestValidationError(e.errors(include_url=False)) from e


@store_router.post(
    InternalURIs.DUMP_STORE,
    response_model=DumpStoreResponse,
    status_code=status.HTTP_200_OK,
)
async def dump_store(
    payload: DumpStoreRequest = Depends(read_dump_request),
    service: StoreService = Depends(get_store_service),
):
    try:
        result = await service.dump(payload.input)
    except ExtractionError as e:
        # Valid request, failed extraction: log it and send no body at all.
        logger.error("dump.failed kind=%s err=%s", e.kind.value, e)
        return Response(status_code=status.HTTP_200_OK)

    try:
        response = JSONResponse(content=DumpStoreResponse(result=result).model_dump())
    except (TypeError, ValueError):
        logger.error("dump.encode.error", exc_info=True)
        raise AppError(
            ErrorMessage.INTERNAL_ERROR.value.message,
            ErrorMessage.INTERNAL_ERROR.value.http_status,
        )

    logger.info("dump.ok path=%s", payload.input)
    return response
