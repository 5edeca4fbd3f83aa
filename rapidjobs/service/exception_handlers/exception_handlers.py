from fastapi import Request
from fastapi.encoders import jsonable_encoder
from fastapi.exceptions import RequestValidationError
from starlette.responses import JSONResponse

from rapidjobs import api_logger
from rapidjobs.service.error_responses import APIErrorResponse
from rapidjobs.service.error_responses import InternalServerAPIError
from rapidjobs.service.error_responses import InvalidEmailAPIError
from rapidjobs.service.middleware import util
from rapidjobs.service.middleware.entities import RequestStateKey
from rapidjobs.utils import http_headers

logger = api_logger.get()


async def custom_exception_handler(request: Request, error: Exception):
    if not isinstance(error, APIErrorResponse):
        logger.error(
            f"Unhandled error. request_id={_request_id(request)} "
            f"request_path={request.url.path}",
            exc_info=error,
        )
        error = InternalServerAPIError()
    else:
        logger.info(
            f"API error. request_id={_request_id(request)} "
            f"request_path={request.url.path} "
            f"status_code={error.to_status_code()} "
            f"code={error.to_code()}"
        )
    return await http_headers.add_response_headers(
        JSONResponse(
            status_code=error.to_status_code(),
            content=jsonable_encoder({"error": error.to_message()}),
        ),
    )


async def validation_exception_handler(
    request: Request, error: RequestValidationError
):
    # Only body on the API is the waitlist email
    return await custom_exception_handler(request, InvalidEmailAPIError())


def _request_id(request: Request):
    return util.get_state(request, RequestStateKey.REQUEST_ID)
