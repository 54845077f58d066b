from fastapi import Request
from fastapi.responses import JSONResponse
from fastapi.exceptions import RequestValidationError
from starlette import status
from starlette.exceptions import HTTPException as StarletteHTTPException
import logging

logger = logging.getLogger("projectcalc.errors")


class RatesUnavailableError(Exception):
    """Raised when a conversion is requested before (or without) a usable rate."""

    def __init__(self, currency: str, status_name: str):
        self.currency = currency
        self.status_name = status_name
        super().__init__(f"exchange rate for {currency} is {status_name}")


def http_error_handler(request: Request, exc: StarletteHTTPException):  # type: ignore
    if exc.status_code == status.HTTP_404_NOT_FOUND:
        return JSONResponse(
            status_code=status.HTTP_404_NOT_FOUND,
            content={
                "error": "not_found",
                "detail": f"No route for {request.method} {request.url.path}",
            },
        )
    return JSONResponse(
        status_code=exc.status_code,
        content={"error": "http_error", "detail": exc.detail},
    )


def validation_error_handler(request: Request, exc: RequestValidationError):  # type: ignore
    return JSONResponse(
        status_code=status.HTTP_422_UNPROCESSABLE_ENTITY,
        content={
            "error": "validation_error",
            "detail": jsonable_errors(exc),
        },
    )


def jsonable_errors(exc: RequestValidationError) -> list:
    # pydantic v2 may put the raw exception object under 'ctx'
    out = []
    for err in exc.errors():
        err = dict(err)
        if "ctx" in err:
            err["ctx"] = {k: str(v) for k, v in err["ctx"].items()}
        out.append(err)
    return out


def rates_unavailable_handler(request: Request, exc: RatesUnavailableError):  # type: ignore
    logger.info(
        "calculation refused, rate unavailable",
        extra={"context": {"currency": exc.currency, "rates": exc.status_name}},
    )
    if exc.status_name == "pending":
        detail = f"Exchange rates are still loading; {exc.currency} is not available yet."
    else:
        detail = f"Exchange rate for {exc.currency} is unavailable."
    return JSONResponse(
        status_code=status.HTTP_503_SERVICE_UNAVAILABLE,
        content={
            "error": "rates_unavailable",
            "currency": exc.currency,
            "rates": exc.status_name,
            "detail": detail,
        },
    )


def server_error_handler(request: Request, exc: Exception):  # type: ignore
    logger.error("unhandled exception", exc_info=exc)
    return JSONResponse(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        content={
            "error": "internal_error",
            "detail": "An unexpected error occurred.",
        },
    )
