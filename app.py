import logging

from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from config.logging_config import setup_logging
from config.settings import settings

from schemas.bmi_request import BMIRequest
from schemas.bmi_response import (
    BMIResponse,
    CategoryRangesResponse,
    ErrorResponse,
)

from service.bmi_service import (
    INVALID_MESSAGE,
    MISSING_MESSAGE,
    InvalidInput,
    category_ranges,
    compute,
)

setup_logging()
logger = logging.getLogger(__name__)

app = FastAPI(title=settings.APP_TITLE)

app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_origins,
    allow_credentials=False,
    allow_methods=["GET", "POST"],
    allow_headers=["*"],
)


# --------------------------------------------------------------------
# 에러 응답: 항상 { "error": "..." }
# --------------------------------------------------------------------
@app.exception_handler(InvalidInput)
async def handle_invalid_input(request: Request, exc: InvalidInput):
    return JSONResponse(
        status_code=status.HTTP_400_BAD_REQUEST,
        content={"error": exc.message},
    )


@app.exception_handler(RequestValidationError)
async def handle_request_validation(request: Request, exc: RequestValidationError):
    # body 자체가 없거나 JSON 객체가 아닌 경우
    errors = exc.errors()
    if any(e.get("type") == "missing" for e in errors):
        message = MISSING_MESSAGE
    else:
        message = INVALID_MESSAGE
    logger.info("Malformed request body on %s: %s", request.url.path, errors)
    return JSONResponse(
        status_code=status.HTTP_400_BAD_REQUEST,
        content={"error": message},
    )


@app.exception_handler(Exception)
async def handle_unexpected(request: Request, exc: Exception):
    logger.error(
        "Unhandled exception: %s",
        exc,
        exc_info=True,
        extra={"extra_fields": {"method": request.method, "path": request.url.path}},
    )
    return JSONResponse(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        content={"error": "Internal server error"},
    )


# --------------------------------------------------------------------
# API: BMI 계산
# --------------------------------------------------------------------
@app.post(
    f"{settings.API_PREFIX}/bmi",
    response_model=BMIResponse,
    responses={400: {"model": ErrorResponse}},
)
def calculate_bmi(req: BMIRequest):
    result = compute(req.height, req.weight)
    return BMIResponse(bmi=result.bmi, category=result.category)


# --------------------------------------------------------------------
# API: 카테고리 구간 (BMI 스케일 표시용)
# --------------------------------------------------------------------
@app.get(f"{settings.API_PREFIX}/bmi/categories", response_model=CategoryRangesResponse)
def get_bmi_categories():
    return CategoryRangesResponse(categories=category_ranges())


@app.get("/health")
def health():
    return {"status": "ok"}


@app.get("/")
def root():
    return {"message": "BMI API running"}
