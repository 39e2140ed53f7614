# service/bmi_service.py
import logging
import math
from decimal import Context, Decimal, ROUND_HALF_UP
from typing import NamedTuple, Optional

"""
BMI 계산 / 분류 모듈.

이 모듈의 책임:
- 키(m), 몸무게(kg) 입력 검증
- BMI = weight / height² 계산
- 소수 첫째 자리 반올림 (half away from zero)
- WHO 기준 카테고리 분류 (반올림 전 값 기준)

상태를 전혀 가지지 않는 순수 함수만 제공한다.
"""

logger = logging.getLogger(__name__)

MISSING_MESSAGE = "Please enter both height and weight."
INVALID_MESSAGE = "Please enter valid positive numbers."

# (카테고리, 하한 포함, 상한 미포함) / None = 열린 구간
CATEGORY_RANGES = [
    ("Underweight", None, 18.5),
    ("Normal", 18.5, 25.0),
    ("Overweight", 25.0, 30.0),
    ("Obese", 30.0, None),
]

_ONE_DECIMAL = Decimal("0.1")
# float 최대값(~1.8e308)도 소수 첫째 자리까지 담을 수 있는 정밀도
_ROUNDING_CONTEXT = Context(prec=400, rounding=ROUND_HALF_UP)


class InvalidInput(ValueError):
    """키/몸무게가 없거나, 숫자가 아니거나, 0 이하이거나, 유한하지 않은 경우"""

    def __init__(self, message: str, field: Optional[str] = None):
        super().__init__(message)
        self.message = message
        self.field = field


class BMIResult(NamedTuple):
    bmi: float
    category: str


# ---------------------------
# 입력 검증
# ---------------------------
def _to_positive_float(name: str, value) -> float:
    if value is None:
        raise InvalidInput(MISSING_MESSAGE, field=name)

    # True/False 는 int 취급되지만 측정값으로는 의미 없음
    if isinstance(value, bool):
        raise InvalidInput(INVALID_MESSAGE, field=name)

    if isinstance(value, str) and not value.strip():
        raise InvalidInput(MISSING_MESSAGE, field=name)

    try:
        val = float(value)
    except (TypeError, ValueError, OverflowError):
        raise InvalidInput(INVALID_MESSAGE, field=name) from None

    if not math.isfinite(val) or val <= 0:
        raise InvalidInput(INVALID_MESSAGE, field=name)

    return val


def validate_measurement(height, weight) -> tuple[float, float]:
    """
    입력값을 float 으로 정규화한다.
    폼에서 넘어오는 "1.75" 같은 숫자 문자열도 허용.
    둘 다 비어 있으면 '둘 다 입력' 메시지가 우선한다.
    """
    if height is None or weight is None:
        raise InvalidInput(
            MISSING_MESSAGE, field="height" if height is None else "weight"
        )

    return _to_positive_float("height", height), _to_positive_float("weight", weight)


# ---------------------------
# 반올림 / 분류
# ---------------------------
def round_bmi(value: float) -> float:
    """
    소수 첫째 자리, half away from zero.
    float 의 최단 10진 표현(repr) 기준이라 22.85 → 22.9 가 플랫폼과 무관하게 보장된다.
    """
    return float(
        Decimal(repr(value)).quantize(_ONE_DECIMAL, context=_ROUNDING_CONTEXT)
    )


def classify(bmi: float) -> str:
    for category, _, high in CATEGORY_RANGES[:-1]:
        if bmi < high:
            return category
    return CATEGORY_RANGES[-1][0]


def category_ranges() -> list[dict]:
    return [
        {"category": category, "min": low, "max": high}
        for category, low, high in CATEGORY_RANGES
    ]


# ---------------------------
# BMI 계산
# ---------------------------
def _raw_bmi(height_m: float, weight_kg: float) -> float:
    # 극단적으로 작은 키는 height² 가 0.0 으로 underflow, 큰 몸무게는 inf 로 overflow
    denominator = height_m * height_m
    if denominator == 0:
        raise InvalidInput(INVALID_MESSAGE, field="height")

    raw = weight_kg / denominator
    if not math.isfinite(raw):
        raise InvalidInput(INVALID_MESSAGE)
    return raw


def compute(height, weight) -> BMIResult:
    try:
        height_m, weight_kg = validate_measurement(height, weight)
        raw = _raw_bmi(height_m, weight_kg)
    except InvalidInput as e:
        logger.info("Rejected measurement (%s): %s", e.field, e.message)
        raise

    # 분류는 반올림 전 값으로 (경계값 흔들림 방지)
    result = BMIResult(bmi=round_bmi(raw), category=classify(raw))
    logger.debug(
        "BMI computed: height=%s weight=%s raw=%.4f -> %s",
        height_m, weight_kg, raw, result,
    )
    return result
