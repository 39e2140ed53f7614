# schemas/bmi_request.py
from typing import Any

from pydantic import BaseModel, Field


class BMIRequest(BaseModel):
    # 타입/범위 검증은 service.bmi_service.validate_measurement 에서 처리
    # (누락, 숫자 문자열, bool, NaN 을 각각 구분된 메시지로 돌려주기 위함)
    height: Any = Field(None, description="키 (m)", examples=[1.75])
    weight: Any = Field(None, description="몸무게 (kg)", examples=[70])
