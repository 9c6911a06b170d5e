"""
MeasuredQuantity - Валидированный неотрицательный скаляр

Immutable Pydantic модель результата create_real().

Название RealNumber сохранено как алиас для дашборда, но домен уже
вещественной прямой: допускаются только конечные значения >= 0
(длительности, оценки, доли). Это НЕ тип произвольной точности.
"""

from typing import Optional

from pydantic import BaseModel, Field


class MeasuredQuantity(BaseModel):
    """
    Результат валидации измеренной величины.

    Immutable модель (frozen=True). При is_valid=False значение равно 0,
    а error_message содержит причину отказа.
    """

    value: float = Field(..., description="Значение, округлённое до 6 знаков (0 если невалидно)")
    is_valid: bool = Field(..., description="Прошло ли значение валидацию")
    error_message: Optional[str] = Field(None, description="Причина отказа (nullable)")

    model_config = {"frozen": True}


RealNumber = MeasuredQuantity
