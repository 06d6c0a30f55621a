"""Валидаторы значений настроек.

Каждый валидатор реализует `_check`, возвращающий текст ошибки или `None`;
общий метод `validate` приводит результат к паре (успех, сообщение),
которую ожидают группы настроек.
"""

from __future__ import annotations

import re
from abc import ABC, abstractmethod
from numbers import Real
from typing import Any, Iterable, Optional, Pattern, Tuple


class Validator(ABC):
    """Базовый валидатор значения настройки."""

    def validate(self, value: Any) -> Tuple[bool, str]:
        error = self._check(value)
        return (False, error) if error else (True, "")

    @abstractmethod
    def _check(self, value: Any) -> Optional[str]:
        """Возвращает описание ошибки или None, если значение корректно."""


class TypeValidator(Validator):
    """Значение должно быть экземпляром одного из типов."""

    def __init__(self, expected_type: type | Tuple[type, ...]) -> None:
        self.expected_types: Tuple[type, ...] = (
            expected_type if isinstance(expected_type, tuple) else (expected_type,)
        )

    def _check(self, value: Any) -> Optional[str]:
        if isinstance(value, self.expected_types):
            return None
        names = " | ".join(kind.__name__ for kind in self.expected_types)
        return f"Expected value of type {names}, got {type(value).__name__}"


class RangeValidator(Validator):
    """Число в закрытом диапазоне; любая из границ может отсутствовать."""

    def __init__(self, min_value: Optional[Real] = None, max_value: Optional[Real] = None) -> None:
        self.bounds = (min_value, max_value)

    def _check(self, value: Any) -> Optional[str]:
        # bool формально число, но для портов и таймаутов не подходит
        if isinstance(value, bool) or not isinstance(value, Real):
            return f"Expected a number, got {type(value).__name__}"
        low, high = self.bounds
        if (low is not None and value < low) or (high is not None and value > high):
            return f"Value {value} is out of range [{low}, {high}]"
        return None


class EnumValidator(Validator):
    """Значение из фиксированного набора (уровни логирования и т.п.)."""

    def __init__(self, allowed_values: Iterable[Any]) -> None:
        self.allowed_values = tuple(allowed_values)

    def _check(self, value: Any) -> Optional[str]:
        if value in self.allowed_values:
            return None
        return f"Value {value!r} not in allowed values: {', '.join(map(str, self.allowed_values))}"


class RegexValidator(Validator):
    """Строка целиком соответствует шаблону (адрес сокета, хост)."""

    def __init__(self, pattern: str | Pattern[str]) -> None:
        self.pattern: Pattern[str] = re.compile(pattern)

    def _check(self, value: Any) -> Optional[str]:
        if not isinstance(value, str):
            return f"Pattern check needs a string, got {type(value).__name__}"
        if self.pattern.fullmatch(value) is None:
            return f"Value {value!r} does not match pattern {self.pattern.pattern!r}"
        return None


class ItemsValidator(Validator):
    """Список, каждый элемент которого проходит вложенный валидатор."""

    def __init__(self, item_validator: Validator) -> None:
        self.item_validator = item_validator

    def _check(self, value: Any) -> Optional[str]:
        if not isinstance(value, list):
            return f"Expected list, got {type(value).__name__}"
        for index, item in enumerate(value):
            is_valid, error = self.item_validator.validate(item)
            if not is_valid:
                return f"Item {index}: {error}"
        return None


class CompositeValidator(Validator):
    """Цепочка валидаторов; останавливается на первой ошибке."""

    def __init__(self, validators: Iterable[Validator]) -> None:
        self.validators = tuple(validators)

    def _check(self, value: Any) -> Optional[str]:
        for validator in self.validators:
            is_valid, error = validator.validate(value)
            if not is_valid:
                return error
        return None
