"""Input validation utilities for the Gaia board engine."""

from typing import Any, Type, Union

from ..core.exceptions import InvalidInputError, RangeValidationError, TypeValidationError
from ..core.constants import MAX_PLAYERS, MIN_PLAYERS, MAX_RESEARCH_LEVEL


class Validator:
    """Base validator class with common validation methods."""

    @staticmethod
    def validate_type(value: Any, expected_type: Type, field_name: str = "value") -> None:
        """Validate that value is of expected type."""
        if not isinstance(value, expected_type):
            raise TypeValidationError(
                f"{field_name} must be of type {expected_type.__name__}, got {type(value).__name__}",
                error_code="TYPE_MISMATCH",
                context={"field": field_name, "expected": expected_type.__name__, "actual": type(value).__name__}
            )

    @staticmethod
    def validate_range(value: Union[int, float], min_val: Union[int, float],
                       max_val: Union[int, float], field_name: str = "value") -> None:
        """Validate that value is within specified range."""
        if not min_val <= value <= max_val:
            raise RangeValidationError(
                f"{field_name} must be between {min_val} and {max_val}, got {value}",
                error_code="OUT_OF_RANGE",
                context={"field": field_name, "value": value, "min": min_val, "max": max_val}
            )

    @staticmethod
    def validate_positive(value: Union[int, float], field_name: str = "value") -> None:
        """Validate that value is positive."""
        if value <= 0:
            raise RangeValidationError(
                f"{field_name} must be positive, got {value}",
                error_code="NOT_POSITIVE",
                context={"field": field_name, "value": value}
            )

    @staticmethod
    def validate_non_negative(value: Union[int, float], field_name: str = "value") -> None:
        """Validate that value is non-negative."""
        if value < 0:
            raise RangeValidationError(
                f"{field_name} must be non-negative, got {value}",
                error_code="NEGATIVE",
                context={"field": field_name, "value": value}
            )

    @staticmethod
    def validate_enum(value: Any, enum_class: Type, field_name: str = "value") -> None:
        """Validate that value is a valid enum member."""
        if not isinstance(value, enum_class):
            valid_values = [e.value for e in enum_class]
            raise InvalidInputError(
                f"{field_name} must be one of {valid_values}, got {value}",
                error_code="INVALID_ENUM",
                context={"field": field_name, "value": value, "valid_values": valid_values}
            )


class GameValidator(Validator):
    """Validator for game-specific inputs."""

    @staticmethod
    def validate_player_count(count: int) -> None:
        """Validate player count."""
        GameValidator.validate_type(count, int, "player_count")
        GameValidator.validate_range(count, MIN_PLAYERS, MAX_PLAYERS, "player_count")

    @staticmethod
    def validate_research_level(level: int, field_name: str = "research_level") -> None:
        """Validate a research track level."""
        GameValidator.validate_type(level, int, field_name)
        GameValidator.validate_range(level, 0, MAX_RESEARCH_LEVEL, field_name)

    @staticmethod
    def validate_resources(resources: dict, field_name: str = "resources") -> None:
        """Validate a resource counter mapping."""
        GameValidator.validate_type(resources, dict, field_name)
        for resource, amount in resources.items():
            GameValidator.validate_non_negative(amount, f"{field_name}.{resource.value}")
