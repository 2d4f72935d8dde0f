"""Base entity classes for board and player objects."""

import copy
from abc import ABC, abstractmethod
from collections import Counter
from dataclasses import dataclass, fields
from enum import Enum
from typing import Any, Dict


def _serialize(value: Any) -> Any:
    """Convert a field value into plain data."""
    if isinstance(value, Enum):
        return value.value
    if hasattr(value, 'to_dict'):
        return value.to_dict()
    if isinstance(value, Counter):
        return {_serialize(k): v for k, v in value.items()}
    if isinstance(value, dict):
        return {_serialize(k): _serialize(v) for k, v in value.items()}
    if isinstance(value, (set, frozenset)):
        return sorted(_serialize(item) for item in value)
    if isinstance(value, (list, tuple)):
        return [_serialize(item) for item in value]
    if hasattr(value, 'to_string'):
        return value.to_string()
    return value


@dataclass(eq=False)
class BaseEntity(ABC):
    """Base class for board entities with validation and serialization."""

    def __post_init__(self):
        """Post-initialization validation."""
        self.validate()

    @abstractmethod
    def validate(self) -> None:
        """Validate entity state. Must be implemented by subclasses."""
        pass

    def to_dict(self) -> Dict[str, Any]:
        """Convert entity to dictionary representation."""
        return {f.name: _serialize(getattr(self, f.name)) for f in fields(self)}

    def copy(self) -> "BaseEntity":
        """Create a deep copy of this entity."""
        return copy.deepcopy(self)
