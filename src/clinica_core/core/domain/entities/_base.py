from dataclasses import fields, is_dataclass
from typing import Any, TypeVar

T = TypeVar("T")


class EntityMixin:
    """Monta a entidade (dataclass) a partir de um modelo Django, campo a campo pelo nome."""

    @classmethod
    def from_model(cls: type[T], model: Any) -> T:
        if not is_dataclass(cls):
            raise TypeError(f"{cls.__name__} precisa ser um dataclass")
        return cls(**{f.name: getattr(model, f.name) for f in fields(cls) if f.init})
