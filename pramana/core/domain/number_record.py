"""
NumberRecord — Экспортная запись числа для графа объектов

Immutable Pydantic модель, через которую слой графа объектов получает
идентичность и представления значения. Совместима с JSON Schema
(pramana/core/contracts/schema/number_record.json).

Запись самопроверяема: canonical обязан быть в нормализованной форме,
а pramana_guid обязан совпадать с UUIDv5 этой строки.
"""

from typing import Any, Dict, Union

from pydantic import BaseModel, Field, model_validator

from pramana.core.domain.classification import NumberClass
from pramana.core.domain.gaussian_integer import GaussianInteger
from pramana.core.domain.gaussian_rational import GaussianRational
from pramana.core.math.errors import PramanaError
from pramana.core.math.identity import generate_identity

NUMBER_RECORD_SCHEMA_VERSION = "1"


class NumberRecord(BaseModel):
    """
    Запись числа: идентичность, классификация и отображение.

    Immutable модель (frozen=True).
    """

    schema_version: str = Field(
        NUMBER_RECORD_SCHEMA_VERSION, pattern="^1$", description="Версия схемы записи"
    )
    canonical: str = Field(
        ...,
        pattern=r"^-?[0-9]+,[0-9]+,-?[0-9]+,[0-9]+$",
        description="Каноническая строка A,B,C,D",
    )
    uri: str = Field(..., pattern=r"^num:", description="URI значения num:A,B,C,D")
    pramana_id: str = Field(..., pattern=r"^pra:num:", description="pra:num:A,B,C,D")
    pramana_guid: str = Field(
        ...,
        pattern=r"^[0-9a-f]{8}-[0-9a-f]{4}-5[0-9a-f]{3}-[89ab][0-9a-f]{3}-[0-9a-f]{12}$",
        description="UUIDv5 канонической строки",
    )
    classification: NumberClass = Field(..., description="Наиболее узкий класс")
    display: str = Field(..., min_length=1, description="Смешанная форма для отображения")
    is_gaussian_integer: bool = Field(..., description="Оба знаменателя равны 1")

    model_config = {"frozen": True}

    @model_validator(mode="after")
    def _check_identity(self) -> "NumberRecord":
        """Canonical нормализован, guid / uri / pramana_id выведены из него."""
        try:
            value = GaussianRational.parse(self.canonical)
        except PramanaError as e:
            raise ValueError(f"canonical {self.canonical!r} is not a valid number: {e}")

        if value.canonical != self.canonical:
            raise ValueError(
                f"canonical {self.canonical!r} is not normalized (expected {value.canonical!r})"
            )
        if str(generate_identity(self.canonical)) != self.pramana_guid:
            raise ValueError(f"pramana_guid does not match canonical {self.canonical!r}")
        if self.uri != value.uri or self.pramana_id != value.pramana_id:
            raise ValueError(f"uri / pramana_id do not match canonical {self.canonical!r}")
        if self.classification is not value.classification:
            raise ValueError(
                f"classification {self.classification.value!r} does not match "
                f"canonical {self.canonical!r}"
            )
        return self

    @classmethod
    def from_value(cls, value: Union[GaussianRational, GaussianInteger]) -> "NumberRecord":
        """Построение записи по значению."""
        if isinstance(value, GaussianInteger):
            value = value.to_gaussian_rational()
        return cls(
            canonical=value.canonical,
            uri=value.uri,
            pramana_id=value.pramana_id,
            pramana_guid=str(value.pramana_guid),
            classification=value.classification,
            display=str(value),
            is_gaussian_integer=value.is_gaussian_integer,
        )

    def to_value(self) -> GaussianRational:
        return GaussianRational.parse(self.canonical)

    def to_payload(self) -> Dict[str, Any]:
        """JSON-совместимый dict для валидации контрактом."""
        return self.model_dump(mode="json")
