"""
Contract Validation Module

Валидация JSON контрактов, которыми Pramana обменивается со слоем графа объектов.
"""

from .validators import (
    ContractValidator,
    NumberRecordValidator,
    SchemaLoader,
    validate_number_record,
)

__all__ = [
    # Classes
    "SchemaLoader",
    "ContractValidator",
    "NumberRecordValidator",
    # Functions
    "validate_number_record",
]
