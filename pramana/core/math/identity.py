"""
Deterministic Identity — Namespaced UUIDv5 идентификаторы

Модуль отображает каноническую строку значения в стабильный 128-битный
идентификатор. Алгоритм зафиксирован побайтово, чтобы независимые реализации
(на любом языке) получали идентичный результат:

1. Namespace (128 бит) берётся в сетевом порядке байт (big-endian)
2. К нему дописывается каноническая строка в UTF-8
3. Конкатенация хэшируется SHA-1 (160 бит)
4. Первые 16 байт digest — результат; byte 6: (b & 0x0F) | 0x50 (версия 5),
   byte 8: (b & 0x3F) | 0x80 (вариант RFC 4122)
5. Байты возвращаются в представление платформы (uuid.UUID)

КРИТИЧЕСКИЕ ИНВАРИАНТЫ:
1. Чистая функция: нет случайности, часов, счётчиков
2. Равные канонические строки → равные идентификаторы (cross-process, cross-language)
3. Идентификатор никогда не строится по неканонической строке

Это схема идентичности, а не граница безопасности: защиты от
adversarial коллизий SHA-1 нет.
"""

import hashlib
import uuid
from dataclasses import dataclass
from types import MappingProxyType
from typing import Final, Mapping

from pramana.core.math.errors import ArgumentError

# =============================================================================
# NAMESPACE КОНСТАНТЫ
# =============================================================================

# Опубликованный namespace домена чисел (Gaussian rationals / integers)
NUMBER_NAMESPACE: Final[uuid.UUID] = uuid.UUID("a6613321-e9f6-4348-8f8b-29d2a3c86349")

# URI-префикс домена чисел: num:3,4,0,1
NUMBER_PREFIX: Final[str] = "num"

# Префикс Pramana-идентификатора: pra:num:3,4,0,1
PRAMANA_PREFIX: Final[str] = "pra"

# База entity URL
ENTITY_BASE_URL: Final[str] = "https://pramana.dev/entity/"

# Namespace по URI-префиксу домена. Остальные домены (date, time, interval,
# coordinate, chemical, element) используют тот же алгоритм со своими константами.
DOMAIN_NAMESPACES: Final[Mapping[str, uuid.UUID]] = MappingProxyType(
    {NUMBER_PREFIX: NUMBER_NAMESPACE}
)


@dataclass(frozen=True)
class IdentityConfig:
    """Параметры внешнего представления идентификаторов."""

    entity_base_url: str = ENTITY_BASE_URL
    pramana_prefix: str = PRAMANA_PREFIX
    domain_prefix: str = NUMBER_PREFIX


DEFAULT_IDENTITY_CONFIG: Final[IdentityConfig] = IdentityConfig()


# =============================================================================
# ГЕНЕРАЦИЯ
# =============================================================================


def swap_byte_order(guid_bytes: bytes) -> bytes:
    """
    Перестановка байт между сетевым порядком и native GUID layout.

    Native (mixed-endian) layout хранит первые три поля little-endian:
    байты 0-3, 4-5 и 6-7 развёрнуты. Преобразование — инволюция.

    Examples:
        >>> u = uuid.UUID("a6613321-e9f6-4348-8f8b-29d2a3c86349")
        >>> swap_byte_order(u.bytes) == u.bytes_le
        True
    """
    if len(guid_bytes) != 16:
        raise ArgumentError(f"GUID must be 16 bytes, got {len(guid_bytes)}")
    b = guid_bytes
    return b[3::-1] + b[5:3:-1] + b[7:5:-1] + b[8:]


def generate_identity(name: str, namespace: uuid.UUID = NUMBER_NAMESPACE) -> uuid.UUID:
    """
    UUIDv5 по namespace и имени (канонической строке).

    Результат совпадает с uuid.uuid5(namespace, name).

    Args:
        name: Каноническая строка (без пробелов, уже нормализованная)
        namespace: Namespace домена

    Returns:
        uuid.UUID версии 5
    """
    if not isinstance(name, str):
        raise ArgumentError(f"Identity name must be a str, got {type(name).__name__}")

    digest = hashlib.sha1(namespace.bytes + name.encode("utf-8")).digest()

    result = bytearray(digest[:16])
    result[6] = (result[6] & 0x0F) | 0x50
    result[8] = (result[8] & 0x3F) | 0x80

    return uuid.UUID(bytes=bytes(result))


def namespace_for(prefix: str) -> uuid.UUID:
    """
    Namespace домена по URI-префиксу.

    Raises:
        ArgumentError: Если префикс не зарегистрирован
    """
    try:
        return DOMAIN_NAMESPACES[prefix]
    except KeyError:
        raise ArgumentError(f"Unknown identity domain prefix: {prefix!r}") from None


# =============================================================================
# URI / URL
# =============================================================================


def value_uri(canonical: str, config: IdentityConfig = DEFAULT_IDENTITY_CONFIG) -> str:
    """num:3,4,0,1"""
    return f"{config.domain_prefix}:{canonical}"


def identity_uri(identity: uuid.UUID, config: IdentityConfig = DEFAULT_IDENTITY_CONFIG) -> str:
    """num:<uuid>"""
    return f"{config.domain_prefix}:{identity}"


def pramana_id(canonical: str, config: IdentityConfig = DEFAULT_IDENTITY_CONFIG) -> str:
    """pra:num:3,4,0,1"""
    return f"{config.pramana_prefix}:{config.domain_prefix}:{canonical}"


def entity_url(reference: object, config: IdentityConfig = DEFAULT_IDENTITY_CONFIG) -> str:
    """https://pramana.dev/entity/<pramana_id | uuid>"""
    return f"{config.entity_base_url}{reference}"
