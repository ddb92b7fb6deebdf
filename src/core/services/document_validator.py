"""Validación de números de documento dominicanos.

Contrato:
- `validate_document_number` nunca lanza excepciones: cualquier entrada
  malformada (vacía, longitud incorrecta, caracteres inválidos, dígito
  verificador incorrecto, tipo desconocido) produce `False`.
- El número se evalúa tal como llega: no se eliminan espacios ni guiones.

Cada chequeo tiene una función `*_rejection` que devuelve la primera regla
que falla (o `None`), para que el pipeline de lotes pueda explicar el
veredicto sin duplicar las reglas.
"""

from __future__ import annotations

import logging
import re
from typing import Callable

from core.domain.document_type import DocumentType
from core.services.checksums import (
    DNI_PAYLOAD_LENGTH,
    RNC_PAYLOAD_LENGTH,
    dni_check_digit,
    rnc_check_digit,
    to_digits,
)

logger = logging.getLogger(__name__)

DNI_RESERVED_PREFIX = "000"

PASSPORT_PATTERN = re.compile(r"[A-Za-z]{2}[0-9]{7}")

REASON_EMPTY = "empty"
REASON_UNKNOWN_TYPE = "unknown_type"
REASON_LENGTH = "length"
REASON_NON_DIGIT = "non_digit"
REASON_RESERVED_PREFIX = "reserved_prefix"
REASON_PATTERN = "pattern"
REASON_CHECK_DIGIT = "check_digit"


def dni_rejection(dni: str) -> str | None:
    if len(dni) != DocumentType.DNI.expected_length:
        return REASON_LENGTH
    if to_digits(dni) is None:
        return REASON_NON_DIGIT
    if dni.startswith(DNI_RESERVED_PREFIX):
        return REASON_RESERVED_PREFIX
    if int(dni[DNI_PAYLOAD_LENGTH]) != dni_check_digit(dni[:DNI_PAYLOAD_LENGTH]):
        return REASON_CHECK_DIGIT
    return None


def passport_rejection(passport: str) -> str | None:
    if len(passport) != DocumentType.PASSPORT.expected_length:
        return REASON_LENGTH
    if PASSPORT_PATTERN.fullmatch(passport) is None:
        return REASON_PATTERN
    return None


def rnc_rejection(rnc: str) -> str | None:
    if len(rnc) != DocumentType.RNC.expected_length:
        return REASON_LENGTH
    if to_digits(rnc) is None:
        return REASON_NON_DIGIT
    if int(rnc[RNC_PAYLOAD_LENGTH]) != rnc_check_digit(rnc[:RNC_PAYLOAD_LENGTH]):
        return REASON_CHECK_DIGIT
    return None


_REJECTIONS: dict[DocumentType, Callable[[str], str | None]] = {
    DocumentType.DNI: dni_rejection,
    DocumentType.PASSPORT: passport_rejection,
    DocumentType.RNC: rnc_rejection,
}


def is_dni_valid(dni: str) -> bool:
    """Cédula: 10 dígitos + verificador mod 10 (pesos 1,2 alternados)."""

    return dni_rejection(dni) is None


def is_passport_valid(passport: str) -> bool:
    """Pasaporte: 2 letras ASCII (cualquier caso) seguidas de 7 dígitos."""

    return passport_rejection(passport) is None


def is_rnc_valid(rnc: str) -> bool:
    """RNC: 8 dígitos + verificador mod 11 (pesos 7,9,8,6,5,4,3,2)."""

    return rnc_rejection(rnc) is None


def rejection_reason(document_type: object, document_number: object) -> str | None:
    """Primera regla que rechaza el documento, o `None` si es válido."""

    if not isinstance(document_number, str) or not document_number:
        return REASON_EMPTY

    resolved = DocumentType.parse(document_type)
    if resolved is None:
        logger.debug("Unknown document type %r, failing closed", document_type)
        return REASON_UNKNOWN_TYPE

    reason = _REJECTIONS[resolved](document_number)
    if reason is not None:
        logger.debug("%s rejected: %s", resolved.label(), reason)
    return reason


def validate_document_number(document_type: object, document_number: object) -> bool:
    """Valida `document_number` según `document_type`.

    Devuelve `False` (nunca lanza) para números vacíos o ausentes, tipos no
    reconocidos y cualquier número que no cumpla las reglas de su tipo.
    """

    return rejection_reason(document_type, document_number) is None
