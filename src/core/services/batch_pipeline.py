"""Validation orchestration utilities.

The CLI delegates single-document explanations and batch runs to these
helpers, which keeps side-effects (printing, files) out of the core logic
and makes the flow reusable for other entry-points and tests.
"""

from __future__ import annotations

import logging
from typing import Iterable

from core.domain.document_type import DocumentType
from core.domain.models import BatchEntry, BatchReport, DocumentCheck
from core.services.document_validator import rejection_reason

logger = logging.getLogger(__name__)


def explain_document(
    document_type: object,
    document_number: object,
    *,
    line: int | None = None,
) -> DocumentCheck:
    """Validate one document and report the first failing rule."""

    reason = rejection_reason(document_type, document_number)
    return DocumentCheck(
        document_type=DocumentType.parse(document_type),
        document_number=document_number if isinstance(document_number, str) else "",
        is_valid=reason is None,
        reason=reason,
        line=line,
    )


def _resolve_type(entry: BatchEntry, default_type: DocumentType | None) -> object:
    if entry.document_type is None or not entry.document_type.strip():
        return default_type
    return entry.document_type


def run_batch(
    entries: Iterable[BatchEntry],
    default_type: DocumentType | None = None,
) -> BatchReport:
    """Validate every entry independently, in input order.

    The report always holds every entry; filtering is a presentation concern.
    """

    checks = [
        explain_document(
            _resolve_type(entry, default_type),
            entry.document_number,
            line=entry.line,
        )
        for entry in entries
    ]

    report = BatchReport(checks=checks)
    logger.info("Batch finished: %d checked, %d invalid", report.total, report.invalid_count)
    return report
