"""Carga de archivos de lote.

Formato (texto UTF-8, una fila por documento):
- `tipo,numero`  -> p.ej. `dni,00113918205`
- `numero`       -> el tipo se toma del default (`--type` o configuración)

Las líneas vacías y las que empiezan con `#` se ignoran. Las celdas se
recortan porque el espacio alrededor es parte del formato del archivo, no
del número.
"""

from __future__ import annotations

import csv
import logging
from pathlib import Path

from core.domain.models import BatchEntry

logger = logging.getLogger(__name__)


def parse_batch_lines(lines: list[str], *, delimiter: str = ",") -> list[BatchEntry]:
    entries: list[BatchEntry] = []
    for line_no, raw in enumerate(lines, start=1):
        text = raw.strip()
        if not text or text.startswith("#"):
            continue

        cells = [c.strip() for c in next(csv.reader([text], delimiter=delimiter))]
        if len(cells) == 1:
            entries.append(BatchEntry(document_number=cells[0], line=line_no))
        else:
            # extra columns are ignored
            entries.append(
                BatchEntry(document_type=cells[0], document_number=cells[1], line=line_no)
            )
    return entries


def load_batch_entries(path: Path, *, delimiter: str = ",") -> list[BatchEntry]:
    raw = path.read_text(encoding="utf-8")
    entries = parse_batch_lines(raw.splitlines(), delimiter=delimiter)
    logger.info("Loaded %d entries from %s", len(entries), path)
    return entries
