"""
Loader for the bundled tabular concept resource.

The resource is UTF‑8 text: one header line, then one concept per
line with six positional, comma‑separated fields::

    conceptId,displayName,description,parentIds,childIds,alternateNames

``parentIds`` and ``childIds`` are ``;``‑separated.  The parser is
deliberately literal: no quoting, no whitespace trimming and no
de‑duplication.  Lines end at LF, CR or CRLF only.  An empty edge
field yields ``[""]``.  Fields beyond the sixth are ignored.

Parsing never touches the store.  ``iter_concepts`` is lazy so that a
caller can persist the records preceding a malformed line.
"""

import logging
import re
from pathlib import Path
from typing import Iterator, List, Union

from clinical_concepts_api.app.core.errors import CsvFormatError, IngestError
from clinical_concepts_api.app.schemas.concept import ClinicalConcept


logger = logging.getLogger(__name__)

RESOURCES_DIR = Path(__file__).resolve().parent.parent / "resources"

FIELD_COUNT = 6
FIELD_SEPARATOR = ","
ID_SEPARATOR = ";"
LINE_TERMINATOR = re.compile(r"\r\n|\r|\n")


def resolve_resource(name: str) -> Path:
    """Locate a resource by name.

    Absolute paths are used as is; anything else is resolved against
    the package ``resources`` directory.
    """
    path = Path(name)
    if path.is_absolute():
        return path
    return RESOURCES_DIR / path


def read_resource(name: str) -> bytes:
    """Return the raw bytes of a resource, raising ``IngestError`` on failure."""
    path = resolve_resource(name)
    try:
        return path.read_bytes()
    except OSError as exc:
        raise IngestError(f"cannot read resource {path}: {exc}") from exc


def iter_concepts(data: Union[bytes, str]) -> Iterator[ClinicalConcept]:
    """Yield concepts parsed from ``data`` in file order.

    The first line is always skipped.  Line numbers in
    ``CsvFormatError`` are 1‑based and count the header.
    """
    if isinstance(data, bytes):
        try:
            text = data.decode("utf-8")
        except UnicodeDecodeError as exc:
            raise IngestError(f"resource is not valid UTF-8: {exc}") from exc
    else:
        text = data

    lines = LINE_TERMINATOR.split(text)
    # A terminator ending the last line does not open another one.
    if lines and lines[-1] == "":
        lines.pop()

    for line_number, line in enumerate(lines, start=1):
        if line_number == 1:
            continue
        yield parse_line(line, line_number)


def parse_line(line: str, line_number: int) -> ClinicalConcept:
    """Translate one data line into a ``ClinicalConcept``."""
    columns = line.split(FIELD_SEPARATOR)
    if len(columns) < FIELD_COUNT:
        raise CsvFormatError(
            line_number,
            f"line {line_number}: expected {FIELD_COUNT} fields, got {len(columns)}",
        )
    return ClinicalConcept(
        concept_id=columns[0],
        display_name=columns[1],
        description=columns[2],
        parent_ids=columns[3].split(ID_SEPARATOR),
        child_ids=columns[4].split(ID_SEPARATOR),
        alternate_names=columns[5],
    )


def parse_concepts(data: Union[bytes, str]) -> List[ClinicalConcept]:
    """Eagerly parse ``data``; fails as a whole on the first malformed line."""
    return list(iter_concepts(data))


def load_concepts(name: str) -> Iterator[ClinicalConcept]:
    """Read the named resource and yield its concepts lazily."""
    data = read_resource(name)
    logger.debug("Read %d bytes from resource %s", len(data), name)
    return iter_concepts(data)
