"""Decide whether the first line of a table is a header or a data row."""
from __future__ import annotations

import logging
from typing import Sequence

from common.models import HeaderCheck
from .type_inference import is_data_like

logger = logging.getLogger(__name__)


def validate_header(fields: Sequence[str]) -> HeaderCheck:
    """Reject the line when a strict majority of its fields look like data.

    Plain text does not count against the line, since ordinary text columns
    and column names are indistinguishable. Exactly half is still a header.
    """

    data_like = sum(1 for field in fields if is_data_like(field))
    total = len(fields)
    if data_like * 2 > total:
        reason = f"{data_like} of {total} header fields look like numbers or dates"
        logger.debug("Rejecting header %r: %s", list(fields), reason)
        return HeaderCheck(is_header=False, reason=reason, data_like_count=data_like, field_count=total)
    return HeaderCheck(
        is_header=True,
        reason=f"{data_like} of {total} header fields look like data",
        data_like_count=data_like,
        field_count=total,
    )
