from __future__ import annotations

import logging
from datetime import date
from functools import wraps
from typing import Optional

from flask import jsonify, request

from ..core.exceptions import (
    CsvStructureError,
    EnhancementError,
    RecordNotFoundError,
    ValidationError,
)
from .datetime_utils import parse_iso_date

logger = logging.getLogger(__name__)


def fail(message: str, status: int):
    return jsonify({"success": False, "message": message}), status


def json_errors(view):
    """Map domain errors raised by a view to JSON error responses."""

    @wraps(view)
    def wrapper(*args, **kwargs):
        try:
            return view(*args, **kwargs)
        except (ValidationError, CsvStructureError) as e:
            return fail(str(e), 400)
        except RecordNotFoundError as e:
            return fail(str(e), 404)
        except EnhancementError as e:
            return fail(str(e), 502)
        except Exception:
            logger.exception("Unhandled error in %s", request.path)
            return fail("Internal error", 500)

    return wrapper


def date_arg(name: str) -> Optional[date]:
    value = (request.args.get(name) or "").strip()
    return parse_iso_date(value) if value else None
