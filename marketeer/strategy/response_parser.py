"""
Parsing of model responses into marketing strategies.

Parsing happens in two steps: the raw text must decode to a JSON object
(otherwise the response is MALFORMED), and the object must carry the three
strategy fields as non-empty strings (otherwise it is INCOMPLETE). Failures
are returned inside a ParseResult, never raised.
"""

import json
from typing import Any, List, Optional

import jsonschema

from marketeer.core.error_handler import ShapeError, ShapeErrorKind
from marketeer.core.logging_config import get_logger, truncate
from marketeer.schemas import load_schema
from marketeer.strategy.models import MarketingStrategy

# Initialize logger
logger = get_logger(__name__)

_validator = jsonschema.Draft7Validator(load_schema("marketing_strategy"))

class ParseResult:
    """
    Outcome of parsing a model response: either a strategy or a shape error.
    """

    def __init__(
        self,
        strategy: Optional[MarketingStrategy] = None,
        error: Optional[ShapeError] = None
    ):
        if (strategy is None) == (error is None):
            raise ValueError("ParseResult needs exactly one of strategy or error")
        self.strategy = strategy
        self.error = error

    @property
    def ok(self) -> bool:
        return self.strategy is not None

    def __repr__(self) -> str:
        if self.ok:
            return f"ParseResult(strategy={self.strategy!r})"
        return f"ParseResult(error={self.error!r})"


def _failed(message: str, kind: ShapeErrorKind, fields: Optional[List[str]] = None) -> ParseResult:
    error = ShapeError(message, kind, missing_fields=fields)
    logger.warning(str(error))
    return ParseResult(error=error)


def _offending_fields(data: dict) -> List[str]:
    """Names of required fields that are missing or fail their type constraints, in schema order."""
    required = _validator.schema["required"]
    fields = set()
    for error in _validator.iter_errors(data):
        if error.validator == "required":
            fields.update(name for name in required if name not in data)
        elif error.path:
            fields.add(error.path[0])
    return [name for name in required if name in fields]


def parse_strategy_response(raw: Any) -> ParseResult:
    """
    Parse raw model output into a MarketingStrategy.

    Field values are passed through unchanged; extra fields are ignored.

    Args:
        raw (str): Text returned by the generation service

    Returns:
        ParseResult: The strategy, or a MALFORMED / INCOMPLETE ShapeError
    """
    if not isinstance(raw, (str, bytes, bytearray)):
        return _failed(f"Expected text, got {type(raw).__name__}", ShapeErrorKind.MALFORMED)

    try:
        data = json.loads(raw)
    except (ValueError, RecursionError) as e:
        # JSONDecodeError and UnicodeDecodeError are both ValueErrors
        logger.debug(f"Undecodable response: {truncate(repr(raw))}")
        return _failed(f"Response is not valid JSON: {e}", ShapeErrorKind.MALFORMED)

    if not isinstance(data, dict):
        return _failed(
            f"Response is a JSON {type(data).__name__}, not an object",
            ShapeErrorKind.MALFORMED
        )

    fields = _offending_fields(data)
    if fields:
        return _failed(
            "Response is missing required strategy fields",
            ShapeErrorKind.INCOMPLETE,
            fields
        )

    logger.info("Successfully parsed marketing strategy")
    return ParseResult(strategy=MarketingStrategy.from_dict(data))
