"""
Request field extraction and parsing

Route handlers read their inputs from request headers, falling back to a
query parameter of the same name. Parsing never raises: every helper returns
None when the field is absent or does not parse, and the handler turns that
into its error payload.
"""

import logging
from typing import Optional

from fastapi import Request

logger = logging.getLogger(__name__)

TRUE_VALUES = {"true", "yes", "1"}
FALSE_VALUES = {"false", "no", "0"}


def decode_header_value(value: str) -> str:
    """
    Re-read a header value as UTF-8

    Starlette decodes header bytes as latin-1; values that are not valid
    UTF-8 are returned unchanged.
    """
    try:
        return value.encode("latin-1").decode("utf-8")
    except (UnicodeEncodeError, UnicodeDecodeError):
        return value


def get_field(request: Request, name: str) -> Optional[str]:
    """Return a raw field value from the headers or query string"""
    value = request.headers.get(name)
    if value is not None:
        return decode_header_value(value)
    return request.query_params.get(name)


async def get_body_field(request: Request, name: str) -> Optional[str]:
    """
    Return a field from a JSON object body

    Non-JSON bodies, malformed JSON and non-object payloads yield None.
    """
    if not request.headers.get("content-type", "").startswith("application/json"):
        return None
    try:
        payload = await request.json()
    except ValueError:
        logger.debug(f"Ignoring malformed JSON body while looking up '{name}'")
        return None
    if not isinstance(payload, dict) or payload.get(name) is None:
        return None
    return str(payload[name])


def parse_int(value: Optional[str]) -> Optional[int]:
    if value is None:
        return None
    stripped = value.strip()
    digits = stripped[1:] if stripped[:1] in ("+", "-") else stripped
    # Plain ASCII decimal only: no "1_000", no non-ASCII digits
    if not (digits.isascii() and digits.isdecimal()):
        logger.debug(f"Cannot parse integer field value: {value!r}")
        return None
    return int(stripped)


def parse_bool(value: Optional[str]) -> Optional[bool]:
    if value is None:
        return None
    normalized = value.strip().lower()
    if normalized in TRUE_VALUES:
        return True
    if normalized in FALSE_VALUES:
        return False
    logger.debug(f"Cannot parse boolean field value: {value!r}")
    return None


def get_int_field(request: Request, name: str) -> Optional[int]:
    return parse_int(get_field(request, name))


def get_bool_field(request: Request, name: str) -> Optional[bool]:
    return parse_bool(get_field(request, name))
