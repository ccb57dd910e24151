"""Placeholder keys and derived quote fields."""

import re
from datetime import datetime, timedelta
from typing import Dict, Mapping

import inflection

from .config import ConfigurationError
from ..utils.email_utils import EmailUtils
from ..utils.phone_utils import PhoneUtils

QUOTE_VALIDITY = timedelta(days=30)

_SEPARATORS = re.compile(r"[\s_]+")


def normalize_key(key: str) -> str:
    """
    Turn an input key into a ``{{placeholder}}``.

    ``{{...}}`` keys are kept verbatim; anything else is stripped of braces
    and dasherized, so ``ContactName``, ``contact_name`` and ``Contact Name``
    all become ``{{contact-name}}``.
    """
    if key.startswith("{{") and key.endswith("}}"):
        return key
    name = _SEPARATORS.sub("_", key.strip("{}").strip())
    name = inflection.dasherize(inflection.underscore(name))
    return "{{%s}}" % name


def format_date(value: datetime) -> str:
    """Format a date the way quotes show it, e.g. ``Jul 4, 2024``."""
    return f"{value:%b} {value.day}, {value.year}"


def build_replacements(raw: Mapping[str, str], now: datetime) -> Dict[str, str]:
    """
    Build the placeholder replacements for a quote.

    Args:
        raw: Key/value pairs given on the command line
        now: Preparation time of the quote

    Returns:
        Mapping of ``{{placeholder}}`` to replacement text. ``{{quote}}`` is
        added later, once the quote number is allocated.

    Raises:
        ConfigurationError: if no email is given
    """
    replacements = {normalize_key(k): v for k, v in raw.items()}

    email = replacements.get("{{email}}")
    if email is None:
        raise ConfigurationError("missing email")

    if EmailUtils.is_public_email(email):
        replacements["{{website}}"] = ""
    else:
        replacements["{{website}}"] = EmailUtils.domain(email)

    if "{{phone}}" in replacements and "{{tel}}" not in replacements:
        replacements["{{tel}}"] = replacements["{{phone}}"]

    if "{{tel}}" in replacements:
        tel = PhoneUtils.normalize(replacements["{{tel}}"])
        replacements["{{tel}}"] = tel
        country = PhoneUtils.country(tel)
        if country:
            replacements["{{country}}"] = country

    replacements["{{prep-date}}"] = format_date(now)
    replacements["{{expiry-date}}"] = format_date(now + QUOTE_VALIDITY)
    return replacements
