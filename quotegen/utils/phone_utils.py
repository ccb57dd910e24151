"""Telephone number utilities."""

from typing import Optional

import phonenumbers


class PhoneUtils:
    """Sanitize telephone numbers and look up their country."""

    @staticmethod
    def sanitize(tel: str) -> str:
        """
        Keep digits and a single leading ``+``.

        A ``+`` anywhere before the first digit counts as leading, so
        ``(+1) 434-284-0668`` and ``Tel: +44 20 7183 8750`` keep it.

        Args:
            tel: Number as typed, e.g. ``+1 (434) 284-0668``

        Returns:
            Sanitized number, e.g. ``+14342840668``
        """
        digits = ''.join(c for c in tel if '0' <= c <= '9')
        if not digits:
            return ''
        first_digit = next(i for i, c in enumerate(tel) if '0' <= c <= '9')
        if '+' in tel[:first_digit]:
            return '+' + digits
        return digits

    @staticmethod
    def normalize(tel: str) -> str:
        """Sanitize and assume North America for bare 10 digit numbers."""
        tel = PhoneUtils.sanitize(tel)
        if not tel.startswith('+') and len(tel) == 10:
            tel = '+1' + tel
        return tel

    @staticmethod
    def country(tel: str) -> Optional[str]:
        """
        Look up the ISO 3166-1 alpha-2 country code of a number.

        Args:
            tel: Number in international format (leading ``+``)

        Returns:
            Country code such as ``US``, or None if unknown
        """
        try:
            number = phonenumbers.parse(tel, None)
        except phonenumbers.NumberParseException:
            return None
        region = phonenumbers.region_code_for_number(number)
        if not region or region == phonenumbers.UNKNOWN_REGION:
            return None
        return region
