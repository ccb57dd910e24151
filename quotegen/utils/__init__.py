"""Utility modules."""

from .email_utils import EmailUtils
from .phone_utils import PhoneUtils

__all__ = ['EmailUtils', 'PhoneUtils']
