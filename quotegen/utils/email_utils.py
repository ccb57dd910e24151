"""Email address utilities."""

import os
from typing import FrozenSet

PUBLIC_DOMAINS_FILE = os.path.join(
    os.path.dirname(os.path.dirname(os.path.abspath(__file__))),
    'data',
    'public_email_domains.txt'
)


def load_public_domains(filepath: str = PUBLIC_DOMAINS_FILE) -> FrozenSet[str]:
    """
    Load public email provider domains.

    Args:
        filepath: Text file with one domain per line; ``#`` starts a comment

    Returns:
        Lower-cased domains
    """
    domains = set()
    with open(filepath, 'r', encoding='utf-8') as f:
        for line in f:
            line = line.split('#', 1)[0].strip().lower()
            if line:
                domains.add(line)
    return frozenset(domains)


class EmailUtils:
    """Classify email addresses and derive customer folder names."""

    # Consumer mail providers. Quotes for these addresses are filed by the
    # full address because the domain says nothing about the customer.
    PUBLIC_DOMAINS: FrozenSet[str] = load_public_domains()

    @staticmethod
    def domain(email: str) -> str:
        """Return the part after the last ``@``, lower-cased."""
        return email.rsplit('@', 1)[-1].strip().lower()

    @staticmethod
    def is_public_email(email: str) -> bool:
        """Check if the address belongs to a public email provider."""
        return EmailUtils.domain(email) in EmailUtils.PUBLIC_DOMAINS

    @staticmethod
    def folder_name(email: str) -> str:
        """
        Name of the storage folder holding a customer's quotes.

        Args:
            email: Customer email address

        Returns:
            The full address for public providers, the domain otherwise
        """
        if EmailUtils.is_public_email(email):
            return email
        return EmailUtils.domain(email)
