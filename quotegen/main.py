"""Main entry point for the quote generator."""

import argparse
import csv
import sys
from typing import Dict, List, Optional

from google.auth.exceptions import GoogleAuthError
from googleapiclient.errors import HttpError

from quotegen.core.config import ConfigurationError, QuoteConfig
from quotegen.core.fields import normalize_key
from quotegen.core.generator import QuoteGenerator
from quotegen.core.quote_number import QuoteNumberError
from quotegen.storage.google_auth import build_services, get_credentials
from quotegen.storage.google_docs import GoogleDocsEditor
from quotegen.storage.google_drive import GoogleDriveStore
from quotegen.storage.google_sheets import GoogleSheetsLedger


def parse_data(values: Optional[List[str]]) -> Dict[str, str]:
    """
    Parse ``--data`` values into a dict.

    Each value holds one or more comma-separated ``key=value`` pairs; values
    containing commas can be double-quoted (``--data '"company=Acme, Inc"'``).

    Raises:
        ValueError: if a pair has no ``=``
    """
    data = {}
    for value in values or []:
        for pair in next(csv.reader([value], skipinitialspace=True), []):
            if '=' not in pair:
                raise ValueError(f"{pair!r} must be formatted as key=value")
            key, val = pair.split('=', 1)
            data[key.strip()] = val
    return data


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog='quotegen',
        description='Generate a sales quotation from a Google Docs template',
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  quotegen --template-doc-id kubedb-30 \\
      --data name="Alice Smith" --data email=alice@example.com \\
      --data company=Example --data tel="+1 (434) 284-0668"
  quotegen --template-doc-id <doc-id> --data 'email=bob@gmail.com,name=Bob'
        """
    )

    parser.add_argument(
        '--parent-folder-id',
        type=str,
        default=None,
        help='Drive folder where quotes are stored under a folder named after the email domain'
    )

    parser.add_argument(
        '--template-doc-id',
        type=str,
        default=None,
        help='Template document id or alias (e.g. kubedb-30)'
    )

    parser.add_argument(
        '--out-dir',
        type=str,
        default=None,
        help='Directory where exported PDFs are stored (default: quotes)'
    )

    parser.add_argument(
        '--data',
        action='append',
        metavar='KEY=VALUE',
        help='Key-value pairs for text replacement (repeatable)'
    )

    parser.add_argument(
        '--spreadsheet-id',
        type=str,
        default=None,
        help='Google Spreadsheet id used to store the quotation log'
    )

    parser.add_argument(
        '--credentials',
        type=str,
        default=None,
        help='Service account key or OAuth client secret file (default: credentials.json)'
    )

    parser.add_argument(
        '--token',
        type=str,
        default=None,
        help='Cached OAuth token file (default: token.json)'
    )

    return parser


def main(argv: Optional[List[str]] = None) -> int:
    """Main function to generate a quote."""
    parser = build_parser()
    args = parser.parse_args(argv)

    try:
        data = parse_data(args.data)
    except ValueError as e:
        parser.error(str(e))

    try:
        config = QuoteConfig(
            parent_folder_id=args.parent_folder_id,
            template_doc_id=args.template_doc_id,
            out_dir=args.out_dir,
            data=data,
            spreadsheet_id=args.spreadsheet_id,
            credentials_file=args.credentials,
            token_file=args.token
        )
        config.validate()
        if '{{email}}' not in {normalize_key(k) for k in data}:
            raise ConfigurationError("missing email")

        creds = get_credentials(config.credentials_file, config.token_file)
        sheets, drive, docs = build_services(creds)

        generator = QuoteGenerator(
            config,
            ledger=GoogleSheetsLedger(sheets, config.spreadsheet_id),
            store=GoogleDriveStore(drive),
            editor=GoogleDocsEditor(docs)
        )
        result = generator.generate()

    except ConfigurationError as e:
        print(f"✗ Configuration error: {e}", file=sys.stderr)
        return 1
    except QuoteNumberError as e:
        print(f"✗ Unable to allocate quote number: {e}", file=sys.stderr)
        return 1
    except HttpError as e:
        print(f"✗ Google API error: {e}", file=sys.stderr)
        return 1
    except GoogleAuthError as e:
        print(f"✗ Google authentication failed: {e}", file=sys.stderr)
        return 1
    except OSError as e:
        print(f"✗ {e}", file=sys.stderr)
        return 1

    print(f"\n✅ Done! Quote #{result.quote} saved to {result.pdf_path}\n")
    return 0


if __name__ == "__main__":
    sys.exit(main())
