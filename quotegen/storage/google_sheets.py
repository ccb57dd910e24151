"""Google Sheets quotation log."""

from datetime import datetime
from typing import List, Tuple

from googleapiclient.errors import HttpError

from .base import LedgerGateway
from ..core.quote_number import next_quote_number


def _a1(sheet_name: str, cells: str) -> str:
    """A1 range on a named sheet, quoting the name."""
    return "'%s'!%s" % (sheet_name.replace("'", "''"), cells)


class GoogleSheetsLedger(LedgerGateway):
    """Quotation log kept in a Google Spreadsheet."""

    def __init__(self, service, spreadsheet_id: str):
        """
        Args:
            service: Sheets v4 client from googleapiclient.discovery.build
            spreadsheet_id: The spreadsheet ID
        """
        self.service = service
        self.spreadsheet_id = spreadsheet_id

    def ensure_table(self, sheet_name: str, headers: List[str]) -> int:
        try:
            spreadsheet = self.service.spreadsheets().get(
                spreadsheetId=self.spreadsheet_id
            ).execute()

            for sheet in spreadsheet.get('sheets', []):
                if sheet['properties']['title'] == sheet_name:
                    return sheet['properties']['sheetId']

            request_body = {
                'requests': [{
                    'addSheet': {
                        'properties': {
                            'title': sheet_name
                        }
                    }
                }]
            }
            response = self.service.spreadsheets().batchUpdate(
                spreadsheetId=self.spreadsheet_id,
                body=request_body
            ).execute()
            sheet_id = response['replies'][0]['addSheet']['properties']['sheetId']

            self.service.spreadsheets().values().update(
                spreadsheetId=self.spreadsheet_id,
                range=_a1(sheet_name, 'A1'),
                valueInputOption='RAW',
                body={'values': [headers]}
            ).execute()
            self.format_header(sheet_id, len(headers))

            print(f"✓ Created sheet tab: '{sheet_name}'")
            return sheet_id

        except HttpError as e:
            print(f"✗ Failed to prepare sheet '{sheet_name}': {e}")
            raise

    def format_header(self, sheet_id: int, columns: int):
        """
        Bold and freeze the header row, then fit the columns.

        Args:
            sheet_id: Sheet id
            columns: Number of header columns
        """
        requests = [
            # Freeze header row
            {
                'updateSheetProperties': {
                    'properties': {
                        'sheetId': sheet_id,
                        'gridProperties': {
                            'frozenRowCount': 1
                        }
                    },
                    'fields': 'gridProperties.frozenRowCount'
                }
            },
            # Bold header row
            {
                'repeatCell': {
                    'range': {
                        'sheetId': sheet_id,
                        'startRowIndex': 0,
                        'endRowIndex': 1
                    },
                    'cell': {
                        'userEnteredFormat': {
                            'textFormat': {
                                'bold': True
                            },
                            'backgroundColor': {
                                'red': 0.9,
                                'green': 0.9,
                                'blue': 0.9
                            }
                        }
                    },
                    'fields': 'userEnteredFormat(textFormat,backgroundColor)'
                }
            },
            {
                'autoResizeDimensions': {
                    'dimensions': {
                        'sheetId': sheet_id,
                        'dimension': 'COLUMNS',
                        'startIndex': 0,
                        'endIndex': columns
                    }
                }
            }
        ]

        self.service.spreadsheets().batchUpdate(
            spreadsheetId=self.spreadsheet_id,
            body={'requests': requests}
        ).execute()

    def read_last_cell(self, sheet_name: str) -> Tuple[int, str]:
        try:
            result = self.service.spreadsheets().values().get(
                spreadsheetId=self.spreadsheet_id,
                range=_a1(sheet_name, 'A:A')
            ).execute()
        except HttpError as e:
            print(f"✗ Failed to read sheet '{sheet_name}': {e}")
            raise

        values = result.get('values', [])
        for index in range(len(values) - 1, -1, -1):
            row = values[index]
            if row and str(row[0]).strip():
                return index + 1, str(row[0]).strip()
        return 0, ''

    def write_row(self, sheet_name: str, row_number: int, row: List[str]):
        # values.update on an explicit row; values.append would stop at the
        # first blank row of the log
        try:
            self.service.spreadsheets().values().update(
                spreadsheetId=self.spreadsheet_id,
                range=_a1(sheet_name, f'A{row_number}'),
                valueInputOption='RAW',
                body={'values': [row]}
            ).execute()
        except HttpError as e:
            print(f"✗ Failed to write row {row_number} of sheet '{sheet_name}': {e}")
            raise


class QuotationLedger:
    """Allocate quote numbers and record one row per quotation."""

    SHEET_NAME = "Quotation Log"

    HEADERS = [
        "Quotation #",
        "Name",
        "Designation",
        "Email",
        "Telephone",
        "Company",
        "Website",
        "Country",
        "Pricing Template",
        "Preparation Date",
        "Expiration Date",
    ]

    def __init__(self, gateway: LedgerGateway):
        self.gateway = gateway

    @staticmethod
    def build_row(replacements: dict, template_id: str) -> List[str]:
        """Ledger row for a quote; the first cell is filled in by log_quotation."""
        return [
            "",
            replacements.get("{{name}}", ""),
            replacements.get("{{designation}}", ""),
            replacements.get("{{email}}", ""),
            replacements.get("{{tel}}", ""),
            replacements.get("{{company}}", ""),
            replacements.get("{{website}}", ""),
            replacements.get("{{country}}", ""),
            template_id,
            replacements.get("{{prep-date}}", ""),
            replacements.get("{{expiry-date}}", ""),
        ]

    def log_quotation(self, row: List[str], now: datetime) -> str:
        """
        Allocate the next quote number and write ``row`` under it.

        The row goes directly below the last logged number, even when the
        log has blank rows above it. Reading the last number and writing are
        separate calls, so two runs against the same spreadsheet at the same
        time can allocate the same number.

        Args:
            row: Ledger row; its first cell is replaced by the quote number
            now: Current time, UTC

        Returns:
            The allocated quote number
        """
        self.gateway.ensure_table(self.SHEET_NAME, self.HEADERS)
        last_row, last_quote = self.gateway.read_last_cell(self.SHEET_NAME)
        quote = next_quote_number(last_quote, now)

        row = [quote] + list(row[1:])
        self.gateway.write_row(self.SHEET_NAME, last_row + 1, row)
        print(f"✓ Logged quotation {quote}")
        return quote
