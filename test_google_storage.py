"""Tests for the Google API gateways against mocked service objects."""

from datetime import datetime, timezone
from unittest.mock import MagicMock

import httplib2
import pytest
from googleapiclient.errors import HttpError

from quotegen.storage.google_docs import GoogleDocsEditor
from quotegen.storage.google_drive import FOLDER_MIME_TYPE, GoogleDriveStore
from quotegen.storage.google_sheets import GoogleSheetsLedger, QuotationLedger


def http_error(status=500):
    return HttpError(httplib2.Response({'status': status, 'reason': 'boom'}), b'{}')


# ---------------------------------------------------------------- sheets


def test_ensure_table_returns_existing_sheet():
    service = MagicMock()
    service.spreadsheets().get().execute.return_value = {
        'sheets': [{'properties': {'title': 'Quotation Log', 'sheetId': 42}}]
    }
    ledger = GoogleSheetsLedger(service, 'ss-1')

    assert ledger.ensure_table('Quotation Log', QuotationLedger.HEADERS) == 42
    service.spreadsheets().batchUpdate.assert_not_called()
    service.spreadsheets().values().update.assert_not_called()


def test_ensure_table_creates_sheet_with_header():
    service = MagicMock()
    service.spreadsheets().get().execute.return_value = {'sheets': []}
    service.spreadsheets().batchUpdate().execute.return_value = {
        'replies': [{'addSheet': {'properties': {'sheetId': 7}}}]
    }
    ledger = GoogleSheetsLedger(service, 'ss-1')

    assert ledger.ensure_table('Quotation Log', QuotationLedger.HEADERS) == 7

    service.spreadsheets().values().update.assert_called_with(
        spreadsheetId='ss-1',
        range="'Quotation Log'!A1",
        valueInputOption='RAW',
        body={'values': [QuotationLedger.HEADERS]}
    )


def test_read_last_cell_skips_blank_rows():
    service = MagicMock()
    service.spreadsheets().values().get().execute.return_value = {
        'values': [['Quotation #'], ['AC2407004'], [], ['AC2407005'], [], ['  ']]
    }
    ledger = GoogleSheetsLedger(service, 'ss-1')

    assert ledger.read_last_cell('Quotation Log') == (4, 'AC2407005')


def test_read_last_cell_of_empty_sheet():
    service = MagicMock()
    service.spreadsheets().values().get().execute.return_value = {}
    ledger = GoogleSheetsLedger(service, 'ss-1')

    assert ledger.read_last_cell('Quotation Log') == (0, '')


def test_write_row():
    service = MagicMock()
    ledger = GoogleSheetsLedger(service, 'ss-1')

    ledger.write_row("Bob's Log", 5, ['AC2407001', 'Bob'])

    service.spreadsheets().values().update.assert_called_with(
        spreadsheetId='ss-1',
        range="'Bob''s Log'!A5",
        valueInputOption='RAW',
        body={'values': [['AC2407001', 'Bob']]}
    )
    service.spreadsheets().values().append.assert_not_called()


def test_log_quotation_writes_below_last_number_past_blank_rows():
    service = MagicMock()
    service.spreadsheets().get().execute.return_value = {
        'sheets': [{'properties': {'title': 'Quotation Log', 'sheetId': 3}}]
    }
    service.spreadsheets().values().get().execute.return_value = {
        'values': [['Quotation #'], ['AC2407004'], [], ['AC2407005']]
    }
    ledger = QuotationLedger(GoogleSheetsLedger(service, 'ss-1'))

    quote = ledger.log_quotation(['', 'Alice'], datetime(2024, 7, 15, tzinfo=timezone.utc))

    assert quote == 'AC2407006'
    service.spreadsheets().values().update.assert_called_with(
        spreadsheetId='ss-1',
        range="'Quotation Log'!A5",
        valueInputOption='RAW',
        body={'values': [['AC2407006', 'Alice']]}
    )


def test_sheets_errors_propagate():
    service = MagicMock()
    service.spreadsheets().values().update().execute.side_effect = http_error()
    ledger = GoogleSheetsLedger(service, 'ss-1')

    with pytest.raises(HttpError):
        ledger.write_row('Quotation Log', 2, ['x'])


# ---------------------------------------------------------------- drive


def test_find_or_create_folder_reuses_existing():
    service = MagicMock()
    service.files().list().execute.return_value = {'files': [{'id': 'f-1', 'name': 'example.com'}]}
    store = GoogleDriveStore(service)

    assert store.find_or_create_folder('example.com', 'parent') == 'f-1'
    service.files().create.assert_not_called()

    query = service.files().list.call_args.kwargs['q']
    assert "name = 'example.com'" in query
    assert f"mimeType = '{FOLDER_MIME_TYPE}'" in query
    assert "'parent' in parents" in query


def test_find_or_create_folder_creates_missing():
    service = MagicMock()
    service.files().list().execute.return_value = {'files': []}
    service.files().create().execute.return_value = {'id': 'f-2'}
    store = GoogleDriveStore(service)

    assert store.find_or_create_folder("o'brien@gmail.com", 'parent') == 'f-2'

    query = service.files().list.call_args.kwargs['q']
    assert "name = 'o\\'brien@gmail.com'" in query
    service.files().create.assert_called_with(
        body={'name': "o'brien@gmail.com", 'mimeType': FOLDER_MIME_TYPE, 'parents': ['parent']},
        fields='id'
    )


def test_copy_template_and_export():
    service = MagicMock()
    service.files().copy().execute.return_value = {'id': 'doc-9', 'parents': ['f-1']}
    service.files().export().execute.return_value = b'%PDF-1.4'
    store = GoogleDriveStore(service)

    assert store.copy_template('tmpl', 'example.com QUOTE #AC2407001', 'f-1') == 'doc-9'
    service.files().copy.assert_called_with(
        fileId='tmpl',
        body={'name': 'example.com QUOTE #AC2407001', 'parents': ['f-1']},
        fields='id, parents'
    )

    assert store.export_pdf('doc-9') == b'%PDF-1.4'
    service.files().export.assert_called_with(fileId='doc-9', mimeType='application/pdf')


def test_drive_errors_propagate():
    service = MagicMock()
    service.files().copy().execute.side_effect = http_error(404)
    store = GoogleDriveStore(service)

    with pytest.raises(HttpError):
        store.copy_template('missing', 'name', 'f-1')


# ---------------------------------------------------------------- docs


def test_substitute_placeholders_sends_one_request_per_key():
    service = MagicMock()
    service.documents().batchUpdate().execute.return_value = {'documentId': 'doc-9'}
    editor = GoogleDocsEditor(service)

    replacements = {'{{name}}': 'Alice', '{{quote}}': 'AC2407001'}
    assert editor.substitute_placeholders('doc-9', replacements) == 'doc-9'

    body = service.documents().batchUpdate.call_args.kwargs['body']
    sent = {
        r['replaceAllText']['containsText']['text']: r['replaceAllText']['replaceText']
        for r in body['requests']
    }
    assert sent == replacements
    assert all(r['replaceAllText']['containsText']['matchCase'] for r in body['requests'])


def test_substitute_nothing_skips_api_call():
    service = MagicMock()
    editor = GoogleDocsEditor(service)

    assert editor.substitute_placeholders('doc-9', {}) == 'doc-9'
    service.documents().batchUpdate().execute.assert_not_called()
