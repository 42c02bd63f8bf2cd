"""Tests for pandas-backed CSV / Excel reading and report writing."""

import pandas as pd

from address_reconcile.matcher import match_one, match_partial
from address_reconcile.models import PartialStructuredAddress
from address_reconcile.recognizers import AddressStatus
from address_reconcile.tables import (
    MATCH_REPORT_COLUMNS,
    PARTIAL_REPORT_COLUMNS,
    read_rows,
    write_addresses,
    write_match_report,
)


def test_read_csv_keeps_text_and_nulls(tmp_path):
    path = tmp_path / "in.csv"
    path.write_text("add_number,addnum_suf,post_code\n1865,1/2,97526\n77,,97526\n", encoding="utf-8")
    rows = read_rows(path)
    assert rows == [
        {"add_number": "1865", "addnum_suf": "1/2", "post_code": "97526"},
        {"add_number": "77", "addnum_suf": None, "post_code": "97526"},
    ]


def test_match_report_to_excel(tmp_path, make_address):
    records = match_one(make_address(object_id=1), [make_address(object_id=2, status=AddressStatus.PENDING)])
    path = write_match_report(records, tmp_path / "report.xlsx")
    df = pd.read_excel(path, engine="openpyxl")
    assert list(df.columns) == MATCH_REPORT_COLUMNS
    assert df.loc[0, "match_status"] == "Divergent"
    assert df.loc[0, "status"] == "ACTIVE not equal to PENDING"


def test_partial_report_columns(tmp_path, make_address):
    records = match_partial(PartialStructuredAddress(number=100, street_name="MAIN"), [make_address()])
    path = write_match_report(records, tmp_path / "partial.csv")
    assert list(pd.read_csv(path).columns) == PARTIAL_REPORT_COLUMNS


def test_written_addresses_read_back(tmp_path, make_address):
    path = write_addresses([make_address(object_id=7, floor=2)], tmp_path / "addresses.xlsx")
    rows = read_rows(path)
    assert rows[0]["street_name"] == "MAIN"
    assert rows[0]["post_type"] == "STREET"
    assert rows[0]["floor"] == "2"
    assert rows[0]["directional"] is None
