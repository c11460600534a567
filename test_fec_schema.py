#!/usr/bin/env python3
"""
Tests for the FEC file layouts and the pandas table reader.
"""

import csv
import zipfile

import pandas as pd
import pytest

from harvard_donations.api.fec_bulk_data import read_fec_table
from harvard_donations.utils.fec_schema import FECSchema, get_schema

from conftest import fec_line, write_fec_zip


def test_field_counts():
    schema = FECSchema()
    assert schema.get_field_count('weball') == 30
    assert schema.get_field_count('cm') == 15
    assert schema.get_field_count('indiv') == 21


def test_selected_positions_match_official_field_names():
    schema = FECSchema()
    expected = {
        'weball': {1: 'CAND_ID', 2: 'CAND_NAME', 5: 'CAND_PTY_AFFILIATION', 11: 'COH_COP', 19: 'CAND_OFFICE_ST'},
        'cm': {1: 'CMTE_ID', 11: 'CMTE_PTY_AFFILIATION', 15: 'CAND_ID'},
        'indiv': {1: 'CMTE_ID', 12: 'EMPLOYER', 13: 'OCCUPATION', 14: 'TRANSACTION_DT', 15: 'TRANSACTION_AMT'},
    }
    for file_type, positions in expected.items():
        fields = schema.get_layout(file_type).fields
        columns = schema.get_columns(file_type)
        assert {c.position: c.fec_name for c in columns} == positions
        for column in columns:
            assert fields[column.position - 1] == column.fec_name


def test_usecols_and_renames_are_zero_based():
    schema = get_schema()
    assert schema.usecols('cm') == [0, 10, 14]
    assert schema.renames('cm') == {0: 'committee_id', 10: 'committee_party', 14: 'candidate_id'}


def test_indiv_disables_quote_handling():
    schema = get_schema()
    assert schema.get_layout('indiv').quoting == csv.QUOTE_NONE
    assert schema.get_layout('weball').quoting == csv.QUOTE_MINIMAL


def test_unknown_file_type():
    with pytest.raises(ValueError, match="Unknown file type"):
        FECSchema().get_layout('pas2')


def test_coerce_types_nulls_malformed_values():
    frame = pd.DataFrame({
        'committee_id': ['C1', 'C2', 'C3'],
        'employer': ['A', 'B', 'C'],
        'occupation': ['X', 'Y', 'Z'],
        'date': ['03012005', '13452005', None],
        'amount': ['250', 'N/A', '-10.5'],
    })
    result = get_schema().coerce_types(frame, 'indiv')

    assert result['date'].iloc[0] == pd.Timestamp(2005, 3, 1)
    assert pd.isna(result['date'].iloc[1])
    assert pd.isna(result['date'].iloc[2])
    assert result['amount'].tolist()[0] == 250
    assert pd.isna(result['amount'].iloc[1])
    assert result['amount'].iloc[2] == -10.5
    # input untouched
    assert frame['amount'].iloc[0] == '250'


def test_read_fec_table(indiv_zip):
    contributions = read_fec_table(indiv_zip, 'indiv')

    assert list(contributions.columns) == ['committee_id', 'employer', 'occupation', 'date', 'amount']
    assert len(contributions) == 8
    assert contributions['occupation'].iloc[5] == 'PROFESSOR "EMERITUS'
    assert contributions['amount'].iloc[0] == 250
    assert pd.isna(contributions['amount'].iloc[7])
    assert pd.isna(contributions['date'].iloc[7])


def test_read_fec_table_blank_fields_are_null(cm_zip):
    committees = read_fec_table(cm_zip, 'cm')
    assert committees['candidate_id'].isna().tolist() == [False, False, False, True]


def test_read_fec_table_requires_txt_member(tmp_path):
    path = tmp_path / 'empty.zip'
    with zipfile.ZipFile(path, 'w') as zf:
        zf.writestr('README.md', 'nothing here')

    with pytest.raises(FileNotFoundError):
        read_fec_table(path, 'cm')


def test_read_fec_table_missing_archive(tmp_path):
    with pytest.raises(FileNotFoundError):
        read_fec_table(tmp_path / 'missing.zip', 'cm')


@pytest.mark.parametrize("extra_on", [0, 1])
def test_read_fec_table_ignores_extra_trailing_fields(tmp_path, extra_on):
    lines = [
        fec_line('indiv', {1: 'C00000001', 12: 'HARVARD UNIVERSITY', 14: '03012005', 15: '250'}),
        fec_line('indiv', {1: 'C00000002', 12: 'MIT', 14: '04012005', 15: '100'}),
    ]
    lines[extra_on] += '|EXTRA'
    path = write_fec_zip(tmp_path / 'indiv06.zip', 'itcont.txt', lines)

    contributions = read_fec_table(path, 'indiv')

    assert contributions['committee_id'].tolist() == ['C00000001', 'C00000002']
    assert contributions['amount'].tolist() == [250, 100]


def test_read_fec_table_keeps_latin1_text(tmp_path):
    line = fec_line('indiv', {1: 'C00000001', 12: 'ESPAÑOL LLC', 14: '03012005', 15: '10'})
    path = tmp_path / 'indiv06.zip'
    with zipfile.ZipFile(path, 'w') as zf:
        zf.writestr('itcont.txt', (line + '\n').encode('latin-1'))

    contributions = read_fec_table(path, 'indiv')
    assert contributions['employer'].iloc[0] == 'ESPAÑOL LLC'
