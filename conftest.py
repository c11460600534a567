"""Test configuration and fixtures.

Synthetic FEC bulk archives for the 2006 cycle. Lines are built from
{1-based position: value} so each fixture only spells out the columns the
pipeline reads.
"""

import zipfile
from pathlib import Path
from typing import Dict, List

import pytest
import requests

from harvard_donations.utils.fec_schema import get_schema


def fec_line(file_type: str, values: Dict[int, str]) -> str:
    """Pipe-delimited line of the right width with `values` at their positions."""
    fields = [''] * get_schema().get_field_count(file_type)
    for position, value in values.items():
        fields[position - 1] = value
    return '|'.join(fields)


def write_fec_zip(path: Path, member: str, lines: List[str]) -> Path:
    path.parent.mkdir(parents=True, exist_ok=True)
    with zipfile.ZipFile(path, 'w') as zf:
        zf.writestr(member, '\n'.join(lines) + '\n')
    return path


WEBALL_ROWS = [
    {1: 'H6MA08001', 2: 'CAPUANO, MICHAEL E', 5: 'DEM', 11: '500000.00', 19: 'MA'},
    {1: 'H6TX22001', 2: 'SMITH, JANE', 5: 'REP', 11: '300000.00', 19: 'TX'},
    {1: 'S6VT00001', 2: 'SANDERS, BERNARD', 5: 'IND', 11: '150000.00', 19: 'VT'},
    {1: 'H6CA01001', 2: 'DOE, JOHN', 5: 'lib', 11: '1000.00', 19: 'CA'},
    {1: 'H6NY01001', 2: 'GREEN, GAIL', 5: 'GRE', 11: '2000.00', 19: 'NY'},
    {1: 'H6NJ01001', 2: 'UNAFFILIATED, PAT', 5: '', 11: '9999999.00', 19: 'NJ'},
]

CM_ROWS = [
    {1: 'C00000001', 11: 'DEM', 15: 'H6MA08001'},
    {1: 'C00000002', 11: 'REP', 15: 'H6TX22001'},
    {1: 'C00000003', 11: 'IND', 15: 'S6VT00001'},
    {1: 'C00000004', 11: 'DEM', 15: ''},
]

INDIV_ROWS = [
    # Harvard professor, Democrat, 2005 Q1
    {1: 'C00000001', 12: 'HARVARD UNIVERSITY', 13: 'PROFESSOR', 14: '03012005', 15: '250'},
    # Harvard professor (mixed case), Republican, 2006 Q2
    {1: 'C00000002', 12: 'Harvard University', 13: 'professor of law', 14: '05152006', 15: '1000'},
    # Harvard, not a professor
    {1: 'C00000001', 12: 'HARVARD UNIVERSITY', 13: 'ADMINISTRATOR', 14: '07042005', 15: '100'},
    # Harvard professor, committee without candidate (no resolved party)
    {1: 'C00000004', 12: 'HARVARD UNIVERSITY', 13: 'ASSISTANT PROFESSOR', 14: '01102006', 15: '50'},
    # Harvard professor, unknown committee
    {1: 'C99999999', 12: 'HARVARD UNIVERSITY', 13: 'PROFESSOR', 14: '02022006', 15: '75'},
    # Harvard professor, Independent, 2006 Q4, stray quote in occupation
    {1: 'C00000003', 12: 'HARVARD UNIVERSITY', 13: 'PROFESSOR "EMERITUS', 14: '11012006', 15: '500'},
    # Other employer
    {1: 'C00000001', 12: 'MIT', 13: 'PROFESSOR', 14: '03012005', 15: '300'},
    # Malformed date and amount
    {1: 'C00000002', 12: 'HARVARD UNIVERSITY', 13: 'RESEARCHER', 14: '13452005', 15: 'N/A'},
]


@pytest.fixture
def weball_zip(tmp_path) -> Path:
    lines = [fec_line('weball', row) for row in WEBALL_ROWS]
    return write_fec_zip(tmp_path / 'src' / 'weball06.zip', 'weball06.txt', lines)


@pytest.fixture
def cm_zip(tmp_path) -> Path:
    lines = [fec_line('cm', row) for row in CM_ROWS]
    return write_fec_zip(tmp_path / 'src' / 'cm06.zip', 'cm.txt', lines)


@pytest.fixture
def indiv_zip(tmp_path) -> Path:
    lines = [fec_line('indiv', row) for row in INDIV_ROWS]
    return write_fec_zip(tmp_path / 'src' / 'indiv06.zip', 'itcont.txt', lines)


@pytest.fixture
def fec_archives(weball_zip, cm_zip, indiv_zip) -> Dict[str, Path]:
    return {'weball': weball_zip, 'cm': cm_zip, 'indiv': indiv_zip}


@pytest.fixture
def storage_root(tmp_path, monkeypatch) -> Path:
    """Point every storage location at a temporary directory."""
    root = tmp_path / 'storage'
    monkeypatch.setenv('HARVARD_DONATIONS_STORAGE', str(root))
    monkeypatch.delenv('HARVARD_DONATIONS_DATA_DIR', raising=False)
    monkeypatch.delenv('HARVARD_DONATIONS_REPORTS_DIR', raising=False)
    return root


class FakeResponse:
    """Minimal stand-in for a streamed requests.Response."""

    def __init__(self, content: bytes = b'', status_code: int = 200, url: str = ''):
        self.content = content
        self.status_code = status_code
        self.url = url

    def raise_for_status(self):
        if self.status_code >= 400:
            raise requests.HTTPError(f"{self.status_code} Error for url: {self.url}", response=self)

    def iter_content(self, chunk_size=1):
        for start in range(0, len(self.content), chunk_size):
            yield self.content[start:start + chunk_size]

    def __enter__(self):
        return self

    def __exit__(self, *exc):
        return False


@pytest.fixture
def fake_fec_site(monkeypatch, fec_archives):
    """Serve the synthetic archives in place of fec.gov; records requested URLs."""
    requested = []
    by_name = {
        'weball06.zip': fec_archives['weball'],
        'cm06.zip': fec_archives['cm'],
        'indiv06.zip': fec_archives['indiv'],
    }

    def fake_get(url, timeout=None, stream=False):
        requested.append(url)
        name = url.rsplit('/', 1)[-1]
        if name not in by_name:
            return FakeResponse(status_code=404, url=url)
        return FakeResponse(by_name[name].read_bytes(), url=url)

    monkeypatch.setattr('harvard_donations.api.fec_bulk_data.requests.get', fake_get)
    return requested
