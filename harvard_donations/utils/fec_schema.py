"""FEC Schema - field layouts of the FEC bulk files this pipeline reads.

FEC bulk files are pipe-delimited with no header row; columns are only
identified by position. Each layout below lists the official FEC field names
in order (from the FEC data dictionary) and the subset of positions the
pipeline keeps, with the semantic name and primitive kind of each kept column.
Unselected columns are dropped at read time and never validated.
"""

import csv
import logging
from dataclasses import dataclass
from typing import List, Dict, Optional, Tuple

import pandas as pd

logger = logging.getLogger(__name__)

# FEC writes dates as MMDDYYYY
FEC_DATE_FORMAT = "%m%d%Y"

STRING = "string"
NUMBER = "number"
DATE = "date"


@dataclass(frozen=True)
class SelectedColumn:
    """One kept column: 1-based FEC position, official name, semantic name, kind."""
    position: int
    fec_name: str
    name: str
    kind: str = STRING


@dataclass(frozen=True)
class FileLayout:
    fields: Tuple[str, ...]
    columns: Tuple[SelectedColumn, ...]
    quoting: int = csv.QUOTE_MINIMAL


LAYOUTS: Dict[str, FileLayout] = {
    # weball{YY}.zip - candidate summary for all candidates (30 fields)
    'weball': FileLayout(
        fields=(
            'CAND_ID', 'CAND_NAME', 'CAND_ICI', 'PTY_CD', 'CAND_PTY_AFFILIATION',
            'TTL_RECEIPTS', 'TRANS_FROM_AUTH', 'TTL_DISB', 'TRANS_TO_AUTH', 'COH_BOP',
            'COH_COP', 'CAND_CONTRIB', 'CAND_LOANS', 'OTHER_LOANS', 'CAND_LOAN_REPAY',
            'OTHER_LOAN_REPAY', 'DEBTS_OWED_BY', 'TTL_INDIV_CONTRIB', 'CAND_OFFICE_ST',
            'CAND_OFFICE_DISTRICT', 'SPEC_ELECTION', 'PRIM_ELECTION', 'RUN_ELECTION',
            'GEN_ELECTION', 'GEN_ELECTION_PRECENT', 'OTHER_POL_CMTE_CONTRIB',
            'POL_PTY_CONTRIB', 'CVG_END_DT', 'INDIV_REFUNDS', 'CMTE_REFUNDS',
        ),
        columns=(
            SelectedColumn(1, 'CAND_ID', 'candidate_id'),
            SelectedColumn(2, 'CAND_NAME', 'name'),
            SelectedColumn(5, 'CAND_PTY_AFFILIATION', 'party'),
            SelectedColumn(11, 'COH_COP', 'cash_on_hand', NUMBER),
            SelectedColumn(19, 'CAND_OFFICE_ST', 'state'),
        ),
    ),
    # cm{YY}.zip - committee master (15 fields)
    'cm': FileLayout(
        fields=(
            'CMTE_ID', 'CMTE_NM', 'TRES_NM', 'CMTE_ST1', 'CMTE_ST2', 'CMTE_CITY',
            'CMTE_ST', 'CMTE_ZIP', 'CMTE_DSGN', 'CMTE_TP', 'CMTE_PTY_AFFILIATION',
            'CMTE_FILING_FREQ', 'ORG_TP', 'CONNECTED_ORG_NM', 'CAND_ID',
        ),
        columns=(
            SelectedColumn(1, 'CMTE_ID', 'committee_id'),
            SelectedColumn(11, 'CMTE_PTY_AFFILIATION', 'committee_party'),
            SelectedColumn(15, 'CAND_ID', 'candidate_id'),
        ),
    ),
    # indiv{YY}.zip - individual contributions (21 fields). Donor names and
    # employers contain stray double quotes, so quote handling is disabled.
    'indiv': FileLayout(
        fields=(
            'CMTE_ID', 'AMNDT_IND', 'RPT_TP', 'TRANSACTION_PGI', 'IMAGE_NUM',
            'TRANSACTION_TP', 'ENTITY_TP', 'NAME', 'CITY', 'STATE', 'ZIP_CODE',
            'EMPLOYER', 'OCCUPATION', 'TRANSACTION_DT', 'TRANSACTION_AMT',
            'OTHER_ID', 'TRAN_ID', 'FILE_NUM', 'MEMO_CD', 'MEMO_TEXT', 'SUB_ID',
        ),
        columns=(
            SelectedColumn(1, 'CMTE_ID', 'committee_id'),
            SelectedColumn(12, 'EMPLOYER', 'employer'),
            SelectedColumn(13, 'OCCUPATION', 'occupation'),
            SelectedColumn(14, 'TRANSACTION_DT', 'date', DATE),
            SelectedColumn(15, 'TRANSACTION_AMT', 'amount', NUMBER),
        ),
        quoting=csv.QUOTE_NONE,
    ),
}


class FECSchema:
    """Lookup of FEC file layouts by file type."""

    def __init__(self, layouts: Optional[Dict[str, FileLayout]] = None):
        self.layouts = layouts if layouts is not None else LAYOUTS

    def get_layout(self, file_type: str) -> FileLayout:
        """Get the layout for a given FEC file type.

        Raises:
            ValueError: If file_type is unknown
        """
        if file_type not in self.layouts:
            raise ValueError(
                f"Unknown file type '{file_type}'. "
                f"Valid types: {', '.join(self.layouts.keys())}"
            )
        return self.layouts[file_type]

    def get_field_count(self, file_type: str) -> int:
        return len(self.get_layout(file_type).fields)

    def get_columns(self, file_type: str) -> List[SelectedColumn]:
        return list(self.get_layout(file_type).columns)

    def usecols(self, file_type: str) -> List[int]:
        """0-based positions of the kept columns, for pandas."""
        return [column.position - 1 for column in self.get_columns(file_type)]

    def renames(self, file_type: str) -> Dict[int, str]:
        return {column.position - 1: column.name for column in self.get_columns(file_type)}

    def coerce_types(self, frame: pd.DataFrame, file_type: str) -> pd.DataFrame:
        """Best-effort conversion of the kept columns to their declared kinds.

        Values that do not parse become null; the count is logged, the load continues.
        """
        result = frame.copy()
        for column in self.get_columns(file_type):
            if column.kind == STRING or column.name not in result.columns:
                continue

            raw = result[column.name]
            if column.kind == NUMBER:
                converted = pd.to_numeric(raw, errors='coerce')
            else:
                converted = pd.to_datetime(raw, format=FEC_DATE_FORMAT, errors='coerce')

            malformed = int((raw.notna() & converted.isna()).sum())
            if malformed:
                logger.warning(
                    "%s.%s: %d value(s) could not be read as %s and were left empty",
                    file_type, column.name, malformed, column.kind,
                )
            result[column.name] = converted
        return result


# Singleton instance for convenience
_default_schema = None


def get_schema() -> FECSchema:
    """Get the default FEC schema instance."""
    global _default_schema
    if _default_schema is None:
        _default_schema = FECSchema()
    return _default_schema
