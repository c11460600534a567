"""Report rendering - HTML tables and the quarterly donations chart.

Thin layer over pandas (to_html) and matplotlib. Tables get a title, display
column labels, dollar formatting on money columns and a fixed source line.
Only DISPLAY_PARTIES are drawn/shown; any other party column produced by the
cross-tab is dropped here.
"""

import html
import logging
from pathlib import Path
from typing import Dict, Iterable, Optional, Sequence

import matplotlib

matplotlib.use("Agg")

import matplotlib.pyplot as plt  # noqa: E402
from matplotlib.ticker import FuncFormatter  # noqa: E402
import pandas as pd  # noqa: E402

from harvard_donations.config import DISPLAY_PARTIES, PARTY_COLORS, SOURCE_CITATION  # noqa: E402
from harvard_donations.utils.aggregation import cycle_quarters  # noqa: E402

logger = logging.getLogger(__name__)

REPORT_FILENAME = "report.html"
CHART_FILENAME = "quarterly_donations.png"

MONTH_RANGES = {1: "Jan-Mar", 2: "Apr-Jun", 3: "Jul-Sep", 4: "Oct-Dec"}


def format_currency(value) -> str:
    if value is None or pd.isna(value):
        return ""
    return f"${value:,.0f}"


def quarter_axis_labels(cycle: str) -> Dict[str, str]:
    """Tick text per quarter label, e.g. "2005 Q1" → "Jan-Mar\\n2005"."""
    labels = {}
    for label in cycle_quarters(cycle):
        year, quarter = label.split(" Q")
        labels[label] = f"{MONTH_RANGES[int(quarter)]}\n{year}"
    return labels


def display_parties(frame: pd.DataFrame, parties: Sequence[str] = DISPLAY_PARTIES) -> pd.DataFrame:
    """Keep only the displayed party columns (in display order)."""
    dropped = [column for column in frame.columns if column not in parties]
    if dropped:
        logger.debug("Not displaying party columns: %s", ", ".join(map(str, dropped)))
    return frame[[party for party in parties if party in frame.columns]]


def render_table_html(
    frame: pd.DataFrame,
    title: str,
    columns: Optional[Dict[str, str]] = None,
    currency_columns: Iterable[str] = (),
    index: bool = False,
) -> str:
    """Render a table as an HTML fragment with title and source footer.

    Args:
        frame: Table to render
        title: Caption shown above the table
        columns: Optional {column: display label} relabeling
        currency_columns: Columns (original names) formatted as whole dollars
        index: Whether to render the index as the first column
    """
    columns = columns or {}
    labelled = frame.rename(columns=columns)
    formatters = {
        columns.get(column, column): format_currency
        for column in currency_columns
        if column in frame.columns
    }
    table = labelled.to_html(
        index=index,
        formatters=formatters,
        border=0,
        classes="donations",
        na_rep="",
    )
    return (
        '<section class="table">\n'
        f"<h2>{html.escape(title)}</h2>\n"
        f"{table}\n"
        f'<p class="source">{html.escape(SOURCE_CITATION)}</p>\n'
        "</section>"
    )


def plot_quarterly_chart(amounts: pd.DataFrame, cycle: str, path: Path) -> Path:
    """Grouped bar chart of donation dollars per quarter and party, saved as PNG."""
    quarters = cycle_quarters(cycle)
    shown = display_parties(amounts).reindex(index=quarters, fill_value=0.0)
    parties = list(shown.columns)
    axis_labels = quarter_axis_labels(cycle)

    fig, ax = plt.subplots(figsize=(11, 6))
    width = 0.8 / max(len(parties), 1)
    positions = range(len(quarters))

    for offset, party in enumerate(parties):
        xs = [x + (offset - (len(parties) - 1) / 2) * width for x in positions]
        ax.bar(xs, shown[party].values, width=width, color=PARTY_COLORS.get(party, "#888888"))

    # Party labels sit above each party's tallest bar instead of a legend box
    for offset, party in enumerate(parties):
        column = shown[party]
        if not column.any():
            continue
        peak = quarters.index(column.idxmax())
        x = peak + (offset - (len(parties) - 1) / 2) * width
        ax.annotate(
            party,
            xy=(x, column.max()),
            xytext=(0, 6),
            textcoords="offset points",
            ha="center",
            fontsize=10,
            fontweight="bold",
            color=PARTY_COLORS.get(party, "#888888"),
        )

    ax.set_xticks(list(positions))
    ax.set_xticklabels([axis_labels[q] for q in quarters])
    ax.set_xlabel("Quarter")
    ax.set_ylabel("Donations ($)")
    ax.set_title(f"Harvard University donations by party, {int(cycle) - 1}-{cycle} cycle")
    ax.yaxis.set_major_formatter(FuncFormatter(lambda y, _: f"${y:,.0f}"))
    ax.spines["top"].set_visible(False)
    ax.spines["right"].set_visible(False)
    fig.text(0.01, 0.01, SOURCE_CITATION, fontsize=8, color="#555555")
    fig.tight_layout(rect=(0, 0.03, 1, 1))

    path.parent.mkdir(parents=True, exist_ok=True)
    fig.savefig(path, dpi=120)
    plt.close(fig)
    return path


def write_report(
    output_dir: Path,
    cycle: str,
    party_cash: pd.DataFrame,
    harvard_totals: pd.DataFrame,
    professor_counts: pd.DataFrame,
    quarterly_dollars: pd.DataFrame,
    harvard_raw: Dict[str, float],
) -> Dict[str, Path]:
    """Write report.html and the chart PNG into output_dir."""
    output_dir.mkdir(parents=True, exist_ok=True)
    chart_path = plot_quarterly_chart(quarterly_dollars, cycle, output_dir / CHART_FILENAME)

    counts = display_parties(professor_counts).reset_index()
    counts.columns.name = None
    sections = [
        render_table_html(
            party_cash,
            title=f"Top parties by candidate cash on hand ({cycle} cycle)",
            columns={'party': 'Party', 'cash_on_hand': 'Cash on hand'},
            currency_columns=['cash_on_hand'],
        ),
        render_table_html(
            harvard_totals,
            title="Harvard University donations by committee party",
            columns={'party': 'Party', 'contributions': 'Donations', 'total_amount': 'Total'},
            currency_columns=['total_amount'],
        ),
        render_table_html(
            counts,
            title="Harvard professor donations per quarter",
            columns={'quarter': 'Quarter'},
        ),
    ]

    raw_line = (
        f"All contributions listing Harvard University as employer: "
        f"{harvard_raw['contributions']:,} totalling {format_currency(harvard_raw['total_amount'])}."
    )
    document = "\n".join([
        "<!DOCTYPE html>",
        "<html>",
        "<head>",
        '<meta charset="utf-8">',
        f"<title>Harvard donations, {cycle} cycle</title>",
        "</head>",
        "<body>",
        *sections,
        f"<p>{html.escape(raw_line)}</p>",
        f'<img src="{CHART_FILENAME}" alt="Quarterly donations by party">',
        "</body>",
        "</html>",
    ])

    report_path = output_dir / REPORT_FILENAME
    report_path.write_text(document, encoding="utf-8")
    logger.info("Wrote %s and %s", report_path, chart_path)
    return {'report': report_path, 'chart': chart_path}
