"""Tests for HTML tables, the chart and the report file."""

import pandas as pd

from harvard_donations.config import SOURCE_CITATION
from harvard_donations.utils.reporting import (
    display_parties,
    format_currency,
    quarter_axis_labels,
    render_table_html,
    plot_quarterly_chart,
    write_report,
)


def test_format_currency():
    assert format_currency(1234) == "$1,234"
    assert format_currency(1234567.6) == "$1,234,568"
    assert format_currency(0) == "$0"
    assert format_currency(None) == ""
    assert format_currency(float('nan')) == ""


def test_quarter_axis_labels():
    labels = quarter_axis_labels('2006')
    assert labels['2005 Q1'] == "Jan-Mar\n2005"
    assert labels['2006 Q4'] == "Oct-Dec\n2006"
    assert len(labels) == 8


def test_display_parties_drops_other_columns():
    frame = pd.DataFrame({'Libertarian': [1], 'Republican': [2], 'Democrat': [3], 'Independent': [4]})
    assert display_parties(frame).columns.tolist() == ['Democrat', 'Republican', 'Independent']


def test_render_table_html():
    frame = pd.DataFrame({'party': ['Democrat', 'Republican'], 'cash_on_hand': [1234.0, 5000000.0]})
    fragment = render_table_html(
        frame,
        title="Top parties & cash",
        columns={'party': 'Party', 'cash_on_hand': 'Cash on hand'},
        currency_columns=['cash_on_hand'],
    )

    assert "<h2>Top parties &amp; cash</h2>" in fragment
    assert "<th>Cash on hand</th>" in fragment
    assert "<th>Party</th>" in fragment
    assert "$1,234" in fragment
    assert "$5,000,000" in fragment
    assert SOURCE_CITATION in fragment


def test_render_table_html_relabels_before_rendering():
    frame = pd.DataFrame(
        {"Democrat": [250.0, 0.0], "Republican": [1000.0, 75.0]},
        index=pd.Index(["2005 Q1", "2006 Q2"], name="quarter"),
    )
    fragment = render_table_html(
        frame,
        title="Amounts",
        columns={"Democrat": "Dem & allies", "Republican": "GOP"},
        currency_columns=["Democrat", "Republican"],
        index=True,
    )

    assert "<th>Dem &amp; allies</th>" in fragment
    assert "<th>GOP</th>" in fragment
    assert "<th>Democrat</th>" not in fragment
    assert "$1,000" in fragment
    assert "$75" in fragment


def test_plot_quarterly_chart(tmp_path):
    amounts = pd.DataFrame(
        {'Democrat': [300.0, 0.0], 'Republican': [0.0, 1000.0], 'Independent': [0.0, 0.0], 'Other': [5.0, 0.0]},
        index=pd.Index(['2005 Q1', '2006 Q2'], name='quarter'),
    )
    path = plot_quarterly_chart(amounts, '2006', tmp_path / 'charts' / 'chart.png')

    assert path.exists()
    assert path.read_bytes()[:8] == b'\x89PNG\r\n\x1a\n'


def test_write_report(tmp_path):
    party_cash = pd.DataFrame({'party': ['Democrat'], 'cash_on_hand': [500000.0]})
    harvard_totals = pd.DataFrame({'party': ['Democrat'], 'contributions': [2], 'total_amount': [350.0]})
    counts = pd.DataFrame(
        {'Democrat': [1], 'Republican': [0], 'Independent': [0], 'Libertarian': [3]},
        index=pd.Index(['2005 Q1'], name='quarter'),
    )
    amounts = pd.DataFrame({'Democrat': [250.0], 'Republican': [0.0], 'Independent': [0.0]},
                           index=pd.Index(['2005 Q1'], name='quarter'))

    paths = write_report(
        tmp_path, '2006', party_cash, harvard_totals, counts, amounts,
        harvard_raw={'contributions': 3, 'total_amount': 425.0},
    )

    html = paths['report'].read_text(encoding='utf-8')
    assert paths['chart'].exists()
    assert html.count('<table') == 3
    assert html.count(SOURCE_CITATION) == 3
    assert '$500,000' in html
    assert '<th>Quarter</th>' in html
    assert 'Libertarian' not in html
    assert '3 totalling $425' in html
    assert 'src="quarterly_donations.png"' in html
