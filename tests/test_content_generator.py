"""Tests for dashboard content generation."""
import pytest

from core.models.answer import AnswerType
from core.models.question import AnswerPayload
from core.services.content.content_generator import ContentGenerator
from core.services.content.formatting import fixed, grouped, is_set, num, ordinal, short_date, signed_pct, thousands
from core.services.content.performance import format_performance
from core.services.content.trading import format_trading


@pytest.fixture
def generator():
    return ContentGenerator()


@pytest.fixture
def render(generator, bundled_catalog):
    """Render a bundled catalog answer by id."""
    def _render(answer_id):
        return generator.generate_content(bundled_catalog.get(answer_id), strict=True)
    return _render


class TestFormatting:
    """Test cases for number formatting helpers."""
    
    def test_num_drops_trailing_zero(self):
        """Test integral floats print without decimals."""
        assert num(2.0) == "2"
        assert num(14.7) == "14.7"
        assert num(-0.4) == "-0.4"
    
    def test_fixed_rounds_half_up(self):
        """Test halves round away from zero."""
        assert fixed(31.5, 0) == "32"
        assert fixed(0.42, 2) == "0.42"
        assert fixed(6, 1) == "6.0"
    
    def test_thousands(self):
        """Test dollar thousands."""
        assert thousands(42300) == "$42K"
        assert thousands(7100, 1) == "$7.1K"
    
    def test_signed_pct(self):
        """Test positives get a plus sign."""
        assert signed_pct(3.2) == "+3.2%"
        assert signed_pct(-0.4) == "-0.4%"
        assert signed_pct(0) == "0%"
    
    def test_grouped_and_dates(self):
        """Test grouping and short dates."""
        assert grouped(1847) == "1,847"
        assert short_date("2024-08-05") == "8/5/2024"
    
    @pytest.mark.parametrize("value,expected", [
        (None, False), (0, False), ("", False), (False, False),
        ([], True), ({}, True), (0.5, True), ("x", True),
    ])
    def test_is_set(self, value, expected):
        """Test empty collections count as present while zero and empty text do not."""
        assert is_set(value) is expected
    
    @pytest.mark.parametrize("value,expected", [
        (1, "1st"), (2, "2nd"), (3, "3rd"), (11, "11th"), (12, "12th"), (22, "22nd"), (82, "82nd"), (100, "100th"),
    ])
    def test_ordinal(self, value, expected):
        """Test ordinal suffixes."""
        assert ordinal(value) == expected


class TestContentGenerator:
    """Test cases for ContentGenerator dispatch."""
    
    def test_record_without_data_renders_paragraph(self, generator, make_record):
        """Test answers without data fall back to their text."""
        record = make_record("plain", answer_type=AnswerType.RISK)
        content = generator.generate_content(record)
        
        assert content.paragraph == "Content for plain"
        assert content.kpis is None
    
    def test_unregistered_type_renders_paragraph(self, generator):
        """Test fallback answer types render as a paragraph."""
        payload = AnswerPayload(
            id="fallback-market",
            title="Market Data",
            content="Check your trading platform.",
            answer_type="market",
            data={"fallbackType": "market", "isUnmatched": True}
        )
        assert generator.generate_content(payload).paragraph == "Check your trading platform."
    
    def test_string_and_enum_types_dispatch_alike(self, generator):
        """Test formatter lookup accepts both enum members and their values."""
        assert generator.get_formatter(AnswerType.ESG) is generator.get_formatter("esg")
        assert generator.get_formatter("personal") is None
        assert generator.get_formatter(None) is None
    
    def test_malformed_data_falls_back(self, generator, make_record):
        """Test data missing required fields renders as a paragraph."""
        record = make_record("broken", answer_type=AnswerType.ESG, data={"unexpected": 1})
        assert generator.generate_content(record).paragraph == "Content for broken"
    
    def test_wrong_value_types_fall_back(self, generator, make_record):
        """Test attribute errors inside a formatter render as a paragraph."""
        record = make_record("ladder", answer_type=AnswerType.FIXED_INCOME, data={
            "governmentBonds": 40,
            "corporateIG": 45,
            "highYield": 15,
            "maturityLadder": [{"year": 2025, "allocation": 10, "yield": 4.1}],
        })
        assert generator.generate_content(record).paragraph == "Content for ladder"
        
        with pytest.raises(AttributeError):
            generator.generate_content(record, strict=True)
    
    def test_malformed_data_raises_when_strict(self, generator, make_record):
        """Test strict mode surfaces formatter errors."""
        record = make_record("broken", answer_type=AnswerType.ESG, data={"unexpected": 1})
        with pytest.raises(KeyError):
            generator.generate_content(record, strict=True)
    
    def test_every_bundled_answer_renders(self, generator, bundled_catalog):
        """Test the whole catalog renders without falling back."""
        for record in bundled_catalog:
            content = generator.generate_content(record, strict=True)
            assert content.kpis, record.id


class TestPerformanceContent:
    """Test cases for performance and holdings content."""
    
    def test_ytd_performance(self, render):
        """Test the YTD benchmark comparison."""
        content = render("ytd-performance-sp500")
        
        assert content.kpis[0].value == "+14.7%"
        assert content.kpis[0].change == "+3.5% vs S&P"
        assert content.kpis[1].value == "1.34"
        assert content.kpis[1].change == "vs 1.12 benchmark"
        assert content.kpis[1].is_positive
        assert len(content.chart_data) == 8
        assert "Top contributing sectors: Technology, Healthcare, Financials" in content.highlights
    
    def test_holdings(self, render):
        """Test the top holdings table."""
        content = render("top-holdings")
        
        assert len(content.table_data) == 6
        assert content.table_data[0]["weight"] == "4.8%"
        assert content.highlights == [
            "Top holding: Microsoft Corp at 4.8%",
            "Technology represents 4 of top 10",
            "Best performer: NVIDIA Corp (+34.7%)",
        ]
    
    def test_rolling_returns(self, render):
        """Test rolling returns rank the current period."""
        content = render("rolling-returns")
        
        assert content.kpis[0].change == "82nd percentile"
        assert content.chart_data
    
    def test_contributors(self, render):
        """Test contributors are followed by detractors."""
        content = render("performance-contributors")
        
        assert len(content.table_data) == 8
        assert content.table_data[0]["isPositive"]
        assert not content.table_data[-1]["isPositive"]
    
    def test_factor_attribution(self, render):
        """Test factor weights use two decimals."""
        content = render("factor-attribution")
        
        assert content.kpis[3].label == "Top Factor"
        assert content.kpis[3].value == "Quality"
        assert content.kpis[3].change == "+3.2%"
        assert content.table_data[0]["weight"] == "0.42"


class TestRiskContent:
    """Test cases for risk content."""
    
    def test_value_at_risk(self, render):
        """Test VaR dollar amounts and the worst stress scenario."""
        content = render("value-at-risk")
        
        assert content.kpis[0].value == "-2.1%"
        assert content.kpis[0].change == "$32K"
        assert content.kpis[1].change == "$51K"
        assert "-18.5% vs market's -37%" in content.highlights[1]
        assert len(content.table_data) == 4
    
    def test_risk_metrics_without_volatility(self, render):
        """Test missing figures render as N/A."""
        content = render("market-volatility")
        
        assert any(item.value == "N/A" for item in content.kpis)
    
    def test_sharpe_analysis(self, render):
        """Test the Sharpe variant is selected by its payload."""
        content = render("sharpe-ratio-analysis")
        
        assert content.kpis[0].label == "Sharpe Ratio"


class TestIncomeAndTradingContent:
    """Test cases for income, trading, costs and tax content."""
    
    def test_dividend_income(self, render):
        """Test income is shown in thousands."""
        content = render("dividend-income")
        
        assert content.kpis[1].value == "$42K"
    
    def test_fixed_income_ladder(self, render):
        """Test the maturity ladder highlight."""
        content = render("bond-portfolio")
        
        assert content.kpis[1].value == "4.2y"
        assert "Laddered maturities from 2025 to 2034" in content.highlights
    
    def test_recent_trades_sorted_newest_first(self, render):
        """Test trades are merged and sorted by date."""
        content = render("recent-trades")
        
        dates = [row["date"] for row in content.table_data]
        assert dates[0] == "8/18/2024"
        assert len(content.table_data) <= 10
        assert content.kpis[2].value == "+$38K"
        
        nvidia = next(row for row in content.table_data if row["security"] == "NVIDIA Corp")
        assert nvidia["price"] == "$480.00"
        assert nvidia["type"] == "Buy"
    
    def test_trading_activity(self, render):
        """Test annual activity volumes."""
        content = render("trading-activity")
        
        assert content.kpis[1].value == "$2.8M"
        assert content.kpis[1].change == "147 trades"
        assert content.table_data[0]["amount"] == "$180K"
        assert content.table_data[0]["impact"] == "+2.1%"
        assert content.table_data[0]["date"] == "8/15/2024"
        assert content.table_data[1]["amount"] == "-$95K"
    
    def test_costs(self, render):
        """Test fee breakdown."""
        content = render("expense-ratio")
        
        assert content.kpis[1].value == "$7.1K"
        assert content.table_data[0]["totalCost"] == "$1,200"
    
    def test_tax(self, render):
        """Test tax highlights."""
        content = render("tax-efficiency")
        
        assert content.highlights[0] == "Effective tax rate 9.7% below marginal rate"
        assert content.highlights[2] == "Tax-loss harvesting generated $3,200 in deductions"
        assert content.kpis[3].value == "$1.8K"
    
    def test_esg(self, render):
        """Test ESG score against the benchmark."""
        content = render("esg-scoring")
        
        assert content.kpis[1].value == "+2.2"
        assert content.chart_data[0]["category"] == "Environmental"


class TestVariantSelection:
    """Test cases for choosing a formatter variant from the payload."""
    
    def test_empty_purchases_still_selects_recent_trades(self):
        """Test an empty trade list counts as present."""
        content = format_trading({
            "purchases": [],
            "sales": [{"security": "Tesla Inc", "amount": -95000, "shares": -425, "price": 223.53,
                       "date": "2024-07-22"}],
            "totalTransactions": 1,
            "totalVolume": 95000,
            "netCashFlow": -95000,
            "avgExecutionQuality": 99.5,
        })
        
        assert content.kpis[0].label == "Total Transactions"
        assert content.table_data[0]["amount"] == "-$95K"
        assert content.kpis[2].value == "$-95K"
    
    def test_empty_factor_list_selects_factor_attribution(self):
        """Test an empty factor list picks the attribution variant, which has no top factor."""
        data = {
            "factorContributions": [],
            "portfolioReturn": 14.7,
            "benchmarkReturn": 11.2,
            "outperformance": 3.5,
        }
        with pytest.raises(IndexError):
            format_performance(data)
    
    def test_empty_factor_list_falls_back_to_paragraph(self, generator, make_record):
        """Test the generator renders the paragraph for that payload."""
        record = make_record("factors", answer_type=AnswerType.PERFORMANCE, data={
            "factorContributions": [],
            "portfolioReturn": 14.7,
            "benchmarkReturn": 11.2,
            "outperformance": 3.5,
        })
        content = generator.generate_content(record)
        
        assert content.paragraph == "Content for factors"
        assert content.kpis is None
    
    def test_zero_transactions_selects_annual_activity(self):
        """Test a zero count is not present."""
        content = format_trading({
            "purchases": [],
            "sales": [],
            "totalTransactions": 0,
            "turnoverRate": 18,
            "totalVolume": 2800000,
            "transactionCount": 0,
            "avgHoldingPeriod": 14,
            "transactionCost": 0.05,
        })
        
        assert content.kpis[0].label == "Turnover Rate"
    
    def test_ytd_without_sectors_has_no_highlights(self):
        """Test a missing sector list leaves the YTD highlights empty."""
        content = format_performance({
            "portfolioReturn": 14.7,
            "benchmarkReturn": 11.2,
            "outperformance": 3.5,
            "sharpeRatio": 1.34,
        })
        
        assert content.kpis[0].value == "+14.7%"
        assert content.highlights == []
