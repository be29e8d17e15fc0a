"""Formatters for dividend and fixed income answers."""
from typing import Any, Dict

from core.models.content import GeneratedContent
from core.services.content.formatting import grouped, is_set, kpi, metric, num, pct, thousands


def format_dividend(data: Dict[str, Any]) -> GeneratedContent:
    if is_set(data.get("dividendCAGR5yr")) and is_set(data.get("topGrowthStocks")):
        return _dividend_growth(data)
    return _dividend_income(data)


def _dividend_growth(data: Dict[str, Any]) -> GeneratedContent:
    return GeneratedContent(
        kpis=[
            kpi("Aristocrats", num(data["aristocrats"]), "25+ year growth", True),
            kpi("5-Year CAGR", pct(data["dividendCAGR5yr"]), "Income growth", data["dividendCAGR5yr"] > 5),
            kpi("Inflation-Adjusted", pct(data["inflationAdjustedGrowth"]), "Real growth",
                data["inflationAdjustedGrowth"] > 0),
            kpi("Forward Growth", pct(data["forwardGrowthRate"]), "Projected annually",
                data["forwardGrowthRate"] > 5),
        ],
        table_data=[
            {
                "name": stock["name"],
                "symbol": stock["symbol"],
                "growthRate": pct(stock["growthRate"]),
                "payoutRatio": pct(stock["payoutRatio"]),
                "yearsGrowth": f"{num(stock['yearsGrowth'])} years",
                "isPositive": stock["growthRate"] > 5,
            }
            for stock in data["topGrowthStocks"]
        ],
        metrics=[
            metric("Avg Payout Ratio", pct(data["avgPayoutRatio"]), "Sustainable levels"),
            metric("Sustainability Score", num(data["sustainabilityScore"]), "Out of 10"),
        ],
        highlights=[
            f"{num(data['aristocrats'])} Dividend Aristocrats with 25+ years of consecutive increases",
            f"Dividend income CAGR of {num(data['dividendCAGR5yr'])}% outpaced inflation by "
            f"{num(data['inflationAdjustedGrowth'])}%",
            f"Forward growth rate of {num(data['forwardGrowthRate'])}% supported by "
            f"{num(data['avgPayoutRatio'])}% payout ratio",
        ],
    )


def _dividend_income(data: Dict[str, Any]) -> GeneratedContent:
    return GeneratedContent(
        kpis=[
            kpi("Portfolio Yield", pct(data["currentYield"]), f"vs {num(data['benchmarkYield'])}% S&P",
                data["currentYield"] > data["benchmarkYield"]),
            kpi("Annual Income", thousands(data["annualIncome"]), f"+{num(data['incomeGrowth'])}% YoY",
                data["incomeGrowth"] > 0),
            kpi("Dividend Stocks", num(data["dividendStocks"]), f"{num(data['aristocrats'])} aristocrats", True),
            kpi("Growth Rate", pct(data["forwardGrowth"]), "Forward outlook", data["forwardGrowth"] > 5),
        ],
        table_data=[
            {
                "name": stock["name"],
                "yield": pct(stock["yield"]),
                "payment": f"${grouped(stock['payment'])}",
                "isPositive": stock["yield"] > 2,
            }
            for stock in data.get("topDividendStocks", [])
        ],
        metrics=[
            metric("Average Payout Ratio", pct(data["avgPayoutRatio"]), "Sustainable levels"),
        ],
    )


def format_fixed_income(data: Dict[str, Any]) -> GeneratedContent:
    ladder = data.get("maturityLadder")
    highlights = [
        f"Government bonds: {num(data['governmentBonds'])}% of fixed income",
        f"Corporate IG: {num(data['corporateIG'])}%, High Yield: {num(data['highYield'])}%",
    ]
    if ladder:
        first_year = ladder[0]["year"].split("-")[0]
        last_year = ladder[-1]["year"].split("-")[-1]
        highlights.append(f"Laddered maturities from {first_year} to {last_year}")
    return GeneratedContent(
        kpis=[
            kpi("Fixed Income", pct(data["fixedIncomeAllocation"]), "of portfolio", True),
            kpi("Duration", f"{num(data['duration'])}y", "Interest rate risk", data["duration"] < 7),
            kpi("Current Yield", pct(data["currentYield"]), f"{thousands(data['annualIncome'], 1)} annual",
                data["currentYield"] > 4),
            kpi("Credit Quality", data["averageCredit"], "High quality", True),
        ],
        table_data=[
            {
                "year": item["year"],
                "allocation": pct(item["allocation"]),
                "yield": pct(item["yield"]),
                "isPositive": item["yield"] > 4,
            }
            for item in ladder
        ] if ladder else None,
        highlights=highlights,
    )
