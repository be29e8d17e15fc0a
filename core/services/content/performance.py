"""Formatters for performance and holdings answers."""
from typing import Any, Dict

from core.models.content import GeneratedContent
from core.services.content.formatting import (
    fixed, gt, is_set, kpi, num, ordinal, pct, plus_pct, signed_pct, text_or_na,
)


def format_performance(data: Dict[str, Any]) -> GeneratedContent:
    """Performance answers come in four shapes; the payload keys select one."""
    if is_set(data.get("factorContributions")):
        return _factor_attribution(data)
    if is_set(data.get("rollingReturns")):
        return _rolling_returns(data)
    contributors = data.get("topContributors")
    if isinstance(contributors, list):
        # an empty list has no first entry and raises IndexError
        first = contributors[0]
        if isinstance(first, dict) and is_set(first.get("symbol")):
            return _contributors(data)
    return _ytd_performance(data)


def _factor_attribution(data: Dict[str, Any]) -> GeneratedContent:
    factors = data["factorContributions"]
    top = factors[0]
    return GeneratedContent(
        kpis=[
            kpi("Explained Return", pct(data["explainedReturn"]), "Factor-based", True),
            kpi("True Alpha", pct(data["alpha"]), "Security selection", data["alpha"] > 0),
            kpi("Total Attribution", plus_pct(data["totalAttribution"]), "Combined factors", True),
            kpi("Top Factor", top["factor"], plus_pct(top["contribution"]), True),
        ],
        table_data=[
            {
                "factor": factor["factor"],
                "contribution": signed_pct(factor["contribution"]),
                "weight": fixed(factor["weight"], 2),
                "description": factor["description"],
                "isPositive": factor["contribution"] > 0,
            }
            for factor in factors
        ],
        highlights=[
            f"{num(data['explainedReturn'])}% of returns explained by intentional factor tilts",
            f"{num(data['alpha'])}% represents true alpha from security selection",
            f"{top['factor']} factor contributed most at +{num(top['contribution'])}%",
        ],
    )


def _rolling_returns(data: Dict[str, Any]) -> GeneratedContent:
    return GeneratedContent(
        kpis=[
            kpi("Current 12M Return", plus_pct(data["current12MonthReturn"]),
                f"{ordinal(data['percentileRank'])} percentile", True),
            kpi("Outperforming Periods", pct(data["periodsOutperforming"]), "Beat S&P 500",
                data["periodsOutperforming"] > 75),
            kpi("Best Period", plus_pct(data["bestRollingPeriod"]), "Peak performance", True),
            kpi("Worst Period", pct(data["worstRollingPeriod"]), f"vs {num(data['benchmarkWorst'])}% S&P",
                data["worstRollingPeriod"] > data["benchmarkWorst"]),
        ],
        chart_data=[
            {
                "date": period["endDate"],
                "portfolio": period["return"],
                "benchmark": period["benchmark"],
                "excess": period["excess"],
            }
            for period in data["rollingReturns"]
        ],
        highlights=[
            f"{num(data['periodsOutperforming'])}% of rolling periods outperformed S&P 500",
            f"Demonstrated resilience with minimum return of {num(data['worstRollingPeriod'])}% "
            f"vs market's {num(data['benchmarkWorst'])}%",
            f"Current 12-month return ranks in {ordinal(data['percentileRank'])} percentile",
        ],
    )


def _contributors(data: Dict[str, Any]) -> GeneratedContent:
    contributors = data["topContributors"]
    rows = [
        {
            "name": stock["name"],
            "symbol": stock["symbol"],
            "contribution": plus_pct(stock["contribution"]),
            "weight": pct(stock["weight"]),
            "return": plus_pct(stock["return"]),
            "isPositive": True,
        }
        for stock in contributors[:5]
    ]
    rows.extend(
        {
            "name": stock["name"],
            "symbol": stock["symbol"],
            "contribution": pct(stock["contribution"]),
            "weight": pct(stock["weight"]),
            "return": pct(stock["return"]),
            "isPositive": False,
        }
        for stock in data.get("topDetractors", [])
    )
    return GeneratedContent(
        kpis=[
            kpi("Sector Contribution", plus_pct(data["sectorContribution"]), "From sectors", True),
            kpi("Security Selection", plus_pct(data["securitySelection"]), "Stock picking",
                data["securitySelection"] > 0),
            kpi("Allocation Effect", plus_pct(data["allocationEffect"]), "Positioning",
                data["allocationEffect"] > 0),
            kpi("Total Alpha", plus_pct(data["totalAlpha"]), "Active return", True),
        ],
        table_data=rows,
        highlights=[
            f"{contributors[0]['name']} led contribution at +{num(contributors[0]['contribution'])}%",
            f"Security selection in Technology added +{num(data['securitySelection'])}%",
            f"Active positions generated +{num(data['totalAlpha'])}% of alpha",
        ],
    )


def _ytd_performance(data: Dict[str, Any]) -> GeneratedContent:
    benchmark_sharpe = data.get("benchmarkSharpe")
    contributors = data.get("topContributors")
    highlights = []
    if is_set(contributors):
        highlights = [
            f"Portfolio outperformed S&P 500 by {num(data['outperformance'])} percentage points",
            f"Top contributing sectors: {', '.join(contributors)}",
            f"Risk-adjusted returns superior with Sharpe ratio of {num(data.get('sharpeRatio'))}",
        ]
    return GeneratedContent(
        kpis=[
            kpi("YTD Return", plus_pct(data["portfolioReturn"]), f"+{num(data['outperformance'])}% vs S&P",
                data["outperformance"] > 0),
            kpi("Sharpe Ratio", text_or_na(data.get("sharpeRatio")),
                f"vs {num(benchmark_sharpe)} benchmark" if benchmark_sharpe else "",
                gt(data.get("sharpeRatio"), benchmark_sharpe or 0)),
            kpi("S&P 500 Return", plus_pct(data["benchmarkReturn"]), "Benchmark performance",
                data["benchmarkReturn"] > 0),
            kpi("Outperformance", plus_pct(data["outperformance"]), "Above benchmark", True),
        ],
        chart_data=data.get("chartData"),
        highlights=highlights,
    )


def format_holdings(data: Dict[str, Any]) -> GeneratedContent:
    holdings = data["topHoldings"][:6]
    best = max(holdings, key=lambda holding: holding["return"])
    tech_count = sum(1 for holding in holdings if holding.get("sector") == "Technology")
    return GeneratedContent(
        kpis=[
            kpi("Top 10 Weight", pct(data["totalWeight"]), "of portfolio", True),
            kpi("Average P/E", f"{num(data['avgPE'])}x", "Quality growth", True),
            kpi("Contribution", plus_pct(data["contribution"]), "to performance", True),
            kpi("Holdings Count", "10", "Top positions", True),
        ],
        table_data=[
            {
                "name": holding["name"],
                "symbol": holding["symbol"],
                "weight": pct(holding["weight"]),
                "return": signed_pct(holding["return"]),
                "sector": holding["sector"],
                "isPositive": holding["return"] > 0,
            }
            for holding in holdings
        ],
        highlights=[
            f"Top holding: {holdings[0]['name']} at {num(holdings[0]['weight'])}%",
            f"Technology represents {tech_count} of top 10",
            f"Best performer: {best['name']} (+{num(best['return'])}%)",
        ],
    )
