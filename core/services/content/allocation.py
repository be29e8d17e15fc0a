"""Formatters for allocation, geographic and alternatives answers."""
from typing import Any, Dict

from core.models.content import GeneratedContent
from core.services.content.formatting import is_set, kpi, num, pct, plus_pct, signed_pct, thousands


def format_allocation(data: Dict[str, Any]) -> GeneratedContent:
    if is_set(data.get("equityAllocation")) and is_set(data.get("fixedIncomeAllocation")):
        return _asset_allocation(data)
    return _sector_allocation(data)


def _asset_allocation(data: Dict[str, Any]) -> GeneratedContent:
    equity = data["equityBreakdown"]
    fixed_income = data["fixedIncomeBreakdown"]
    rows = [
        {
            "region": item["region"],
            "allocation": pct(item["allocation"]),
            "amount": thousands(item["amount"]),
            "type": "Equity",
            "isPositive": True,
        }
        for item in equity
    ]
    rows.extend(
        {
            "region": item["type"],
            "allocation": pct(item["allocation"]),
            "amount": thousands(item["amount"]),
            "type": "Fixed Income",
            "isPositive": True,
        }
        for item in fixed_income
    )
    equity_split = ", ".join(f"{num(item['allocation'])}% {item['region']}" for item in equity)
    return GeneratedContent(
        kpis=[
            kpi("Equity Allocation", pct(data["equityAllocation"]), "Growth focus", True),
            kpi("Fixed Income", pct(data["fixedIncomeAllocation"]), "Stability", True),
            kpi("Alternatives", pct(data.get("alternatives", 0)), "Diversification", True),
            kpi("Target Return", pct(data["targetReturn"]), "Annualized", True),
        ],
        table_data=rows,
        highlights=[
            f"Strategic {num(data['equityAllocation'])}/{num(data['fixedIncomeAllocation'])} "
            f"equity/fixed income allocation",
            f"Equities split: {equity_split}",
            f"Target return of {num(data['targetReturn'])}% with {num(data['targetVolatility'])}% volatility",
        ],
    )


def _sector_allocation(data: Dict[str, Any]) -> GeneratedContent:
    sectors = data["sectors"]
    top_sectors = sectors[:6]
    kpis = [kpi("Excess Return", plus_pct(data["excessReturn"]), "from allocation", data["excessReturn"] > 0)]
    kpis.extend(
        kpi(sector["name"], pct(sector["portfolio"]), f"{signed_pct(sector['excess'])} vs S&P", sector["excess"] > 0)
        for sector in sectors[:2]
    )
    kpis.append(kpi("Top Sector Return", plus_pct(max(sector["return"] for sector in sectors)),
                    "Best performing", True))
    return GeneratedContent(
        kpis=kpis,
        chart_data=[
            {
                "sector": sector["name"],
                "portfolio": sector["portfolio"],
                "benchmark": sector["benchmark"],
                "excess": sector["excess"],
            }
            for sector in top_sectors
        ],
        table_data=[
            {
                "name": sector["name"],
                "portfolio": pct(sector["portfolio"]),
                "benchmark": pct(sector["benchmark"]),
                "excess": signed_pct(sector["excess"]),
                "return": plus_pct(sector["return"]),
                "isPositive": sector["excess"] > 0,
            }
            for sector in top_sectors
        ],
    )


def format_geographic(data: Dict[str, Any]) -> GeneratedContent:
    holdings = data.get("topIntlHoldings")
    return GeneratedContent(
        kpis=[
            kpi("US Exposure", pct(data["usExposure"]), "Domestic equity", True),
            kpi("Developed Intl", pct(data["developedIntl"]), "International", True),
            kpi("Emerging Markets", pct(data["emergingMarkets"]), "Growth exposure", True),
            kpi("Currency Hedged", pct(data["currencyHedged"]), "FX protection", data["currencyHedged"] > 50),
        ],
        table_data=[
            {
                "name": holding["name"],
                "country": holding["country"],
                "weight": pct(holding["weight"]),
                "sector": holding["sector"],
                "isPositive": True,
            }
            for holding in holdings
        ] if holdings else None,
        highlights=[
            f"European holdings: {num(data['europeanHoldings'])}% of portfolio",
            f"Asia-Pacific exposure: {num(data['asiaPacific'])}%",
            f"Currency hedging on {num(data['currencyHedged'])}% of international positions",
        ],
    )


def format_alternatives(data: Dict[str, Any]) -> GeneratedContent:
    breakdown = data.get("alternativeBreakdown")
    return GeneratedContent(
        kpis=[
            kpi("Total Alternatives", pct(data["totalAlternatives"]), "of portfolio", True),
            kpi("REITs", pct(data["reitAllocation"]), f"+{num(data['reitReturn'])}% YTD", data["reitReturn"] > 0),
            kpi("Commodities", pct(data["commoditiesAllocation"]), "Inflation hedge", True),
            kpi("Private Equity", pct(data["privateEquityAllocation"]), "Growth exposure", True),
        ],
        table_data=[
            {
                "type": item["type"],
                "allocation": pct(item["allocation"]),
                "return": signed_pct(item["return"]),
                "income": pct(item["income"]),
                "isPositive": item["return"] > 0,
            }
            for item in breakdown
        ] if breakdown else None,
        highlights=[
            f"Alternatives contributed +{num(data['performanceContribution'])}% to portfolio performance",
            "Real estate exposure provides inflation protection",
            "Diversification benefits from low correlation assets",
        ],
    )
