"""Formatters for trading, costs and tax answers."""
from typing import Any, Dict

from core.models.content import GeneratedContent
from core.services.content.formatting import (
    fixed, grouped, is_set, kpi, millions, num, pct, short_date, signed_pct, thousands,
)

MAX_TRADE_ROWS = 10


def format_trading(data: Dict[str, Any]) -> GeneratedContent:
    if is_set(data.get("purchases")) and is_set(data.get("sales")) and is_set(data.get("totalTransactions")):
        return _recent_trades(data)
    return _trading_activity(data)


def _signed_thousands(amount: float, digits: int = 0) -> str:
    """-95000 -> '-$95K'."""
    return f"{'-' if amount < 0 else ''}{thousands(abs(amount), digits)}"


def _recent_trades(data: Dict[str, Any]) -> GeneratedContent:
    trades = [dict(trade, type="Buy") for trade in data["purchases"]]
    trades.extend(dict(trade, type="Sell") for trade in data["sales"])
    # ISO dates sort chronologically as strings
    trades.sort(key=lambda trade: trade["date"], reverse=True)
    
    net_cash_flow = data["netCashFlow"]
    return GeneratedContent(
        kpis=[
            kpi("Total Transactions", num(data["totalTransactions"]), "Last 30 days", True),
            kpi("Total Volume", thousands(data["totalVolume"]), "Traded", True),
            kpi("Net Cash Flow", f"{'+' if net_cash_flow > 0 else ''}{thousands(net_cash_flow)}",
                "Position change", net_cash_flow > 0),
            kpi("Execution Quality", pct(data["avgExecutionQuality"]), "vs target prices",
                data["avgExecutionQuality"] > 99),
        ],
        table_data=[
            {
                "type": trade["type"],
                "security": trade["security"],
                "amount": _signed_thousands(trade["amount"]),
                "shares": trade.get("shares"),
                "price": f"${fixed(trade['price'], 2)}",
                "date": short_date(trade["date"]),
                "isPositive": trade["type"] == "Buy",
            }
            for trade in trades[:MAX_TRADE_ROWS]
        ],
        highlights=[
            f"{num(data['totalTransactions'])} transactions totaling {thousands(data['totalVolume'])} in volume",
            f"Net cash flow of {thousands(net_cash_flow)} maintaining target allocation",
            f"Execution quality at {num(data['avgExecutionQuality'])}% of target prices",
        ],
    )


def _trading_activity(data: Dict[str, Any]) -> GeneratedContent:
    return GeneratedContent(
        kpis=[
            kpi("Turnover Rate", pct(data["turnoverRate"]), "Annual activity", data["turnoverRate"] < 50),
            kpi("Total Volume", millions(data["totalVolume"]), f"{num(data['transactionCount'])} trades", True),
            kpi("Avg Holding", f"{num(data['avgHoldingPeriod'])}m", "months", data["avgHoldingPeriod"] > 6),
            kpi("Transaction Cost", pct(data["transactionCost"]), "of trade value", data["transactionCost"] < 0.1),
        ],
        table_data=[
            {
                "type": trade["type"],
                "security": trade["security"],
                "amount": f"{'-' if trade['amount'] < 0 else ''}${num(abs(trade['amount']) / 1000)}K",
                "impact": signed_pct(trade["impact"]),
                "date": short_date(trade["date"]),
                "isPositive": trade["type"] == "Buy",
            }
            for trade in data.get("majorTrades", [])
        ],
    )


def format_costs(data: Dict[str, Any]) -> GeneratedContent:
    breakdown = data.get("costBreakdown")
    return GeneratedContent(
        kpis=[
            kpi("Avg Expense Ratio", pct(data["avgExpenseRatio"]), f"vs {num(data['industryAverage'])}% industry",
                data["avgExpenseRatio"] < data["industryAverage"]),
            kpi("Annual Fees", thousands(data["totalAnnualFees"], 1), "Total cost", data["totalAnnualFees"] < 10000),
            kpi("Index Funds", pct(data["indexAllocation"]), f"{num(data['indexFundRatio'])}% avg fee", True),
            kpi("Active Funds", pct(data["activeAllocation"]), f"{num(data['activeFundRatio'])}% avg fee",
                data["activeFundRatio"] < 1),
        ],
        table_data=[
            {
                "type": item["type"],
                "allocation": pct(item["allocation"]),
                "avgFee": pct(item["avgFee"]),
                "totalCost": f"${grouped(item['totalCost'])}",
                "isPositive": item["avgFee"] < 0.5,
            }
            for item in breakdown
        ] if breakdown else None,
    )


def format_tax(data: Dict[str, Any]) -> GeneratedContent:
    accounts = data.get("accountTypes")
    rate_gap = round(data["marginalTaxRate"] - data["effectiveTaxRate"], 2)
    return GeneratedContent(
        kpis=[
            kpi("Tax-Advantaged", pct(data["taxAdvantaged"]), "IRA/401k holdings", data["taxAdvantaged"] > 50),
            kpi("Effective Tax Rate", pct(data["effectiveTaxRate"]), f"vs {num(data['marginalTaxRate'])}% marginal",
                data["effectiveTaxRate"] < data["marginalTaxRate"]),
            kpi("Tax-Loss Harvesting", thousands(data["taxLossHarvesting"], 1), "Realized losses",
                data["taxLossHarvesting"] > 0),
            kpi("Muni Income", thousands(data["municipalIncome"], 1), "Tax-free annually", True),
        ],
        table_data=[
            {
                "type": account["type"],
                "allocation": pct(account["allocation"]),
                "strategy": account["strategy"],
                "isPositive": True,
            }
            for account in accounts
        ] if accounts else None,
        highlights=[
            f"Effective tax rate {num(rate_gap)}% below marginal rate",
            "Strategic asset location optimizes tax efficiency",
            f"Tax-loss harvesting generated ${grouped(data['taxLossHarvesting'])} in deductions",
        ],
    )
