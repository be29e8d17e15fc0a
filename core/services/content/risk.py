"""Formatters for risk answers."""
from typing import Any, Dict

from core.models.content import GeneratedContent
from core.services.content.formatting import (
    fixed, gt, is_set, kpi, lt, metric, num, pct, pct_or_na, text_or_na, thousands,
)


def format_risk(data: Dict[str, Any]) -> GeneratedContent:
    """Risk answers: Sharpe analysis, VaR, correlation, or the basic metrics sheet."""
    if is_set(data.get("sortinoRatio")) and is_set(data.get("treynorRatio")) and is_set(data.get("calmarRatio")):
        return _risk_adjusted_returns(data)
    if is_set(data.get("var95Daily")) and is_set(data.get("stressScenarios")):
        return _value_at_risk(data)
    if is_set(data.get("marketCorrelation")) and is_set(data.get("effectiveBets")):
        return _correlation(data)
    return _risk_metrics(data)


def _risk_adjusted_returns(data: Dict[str, Any]) -> GeneratedContent:
    return GeneratedContent(
        kpis=[
            kpi("Sharpe Ratio", num(data["sharpeRatio"]), f"vs {num(data['benchmarkSharpe'])} S&P",
                data["sharpeRatio"] > data["benchmarkSharpe"]),
            kpi("Sortino Ratio", num(data["sortinoRatio"]), "Downside focus", data["sortinoRatio"] > 1.5),
            kpi("Information Ratio", num(data["informationRatio"]), "Alpha consistency",
                data["informationRatio"] > 0.5),
            kpi("Peer Average", num(data["peerAverageSharpe"]), "Comparison", False),
        ],
        metrics=[
            metric("Treynor Ratio", num(data["treynorRatio"]), "Risk-adjusted vs beta"),
            metric("Calmar Ratio", num(data["calmarRatio"]), "Return vs drawdown"),
            metric("Excess Return", pct(data["excessReturn"]), "Above risk-free rate"),
            metric("Std Deviation", pct(data["standardDeviation"]), "Volatility measure"),
        ],
        highlights=[
            f"Sharpe ratio of {num(data['sharpeRatio'])} exceeds S&P 500 ({num(data['benchmarkSharpe'])}) "
            f"and peers ({num(data['peerAverageSharpe'])})",
            f"Sortino ratio of {num(data['sortinoRatio'])} shows strong downside risk management",
            f"Information ratio of {num(data['informationRatio'])} demonstrates consistent alpha generation",
        ],
    )


def _value_at_risk(data: Dict[str, Any]) -> GeneratedContent:
    scenarios = data["stressScenarios"]
    worst = min(scenarios, key=lambda scenario: scenario["portfolioDrawdown"])
    return GeneratedContent(
        kpis=[
            kpi("VaR (95%)", pct(data["var95Daily"]), thousands(data["var95DollarAmount"]),
                data["var95Daily"] > -3),
            kpi("VaR (99%)", pct(data["var99Daily"]), thousands(data["var99DollarAmount"]),
                data["var99Daily"] > -5),
            kpi("CVaR (95%)", pct(data["cvar95"]), "Expected shortfall", data["cvar95"] > -4),
            kpi("Model Accuracy", pct(data["historicalAccuracy"]), "Backtest results",
                data["historicalAccuracy"] > 90),
        ],
        table_data=[
            {
                "scenario": scenario["scenario"],
                "portfolioDrawdown": pct(scenario["portfolioDrawdown"]),
                "marketDrawdown": pct(scenario["marketDrawdown"]),
                "isPositive": scenario["portfolioDrawdown"] > scenario["marketDrawdown"],
            }
            for scenario in scenarios
        ],
        highlights=[
            f"95% confidence daily losses won't exceed {num(data['var95Daily'])}%",
            f"Stress testing shows maximum potential drawdown of {num(worst['portfolioDrawdown'])}% "
            f"vs market's {num(worst['marketDrawdown'])}%",
            f"Model accuracy of {num(data['historicalAccuracy'])}% validates risk estimates",
        ],
    )


def _correlation(data: Dict[str, Any]) -> GeneratedContent:
    pairs = data.get("assetClassCorrelations")
    return GeneratedContent(
        kpis=[
            kpi("Market Correlation", num(data["marketCorrelation"]), "S&P 500 linkage",
                data["marketCorrelation"] < 0.9),
            kpi("Effective Bets", num(data["effectiveBets"]), f"vs {num(data['marketEffectiveBets'])} market",
                data["effectiveBets"] > data["marketEffectiveBets"]),
            kpi("Intl Correlation", num(data["internationalCorrelation"]), "Diversification",
                data["internationalCorrelation"] < 0.8),
            kpi("Bond Correlation", num(data["bondCorrelation"]), "Hedge effectiveness",
                data["bondCorrelation"] < 0),
        ],
        table_data=[
            {
                "class1": pair["class1"],
                "class2": pair["class2"],
                "correlation": fixed(pair["correlation"], 2),
                "isPositive": abs(pair["correlation"]) < 0.7,
            }
            for pair in pairs
        ] if pairs else None,
        metrics=[
            metric("Avg Intra-Correlation", num(data["avgIntraCorrelation"]), "Within portfolio"),
        ],
        highlights=[
            f"Portfolio's {num(data['effectiveBets'])} effective bets exceed market's typical "
            f"{num(data['marketEffectiveBets'])}",
            f"Bonds maintain negative correlation ({num(data['bondCorrelation'])}) providing hedge during drawdowns",
            f"Average intra-portfolio correlation of {num(data['avgIntraCorrelation'])} suggests good diversification",
        ],
    )


def _risk_metrics(data: Dict[str, Any]) -> GeneratedContent:
    tracking_error = data.get("trackingError")
    volatility = data.get("volatility", data.get("portfolioVolatility"))
    risk_rows = data.get("riskMetrics")
    metrics = []
    if data.get("sortinoRatio"):
        metrics = [
            metric("Sortino Ratio", num(data["sortinoRatio"]), "Downside risk focus"),
            metric("Market Correlation", text_or_na(data.get("correlationToMarket")), "Diversification measure"),
        ]
    return GeneratedContent(
        kpis=[
            kpi("Portfolio Beta", text_or_na(data.get("beta")), "vs market 1.0", lt(data.get("beta"), 1.2)),
            kpi("Volatility", pct_or_na(volatility), f"vs {num(data.get('marketVolatility'))}% market",
                lt(volatility, data.get("marketVolatility"))),
            kpi("Max Drawdown", pct_or_na(data.get("maxDrawdown")), "12-month worst",
                gt(data.get("maxDrawdown"), -15)),
            kpi("Value at Risk", pct_or_na(data.get("var95")), "95% confidence", gt(data.get("var95"), -5)),
            kpi("Sharpe Ratio", text_or_na(data.get("sharpeRatio")), "Risk-adj return",
                gt(data.get("sharpeRatio"), 1)),
            kpi("Information Ratio", text_or_na(data.get("informationRatio")),
                f"TE: {num(tracking_error)}%" if tracking_error else "",
                gt(data.get("informationRatio"), 0)),
        ],
        table_data=[
            {
                "metric": row["metric"],
                "portfolio": num(row["portfolio"]),
                "benchmark": num(row["benchmark"]),
                "advantage": row["advantage"],
                "isPositive": abs(row["portfolio"]) < abs(row["benchmark"]),
            }
            for row in risk_rows
        ] if risk_rows else None,
        metrics=metrics,
    )
