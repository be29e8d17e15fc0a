"""Formatter for ESG answers."""
from typing import Any, Dict

from core.models.content import GeneratedContent
from core.services.content.formatting import fixed, kpi, metric, num, pct

# Benchmark pillar scores shown next to the portfolio's in the ESG chart
BENCHMARK_PILLARS = {"Environmental": 6.0, "Social": 6.1, "Governance": 6.5}


def format_esg(data: Dict[str, Any]) -> GeneratedContent:
    pillars = {
        "Environmental": data["environmentalScore"],
        "Social": data["socialScore"],
        "Governance": data["governanceScore"],
    }
    return GeneratedContent(
        kpis=[
            kpi("ESG Score", num(data["overallScore"]), f"{data['rating']} Rating", data["overallScore"] > 7),
            kpi("vs S&P 500", f"+{fixed(data['overallScore'] - data['benchmarkScore'], 1)}", "Above benchmark",
                data["overallScore"] > data["benchmarkScore"]),
            kpi("Carbon Intensity", num(data["carbonIntensity"]), f"{num(data['carbonReduction'])}% lower", True),
            kpi("Sustainable Rev", pct(data["sustainableRevenue"]), "of portfolio", data["sustainableRevenue"] > 25),
        ],
        metrics=[
            metric("Environmental", num(pillars["Environmental"]), "Clean energy focus"),
            metric("Social", num(pillars["Social"]), "Responsible practices"),
            metric("Governance", num(pillars["Governance"]), "Corporate quality"),
        ],
        chart_data=[
            {"category": name, "portfolio": score, "benchmark": BENCHMARK_PILLARS[name]}
            for name, score in pillars.items()
        ],
    )
