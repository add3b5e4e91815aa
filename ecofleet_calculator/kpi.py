"""
Summary cards shown above the charts.
"""

from dataclasses import dataclass
from typing import List, Optional
from .calculator import format_price
from .models import DerivedMetrics
from .parameters import CalculatorConfig


@dataclass(frozen=True)
class KpiCard:
    title: str
    value: str
    subtitle: str = ""
    alert: bool = False


def format_number(value: float, max_decimals: int = 0) -> str:
    """Thousands-separated number with at most ``max_decimals`` decimals.

    Trailing zeros are dropped, so 100.0 renders as "100".
    """
    text = f"{value:,.{max_decimals}f}"
    if '.' in text:
        text = text.rstrip('0').rstrip('.')
    if text in ('-0', ''):
        text = '0'
    return text


def build_kpi_cards(
    metrics: DerivedMetrics,
    carbon_price: float,
    config: Optional[CalculatorConfig] = None,
) -> List[KpiCard]:
    """Emission and financial risk cards for the dashboard header."""
    config = config or CalculatorConfig()

    emissions = KpiCard(
        title="Emisión Total Mensual",
        value=f"{format_number(metrics.total_emissions_tons, 1)} tCO2e",
        subtitle="Alcance 1 (Directo)",
    )
    risk = KpiCard(
        title="Riesgo Financiero Estimado",
        value=f"${format_number(metrics.financial_risk, 0)} USD",
        subtitle=f"Impacto basado en ICP de ${format_price(carbon_price)}",
        alert=metrics.financial_risk > config.risk_alert_threshold,
    )
    return [emissions, risk]
