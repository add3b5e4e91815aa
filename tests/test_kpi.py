"""Tests for dashboard summary cards."""

import pytest

from ecofleet_calculator.kpi import build_kpi_cards, format_number
from ecofleet_calculator.models import DerivedMetrics


@pytest.mark.parametrize("value, decimals, expected", [
    (102.625, 1, "102.6"),
    (100.0, 1, "100"),
    (5131.25, 0, "5,131"),
    (1234567.891, 2, "1,234,567.89"),
    (0, 1, "0"),
    (-0.04, 1, "0"),
    (-2500.5, 1, "-2,500.5"),
])
def test_format_number(value, decimals, expected):
    assert format_number(value, decimals) == expected


class TestKpiCards:
    def test_reference_cards(self, config):
        metrics = DerivedMetrics(102.625, {}, 5131.25, 82.1)
        emissions, risk = build_kpi_cards(metrics, 50, config)

        assert emissions.title == "Emisión Total Mensual"
        assert emissions.value == "102.6 tCO2e"
        assert emissions.subtitle == "Alcance 1 (Directo)"

        assert risk.title == "Riesgo Financiero Estimado"
        assert risk.value == "$5,131 USD"
        assert risk.subtitle == "Impacto basado en ICP de $50"
        assert not risk.alert

    @pytest.mark.parametrize("price, expected", [
        (1000, "Impacto basado en ICP de $1000"),
        (42.5, "Impacto basado en ICP de $42.5"),
    ])
    def test_price_subtitle_is_plain(self, config, price, expected):
        metrics = DerivedMetrics(1.0, {}, price, 0.8)
        _, risk = build_kpi_cards(metrics, price, config)
        assert risk.subtitle == expected

    def test_risk_alert_above_threshold(self, config):
        metrics = DerivedMetrics(1000.0, {}, 50000.01, 800.0)
        _, risk = build_kpi_cards(metrics, 50, config)
        assert risk.alert

    def test_threshold_is_exclusive(self, config):
        metrics = DerivedMetrics(1000.0, {}, 50000.0, 800.0)
        _, risk = build_kpi_cards(metrics, 50, config)
        assert not risk.alert
