"""Tests for dashboard charts."""

import matplotlib.pyplot as plt
import pytest

from ecofleet_calculator.calculator import compute_metrics, sensitivity_analysis
from ecofleet_calculator.models import DerivedMetrics
from ecofleet_calculator.visualizer import COLORS, FleetVisualizer


@pytest.fixture
def metrics(reference_fleet, factors):
    return compute_metrics(reference_fleet, 50, factors, 0.20)


@pytest.fixture(autouse=True)
def close_figures():
    yield
    plt.close("all")


class TestFleetVisualizer:
    def test_breakdown_wedges(self, metrics):
        fig = FleetVisualizer.plot_breakdown(metrics)
        ax = fig.axes[0]
        assert len(ax.patches) == 3
        assert ax.get_title() == "Desglose por Tipo de Vehículo"

    def test_breakdown_skips_non_positive(self):
        metrics = DerivedMetrics(1.0, {"a": 1.0, "b": 0.0, "c": -2.0}, 0.0, 0.8)
        fig = FleetVisualizer.plot_breakdown(metrics)
        assert len(fig.axes[0].patches) == 1

    def test_breakdown_empty_fleet(self):
        fig = FleetVisualizer.plot_breakdown(DerivedMetrics(0.0))
        ax = fig.axes[0]
        assert len(ax.patches) == 0
        assert any(t.get_text() == "Sin emisiones registradas" for t in ax.texts)

    def test_target_comparison(self, metrics):
        fig = FleetVisualizer.plot_target_comparison(metrics)
        heights = [bar.get_height() for bar in fig.axes[0].patches]
        assert heights == pytest.approx([102.625, 82.1])

    def test_sensitivity(self, metrics):
        points = sensitivity_analysis(metrics, 50, (100, 150))
        fig = FleetVisualizer.plot_sensitivity(points)
        widths = [bar.get_width() for bar in fig.axes[0].patches]
        assert widths == pytest.approx([p.risk for p in points])

    def test_dashboard(self, metrics, config):
        points = sensitivity_analysis(metrics, 50, config.sensitivity_prices)
        fig = FleetVisualizer.plot_dashboard(metrics, points, 50, config, show=False)
        assert len(fig.axes) == 4
        texts = " ".join(t.get_text() for t in fig.axes[0].texts)
        assert "102.6 tCO2e" in texts
        assert "$5,131 USD" in texts

    def test_palette_size(self):
        assert len(COLORS) == 8
