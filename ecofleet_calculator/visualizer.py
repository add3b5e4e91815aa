"""
Visualization module for fleet emission results.
"""

import matplotlib.pyplot as plt
from typing import List, Optional
from .kpi import build_kpi_cards
from .models import DerivedMetrics, SensitivityPoint
from .parameters import CalculatorConfig

# Wedge colors, assigned in first-seen vehicle type order
COLORS = ['#2563eb', '#0891b2', '#059669', '#d97706', '#dc2626', '#7c3aed', '#db2777', '#4b5563']

ACTUAL_COLOR = '#3b82f6'
TARGET_COLOR = '#10b981'
SCENARIO_COLOR = '#cbd5e1'


class FleetVisualizer:
    """Create visualizations for fleet emissions."""

    @staticmethod
    def _target_axes(ax: Optional[plt.Axes], figsize=(8, 6)):
        if ax is not None:
            return ax.figure, ax
        return plt.subplots(figsize=figsize)

    @staticmethod
    def plot_breakdown(metrics: DerivedMetrics, ax: Optional[plt.Axes] = None,
                       show: bool = False) -> plt.Figure:
        """
        Donut chart of emissions by vehicle type.

        Args:
            metrics: DerivedMetrics object
            ax: Axes to draw on; a new figure is created if omitted
            show: Whether to display the plot

        Returns:
            Matplotlib figure
        """
        fig, ax = FleetVisualizer._target_axes(ax)

        # Wedges cannot be zero or negative
        colors = [COLORS[i % len(COLORS)] for i in range(len(metrics.emissions_by_type))]
        slices = [
            (name, value, color)
            for (name, value), color in zip(metrics.emissions_by_type.items(), colors)
            if value > 0
        ]

        ax.set_title('Desglose por Tipo de Vehículo')
        if not slices:
            ax.text(0.5, 0.5, 'Sin emisiones registradas', ha='center', va='center', fontsize=12)
            ax.axis('off')
        else:
            names, values, wedge_colors = zip(*slices)
            ax.pie(values, labels=names, colors=wedge_colors, autopct='%1.1f%%',
                   wedgeprops=dict(width=0.4), startangle=90)
            ax.axis('equal')

        if show:
            plt.show()
        return fig

    @staticmethod
    def plot_target_comparison(metrics: DerivedMetrics, ax: Optional[plt.Axes] = None,
                               show: bool = False) -> plt.Figure:
        """Bar chart of actual emissions against the ESG target."""
        fig, ax = FleetVisualizer._target_axes(ax)

        names, values = zip(*metrics.target_comparison())
        ax.bar(names, values, color=[ACTUAL_COLOR, TARGET_COLOR])
        ax.set_title('Objetivo vs. Actual (tCO2e)')
        ax.set_ylabel('tCO2e')
        ax.grid(True, axis='y', alpha=0.3)

        if show:
            plt.show()
        return fig

    @staticmethod
    def plot_sensitivity(points: List[SensitivityPoint], ax: Optional[plt.Axes] = None,
                         show: bool = False) -> plt.Figure:
        """
        Horizontal bars of financial risk per carbon price scenario.

        The first point (current price) is highlighted.
        """
        fig, ax = FleetVisualizer._target_axes(ax, figsize=(10, 4))

        labels = [p.label for p in points]
        risks = [p.risk for p in points]
        colors = [TARGET_COLOR if i == 0 else SCENARIO_COLOR for i in range(len(points))]
        ax.barh(labels, risks, color=colors)
        ax.invert_yaxis()
        ax.set_title('Sensibilidad de Costo del Carbono')
        ax.set_xlabel('Riesgo USD')
        ax.grid(True, axis='x', alpha=0.3)
        ax.xaxis.set_major_formatter(plt.FuncFormatter(lambda x, p: f'${x:,.0f}'))

        if show:
            plt.show()
        return fig

    @staticmethod
    def plot_dashboard(metrics: DerivedMetrics, sensitivity: List[SensitivityPoint],
                       carbon_price: float, config: Optional[CalculatorConfig] = None,
                       show: bool = True) -> plt.Figure:
        """
        Create the full dashboard: KPIs, breakdown, target and sensitivity.

        Args:
            metrics: DerivedMetrics object
            sensitivity: Points from sensitivity_analysis
            carbon_price: Current carbon price (USD/tCO2e)
            config: Used for the risk alert threshold
            show: Whether to display the plot

        Returns:
            Matplotlib figure
        """
        fig, axes = plt.subplots(2, 2, figsize=(14, 10))
        fig.suptitle('EcoFleet Mining Calculator', fontsize=16, fontweight='bold')

        # 1. KPI cards
        ax = axes[0, 0]
        ax.axis('off')
        cards = build_kpi_cards(metrics, carbon_price, config)
        for i, card in enumerate(cards):
            facecolor = '#ffedd5' if card.alert else '#ecfdf5'
            ax.text(0.05, 0.75 - i * 0.45,
                    f"{card.title.upper()}\n{card.value}\n{card.subtitle}",
                    fontsize=12, family='monospace', verticalalignment='center',
                    bbox=dict(boxstyle='round', facecolor=facecolor, alpha=0.8))

        FleetVisualizer.plot_breakdown(metrics, ax=axes[0, 1])
        FleetVisualizer.plot_target_comparison(metrics, ax=axes[1, 0])
        FleetVisualizer.plot_sensitivity(sensitivity, ax=axes[1, 1])

        plt.tight_layout()
        if show:
            plt.show()

        return fig
