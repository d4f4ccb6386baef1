"""Shared Plotly theme tokens for SalesDash visualizations."""

from __future__ import annotations

from dataclasses import dataclass, field

from core.models import Origin, Package


@dataclass(frozen=True)
class ThemeTokens:
    time_format: str = "%d %b"
    label_color: str = "#CBD5E1"
    label_font: str = "Inter"
    label_size: int = 12
    grid_color: str = "rgba(148, 163, 184, 0.18)"
    revenue_color: str = "rgba(54, 162, 235, 1)"
    revenue_soft: str = "rgba(54, 162, 235, 0.25)"
    ad_cost_color: str = "rgba(255, 99, 132, 1)"
    ad_cost_soft: str = "rgba(255, 99, 132, 0.25)"
    neutral_grey: str = "#94A3B8"
    border_color: str = "#1C1C1E"
    package_colors: dict[str, str] = field(
        default_factory=lambda: {
            Package.SIMPLES.value: "rgba(255, 206, 86, 0.8)",
            Package.BRONZE.value: "rgba(210, 105, 30, 0.8)",
            Package.PRATA.value: "rgba(192, 192, 192, 0.8)",
            Package.OURO.value: "rgba(255, 215, 0, 0.8)",
            Package.VIP.value: "rgba(147, 112, 219, 0.8)",
            Package.UPSELL.value: "rgba(255, 99, 132, 0.8)",
        }
    )
    origin_colors: dict[str, str] = field(
        default_factory=lambda: {
            Origin.BR.value: "rgba(54, 162, 235, 0.8)",
            Origin.USA.value: "rgba(255, 159, 64, 0.8)",
        }
    )


_TOKENS = ThemeTokens()


def theme_tokens() -> ThemeTokens:
    """Return the shared visualization tokens."""

    return _TOKENS
