"""
Plotting utilities for quadrature rules.
"""

import numpy as np
from matplotlib.figure import Figure

from ghnorm.quadrature.rule import QuadratureRule


def plot_rule(rule: QuadratureRule, log_scale: bool = False) -> Figure:
    """
    Lollipop plot of the weights of a quadrature rule against its abscissae.

    The weights fall off sharply away from zero, so log_scale switches the
    y axis to base 2 to make the outer points visible.

    Args:
        rule: Quadrature rule to plot.
        log_scale: Whether to use a base-2 logarithmic weight axis.

    Returns:
        matplotlib Figure with one axes.
    """
    import matplotlib.pyplot as plt

    fig, ax = plt.subplots(figsize=(6, 4))

    # Stems start at the smallest weight on a log axis, where 0 is undefined
    baseline = float(np.min(rule.weights)) / 2.0 if log_scale else 0.0
    ax.vlines(rule.abscissae, baseline, rule.weights, color="C0")
    ax.plot(rule.abscissae, rule.weights, "o", color="C0")

    if log_scale:
        ax.set_yscale("log", base=2)
        ax.set_ylabel("Weight (log scale)")
    else:
        ax.set_ylim(bottom=0.0)
        ax.set_ylabel("Weight")
    ax.set_title(f"Normalized Gauss-Hermite rule, k = {rule.order}")

    fig.tight_layout()
    return fig
