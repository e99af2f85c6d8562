"""Rendering of a joint confidence region.

matplotlib is an optional dependency (``pip install pybdt[plot]``) and is
imported only when a plot is requested.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from pybdt.region._common import ConfidenceRegionResult, _percent

if TYPE_CHECKING:
    from matplotlib.axes import Axes


def plot_confidence_region(
    result: ConfidenceRegionResult,
    *,
    ax: Axes | None = None,
) -> Axes:
    """Draw the point estimate and confidence rectangle in ROC space.

    Parameters
    ----------
    result : ConfidenceRegionResult
        Output of :func:`confidence_region`.
    ax : matplotlib Axes or None
        Axes to draw into.  A new figure is created if ``None``.

    Returns
    -------
    matplotlib.axes.Axes
    """
    try:
        import matplotlib.pyplot as plt
        from matplotlib.patches import Rectangle
    except ImportError as exc:
        raise ImportError(
            "plot_confidence_region requires matplotlib; "
            "install it with `pip install pybdt[plot]`"
        ) from exc

    if ax is None:
        _, ax = plt.subplots()

    ax.scatter([result.fpf], [result.tpf], color="black")
    ax.add_patch(
        Rectangle(
            (result.fpf_min, result.tpf_min),
            result.fpf_max - result.fpf_min,
            result.tpf_max - result.tpf_min,
            fill=False,
            edgecolor="black",
        )
    )
    ax.plot([0, 1], [0, 1], linestyle="--", color="black", linewidth=0.8)

    ax.text(
        0.5, 0.1,
        f"Sensitivity: {round(result.tpf, 2)} "
        f"({round(result.tpf_min, 2)}, {round(result.tpf_max, 2)})",
        ha="center",
    )
    ax.text(
        0.5, 0.05,
        f"1 - Specificity: {round(result.fpf, 2)} "
        f"({round(result.fpf_min, 2)}, {round(result.fpf_max, 2)})",
        ha="center",
    )

    ax.set_xlabel("1 - Specificity")
    ax.set_ylabel("Sensitivity")
    ax.set_title(
        f"Joint {_percent(result.conf_level)} confidence region for\n"
        "Sensitivity and 1 - Specificity"
    )
    ax.set_xlim(0, 1)
    ax.set_ylim(0, 1)
    ax.set_aspect("equal")
    return ax
