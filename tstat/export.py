"""
Export utilities for tstat.

Saves a rendered chart as a PNG at a fixed width.  The figure's size is
changed only for the duration of the save and restored with
``try/finally``.
"""

import os

from matplotlib.figure import Figure

from .constants import EXPORT_DPI, EXPORT_WIDTH_INCHES


def export_png(
    fig: Figure,
    filepath: str,
    *,
    dpi: int = EXPORT_DPI,
    width_inches: float = EXPORT_WIDTH_INCHES,
) -> str:
    """Export *fig* as a PNG with a white background.

    Parameters
    ----------
    fig : matplotlib.figure.Figure
    filepath : str
        Output file path.  Missing parent directories are created.
    dpi : int
        Export resolution.
    width_inches : float
        Figure width in inches; the height is scaled to keep the
        aspect ratio.

    Returns
    -------
    str
        The path written.
    """
    directory = os.path.dirname(os.path.abspath(filepath))
    os.makedirs(directory, exist_ok=True)

    current_w = fig.get_figwidth()
    current_h = fig.get_figheight()
    try:
        scale = width_inches / current_w if current_w > 0 else 1.0
        fig.set_size_inches(width_inches, current_h * scale)
        fig.savefig(
            filepath,
            format='png',
            dpi=dpi,
            bbox_inches='tight',
            facecolor='#ffffff',
            edgecolor='none',
            pad_inches=0.1,
        )
    finally:
        fig.set_size_inches(current_w, current_h)
    return filepath
