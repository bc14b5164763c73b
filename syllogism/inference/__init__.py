from .figures import Figure, FIGURES, FIGURES_BY_NAME, figure_key, check_table
from .conclude import match_figure, conclude, conclusion_for

__all__ = [
    "Figure", "FIGURES", "FIGURES_BY_NAME", "figure_key", "check_table",
    "match_figure", "conclude", "conclusion_for",
]
