"""Statistical diagnostics over binary vector sets."""

from .diagnostics import (
    distance_z_score,
    distance_p_value,
    orthogonality_report,
    DecorrelationReport,
    PairStatistic,
)

__all__ = [
    'distance_z_score',
    'distance_p_value',
    'orthogonality_report',
    'DecorrelationReport',
    'PairStatistic',
]
