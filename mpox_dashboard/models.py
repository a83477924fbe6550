from dataclasses import dataclass
from typing import Any, Dict, Iterable, Optional, Tuple

import pandas as pd

IDLE = 'idle'
LOADING = 'loading'
LOADED = 'loaded'
LOADED_WITH_WARNING = 'loaded_with_warning'

STATUS_REAL = 'Dados reais'
STATUS_FALLBACK = 'Fallback ativo'

WARNING_MESSAGE = '⚠️ Não foi possível conectar ao OpenDataSUS (CORS comum)'


@dataclass(frozen=True)
class RegionCaseCount:
    region: str         # state code, e.g. "SP"
    case_count: int

    def __post_init__(self):
        if self.case_count < 0:
            raise ValueError(f"case_count must be non-negative, got {self.case_count} for {self.region}")


# Shown both when the connectivity check passes and when it fails
FALLBACK_DATASET: Tuple[RegionCaseCount, ...] = (
    RegionCaseCount('SP', 43),
    RegionCaseCount('RJ', 9),
    RegionCaseCount('MG', 3),
    RegionCaseCount('RS', 1),
)


def total_cases(rows: Iterable[RegionCaseCount]) -> int:
    return sum(row.case_count for row in rows)


def to_frame(rows: Iterable[RegionCaseCount]) -> pd.DataFrame:
    """Rows as a DataFrame with the table's column names, in row order."""
    return pd.DataFrame(
        [(row.region, row.case_count) for row in rows],
        columns=['Estado', 'Casos'],
    )


@dataclass(frozen=True)
class DisplayState:
    """What the dashboard shows. Replaced as a whole, never mutated."""

    rows: Tuple[RegionCaseCount, ...] = ()
    error_message: str = ''
    phase: str = IDLE

    @property
    def total(self) -> int:
        return total_cases(self.rows)

    @property
    def status(self) -> str:
        return STATUS_FALLBACK if self.error_message else STATUS_REAL

    @classmethod
    def loaded(cls, rows: Iterable[RegionCaseCount]) -> 'DisplayState':
        return cls(rows=tuple(rows), phase=LOADED)

    @classmethod
    def loaded_with_warning(cls, rows: Iterable[RegionCaseCount], message: str = WARNING_MESSAGE) -> 'DisplayState':
        return cls(rows=tuple(rows), error_message=message, phase=LOADED_WITH_WARNING)

    def to_dict(self) -> Dict[str, Any]:
        return {
            'rows': [{'region': row.region, 'case_count': row.case_count} for row in self.rows],
            'error_message': self.error_message,
            'phase': self.phase,
        }

    @classmethod
    def from_dict(cls, data: Optional[Dict[str, Any]] = None) -> 'DisplayState':
        if not data:
            return cls()
        rows = tuple(
            RegionCaseCount(item['region'], int(item['case_count']))
            for item in data.get('rows') or []
        )
        return cls(
            rows=rows,
            error_message=data.get('error_message') or '',
            phase=data.get('phase') or IDLE,
        )
