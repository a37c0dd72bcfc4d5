"""
The Anscombe Quartet: four 11-point series with near-identical summary
statistics and very different shapes.
"""
from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class Series:
    name: str
    x: tuple[float, ...]
    y: tuple[float, ...]

    def __len__(self) -> int:
        return len(self.x)


_X_123 = (10, 8, 13, 9, 11, 14, 6, 4, 12, 7, 5)

QUARTET: list[Series] = [
    Series("Set I", _X_123, (8.04, 6.95, 7.58, 8.81, 8.33, 9.96, 7.24, 4.26, 10.84, 4.82, 5.68)),
    Series("Set II", _X_123, (9.14, 8.14, 8.74, 8.77, 9.26, 8.1, 6.13, 3.1, 9.13, 7.26, 4.74)),
    Series("Set III", _X_123, (7.46, 6.77, 12.74, 7.11, 7.81, 8.84, 6.08, 5.39, 8.15, 6.42, 5.73)),
    Series("Set IV", (8, 8, 8, 8, 8, 8, 8, 19, 8, 8, 8), (6.58, 5.76, 7.71, 8.84, 8.47, 7.04, 5.25, 12.5, 5.56, 7.91, 6.89)),
]


def select(names: list[str] | None = None) -> list[tuple[int, Series]]:
    """
    Pick datasets by name ("Set II") or roman numeral ("II"), keeping their
    1-based position in the quartet. None returns all four.
    """
    indexed = list(enumerate(QUARTET, 1))
    if not names:
        return indexed
    wanted = {n.strip().upper().removeprefix("SET ").strip() for n in names}
    picked = [(i, s) for i, s in indexed if s.name.upper().removeprefix("SET ") in wanted]
    known = {s.name.upper().removeprefix("SET ") for s in QUARTET}
    unknown = sorted(wanted - known)
    if unknown:
        raise ValueError(f"Unknown dataset(s): {', '.join(unknown)} (expected one of I, II, III, IV)")
    return picked

