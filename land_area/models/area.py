"""Data models for a computed land area.

``AreaResult`` is the plot area expressed in every supported unit.
``AreaCalculation`` wraps it with the diagnostics of the calculation that
produced it (mode, vertices, warnings, optional cross-checks) and is the
body returned to HTTP callers.

Serialised keys follow the calculator widget's wire names
(``squareMeters``, ``squareFeet``, ``katha`` ...).
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import TYPE_CHECKING

from land_area.utils.helpers import round_half_up

if TYPE_CHECKING:
    from land_area.models.coordinates import PlanarPoint

_WIRE_NAMES: dict[str, str] = {
    "square_meters": "squareMeters",
    "square_feet": "squareFeet",
    "katha": "katha",
    "bigha": "bigha",
    "acre": "acre",
    "decimal": "decimal",
    "shotok": "shotok",
    "kani": "kani",
}

_AREA_FIELDS = ("square_meters", "square_feet")
_UNIT_FIELDS = ("katha", "bigha", "acre", "decimal", "shotok", "kani")


@dataclass(frozen=True, slots=True)
class AreaResult:
    """A land area in square metres, square feet and regional units.

    Every field derives from ``square_meters`` through the fixed ratios
    in ``land_area.conversion.CONVERSION_TABLE``.

    Attributes:
        square_meters: Area in m².
        square_feet: Area in ft² (m² × 10.764).
        katha: ft² / 720.
        bigha: ft² / 14,400.
        acre: ft² / 43,560.
        decimal: ft² / 435.6.
        shotok: Same as ``decimal``.
        kani: ft² / 17,280.
    """

    square_meters: float
    square_feet: float
    katha: float
    bigha: float
    acre: float
    decimal: float
    shotok: float
    kani: float

    def rounded(self, area_precision: int = 2, unit_precision: int = 4) -> AreaResult:
        """Return a copy rounded for display.

        Square metres and square feet use *area_precision* places, the
        regional units *unit_precision* places (round half up).
        """
        values = {
            name: round_half_up(getattr(self, name), area_precision) for name in _AREA_FIELDS
        }
        values.update(
            {name: round_half_up(getattr(self, name), unit_precision) for name in _UNIT_FIELDS}
        )
        return AreaResult(**values)

    def to_dict(self) -> dict[str, float]:
        """Serialise using the wire names (``squareMeters``, ``squareFeet`` ...)."""
        return {wire: getattr(self, name) for name, wire in _WIRE_NAMES.items()}

    @classmethod
    def from_dict(cls, data: dict[str, object]) -> AreaResult:
        """Deserialise from a wire-named dict.

        Raises:
            KeyError: If a unit is missing.
            TypeError: If a value cannot be converted to float.
        """
        values = {
            name: float(data[wire])  # type: ignore[arg-type]
            for name, wire in _WIRE_NAMES.items()
        }
        return cls(**values)


@dataclass(frozen=True, slots=True)
class AreaCalculation:
    """Outcome of one ``calculate_area`` call.

    Attributes:
        result: Rounded area in every unit.
        mode: ``"manual"`` or ``"gps"``.
        vertex_count: Number of polygon vertices used.
        raw_square_meters: Unrounded Shoelace area in m².
        planar_points: Vertices in the metric frame the area was computed in.
        is_simple: Whether the polygon is free of self-intersections;
            ``None`` when the check was not requested.
        geodesic_square_meters: WGS 84 ellipsoidal area (GPS mode, when
            the cross-check is enabled).
        projection_deviation_pct: Relative difference between the planar
            and geodesic areas, in percent.
        warnings: Non-fatal findings (large area, self-intersection).
        accuracy_note: Accuracy disclaimer for GPS-derived areas.
    """

    result: AreaResult
    mode: str
    vertex_count: int
    raw_square_meters: float
    planar_points: list[PlanarPoint] = field(default_factory=list)
    is_simple: bool | None = None
    geodesic_square_meters: float | None = None
    projection_deviation_pct: float | None = None
    warnings: list[str] = field(default_factory=list)
    accuracy_note: str = ""

    def to_dict(self) -> dict[str, object]:
        """Serialise for an HTTP JSON response."""
        return {
            "result": self.result.to_dict(),
            "mode": self.mode,
            "vertexCount": self.vertex_count,
            "rawSquareMeters": self.raw_square_meters,
            "planarPoints": [p.to_dict() for p in self.planar_points],
            "isSimple": self.is_simple,
            "geodesicSquareMeters": self.geodesic_square_meters,
            "projectionDeviationPct": self.projection_deviation_pct,
            "warnings": list(self.warnings),
            "accuracyNote": self.accuracy_note,
        }
