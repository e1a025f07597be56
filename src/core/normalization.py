# Vehicle parameter normalization
# FORBIDDEN: logging, any I/O

from dataclasses import fields, replace
from typing import List, Tuple

from .constants import MIN_WHEEL_BASE_M, MIN_MAX_STEER_ANGLE_RAD, MIN_POSITIVE_VALUE
from .types import VehicleParams, Diagnostic


def clamp_min_magnitude(
    value: float,
    min_magnitude: float,
    name: str,
) -> Tuple[float, List[Diagnostic]]:
    """Replace a near-zero value with a minimal positive magnitude.

    Args:
        value: Value to check
        min_magnitude: Smallest magnitude kept as-is
        name: Parameter name used in the diagnostic message

    Returns:
        (value or min_magnitude, diagnostics)
    """
    if abs(value) >= min_magnitude:
        return value, []

    diagnostic = Diagnostic(
        level="ERROR",
        message=f"{name} {value:f} is almost 0.0, clamping to {min_magnitude:f}",
        values={"original": value, "clamped": min_magnitude},
    )
    return min_magnitude, [diagnostic]


def find_non_positive(params: VehicleParams) -> List[str]:
    """Names of parameters that are not strictly positive."""
    return [
        f.name for f in fields(params)
        if getattr(params, f.name) <= MIN_POSITIVE_VALUE
    ]


def normalize_vehicle_params(
    params: VehicleParams,
) -> Tuple[VehicleParams, List[Diagnostic]]:
    """Clamp degenerate values and collect data quality diagnostics.

    Wheel base and max steer angle with a magnitude below their thresholds
    are replaced by the threshold itself, so downstream divisions stay
    finite. Non-positive dimensions are reported once but never rejected.

    Args:
        params: Raw measured parameters

    Returns:
        (normalized params, list of diagnostics in emission order)
    """
    diagnostics: List[Diagnostic] = []

    wheel_base_m, events = clamp_min_magnitude(
        params.wheel_base_m, MIN_WHEEL_BASE_M, "wheel_base_m"
    )
    diagnostics.extend(events)

    max_steer_angle_rad, events = clamp_min_magnitude(
        params.max_steer_angle_rad, MIN_MAX_STEER_ANGLE_RAD, "max_steer_angle_rad"
    )
    diagnostics.extend(events)

    normalized = replace(
        params,
        wheel_base_m=wheel_base_m,
        max_steer_angle_rad=max_steer_angle_rad,
    )

    non_positive = find_non_positive(normalized)
    if non_positive:
        diagnostics.append(Diagnostic(
            level="ERROR",
            message="given parameters contain non positive values",
            values={name: getattr(normalized, name) for name in non_positive},
        ))

    return normalized, diagnostics
