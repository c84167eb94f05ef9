"""Shared arithmetic for the scoring models"""
import math
from typing import Optional, Sequence


def clamp01(value: float) -> float:
    return max(0.0, min(1.0, value))


def nz(value: Optional[float]) -> float:
    """Read an unknown measurement as zero"""
    return 0 if value is None else value


def weighted_average(values: Sequence[float], weights: Sequence[float]) -> float:
    total_weight = sum(weights) or 1
    return sum(value * weight for value, weight in zip(values, weights)) / total_weight


def round_half_up(value: float) -> int:
    return int(math.floor(value + 0.5))


def calculate_risk_level(risk_score: float) -> str:
    """Map a 0-100 risk score onto a threat band"""
    if risk_score >= 80:
        return "critical"
    if risk_score >= 60:
        return "high"
    if risk_score >= 30:
        return "medium"
    if risk_score >= 0:
        return "low"
    return "unknown"
