"""Narrative summaries of a scan in selectable tones"""
from enum import Enum
from typing import Union

from ..models.results import AlphaResult, ThreatResult, ViralResult
from ..analysis.scoring_utils import round_half_up

CLINICAL_ALPHA_THRESHOLD = 0.4
CLINICAL_VIRAL_THRESHOLD = 0.4
VERMIN_ALPHA_THRESHOLD = 0.6
VERMIN_VIRAL_THRESHOLD = 0.5

CLINICAL_DISCLAIMER = "Disclosure: analysis is informational; not financial advice."
VERMIN_DISCLAIMER = "Disclaimer; intelligence only; verify independently."


class SummaryTone(str, Enum):
    CLINICAL = "clinical"
    VERMIN = "vermin"


def _pct(value: float) -> int:
    return round_half_up(value * 100)


def _clinical_summary(address, network, threat, alpha, viral) -> str:
    lines = []
    lines.append(f"NimRev report for {network}:{address}")
    lines.append(f"Threat score {_pct(threat.threat_score)}%; confidence {_pct(threat.confidence)}%")
    if threat.indicators:
        lines.append(f"Indicators: {'; '.join(threat.indicators)}")
    if alpha.alpha_score > CLINICAL_ALPHA_THRESHOLD:
        lines.append(
            f"Alpha: score {_pct(alpha.alpha_score)}%; "
            f"est potential ~{round_half_up(alpha.potential_multiplier)}x"
        )
    if viral.viral_score > CLINICAL_VIRAL_THRESHOLD:
        lines.append(f"Viral: score {_pct(viral.viral_score)}%; ETA ~{viral.time_to_viral_hrs}h")
    lines.append("Method: heuristic scoring; social and activity signals; pattern analysis.")
    lines.append(CLINICAL_DISCLAIMER)
    return "\n".join(lines)


def _vermin_summary(address, network, threat, alpha, viral) -> str:
    summary = []
    summary.append("🐀 VERMIN INTELLIGENCE REPORT 🐀\n")

    if threat.threat_score > 0.7:
        summary.append(f"⚠️ THREAT DETECTED; confidence {_pct(threat.confidence)}%")
    elif threat.threat_score > 0.4:
        summary.append("🔍 CAUTION ADVISED; mid-level signatures present")
    else:
        summary.append("✅ INITIAL SCAN CLEAN; no immediate hazards detected")

    if alpha.alpha_score > VERMIN_ALPHA_THRESHOLD:
        summary.append(
            f"💎 ALPHA SIGNAL; potential ~{round_half_up(alpha.potential_multiplier)}x; momentum forming"
        )
    if viral.viral_score > VERMIN_VIRAL_THRESHOLD:
        summary.append(f"🚀 VIRAL MOMENTUM; ~{viral.time_to_viral_hrs}h window possible")
    if threat.indicators:
        summary.append(f"Indicators: {'; '.join(threat.indicators)}")

    summary.append(f"\n{VERMIN_DISCLAIMER}")
    return "\n".join(summary)


def summarize(
    tone: Union[SummaryTone, str],
    *,
    address: str,
    network: str,
    threat: ThreatResult,
    alpha: AlphaResult,
    viral: ViralResult
) -> str:
    """Render the scan narrative.

    Tone changes wording only; each tone gates its alpha and viral lines on
    its own fixed score thresholds.
    """
    tone = SummaryTone(tone)
    network = getattr(network, "value", network)

    if tone is SummaryTone.CLINICAL:
        return _clinical_summary(address, network, threat, alpha, viral)
    return _vermin_summary(address, network, threat, alpha, viral)
