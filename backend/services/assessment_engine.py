"""Offline career assessment: keyword-rule classification of a major.

Pipeline:
1. Lowercase the major
2. Walk the phase rules in priority order, first pattern hit wins
3. Anesthesiology gets its own prose inside the Expert Eclipse phase
4. Elite-university bonus (+12, one extra timeline sentence)
5. Clamp the score to at most 100

The rule table is built once at import and never mutated, so concurrent
requests share it freely.
"""

import logging
import re
from dataclasses import dataclass

from models.schemas.assessment import AssessmentResult, Moat

logger = logging.getLogger(__name__)

ELITE_BONUS = 12
MAX_SCORE = 100

ELITE_UNIVERSITIES = (
    "harvard",
    "mit",
    "stanford",
    "oxford",
    "cambridge",
    "yale",
    "princeton",
    "imperial",
    "dartmouth",
    "columbia",
    "leeds",
)

ELITE_CONTEXT = (
    " HOWEVER: Your university brand grants you access to 'Gatekeeper' roles"
    " that AI cannot penetrate yet."
)


@dataclass(frozen=True)
class Phase:
    """One canned response template: numbers plus narrative."""
    score: int
    moat: Moat
    saturation_year: int
    verdict: str
    timeline_context: str
    pivot_strategy: str


@dataclass(frozen=True)
class PhaseRule:
    name: str
    pattern: re.Pattern
    phase: Phase
    # Optional sub-rule that swaps the narrative but keeps the numbers
    variant_pattern: re.Pattern | None = None
    variant: Phase | None = None

    def select(self, major: str) -> Phase:
        if self.variant_pattern is not None and self.variant_pattern.search(major):
            return self.variant
        return self.phase


def _compile(*alternatives: str) -> re.Pattern:
    return re.compile("|".join(alternatives), re.IGNORECASE)


# ---------------------------------------------------------------------------
# Phase templates
# ---------------------------------------------------------------------------

LAPTOP_PURGE = Phase(
    score=15,
    moat=Moat.LOW,
    saturation_year=2028,
    verdict="The Laptop Purge",
    timeline_context=(
        "If your job happens entirely on a screen, it is already dead. AI Agents "
        "(GPT-6 class) will handle 95% of digital workflows by 2028."
    ),
    pivot_strategy=(
        "Abandon 'generation' tasks. Pivot to 'Orchestration' (Managing AI fleets) "
        "or 'Physical Interface' (Hardware/Bio-tech). If you stay purely digital, "
        "you are obsolete."
    ),
)

MIDDLEMAN_MASSACRE = Phase(
    score=45,
    moat=Moat.MEDIUM,
    saturation_year=2031,
    verdict="The Middleman Massacre",
    timeline_context=(
        "Coordination is a math problem. Autonomous AI Agents will replace "
        "middle-management, scheduling, and logistics. Agency is the only skill left."
    ),
    pivot_strategy=(
        "You must become a 'Principal' (Decision Maker) or a 'Face' (Client Relater). "
        "The 'Process' work is dead. Use your University Network to skip entry-level "
        "admin roles."
    ),
)

_CLINICAL_PIVOT = (
    "Don't just be the monitor. Focus on 'Critical Care Medicine' or 'Pain "
    "Management'—areas requiring complex human judgment and physical "
    "intervention that algorithms can't touch."
)

EXPERT_ECLIPSE = Phase(
    score=55,
    moat=Moat.MEDIUM,
    saturation_year=2034,
    verdict="The Expert Eclipse",
    timeline_context=(
        "AI Diagnostics and Legal Discovery engines will outperform humans by 100x. "
        "Only the 'human interface' (bedside manner, courtroom persuasion) survives."
    ),
    pivot_strategy=_CLINICAL_PIVOT,
)

AUTOPILOT_PARADOX = Phase(
    score=EXPERT_ECLIPSE.score,
    moat=EXPERT_ECLIPSE.moat,
    saturation_year=EXPERT_ECLIPSE.saturation_year,
    verdict="The Autopilot Paradox",
    timeline_context=(
        "Anesthesiology is 90% data monitoring and 10% physical intervention. "
        "'Closed-Loop' AI systems will automate the monitoring loop by 2034, "
        "reducing the need for humans to 1 per 5 operating rooms (Supervisory Role)."
    ),
    pivot_strategy=_CLINICAL_PIVOT,
)

PHYSICAL_BREACH = Phase(
    score=75,
    moat=Moat.MEDIUM,
    saturation_year=2037,
    verdict="The Physical Breach",
    timeline_context=(
        "Robotics maturity (Tesla Optimus v5) finally solves gross motor skills. "
        "Driving and basic construction become automated. Creativity is your only defense."
    ),
    pivot_strategy=(
        "Pivot to creative, artistic, or highly customized work. Mass production is "
        "automated. Hand-crafted, bespoke, and creative physical work remains human."
    ),
)

MORAVEC_FIREWALL = Phase(
    score=88,
    moat=Moat.HIGH,
    saturation_year=2040,
    verdict="The Moravec Firewall",
    timeline_context=(
        "Fine motor skills in chaotic environments are the final frontier. You are "
        "safe until the robots become dexterous enough to stitch a vein or thread a pipe."
    ),
    pivot_strategy=(
        "Do nothing. You are the premium asset of the 21st century. Focus on "
        "specialized, high-touch skills. The physical world is your fortress."
    ),
)

HUMAN_PREMIUM = Phase(
    score=98,
    moat=Moat.HIGH,
    saturation_year=2050,
    verdict="The Human Premium",
    timeline_context=(
        "In a post-labor economy, we pay for 'Human Connection' and 'Biological "
        "Mastery.' You are selling the experience of being human."
    ),
    pivot_strategy=(
        "Market yourself as 'Premium Human Connection.' Don't compete on "
        "volume/speed. Compete on trust, authenticity, and physical presence. "
        "You are selling the experience of being human."
    ),
)

GENERIC_RISK = Phase(
    score=50,
    moat=Moat.LOW,
    saturation_year=2030,
    verdict="Generic Risk",
    timeline_context=(
        "This degree lacks a specific 'Physical' or 'High-Agency' moat. In the age "
        "of AI, 'Generalist Knowledge' is worth $0/month (Subscription cost)."
    ),
    pivot_strategy=(
        "Pivot immediately to a specialized trade or a high-stakes human "
        "relationship role."
    ),
)

# ---------------------------------------------------------------------------
# Rule table (order matters: "law" is in phases 2 and 3, phase 2 wins)
# ---------------------------------------------------------------------------

PHASE_RULES: tuple[PhaseRule, ...] = (
    PhaseRule(
        name="laptop_purge",
        pattern=_compile(
            "comput", "softwar", "code", "data", "analy", "account", "financ",
            "translat", "writ", "journal", "copy", "graphic", "digit", "market",
            "artificial intelligence", "machine learning", r"\bai\b", r"\bml\b",
        ),
        phase=LAPTOP_PURGE,
    ),
    PhaseRule(
        name="middleman_massacre",
        pattern=_compile(
            "busi", "manag", "hr", "human resource", "logistic", "supply chain",
            "admin", "law",
        ),
        phase=MIDDLEMAN_MASSACRE,
    ),
    PhaseRule(
        name="expert_eclipse",
        pattern=_compile(
            "medicin", "pharm", "radio", "anesthes", "anaesthes", "pathol", "law",
            "legal", "engin",
        ),
        phase=EXPERT_ECLIPSE,
        variant_pattern=_compile("anesthes", "anaesthes"),
        variant=AUTOPILOT_PARADOX,
    ),
    PhaseRule(
        name="physical_breach",
        pattern=_compile(
            "transport", "truck", "construct", "framing", "manufactur", "culinar", "chef",
        ),
        phase=PHYSICAL_BREACH,
    ),
    PhaseRule(
        name="moravec_firewall",
        pattern=_compile("surger", "plumb", "electric", "mechanic", "dentist"),
        phase=MORAVEC_FIREWALL,
    ),
    PhaseRule(
        name="human_premium",
        pattern=_compile(
            "philosoph", "psycholog", "nurs", r"\bart\b", "fine art", "theolog",
            "educ", "early childhood", "bio-engin",
        ),
        phase=HUMAN_PREMIUM,
    ),
)


def classify_major(major: str) -> Phase:
    """Return the phase template for a major (first matching rule, else default)."""
    normalized = major.lower()
    for rule in PHASE_RULES:
        if rule.pattern.search(normalized):
            return rule.select(normalized)
    return GENERIC_RISK


def is_elite(university: str) -> bool:
    normalized = university.lower()
    return any(name in normalized for name in ELITE_UNIVERSITIES)


def assess(major: str, university: str) -> AssessmentResult:
    """Score a (major, university) pair with the offline rule table.

    Inputs are expected to be non-empty; validation happens at the request layer.
    """
    phase = classify_major(major)

    score = phase.score
    timeline_context = phase.timeline_context
    if is_elite(university):
        score += ELITE_BONUS
        timeline_context += ELITE_CONTEXT

    # Upper bound only. Phase constants keep the score non-negative.
    score = min(MAX_SCORE, score)
    if score < 0:
        logger.warning("Negative assessment score %d for major %r", score, major)

    return AssessmentResult(
        score=score,
        moat=phase.moat,
        saturation_year=phase.saturation_year,
        verdict=phase.verdict,
        timeline_context=timeline_context,
        pivot_strategy=phase.pivot_strategy,
    )
