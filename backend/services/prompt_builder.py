"""Prompt template and response schema for the Gemini enhancement call."""

from google.genai import types


def build_enhancement_prompt(university: str, major: str) -> str:
    """Rubric paraphrase plus the JSON shape expected back.

    The rubric mirrors the offline phases in prose; Gemini is free to adjust
    within it for the specific university and major.
    """
    return f"""You are a labor-market futurist assessing careers for the Singularity Era (2025-2056).

Analyze this career path based on BOTH the university AND the major.

University: {university}
Major: {major}

IMPORTANT: Consider BOTH factors:
- University prestige/reputation affects networking, opportunities, and career trajectory
- Major/degree determines the core skill set and AI vulnerability

SCORING RUBRIC (score = resistance to AI replacement, 0-100):
- Screen-only knowledge work (computing, data, finance, writing, marketing, AI/ML):
  ~15, moat Low, saturation ~2028, "The Laptop Purge"
- Coordination work (business, management, HR, logistics, admin):
  ~45, moat Medium, saturation ~2031, "The Middleman Massacre"
- Credentialed experts (medicine, pharmacy, radiology, law, engineering):
  ~55, moat Medium, saturation ~2034, "The Expert Eclipse"
  (anesthesiology: "The Autopilot Paradox", closed-loop monitoring automation)
- Gross-motor physical work (transport, construction, manufacturing, culinary):
  ~75, moat Medium, saturation ~2037, "The Physical Breach"
- Fine-motor work in chaotic settings (surgery, plumbing, electrical, mechanics, dentistry):
  ~88, moat High, saturation ~2040, "The Moravec Firewall"
- Human connection (philosophy, psychology, nursing, fine art, theology, education):
  ~98, moat High, saturation ~2050, "The Human Premium"
- Anything else: ~50, moat Low, saturation ~2030, "Generic Risk"
- Top-tier universities (Ivy League, Oxbridge, etc.) add up to +12; lower-tier subtract 2-3

Make the analysis specific to {university} and {major}.

Respond with ONLY valid JSON (no markdown, no code fences) in this exact structure:
{{
  "score": <integer 0-100>,
  "moat": <"High" | "Medium" | "Low">,
  "saturation_year": <integer 2026-2056, when AI fully replaces this role>,
  "verdict": "<dramatic, memorable verdict name>",
  "timeline_context": "<when and why this role becomes obsolete>",
  "pivot_strategy": "<specific, actionable advice for pivoting to AI-resistant roles>",
  "upskilling_roadmap": [<exactly 5 skills to develop, ordered by priority>],
  "human_moat_triggers": [<4-5 specific human advantages that protect this role>],
  "recommended_tools": [
    {{"name": "<tool or platform>", "description": "<how it helps the pivot>", "url": "<optional link>"}}
  ]
}}
recommended_tools must contain 3-4 entries."""


def _string_list() -> types.Schema:
    return types.Schema(type=types.Type.ARRAY, items=types.Schema(type=types.Type.STRING))


# Structured-output contract handed to Gemini alongside the prompt
ENHANCEMENT_SCHEMA = types.Schema(
    type=types.Type.OBJECT,
    properties={
        "score": types.Schema(type=types.Type.INTEGER),
        "moat": types.Schema(type=types.Type.STRING, enum=["High", "Medium", "Low"]),
        "saturation_year": types.Schema(type=types.Type.INTEGER),
        "verdict": types.Schema(type=types.Type.STRING),
        "timeline_context": types.Schema(type=types.Type.STRING),
        "pivot_strategy": types.Schema(type=types.Type.STRING),
        "upskilling_roadmap": _string_list(),
        "human_moat_triggers": _string_list(),
        "recommended_tools": types.Schema(
            type=types.Type.ARRAY,
            items=types.Schema(
                type=types.Type.OBJECT,
                properties={
                    "name": types.Schema(type=types.Type.STRING),
                    "description": types.Schema(type=types.Type.STRING),
                    "url": types.Schema(type=types.Type.STRING),
                },
                required=["name", "description"],
            ),
        ),
    },
    required=[
        "score",
        "moat",
        "saturation_year",
        "verdict",
        "timeline_context",
        "pivot_strategy",
        "upskilling_roadmap",
        "human_moat_triggers",
        "recommended_tools",
    ],
)
