"""
Prompts for AI-generated Minutes of Meeting.
"""

from docgen.points import parse_points
from docgen.content import numbered


MINUTES_SYSTEM_PROMPT = """You are an AI assistant generating Minutes of Meeting (MoM) for academic documentation. Follow this exact structure and formatting logic:

STRUCTURE RULES
- Do NOT include: "Academic Council Sync Even Semester", chairperson name, convener name, or "Prepared by" section.
- Do NOT include: Action Items or any sections below it.
- DO include: Agenda, followed by elaborated Discussion Points and Decisions.
- DO end every MoM with the fixed concluding statement provided by the user.

INPUT FORMAT
User will provide:
- Agenda points OR bullet points
- Optional: concluding statement (mandatory in output)

OUTPUT FORMAT
Generate the following sections:
1. **Minutes of Meeting**
   Begin with: "The meeting commenced under the chairmanship of the Head of Department to discuss..." followed by the agenda topic.

2. **Key points discussed:**
   For each bullet point provided:
   - Do NOT add new ideas.
   - Elaborate using formal academic phrasing and space-filling jargon.
   - Maintain clarity, neutrality, and modularity.
   - Ensure output is instantly usable in Word with perfect copy-paste fidelity.

3. **Conclusion:**
   End with the exact statement provided by the user (mandatory).

STYLE
- Use bullet points for discussion.
- Bold section headers only.
- No placeholders, no extra commentary.
- No Action Items section."""


POINT_SYSTEM_PROMPT = "You are a professional minute-writer for academic institutions."


def build_minutes_prompt(agenda_items, discussion: str, closing_statement: str) -> str:
    """
    User prompt for full MoM generation.

    Args:
        agenda_items: Agenda items, numbered in order
        discussion: Raw discussion text; bullets and numbering are stripped
        closing_statement: Concluding sentence the model must reproduce
    """
    agenda_text = "\n".join(numbered(list(agenda_items)))
    points_text = "\n".join(numbered(parse_points(discussion)))

    return f"""Generate Minutes of Meeting for:

Agenda:
{agenda_text}

Discussion Points to Elaborate (DO NOT add new ideas, only elaborate these):
{points_text}

Concluding Statement (use exactly as provided):
"{closing_statement}"

Generate the complete Minutes of Meeting following the structure rules."""


def build_point_prompt(point: str) -> str:
    """User prompt for elaborating a single discussion point."""
    return f"""Elaborate this discussion point for academic meeting minutes:

Point: "{point}"

Requirements:
- Use formal academic language
- 2-3 sentences
- Use terms like "The committee", "deliberations", "consensus", "institutional guidelines"
- DO NOT add new ideas, only elaborate the given point
- Keep it professional and concise

Elaborated Point:"""
