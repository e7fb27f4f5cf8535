"""
Chat prompts for the Aura assistant persona.
"""

AURA_SYSTEM_PROMPT = (
    "You are Aura, an AI learning assistant. "
    "Your responses should be helpful, clear, and encouraging."
)

SIMPLIFIED_STYLE_PROMPT = (
    " Your response should be simplified, using short sentences and bullet points, "
    "suitable for a user who needs concise information."
)

COMPLEX_STYLE_PROMPT = (
    " Your response should be detailed and academic, using university-level vocabulary "
    "and providing in-depth context."
)

COMPLEXITY_STYLE_PROMPTS = {
    "simplified": SIMPLIFIED_STYLE_PROMPT,
    "complex": COMPLEX_STYLE_PROMPT,
}


def build_system_instruction(complexity=None) -> str:
    """Persona plus the style suffix for a known complexity, if any."""
    return AURA_SYSTEM_PROMPT + COMPLEXITY_STYLE_PROMPTS.get(complexity, "")
