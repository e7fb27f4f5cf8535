"""
Media transcription prompts.

Transcription is mocked: the model invents a plausible timestamped transcript
for the file name it is given.
"""
from typing import Optional

from .analysis_prompts import DEFAULT_COMPLEXITY

TRANSCRIPT_PROMPT_TEMPLATE = """
Create a mock transcript for a file named "{file_name}".
The transcript should be timestamped.
The detail level should match the user's preference: {complexity}.
Return the data as a single, clean JSON object. Do not include any extra text, markdown formatting, or explanations.
The JSON object must have this structure: {{ "transcript": "<p><b>[timestamp] SPEAKER:</b> text</p><p>...</p>" }}.
"""


def build_transcript_prompt(file_name: str, complexity: Optional[str] = None) -> str:
    if complexity is None:
        complexity = DEFAULT_COMPLEXITY
    return TRANSCRIPT_PROMPT_TEMPLATE.format(file_name=file_name, complexity=complexity)
