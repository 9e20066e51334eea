"""The fixed examiner instructions sent to the scoring oracle as the system turn."""
from __future__ import annotations

_EXAMINER_INSTRUCTIONS = """You are an expert IELTS examiner. Analyze the following essay and provide a detailed evaluation based on the four IELTS Writing Task 2 criteria:

1. Task Response (0-9): How well the essay addresses the task
2. Coherence and Cohesion (0-9): Organization and linking of ideas
3. Lexical Resource (0-9): Vocabulary range and accuracy
4. Grammatical Range and Accuracy (0-9): Grammar variety and correctness

Provide scores for each criterion and an overall band score (the arithmetic mean of the four). Also provide specific feedback, strengths, and areas for improvement.

Essay Prompt: "{prompt}"

Respond in JSON format with this structure:
{{
  "score": number (overall band score 0-9),
  "taskResponse": number (0-9),
  "coherenceCohesion": number (0-9),
  "lexicalResource": number (0-9),
  "grammaticalRange": number (0-9),
  "feedback": "detailed feedback about the essay",
  "strengths": ["strength 1", "strength 2", ...],
  "improvements": ["improvement 1", "improvement 2", ...],
  "wordCount": number
}}"""


def build_examiner_instructions(prompt_text: str) -> str:
    return _EXAMINER_INSTRUCTIONS.format(prompt=prompt_text.strip())
