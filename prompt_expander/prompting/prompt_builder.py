"""Prompt assembly helpers used by the expansion handler.

This module only builds instruction strings from already validated inputs.
Validation, provider selection and model invocation happen outside this module.

Design constraints:
    - Deterministic construction for identical inputs.
    - Fixed field order and labels ("Idea:", "Style:", "Lighting:").
    - No I/O, no global state mutation.

Prompt safety model:
    User text is interpolated as raw strings. Only presence of `idea` is checked
    upstream; no sanitization is applied.
"""

from typing import Optional


# =========================================================
# SYSTEM PROMPT
# =========================================================
# Sent verbatim as the system message (OpenAI) or prepended to the single user
# part (Gemini).

SYSTEM_PROMPT = (
    "You are the world's best prompt engineer for AI image generators.\n"
    "Your job is to expand the user's idea into a single, incredibly detailed, "
    "creative, and vivid visual prompt.\n"
    "Only output the final, highly descriptive paragraph prompt."
)


def _as_text(value) -> str:
    if value is None:
        return ""
    return str(value)


def build_user_input(idea: str, style: Optional[str] = None, lighting: Optional[str] = None) -> str:
    """Concatenate the brief fields into the labeled user content.

    Args:
        idea: Required, already validated idea text.
        style: Optional style text; `None` becomes empty.
        lighting: Optional lighting text; `None` becomes empty.

    Returns:
        `"Idea: <idea>, Style: <style>, Lighting: <lighting>"`.
    """
    return (
        f"Idea: {_as_text(idea)}, "
        f"Style: {_as_text(style)}, "
        f"Lighting: {_as_text(lighting)}"
    )
