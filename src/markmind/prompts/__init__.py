from __future__ import annotations

from markmind.prompts.mindmap import MINDMAP_SYSTEM_PROMPT, SOURCE_CONTEXTS, build_user_prompt

__all__ = [
    "MINDMAP_SYSTEM_PROMPT",
    "SOURCE_CONTEXTS",
    "build_user_prompt",
]
