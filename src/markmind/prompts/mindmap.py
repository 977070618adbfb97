from __future__ import annotations

from markmind.models.source import SourceKind

MINDMAP_SYSTEM_PROMPT = """\
You are an expert in summarizing and structuring complex information into clear, hierarchical mind maps.
Your task is to convert the provided source content into a Markdown format compatible with Markmap.

**Instructions:**
1.  **Analyze the Source:** Deeply analyze the provided content to identify the central theme, main topics, and supporting details.
2.  **Create a Hierarchy:** Organize these points into a logical tree structure. The main title of the content should be the root of the mind map.
3.  **Format as Markmap Markdown:**
    -   Start with a YAML frontmatter block. Include a 'title' and a 'markmap' configuration object. Example:
        ---
        title: Mind Map of The Topic
        markmap:
          colorFreezeLevel: 2
          initialExpandLevel: 2
        ---
    -   Use a single Level 1 heading (#) for the root of the mind map.
    -   Use Level 2 headings (##) for major branches.
    -   Use nested bullet points (-) for sub-topics and details, indented by two spaces per level.
    -   Keep the text for each node concise and to the point.
4.  **Output:** Your response MUST consist ONLY of the raw Markmap Markdown. Do NOT include any explanations, comments, or wrap it in Markdown code fences (like ```markdown).
"""

SOURCE_CONTEXTS: dict[SourceKind, str] = {
    SourceKind.URL: "The following is a URL. Please fetch its content and then create a mind map.",
    SourceKind.FILE: "The following is text content from a file. Please create a mind map from it.",
    SourceKind.TEXT: "The following is text provided directly by the user. Please create a mind map from it.",
    SourceKind.WEB_PAGE: (
        "The following is the readable text of a web page. Please create a mind map from it."
    ),
}


def build_user_prompt(*, kind: SourceKind, content: str, origin: str | None = None) -> str:
    """User turn carrying the source context and content."""

    context = SOURCE_CONTEXTS[kind]
    if origin and kind is SourceKind.WEB_PAGE:
        context = f"{context} Page URL: {origin}"
    return f"**Source Context:**\n{context}\n\n**Source Content:**\n{content}\n"
