"""Prompt template for answering questions about a document.

The template is fixed; only the retrieved context and the question vary.
"""

from __future__ import annotations

from collections.abc import Sequence

from pdf_rag.models import ScoredSegment

CONTEXT_SEPARATOR = "\n\n---\n\n"

ANSWER_TEMPLATE = """\
You are a helpful, friendly assistant answering questions about a document.

Here are the most relevant sections from the document:

<document>
{context}
</document>

Please answer the user's question in a natural, conversational way:
- Explain the information clearly and concisely
- Use bullet points only when listing multiple items makes it clearer
- Organize the information logically
- If there are specific requirements or rules, present them in an easy-to-understand format
- Be helpful and direct - avoid unnecessary preambles like "Based on the document..."
- If the answer isn't in these sections, politely say so and suggest what information might be needed

Question: {question}

Answer:"""


def build_context(retrieved: Sequence[ScoredSegment]) -> str:
    """Join the text of *retrieved* segments with :data:`CONTEXT_SEPARATOR`."""
    return CONTEXT_SEPARATOR.join(r.segment.text for r in retrieved)


def build_answer_prompt(context: str, question: str) -> str:
    """Embed *context* and *question* into :data:`ANSWER_TEMPLATE`."""
    return ANSWER_TEMPLATE.format(context=context, question=question)
