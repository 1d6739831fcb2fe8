"""
System instructions for the retrieval loop.

Rewrite prompt turns a follow-up into a standalone query. Answer prompt
restricts the model to the retrieved context and names the exact reply
to give when the context does not contain the answer.

Dependencies: langchain_core.prompts
System role: Prompt templates for query rewriting and answering
"""

from langchain_core.prompts import PromptTemplate

FALLBACK_ANSWER = "I could not find the answer in the provided document."

CONTEXT_SEPARATOR = "\n\n---\n\n"

REWRITE_SYSTEM_PROMPT = """You are a query rewriting expert.
Using the conversation so far, rephrase the user's latest question into a standalone, context-independent question.
Only return the rewritten question."""

ANSWER_SYSTEM_TEMPLATE = PromptTemplate.from_template(
    """You are a document expert.
Answer the user's question **only** based on the context below.
If no relevant answer is found, reply exactly:
"""
    + f'"{FALLBACK_ANSWER}"'
    + """

Context: {context}"""
)


def build_answer_instruction(context: str) -> str:
    """
    Bind retrieved context into the answer system instruction.

    Args:
        context: Chunk texts joined with CONTEXT_SEPARATOR

    Returns:
        str: System instruction for the answer call
    """
    return ANSWER_SYSTEM_TEMPLATE.format(context=context)
