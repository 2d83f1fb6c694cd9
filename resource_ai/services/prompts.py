from __future__ import annotations

from typing import Iterable, List, Optional

from ..constants import CHAT_HISTORY_LIMIT, TEXT_BUDGETS, PromptTask
from ..schemas import ChatTurn

_CONTENT_MARKER = "Resource content starts below:\n--------------------\n"

_ROLE_LABELS = {
    "user": "User",
    "assistant": "Assistant",
}


class PromptFactory:
    """
    Fixed instruction templates per task. Output is a pure function of the inputs.
    """
    _PROMPTS = {
        PromptTask.SUMMARY: (
            "You are an academic assistant helping university students understand course materials.\n\n"
            "Given the following resource content, generate a structured summary with:\n"
            "- shortSummary: 2-4 sentences, simple language.\n"
            "- longSummary: multi-section explanation with headings and bullet points where helpful.\n\n"
            "Return ONLY valid JSON in this exact shape:\n"
            "{\n"
            '  "shortSummary": string,\n'
            '  "longSummary": string\n'
            "}\n\n"
        ),
        PromptTask.FLASHCARDS: (
            "You are an academic AI assistant creating spaced-repetition flashcards for university-level study.\n\n"
            "Using the resource content below, generate between 20 and 40 diverse flashcards covering key "
            "concepts, definitions, formulas, problem-solving prompts, and real-world applications. "
            "Each flashcard must have:\n"
            "- front: a short prompt, keyword, question, or scenario (max 180 characters)\n"
            "- back: a clear explanation or answer (max 400 characters)\n\n"
            "Return ONLY JSON in this exact structure:\n"
            "{\n"
            '  "flashcards": [\n'
            '    { "front": "...", "back": "..." }\n'
            "  ]\n"
            "}\n\n"
        ),
        PromptTask.CHAT: (
            "You are a helpful tutor assistant. Answer the student's question using the resource below. "
            "If the resource does not cover the question, say so briefly.\n\n"
        ),
    }

    @classmethod
    def get_prompt(cls, task: PromptTask) -> str:
        return cls._PROMPTS[PromptTask(task)]


def truncate_text(task: PromptTask, text: str) -> str:
    return text[:TEXT_BUDGETS[PromptTask(task)]]


def render_history(history: Optional[Iterable[ChatTurn]]) -> List[str]:
    """Last CHAT_HISTORY_LIMIT turns as role-labeled lines, oldest first."""
    turns = list(history or [])[-CHAT_HISTORY_LIMIT:]
    return [f"{_ROLE_LABELS[turn.role]}: {turn.content}" for turn in turns]


def build_prompt(
    task: PromptTask,
    text: str,
    title: Optional[str] = None,
    history: Optional[Iterable[ChatTurn]] = None,
    question: Optional[str] = None,
) -> str:
    task = PromptTask(task)
    prompt = PromptFactory.get_prompt(task)

    if task != PromptTask.CHAT:
        return prompt + _CONTENT_MARKER + truncate_text(task, text)

    prompt += f"Title: {title or 'N/A'}\n\n"
    prompt += _CONTENT_MARKER + truncate_text(task, text) + "\n--------------------\n\n"

    history_lines = render_history(history)
    if history_lines:
        prompt += "Conversation so far:\n" + "\n".join(history_lines) + "\n\n"

    prompt += f"User: {question or ''}\nAssistant:"
    return prompt
