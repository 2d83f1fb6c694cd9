from enum import Enum


class PromptTask(str, Enum):
    SUMMARY = "summary"
    FLASHCARDS = "flashcards"
    CHAT = "chat"


# Characters of resource text sent to the model per task (prefix cut)
TEXT_BUDGETS = {
    PromptTask.SUMMARY: 20000,
    PromptTask.FLASHCARDS: 25000,
    PromptTask.CHAT: 15000,
}

CHAT_HISTORY_LIMIT = 6
MAX_FLASHCARDS = 40
