import pytest

from resource_ai.exceptions import EmptyArtifactError
from resource_ai.services.normalization import normalize_flashcards, normalize_summary


def test_normalize_summary_trims_values():
    summary = normalize_summary({"shortSummary": "  short  ", "longSummary": "\nlong\n"})
    assert summary.summary_short == "short"
    assert summary.summary_long == "long"


def test_normalize_summary_accepts_one_side():
    summary = normalize_summary({"shortSummary": "", "longSummary": "only long"})
    assert summary.summary_short == ""
    assert summary.summary_long == "only long"


def test_normalize_summary_accepts_alternate_keys():
    summary = normalize_summary({"summaryShort": "s", "summaryLong": "l"})
    assert (summary.summary_short, summary.summary_long) == ("s", "l")


@pytest.mark.parametrize("payload", [
    {"shortSummary": "  ", "longSummary": ""},
    {"shortSummary": 3, "longSummary": None},
    {},
    ["not", "an", "object"],
    "plain text",
])
def test_normalize_summary_rejects_empty(payload):
    with pytest.raises(EmptyArtifactError):
        normalize_summary(payload)


def test_flashcards_from_wrapped_object():
    cards = normalize_flashcards({"flashcards": [{"front": " Q ", "back": " A "}]})
    assert [c.model_dump() for c in cards] == [{"id": "fc-1", "front": "Q", "back": "A"}]


def test_flashcards_from_bare_list_keeps_given_ids():
    cards = normalize_flashcards([{"id": 7, "front": "Q1", "back": "A1"}, {"front": "Q2", "back": "A2"}])
    assert [c.id for c in cards] == ["7", "fc-2"]


def test_fallback_ids_follow_filtered_position():
    cards = normalize_flashcards([
        {"front": "no back"},
        {"front": "Q1", "back": "A1"},
        "garbage",
        {"front": "   ", "back": "blank front"},
        {"front": "Q2", "back": "A2"},
    ])
    assert [(c.id, c.front) for c in cards] == [("fc-1", "Q1"), ("fc-2", "Q2")]


def test_deck_truncates_to_forty():
    payload = {"flashcards": [{"front": f"Q{i}", "back": f"A{i}"} for i in range(45)]}
    cards = normalize_flashcards(payload)
    assert len(cards) == 40
    assert cards[-1].front == "Q39"
    assert cards[-1].id == "fc-40"


def test_all_cards_missing_back_raises():
    payload = {"flashcards": [{"front": f"Q{i}"} for i in range(5)]}
    with pytest.raises(EmptyArtifactError):
        normalize_flashcards(payload)


@pytest.mark.parametrize("payload", [{}, {"flashcards": "nope"}, [], None, 42])
def test_unusable_flashcard_payloads_raise(payload):
    with pytest.raises(EmptyArtifactError):
        normalize_flashcards(payload)


def test_normalizing_normalized_deck_is_identity():
    raw = [{"front": "Q1", "back": "A1"}, {"id": "custom", "front": "Q2", "back": "A2"}, {"front": "Q3", "back": ""}]
    first = [c.model_dump() for c in normalize_flashcards(raw)]
    second = [c.model_dump() for c in normalize_flashcards(first)]
    assert first == second


def test_fallback_ids_skip_ids_given_by_the_model():
    cards = normalize_flashcards([
        {"id": "fc-2", "front": "a", "back": "b"},
        {"front": "c", "back": "d"},
    ])
    assert [c.id for c in cards] == ["fc-2", "fc-3"]


def test_repeated_model_ids_are_replaced():
    cards = normalize_flashcards([
        {"id": "x", "front": "a", "back": "b"},
        {"id": "x", "front": "c", "back": "d"},
    ])
    assert [c.id for c in cards] == ["x", "fc-2"]
