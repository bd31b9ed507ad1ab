import pytest

from fra_assistant.models import QueryIntent
from fra_assistant.services.chat_service import DEFAULT_PROMPTS, EmptyQueryError, VillageNotFoundError


def test_welcome(chat):
    welcome = chat.welcome()

    assert welcome.message.id == "welcome"
    assert welcome.message.type == "bot"
    assert welcome.prompts == list(DEFAULT_PROMPTS)
    assert welcome.typing_delay_ms == 0


def test_answer_informational_query_is_a_bot_message(chat):
    message = chat.answer("pm-kisan")

    assert message.type == "bot"
    assert message.intent == QueryIntent.SCHEME
    assert [s.id for s in message.schemes] == ["pm-kisan"]


def test_answer_suggestion_query(chat):
    message = chat.answer("  schemes for women  ")

    assert message.type == "suggestion"
    assert message.intent == QueryIntent.OCCUPATION


def test_answer_uses_selected_village(chat):
    message = chat.answer("which schemes are good here?", selected_village_id="khandwa")

    assert message.intent == QueryIntent.RECOMMENDATION
    assert [s.id for s in message.schemes] == ["pm-kisan", "forest-rights-act", "mgnrega"]


@pytest.mark.parametrize("query", ["", "   ", "\n"])
def test_blank_query_is_rejected(chat, query):
    with pytest.raises(EmptyQueryError):
        chat.answer(query)


def test_messages_get_unique_ids(chat):
    first = chat.answer("hello")
    second = chat.answer("hello")
    assert first.id != second.id


def test_select_village(chat):
    selection = chat.select_village("khandwa")

    assert selection.village_id == "khandwa"
    suggestion, summary = selection.messages

    assert suggestion.type == "suggestion"
    assert "60% tribal population" in suggestion.content
    assert "72% forest dependency" in suggestion.content
    assert len(suggestion.schemes) == 6

    assert summary.type == "bot"
    assert "Khandwa, Madhya Pradesh" in summary.content
    assert "farming, forest produce" in summary.content
    assert summary.schemes == []


def test_select_unknown_village(chat):
    with pytest.raises(VillageNotFoundError):
        chat.select_village("atlantis")
