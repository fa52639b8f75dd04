from src.models.chat import ChatRequest, Speaker, Turn
from src.services.conversation_service import build_provider_history, to_provider_turns


def make_history(n):
    speakers = [Speaker.USER, Speaker.ASSISTANT]
    return [Turn(speaker=speakers[i % 2], text=f"turn {i}") for i in range(n)]


def test_to_provider_turns_maps_roles_in_order():
    history = make_history(3)

    turns = to_provider_turns(history)

    assert [t["role"] for t in turns] == ["user", "model", "user"]
    assert [t["parts"][0]["text"] for t in turns] == ["turn 0", "turn 1", "turn 2"]


def test_to_provider_turns_empty():
    assert to_provider_turns([]) == []


def test_provider_history_has_priming_pair_plus_history():
    for n in (0, 1, 4, 7):
        request = ChatRequest(message="next", mode="job", context="X", history=make_history(n))

        provider = build_provider_history(request)

        assert len(provider) == n + 2


def test_priming_pair_comes_first():
    request = ChatRequest(message="next", mode="job", context="Backend Engineer", history=make_history(2))

    provider = build_provider_history(request)

    assert provider[0]["role"] == "user"
    assert "Backend Engineer" in provider[0]["parts"][0]["text"]
    assert provider[1] == {"role": "model", "parts": [{"text": "Understood. job mode activated."}]}
    assert provider[2]["parts"][0]["text"] == "turn 0"


def test_new_message_is_not_in_provider_history():
    request = ChatRequest(message="the new message", mode="job", context="X", history=make_history(2))

    provider = build_provider_history(request)

    assert all(t["parts"][0]["text"] != "the new message" for t in provider)


def test_max_history_turns_keeps_most_recent():
    request = ChatRequest(message="next", mode="job", context="X", history=make_history(6))

    provider = build_provider_history(request, max_history_turns=2)

    assert len(provider) == 4
    assert [t["parts"][0]["text"] for t in provider[2:]] == ["turn 4", "turn 5"]


def test_legacy_role_names_are_accepted():
    request = ChatRequest.model_validate({
        "message": "next",
        "mode": "job",
        "context": "X",
        "history": [
            {"role": "user", "content": "hello"},
            {"role": "ai", "content": "hi there"},
        ],
    })

    provider = build_provider_history(request)

    assert [t["role"] for t in provider[2:]] == ["user", "model"]


def test_speaker_names_are_case_insensitive():
    turns = [
        Turn.model_validate({"speaker": "USER", "text": "a"}),
        Turn.model_validate({"role": " User ", "content": "b"}),
        Turn.model_validate({"role": "AI", "content": "c"}),
        Turn.model_validate({"speaker": "Assistant", "text": "d"}),
    ]

    assert [t.speaker for t in turns] == [Speaker.USER, Speaker.USER, Speaker.ASSISTANT, Speaker.ASSISTANT]
