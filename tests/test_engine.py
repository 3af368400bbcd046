import requests

import gemini_connector.api.multimodal.attachment_loader as loader
from gemini_connector.api.multimodal.parts import AttachmentPart, TextPart
from gemini_connector.core.engine import map_error_to_completion, run
from gemini_connector.core.result_types import Completion, ErrorCompletion


def test_results_follow_prompt_order(fake_client):
    client, factory = fake_client(["first answer", RuntimeError("quota exceeded")], [5])

    response = run("gemini-test", ["one", "two"], {}, {}, client_factory=factory)

    assert response.completions == [
        Completion(content="first answer", token_usage=5),
        ErrorCompletion(error="quota exceeded"),
    ]
    assert response.to_dict() == {
        "Completions": [
            {"Content": "first answer", "TokenUsage": 5},
            {"Error": "quota exceeded"},
        ]
    }


def test_every_prompt_gets_a_result_even_when_all_fail(fake_client):
    client, factory = fake_client([ValueError("a"), ValueError("b"), ValueError("c")])

    response = run("gemini-test", ["p1", "p2", "p3"], client_factory=factory)

    assert len(response.completions) == 3
    assert not any(c.ok for c in response.completions)


def test_token_count_failure_is_isolated(fake_client):
    client, factory = fake_client(["ok", "also ok"], [RuntimeError("count failed"), 3])

    response = run("gemini-test", ["p1", "p2"], client_factory=factory)

    assert response.completions == [
        ErrorCompletion(error="count failed"),
        Completion(content="also ok", token_usage=3),
    ]


def test_client_setup_failure_collapses_batch():
    def broken_factory(api_key):
        raise RuntimeError("no credentials")

    response = run("gemini-test", ["p1", "p2", "p3"], client_factory=broken_factory)

    assert response.to_dict() == {"Completions": [{"Error": "no credentials"}]}


def test_chat_creation_failure_collapses_batch(fake_client):
    client, factory = fake_client([])

    def create_chat(model, config):
        raise ValueError("unknown model")

    client.create_chat = create_chat

    response = run("bogus", ["p1", "p2"], client_factory=factory)

    assert response.completions == [ErrorCompletion(error="unknown model")]


def test_api_key_is_trimmed_and_forwarded(fake_client):
    client, factory = fake_client(["hi"])

    run("gemini-test", ["hello"], settings={"API_KEY": "  secret  "}, client_factory=factory)

    assert client.api_key == "secret"


def test_blank_api_key_uses_default_discovery(fake_client):
    client, factory = fake_client(["hi"])

    run("gemini-test", ["hello"], settings={"API_KEY": "   "}, client_factory=factory)

    assert client.api_key is None


def test_properties_become_chat_config(fake_client):
    client, factory = fake_client(["hi"])

    run("gemini-test", ["hello"], {"temperature": 0.2, "maxOutputTokens": 64}, client_factory=factory)

    assert client.chat_args == ("gemini-test", {"temperature": 0.2, "maxOutputTokens": 64})


def test_empty_properties_pass_no_config(fake_client):
    client, factory = fake_client(["hi"])

    run("gemini-test", ["hello"], {}, client_factory=factory)

    assert client.chat_args == ("gemini-test", None)


def test_attachments_are_sent_and_counted(monkeypatch, tmp_path, fake_client):
    (tmp_path / "chart.png").write_bytes(b"png")
    monkeypatch.chdir(tmp_path)
    client, factory = fake_client(["described"], [42])

    response = run("gemini-test", ["Describe chart.png"], client_factory=factory)

    sent = client.chat.sent[0]
    assert sent[0] == TextPart(text="Describe chart.png")
    assert isinstance(sent[1], AttachmentPart)
    assert client.counted == [("gemini-test", sent)]
    assert response.completions == [Completion(content="described", token_usage=42)]


def test_unreachable_attachment_still_sends_text(monkeypatch, dummy_response, fake_client):
    monkeypatch.setattr(loader.requests, "get", lambda url, timeout=None: dummy_response(404))
    client, factory = fake_client(["text-only answer"])
    prompt = "See https://example.com/img.png for reference."

    response = run("gemini-test", [prompt], client_factory=factory)

    assert client.chat.sent == [[TextPart(text=prompt)]]
    assert response.completions[0].content == "text-only answer"


def test_network_error_in_loader_does_not_fail_prompt(monkeypatch, fake_client):
    def boom(url, timeout=None):
        raise requests.Timeout("timed out")

    monkeypatch.setattr(loader.requests, "get", boom)
    client, factory = fake_client(["fine"])

    response = run("gemini-test", ["Look at https://example.com/a.pdf"], client_factory=factory)

    assert response.completions[0].ok


def test_no_prompts_yields_empty_completions(fake_client):
    client, factory = fake_client([])

    assert run("gemini-test", [], client_factory=factory).completions == []


def test_map_error_to_completion_uses_repr_for_empty_message():
    assert map_error_to_completion(ValueError("bad input")).error == "bad input"
    assert map_error_to_completion(ValueError()).error == "ValueError()"
