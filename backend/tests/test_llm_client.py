import asyncio

import pytest

from app.core.config import settings
from app.llm.client import LLMClient
from app.llm.errors import LLMConfigError, LLMNonRetryableError, LLMRetryableError
from app.llm.justifier import GenerativeJustifier, clean_statement
from app.llm.types import LLMResponse
from app.mapping.matcher import match


class FakeProvider:
    name = "fake"
    configured = True

    def __init__(self, script):
        self.script = list(script)
        self.calls = []
        self.prompts = []

    async def generate(self, req, prompt):
        self.calls.append(req.model)
        self.prompts.append(prompt)
        item = self.script.pop(0) if self.script else LLMRetryableError("script exhausted")
        if isinstance(item, Exception):
            raise item
        return LLMResponse(
            trace_id=req.trace_id,
            provider=self.name,
            model=req.model,
            output_text=item,
            latency_ms=1,
            retries=0,
        )


class FakeClock:
    def __init__(self):
        self.now = 0.0
        self.sleeps = []

    def __call__(self):
        return self.now

    async def sleep(self, seconds):
        self.sleeps.append(seconds)
        self.now += seconds


def make_client(provider, clock, **kwargs):
    opts = dict(
        models=["m1", "m2"],
        max_retries=2,
        backoff_initial_seconds=1.0,
        backoff_max_seconds=10.0,
        max_elapsed_seconds=30.0,
        sleep=clock.sleep,
        clock=clock,
    )
    opts.update(kwargs)
    return LLMClient(provider, **opts)


def generate(client):
    return asyncio.run(
        client.generate(purpose="healthcheck", prompt_name="healthcheck", prompt_version="v1", variables={})
    )


def test_retryable_error_is_retried_with_backoff():
    clock = FakeClock()
    provider = FakeProvider([LLMRetryableError("429"), "OK"])

    resp = generate(make_client(provider, clock))

    assert resp.output_text == "OK"
    assert resp.model == "m1"
    assert resp.retries == 1
    assert clock.sleeps == [1.0]


def test_exhausted_retries_fall_back_to_next_model():
    clock = FakeClock()
    provider = FakeProvider([LLMRetryableError("503")] * 3 + ["OK"])

    resp = generate(make_client(provider, clock))

    assert provider.calls == ["m1", "m1", "m1", "m2"]
    assert clock.sleeps == [1.0, 2.0]
    assert resp.model == "m2"


def test_non_retryable_error_moves_to_next_model():
    clock = FakeClock()
    provider = FakeProvider([LLMNonRetryableError("400 bad model"), "OK"])

    resp = generate(make_client(provider, clock))

    assert provider.calls == ["m1", "m2"]
    assert clock.sleeps == []
    assert resp.model == "m2"


def test_empty_output_moves_to_next_model():
    provider = FakeProvider(["   ", "OK"])
    resp = generate(make_client(provider, FakeClock()))
    assert resp.model == "m2"


def test_last_error_raised_when_all_models_fail():
    provider = FakeProvider([LLMNonRetryableError("a"), LLMNonRetryableError("b")])
    with pytest.raises(LLMNonRetryableError, match="b"):
        generate(make_client(provider, FakeClock()))


def test_config_error_is_not_retried_or_fallen_back():
    provider = FakeProvider([LLMConfigError("no key"), "OK"])
    with pytest.raises(LLMConfigError):
        generate(make_client(provider, FakeClock()))
    assert provider.calls == ["m1"]


def test_total_time_budget_stops_model_walk():
    clock = FakeClock()
    provider = FakeProvider([LLMRetryableError("429")] * 3 + ["OK"])
    client = make_client(provider, clock, max_retries=5, backoff_initial_seconds=2.0, max_elapsed_seconds=3.0)

    with pytest.raises(LLMRetryableError):
        generate(client)

    # 2s, then only the remaining 1s of budget
    assert clock.sleeps == [2.0, 1.0]
    assert "m2" not in provider.calls


def test_disabled_client_raises_config_error():
    provider = FakeProvider(["OK"])
    client = make_client(provider, FakeClock(), enabled=False)

    assert client.enabled is False
    with pytest.raises(LLMConfigError):
        generate(client)
    assert provider.calls == []


def test_backoff_delay_is_capped():
    client = make_client(FakeProvider([]), FakeClock())
    assert [client.backoff_delay(a) for a in range(5)] == [1.0, 2.0, 4.0, 8.0, 10.0]


def test_from_settings_rejects_unknown_provider():
    with pytest.raises(LLMConfigError):
        LLMClient.from_settings(settings.model_copy(update={"LLM_PROVIDER": "other"}))


def test_from_settings_without_key_is_disabled():
    client = LLMClient.from_settings(settings.model_copy(update={"GEMINI_API_KEY": None}))
    assert client.enabled is False


def test_clean_statement():
    assert clean_statement('\n  "CO 1 aligned with PO1   based on x (1.1.1)"\nextra') == "CO 1 aligned with PO1 based on x (1.1.1)"
    assert clean_statement("   \n  ") == ""


def test_justifier_renders_prompt_and_cleans_output(catalog, make_co):
    provider = FakeProvider(['"CO 1 aligned with PO1 based on zebra (1.1.1)"'])
    justifier = GenerativeJustifier(make_client(provider, FakeClock()))
    po1 = catalog.outcomes["PO1"]
    course_outcome = make_co("CO1", "alpha")

    text = asyncio.run(justifier.justify(course_outcome, po1, 1, match("alpha", po1)))

    assert text == "CO 1 aligned with PO1 based on zebra (1.1.1)"
    prompt = provider.prompts[0]
    assert '"alpha"' in prompt
    assert "1.1.1" in prompt
    assert "{{" not in prompt


def test_justifier_swallows_llm_errors(catalog, make_co):
    provider = FakeProvider([LLMNonRetryableError("x"), LLMNonRetryableError("y")])
    justifier = GenerativeJustifier(make_client(provider, FakeClock()))
    po1 = catalog.outcomes["PO1"]

    assert asyncio.run(justifier.justify(make_co("CO1", "alpha"), po1, 1, match("alpha", po1))) is None
