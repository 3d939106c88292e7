"""Tests for the action controller: state transitions, errors and concurrency."""

from __future__ import annotations

import asyncio
from unittest.mock import MagicMock

import pytest

from hiresight.controller import ActionKind, AssistantController
from hiresight.errors import ActionInProgress, ProviderRequestFailure
from hiresight.models.analysis import CandidateAnalysisResult
from hiresight.models.interview import InterviewPerformanceResult
from hiresight.models.rewrite import ChatTurn, RewrittenResumeResult
from hiresight.models.settings import LlmConfig, LlmProvider
from hiresight.parsers.content_input import InputSource
from hiresight.providers import get_llm_service
from hiresight.providers.base import LLMService
from hiresight.storage import SettingsStore


class FakeService(LLMService):
    """In-memory adapter that records calls and can be paused or made to fail."""

    provider = "fake"

    def __init__(self, analysis: dict, interview: dict, rewrite: dict):
        super().__init__("fake-model")
        self.analysis = CandidateAnalysisResult.model_validate(analysis)
        self.interview = InterviewPerformanceResult.model_validate(interview)
        self.rewrite = RewrittenResumeResult.model_validate(rewrite)
        self.calls: list[str] = []
        self.histories: list[list[ChatTurn]] = []
        self.failures: dict[str, Exception] = {}
        self.gate: asyncio.Event | None = None

    async def _enter(self, name: str) -> None:
        self.calls.append(name)
        if self.gate is not None:
            await self.gate.wait()
        if name in self.failures:
            raise self.failures[name]

    async def analyze_for_candidate(self, job, resume, language):
        await self._enter("analyze")
        return self.analysis

    async def analyze_interview_performance(self, job, resume, transcript, compatibility_gaps, language):
        await self._enter("interview")
        self.gaps = compatibility_gaps
        return self.interview

    async def rewrite_resume_for_job(self, job, resume, language, chat_history=None):
        await self._enter("rewrite")
        history = list(chat_history or [])
        self.histories.append(history)
        user_turns = [t.text for t in history if t.role == "user"]
        if not user_turns:
            return self.rewrite
        return RewrittenResumeResult(
            rewritten_resume=self.rewrite.rewritten_resume + f"\n<!-- rev {len(user_turns)} -->",
            chat_response=f"Done: {user_turns[-1]}",
        )


@pytest.fixture
def fake_service(analysis_payload, interview_payload, rewrite_payload) -> FakeService:
    return FakeService(analysis_payload, interview_payload, rewrite_payload)


@pytest.fixture
def factory(fake_service) -> MagicMock:
    return MagicMock(return_value=fake_service)


@pytest.fixture
def controller(factory) -> AssistantController:
    return AssistantController(service_factory=factory)


@pytest.fixture
def sources(sample_job_text, sample_resume_text):
    return InputSource.text(sample_job_text), InputSource.text(sample_resume_text)


async def _analyzed(controller: AssistantController, sources) -> AssistantController:
    result = await controller.analyze(*sources)
    assert result is not None
    return controller


class TestAnalyze:
    async def test_success_updates_state(self, controller, sources):
        result = await controller.analyze(*sources)

        state = controller.state
        assert state.analysis is result
        assert state.last_inputs[0].content == sources[0].value
        assert state.status[ActionKind.ANALYZE].loading is False
        assert state.status[ActionKind.ANALYZE].error is None
        notes = controller.drain_notifications()
        assert [(n.level, n.message) for n in notes] == [("success", "Analysis complete!")]

    async def test_empty_job_fails_before_service(self, controller, factory, fake_service, sources):
        result = await controller.analyze(InputSource.text("   "), sources[1])

        assert result is None
        status = controller.state.status[ActionKind.ANALYZE]
        assert status.error == "Please provide a job description."
        assert status.exception.field == "jobDescription"
        factory.assert_not_called()
        assert fake_service.calls == []

    async def test_missing_resume(self, controller, factory, sources):
        await controller.analyze(sources[0], None)

        assert controller.state.status[ActionKind.ANALYZE].error == "Please provide your resume."
        factory.assert_not_called()

    async def test_localized_error(self, factory, sources):
        controller = AssistantController(service_factory=factory, language="pt-BR")
        await controller.analyze(None, sources[1])

        assert controller.state.status[ActionKind.ANALYZE].error == "Por favor, forneça a descrição da vaga."

    async def test_new_analysis_clears_downstream_results(self, controller, sources):
        await _analyzed(controller, sources)
        await controller.analyze_interview("Q: Kubernetes? A: Nomad.")
        await controller.rewrite_resume()

        await controller.analyze(*sources)

        assert controller.state.analysis is not None
        assert controller.state.interview is None
        assert controller.state.rewrite is None
        assert controller.state.chat_history == []

    async def test_missing_credential(self, sources):
        controller = AssistantController(service_factory=get_llm_service, env={})
        controller.state.config = LlmConfig().with_provider(LlmProvider.OPENAI)

        result = await controller.analyze(*sources)

        assert result is None
        status = controller.state.status[ActionKind.ANALYZE]
        assert status.error == "Please add your OpenAI API key in Settings."

    async def test_factory_value_error_reported_as_uninitialized(self, sources):
        controller = AssistantController(service_factory=MagicMock(side_effect=ValueError("bad model")))

        await controller.analyze(*sources)

        assert controller.state.status[ActionKind.ANALYZE].error == (
            "The AI service is not initialized. Check your settings."
        )


class TestInterview:
    async def test_requires_analysis(self, controller, fake_service):
        await controller.analyze_interview("transcript")

        assert controller.state.status[ActionKind.ANALYZE_INTERVIEW].error == "Run the analysis first."
        assert fake_service.calls == []

    async def test_requires_transcript(self, controller, sources):
        await _analyzed(controller, sources)
        await controller.analyze_interview("  ")

        assert controller.state.status[ActionKind.ANALYZE_INTERVIEW].error == (
            "Please paste the interview transcript."
        )

    async def test_passes_gaps_from_analysis(self, controller, fake_service, sources):
        await _analyzed(controller, sources)
        result = await controller.analyze_interview("Q: Kubernetes? A: Nomad.")

        assert controller.state.interview is result
        assert controller.state.transcript == "Q: Kubernetes? A: Nomad."
        assert fake_service.gaps == ["No Kubernetes experience", "No team lead experience"]

    async def test_failure_keeps_analysis(self, controller, fake_service, sources):
        await _analyzed(controller, sources)
        analysis = controller.state.analysis
        controller.drain_notifications()
        fake_service.failures["interview"] = ProviderRequestFailure("503")

        result = await controller.analyze_interview("transcript")

        assert result is None
        assert controller.state.analysis is analysis
        assert controller.state.status[ActionKind.ANALYZE].error is None
        status = controller.state.status[ActionKind.ANALYZE_INTERVIEW]
        assert status.error == "The AI provider request failed. Please try again."
        assert status.loading is False
        notes = controller.drain_notifications()
        assert [(n.level, n.kind) for n in notes] == [("error", ActionKind.ANALYZE_INTERVIEW)]

    async def test_unexpected_error_is_generic(self, controller, fake_service, sources):
        await _analyzed(controller, sources)
        fake_service.failures["interview"] = RuntimeError("boom")

        await controller.analyze_interview("transcript")

        status = controller.state.status[ActionKind.ANALYZE_INTERVIEW]
        assert status.error == "An unexpected error occurred."
        assert isinstance(status.exception, RuntimeError)


class TestRewriteChat:
    async def test_rewrite_seeds_history(self, controller, fake_service, sources):
        await _analyzed(controller, sources)

        result = await controller.rewrite_resume()

        assert controller.state.rewrite is result
        assert controller.state.chat_history == [ChatTurn(role="model", text=result.chat_response)]
        assert fake_service.histories == [[]]

    async def test_chat_refines_twice(self, controller, fake_service, sources):
        await _analyzed(controller, sources)
        await controller.rewrite_resume()
        controller.drain_notifications()

        first = await controller.send_chat_message("Make the summary shorter")
        second = await controller.send_chat_message("Make the summary shorter")

        assert first.chat_response == "Done: Make the summary shorter"
        assert second.rewritten_resume.endswith("<!-- rev 2 -->")
        assert controller.state.rewrite is second
        roles = [turn.role for turn in controller.state.chat_history]
        assert roles == ["model", "user", "model", "user", "model"]
        assert fake_service.histories[-1][-1] == ChatTurn(role="user", text="Make the summary shorter")
        assert controller.drain_notifications() == []

    async def test_empty_message_rejected(self, controller, fake_service, sources):
        await _analyzed(controller, sources)
        await controller.rewrite_resume()

        await controller.send_chat_message("   ")

        status = controller.state.status[ActionKind.SEND_CHAT_MESSAGE]
        assert status.error == "Please type a message."
        assert fake_service.calls.count("rewrite") == 1

    async def test_chat_failure_keeps_previous_rewrite(self, controller, fake_service, sources):
        await _analyzed(controller, sources)
        rewrite = await controller.rewrite_resume()
        fake_service.failures["rewrite"] = ProviderRequestFailure("timeout")

        await controller.send_chat_message("Add metrics")

        assert controller.state.rewrite is rewrite
        assert controller.state.status[ActionKind.SEND_CHAT_MESSAGE].error is not None
        assert controller.state.status[ActionKind.REWRITE_RESUME].error is None


class TestConcurrency:
    async def test_different_kinds_run_concurrently(self, controller, fake_service, sources):
        await _analyzed(controller, sources)
        fake_service.gate = asyncio.Event()

        interview_task = controller.start(ActionKind.ANALYZE_INTERVIEW, "transcript")
        rewrite_task = controller.start(ActionKind.REWRITE_RESUME)
        await asyncio.sleep(0)

        assert controller.is_running(ActionKind.ANALYZE_INTERVIEW)
        assert controller.is_running(ActionKind.REWRITE_RESUME)
        assert not controller.is_running(ActionKind.ANALYZE)

        fake_service.gate.set()
        await asyncio.gather(interview_task, rewrite_task)
        await asyncio.sleep(0)

        assert controller.state.interview is not None
        assert controller.state.rewrite is not None
        assert not controller.is_running(ActionKind.ANALYZE_INTERVIEW)
        assert not controller.is_running(ActionKind.REWRITE_RESUME)

    async def test_same_kind_rejected_while_running(self, controller, fake_service, sources):
        await _analyzed(controller, sources)
        fake_service.gate = asyncio.Event()

        task = controller.start(ActionKind.REWRITE_RESUME)
        with pytest.raises(ActionInProgress):
            controller.start(ActionKind.REWRITE_RESUME)

        fake_service.gate.set()
        await task
        assert fake_service.calls.count("rewrite") == 1

    async def test_direct_call_rejected_while_loading(self, controller, fake_service, sources):
        await _analyzed(controller, sources)
        fake_service.gate = asyncio.Event()

        task = controller.start(ActionKind.ANALYZE_INTERVIEW, "transcript")
        await asyncio.sleep(0)
        with pytest.raises(ActionInProgress):
            await controller.analyze_interview("again")

        fake_service.gate.set()
        assert await task is not None


class TestSettings:
    def test_loads_saved_state(self, tmp_path):
        store = SettingsStore(tmp_path / "state.db")
        store.save_theme("dark")
        store.save_config(LlmConfig().with_provider(LlmProvider.GROQ))

        controller = AssistantController(store)

        assert controller.state.theme == "dark"
        assert controller.state.config.provider is LlmProvider.GROQ

    def test_save_settings_persists_and_rebuilds(self, tmp_path, factory):
        store = SettingsStore(tmp_path / "state.db")
        controller = AssistantController(store, service_factory=factory)
        config = LlmConfig().with_provider(LlmProvider.OPENAI).with_api_key(LlmProvider.OPENAI, "sk")

        controller.save_settings(config)

        assert store.load_config() == config
        assert factory.call_args.args[0] == config
        notes = controller.drain_notifications()
        assert [n.level for n in notes] == ["success"]

    def test_save_settings_warns_on_missing_key(self, tmp_path):
        store = SettingsStore(tmp_path / "state.db")
        controller = AssistantController(store, env={})

        controller.save_settings(LlmConfig().with_provider(LlmProvider.ANTHROPIC))

        notes = controller.drain_notifications()
        assert [n.level for n in notes] == ["success", "error"]
        assert notes[1].message == "Please add your Anthropic API key in Settings."
        assert store.load_config().provider is LlmProvider.ANTHROPIC

    def test_set_theme_persists(self, tmp_path):
        store = SettingsStore(tmp_path / "state.db")
        controller = AssistantController(store)

        controller.set_theme("dark")

        assert controller.state.theme == "dark"
        assert store.load_theme() == "dark"

    def test_set_language_normalizes(self):
        controller = AssistantController()
        controller.set_language("ES-mx")
        assert controller.state.language == "es"
