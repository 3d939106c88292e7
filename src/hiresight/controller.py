"""Application state and the discrete actions that mutate it.

Front-ends call the action handlers (directly, or through :meth:`start`
to get an ``asyncio.Task`` per action kind) and render ``controller.state``.
Every handler catches its own failures, stores a localized message under its
action kind and leaves the results of other actions untouched.
"""

from __future__ import annotations

import asyncio
import logging
from collections.abc import Awaitable, Callable, Mapping
from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Literal

from hiresight.config import AppConfig
from hiresight.errors import ActionInProgress, HiresightError, MissingInput
from hiresight.i18n import normalize_language, translate
from hiresight.models.analysis import CandidateAnalysisResult
from hiresight.models.content import ContentInput
from hiresight.models.interview import InterviewPerformanceResult
from hiresight.models.rewrite import ChatTurn, RewrittenResumeResult
from hiresight.models.settings import LlmConfig, Theme
from hiresight.parsers.content_input import InputSource, resolve_input
from hiresight.parsers.url_extractor import URLContentExtractor
from hiresight.providers.base import LLMService
from hiresight.providers.factory import get_llm_service
from hiresight.storage import SettingsStore

logger = logging.getLogger(__name__)


class ActionKind(str, Enum):
    ANALYZE = "analyze"
    ANALYZE_INTERVIEW = "analyzeInterviewPerformance"
    REWRITE_RESUME = "rewriteResume"
    SEND_CHAT_MESSAGE = "sendChatMessage"


@dataclass
class ActionStatus:
    loading: bool = False
    error: str | None = None
    exception: Exception | None = None


@dataclass(frozen=True)
class Notification:
    level: Literal["success", "error"]
    message: str
    kind: ActionKind | None = None


@dataclass
class AppState:
    config: LlmConfig = field(default_factory=LlmConfig)
    theme: Theme = "light"
    language: str = "en"
    analysis: CandidateAnalysisResult | None = None
    interview: InterviewPerformanceResult | None = None
    rewrite: RewrittenResumeResult | None = None
    chat_history: list[ChatTurn] = field(default_factory=list)
    transcript: str = ""
    last_inputs: tuple[ContentInput, ContentInput] | None = None
    status: dict[ActionKind, ActionStatus] = field(
        default_factory=lambda: {kind: ActionStatus() for kind in ActionKind}
    )
    notifications: list[Notification] = field(default_factory=list)


ServiceFactory = Callable[..., LLMService]


class AssistantController:
    def __init__(
        self,
        store: SettingsStore | None = None,
        *,
        app_config: AppConfig | None = None,
        language: str = "en",
        service_factory: ServiceFactory = get_llm_service,
        extractor: URLContentExtractor | None = None,
        env: Mapping[str, str] | None = None,
    ):
        self.app_config = app_config or AppConfig()
        self.store = store
        self._service_factory = service_factory
        self._extractor = extractor
        self._env = env
        self._service: LLMService | None = None
        self._tasks: dict[ActionKind, asyncio.Task] = {}

        self.state = AppState(language=normalize_language(language))
        if store is not None:
            self.state.config = store.load_config()
            self.state.theme = store.load_theme()

    # -- settings ---------------------------------------------------------

    def save_settings(self, config: LlmConfig) -> None:
        """Replace and persist the LLM config; the adapter is rebuilt on next use."""
        self.state.config = config
        self._service = None
        if self.store is not None:
            self.store.save_config(config)
        self._notify("success", translate("toast.success.saveSettings", self.state.language))
        try:
            self._get_service()
        except HiresightError as exc:
            self._notify("error", exc.localized(self.state.language))

    def set_theme(self, theme: Theme) -> None:
        if self.store is not None:
            self.store.save_theme(theme)
        self.state.theme = theme

    def set_language(self, language: str) -> None:
        self.state.language = normalize_language(language)

    def _get_service(self) -> LLMService:
        if self._service is None:
            try:
                self._service = self._service_factory(
                    self.state.config, self.app_config.llm, env=self._env
                )
            except ValueError as exc:
                raise HiresightError(str(exc), key="error.serviceNotInitialized") from exc
        return self._service

    # -- notifications ----------------------------------------------------

    def _notify(self, level: Literal["success", "error"], message: str, kind: ActionKind | None = None) -> None:
        self.state.notifications.append(Notification(level=level, message=message, kind=kind))

    def drain_notifications(self) -> list[Notification]:
        """Return pending notifications and forget them."""
        pending = list(self.state.notifications)
        self.state.notifications.clear()
        return pending

    # -- action plumbing --------------------------------------------------

    async def _execute(self, kind: ActionKind, action: Callable[[], Awaitable[Any]]) -> Any:
        status = self.state.status[kind]
        if status.loading:
            raise ActionInProgress(f"{kind.value} is already running")

        status.loading = True
        status.error = None
        status.exception = None
        language = self.state.language
        try:
            result = await action()
        except HiresightError as exc:
            logger.warning("%s failed: %s", kind.value, exc)
            self._record_failure(kind, exc, exc.localized(language))
            return None
        except Exception as exc:
            logger.error("%s failed unexpectedly", kind.value, exc_info=True)
            self._record_failure(kind, exc, translate("error.unknown", language))
            return None
        finally:
            status.loading = False

        if kind is not ActionKind.SEND_CHAT_MESSAGE:
            self._notify("success", translate(f"toast.success.{kind.value}", language), kind)
        return result

    def _record_failure(self, kind: ActionKind, exc: Exception, message: str) -> None:
        status = self.state.status[kind]
        status.error = message
        status.exception = exc
        self._notify("error", message, kind)

    def start(self, kind: ActionKind, *args: Any) -> asyncio.Task:
        """Schedule an action as its own task.

        A second start for a kind that is still in flight raises
        :class:`ActionInProgress`; different kinds run concurrently.
        """
        running = self._tasks.get(kind)
        if running is not None and not running.done():
            raise ActionInProgress(f"{kind.value} is already running")

        handlers = {
            ActionKind.ANALYZE: self.analyze,
            ActionKind.ANALYZE_INTERVIEW: self.analyze_interview,
            ActionKind.REWRITE_RESUME: self.rewrite_resume,
            ActionKind.SEND_CHAT_MESSAGE: self.send_chat_message,
        }
        task = asyncio.get_running_loop().create_task(
            handlers[kind](*args), name=f"hiresight-{kind.value}"
        )
        self._tasks[kind] = task
        task.add_done_callback(lambda t, k=kind: self._forget_task(k, t))
        return task

    def _forget_task(self, kind: ActionKind, task: asyncio.Task) -> None:
        if self._tasks.get(kind) is task:
            del self._tasks[kind]

    def is_running(self, kind: ActionKind) -> bool:
        return self.state.status[kind].loading or kind in self._tasks

    def _require_inputs(self) -> tuple[ContentInput, ContentInput]:
        if self.state.last_inputs is None or self.state.analysis is None:
            raise MissingInput("analysis")
        return self.state.last_inputs

    # -- actions ----------------------------------------------------------

    async def analyze(
        self,
        job_source: InputSource | None,
        resume_source: InputSource | None,
    ) -> CandidateAnalysisResult | None:
        async def run() -> CandidateAnalysisResult:
            if job_source is None or job_source.is_empty:
                raise MissingInput("jobDescription")
            if resume_source is None or resume_source.is_empty:
                raise MissingInput("resume")
            service = self._get_service()

            ingest = self.app_config.ingest
            job = await resolve_input(job_source, "jobDescription", ingest=ingest, extractor=self._extractor)
            resume = await resolve_input(resume_source, "resume", ingest=ingest, extractor=self._extractor)

            self.state.analysis = None
            self.state.interview = None
            self.state.rewrite = None
            self.state.chat_history = []

            result = await service.analyze_for_candidate(job, resume, self.state.language)
            self.state.analysis = result
            self.state.last_inputs = (job, resume)
            logger.info("Analysis complete: %s scored %d", result.job_title, result.overall_fit_score)
            return result

        return await self._execute(ActionKind.ANALYZE, run)

    async def analyze_interview(self, transcript: str) -> InterviewPerformanceResult | None:
        async def run() -> InterviewPerformanceResult:
            job, resume = self._require_inputs()
            if not transcript or not transcript.strip():
                raise MissingInput("transcript")
            service = self._get_service()

            self.state.transcript = transcript
            gaps = list(self.state.analysis.compatibility_gaps)
            result = await service.analyze_interview_performance(
                job, resume, transcript, gaps, self.state.language
            )
            self.state.interview = result
            return result

        return await self._execute(ActionKind.ANALYZE_INTERVIEW, run)

    async def rewrite_resume(self) -> RewrittenResumeResult | None:
        async def run() -> RewrittenResumeResult:
            job, resume = self._require_inputs()
            service = self._get_service()

            self.state.chat_history = []
            result = await service.rewrite_resume_for_job(job, resume, self.state.language, [])
            self.state.rewrite = result
            self.state.chat_history = [ChatTurn(role="model", text=result.chat_response)]
            return result

        return await self._execute(ActionKind.REWRITE_RESUME, run)

    async def send_chat_message(self, message: str) -> RewrittenResumeResult | None:
        async def run() -> RewrittenResumeResult:
            job, resume = self._require_inputs()
            if not message or not message.strip():
                raise MissingInput("chatMessage")
            service = self._get_service()

            history = [*self.state.chat_history, ChatTurn(role="user", text=message.strip())]
            self.state.chat_history = history
            result = await service.rewrite_resume_for_job(job, resume, self.state.language, history)
            self.state.rewrite = result
            self.state.chat_history = [*history, ChatTurn(role="model", text=result.chat_response)]
            return result

        return await self._execute(ActionKind.SEND_CHAT_MESSAGE, run)
