"""Streamlit Web UI for hiresight.

Sidebar: language, theme and provider settings.
Main page: job/resume inputs (text, URL or file) -> fit analysis,
then interview review, resume rewrite with chat refinement and downloads.
"""

from __future__ import annotations

import asyncio
import logging
import os
import traceback

import nest_asyncio
import streamlit as st
from dotenv import load_dotenv

logger = logging.getLogger(__name__)

load_dotenv()
nest_asyncio.apply()

# Streamlit Cloud: sync st.secrets -> os.environ so the Gemini client can read it
if "GEMINI_API_KEY" not in os.environ:
    try:
        os.environ["GEMINI_API_KEY"] = st.secrets["GEMINI_API_KEY"]
    except (KeyError, FileNotFoundError):
        logger.info("GEMINI_API_KEY not found in Streamlit secrets")

from hiresight.config import load_config
from hiresight.controller import ActionKind, AssistantController
from hiresight.export import (
    REWRITTEN_RESUME_FILENAME,
    compatibility_label,
    feedback_style,
    render_report_markdown,
    render_report_pdf,
    report_filename,
)
from hiresight.i18n import SUPPORTED_LANGUAGES, translate
from hiresight.models.settings import AVAILABLE_MODELS, LlmProvider, default_model_for
from hiresight.parsers.content_input import InputSource
from hiresight.storage import SettingsStore

st.set_page_config(
    page_title="HireSight",
    page_icon=":mag:",
    layout="wide",
)

_LANGUAGE_LABELS = {"en": "English", "pt": "Português", "es": "Español"}
_STATUS_ICONS = {"Match": ":white_check_mark:", "Partial": ":large_yellow_circle:", "No Match": ":x:"}


# ---------------------------------------------------------------------------
# Helpers
# ---------------------------------------------------------------------------


def _get_controller() -> AssistantController:
    if "controller" not in st.session_state:
        config = load_config()
        store = SettingsStore(config.storage.resolved_state_path)
        st.session_state.controller = AssistantController(store, app_config=config)
    return st.session_state.controller


def _t(key: str) -> str:
    return translate(key, _get_controller().state.language)


def _show_notifications(controller: AssistantController) -> None:
    for note in controller.drain_notifications():
        st.toast(note.message, icon="✅" if note.level == "success" else "⚠️")


def _show_error(controller: AssistantController, kind: ActionKind) -> None:
    error = controller.state.status[kind].error
    if error:
        st.error(error)


def _input_source(label: str, key: str, allow_url: bool) -> InputSource | None:
    modes = ["text", "url", "file"] if allow_url else ["text", "file"]
    choice = st.radio(
        label,
        modes,
        horizontal=True,
        key=f"{key}_mode",
        format_func=lambda mode: _t(f"ui.input.{mode}"),
    )
    if choice == "text":
        text = st.text_area(label, height=220, key=f"{key}_text", label_visibility="collapsed")
        return InputSource.text(text) if text else None
    if choice == "url":
        url = st.text_input(_t("ui.input.url"), key=f"{key}_url", placeholder="https://...")
        return InputSource.url(url) if url else None
    uploaded = st.file_uploader(
        label,
        type=["pdf", "docx"],
        key=f"{key}_file",
        label_visibility="collapsed",
    )
    if uploaded is None:
        return None
    return InputSource.upload(uploaded.name, uploaded.getvalue(), uploaded.type)


# ---------------------------------------------------------------------------
# Sidebar
# ---------------------------------------------------------------------------


def _sidebar(controller: AssistantController) -> None:
    state = controller.state
    with st.sidebar:
        st.title("HireSight")

        language = st.selectbox(
            _t("ui.language"),
            SUPPORTED_LANGUAGES,
            index=SUPPORTED_LANGUAGES.index(state.language),
            format_func=lambda code: _LANGUAGE_LABELS[code],
        )
        controller.set_language(language)

        dark = st.toggle(_t("ui.darkTheme"), value=state.theme == "dark")
        theme = "dark" if dark else "light"
        if theme != state.theme:
            controller.set_theme(theme)

        st.divider()
        st.subheader(_t("ui.providerSection"))
        providers = list(LlmProvider)
        provider = st.selectbox(
            _t("ui.provider"),
            providers,
            index=providers.index(state.config.provider),
            format_func=lambda p: p.value.capitalize(),
        )
        models = [m for m, _ in AVAILABLE_MODELS[provider]]
        current_model = state.config.model if provider is state.config.provider else default_model_for(provider)
        model = st.selectbox(
            _t("ui.model"),
            models,
            index=models.index(current_model) if current_model in models else 0,
        )
        api_key = None
        if provider is not LlmProvider.GEMINI:
            api_key = st.text_input(
                _t("ui.apiKey").format(provider=provider.value.capitalize()),
                value=state.config.key_for(provider) or "",
                type="password",
            )
        else:
            st.caption(_t("ui.geminiKeyNote"))

        if st.button(_t("ui.saveSettings"), use_container_width=True):
            config = state.config.with_provider(provider).model_copy(update={"model": model})
            if api_key is not None:
                config = config.with_api_key(provider, api_key)
            controller.save_settings(config)


# ---------------------------------------------------------------------------
# Result views
# ---------------------------------------------------------------------------


def _analysis_view(controller: AssistantController) -> None:
    state = controller.state
    result = state.analysis

    label = compatibility_label(result.overall_fit_score)
    st.header(result.job_title)
    c1, c2 = st.columns([1, 3])
    c1.metric(_t("report.overallScore"), f"{result.overall_fit_score}%", _t(f"results.score.{label}"))
    c1.progress(result.overall_fit_score / 100)
    c2.markdown(result.summary)
    with c2.expander(_t("report.fitExplanation")):
        st.markdown(result.fit_explanation)

    c1, c2 = st.columns(2)
    c1.subheader(_t("report.strengths"))
    c1.markdown("\n".join(f"- {s}" for s in result.strengths))
    c2.subheader(_t("report.gaps"))
    c2.markdown("\n".join(f"- {g}" for g in result.compatibility_gaps))

    for key, section in (
        ("report.keyResponsibilities", result.key_responsibilities_match),
        ("report.requiredSkills", result.required_skills_match),
        ("report.niceToHaveSkills", result.nice_to_have_skills_match),
    ):
        with st.expander(f"{_t(key)} · {section.score}%"):
            for item in section.items:
                st.markdown(f"{_STATUS_ICONS[item.status]} **{item.item}** — {item.explanation}")

    with st.expander(f"{_t('report.cultureFit')} · {result.company_culture_fit.score}%"):
        st.markdown(result.company_culture_fit.analysis)
    with st.expander(_t("report.salary")):
        st.markdown(result.salary_and_benefits)
    with st.expander(_t("report.actionPlan")):
        st.markdown("\n".join(f"{n}. {s}" for n, s in enumerate(result.action_plan, 1)))
    with st.expander(_t("report.questions")):
        st.markdown("\n".join(f"- {q}" for q in result.potential_interview_questions))


def _interview_view(controller: AssistantController) -> None:
    state = controller.state

    transcript = st.text_area(_t("ui.transcript"), value=state.transcript, height=200)
    busy = controller.is_running(ActionKind.ANALYZE_INTERVIEW)
    if st.button(_t("ui.analyzeInterview"), disabled=busy):
        with st.spinner(_t("ui.reviewingInterview")):
            asyncio.run(controller.analyze_interview(transcript))
    _show_error(controller, ActionKind.ANALYZE_INTERVIEW)

    result = state.interview
    if result is None:
        return
    style = feedback_style(result.overall_feedback)
    show = {"success": st.success, "warning": st.warning, "danger": st.error}[style]
    show(result.overall_feedback)
    c1, c2 = st.columns(2)
    c1.metric(_t("report.performanceScore"), f"{result.performance_score}%")
    c2.metric(_t("report.postInterviewFitScore"), f"{result.post_interview_fit_score}%")
    st.markdown(result.summary)

    st.subheader(f"{_t('report.gapResolutions')} · {result.gap_resolutions.score}%")
    for item in result.gap_resolutions.items:
        icon = ":white_check_mark:" if item.is_resolved else ":x:"
        st.markdown(f"{icon} **{item.gap}** — {item.resolution}")
    with st.expander(f"{_t('report.softSkills')} · {result.soft_skills_analysis.score}%"):
        st.markdown(result.soft_skills_analysis.items)
    for key, section in (
        ("report.clarity", result.areas_to_improve_clarity),
        ("report.demonstrated", result.demonstrated_strengths),
        ("report.missing", result.missing_from_interview),
    ):
        with st.expander(f"{_t(key)} · {section.score}%"):
            st.markdown("\n".join(f"- {i}" for i in section.items) or "—")


def _rewrite_view(controller: AssistantController) -> None:
    state = controller.state
    busy = controller.is_running(ActionKind.REWRITE_RESUME) or controller.is_running(
        ActionKind.SEND_CHAT_MESSAGE
    )
    if st.button(_t("ui.rewriteResume"), disabled=busy):
        with st.spinner(_t("ui.rewriting")):
            asyncio.run(controller.rewrite_resume())
    _show_error(controller, ActionKind.REWRITE_RESUME)

    if state.rewrite is None:
        return
    c1, c2 = st.columns([3, 2])
    c1.markdown(state.rewrite.rewritten_resume)
    c1.download_button(
        _t("ui.downloadResume"),
        state.rewrite.rewritten_resume,
        file_name=REWRITTEN_RESUME_FILENAME,
        mime="text/plain",
    )
    with c2:
        for turn in state.chat_history:
            with st.chat_message("user" if turn.role == "user" else "assistant"):
                st.markdown(turn.text)
        message = st.chat_input(_t("ui.chatPlaceholder"), disabled=busy)
        if message:
            with st.spinner(_t("ui.refining")):
                asyncio.run(controller.send_chat_message(message))
            st.rerun()
        _show_error(controller, ActionKind.SEND_CHAT_MESSAGE)


def _downloads(controller: AssistantController) -> None:
    state = controller.state
    md = render_report_markdown(state.analysis, state.interview, state.rewrite, language=state.language)
    c1, c2 = st.columns(2)
    c1.download_button(
        _t("ui.downloadMarkdown"),
        md,
        file_name=report_filename(state.analysis.job_title).replace(".pdf", ".md"),
        mime="text/markdown",
    )
    if c2.button(_t("ui.preparePdf")):
        with st.spinner(_t("ui.renderingPdf")):
            pdf = render_report_pdf(
                md,
                translate("report.title", state.language),
                theme=state.theme,
                language=state.language,
            )
        c2.download_button(
            _t("ui.downloadPdf"),
            pdf,
            file_name=report_filename(state.analysis.job_title),
            mime="application/pdf",
        )


# ---------------------------------------------------------------------------
# Main
# ---------------------------------------------------------------------------


def main() -> None:
    controller = _get_controller()
    _sidebar(controller)

    st.title("HireSight")
    st.caption(_t("ui.tagline"))

    c1, c2 = st.columns(2)
    with c1:
        st.subheader(_t("ui.jobDescription"))
        job = _input_source(_t("ui.jobDescription"), "job", allow_url=True)
    with c2:
        st.subheader(_t("ui.resume"))
        resume = _input_source(_t("ui.resume"), "resume", allow_url=False)

    busy = controller.is_running(ActionKind.ANALYZE)
    if st.button(_t("ui.analyze"), type="primary", disabled=busy, use_container_width=True):
        with st.spinner(_t("ui.analyzing")):
            asyncio.run(controller.analyze(job, resume))
    _show_error(controller, ActionKind.ANALYZE)

    if controller.state.analysis is not None:
        results, interview, rewrite = st.tabs([_t("ui.tab.analysis"), _t("ui.tab.interview"), _t("ui.tab.rewrite")])
        with results:
            _analysis_view(controller)
            st.divider()
            _downloads(controller)
        with interview:
            _interview_view(controller)
        with rewrite:
            _rewrite_view(controller)

    _show_notifications(controller)


try:
    main()
except Exception as exc:
    logger.error("Unhandled UI error", exc_info=True)
    st.error(f"{translate('error.title')}: {exc}")
    st.code(traceback.format_exc())
