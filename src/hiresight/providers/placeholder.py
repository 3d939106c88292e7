"""Placeholder adapters for providers without a real backend yet.

They accept a key, never touch the network and return valid typed results
filled with localized placeholder text and a neutral score of 50.
"""

from __future__ import annotations

import logging

from hiresight.i18n import normalize_language
from hiresight.models.analysis import AnalysisWithScore, CandidateAnalysisResult, SectionMatch
from hiresight.models.content import ContentInput
from hiresight.models.interview import (
    ConsistencySection,
    GapResolutionItem,
    InterviewPerformanceResult,
)
from hiresight.models.rewrite import ChatTurn, RewrittenResumeResult
from hiresight.providers.base import LLMService

logger = logging.getLogger(__name__)

PLACEHOLDER_SCORE = 50

_TEXT = {
    "en": {
        "summary": "This is a placeholder summary from the {name} service.",
        "fit_explanation": "This is a placeholder explanation from the {name} service.",
        "culture": "Placeholder culture analysis.",
        "salary": "Not specified.",
        "improvement": "This is a placeholder response.",
        "question": "What is your greatest weakness?",
        "gap": "Provider integration is not implemented yet.",
        "strength": "Strong potential in placeholder environments.",
        "action": "Configure a provider with a real implementation.",
        "interview_summary": "This is a placeholder interview review from the {name} service.",
        "soft_skills": "Placeholder soft skills analysis.",
        "resolution": "The {name} service cannot evaluate gaps yet.",
        "resume_title": "Placeholder Rewritten Resume",
        "resume_body": "This is a placeholder resume from the {name} service.",
        "first_reply": "Here is the rewritten resume, based on my analysis as a {name} model.",
        "ack_reply": "Understood: \"{instruction}\". Here is the updated resume from the {name} service.",
        "revision": "Revision {n}: {instruction}",
    },
    "pt": {
        "summary": "Este é um resumo de exemplo do serviço {name}.",
        "fit_explanation": "Esta é uma explicação de exemplo do serviço {name}.",
        "culture": "Análise cultural de exemplo.",
        "salary": "Não especificado.",
        "improvement": "Esta é uma resposta de exemplo.",
        "question": "Qual é a sua maior fraqueza?",
        "gap": "A integração com o provedor ainda não foi implementada.",
        "strength": "Grande potencial em ambientes de exemplo.",
        "action": "Configure um provedor com implementação real.",
        "interview_summary": "Esta é uma avaliação de entrevista de exemplo do serviço {name}.",
        "soft_skills": "Análise de habilidades interpessoais de exemplo.",
        "resolution": "O serviço {name} ainda não avalia lacunas.",
        "resume_title": "Exemplo de Currículo Reescrito",
        "resume_body": "Este é um currículo de exemplo do serviço {name}.",
        "first_reply": "Aqui está o currículo reescrito, com base na minha análise como um modelo {name}.",
        "ack_reply": "Entendido: \"{instruction}\". Aqui está o currículo atualizado do serviço {name}.",
        "revision": "Revisão {n}: {instruction}",
    },
    "es": {
        "summary": "Este es un resumen de prueba del servicio {name}.",
        "fit_explanation": "Esta es una explicación de prueba del servicio {name}.",
        "culture": "Análisis cultural de prueba.",
        "salary": "No especificado.",
        "improvement": "Esta es una respuesta de prueba.",
        "question": "¿Cuál es tu mayor debilidad?",
        "gap": "La integración con el proveedor aún no está implementada.",
        "strength": "Gran potencial en entornos de prueba.",
        "action": "Configura un proveedor con una implementación real.",
        "interview_summary": "Esta es una evaluación de entrevista de prueba del servicio {name}.",
        "soft_skills": "Análisis de habilidades blandas de prueba.",
        "resolution": "El servicio {name} aún no evalúa brechas.",
        "resume_title": "Currículum Reescrito de Prueba",
        "resume_body": "Este es un currículum de prueba del servicio {name}.",
        "first_reply": "Aquí está el currículum reescrito, basado en mi análisis como modelo de {name}.",
        "ack_reply": "Entendido: \"{instruction}\". Aquí está el currículum actualizado del servicio {name}.",
        "revision": "Revisión {n}: {instruction}",
    },
}


def _empty_section() -> SectionMatch:
    return SectionMatch(items=[], score=PLACEHOLDER_SCORE)


class PlaceholderService(LLMService):
    display_name = "Placeholder"

    def __init__(self, model: str, api_key: str):
        super().__init__(model)
        self._api_key = api_key

    def _text(self, language: str) -> dict[str, str]:
        return _TEXT[normalize_language(language)]

    def _fmt(self, language: str, key: str, **kwargs: object) -> str:
        return self._text(language)[key].format(name=self.display_name, **kwargs)

    async def analyze_for_candidate(
        self,
        job: ContentInput,
        resume: ContentInput,
        language: str,
    ) -> CandidateAnalysisResult:
        logger.info("Placeholder %s call with model %s (candidate analysis)", self.provider, self.model)
        t = self._text(language)
        return CandidateAnalysisResult(
            job_title=f"Placeholder Job Title ({self.display_name})",
            summary=self._fmt(language, "summary"),
            key_responsibilities_match=_empty_section(),
            required_skills_match=_empty_section(),
            nice_to_have_skills_match=_empty_section(),
            company_culture_fit=AnalysisWithScore(analysis=t["culture"], score=PLACEHOLDER_SCORE),
            salary_and_benefits=t["salary"],
            areas_for_improvement=[t["improvement"]],
            potential_interview_questions=[t["question"]],
            overall_fit_score=PLACEHOLDER_SCORE,
            fit_explanation=self._fmt(language, "fit_explanation"),
            compatibility_gaps=[t["gap"]],
            strengths=[t["strength"]],
            action_plan=[t["action"]],
        )

    async def analyze_interview_performance(
        self,
        job: ContentInput,
        resume: ContentInput,
        transcript: str,
        compatibility_gaps: list[str],
        language: str,
    ) -> InterviewPerformanceResult:
        logger.info("Placeholder %s call with model %s (interview analysis)", self.provider, self.model)
        resolution = self._fmt(language, "resolution")
        return InterviewPerformanceResult(
            performance_score=PLACEHOLDER_SCORE,
            summary=self._fmt(language, "interview_summary"),
            overall_feedback="Good",
            soft_skills_analysis=ConsistencySection[str](
                items=self._text(language)["soft_skills"], score=PLACEHOLDER_SCORE
            ),
            areas_to_improve_clarity=ConsistencySection[list[str]](items=[], score=PLACEHOLDER_SCORE),
            missing_from_interview=ConsistencySection[list[str]](items=[], score=PLACEHOLDER_SCORE),
            demonstrated_strengths=ConsistencySection[list[str]](items=[], score=PLACEHOLDER_SCORE),
            gap_resolutions=ConsistencySection[list[GapResolutionItem]](
                items=[
                    GapResolutionItem(gap=gap, resolution=resolution, is_resolved=False)
                    for gap in compatibility_gaps
                ],
                score=0,
            ),
            post_interview_fit_score=PLACEHOLDER_SCORE,
        )

    async def rewrite_resume_for_job(
        self,
        job: ContentInput,
        resume: ContentInput,
        language: str,
        chat_history: list[ChatTurn] | None = None,
    ) -> RewrittenResumeResult:
        logger.info("Placeholder %s call with model %s (resume rewrite)", self.provider, self.model)
        t = self._text(language)
        user_turns = [turn.text for turn in chat_history or [] if turn.role == "user"]

        body = [f"## {t['resume_title']}", "", self._fmt(language, "resume_body")]
        for n, instruction in enumerate(user_turns, start=1):
            body.append(f"- {t['revision'].format(n=n, instruction=instruction)}")

        if user_turns:
            reply = self._fmt(language, "ack_reply", instruction=user_turns[-1])
        else:
            reply = self._fmt(language, "first_reply")
        return RewrittenResumeResult(rewritten_resume="\n".join(body), chat_response=reply)


class OpenAIService(PlaceholderService):
    provider = "openai"
    display_name = "OpenAI"


class AnthropicService(PlaceholderService):
    provider = "anthropic"
    display_name = "Anthropic"


class GroqService(PlaceholderService):
    provider = "groq"
    display_name = "Groq"
