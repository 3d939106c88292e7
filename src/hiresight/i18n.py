"""Localized user-facing strings (en, pt, es)."""

from __future__ import annotations

SUPPORTED_LANGUAGES = ("en", "pt", "es")
DEFAULT_LANGUAGE = "en"

MESSAGES: dict[str, dict[str, str]] = {
    "en": {
        "error.unknown": "An unexpected error occurred.",
        "error.title": "Something went wrong",
        "error.inputMissing": "A required field is empty.",
        "error.jobDescriptionMissing": "Please provide a job description.",
        "error.resumeMissing": "Please provide your resume.",
        "error.transcriptMissing": "Please paste the interview transcript.",
        "error.chatMessageMissing": "Please type a message.",
        "error.analysisMissing": "Run the analysis first.",
        "error.unsupportedFormat": "Unsupported file format. Please use PDF or DOCX.",
        "error.fileRead": "The file could not be read.",
        "error.fileTooLarge": "The file is too large.",
        "error.urlFetch": "Failed to fetch content from the URL.",
        "error.urlBlocked": "This URL cannot be fetched.",
        "error.urlExtraction": "Could not extract the main content from the URL.",
        "error.geminiKeyMissing": "The Gemini API key is not configured in this environment.",
        "error.openaiKeyMissing": "Please add your OpenAI API key in Settings.",
        "error.anthropicKeyMissing": "Please add your Anthropic API key in Settings.",
        "error.groqKeyMissing": "Please add your Groq API key in Settings.",
        "error.serviceNotInitialized": "The AI service is not initialized. Check your settings.",
        "error.providerRequest": "The AI provider request failed. Please try again.",
        "error.responseParse": "The AI provider returned an invalid response.",
        "error.actionInProgress": "This action is already running.",
        "toast.success.analyze": "Analysis complete!",
        "toast.success.analyzeInterviewPerformance": "Interview analysis complete!",
        "toast.success.rewriteResume": "Your resume has been rewritten!",
        "toast.success.saveSettings": "Settings saved.",
        "results.score.high": "High Compatibility",
        "results.score.medium": "Medium Compatibility",
        "results.score.low": "Low Compatibility",
        "interview.feedback.excellent": "Excellent",
        "interview.feedback.good": "Good",
        "interview.feedback.improvement": "Needs Improvement",
        "report.title": "Analysis Report",
        "report.overallScore": "Overall Fit Score",
        "report.fitExplanation": "Why this score",
        "report.keyResponsibilities": "Key Responsibilities",
        "report.requiredSkills": "Required Skills",
        "report.niceToHaveSkills": "Nice-to-have Skills",
        "report.cultureFit": "Company Culture Fit",
        "report.salary": "Salary & Benefits",
        "report.strengths": "Strengths",
        "report.gaps": "Compatibility Gaps",
        "report.improvements": "Areas for Improvement",
        "report.actionPlan": "Action Plan",
        "report.questions": "Potential Interview Questions",
        "report.interview": "Interview Performance",
        "report.performanceScore": "Performance Score",
        "report.postInterviewFitScore": "Post-interview Fit Score",
        "report.gapResolutions": "Gap Resolutions",
        "report.softSkills": "Soft Skills",
        "report.clarity": "Areas to Improve Clarity",
        "report.demonstrated": "Demonstrated Strengths",
        "report.missing": "Resume Points Not Discussed",
        "report.resolved": "Resolved",
        "report.unresolved": "Not resolved",
        "report.rewrittenResume": "Rewritten Resume",
        "ui.tagline": "See how your resume matches the job before you apply.",
        "ui.language": "Language",
        "ui.darkTheme": "Dark theme",
        "ui.providerSection": "AI provider",
        "ui.provider": "Provider",
        "ui.model": "Model",
        "ui.apiKey": "{provider} API key",
        "ui.geminiKeyNote": "The Gemini key is read from the GEMINI_API_KEY environment variable.",
        "ui.saveSettings": "Save settings",
        "ui.input.text": "Text",
        "ui.input.url": "URL",
        "ui.input.file": "File",
        "ui.jobDescription": "Job description",
        "ui.resume": "Your resume",
        "ui.analyze": "Analyze",
        "ui.analyzing": "Analyzing fit...",
        "ui.tab.analysis": "Analysis",
        "ui.tab.interview": "Interview",
        "ui.tab.rewrite": "Rewrite",
        "ui.transcript": "Interview transcript",
        "ui.analyzeInterview": "Analyze interview",
        "ui.reviewingInterview": "Reviewing interview...",
        "ui.rewriteResume": "Rewrite resume",
        "ui.rewriting": "Rewriting resume...",
        "ui.downloadResume": "Download resume",
        "ui.chatPlaceholder": "Ask for changes, e.g. 'Make the summary shorter'",
        "ui.refining": "Refining...",
        "ui.downloadMarkdown": "Download report (.md)",
        "ui.preparePdf": "Prepare PDF report",
        "ui.renderingPdf": "Rendering PDF...",
        "ui.downloadPdf": "Download report (.pdf)",
    },
    "pt": {
        "error.unknown": "Ocorreu um erro inesperado.",
        "error.title": "Algo deu errado",
        "error.inputMissing": "Um campo obrigatório está vazio.",
        "error.jobDescriptionMissing": "Por favor, forneça a descrição da vaga.",
        "error.resumeMissing": "Por favor, forneça seu currículo.",
        "error.transcriptMissing": "Por favor, cole a transcrição da entrevista.",
        "error.chatMessageMissing": "Por favor, digite uma mensagem.",
        "error.analysisMissing": "Execute a análise primeiro.",
        "error.unsupportedFormat": "Formato de arquivo não suportado. Use PDF ou DOCX.",
        "error.fileRead": "Não foi possível ler o arquivo.",
        "error.fileTooLarge": "O arquivo é muito grande.",
        "error.urlFetch": "Falha ao buscar o conteúdo da URL.",
        "error.urlBlocked": "Esta URL não pode ser acessada.",
        "error.urlExtraction": "Não foi possível extrair o conteúdo principal da URL.",
        "error.geminiKeyMissing": "A chave da API Gemini não está configurada neste ambiente.",
        "error.openaiKeyMissing": "Adicione sua chave da API OpenAI nas Configurações.",
        "error.anthropicKeyMissing": "Adicione sua chave da API Anthropic nas Configurações.",
        "error.groqKeyMissing": "Adicione sua chave da API Groq nas Configurações.",
        "error.serviceNotInitialized": "O serviço de IA não foi inicializado. Verifique as configurações.",
        "error.providerRequest": "A requisição ao provedor de IA falhou. Tente novamente.",
        "error.responseParse": "O provedor de IA retornou uma resposta inválida.",
        "error.actionInProgress": "Esta ação já está em andamento.",
        "toast.success.analyze": "Análise concluída!",
        "toast.success.analyzeInterviewPerformance": "Análise da entrevista concluída!",
        "toast.success.rewriteResume": "Seu currículo foi reescrito!",
        "toast.success.saveSettings": "Configurações salvas.",
        "results.score.high": "Alta Compatibilidade",
        "results.score.medium": "Média Compatibilidade",
        "results.score.low": "Baixa Compatibilidade",
        "interview.feedback.excellent": "Excelente",
        "interview.feedback.good": "Bom",
        "interview.feedback.improvement": "Precisa Melhorar",
        "report.title": "Relatório de Análise",
        "report.overallScore": "Pontuação Geral de Compatibilidade",
        "report.fitExplanation": "Por que esta pontuação",
        "report.keyResponsibilities": "Principais Responsabilidades",
        "report.requiredSkills": "Habilidades Obrigatórias",
        "report.niceToHaveSkills": "Habilidades Desejáveis",
        "report.cultureFit": "Alinhamento Cultural",
        "report.salary": "Salário e Benefícios",
        "report.strengths": "Pontos Fortes",
        "report.gaps": "Lacunas de Compatibilidade",
        "report.improvements": "Áreas de Melhoria",
        "report.actionPlan": "Plano de Ação",
        "report.questions": "Possíveis Perguntas de Entrevista",
        "report.interview": "Desempenho na Entrevista",
        "report.performanceScore": "Pontuação de Desempenho",
        "report.postInterviewFitScore": "Compatibilidade Pós-entrevista",
        "report.gapResolutions": "Resolução de Lacunas",
        "report.softSkills": "Habilidades Comportamentais",
        "report.clarity": "Pontos a Esclarecer",
        "report.demonstrated": "Pontos Fortes Demonstrados",
        "report.missing": "Pontos do Currículo Não Discutidos",
        "report.resolved": "Resolvida",
        "report.unresolved": "Não resolvida",
        "report.rewrittenResume": "Currículo Reescrito",
        "ui.tagline": "Veja como seu currículo combina com a vaga antes de se candidatar.",
        "ui.language": "Idioma",
        "ui.darkTheme": "Tema escuro",
        "ui.providerSection": "Provedor de IA",
        "ui.provider": "Provedor",
        "ui.model": "Modelo",
        "ui.apiKey": "Chave de API {provider}",
        "ui.geminiKeyNote": "A chave do Gemini é lida da variável de ambiente GEMINI_API_KEY.",
        "ui.saveSettings": "Salvar configurações",
        "ui.input.text": "Texto",
        "ui.input.url": "URL",
        "ui.input.file": "Arquivo",
        "ui.jobDescription": "Descrição da vaga",
        "ui.resume": "Seu currículo",
        "ui.analyze": "Analisar",
        "ui.analyzing": "Analisando compatibilidade...",
        "ui.tab.analysis": "Análise",
        "ui.tab.interview": "Entrevista",
        "ui.tab.rewrite": "Reescrita",
        "ui.transcript": "Transcrição da entrevista",
        "ui.analyzeInterview": "Analisar entrevista",
        "ui.reviewingInterview": "Revisando a entrevista...",
        "ui.rewriteResume": "Reescrever currículo",
        "ui.rewriting": "Reescrevendo o currículo...",
        "ui.downloadResume": "Baixar currículo",
        "ui.chatPlaceholder": "Peça alterações, ex.: 'Deixe o resumo mais curto'",
        "ui.refining": "Refinando...",
        "ui.downloadMarkdown": "Baixar relatório (.md)",
        "ui.preparePdf": "Preparar relatório em PDF",
        "ui.renderingPdf": "Gerando PDF...",
        "ui.downloadPdf": "Baixar relatório (.pdf)",
    },
    "es": {
        "error.unknown": "Ocurrió un error inesperado.",
        "error.title": "Algo salió mal",
        "error.inputMissing": "Un campo obligatorio está vacío.",
        "error.jobDescriptionMissing": "Por favor, proporciona la descripción del puesto.",
        "error.resumeMissing": "Por favor, proporciona tu currículum.",
        "error.transcriptMissing": "Por favor, pega la transcripción de la entrevista.",
        "error.chatMessageMissing": "Por favor, escribe un mensaje.",
        "error.analysisMissing": "Ejecuta el análisis primero.",
        "error.unsupportedFormat": "Formato de archivo no compatible. Usa PDF o DOCX.",
        "error.fileRead": "No se pudo leer el archivo.",
        "error.fileTooLarge": "El archivo es demasiado grande.",
        "error.urlFetch": "No se pudo obtener el contenido de la URL.",
        "error.urlBlocked": "Esta URL no se puede consultar.",
        "error.urlExtraction": "No se pudo extraer el contenido principal de la URL.",
        "error.geminiKeyMissing": "La clave de la API de Gemini no está configurada en este entorno.",
        "error.openaiKeyMissing": "Agrega tu clave de la API de OpenAI en Configuración.",
        "error.anthropicKeyMissing": "Agrega tu clave de la API de Anthropic en Configuración.",
        "error.groqKeyMissing": "Agrega tu clave de la API de Groq en Configuración.",
        "error.serviceNotInitialized": "El servicio de IA no está inicializado. Revisa la configuración.",
        "error.providerRequest": "La solicitud al proveedor de IA falló. Inténtalo de nuevo.",
        "error.responseParse": "El proveedor de IA devolvió una respuesta no válida.",
        "error.actionInProgress": "Esta acción ya está en curso.",
        "toast.success.analyze": "¡Análisis completado!",
        "toast.success.analyzeInterviewPerformance": "¡Análisis de la entrevista completado!",
        "toast.success.rewriteResume": "¡Tu currículum ha sido reescrito!",
        "toast.success.saveSettings": "Configuración guardada.",
        "results.score.high": "Alta Compatibilidad",
        "results.score.medium": "Compatibilidad Media",
        "results.score.low": "Baja Compatibilidad",
        "interview.feedback.excellent": "Excelente",
        "interview.feedback.good": "Bueno",
        "interview.feedback.improvement": "Necesita Mejorar",
        "report.title": "Informe de Análisis",
        "report.overallScore": "Puntuación General de Compatibilidad",
        "report.fitExplanation": "Por qué esta puntuación",
        "report.keyResponsibilities": "Responsabilidades Clave",
        "report.requiredSkills": "Habilidades Requeridas",
        "report.niceToHaveSkills": "Habilidades Deseables",
        "report.cultureFit": "Encaje Cultural",
        "report.salary": "Salario y Beneficios",
        "report.strengths": "Fortalezas",
        "report.gaps": "Brechas de Compatibilidad",
        "report.improvements": "Áreas de Mejora",
        "report.actionPlan": "Plan de Acción",
        "report.questions": "Posibles Preguntas de Entrevista",
        "report.interview": "Desempeño en la Entrevista",
        "report.performanceScore": "Puntuación de Desempeño",
        "report.postInterviewFitScore": "Compatibilidad Post-entrevista",
        "report.gapResolutions": "Resolución de Brechas",
        "report.softSkills": "Habilidades Blandas",
        "report.clarity": "Respuestas a Aclarar",
        "report.demonstrated": "Fortalezas Demostradas",
        "report.missing": "Puntos del Currículum No Tratados",
        "report.resolved": "Resuelta",
        "report.unresolved": "No resuelta",
        "report.rewrittenResume": "Currículum Reescrito",
        "ui.tagline": "Descubre cómo encaja tu currículum con la vacante antes de postularte.",
        "ui.language": "Idioma",
        "ui.darkTheme": "Tema oscuro",
        "ui.providerSection": "Proveedor de IA",
        "ui.provider": "Proveedor",
        "ui.model": "Modelo",
        "ui.apiKey": "Clave de API de {provider}",
        "ui.geminiKeyNote": "La clave de Gemini se lee de la variable de entorno GEMINI_API_KEY.",
        "ui.saveSettings": "Guardar configuración",
        "ui.input.text": "Texto",
        "ui.input.url": "URL",
        "ui.input.file": "Archivo",
        "ui.jobDescription": "Descripción del puesto",
        "ui.resume": "Tu currículum",
        "ui.analyze": "Analizar",
        "ui.analyzing": "Analizando compatibilidad...",
        "ui.tab.analysis": "Análisis",
        "ui.tab.interview": "Entrevista",
        "ui.tab.rewrite": "Reescritura",
        "ui.transcript": "Transcripción de la entrevista",
        "ui.analyzeInterview": "Analizar entrevista",
        "ui.reviewingInterview": "Revisando la entrevista...",
        "ui.rewriteResume": "Reescribir currículum",
        "ui.rewriting": "Reescribiendo el currículum...",
        "ui.downloadResume": "Descargar currículum",
        "ui.chatPlaceholder": "Pide cambios, p. ej.: 'Haz el resumen más corto'",
        "ui.refining": "Refinando...",
        "ui.downloadMarkdown": "Descargar informe (.md)",
        "ui.preparePdf": "Preparar informe en PDF",
        "ui.renderingPdf": "Generando PDF...",
        "ui.downloadPdf": "Descargar informe (.pdf)",
    },
}


def normalize_language(language: str | None) -> str:
    """Map a locale like ``pt-BR`` onto a supported language code."""
    if not language:
        return DEFAULT_LANGUAGE
    code = language.strip().lower()[:2]
    return code if code in SUPPORTED_LANGUAGES else DEFAULT_LANGUAGE


def translate(key: str, language: str = DEFAULT_LANGUAGE) -> str:
    """Look up ``key``, falling back to English and then to the key itself."""
    table = MESSAGES[normalize_language(language)]
    if key in table:
        return table[key]
    return MESSAGES[DEFAULT_LANGUAGE].get(key, key)
