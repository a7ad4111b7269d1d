# src/analysis/engine.py — v1
"""Sentence analysis engine.

Builds the analysis prompt, runs it through the provider registry under the
analysis contract, then cleans the word graph and sanitizes rich text before
the result leaves this module. No retries; callers memoize via the cache.
"""

from __future__ import annotations

import logging

from bunkai.analysis.graph import normalize_words
from bunkai.analysis.prompts import build_analysis_prompt
from bunkai.analysis.sanitizer import EXPLANATION_TAGS, PARTICLE_TAGS, sanitize
from bunkai.config.settings import Settings, load_settings
from bunkai.core.models import AttachedParticle, GrammarPoint, SentenceAnalysis, WordNode
from bunkai.llm.client_factory import create_chat_model
from bunkai.llm.contracts import AnalysisContract, WordContract
from bunkai.llm.models import Message
from bunkai.llm.structured import invoke_structured

logger = logging.getLogger(__name__)


async def analyze_sentence(
    sentence: str,
    provider: str,
    model: str,
    settings: Settings | None = None,
) -> SentenceAnalysis:
    """Analyze a Japanese sentence with the given provider and model.

    Args:
        sentence: The sentence, substituted into the prompt verbatim.
        provider: Provider identifier (e.g. "anthropic").
        model: Provider-specific model name.
        settings: Application settings. Loaded from the environment when None.

    Returns:
        Sanitized, immutable SentenceAnalysis.

    Raises:
        ConfigurationError: Provider credential missing.
        ProviderError: Remote call failed or timed out.
        SchemaViolationError: Reply did not match the analysis contract.
    """
    settings = settings or load_settings()
    client = create_chat_model(provider, model, settings)

    logger.info("Analyzing sentence: provider=%s, model=%s, chars=%d", provider, model, len(sentence))
    raw = await invoke_structured(
        client,
        [Message(role="user", content=build_analysis_prompt(sentence))],
        AnalysisContract,
        timeout_s=settings.llm_timeout_s,
        temperature=settings.llm_temperature,
    )
    return build_analysis(raw)


def build_analysis(raw: AnalysisContract) -> SentenceAnalysis:
    """Turn a validated contract into the sanitized domain value."""
    words = normalize_words([_to_word(w) for w in raw.words])
    return SentenceAnalysis(
        direct_translation=raw.directTranslation,
        words=words,
        explanation=sanitize(raw.explanation, EXPLANATION_TAGS),
        is_fragment=raw.isFragment,
        grammar_points=[
            GrammarPoint(title=g.title, explanation=g.explanation)
            for g in raw.grammarPoints
        ],
    )


def _to_word(w: WordContract) -> WordNode:
    particle = None
    if w.attachedParticle is not None:
        particle = AttachedParticle(
            text=w.attachedParticle.text,
            reading=w.attachedParticle.reading,
            description=sanitize(w.attachedParticle.description, PARTICLE_TAGS),
        )
    return WordNode(
        id=w.id,
        text=w.text,
        reading=w.reading,
        part_of_speech=w.partOfSpeech,
        modifies=list(w.modifies) if w.modifies is not None else None,
        position=w.position,
        attached_particle=particle,
        is_topic=w.isTopic,
    )
