"""
AI assistant service for SwiftHire.

Talks to an OpenAI-compatible chat completion API (OpenRouter by default).
Every public method degrades to a fixed fallback when the call fails or the
model answers with something unusable.
"""
import json
import logging
import re
from typing import Any, Dict, List, Optional

from django.conf import settings
from openai import OpenAI, OpenAIError

from swifthire.exceptions import ExternalServiceFailure

logger = logging.getLogger(__name__)

CHAT_SYSTEM_PROMPT = "You are a helpful job assistant for the SwiftHire platform."

JOB_DESCRIPTION_SYSTEM_PROMPT = (
    "You are an expert HR assistant. Write a compelling, professional job description. "
    "Structure it with these Markdown headings: 'About the Role', 'Key Responsibilities', and 'Requirements'. "
    "Incorporate the location and salary benefits into the text where appropriate. "
    "Keep it under 2000 characters."
)

MATCH_SCORE_SYSTEM_PROMPT = (
    "You are an expert ATS. Compare the candidate profile to the job description. "
    "Return valid JSON only (no markdown) with keys: "
    "\"score\" (integer 0-100), "
    "\"reasoning\" (concise 1-sentence summary), "
    "\"missingKeywords\" (array of strings, max 3)."
)

CANDIDATE_ANALYSIS_SYSTEM_PROMPT = (
    "You are a Senior Technical Recruiter. Analyze this candidate profile. "
    "Return valid JSON only (no markdown) with these keys: "
    "\"summary\" (string, 1 professional sentence about their level), "
    "\"strengths\" (array of strings, top 3 hard/soft skills), "
    "\"questions\" (array of strings, 3 tailored interview questions to ask them)."
)

TEXT_FALLBACK = "Sorry, the AI assistant is unavailable right now. Please try again later."

MAX_JOB_DESCRIPTION_CHARS = 1500

_FENCE_RE = re.compile(r"```(?:json)?", re.IGNORECASE)


def match_score_fallback() -> Dict[str, Any]:
    return {'score': 0, 'reasoning': 'AI analysis unavailable.', 'missingKeywords': []}


def candidate_analysis_fallback() -> Dict[str, Any]:
    return {
        'summary': 'Analysis unavailable.',
        'strengths': ['N/A'],
        'questions': ['Could not generate questions.'],
    }


def strip_code_fences(text: str) -> str:
    return _FENCE_RE.sub('', text or '').strip()


def _string_list(value, limit=None) -> Optional[List[str]]:
    if not isinstance(value, list):
        return None
    items = [str(item).strip() for item in value if str(item).strip()]
    return items[:limit] if limit else items


class AIAssistantService:
    """Text-in/text-out and JSON-in/JSON-out access to the completion API."""

    def __init__(self, client=None):
        self.model = settings.AI_MODEL
        self.client = client or OpenAI(
            api_key=settings.OPENROUTER_API_KEY or 'not-configured',
            base_url=settings.OPENROUTER_BASE_URL,
            timeout=settings.AI_TIMEOUT_SECONDS,
            max_retries=1,
            default_headers={
                'HTTP-Referer': settings.AI_SITE_URL,
                'X-Title': settings.AI_SITE_NAME,
            },
        )

    def complete(self, system_prompt: str, user_prompt: str) -> str:
        """Run one chat completion. Raises ExternalServiceFailure on any failure."""
        try:
            response = self.client.chat.completions.create(
                model=self.model,
                messages=[
                    {'role': 'system', 'content': system_prompt},
                    {'role': 'user', 'content': user_prompt},
                ],
            )
        except OpenAIError as e:
            logger.error(f"AI completion failed: {e}")
            raise ExternalServiceFailure('The AI service is unavailable.') from e

        if not response.choices or not response.choices[0].message.content:
            logger.error("AI completion returned no content")
            raise ExternalServiceFailure('The AI service returned an empty response.')
        return response.choices[0].message.content.strip()

    def _complete_json(self, system_prompt, user_prompt):
        raw = self.complete(system_prompt, user_prompt)
        try:
            data = json.loads(strip_code_fences(raw))
        except json.JSONDecodeError as e:
            logger.warning(f"AI returned non-JSON content: {raw[:200]!r}")
            raise ExternalServiceFailure('The AI service returned malformed data.') from e
        if not isinstance(data, dict):
            raise ExternalServiceFailure('The AI service returned malformed data.')
        return data

    def get_ai_response(self, prompt: str) -> str:
        try:
            return self.complete(CHAT_SYSTEM_PROMPT, prompt)
        except ExternalServiceFailure:
            return TEXT_FALLBACK

    def generate_job_description(self, title, location=None, job_type=None, salary_range=None) -> str:
        prompt = f"Write a professional job description for a '{title}' position."
        if location:
            prompt += f" The job is located in {location}."
        if job_type:
            prompt += f" It is a {job_type} role."
        if salary_range:
            prompt += f" The offered salary range is {salary_range}."
        try:
            return self.complete(JOB_DESCRIPTION_SYSTEM_PROMPT, prompt)
        except ExternalServiceFailure:
            return TEXT_FALLBACK

    def analyze_match(self, job_description: str, candidate_profile: str) -> Dict[str, Any]:
        """Score how well a candidate fits a job; always returns the documented schema."""
        prompt = (
            f"JOB DESCRIPTION:\n{(job_description or '')[:MAX_JOB_DESCRIPTION_CHARS]}"
            f"\n\nCANDIDATE PROFILE:\n{candidate_profile}"
        )
        try:
            data = self._complete_json(MATCH_SCORE_SYSTEM_PROMPT, prompt)
            score = max(0, min(100, int(data['score'])))
            reasoning = str(data.get('reasoning') or '').strip()
            missing = _string_list(data.get('missingKeywords', []), limit=3)
        except (ExternalServiceFailure, KeyError, TypeError, ValueError):
            return match_score_fallback()
        if missing is None:
            return match_score_fallback()
        return {'score': score, 'reasoning': reasoning, 'missingKeywords': missing}

    def analyze_candidate(self, candidate_profile: str) -> Dict[str, Any]:
        try:
            data = self._complete_json(CANDIDATE_ANALYSIS_SYSTEM_PROMPT, f"CANDIDATE PROFILE:\n{candidate_profile}")
        except ExternalServiceFailure:
            return candidate_analysis_fallback()

        summary = data.get('summary')
        strengths = _string_list(data.get('strengths'))
        questions = _string_list(data.get('questions'))
        if not isinstance(summary, str) or not summary.strip() or strengths is None or questions is None:
            logger.warning("AI candidate analysis did not match the expected schema")
            return candidate_analysis_fallback()
        return {'summary': summary.strip(), 'strengths': strengths, 'questions': questions}


def seeker_profile_summary(profile) -> str:
    """Plain-text description of a seeker used in AI prompts."""
    return (
        f"Title: {profile.current_title or 'N/A'}, "
        f"Skills: {profile.skills or 'N/A'}, "
        f"Experience: {profile.years_experience or 0} years, "
        f"Headline: {profile.profile_headline or 'N/A'}"
    )


def job_summary(job) -> str:
    parts = [f"Title: {job.title}", job.description]
    if job.required_skills:
        parts.append(f"Required skills: {job.required_skills}")
    return "\n".join(parts)
