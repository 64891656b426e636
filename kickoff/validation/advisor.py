"""Optional advisory reviewer backed by a local Ollama model.

The rule engine is authoritative.  An advisor only *adds* issues and
recommendations in the same shape; its absence, failure or disagreement never
suppresses a rule-engine error.  Any object with an async ``review(config)``
method returning ``AdvisoryResult`` can stand in for ``OllamaAdvisor``, which
keeps core tests free of network access.
"""

from __future__ import annotations

import json
from typing import Protocol, runtime_checkable

from pydantic import ValidationError

from kickoff.ollama_client import OllamaClient
from kickoff.project import ProjectConfig
from kickoff.validation.models import AdvisoryIssue, AdvisoryResult, IssueSeverity

# ---------------------------------------------------------------------------
# Prompts
# ---------------------------------------------------------------------------

SYSTEM_PROMPT = """\
You are an expert Solutions Architect specializing in modern web development stacks. \
Your role is to analyze project configurations and identify potential issues, \
incompatibilities, or suboptimal choices.

You have deep knowledge of:
- JavaScript/TypeScript ecosystems (Next.js, TanStack, Hono, Bun, Node.js)
- Database technologies (PostgreSQL, SQLite, Supabase, Turso, D1, Neon, PlanetScale)
- ORMs (Drizzle, Prisma, SQLAlchemy, GORM, Diesel)
- Auth providers (Better-Auth, Clerk, Lucia, Auth.js, Supabase Auth)
- AI/ML frameworks (LangChain, Vercel AI SDK, Mastra, MLX)
- Vector databases (Pinecone, Qdrant, Chroma, pgvector, Turbopuffer)
- Python, Go, and Rust backend stacks

Known issues to check for:
1. D1 + Prisma: Prisma has significant edge compatibility issues with Cloudflare D1
2. Better-Auth + Next.js + Bun: Build failures reported
3. Turbopuffer: Object storage architecture means ~500ms cold query latency
4. Platform-specific auth (Supabase Auth, Firebase Auth) requires matching database
5. NoSQL databases (MongoDB, Firebase, Convex) don't work with SQL ORMs
6. Edge runtimes have limitations with heavy dependencies
7. MLX only works on Apple Silicon

Respond with a JSON object containing:
- issues: Array of {severity, title, description, suggestion}
- recommendations: Array of strings with improvement suggestions
- confidence: Number 0-1 indicating confidence in the analysis"""

USER_PROMPT_TEMPLATE = """\
Analyze this project configuration for potential issues, incompatibilities, or suboptimal choices:

{summary}

Return your analysis as a JSON object with the structure:
{{
  "issues": [{{"severity": "error|warning|info", "title": "...", "description": "...", "suggestion": "..."}}],
  "recommendations": ["..."],
  "confidence": 0.0-1.0
}}

Only return the JSON object, no other text."""

# Confidence used when the reviewer answered but its text was not parseable JSON.
UNPARSEABLE_CONFIDENCE = 0.5

# Confidence assumed when a parsed JSON reply omits the field or gives a non-number.
REPORTED_CONFIDENCE_DEFAULT = 0.8

_SEVERITY_VALUES = {severity.value for severity in IssueSeverity}


@runtime_checkable
class SecondaryValidator(Protocol):
    """Anything that can review a configuration asynchronously."""

    async def review(self, config: ProjectConfig) -> AdvisoryResult:
        ...


# ---------------------------------------------------------------------------
# Helpers
# ---------------------------------------------------------------------------


def format_config_for_review(config: ProjectConfig) -> str:
    """Render *config* as the plain-text block embedded in the review prompt."""
    return (
        f"Project: {config.name}\n"
        f"Description: {config.description}\n"
        f"Type: {config.type.value}\n"
        f"Runtime: {config.runtime.value}\n"
        "\n"
        "Database:\n"
        f"  Provider: {config.database_provider}\n"
        f"  ORM: {config.orm}\n"
        "\n"
        "Authentication:\n"
        f"  Provider: {config.auth_provider}\n"
        "\n"
        "AI/ML:\n"
        f"  Framework: {config.ai_framework}\n"
        f"  Vector DB: {config.vector_db}\n"
        f"  Embeddings: {config.embedding_provider}\n"
        f"  Local AI: {config.local_ai}\n"
        "\n"
        "Deployment:\n"
        f"  Complexity: {config.complexity_track.value}\n"
        f"  Web Server: {config.web_server}\n"
        f"  Port: {config.port}\n"
        f"  Domain: {config.domain or 'not set'}\n"
        "\n"
        "Additional Options:\n"
        f"  Design System: {config.use_design_system}"
    )


def _strip_code_fence(text: str) -> str:
    stripped = text.strip()
    if stripped.startswith("```json"):
        stripped = stripped[7:]
    elif stripped.startswith("```"):
        stripped = stripped[3:]
    if stripped.endswith("```"):
        stripped = stripped[:-3]
    return stripped.strip()


def _parse_issue(item: object) -> AdvisoryIssue | None:
    """Validate one reported issue; unknown severities are read as warnings."""
    if not isinstance(item, dict):
        return None
    fields = dict(item)
    severity = str(fields.get("severity", IssueSeverity.WARNING.value)).lower()
    fields["severity"] = severity if severity in _SEVERITY_VALUES else IssueSeverity.WARNING.value
    try:
        return AdvisoryIssue.model_validate(fields)
    except ValidationError:
        return None


def _parse_confidence(value: object) -> float:
    if value is None or isinstance(value, bool):
        return REPORTED_CONFIDENCE_DEFAULT
    try:
        return float(value)
    except (TypeError, ValueError):
        return REPORTED_CONFIDENCE_DEFAULT


def parse_advisory_response(text: str, provider: str | None = None) -> AdvisoryResult:
    """Parse a reviewer's reply into an ``AdvisoryResult``.

    Markdown code fences are tolerated.  Text that is not a JSON object yields
    a successful result with no issues and a confidence of ``0.5``.  Within a
    JSON object each issue is validated on its own: an unknown severity is
    read as ``warning`` and a malformed item is skipped without discarding
    the rest.  A missing or non-numeric confidence defaults to ``0.8``.

    Args:
        text: Raw reviewer output.
        provider: Label recorded on the result.

    Returns:
        A successful ``AdvisoryResult`` carrying *text* as its analysis.
    """
    try:
        data = json.loads(_strip_code_fence(text))
    except json.JSONDecodeError:
        data = None

    if not isinstance(data, dict):
        return AdvisoryResult(
            success=True,
            provider=provider,
            analysis=text,
            confidence=UNPARSEABLE_CONFIDENCE,
        )

    raw_issues = data.get("issues") or []
    raw_recommendations = data.get("recommendations") or []
    if not isinstance(raw_issues, list):
        raw_issues = []
    if not isinstance(raw_recommendations, list):
        raw_recommendations = []

    issues = [issue for issue in map(_parse_issue, raw_issues) if issue is not None]
    recommendations = [str(item) for item in raw_recommendations]
    confidence = _parse_confidence(data.get("confidence"))

    return AdvisoryResult(
        success=True,
        provider=provider,
        analysis=text,
        issues=issues,
        recommendations=recommendations,
        confidence=min(1.0, max(0.0, confidence)),
    )


def failed_review(message: str, provider: str | None = None) -> AdvisoryResult:
    """Build the result reported when a reviewer could not produce an analysis."""
    return AdvisoryResult(
        success=False,
        provider=provider,
        analysis=f"Advisory validation failed: {message}",
        issues=[
            AdvisoryIssue(
                severity=IssueSeverity.WARNING,
                title="Advisory Validation Failed",
                description=message,
                suggestion="Falling back to rule-based validation only",
            )
        ],
        confidence=0.0,
    )


def format_advisory_result(result: AdvisoryResult) -> str:
    """Render an ``AdvisoryResult`` as plain text."""
    if not result.success:
        return f"⚠️  Advisory Validation: {result.analysis}"

    lines = [
        f"🤖 Stack review via {result.provider or 'advisor'} "
        f"({round(result.confidence * 100)}% confidence)",
        "",
    ]
    sections = (
        (IssueSeverity.ERROR, "❌ Critical Issues:", True),
        (IssueSeverity.WARNING, "⚠️  Warnings:", True),
        (IssueSeverity.INFO, "ℹ️  Notes:", False),
    )
    for severity, heading, with_suggestion in sections:
        matching = [issue for issue in result.issues if issue.severity == severity]
        if not matching:
            continue
        lines.append(heading)
        for issue in matching:
            lines.append(f"  • {issue.title}: {issue.description}")
            if with_suggestion and issue.suggestion:
                lines.append(f"    💡 {issue.suggestion}")
        lines.append("")

    if result.recommendations:
        lines.append("💡 Recommendations:")
        lines.extend(f"  • {rec}" for rec in result.recommendations)
        lines.append("")

    if not result.issues:
        lines.append("✅ No issues detected - stack looks good!")

    return "\n".join(lines)


# ---------------------------------------------------------------------------
# Ollama implementation
# ---------------------------------------------------------------------------


class OllamaAdvisor:
    """``SecondaryValidator`` that asks a local Ollama model for a review.

    Before generating, the server is checked and the model is looked up in
    the local tags; a missing server or model is reported as a failed review
    naming the fix.  Generation is a single request with no retry.  Every
    failure mode comes back as an unsuccessful ``AdvisoryResult`` rather
    than an exception.
    """

    def __init__(self, client: OllamaClient | None = None, model: str = "llama3.1:8b") -> None:
        self.client = client or OllamaClient()
        self.model = model

    @property
    def provider(self) -> str:
        return f"ollama:{self.model}"

    async def review(self, config: ProjectConfig) -> AdvisoryResult:
        """Review *config* and return the parsed advisory result."""
        if not await self.client.is_available():
            return failed_review(
                f"Cannot connect to Ollama at {self.client.base_url}. Is the server running?",
                provider=self.provider,
            )
        if not await self.client.has_model(self.model):
            return failed_review(
                f"Model '{self.model}' is not pulled. Run: ollama pull {self.model}",
                provider=self.provider,
            )

        prompt = USER_PROMPT_TEMPLATE.format(summary=format_config_for_review(config))
        response = await self.client.generate(
            prompt,
            model=self.model,
            system=SYSTEM_PROMPT,
            json_mode=True,
            temperature=0.1,
        )
        if not response.success:
            return failed_review(response.error or "unknown error", provider=self.provider)
        if not response.text.strip():
            return failed_review("Empty response from model", provider=self.provider)
        return parse_advisory_response(response.text, provider=self.provider)
