"""AI framework, vector database, embedding and local inference catalogs."""

from __future__ import annotations

from kickoff.knowledge.models import (
    AIOption,
    Complexity,
    CostTier,
    EmbeddingOption,
    LocalAIOption,
    Runtime,
    VectorDBOption,
)

_JS = (Runtime.NODE, Runtime.BUN, Runtime.DENO)
_PY = (Runtime.PYTHON,)
_FREE = CostTier(free=True)


AI_FRAMEWORKS: tuple[AIOption, ...] = (
    AIOption(
        id="vercel-ai",
        name="Vercel AI SDK",
        description="TypeScript toolkit for streaming chat UIs and tool calling across providers.",
        pros=("Streaming UI helpers", "Provider agnostic", "Popular with Next.js developers"),
        cons=("TypeScript only",),
        tradeoffs=("Thin SDK versus a full agent framework",),
        best_for=("chat interfaces", "streaming AI features in web apps"),
        monthly_cost=_FREE,
        compatible_with=("nextjs", "hono", "express", "ollama", "pinecone", "chromadb", "turbopuffer"),
        complexity=Complexity.LOW,
        documentation_url="https://sdk.vercel.ai/docs",
        logo_emoji="▲",
        type="sdk",
        streaming=True,
        structured_output=True,
        agent_support=True,
        supported_providers=("openai", "anthropic", "google", "ollama"),
        supported_runtimes=_JS,
    ),
    AIOption(
        id="mastra",
        name="Mastra",
        description="TypeScript agent framework with workflows, memory and evals.",
        pros=("Agents and workflows out of the box", "Built-in evals"),
        cons=("Young project", "API still changing"),
        best_for=("agentic TypeScript apps",),
        monthly_cost=_FREE,
        compatible_with=("vercel-ai", "pgvector", "pinecone"),
        complexity=Complexity.MEDIUM,
        documentation_url="https://mastra.ai/docs",
        logo_emoji="🧭",
        type="framework",
        streaming=True,
        structured_output=True,
        agent_support=True,
        supported_providers=("openai", "anthropic", "google"),
        supported_runtimes=_JS,
    ),
    AIOption(
        id="instructor",
        name="Instructor",
        description="Structured LLM outputs validated with Pydantic.",
        pros=("Reliable structured output", "Tiny API surface"),
        cons=("Not an agent framework",),
        best_for=("data extraction", "typed LLM responses"),
        monthly_cost=_FREE,
        compatible_with=("fastapi", "ollama"),
        complexity=Complexity.LOW,
        documentation_url="https://python.useinstructor.com",
        logo_emoji="📐",
        type="sdk",
        structured_output=True,
        supported_providers=("openai", "anthropic", "ollama"),
        supported_runtimes=_PY + _JS,
    ),
    AIOption(
        id="langchain",
        name="LangChain",
        description="Composable framework for LLM chains, agents and retrieval.",
        pros=("Large community", "Integrations for every vector store"),
        cons=("Heavy abstractions", "Frequent API churn"),
        tradeoffs=("Breadth of integrations versus abstraction overhead",),
        best_for=("RAG pipelines", "multi-step agents"),
        monthly_cost=_FREE,
        compatible_with=("pinecone", "chromadb", "qdrant", "weaviate", "ollama"),
        complexity=Complexity.HIGH,
        documentation_url="https://python.langchain.com",
        logo_emoji="🦜",
        type="framework",
        streaming=True,
        structured_output=True,
        agent_support=True,
        supported_providers=("openai", "anthropic", "google", "ollama", "cohere"),
        supported_runtimes=_PY + _JS,
    ),
    AIOption(
        id="llamaindex",
        name="LlamaIndex",
        description="Data framework for connecting LLMs to your documents.",
        pros=("Strong ingestion and indexing", "Active development"),
        cons=("Python-first, TypeScript port lags",),
        best_for=("document Q&A", "knowledge-base RAG"),
        monthly_cost=_FREE,
        compatible_with=("pinecone", "chromadb", "qdrant", "weaviate", "fastapi"),
        complexity=Complexity.MEDIUM,
        documentation_url="https://docs.llamaindex.ai",
        logo_emoji="🦙",
        type="framework",
        streaming=True,
        agent_support=True,
        supported_providers=("openai", "anthropic", "ollama"),
        supported_runtimes=_PY + (Runtime.NODE,),
    ),
    AIOption(
        id="semantic-kernel",
        name="Semantic Kernel",
        description="Microsoft's SDK for orchestrating AI plugins and planners.",
        pros=("Enterprise backing", "Azure OpenAI integration"),
        cons=("Smaller community outside .NET",),
        best_for=("enterprise copilots on Azure",),
        monthly_cost=_FREE,
        complexity=Complexity.HIGH,
        documentation_url="https://learn.microsoft.com/semantic-kernel",
        logo_emoji="🧠",
        type="framework",
        agent_support=True,
        supported_providers=("openai", "azure-openai"),
        supported_runtimes=_PY,
    ),
)


VECTOR_DATABASES: tuple[VectorDBOption, ...] = (
    VectorDBOption(
        id="pinecone",
        name="Pinecone",
        description="Fully managed serverless vector database.",
        pros=("Zero operations", "Mature and widely used for RAG"),
        cons=("Proprietary", "Costs grow with index size"),
        best_for=("production RAG", "semantic search at scale"),
        monthly_cost=CostTier(free=True, hobbyist="$0-50/mo", startup="$50-500/mo", enterprise="custom"),
        required_env_vars=("PINECONE_API_KEY",),
        compatible_with=("vercel-ai", "langchain", "llamaindex", "openai-embeddings", "voyage-embeddings"),
        complexity=Complexity.LOW,
        documentation_url="https://docs.pinecone.io",
        logo_emoji="🌲",
        hosting="managed",
        max_dimensions=20000,
        hybrid_search=True,
        filtering=True,
        supported_runtimes=_JS + _PY,
    ),
    VectorDBOption(
        id="turbopuffer",
        name="turbopuffer",
        description="Object-storage backed vector search priced for huge namespaces.",
        pros=("Very cheap at scale", "Fast warm queries"),
        cons=("Cold queries can take hundreds of milliseconds", "Newer service"),
        tradeoffs=("Storage cost versus cold-start latency",),
        best_for=("multi-tenant search with many namespaces",),
        monthly_cost=CostTier(free=False, hobbyist="$64/mo", startup="$64-500/mo"),
        required_env_vars=("TURBOPUFFER_API_KEY",),
        compatible_with=("vercel-ai", "openai-embeddings"),
        complexity=Complexity.MEDIUM,
        documentation_url="https://turbopuffer.com/docs",
        logo_emoji="🐡",
        hosting="managed",
        max_dimensions=10752,
        hybrid_search=True,
        filtering=True,
        supported_runtimes=_JS + _PY,
    ),
    VectorDBOption(
        id="supabase-vector",
        name="Supabase Vector",
        description="pgvector-powered vector storage inside Supabase.",
        pros=("Vectors next to relational data", "No extra service"),
        cons=("Requires Supabase as the database",),
        best_for=("Supabase apps adding semantic search",),
        monthly_cost=CostTier(free=True),
        compatible_with=("supabase", "openai-embeddings"),
        complexity=Complexity.LOW,
        documentation_url="https://supabase.com/docs/guides/ai",
        logo_emoji="⚡",
        hosting="managed",
        max_dimensions=2000,
        filtering=True,
        supported_runtimes=_JS + _PY,
    ),
    VectorDBOption(
        id="pgvector",
        name="pgvector",
        description="Vector similarity search extension for PostgreSQL.",
        pros=("Use your existing Postgres", "Mature and established"),
        cons=("Index tuning needed at scale",),
        best_for=("Postgres apps adding embeddings",),
        monthly_cost=CostTier(free=True),
        compatible_with=("supabase", "neon", "postgres-local", "drizzle", "prisma"),
        incompatible_with=frozenset({"mysql-local", "mongodb-local", "turso", "d1"}),
        complexity=Complexity.MEDIUM,
        documentation_url="https://github.com/pgvector/pgvector",
        logo_emoji="🐘",
        hosting="self-hosted",
        max_dimensions=2000,
        filtering=True,
        supported_runtimes=_JS + _PY + (Runtime.GO, Runtime.RUST),
    ),
    VectorDBOption(
        id="qdrant",
        name="Qdrant",
        description="Rust-based vector search engine with rich filtering.",
        pros=("Fast payload filtering", "Self-host or managed"),
        cons=("Another service to operate",),
        best_for=("filtered semantic search",),
        monthly_cost=CostTier(free=True, hobbyist="$0-25/mo", startup="$25-300/mo"),
        required_env_vars=("QDRANT_URL",),
        compatible_with=("langchain", "llamaindex"),
        complexity=Complexity.MEDIUM,
        documentation_url="https://qdrant.tech/documentation",
        logo_emoji="🔷",
        hosting="self-hosted",
        max_dimensions=65536,
        hybrid_search=True,
        filtering=True,
        supported_runtimes=_JS + _PY + (Runtime.GO, Runtime.RUST),
    ),
    VectorDBOption(
        id="weaviate",
        name="Weaviate",
        description="Open-source vector database with built-in vectorizer modules.",
        pros=("Built-in vectorizers", "GraphQL API"),
        cons=("Memory hungry",),
        best_for=("hybrid keyword and vector search",),
        monthly_cost=CostTier(free=True, hobbyist="$25/mo", startup="$25-500/mo"),
        required_env_vars=("WEAVIATE_URL",),
        compatible_with=("langchain", "llamaindex"),
        complexity=Complexity.MEDIUM,
        documentation_url="https://weaviate.io/developers/weaviate",
        logo_emoji="🧬",
        hosting="managed",
        max_dimensions=65536,
        hybrid_search=True,
        filtering=True,
        supported_runtimes=_JS + _PY + (Runtime.GO,),
    ),
    VectorDBOption(
        id="chromadb",
        name="Chroma",
        description="Open-source embedding database that runs embedded or as a server.",
        pros=("Runs in-process for local development", "Free and open source"),
        cons=("Less mature for large production loads",),
        best_for=("local RAG prototypes", "fully local AI stacks"),
        monthly_cost=CostTier(free=True),
        compatible_with=("langchain", "llamaindex", "ollama", "local-embeddings"),
        complexity=Complexity.LOW,
        documentation_url="https://docs.trychroma.com",
        logo_emoji="🎨",
        hosting="embedded",
        max_dimensions=4096,
        filtering=True,
        supported_runtimes=_JS + _PY,
    ),
    VectorDBOption(
        id="milvus",
        name="Milvus",
        description="Distributed vector database for billion-scale search.",
        pros=("Scales to billions of vectors", "GPU indexing"),
        cons=("Complex to operate",),
        best_for=("very large vector workloads",),
        monthly_cost=CostTier(free=True, startup="$99+/mo", enterprise="custom"),
        required_env_vars=("MILVUS_URI",),
        complexity=Complexity.HIGH,
        documentation_url="https://milvus.io/docs",
        logo_emoji="🐦",
        hosting="self-hosted",
        max_dimensions=32768,
        hybrid_search=True,
        filtering=True,
        supported_runtimes=_JS + _PY + (Runtime.GO,),
    ),
)


EMBEDDING_PROVIDERS: tuple[EmbeddingOption, ...] = (
    EmbeddingOption(
        id="openai-embeddings",
        name="OpenAI Embeddings",
        description="text-embedding-3 models from OpenAI.",
        pros=("Widely used default", "Adjustable dimensions"),
        cons=("Data leaves your infrastructure",),
        best_for=("general-purpose RAG",),
        monthly_cost=CostTier(free=False, hobbyist="$1-10/mo"),
        required_env_vars=("OPENAI_API_KEY",),
        compatible_with=("pinecone", "pgvector", "supabase-vector", "turbopuffer"),
        complexity=Complexity.LOW,
        documentation_url="https://platform.openai.com/docs/guides/embeddings",
        logo_emoji="🤖",
        type="cloud",
        models=("text-embedding-3-small", "text-embedding-3-large"),
        max_tokens=8191,
        cost_per_1m_tokens="$0.02",
        supported_runtimes=_JS + _PY,
    ),
    EmbeddingOption(
        id="voyage-embeddings",
        name="Voyage AI",
        description="Retrieval-tuned embedding models.",
        pros=("Top retrieval benchmarks", "Domain-specific models"),
        cons=("Smaller provider",),
        best_for=("high-accuracy retrieval",),
        monthly_cost=CostTier(free=True, hobbyist="$1-10/mo"),
        required_env_vars=("VOYAGE_API_KEY",),
        compatible_with=("pinecone",),
        complexity=Complexity.LOW,
        documentation_url="https://docs.voyageai.com",
        logo_emoji="⛵",
        type="cloud",
        models=("voyage-3", "voyage-code-3"),
        max_tokens=32000,
        cost_per_1m_tokens="$0.06",
        supported_runtimes=_JS + _PY,
    ),
    EmbeddingOption(
        id="cohere-embeddings",
        name="Cohere Embed",
        description="Multilingual embedding models from Cohere.",
        pros=("Strong multilingual support",),
        cons=("Smaller ecosystem",),
        best_for=("multilingual search",),
        monthly_cost=CostTier(free=True, hobbyist="$1-10/mo"),
        required_env_vars=("COHERE_API_KEY",),
        compatible_with=("pinecone",),
        complexity=Complexity.LOW,
        documentation_url="https://docs.cohere.com/docs/embeddings",
        logo_emoji="🟣",
        type="cloud",
        models=("embed-v4.0",),
        max_tokens=512,
        cost_per_1m_tokens="$0.10",
        supported_runtimes=_JS + _PY,
    ),
    EmbeddingOption(
        id="google-embeddings",
        name="Google Embeddings",
        description="Gemini embedding models from Google.",
        pros=("Generous free quota",),
        cons=("Quota limits on the free tier",),
        best_for=("Google Cloud projects",),
        monthly_cost=CostTier(free=True),
        required_env_vars=("GOOGLE_API_KEY",),
        complexity=Complexity.LOW,
        documentation_url="https://ai.google.dev/gemini-api/docs/embeddings",
        logo_emoji="🔵",
        type="cloud",
        models=("gemini-embedding-001",),
        max_tokens=2048,
        supported_runtimes=_JS + _PY,
    ),
    EmbeddingOption(
        id="together-embeddings",
        name="Together AI Embeddings",
        description="Open-weight embedding models served by Together AI.",
        pros=("Open models, hosted",),
        cons=("Smaller community",),
        best_for=("open-model stacks without self-hosting",),
        monthly_cost=CostTier(free=False, hobbyist="$1-5/mo"),
        required_env_vars=("TOGETHER_API_KEY",),
        complexity=Complexity.LOW,
        documentation_url="https://docs.together.ai/docs/embeddings-overview",
        logo_emoji="🤝",
        type="cloud",
        models=("BAAI/bge-large-en-v1.5",),
        max_tokens=512,
        cost_per_1m_tokens="$0.016",
        supported_runtimes=_JS + _PY,
    ),
    EmbeddingOption(
        id="local-embeddings",
        name="Local Embeddings (Ollama)",
        description="Embedding models such as nomic-embed-text served locally by Ollama.",
        pros=("Private and free", "Works offline"),
        cons=("Needs local compute",),
        best_for=("fully local RAG", "privacy-sensitive data"),
        monthly_cost=CostTier(free=True),
        compatible_with=("ollama", "chromadb"),
        complexity=Complexity.LOW,
        documentation_url="https://ollama.com/blog/embedding-models",
        logo_emoji="🏠",
        type="local",
        models=("nomic-embed-text", "mxbai-embed-large"),
        max_tokens=8192,
        supported_runtimes=_JS + _PY,
    ),
    EmbeddingOption(
        id="huggingface-embeddings",
        name="Hugging Face Embeddings",
        description="Sentence-transformers models run locally or via inference endpoints.",
        pros=("Thousands of models", "Large community"),
        cons=("Model selection is overwhelming",),
        best_for=("custom or fine-tuned embeddings",),
        monthly_cost=CostTier(free=True, startup="$0.03/hr+ endpoints"),
        complexity=Complexity.MEDIUM,
        documentation_url="https://huggingface.co/docs/sentence-transformers",
        logo_emoji="🤗",
        type="local",
        models=("all-MiniLM-L6-v2", "bge-small-en-v1.5"),
        max_tokens=512,
        supported_runtimes=_PY,
    ),
    EmbeddingOption(
        id="fastembed",
        name="FastEmbed",
        description="Lightweight ONNX embedding library from Qdrant.",
        pros=("CPU friendly", "No PyTorch dependency"),
        cons=("Limited model list",),
        best_for=("embedding on small servers",),
        monthly_cost=CostTier(free=True),
        compatible_with=("qdrant",),
        complexity=Complexity.LOW,
        documentation_url="https://qdrant.github.io/fastembed",
        logo_emoji="⚡",
        type="local",
        models=("BAAI/bge-small-en-v1.5",),
        max_tokens=512,
        supported_runtimes=_PY,
    ),
)


def _local(
    id: str,
    name: str,
    description: str,
    platform: str,
    best_for: tuple[str, ...],
    *,
    complexity: Complexity = Complexity.LOW,
    gpu_required: bool = False,
    min_memory_gb: int = 8,
    api_compatibility: str = "openai",
    pros: tuple[str, ...] = (),
    cons: tuple[str, ...] = (),
    documentation_url: str | None = None,
    compatible_with: tuple[str, ...] = (),
) -> LocalAIOption:
    return LocalAIOption(
        id=id,
        name=name,
        description=description,
        pros=pros,
        cons=cons,
        best_for=best_for,
        monthly_cost=_FREE,
        compatible_with=compatible_with,
        complexity=complexity,
        documentation_url=documentation_url,
        logo_emoji="🖥️",
        platform=platform,
        gpu_required=gpu_required,
        min_memory_gb=min_memory_gb,
        api_compatibility=api_compatibility,
    )


LOCAL_AI_PROVIDERS: tuple[LocalAIOption, ...] = (
    _local(
        "ollama", "Ollama", "Run open models locally with one command.", "cross-platform",
        ("local development", "private chat assistants"),
        pros=("One-command model pulls", "Popular with a large community"),
        cons=("Limited batching for production",),
        documentation_url="https://github.com/ollama/ollama/tree/main/docs",
        api_compatibility="both",
        compatible_with=("vercel-ai", "langchain", "chromadb", "local-embeddings"),
    ),
    _local(
        "lmstudio", "LM Studio", "Desktop app for discovering and serving local models.", "cross-platform",
        ("non-technical local model use",),
        pros=("Friendly desktop UI",),
        cons=("Closed source desktop app",),
        documentation_url="https://lmstudio.ai/docs",
    ),
    _local(
        "jan", "Jan", "Open-source offline ChatGPT alternative.", "cross-platform",
        ("offline assistants",),
        pros=("Free and open source",),
        cons=("Smaller community",),
        documentation_url="https://jan.ai/docs",
    ),
    _local(
        "mlx", "MLX", "Apple's array framework for machine learning on Apple silicon.", "apple-silicon",
        ("Apple silicon research", "on-device fine-tuning"),
        complexity=Complexity.MEDIUM,
        min_memory_gb=16,
        api_compatibility="custom",
        pros=("Unified memory on M-series chips",),
        cons=("Apple silicon only",),
        documentation_url="https://ml-explore.github.io/mlx",
    ),
    _local(
        "mlx-lm", "MLX LM", "LLM inference and fine-tuning on top of MLX.", "apple-silicon",
        ("running LLMs on a Mac",),
        complexity=Complexity.MEDIUM,
        min_memory_gb=16,
        pros=("Fast generation on M-series chips",),
        cons=("Apple silicon only",),
        documentation_url="https://github.com/ml-explore/mlx-lm",
    ),
    _local(
        "vllm", "vLLM", "High-throughput LLM serving with paged attention.", "linux-cuda",
        ("production self-hosted inference",),
        complexity=Complexity.HIGH,
        gpu_required=True,
        min_memory_gb=24,
        pros=("Highest throughput open serving stack", "Active development"),
        cons=("Needs NVIDIA GPUs",),
        documentation_url="https://docs.vllm.ai",
    ),
    _local(
        "localai", "LocalAI", "Drop-in OpenAI API replacement running on consumer hardware.", "docker",
        ("self-hosted OpenAI-compatible APIs",),
        complexity=Complexity.MEDIUM,
        pros=("OpenAI compatible API",),
        cons=("Configuration heavy",),
        documentation_url="https://localai.io/docs",
    ),
    _local(
        "tgi", "Text Generation Inference", "Hugging Face's production LLM server.", "linux-cuda",
        ("serving Hugging Face models in production",),
        complexity=Complexity.HIGH,
        gpu_required=True,
        min_memory_gb=24,
        api_compatibility="both",
        pros=("Battle tested at Hugging Face",),
        cons=("Needs NVIDIA GPUs",),
        documentation_url="https://huggingface.co/docs/text-generation-inference",
    ),
    _local(
        "llamacpp", "llama.cpp", "Portable C++ inference for GGUF models.", "cross-platform",
        ("CPU inference", "edge devices"),
        complexity=Complexity.MEDIUM,
        min_memory_gb=4,
        pros=("Runs almost anywhere", "Active development"),
        cons=("Manual model conversion",),
        documentation_url="https://github.com/ggerganov/llama.cpp",
    ),
)
