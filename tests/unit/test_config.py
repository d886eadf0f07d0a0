"""Unit tests for RAG configuration."""

import pytest

from src.rag.config import RAGConfig, get_rag_config


@pytest.fixture
def clean_env(monkeypatch):
    for name in [
        "DATABASE_URL", "OPENAI_API_KEY", "QDRANT_URL", "QDRANT_API_KEY",
        "RAG_DATABASE_URL", "RAG_EMBEDDING_API_KEY", "RAG_QDRANT_URL", "RAG_QDRANT_API_KEY",
        "RAG_CHUNK_SIZE", "RAG_ENVIRONMENT",
    ]:
        monkeypatch.delenv(name, raising=False)
    return monkeypatch


class TestRAGConfig:
    """Tests for RAGConfig defaults and env loading."""

    def test_defaults(self, clean_env):
        config = RAGConfig(_env_file=None)

        assert config.embedding_dimension == 1536
        assert config.embedding_model == "text-embedding-ada-002"
        assert config.chunk_size == 1000
        assert config.chunk_overlap == 200
        assert config.min_chunk_length == 50
        assert config.top_k == 5
        assert not config.is_production

    def test_prefixed_env(self, clean_env):
        clean_env.setenv("RAG_CHUNK_SIZE", "500")
        clean_env.setenv("RAG_ENVIRONMENT", "Production")

        config = RAGConfig(_env_file=None)

        assert config.chunk_size == 500
        assert config.is_production

    @pytest.mark.parametrize("raw,origins", [
        ("*", ["*"]),
        ("http://localhost:3000, https://letters.example.com", ["http://localhost:3000", "https://letters.example.com"]),
        ("", []),
    ])
    def test_allowed_origins(self, raw, origins):
        assert RAGConfig(cors_origins=raw).allowed_origins == origins


class TestGetRagConfig:
    """Tests for unprefixed environment fallbacks."""

    def test_unprefixed_fallbacks(self, clean_env):
        clean_env.setenv("DATABASE_URL", "postgresql://shared/letters")
        clean_env.setenv("OPENAI_API_KEY", "sk-shared")

        config = get_rag_config()

        assert config.database_url == "postgresql://shared/letters"
        assert config.embedding_api_key == "sk-shared"

    def test_prefixed_wins(self, clean_env):
        clean_env.setenv("OPENAI_API_KEY", "sk-shared")
        clean_env.setenv("RAG_EMBEDDING_API_KEY", "sk-rag")

        assert get_rag_config().embedding_api_key == "sk-rag"

    def test_overrides_win(self, clean_env):
        clean_env.setenv("DATABASE_URL", "postgresql://shared/letters")

        config = get_rag_config(database_url="postgresql://override/letters")

        assert config.database_url == "postgresql://override/letters"
