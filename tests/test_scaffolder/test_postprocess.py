"""Tests for the feature post-processor (express_start.scaffolder.postprocess)."""

from __future__ import annotations

from pathlib import Path

import pytest

from express_start.config import Config
from express_start.scaffolder.postprocess import (
    PROTOTYPE_DECLARATIONS,
    TYPES_DECLARATION_PATH,
    FeaturePostProcessor,
)


pytestmark = pytest.mark.unit


@pytest.fixture
def processor() -> FeaturePostProcessor:
    return FeaturePostProcessor(Config().template_dir)


class TestTypeDeclarations:
    @pytest.mark.asyncio
    @pytest.mark.parametrize("extend", [True, False])
    async def test_written_for_typescript(self, processor, tmp_path, make_answers, extend):
        answers = make_answers(language="TypeScript", extend_prototypes=extend)
        produced = await processor.apply(tmp_path, answers)
        target = tmp_path / TYPES_DECLARATION_PATH
        assert target in produced
        assert target.read_text(encoding="utf-8") == PROTOTYPE_DECLARATIONS

    @pytest.mark.asyncio
    async def test_not_written_for_javascript(self, processor, tmp_path, make_answers):
        await processor.apply(tmp_path, make_answers(language="JavaScript", extend_prototypes=True))
        assert not (tmp_path / "src" / "types").exists()

    def test_declares_helpers(self):
        assert "binarySearch(" in PROTOTYPE_DECLARATIONS
        assert "chunk(size: number): T[][];" in PROTOTYPE_DECLARATIONS
        assert "pick<" in PROTOTYPE_DECLARATIONS
        assert "declare global" in PROTOTYPE_DECLARATIONS


class TestOrmArtefacts:
    @pytest.mark.asyncio
    async def test_prisma_directory_copied(self, processor, tmp_path, make_answers):
        await processor.apply(tmp_path, make_answers(orm="Prisma"))
        source = processor.template_dir / "prisma" / "schema.prisma"
        copied = tmp_path / "prisma" / "schema.prisma"
        assert copied.read_bytes() == source.read_bytes()
        assert not (tmp_path / "src" / "models").exists()

    @pytest.mark.asyncio
    async def test_sequelize_models_dir_is_empty(self, processor, tmp_path, make_answers):
        await processor.apply(tmp_path, make_answers(orm="Sequelize"))
        models = tmp_path / "src" / "models"
        assert models.is_dir()
        assert list(models.iterdir()) == []
        assert not (tmp_path / "prisma").exists()

    @pytest.mark.asyncio
    async def test_no_orm(self, processor, tmp_path, make_answers):
        produced = await processor.apply(tmp_path, make_answers(orm="None"))
        assert produced == []
        assert list(tmp_path.iterdir()) == []


class TestReinvocation:
    @pytest.mark.asyncio
    @pytest.mark.parametrize("orm", ["Prisma", "Sequelize"])
    async def test_apply_twice(self, processor, tmp_path, make_answers, orm):
        answers = make_answers(language="TypeScript", orm=orm)
        first = await processor.apply(tmp_path, answers)
        second = await processor.apply(tmp_path, answers)
        assert first == second
