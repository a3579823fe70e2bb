"""Tests for per-namespace resolvers and their failure containment."""

from unittest.mock import MagicMock
import uuid

import pytest

from fitmarket.core.enums import EntityType, ProfileRole, ProgramStatus, ResolutionStatus
from fitmarket.core.exceptions import RepositoryException
from fitmarket.models import Sport, TrainingProgram, UserProfile
from fitmarket.monitoring.prometheus_metrics import REGISTRY
from fitmarket.services.slug_resolvers import (
    ProgramResolver,
    ResolutionOutcome,
    SportResolver,
    TrainerResolver,
)


def _trainer(slug="ana-costa"):
    return UserProfile(
        id=str(uuid.uuid4()),
        name="Ana Costa",
        slug=slug,
        role=ProfileRole.TRAINER.value,
        is_active=True,
    )


def _program(slug="strength-foundations"):
    return TrainingProgram(
        id=str(uuid.uuid4()),
        trainer_id=str(uuid.uuid4()),
        title="Strength Foundations",
        slug=slug,
        status=ProgramStatus.PUBLISHED.value,
    )


def _resolution_count(entity_type: str, method: str, outcome: str) -> float:
    value = REGISTRY.get_sample_value(
        "fitmarket_slug_resolutions_total",
        {"entity_type": entity_type, "method": method, "outcome": outcome},
    )
    return value or 0.0


class TestResolutionOutcome:
    def test_found_carries_type(self):
        resolver = TrainerResolver(MagicMock())
        resolver.repository.get_active_trainer_by_slug.return_value = _trainer()
        outcome = resolver.resolve_by_slug("ana-costa")
        assert outcome.is_found
        assert outcome.entity_type is EntityType.TRAINER

    def test_not_found_is_not_found(self):
        outcome = ResolutionOutcome.not_found(EntityType.SPORT)
        assert outcome.status is ResolutionStatus.NOT_FOUND
        assert outcome.result is None
        assert not outcome.is_found


class TestTrainerResolver:
    def test_slug_hit(self):
        repo = MagicMock()
        profile = _trainer()
        repo.get_active_trainer_by_slug.return_value = profile

        outcome = TrainerResolver(repo).resolve_by_slug("ana-costa")

        repo.get_active_trainer_by_slug.assert_called_once_with("ana-costa")
        assert outcome.result.type is EntityType.TRAINER
        assert outcome.result.id == profile.id
        assert outcome.result.slug == "ana-costa"
        assert outcome.result.data["name"] == "Ana Costa"

    def test_missing_slug_falls_back_to_id(self):
        repo = MagicMock()
        profile = _trainer(slug=None)
        repo.get_active_trainer_by_id.return_value = profile

        outcome = TrainerResolver(repo).resolve_by_id(profile.id)

        assert outcome.result.slug == profile.id

    def test_miss(self):
        repo = MagicMock()
        repo.get_active_trainer_by_slug.return_value = None
        outcome = TrainerResolver(repo).resolve_by_slug("nobody")
        assert outcome.status is ResolutionStatus.NOT_FOUND
        assert outcome.entity_type is EntityType.TRAINER

    def test_repository_failure_is_contained(self, caplog):
        repo = MagicMock()
        repo.get_active_trainer_by_slug.side_effect = RepositoryException("db down")
        before = _resolution_count("trainer", "slug", "upstream_error")

        with caplog.at_level("WARNING"):
            outcome = TrainerResolver(repo).resolve_by_slug("ana-costa")

        assert outcome.status is ResolutionStatus.UPSTREAM_ERROR
        assert outcome.result is None
        assert outcome.error == "db down"
        assert "trainer lookup by slug failed" in caplog.text
        assert _resolution_count("trainer", "slug", "upstream_error") == before + 1


class TestSportResolver:
    def test_slug_uses_external_lookup(self):
        repo = MagicMock()
        repo.resolve_slug.return_value = Sport(
            id=str(uuid.uuid4()), name="CrossFit", slug="crossfit", is_active=True
        )

        outcome = SportResolver(repo).resolve_by_slug("CrossFit")

        repo.resolve_slug.assert_called_once_with("CrossFit")
        assert outcome.result.type is EntityType.SPORT
        assert outcome.result.data == {
            "id": outcome.result.id,
            "name": "CrossFit",
            "slug": "crossfit",
        }

    def test_inactive_sport_by_id_is_a_miss(self):
        repo = MagicMock()
        repo.get_by_id.return_value = Sport(
            id=str(uuid.uuid4()), name="Water Polo", slug="water-polo", is_active=False
        )
        outcome = SportResolver(repo).resolve_by_id("any")
        assert outcome.status is ResolutionStatus.NOT_FOUND

    def test_unexpected_error_is_contained(self):
        repo = MagicMock()
        repo.resolve_slug.side_effect = RuntimeError("boom")
        outcome = SportResolver(repo).resolve_by_slug("crossfit")
        assert outcome.status is ResolutionStatus.UPSTREAM_ERROR


class TestProgramResolver:
    def test_slug_hit(self):
        repo = MagicMock()
        repo.get_public_by_slug.return_value = _program()
        outcome = ProgramResolver(repo).resolve_by_slug("strength-foundations")
        assert outcome.result.type is EntityType.PROGRAM
        assert outcome.result.data["title"] == "Strength Foundations"

    def test_program_without_slug_uses_id(self):
        repo = MagicMock()
        program = _program(slug=None)
        repo.get_public_by_id.return_value = program

        outcome = ProgramResolver(repo).resolve_by_id(program.id)

        assert outcome.result.slug == program.id
        assert outcome.result.data["slug"] is None

    @pytest.mark.parametrize("method", ["resolve_by_slug", "resolve_by_id"])
    def test_failures_are_contained(self, method):
        repo = MagicMock()
        repo.get_public_by_slug.side_effect = RepositoryException("timeout")
        repo.get_public_by_id.side_effect = RepositoryException("timeout")
        outcome = getattr(ProgramResolver(repo), method)("token")
        assert outcome.status is ResolutionStatus.UPSTREAM_ERROR
        assert outcome.entity_type is EntityType.PROGRAM
