# backend/fitmarket/services/slug_resolvers.py
"""
Per-namespace resolvers for public path identifiers.

Each resolver maps a token to at most one entity of its own type and makes
exactly one repository call per lookup. Failures below the resolver are
caught here: callers get an ``upstream_error`` outcome instead of an
exception, so a database outage degrades to "not found" at the public
boundary while staying visible in logs and metrics.
"""

from __future__ import annotations

from dataclasses import dataclass
import logging
from typing import Callable, Optional

from ..core.enums import EntityType, ResolutionStatus
from ..models.sport import Sport
from ..models.training_program import TrainingProgram
from ..models.user_profile import UserProfile
from ..monitoring.prometheus_metrics import prometheus_metrics
from ..repositories.sport_repository import SportRepository
from ..repositories.training_program_repository import TrainingProgramRepository
from ..repositories.user_profile_repository import UserProfileRepository
from ..schemas.slug import SlugResult

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class ResolutionOutcome:
    """Tagged result of a resolution attempt: found, not_found or upstream_error."""

    status: ResolutionStatus
    entity_type: Optional[EntityType] = None
    result: Optional[SlugResult] = None
    error: Optional[str] = None

    @classmethod
    def found(cls, result: SlugResult) -> "ResolutionOutcome":
        return cls(ResolutionStatus.FOUND, result.type, result)

    @classmethod
    def not_found(cls, entity_type: Optional[EntityType] = None) -> "ResolutionOutcome":
        return cls(ResolutionStatus.NOT_FOUND, entity_type)

    @classmethod
    def upstream_error(
        cls, entity_type: Optional[EntityType], error: str
    ) -> "ResolutionOutcome":
        return cls(ResolutionStatus.UPSTREAM_ERROR, entity_type, error=error)

    @property
    def is_found(self) -> bool:
        return self.status is ResolutionStatus.FOUND


class EntityResolver:
    """
    Base resolver: subclasses provide the two lookups, this class guards them.

    Attributes:
        entity_type: Namespace this resolver answers for
        repository: Data access object the lookups delegate to
    """

    entity_type: EntityType

    def __init__(self, repository: object) -> None:
        self.repository = repository
        self.logger = logging.getLogger(self.__class__.__name__)

    def resolve_by_slug(self, slug: str) -> ResolutionOutcome:
        return self._guarded("slug", slug, self._lookup_by_slug)

    def resolve_by_id(self, entity_id: str) -> ResolutionOutcome:
        return self._guarded("id", entity_id, self._lookup_by_id)

    def _lookup_by_slug(self, slug: str) -> Optional[SlugResult]:
        raise NotImplementedError

    def _lookup_by_id(self, entity_id: str) -> Optional[SlugResult]:
        raise NotImplementedError

    def _guarded(
        self,
        method: str,
        token: str,
        lookup: Callable[[str], Optional[SlugResult]],
    ) -> ResolutionOutcome:
        entity_type = self.entity_type.value
        try:
            result = lookup(token)
        except Exception as exc:
            self.logger.warning(
                "%s lookup by %s failed for %r: %s",
                entity_type,
                method,
                token,
                exc,
                exc_info=True,
                extra={"entity_type": entity_type, "method": method, "token": token},
            )
            prometheus_metrics.record_slug_resolution(
                entity_type, method, ResolutionStatus.UPSTREAM_ERROR.value
            )
            return ResolutionOutcome.upstream_error(self.entity_type, str(exc))

        if result is None:
            prometheus_metrics.record_slug_resolution(
                entity_type, method, ResolutionStatus.NOT_FOUND.value
            )
            return ResolutionOutcome.not_found(self.entity_type)

        self.logger.debug("Resolved %r as %s %s", token, entity_type, result.id)
        prometheus_metrics.record_slug_resolution(entity_type, method, ResolutionStatus.FOUND.value)
        return ResolutionOutcome.found(result)


class TrainerResolver(EntityResolver):
    """Active profiles with the trainer role."""

    entity_type = EntityType.TRAINER

    def __init__(self, repository: UserProfileRepository) -> None:
        super().__init__(repository)

    def _lookup_by_slug(self, slug: str) -> Optional[SlugResult]:
        return self._to_result(self.repository.get_active_trainer_by_slug(slug))

    def _lookup_by_id(self, entity_id: str) -> Optional[SlugResult]:
        return self._to_result(self.repository.get_active_trainer_by_id(entity_id))

    @staticmethod
    def _to_result(profile: Optional[UserProfile]) -> Optional[SlugResult]:
        if profile is None:
            return None
        return SlugResult(
            type=EntityType.TRAINER,
            id=profile.id,
            slug=profile.slug or profile.id,
            data=profile.to_dict(),
        )


class SportResolver(EntityResolver):
    """Active sports; slug matching is delegated to SportRepository.resolve_slug."""

    entity_type = EntityType.SPORT

    def __init__(self, repository: SportRepository) -> None:
        super().__init__(repository)

    def _lookup_by_slug(self, slug: str) -> Optional[SlugResult]:
        return self._to_result(self.repository.resolve_slug(slug))

    def _lookup_by_id(self, entity_id: str) -> Optional[SlugResult]:
        sport = self.repository.get_by_id(entity_id)
        if sport is not None and not sport.is_active:
            return None
        return self._to_result(sport)

    @staticmethod
    def _to_result(sport: Optional[Sport]) -> Optional[SlugResult]:
        if sport is None:
            return None
        return SlugResult(
            type=EntityType.SPORT,
            id=sport.id,
            slug=sport.slug,
            data={"id": sport.id, "name": sport.name, "slug": sport.slug},
        )


class ProgramResolver(EntityResolver):
    """Programs in a public status; the id stands in for a missing slug."""

    entity_type = EntityType.PROGRAM

    def __init__(self, repository: TrainingProgramRepository) -> None:
        super().__init__(repository)

    def _lookup_by_slug(self, slug: str) -> Optional[SlugResult]:
        return self._to_result(self.repository.get_public_by_slug(slug))

    def _lookup_by_id(self, entity_id: str) -> Optional[SlugResult]:
        return self._to_result(self.repository.get_public_by_id(entity_id))

    @staticmethod
    def _to_result(program: Optional[TrainingProgram]) -> Optional[SlugResult]:
        if program is None:
            return None
        return SlugResult(
            type=EntityType.PROGRAM,
            id=program.id,
            slug=program.slug or program.id,
            data=program.to_dict(),
        )
