# backend/fitmarket/services/slug_resolution_service.py
"""
Identifier resolution and canonicalization.

Turns a public path segment into exactly one trainer, sport or program:
    resolve_slug(token)           → slug lookups, trainer > sport > program
    resolve_by_slug_or_id(token)  → UUID lookups first (trainer > program), then slugs
    resolve_canonical(token, ...) → the above plus the page redirect decision

The priority order is data (``slug_strategies`` / ``id_strategies``), not
control flow. Resolver failures never escape; the ``*_outcome`` variants
keep "not found" and "upstream error" apart for callers that care.
"""

from __future__ import annotations

from dataclasses import dataclass
import logging
from typing import Callable, Optional, Sequence, Tuple

from sqlalchemy.orm import Session

from ..core.enums import EntityType, RedirectReason, ResolutionStatus
from ..monitoring.prometheus_metrics import prometheus_metrics
from ..repositories.factory import RepositoryFactory
from ..schemas.slug import SlugResult
from ..utils.seo_urls import CanonicalRedirect, plan_canonical_redirect
from ..utils.slug import is_valid_uuid, strip_legacy_suffix
from .base import BaseService
from .slug_resolvers import (
    EntityResolver,
    ProgramResolver,
    ResolutionOutcome,
    SportResolver,
    TrainerResolver,
)

logger = logging.getLogger(__name__)

Strategy = Tuple[EntityType, Callable[[str], ResolutionOutcome]]


@dataclass(frozen=True)
class CanonicalResolution:
    """A resolved identifier together with its canonical URL decision."""

    result: SlugResult
    redirect: CanonicalRedirect


class SlugResolutionService(BaseService):
    """Resolve path identifiers against the trainer, sport and program namespaces."""

    def __init__(
        self,
        trainer_resolver: EntityResolver,
        sport_resolver: EntityResolver,
        program_resolver: EntityResolver,
        db: Optional[Session] = None,
    ) -> None:
        super().__init__(db)
        self.trainer_resolver = trainer_resolver
        self.sport_resolver = sport_resolver
        self.program_resolver = program_resolver

        self.slug_strategies: Tuple[Strategy, ...] = (
            (EntityType.TRAINER, trainer_resolver.resolve_by_slug),
            (EntityType.SPORT, sport_resolver.resolve_by_slug),
            (EntityType.PROGRAM, program_resolver.resolve_by_slug),
        )
        self.id_strategies: Tuple[Strategy, ...] = (
            (EntityType.TRAINER, trainer_resolver.resolve_by_id),
            (EntityType.PROGRAM, program_resolver.resolve_by_id),
        )

    @classmethod
    def from_session(cls, db: Session) -> "SlugResolutionService":
        """Wire the service to SQLAlchemy-backed repositories."""
        return cls(
            trainer_resolver=TrainerResolver(RepositoryFactory.create_user_profile_repository(db)),
            sport_resolver=SportResolver(RepositoryFactory.create_sport_repository(db)),
            program_resolver=ProgramResolver(
                RepositoryFactory.create_training_program_repository(db)
            ),
            db=db,
        )

    # ── Tagged outcomes ───────────────────────────────────────────

    @BaseService.measure_operation("resolve_slug")
    def resolve_slug_outcome(self, token: str) -> ResolutionOutcome:
        """Slug lookups in priority order; first hit wins."""
        return self._run_strategies(self.slug_strategies, token)

    @BaseService.measure_operation("resolve_by_slug_or_id")
    def resolve_by_slug_or_id_outcome(self, token: str) -> ResolutionOutcome:
        """UUID-shaped tokens try id lookups first, then everything falls back to slugs."""
        id_outcome: Optional[ResolutionOutcome] = None
        if is_valid_uuid(token):
            id_outcome = self._run_strategies(self.id_strategies, token)
            if id_outcome.is_found:
                return id_outcome

        slug_outcome = self._run_strategies(self.slug_strategies, token)
        if slug_outcome.is_found or id_outcome is None:
            return slug_outcome
        return self._merge_misses([id_outcome, slug_outcome])

    # ── Public contract (found or None) ───────────────────────────

    def resolve_slug(self, token: str) -> Optional[SlugResult]:
        return self.resolve_slug_outcome(token).result

    def resolve_by_slug_or_id(self, token: str) -> Optional[SlugResult]:
        return self.resolve_by_slug_or_id_outcome(token).result

    # ── Canonical URLs ────────────────────────────────────────────

    @BaseService.measure_operation("resolve_canonical")
    def resolve_canonical(
        self,
        token: str,
        requested_type: Optional[EntityType] = None,
    ) -> Optional[CanonicalResolution]:
        """
        Resolve ``token`` for a page and decide whether it should redirect.

        On a miss, a trainer slug carrying a legacy ``-xxxxxxxx`` suffix is
        retried once without it; a hit there always redirects.

        Args:
            token: Path segment as received.
            requested_type: Section the page was requested under, if any.

        Returns:
            CanonicalResolution, or None when nothing matched.
        """
        outcome = self.resolve_by_slug_or_id_outcome(token)
        legacy_hit = False

        if not outcome.is_found and not is_valid_uuid(token):
            legacy_slug = strip_legacy_suffix(token)
            if legacy_slug:
                legacy_outcome = self.trainer_resolver.resolve_by_slug(legacy_slug)
                if legacy_outcome.is_found:
                    self.logger.info("Legacy trainer slug %r maps to %r", token, legacy_slug)
                    outcome = legacy_outcome
                    legacy_hit = True

        if outcome.result is None:
            if outcome.status is ResolutionStatus.UPSTREAM_ERROR:
                self.logger.warning(
                    "Identifier %r unresolved because of upstream errors: %s",
                    token,
                    outcome.error,
                )
            return None

        redirect = plan_canonical_redirect(token, outcome.result, requested_type)
        if legacy_hit:
            redirect = CanonicalRedirect(redirect.canonical_url, True, RedirectReason.LEGACY_SLUG)

        if redirect.needs_redirect and redirect.reason is not None:
            prometheus_metrics.record_canonical_redirect(redirect.reason.value)

        return CanonicalResolution(result=outcome.result, redirect=redirect)

    # ── Internals ─────────────────────────────────────────────────

    def _run_strategies(self, strategies: Sequence[Strategy], token: str) -> ResolutionOutcome:
        misses = []
        for _entity_type, strategy in strategies:
            outcome = strategy(token)
            if outcome.is_found:
                return outcome
            misses.append(outcome)
        return self._merge_misses(misses)

    @staticmethod
    def _merge_misses(misses: Sequence[ResolutionOutcome]) -> ResolutionOutcome:
        """Collapse misses into one outcome; any upstream error taints the whole miss."""
        errors = [
            f"{miss.entity_type.value}: {miss.error}" if miss.entity_type else str(miss.error)
            for miss in misses
            if miss.status is ResolutionStatus.UPSTREAM_ERROR
        ]
        if errors:
            return ResolutionOutcome.upstream_error(None, "; ".join(errors))
        return ResolutionOutcome.not_found()
