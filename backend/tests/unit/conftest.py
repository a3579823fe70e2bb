import uuid

import pytest
from sqlalchemy import create_engine, event
from sqlalchemy.orm import Session, sessionmaker
from sqlalchemy.pool import StaticPool

from fitmarket.core.enums import ProfileRole, ProgramStatus
from fitmarket.database import Base

# Import models so Base.metadata is populated for reflection/create_all.
import fitmarket.models  # noqa: F401
from fitmarket.models import Sport, TrainingProgram, UserProfile


@pytest.fixture(scope="session")
def _unit_engine():
    engine = create_engine(
        "sqlite+pysqlite:///:memory:",
        future=True,
        poolclass=StaticPool,
        connect_args={"check_same_thread": False},
    )
    Base.metadata.create_all(engine)
    yield engine
    Base.metadata.drop_all(engine)
    engine.dispose()


@pytest.fixture(scope="function")
def unit_db(_unit_engine) -> Session:
    """
    Provide a transactional session bound to the shared in-memory engine.
    """
    connection = _unit_engine.connect()
    transaction = connection.begin()
    SessionLocal = sessionmaker(bind=connection, expire_on_commit=False, future=True)
    session = SessionLocal()
    session.begin_nested()

    @event.listens_for(session, "after_transaction_end")
    def restart_savepoint(sess, trans):
        if trans.nested and not trans._parent.nested:
            sess.begin_nested()

    try:
        yield session
    finally:
        event.remove(session, "after_transaction_end", restart_savepoint)
        session.close()
        transaction.rollback()
        connection.close()


@pytest.fixture
def seeded_catalog(unit_db):
    """One active trainer, a client, an inactive trainer, two sports and three programs."""
    trainer = UserProfile(
        id=str(uuid.uuid4()),
        name="Ana Costa",
        slug="ana-costa",
        role=ProfileRole.TRAINER.value,
        is_active=True,
    )
    client = UserProfile(
        id=str(uuid.uuid4()),
        name="Bruno Lima",
        slug="bruno-lima",
        role=ProfileRole.CLIENT.value,
        is_active=True,
    )
    retired = UserProfile(
        id=str(uuid.uuid4()),
        name="Carla Dias",
        slug="carla-dias",
        role=ProfileRole.TRAINER.value,
        is_active=False,
    )
    crossfit = Sport(id=str(uuid.uuid4()), name="CrossFit", slug="crossfit", is_active=True)
    polo = Sport(id=str(uuid.uuid4()), name="Water Polo", slug="water-polo", is_active=False)
    published = TrainingProgram(
        id=str(uuid.uuid4()),
        trainer_id=trainer.id,
        title="Strength Foundations",
        slug="strength-foundations",
        status=ProgramStatus.PUBLISHED.value,
    )
    unslugged = TrainingProgram(
        id=str(uuid.uuid4()),
        trainer_id=trainer.id,
        title="Mobility Basics",
        slug=None,
        status=ProgramStatus.ACTIVE.value,
    )
    draft = TrainingProgram(
        id=str(uuid.uuid4()),
        trainer_id=trainer.id,
        title="Secret Plan",
        slug="secret-plan",
        status=ProgramStatus.DRAFT.value,
    )
    unit_db.add_all([trainer, client, retired, crossfit, polo])
    unit_db.flush()
    unit_db.add_all([published, unslugged, draft])
    unit_db.flush()

    return {
        "trainer": trainer,
        "client": client,
        "retired": retired,
        "crossfit": crossfit,
        "polo": polo,
        "published": published,
        "unslugged": unslugged,
        "draft": draft,
    }
