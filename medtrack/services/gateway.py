# medtrack/services/gateway.py
from contextlib import contextmanager

from sqlalchemy import text

from medtrack.extensions import db


class PersistenceGateway:
    """
    Thin wrapper over a SQLAlchemy session handed to every domain service.

    Reads go straight through ``query``; writes that span several
    statements run inside ``transaction()`` so they commit or roll back as
    one unit. The session itself is request-scoped (Flask-SQLAlchemy
    removes it on app-context teardown), which returns the pooled
    connection on every exit path.
    """

    def __init__(self, session):
        self.session = session

    def query(self, *entities):
        return self.session.query(*entities)

    def get(self, model, ident):
        return self.session.get(model, ident)

    def add(self, instance):
        self.session.add(instance)
        return instance

    def flush(self):
        self.session.flush()

    def ping(self) -> bool:
        return self.session.execute(text("SELECT 1")).scalar() == 1

    @contextmanager
    def transaction(self):
        try:
            yield self.session
            self.session.commit()
        except Exception:
            self.session.rollback()
            raise


def get_gateway() -> PersistenceGateway:
    return PersistenceGateway(db.session)
