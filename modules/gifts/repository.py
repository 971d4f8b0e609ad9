"""Gift catalog store.

A thin handle over a relational database reached through SQLAlchemy. Any
URL SQLAlchemy understands works; a hosted Postgres instance and a local
SQLite file are handled the same way. Every successful write emits
``giftsChanged`` so views in this process refresh at once.
"""
from __future__ import annotations

import json
import logging
from contextlib import contextmanager
from datetime import datetime
from pathlib import Path
from typing import Any, Dict, Generator, Iterable, List

from PySide6.QtCore import QObject, Signal
from sqlalchemy import create_engine, select, update
from sqlalchemy.engine import make_url
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session, sessionmaker

from .models.gift_models import Base, Gift
from .models.schemas import CustomGiftCreate, GiftRead, PurchaseCreate


logger = logging.getLogger(__name__)


class GiftStoreError(RuntimeError):
    """A store call failed or was rejected."""


def _prepare_sqlite_path(db_url: str) -> None:
    url = make_url(db_url)
    if url.get_backend_name() == "sqlite" and url.database not in (None, "", ":memory:"):
        Path(url.database).parent.mkdir(parents=True, exist_ok=True)


class GiftStore(QObject):
    giftsChanged = Signal()

    def __init__(self, db_url: str, parent: QObject | None = None) -> None:
        super().__init__(parent)
        self.db_url = db_url
        try:
            _prepare_sqlite_path(db_url)
            self.engine = create_engine(db_url, future=True)
            Base.metadata.create_all(self.engine)
        except (SQLAlchemyError, OSError) as exc:
            raise GiftStoreError(f"Não foi possível abrir o banco de dados: {exc}") from exc
        self._session_factory = sessionmaker(bind=self.engine, expire_on_commit=False, future=True)
        logger.info("Gift store ready at %s", make_url(db_url).render_as_string(hide_password=True))

    @contextmanager
    def session(self) -> Generator[Session, None, None]:
        session = self._session_factory()
        try:
            yield session
            session.commit()
        except SQLAlchemyError as exc:
            session.rollback()
            logger.exception("Gift store call failed")
            raise GiftStoreError(str(exc)) from exc
        except Exception:
            session.rollback()
            raise
        finally:
            session.close()

    # ---- Queries -------------------------------------------------------------
    def list_gifts(self) -> List[GiftRead]:
        """All gifts, most expensive first."""
        with self.session() as session:
            rows = session.scalars(select(Gift).order_by(Gift.price.desc(), Gift.id)).all()
            return [GiftRead.model_validate(row.as_dict()) for row in rows]

    def get_gift(self, gift_id: int) -> GiftRead | None:
        with self.session() as session:
            row = session.get(Gift, gift_id)
            return GiftRead.model_validate(row.as_dict()) if row is not None else None

    # ---- Writes --------------------------------------------------------------
    def mark_purchased(
        self,
        gift_id: int,
        buyer_name: str,
        buyer_phone: str,
        buyer_message: str = "",
    ) -> GiftRead:
        data = PurchaseCreate(
            gift_id=gift_id,
            buyer_name=buyer_name,
            buyer_phone=buyer_phone,
            buyer_message=buyer_message,
        )
        with self.session() as session:
            # Conditional update so two guests cannot claim the same gift.
            result = session.execute(
                update(Gift)
                .where(Gift.id == data.gift_id, Gift.available.is_(True))
                .values(
                    available=False,
                    buyer_name=data.buyer_name,
                    buyer_phone=data.buyer_phone,
                    buyer_message=data.buyer_message,
                    purchased_at=datetime.now(),
                )
            )
            if result.rowcount == 0:
                exists = session.get(Gift, data.gift_id) is not None
                raise GiftStoreError(
                    "Este presente já foi escolhido por outra pessoa."
                    if exists
                    else "Presente não encontrado."
                )
            row = session.get(Gift, data.gift_id)
            session.refresh(row)
            gift = GiftRead.model_validate(row.as_dict())
        logger.info("Gift %s marked as purchased by %s", gift.id, gift.buyer_name)
        self.giftsChanged.emit()
        return gift

    def add_custom_gift(
        self,
        name: str,
        buyer_name: str,
        buyer_phone: str,
        buyer_message: str = "",
        price: float = 0,
    ) -> GiftRead:
        data = CustomGiftCreate(
            name=name,
            price=price,
            buyer_name=buyer_name,
            buyer_phone=buyer_phone,
            buyer_message=buyer_message,
        )
        row = Gift(
            name=data.name,
            price=data.price,
            link=None,
            available=False,
            is_custom=True,
            buyer_name=data.buyer_name,
            buyer_phone=data.buyer_phone,
            buyer_message=data.buyer_message,
            purchased_at=datetime.now(),
        )
        with self.session() as session:
            session.add(row)
            session.flush()
            gift = GiftRead.model_validate(row.as_dict())
        logger.info("Custom gift %s registered by %s", gift.id, gift.buyer_name)
        self.giftsChanged.emit()
        return gift

    def add_gifts(self, entries: Iterable[Dict[str, Any]]) -> int:
        """Insert catalog entries (``name``, ``price``, optional ``link``)."""
        rows = [
            Gift(
                name=str(entry["name"]).strip(),
                price=float(entry.get("price", 0)),
                link=entry.get("link"),
                available=bool(entry.get("available", True)),
            )
            for entry in entries
        ]
        with self.session() as session:
            session.add_all(rows)
        if rows:
            logger.info("Added %d gifts to the catalog", len(rows))
            self.giftsChanged.emit()
        return len(rows)

    def seed_from_json(self, path: str | Path) -> int:
        with open(path, "r", encoding="utf-8") as f:
            payload = json.load(f)
        entries = payload.get("gifts", []) if isinstance(payload, dict) else payload
        return self.add_gifts(entries)

    def dispose(self) -> None:
        self.engine.dispose()


__all__ = ["GiftStore", "GiftStoreError"]
