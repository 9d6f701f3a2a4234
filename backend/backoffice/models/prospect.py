"""
Back Office Backend — Prospect SQLAlchemy Model
=================================================

What:  Inbound sales lead submitted from the public contact form.
Why:   Append-only; no update or delete path exists. Duplicate mails are
       allowed (the same person may write twice).
"""

from datetime import datetime
from typing import Optional

from sqlalchemy import DateTime, Index, Integer, String, text
from sqlalchemy.orm import Mapped, mapped_column

from backoffice.database import Base
from backoffice.models.catalog import utcnow


class Prospect(Base):
    __tablename__ = "prospects"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    name: Mapped[str] = mapped_column(String(255), nullable=False)
    mail: Mapped[str] = mapped_column(String(255), nullable=False)
    contact: Mapped[Optional[str]] = mapped_column(String(50), nullable=True)
    enterprise: Mapped[Optional[str]] = mapped_column(String(255), nullable=True)
    subject: Mapped[Optional[str]] = mapped_column(String(255), nullable=True)
    description: Mapped[Optional[str]] = mapped_column(String(2000), nullable=True)
    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        nullable=False,
        default=utcnow,
        server_default=text("CURRENT_TIMESTAMP"),
    )

    # Listing is newest first
    __table_args__ = (
        Index("idx_prospects_created_at", created_at.desc()),
    )

    def __repr__(self) -> str:
        return f"<Prospect(id={self.id}, mail='{self.mail}')>"
