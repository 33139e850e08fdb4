"""Daily journal entry: one row per user per calendar date."""

from __future__ import annotations

from datetime import date, datetime

from sqlalchemy.ext.associationproxy import association_proxy
from sqlalchemy.orm import Mapped, mapped_column, relationship

from daybook.extensions import db


class JournalEntry(db.Model):
    __tablename__ = "journal_entry"
    __table_args__ = (
        db.Index("ux_journal_entry_user_entry_date", "user_id", "entry_date", unique=True),
        db.Index("ix_journal_entry_user_primary_mood", "user_id", "primary_mood"),
    )

    id: Mapped[int] = mapped_column(primary_key=True)
    user_id: Mapped[int] = mapped_column(index=True, nullable=False)
    entry_date: Mapped[date] = mapped_column(nullable=False)
    title: Mapped[str] = mapped_column(db.String(255), nullable=False, default="")
    content: Mapped[str] = mapped_column(db.Text, nullable=False, default="")
    primary_mood: Mapped[str] = mapped_column(db.String(64), nullable=False, default="")
    secondary_moods: Mapped[list] = mapped_column(db.JSON, default=list)
    word_count: Mapped[int] = mapped_column(nullable=False, default=0)
    created_at: Mapped[datetime] = mapped_column(default=datetime.utcnow)
    updated_at: Mapped[datetime] = mapped_column(default=datetime.utcnow)

    tag_rows: Mapped[list["JournalEntryTag"]] = relationship(
        "JournalEntryTag",
        back_populates="entry",
        cascade="all, delete-orphan",
        order_by="JournalEntryTag.position",
        lazy="selectin",
    )
    tags = association_proxy("tag_rows", "name")

    def set_tags(self, tags: list[str]) -> None:
        self.tag_rows = [JournalEntryTag(name=name, position=idx) for idx, name in enumerate(tags)]

    def __repr__(self) -> str:
        return f"JournalEntry(id={self.id}, user_id={self.user_id}, entry_date={self.entry_date})"


class JournalEntryTag(db.Model):
    """Tag text attached to an entry; kept in its own table so it can be searched by substring."""

    __tablename__ = "journal_entry_tag"
    __table_args__ = (db.Index("ix_journal_entry_tag_name", "name"),)

    id: Mapped[int] = mapped_column(primary_key=True)
    entry_id: Mapped[int] = mapped_column(
        db.ForeignKey("journal_entry.id", ondelete="CASCADE"),
        index=True,
        nullable=False,
    )
    name: Mapped[str] = mapped_column(db.String(64), nullable=False)
    position: Mapped[int] = mapped_column(nullable=False, default=0)

    entry: Mapped[JournalEntry] = relationship("JournalEntry", back_populates="tag_rows")
