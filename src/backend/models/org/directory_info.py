# src/backend/models/org/directory_info.py
from sqlalchemy import Column, String, DateTime
from sqlalchemy.orm import Mapped, mapped_column, relationship

from src.backend.utils.database import Base
from src.backend.utils.timezone import now_local


class DirectoryInfo(Base):
    __tablename__ = "directory_info"

    directory_id: Mapped[str] = mapped_column(String(20), primary_key=True)  # e.g., DIT
    directory_name: Mapped[str | None] = mapped_column(String(150), nullable=True)
    sort_order: Mapped[int | None] = mapped_column(nullable=True)

    created_dt = Column(DateTime(timezone=True), default=now_local, nullable=False)
    updated_dt = Column(DateTime(timezone=True), default=now_local, onupdate=now_local, nullable=False)

    divisions = relationship(
        "DivisionInfo", back_populates="directory", cascade="all, delete-orphan", lazy="selectin"
    )

    def __repr__(self) -> str:
        return f"<DirectoryInfo {self.directory_id}>"
