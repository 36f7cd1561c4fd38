# src/backend/models/org/division_info.py
from sqlalchemy import Column, String, DateTime, ForeignKey
from sqlalchemy.orm import Mapped, mapped_column, relationship

from src.backend.utils.database import Base
from src.backend.utils.timezone import now_local


class DivisionInfo(Base):
    __tablename__ = "division_info"

    # a division name is only meaningful under its directory
    directory_id: Mapped[str] = mapped_column(
        String(20), ForeignKey("directory_info.directory_id", ondelete="RESTRICT"), primary_key=True
    )
    division_name: Mapped[str] = mapped_column(String(100), primary_key=True)
    sort_order: Mapped[int | None] = mapped_column(nullable=True)

    created_dt = Column(DateTime(timezone=True), default=now_local, nullable=False)
    updated_dt = Column(DateTime(timezone=True), default=now_local, onupdate=now_local, nullable=False)

    directory = relationship("DirectoryInfo", back_populates="divisions", lazy="joined")

    def __repr__(self) -> str:
        return f"<DivisionInfo {self.directory_id}/{self.division_name}>"
