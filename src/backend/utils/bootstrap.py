# src/backend/utils/bootstrap.py
from __future__ import annotations

import logging
from typing import Dict, Tuple

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncEngine, AsyncSession

from src.backend.models.org.directory_info import DirectoryInfo
from src.backend.models.org.division_info import DivisionInfo
from src.backend.utils.database import Base

logger = logging.getLogger(__name__)

# directory -> divisions, in display order
DEFAULT_ORG_STRUCTURE: Dict[str, Tuple[str, ...]] = {
    "DIT": ("Development", "SDD"),
    "DOI": ("Networking", "CND"),
    "DOVI": ("Verification", "Inspection"),
}


async def init_db(engine: AsyncEngine) -> None:
    """Create missing tables. Existing tables are left untouched."""
    # register every mapped table on Base.metadata
    from src.backend.models import employee  # noqa: F401
    from src.backend.models import org  # noqa: F401

    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)
    logger.info("Database schema ensured")


async def seed_org_structure(
    db: AsyncSession,
    structure: Dict[str, Tuple[str, ...]] = DEFAULT_ORG_STRUCTURE,
) -> int:
    """
    Insert the directory/division rows that are missing.
    Returns the number of divisions added.
    """
    res = await db.execute(select(DirectoryInfo.directory_id))
    have_dirs = set(res.scalars().all())
    res = await db.execute(select(DivisionInfo.directory_id, DivisionInfo.division_name))
    have_divs = {(d, n) for d, n in res.all()}

    added = 0
    for d_order, (directory, divisions) in enumerate(structure.items(), start=1):
        if directory not in have_dirs:
            db.add(DirectoryInfo(directory_id=directory, sort_order=d_order))
        for v_order, division in enumerate(divisions, start=1):
            if (directory, division) in have_divs:
                continue
            db.add(DivisionInfo(directory_id=directory, division_name=division, sort_order=v_order))
            added += 1

    try:
        await db.commit()
    except Exception:
        await db.rollback()
        raise

    if added:
        logger.info("Seeded %d divisions across %d directories", added, len(structure))
    return added
