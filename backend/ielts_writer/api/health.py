from __future__ import annotations

from fastapi import APIRouter, Depends

from ielts_writer.container import Container, get_container

router = APIRouter(tags=["health"])


@router.get("/health")
def health(container: Container = Depends(get_container)):
    return {"status": "ok", "scoring_configured": container.oracle.is_configured}
