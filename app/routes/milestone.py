# app/routes/milestone.py
from fastapi import APIRouter

from ..controllers.milestone_controller import list_milestones

router = APIRouter(prefix="/milestone", tags=["Milestone"])


@router.get("/", summary="List milestones (sorted by minutes)")
async def get_milestones():
    return await list_milestones()
