# app/models/milestone_model.py

from pydantic import BaseModel


class MilestoneEntry(BaseModel):
    time_in_minutes: int  # Minutes since quitting to reach this milestone (e.g. 20, 480)
    label: str  # e.g. "20 Minutes"
    description: str  # e.g. "Your heart rate and blood pressure are dropping..."

    model_config = {
        "frozen": True,
    }
