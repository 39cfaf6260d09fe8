"""Profile route: body metrics, goals and BMI."""
from typing import Optional

from fastapi import APIRouter, Depends

from vybe.analysis.body import bmi_category, bmi_color, calculate_bmi
from vybe.api.deps import get_current_profile
from vybe.models.profile import Profile

router = APIRouter()


class ProfileResponse(Profile):
    bmi: Optional[float] = None
    bmi_category: str = "Unknown"
    bmi_color: str = ""


@router.get("", response_model=ProfileResponse)
def read_profile(profile: Profile = Depends(get_current_profile)):
    bmi = calculate_bmi(profile.weight_kg, profile.height_cm)
    category = bmi_category(bmi)
    return ProfileResponse(
        **profile.model_dump(),
        bmi=bmi,
        bmi_category=category,
        bmi_color=bmi_color(category),
    )
