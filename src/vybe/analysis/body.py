"""Body Mass Index and its WHO category bands."""
from typing import Optional

_BMI_COLORS = {
    "Underweight": "#3498db",
    "Normal Weight": "#2ecc71",
    "Overweight": "#f1c40f",
    "Obese": "#e67e22",
}
_UNKNOWN_COLOR = "#95a5a6"


def calculate_bmi(weight_kg: Optional[float], height_cm: Optional[float]) -> Optional[float]:
    """
    BMI = weight (kg) / height (m)², rounded to 1 decimal.

    Returns None when either input is missing or not positive: the BMI is unknown,
    not invalid.
    """
    if not weight_kg or not height_cm or weight_kg <= 0 or height_cm <= 0:
        return None
    height_m = height_cm / 100
    return round(weight_kg / (height_m * height_m), 1)


def bmi_category(bmi: Optional[float]) -> str:
    """Each band is inclusive on its lower bound: 25.0 is Overweight."""
    if not bmi:
        return "Unknown"
    if bmi < 18.5:
        return "Underweight"
    if bmi < 25:
        return "Normal Weight"
    if bmi < 30:
        return "Overweight"
    return "Obese"


def bmi_color(category: str) -> str:
    return _BMI_COLORS.get(category, _UNKNOWN_COLOR)
