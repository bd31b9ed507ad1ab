"""
Pydantic models for welfare schemes
"""
from typing import List, Literal, get_args

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel


SchemeCategory = Literal[
    "agriculture",
    "health",
    "employment",
    "housing",
    "education",
    "forest",
    "digital",
    "pension",
    "water",
    "infrastructure",
    "sanitation",
    "energy",
    "finance",
]

SCHEME_CATEGORIES = get_args(SchemeCategory)


class Scheme(BaseModel):
    """A government scheme as listed in the catalog"""
    id: str = Field(..., min_length=1, description="Stable scheme identifier, e.g. 'pm-kisan'")
    name: str = Field(..., min_length=1, description="Short display name")
    full_name: str = Field(..., description="Full official name of the scheme")
    category: SchemeCategory = Field(..., description="Scheme category")
    description: str = Field("", description="Short description")
    benefits: List[str] = Field(default_factory=list, description="Key benefits, most important first")
    eligibility: List[str] = Field(default_factory=list, description="Eligibility conditions")
    target_audience: List[str] = Field(default_factory=list, description="Audience tags such as 'tribal'")
    keywords: List[str] = Field(default_factory=list, description="Trigger tokens matched against queries")

    model_config = ConfigDict(
        frozen=True,
        alias_generator=to_camel,
        validate_by_name=True,
        json_schema_extra={
            "example": {
                "id": "pm-kisan",
                "name": "PM-KISAN",
                "fullName": "Pradhan Mantri Kisan Samman Nidhi",
                "category": "agriculture",
                "description": "Income support of ₹6,000 per year to landholding farmer families.",
                "benefits": ["₹6,000 per year in three instalments", "Direct bank transfer"],
                "eligibility": ["Landholding farmer family", "Valid Aadhaar"],
                "targetAudience": ["farmers", "tribal"],
                "keywords": ["samman nidhi", "income support"]
            }
        }
    )
