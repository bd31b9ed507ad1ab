"""
Pydantic models for village profiles
"""
from typing import List

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel


class Infrastructure(BaseModel):
    """Infrastructure coverage of a village"""
    electricity: float = Field(..., ge=0, le=100, description="Households with electricity (%)")
    water: float = Field(..., ge=0, le=100, description="Households with piped water (%)")
    roads: float = Field(..., ge=0, le=100, description="All-weather road coverage (%)")
    school: bool = Field(False, description="Village has a school")
    health_center: bool = Field(False, description="Village has a health centre")

    model_config = ConfigDict(frozen=True, alias_generator=to_camel, validate_by_name=True)


class Village(BaseModel):
    """A village profile as listed in the catalog"""
    id: str = Field(..., min_length=1, description="Stable village identifier")
    name: str = Field(..., min_length=1, description="Village name")
    state: str = Field(..., description="State")
    district: str = Field(..., description="District")
    population: int = Field(..., ge=0)
    households: int = Field(..., ge=0)
    literacy_rate: float = Field(..., ge=0, le=100, description="Literacy rate (%)")
    forest_dependency: float = Field(..., ge=0, le=100, description="Share of livelihood from forest (%)")
    main_occupation: List[str] = Field(default_factory=list, description="Occupation tags")
    tribal_population: float = Field(..., ge=0, le=100, description="Tribal population (%)")
    infrastructure: Infrastructure
    challenges: List[str] = Field(default_factory=list)
    recommended_schemes: List[str] = Field(default_factory=list, description="Curated scheme ids")
    description: str = ""

    model_config = ConfigDict(
        frozen=True,
        alias_generator=to_camel,
        validate_by_name=True,
        json_schema_extra={
            "example": {
                "id": "khandwa",
                "name": "Khandwa",
                "state": "Madhya Pradesh",
                "district": "Khandwa",
                "population": 2450,
                "households": 512,
                "literacyRate": 58.4,
                "forestDependency": 72,
                "mainOccupation": ["farming", "forest produce"],
                "tribalPopulation": 64,
                "infrastructure": {
                    "electricity": 81,
                    "water": 46,
                    "roads": 55,
                    "school": True,
                    "healthCenter": False
                },
                "challenges": ["seasonal water scarcity"],
                "recommendedSchemes": ["forest-rights-act", "mgnrega"],
                "description": "Korku tribal village on the edge of teak forest."
            }
        }
    )
