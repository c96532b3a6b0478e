from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field


_INT_DOC = "Leading integer of the sheet cell; None when blank, non-numeric or 0."


class PersonRecord(BaseModel):
    """One person mapped from a sheet row. Aliases are the cached JSON keys.

    Integer fields hold the leading integer of the cell (`"1950-03-02"` gives
    1950) and are None when the cell is blank or non-numeric, or when it reads
    0: the sheet uses 0 as a blank, so a literal zero is never kept.
    """

    # Core identity
    id: str = ""
    title: str = ""
    first_name: str = Field(default="", alias="firstName")
    middle_name: str = Field(default="", alias="middleName")
    last_name: str = Field(default="", alias="lastName")
    suffix: str = ""
    nickname: str = ""
    maiden_name: str = Field(default="", alias="maidenName")
    full_name: str = Field(default="", alias="fullName")
    name: str = ""
    gender: str = ""

    # Birth
    birth_year: int | None = Field(default=None, alias="birthYear", description=_INT_DOC)
    birth_city: str = Field(default="", alias="birthCity")
    birth_state: str = Field(default="", alias="birthState")
    birth_country: str = Field(default="", alias="birthCountry")

    # Death
    death_year: int | None = Field(default=None, alias="deathYear", description=_INT_DOC)
    death_city: str = Field(default="", alias="deathCity")
    death_state: str = Field(default="", alias="deathState")
    death_country: str = Field(default="", alias="deathCountry")
    burial_place: str = Field(default="", alias="burialPlace")
    age_at_death: int | None = Field(default=None, alias="ageAtDeath", description=_INT_DOC)

    # Career
    occupation: str = ""
    employers: str = ""

    # Family relationships
    father_id: str = Field(default="", alias="fatherId")
    mother_id: str = Field(default="", alias="motherId")
    spouse_ids: list[str] = Field(default_factory=list, alias="spouseIds")
    children_ids: list[str] = Field(default_factory=list, alias="childrenIds")
    sibling_ids: list[str] = Field(default_factory=list, alias="siblingIds")
    step_parent: str = Field(default="", alias="stepParent")

    # Lineage
    branch_lineage: str = Field(default="", alias="branchLineage")
    immigration_year: int | None = Field(default=None, alias="immigrationYear", description=_INT_DOC)
    generation_american: str = Field(default="", alias="generationAmerican")
    generation_number: int | None = Field(default=None, alias="generationNumber", description=_INT_DOC)

    # Military
    military: str = ""
    military_branch: str = Field(default="", alias="militaryBranch")
    war: str = ""
    served_from: str = Field(default="", alias="servedFrom")
    served_to: str = Field(default="", alias="servedTo")

    # Education
    undergrad_univ: str = Field(default="", alias="undergradUniv")
    undergrad_year: str = Field(default="", alias="undergradYear")
    grad_univ: str = Field(default="", alias="gradUniv")
    grad_year: str = Field(default="", alias="gradYear")
    fraternity: str = ""
    sports: str = ""

    # Additional
    fly_fishing: str = Field(default="", alias="flyFishing")
    photo_link: str = Field(default="", alias="photoLink")
    notes: str = ""
    relationship: str = ""
    confidence: str = ""
    info_link: str = Field(default="", alias="infoLink")
    dna_match_id: str = Field(default="", alias="dnaMatchId")

    # Residence
    residence_city: str = Field(default="", alias="residenceCity")
    residence_state: str = Field(default="", alias="residenceState")
    residence_country: str = Field(default="", alias="residenceCountry")

    model_config = ConfigDict(extra="ignore", populate_by_name=True)
