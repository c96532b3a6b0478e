from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Any, Dict, List, Mapping, Optional, Sequence, Tuple

from models import PersonRecord
from utils.number_parsing import parse_leading_int


class FieldKind(str, Enum):
    STRING = "string"
    INTEGER = "integer"
    LIST = "list"


@dataclass(frozen=True)
class FieldSpec:
    source_header: str
    target_key: str
    kind: FieldKind = FieldKind.STRING
    delimiter: str = ";"


_S = FieldKind.STRING
_I = FieldKind.INTEGER
_L = FieldKind.LIST


# Sheet header → record key. Header spellings are the live sheet's, typos included.
FIELD_SPECS: Tuple[FieldSpec, ...] = (
    # Core identity
    FieldSpec("Person ID", "id", _S),
    FieldSpec("Title", "title", _S),
    FieldSpec("First Name", "firstName", _S),
    FieldSpec("Middle Name(s)", "middleName", _S),
    FieldSpec("Last Name", "lastName", _S),
    FieldSpec("Suffix", "suffix", _S),
    FieldSpec("Preferred / Nickname", "nickname", _S),
    FieldSpec("Maiden Name", "maidenName", _S),
    FieldSpec("Full Name", "fullName", _S),
    FieldSpec("Gender", "gender", _S),
    # Birth
    FieldSpec("Birth Date", "birthYear", _I),
    FieldSpec("Birth City", "birthCity", _S),
    FieldSpec("Birth State / Province", "birthState", _S),
    FieldSpec("Birth Country", "birthCountry", _S),
    # Death
    FieldSpec("Death Date", "deathYear", _I),
    FieldSpec("Death City", "deathCity", _S),
    FieldSpec("Death State / Province", "deathState", _S),
    FieldSpec("Death Country", "deathCountry", _S),
    FieldSpec("Burial / Cremation Place", "burialPlace", _S),
    FieldSpec("Age at Death", "ageAtDeath", _I),
    # Career
    FieldSpec("Occupation / Notes", "occupation", _S),
    FieldSpec("Employeers", "employers", _S),
    # Family relationships
    FieldSpec("Father ID", "fatherId", _S),
    FieldSpec("Mother ID", "motherId", _S),
    FieldSpec("Spouse IDs", "spouseIds", _L),
    FieldSpec("Children IDs", "childrenIds", _L),
    FieldSpec("Sibling IDs", "siblingIds", _L),
    FieldSpec("Step Parent", "stepParent", _S),
    # Lineage
    FieldSpec("Branch / Lineage Tag", "branchLineage", _S),
    FieldSpec("Year Immigrated to USA", "immigrationYear", _I),
    FieldSpec("Generation American", "generationAmerican", _S),
    FieldSpec("Generation Number", "generationNumber", _I),
    # Military
    FieldSpec("Military", "military", _S),
    FieldSpec("Branch", "militaryBranch", _S),
    FieldSpec("War", "war", _S),
    FieldSpec("Served From", "servedFrom", _S),
    FieldSpec("Served To", "servedTo", _S),
    # Education
    FieldSpec("Undergradute University", "undergradUniv", _S),
    FieldSpec("Undergad Year Graduated", "undergradYear", _S),
    FieldSpec("Graduate University(s)", "gradUniv", _S),
    FieldSpec("Graduate Year Graduated", "gradYear", _S),
    FieldSpec("Fraternity / Sorority", "fraternity", _S),
    FieldSpec("Sports", "sports", _S),
    # Additional
    FieldSpec("Fly Fishing", "flyFishing", _S),
    FieldSpec("Photo / Document Link", "photoLink", _S),
    FieldSpec("Notes / Stories", "notes", _S),
    FieldSpec("Relationship to Key Ancestor", "relationship", _S),
    FieldSpec("Confidence Level", "confidence", _S),
    FieldSpec("Information Link", "infoLink", _S),
    FieldSpec("DNA Match ID", "dnaMatchId", _S),
    # Residence
    FieldSpec("Residence City", "residenceCity", _S),
    FieldSpec("Residence State", "residenceState", _S),
    FieldSpec("Residence Country", "residenceCountry", _S),
)


def coerce_string(value: Optional[str]) -> str:
    return (value or "").strip()


def coerce_integer(value: Optional[str]) -> Optional[int]:
    text = coerce_string(value)
    if not text:
        return None
    return parse_leading_int(text)


def coerce_list(value: Optional[str], delimiter: str = ";") -> List[str]:
    text = coerce_string(value)
    if not text:
        return []
    return [piece.strip() for piece in text.split(delimiter) if piece.strip()]


def coerce_value(spec: FieldSpec, value: Optional[str]) -> Any:
    if spec.kind is FieldKind.INTEGER:
        return coerce_integer(value)
    if spec.kind is FieldKind.LIST:
        return coerce_list(value, spec.delimiter)
    return coerce_string(value)


def display_name(full_name: str, first_name: str, last_name: str) -> str:
    return full_name or f"{first_name} {last_name}".strip()


def map_fields(raw: Mapping[str, str], specs: Sequence[FieldSpec] = FIELD_SPECS) -> PersonRecord:
    """Map one header-keyed sheet row onto a PersonRecord.

    Missing headers and malformed values degrade to the field's empty form
    ('' / None / []); nothing here raises on sheet content.
    """
    values: Dict[str, Any] = {}
    for spec in specs:
        values[spec.target_key] = coerce_value(spec, raw.get(spec.source_header))
    values["name"] = display_name(
        values.get("fullName") or "",
        values.get("firstName") or "",
        values.get("lastName") or "",
    )
    return PersonRecord.model_validate(values)
