from .person_record import PersonRecord
from .dataset import Dataset, DatasetMetadata
from .outcome import ErrorKind, Outcome

__all__ = [
    "PersonRecord",
    "Dataset",
    "DatasetMetadata",
    "ErrorKind",
    "Outcome",
]
