from __future__ import annotations

from collections import Counter
from typing import Optional

from models import Dataset


def print_summary(dataset: Dataset, cache_path: Optional[str] = None) -> None:
    """Print a summary of the loaded family dataset."""
    metadata = dataset.metadata
    people = dataset.people

    print("\n" + "="*60)
    print("FAMILY TREE DATA - SUMMARY")
    print("="*60)
    if metadata is not None and metadata.error:
        print(f"Error: {metadata.error}")
    print(f"Source: {metadata.source if metadata and metadata.source else 'N/A'}")
    print(f"Last Updated: {metadata.last_updated if metadata and metadata.last_updated else 'N/A'}")
    print(f"People: {len(people)}")

    branches = Counter(p.branch_lineage for p in people if p.branch_lineage)
    if branches:
        print()
        print("Branches:")
        for branch, count in branches.most_common():
            print(f"  {branch}: {count}")

    years = [p.birth_year for p in people if p.birth_year is not None]
    if years:
        print()
        print(f"Birth Years: {min(years)} - {max(years)}")

    ids = [p.id for p in people]
    duplicates = len(ids) - len(set(ids))
    if duplicates:
        print(f"Duplicate Person IDs: {duplicates}")
    if cache_path:
        print(f"Cache File: {cache_path}")
    print("="*60)
