import argparse
import json

from config.settings import get_settings
from db import schema
from db.connection import get_connection
from services.data_service import build_data_service, build_lookup
from services.reporting import print_summary
from sources.csv_file import CsvFileSource
from sources.registry import get_source
from utils.logging_setup import init_logging


def _service(args):
    settings = get_settings()
    source = None
    if getattr(args, "file", None):
        source = CsvFileSource(args.file)
    elif getattr(args, "source", None):
        source = get_source(args.source, settings)
    conn = get_connection(args.db)
    return build_data_service(settings, source=source, conn=conn)


def cmd_bootstrap(args):
    conn = get_connection(args.db)
    schema.bootstrap(conn)
    print("Schema ready")


def cmd_fetch(args):
    service = _service(args)
    dataset = service.get_data(force_refresh=args.force)
    if args.json:
        print(json.dumps(dataset.to_payload(), indent=2, ensure_ascii=False))
    else:
        print_summary(dataset, args.db)


def cmd_show_person(args):
    service = _service(args)
    dataset = service.get_data(force_refresh=args.force)
    person = build_lookup(dataset.people).get(args.id)
    if person is None:
        print(f"No person found with id {args.id}")
        return
    print(json.dumps(person.model_dump(by_alias=True), indent=2, ensure_ascii=False))


def cmd_clear_cache(args):
    service = _service(args)
    service.clear_cache()
    print("Cache cleared")


def main():
    settings = get_settings()
    init_logging(settings.log_level)
    parser = argparse.ArgumentParser(description="Family tree data CLI")
    parser.add_argument("--db", default=settings.cache_db_path, help="Path to SQLite cache DB (default from settings)")
    sub = parser.add_subparsers(dest="cmd", required=True)

    p_boot = sub.add_parser("bootstrap", help="Create the cache table")
    p_boot.set_defaults(func=cmd_bootstrap)

    def _add_source_flags(p):
        p.add_argument("--force", action="store_true", help="Ignore a fresh cache and fetch from the source")
        sg = p.add_mutually_exclusive_group(required=False)
        sg.add_argument("--source", "-s", help="Registered source name (default from settings)")
        sg.add_argument("--file", "-f", help="Read the CSV export from a local file")

    p_fetch = sub.add_parser("fetch", help="Load the dataset (cache first) and print a summary")
    _add_source_flags(p_fetch)
    p_fetch.add_argument("--json", action="store_true", help="Print the full dataset as JSON")
    p_fetch.set_defaults(func=cmd_fetch)

    p_show = sub.add_parser("show-person", help="Print one person record by Person ID")
    p_show.add_argument("--id", required=True, help="Person ID as written in the sheet")
    _add_source_flags(p_show)
    p_show.set_defaults(func=cmd_show_person)

    p_clear = sub.add_parser("clear-cache", help="Remove the cached dataset")
    p_clear.set_defaults(func=cmd_clear_cache)

    args = parser.parse_args()
    args.func(args)


if __name__ == "__main__":
    main()
