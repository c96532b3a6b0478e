# Importing the modules registers the built-in sources
from . import csv_file, sheet_csv  # noqa: F401
