"""Settings for the product code extractor."""

import os

DEFAULT_INPUT_FILE = "100095-146-investigate-1107.csv"
DEFAULT_OUTPUT_FILE = "output-enhanced-products.csv"
DEFAULT_REPORT_FILE = "extraction-report.txt"

# Extraction settings
EXTRACTION_POLICY = os.getenv("CODE_EXTRACTOR_POLICY", "strict")  # 'strict' | 'loose'
EXTRACTION_WORKERS = os.getenv("CODE_EXTRACTOR_WORKERS", "1")  # parsed by the CLI; >1 uses a thread pool

# Appended between translated_name and the code
CODE_SEPARATOR = " - "

# Report settings
REPORT_SAMPLE_SIZE = 20  # successful/failed samples listed in the report
REPORT_PREVIEW_CHARS = 100  # original_name is truncated to this in samples

# CSV columns
REQUIRED_COLUMNS = ("item_id", "translated_name", "original_name")
PASSTHROUGH_COLUMNS = ("collection_name", "shopee_id")
DESCRIPTION_COLUMN = "description"
