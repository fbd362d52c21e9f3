# Read structure defaults
CELL_BARCODE_LENGTH = 16
UMI_LENGTH = 10
MULTISEQ_BARCODE_LENGTH = 8

# Output table columns
BARCODE_COLUMN = "Barcode"
MULTISEQ_COLUMN = "Multiseq"
NUMI_COLUMN = "nUMI"

# Whitelist validation
SEQUENCE_COLUMN = "sequence"
ATGC_PATTERN = "^[ATGC]{1,}$"

# Unmapped report
TAG_COLUMN = "tag"
COUNT_COLUMN = "count"

# Every n read pairs a progress line is printed
PROGRESS_INTERVAL = 10000
FASTQ_RECORD_LINES = 4
