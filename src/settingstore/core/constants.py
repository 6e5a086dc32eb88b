"""Constants shared by the store, backups and version markers."""

DIRECTORY_NAME = "Settings"
FILE_SUFFIX = ".json"
DEFAULT_ENCODING = "utf-8"
DEFAULT_INDENT = 2

# Canonical empty document decoded to obtain a type's default value
EMPTY_DOCUMENT = "{}"

# Backup names: <stem>-<yyyy-MM-dd-HH-mm-ss-fffffff><suffix>
BACKUP_TIMESTAMP_FORMAT = "%Y-%m-%d-%H-%M-%S"
BACKUP_FRACTION_DIGITS = 7
BACKUP_TIMESTAMP_PATTERN = r"\d{4}-\d{2}-\d{2}-\d{2}-\d{2}-\d{2}-\d{7}"

# Version marker written next to the store file by VersionFileGate
VERSION_MARKER_SUFFIX = "_version.txt"
UNKNOWN_VERSION = "v0.0.0"
