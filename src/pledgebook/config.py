"""Fixed configuration for pledgebook."""

# Persistence slot key; the suffix marks the storage format epoch.
STORAGE_KEY = "dcd_fundraising_v20"

# Ordered list used for per-department totals and department choices.
DEPARTMENTS = (
    "Eagles",
    "Daughters of Faith",
    "Youth",
    "Planning Committee",
    "Guests",
)

# Department assigned to imported pledges with a blank department column.
DEFAULT_DEPARTMENT = "Guests"

CURRENCY_LABEL = "KES"

DB_PATH_ENV_VAR = "PLEDGEBOOK_DB_PATH"
DEFAULT_DATA_DIR = ".pledgebook"
DEFAULT_DB_FILENAME = "pledgebook.db"

BACKUP_FILENAME_PREFIX = "pledgebook-backup"
