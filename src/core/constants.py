"""Core constants for cross-module use."""

# Minimum field width of an item name in listing, histogram and backup lines
NAME_WIDTH = 20
FIELD_SEPARATOR = " : "

BACKUP_HEADER = "Grocery Tracker Backup Data"
BACKUP_SEPARATOR = "-" * 28

DEFAULT_INPUT_FILE = "CS210_Project_Three_Input_File.txt"
DEFAULT_BACKUP_FILE = "frequency.dat"

# Increment when the JSON shape of the web view changes in a backward-incompatible way
SCHEMA_VERSION = "1.0.0"
