"""Constants for the command-line tools."""

# ============================================================================
# Alignment parameters
# ============================================================================
DEFAULT_MATRIX = "blosum62"
# Residue renames applied when loading NCBI matrix files.
MATRIX_ALIASES = {"*": "-"}

# ============================================================================
# Output formatting
# ============================================================================
PRECISION = 6
NAME_WIDTH = 10
LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"
