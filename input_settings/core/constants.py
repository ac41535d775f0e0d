"""Centralised defaults and message templates.

Everything that controls how raw variable text is interpreted lives here
so it is easy to find and adjust.
"""

# ---------------------------------------------------------------------------
# Conversions  (input_settings/core/conversions.py)
# ---------------------------------------------------------------------------
DEFAULT_SEPARATOR = ","          # multi-select list separator
RANGE_SEPARATOR   = "-"          # "<min>-<max>" in random specs
FILE_ENCODING     = "utf-8-sig"  # read_lines(); drops a UTF-8 BOM

BOOL_TRUE  = "true"
BOOL_FALSE = "false"

# ---------------------------------------------------------------------------
# Spintax  (input_settings/core/spintax.py)
# ---------------------------------------------------------------------------
SPIN_OPEN  = "{"
SPIN_CLOSE = "}"
SPIN_ALT   = "|"

# ---------------------------------------------------------------------------
# Validators  (input_settings/core/validators.py)
# ---------------------------------------------------------------------------
MSG_NO_DATA        = 'variable "{name}" has no data'
MSG_FILE_MISSING   = 'file "{path}" not found'
MSG_FILE_EMPTY     = 'file "{path}" is empty'
MSG_DIR_MISSING    = 'directory "{path}" not found'
MSG_DIR_EMPTY      = 'directory "{path}" is empty'

# ---------------------------------------------------------------------------
# Settings  (input_settings/core/settings_manager.py)
# ---------------------------------------------------------------------------
COMMENT_PREFIX     = "#"
ACCESSOR_SECTION   = "ACCESSOR"
VARIABLES_SECTION  = "VARIABLES"
