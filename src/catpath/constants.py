from __future__ import annotations

"""Project-wide constants used across modules.

This module isolates public defaults to reduce cross-module coupling.
"""

# Program name used for usage text when argv[0] is not available.
PROG_NAME: str = 'catpath'

# Character used to split input path lists and to join the output list.
DEFAULT_SEP: str = ':'

# Environment variable consulted for tilde expansion (-x).
HOME_ENV: str = 'HOME'

JSON_LOGS_ENV: str = 'CATPATH_JSON_LOGS'
TRACE_FS_ENV: str = 'CATPATH_TRACE_FS'
