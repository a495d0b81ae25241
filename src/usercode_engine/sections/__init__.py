"""User section capture and emission.

Two marker families delimit user-owned text in generated files:

    /* USER CODE BEGIN <name> */      named region
    /* USER CODE END <name> */

    //!begin <digits>                 partial region
    //!end <digits>

A marker must be the only token on its line (surrounding whitespace is
tolerated). Everything between a begin/end pair is captured from the
previous output and written back on the next generation pass.
"""

import re

# Marker templates used by the scanner and the emitter
NAMED_BEGIN = "/* USER CODE BEGIN {name} */"
NAMED_END = "/* USER CODE END {name} */"
PARTIAL_BEGIN = "//!begin {id}"
PARTIAL_END = "//!end {id}"

NAMED_NAME_RE = re.compile(r"[A-Za-z0-9_]+")
NAMED_BEGIN_RE = re.compile(r"\s*/\* USER CODE BEGIN ([A-Za-z0-9_]+) \*/\s*")
NAMED_END_RE = re.compile(r"\s*/\* USER CODE END ([A-Za-z0-9_]+) \*/\s*")
PARTIAL_BEGIN_RE = re.compile(r"\s*//!begin[ \t]+([0-9]+)\s*")
PARTIAL_END_RE = re.compile(r"\s*//!end[ \t]+([0-9]+)\s*")
