"""Environment-driven defaults for formdate.

Values are read once at import time. Override them through the
environment before the package is imported.
"""

import os

# Locale used when a format spec carries no language tag
DEFAULT_LOCALE = os.environ.get("FORMDATE_DEFAULT_LOCALE", "en_US")

# Message id recorded when neither the field nor the converter names one
DEFAULT_PARSE_FAILED_MESSAGE_ID = os.environ.get("FORMDATE_PARSE_FAILED_MESSAGE_ID") or None

# Request parameter carrying a per-field format override: "<field><suffix>"
FORMAT_SPEC_SUFFIX = os.environ.get("FORMDATE_FORMAT_SPEC_SUFFIX", "_formatSpec")

# Separator between pattern and language tag inside an override
FORMAT_SPEC_SEPARATOR = os.environ.get("FORMDATE_FORMAT_SPEC_SEPARATOR", "|")
