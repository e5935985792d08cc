from __future__ import annotations
import re

# extension lists
DEFAULT_KEY = "default"
REMOVE_VALUE_PREFIX = "-"
COMMA_SPLIT_PATTERN = re.compile(r"\s*[,]+\s*")

# properties file lookup
PROPERTIES_KEY = "plugconf.properties.file"
PROPERTIES_ENV_KEY = "PLUGCONF_PROPERTIES_FILE"
DEFAULT_PROPERTIES = "plugconf.properties"
SEARCH_PATH_ENV_KEY = "PLUGCONF_SEARCH_PATH"

# properties files are latin-1 unless told otherwise
DEFAULT_ENCODING = "iso-8859-1"
