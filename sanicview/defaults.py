"""
Framework Default Values
All hardcoded values should be defined here and accessed via Config.get()
This file contains sensible defaults that can be overridden in config/view.py or .env
"""

# ============================================================================
# TEMPLATE DEFAULTS
# ============================================================================

# Names the compiled template sees for the view data and the helper mapping
DEFAULT_VARNAME = 'it,helpers'

# Memory cache for compiled templates
DEFAULT_CACHE_ENABLED = True

DEFAULT_TEMPLATE_ENCODING = 'utf-8'
DEFAULT_AUTOESCAPE = False
DEFAULT_STRICT_UNDEFINED = False

# ============================================================================
# LAYOUT & DEFINE DEFAULTS
# ============================================================================

# {{## _layout: ../layouts/main.html #}} or {{## _layout = main.html #}}
DEFAULT_LAYOUT_PATTERN = r'\{\{##\s*_layout\s*[:=]\s*(\S+?)\s*#\}\}'

# Define key the child html is handed to its layout under (fixed contract)
DEFAULT_CONTENT_KEY = '_content'

# Define installed by render when the view does not supply its own
DEFAULT_INCLUDE_DEFINE = 'include'

# Max nesting of define expansion (define bodies using other defines)
DEFAULT_DEFINE_DEPTH = 10

# ============================================================================
# HELPER DEFAULTS
# ============================================================================

DEFAULT_TRUNCATE_LENGTH = 50
DEFAULT_TRUNCATE_REPLACE = '...'

DEFAULT_MONEY_DECIMALS = 2
DEFAULT_DECIMAL_POINT = '.'
DEFAULT_THOUSANDS_SEPARATOR = ','

# ============================================================================
# HTTP DEFAULTS
# ============================================================================

DEFAULT_STATUS = 200

# ============================================================================
# LOGGING DEFAULTS
# ============================================================================

DEFAULT_LOG_MAX_BYTES = 10 * 1024 * 1024  # 10MB
DEFAULT_LOG_BACKUP_COUNT = 5
