"""
Package Default Values
All hardcoded values should be defined here and read through the config Repository
"""

# ============================================================================
# VIEW DEFAULTS
# ============================================================================

# Extensions searched by the view finder, in priority order
DEFAULT_VIEW_EXTENSIONS = ['blade.html', 'tpl']

# Engine used for each default extension
DEFAULT_EXTENSION_ENGINES = {
    'blade.html': 'template',
    'tpl': 'template',
}

DEFAULT_ENGINE = 'template'

# Separator between a namespace and a view name (e.g. 'mail::welcome')
HINT_PATH_DELIMITER = '::'

# ============================================================================
# COMPILER DEFAULTS
# ============================================================================

DEFAULT_COMPILED_EXTENSION = 'py'
DEFAULT_SOURCE_ENCODING = 'utf-8'

# ============================================================================
# ENVIRONMENT DEFAULTS
# ============================================================================

ENV_VIEW_PATHS = 'BLADE_VIEW_PATHS'
ENV_CACHE_PATH = 'BLADE_CACHE_PATH'
DEFAULT_VIEW_PATH = 'resources/views'
DEFAULT_CACHE_PATH = 'storage/framework/views'

# ============================================================================
# LOGGING DEFAULTS
# ============================================================================

DEFAULT_LOG_MAX_BYTES = 10 * 1024 * 1024  # 10MB
DEFAULT_LOG_BACKUP_COUNT = 5
