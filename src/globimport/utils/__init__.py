from .config import GlobImportOptions, ConfigurationError, DEFAULT_TRIM_FILE_EXTENSIONS, GLOB_PREFIX
