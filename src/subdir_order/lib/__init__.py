from .paths import normalize_dir, is_colocated, relative_subdir, format_path
from .logging import setup_logging
