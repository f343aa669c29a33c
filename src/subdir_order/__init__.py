# src/subdir_order/__init__.py
# ----------------------------
# Top-level package initializer for subdir-order.
# Controls which submodules are exported when doing:
#   from subdir_order import *

__all__ = [
    "cli",
    "config_loader",
    "core",
    "errors",
    "model",
    "subdirs",
]
