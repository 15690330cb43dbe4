# ============================================================
# ==================== CUSTOM SORTER LOADER ==================
# ============================================================
#
# A custom sorter is a plain .py file that defines
#
#     NAME = "My Algorithm"                 (optional display name)
#     def sort(arr, stack, i_min, i_max):   (continuation-style entry)
#
# See example_custom_sorter.py in the repository root.

import importlib.util
import logging
import os

from sortrace import algorithms

log = logging.getLogger(__name__)


def load_custom_sorter(filepath: str):
    """
    Load a .py file as a custom sorter.
    Must define: NAME (str, optional) and sort(arr, stack, i_min, i_max).
    Returns ((display_name, key), None) on success, (None, error_str) on failure.
    """
    try:
        filepath = os.path.abspath(filepath)
        for key, info in algorithms.custom_sorters().items():
            if info["path"] == filepath:
                return (info["name"], key), None
        mod_name = f"_sortrace_custom_{len(algorithms.custom_sorters())}"
        spec   = importlib.util.spec_from_file_location(mod_name, filepath)
        if spec is None:
            return None, f"Not a python module: {filepath}"
        module = importlib.util.module_from_spec(spec)
        spec.loader.exec_module(module)
        if not callable(getattr(module, "sort", None)):
            return None, "No sort(arr, stack, i_min, i_max) function found"
        name = getattr(module, "NAME", os.path.splitext(os.path.basename(filepath))[0])
        key  = f"custom_{len(algorithms.custom_sorters())}"
        algorithms.register_custom(key, module.sort, name, filepath)
        log.info("Loaded custom sorter %r from %s", name, filepath)
        return (name, key), None
    except Exception as e:
        return None, str(e)


def autoload_custom_sorters(paths):
    """Load every listed path, silently skipping missing/broken ones."""
    loaded = []
    for path in paths:
        if not os.path.exists(path):
            log.debug("Custom sorter %s no longer exists, skipped", path)
            continue
        result, err = load_custom_sorter(path)
        if result:
            loaded.append(result)
        else:
            log.warning("Could not load custom sorter %s: %s", path, err)
    return loaded


def custom_paths():
    return [info["path"] for info in algorithms.custom_sorters().values() if info.get("path")]
