"""
Utility Subpackage.

Modules:
    - ``console``: Rich console proxy and logging helpers.
"""
