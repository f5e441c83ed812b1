"""
Core Subpackage.

Modules:
    - ``naming``: Visibility check and exported -> unexported transform.
    - ``classifier``: Renamer failure text -> `ErrorCategory`.
    - ``renamer``: Renamer interface and the gorename adapter.
    - ``invoker``: Sequential rename attempts and success recording.
    - ``report``: Verbose result printing.
    - ``session``: The pipeline orchestration context.
"""
