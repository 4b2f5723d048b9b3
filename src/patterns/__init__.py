"""Design-pattern examples.

One package per pattern, one module per variant (`conceptual`, `real_world`).
Every module defines `main()` and runs standalone with
`python -m patterns.<pattern>.<variant>`.
"""
