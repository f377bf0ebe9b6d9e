"""
Shared, cross-cutting code for the API.

`core/` holds the small building blocks every feature uses (pool wiring,
settings, logging, error rendering). Keep feature-specific SQL and business
logic in the feature package (e.g. `students/`).
"""
