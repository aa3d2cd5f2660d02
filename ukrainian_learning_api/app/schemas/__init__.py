"""
Pydantic schema definitions for API payloads and stored records.

Each domain (users, translations, dictionary, history, learning,
community) defines its own models.  Python attributes are snake_case;
the JSON representation uses camelCase aliases so existing web clients
keep working.
"""
