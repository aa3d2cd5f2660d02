"""
Service layer.

Holds logic that does more than read or write the store.  Currently
that is the translation gateway, which decides between the external
provider and the built-in phrase table.
"""
