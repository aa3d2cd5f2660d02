"""
Endpoint subpackage for API v1.

Each module in this package defines an APIRouter for one domain
(translations, dictionary, history, learning, community, translate,
users).  The routers are aggregated in ``router.py``.
"""
