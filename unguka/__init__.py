"""Unguka.

Backend for agricultural cooperatives. Each cooperative is a tenant that
keeps its own members, seasons, products, stock, cash balance and ledgers.

Core subpackages
----------------

- ``unguka.core``: logging, monitoring, domain errors, the SQLModel entities
  and their repositories, plus the I/O schemas of the API.
- ``unguka.server.services``: business operations. They move stock and cash,
  settle fees and loans when members are paid, cascade deletes and build
  the JSON reports.
- ``unguka.server``: the FastAPI application and its routers.
"""

__version__ = "0.1.0"
