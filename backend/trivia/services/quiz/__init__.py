"""Quiz domain services: session store, protocol handler and eviction.

HTTP routes import from here, keeping transport concerns separated from
session bookkeeping.
"""
