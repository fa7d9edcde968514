"""Top-level package for the ride-sharing search core.

This package turns a free-text search query into structured filters
(origin, destination, vehicle type) and applies them to a listing of
ride offers. The parsing tiers, the fallback policy and the filtering
semantics live here; storage and presentation are left to adapters.
"""
