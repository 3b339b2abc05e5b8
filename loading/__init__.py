"""
loading — koordynacja gotowości zasobów strony.

Publiczne API:
  LoadingTracker               rejestr zasobów w trakcie ładowania
  new_resource_id(kind, src)   → "{kind}-{src}-{sufiks}"
"""

from .tracker import LoadingListener, LoadingTracker, new_resource_id

__all__ = [
    "LoadingListener",
    "LoadingTracker",
    "new_resource_id",
]
