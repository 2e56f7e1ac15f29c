"""Diagnostics package.

Optional plotting tools; require the diagnostics extra (numpy, matplotlib):
  pip install "solarcal[diagnostics]"
"""

__all__ = ["daylight_curve"]
