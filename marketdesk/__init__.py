"""
marketdesk: quote, news, economic-calendar and sentiment aggregator.

Serves a small REST API for a browser dashboard, backed by optional
third-party providers with static mock data as the last resort.
"""

__version__ = "1.0.0"
