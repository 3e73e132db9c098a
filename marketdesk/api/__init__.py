"""
REST API for marketdesk.

FastAPI application exposing quotes, news, the economic calendar,
settings and sentiment scoring, plus the server bootstrap.
"""
