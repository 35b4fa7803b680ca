"""
Core app - Shared plumbing for the resource apps.

This app provides:
- The storage handle (Store) and its schema bootstrap
- Request logging middleware
- Path/body validation decorators
- Error rendering for the NinjaAPI
- The `serve` management command
"""
