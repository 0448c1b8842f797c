"""Server-rendered About and Todos tabs.

- Jinja2 templates; every tab renders as a full document or, for boosted
  htmx navigation, as a title + body fragment
- mutations answer htmx requests with the changed row plus `hx-swap-oob`
  fragments for the counters and controls they affect
- plain form posts fall back to the full page
"""
