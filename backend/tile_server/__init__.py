"""Local tile server package.

Serves a directory tree of pre-rendered map tiles laid out as
``tiles/<zoom>/<x>/<y>.<format>`` over the standard XYZ URL convention,
alongside a static ``public`` directory and a few introspection endpoints.

- Tiles are read straight from disk with format-based Content-Type and a
  public Cache-Control header
- Missing tiles answer a JSON 404 naming the requested tile
- ``/``, ``/health`` and ``/tiles-info`` describe the service and the
  zoom levels currently on disk
- Configuration comes from environment variables (``PORT`` and friends)

See README and module sub-docstrings for details on architecture and usage.
"""
