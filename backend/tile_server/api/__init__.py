"""API router subpackage for the tile server.

Each module exposes its own APIRouter for composition in the application's
main FastAPI instance.

Submodules:
    - tiles: The ``/{z}/{x}/{y}.{format}`` endpoint serving tile files.
    - info: Service descriptor, health check and tiles directory summary.
"""
