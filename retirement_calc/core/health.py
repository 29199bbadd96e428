from retirement_calc import __version__
from retirement_calc.schemas.health import HealthResponse


def health_status(environment: str) -> HealthResponse:
    """Liveness answer for load balancers and the frontend's connectivity check."""
    return HealthResponse(message="pong", version=__version__, environment=environment)
