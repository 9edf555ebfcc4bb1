"""
Root endpoint.

``GET /`` is the only route a service answers.  The response body is
the static message of the service the application was created for;
the definition is stored on ``app.state.service`` by ``create_app``.
"""

from fastapi import APIRouter, Depends, Request
from fastapi.responses import PlainTextResponse

from storefront_services.app.schemas.service import ServiceDefinition

router = APIRouter()


def get_service(request: Request) -> ServiceDefinition:
    """Return the service definition bound to the current application."""
    return request.app.state.service


@router.get("/", response_class=PlainTextResponse)
async def read_root(service: ServiceDefinition = Depends(get_service)) -> str:
    """Return the confirmation string identifying this service."""
    return service.message
