"""
Pydantic schema describing a single service instance.

A service is identified by a short ``key`` (used on the command line
and for configuration lookups), carries a human readable ``name`` used
in the startup line, the TCP ``port`` it binds and the static
``message`` returned from its root route.
"""

from pydantic import BaseModel, ConfigDict, Field, field_validator


class ServiceDefinition(BaseModel):
    """Immutable description of one placeholder service."""

    model_config = ConfigDict(frozen=True)

    key: str = Field(..., min_length=1, description="Short identifier, e.g. ``auth``")
    name: str = Field(..., min_length=1, description="Display name, e.g. ``Auth Service``")
    port: int = Field(..., ge=0, le=65535, description="TCP port; 0 lets the OS choose")
    message: str = Field(..., description="Body returned by ``GET /``")
    startup_template: str = Field(
        "{name} running on port {port}",
        description="Line printed once listening; ``{name}`` and ``{port}`` are substituted",
    )

    @field_validator("message")
    @classmethod
    def validate_message(cls, v: str) -> str:
        if not v.strip():
            raise ValueError("Response message must not be empty")
        return v

    def with_port(self, port: int) -> "ServiceDefinition":
        """Return a copy of this definition bound to another port."""
        return ServiceDefinition(**{**self.model_dump(), "port": port})

    def startup_line(self, port: int) -> str:
        return self.startup_template.format(name=self.name, port=port)
