"""Base Pydantic models for Tokenflow.

All value objects inherit from :class:`SdkBaseModel` so they share one configuration:

- Strict field validation (no extra fields allowed)
- Immutable instances, so a result can be handed around without copies

Example:
    >>> from tokenflow.models import SdkBaseModel
    >>>
    >>> class Grant(SdkBaseModel):
    ...     scope: str
    >>>
    >>> Grant(scope="api.read").model_dump()
    {'scope': 'api.read'}
"""

from pydantic import BaseModel, ConfigDict


class SdkBaseModel(BaseModel):
    """Base model for all Tokenflow Pydantic models.

    - extra="forbid": Rejects any fields not defined in the model
    - frozen=True: Makes instances immutable

    Configuration models that need mutability override ``model_config``.
    """

    model_config = ConfigDict(extra="forbid", frozen=True)
