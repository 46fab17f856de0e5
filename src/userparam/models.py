"""Base Pydantic models for userparam.

This module provides the base model class that all userparam Pydantic models
inherit from. It establishes consistent configuration across all models:

- Strict field validation (no extra fields allowed)
- Immutable instances so settings and identities can be shared between calls

Example:
    >>> from userparam.models import UserParamBaseModel
    >>>
    >>> class MyModel(UserParamBaseModel):
    ...     name: str
    >>>
    >>> MyModel(name="test").model_dump()
    {'name': 'test'}
"""

from pydantic import BaseModel, ConfigDict


class UserParamBaseModel(BaseModel):
    """Base model for all userparam Pydantic models.

    - extra="forbid": Rejects any fields not defined in the model
    - frozen=True: Makes instances immutable

    Models that need mutability (e.g. configuration being merged) override
    ``model_config``.
    """

    model_config = ConfigDict(extra="forbid", frozen=True)
