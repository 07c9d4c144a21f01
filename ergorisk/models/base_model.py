from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel


class EngineModel(BaseModel):
    """
    Immutable value object shared by every engine entity.

    Python code uses snake_case; payloads may use camelCase keys
    (workHoursPerDay, actionSteps, ...) and validate the same way.
    """

    model_config = ConfigDict(
        frozen=True,
        alias_generator=to_camel,
        populate_by_name=True,
    )
