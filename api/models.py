from pydantic import BaseModel, ConfigDict


class UiConfig(BaseModel):
    """Settings the custom Swagger UI page reads before loading the API document."""

    model_config = ConfigDict(frozen=True)

    url: str
    title: str
    description: str
