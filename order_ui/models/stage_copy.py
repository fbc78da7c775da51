from pydantic import BaseModel, ConfigDict


class StageCopyDTO(BaseModel):
    """Title/subtitle pair rendered for a UiStage."""
    model_config = ConfigDict(frozen=True)

    title: str
    subtitle: str
